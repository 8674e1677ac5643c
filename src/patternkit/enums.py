# src/patternkit/enums.py
"""
Enumeration types for the patternkit examples.
"""

from enum import Enum


class PatternCategory(Enum):
    """Families of design patterns covered by the examples."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class SupportTopic(Enum):
    """Issue tags understood by the specialised support handlers."""
    TECHNICAL = "technical"
    BILLING = "billing"
