# src/patternkit/config.py
"""
Configuration for the patternkit demonstrations.
"""

from dataclasses import dataclass, field
from typing import List


def _default_blocked_sites() -> List[str]:
    return ["facebook.com", "youtube.com"]


@dataclass
class DemoConfig:
    """Values fed into the demonstrations."""
    school_name: str = "University of Bucharest"
    theater_volume: int = 5  # Level the facade sets on the sound system
    blocked_sites: List[str] = field(default_factory=_default_blocked_sites)
    base_pizza_price: float = 10.0

    # Debug/Verbose mode
    verbose: bool = False  # Enable detailed logging for debugging
