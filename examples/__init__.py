"""
patternkit examples package.

This package contains demonstration scripts showing how to use the patternkit examples.
These are examples for learning, not tests for verification.

Available examples:
- basic_example.py: Running the demonstrations and the pattern classes directly
- custom_patterns.py: Extending the examples with your own toppings, handlers and routines
"""
