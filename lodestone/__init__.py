"""
Lodestone.

Seedable random number generation and dice calculus for procedural
game outcomes.
"""

__version__ = "0.1.0"
