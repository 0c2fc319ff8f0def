"""
arrays/
-------
Input-array layer.

    from arrays import generate, Distribution
"""

from arrays.generator import Distribution, generate, shuffle

__all__ = [
    "Distribution",
    "generate",
    "shuffle",
]
