"""
Strategies Package - Concrete strategy implementations.

Import this module to register all built-in strategies.
"""

from .best import BestStrategy
from .fast import FastStrategy

__all__ = [
    "BestStrategy",
    "FastStrategy",
]
