"""Randomness source interfaces.

This package defines the abstract uniform source the matrix generator draws
from, decoupling generation from any concrete random number generator.
"""

from .uniform_source import UniformSource

__all__ = [
    'UniformSource'
]
