"""Domain services - Pure numeric operations.

This package holds the computational components of the pipeline. None of
them raise for inputs within the documented domain; degenerate shapes produce
zero-filled results and empty matrices have zero norm.
"""

from .matrix_generator import (
    generate_matrix,
    standard_normal,
    xavier_std,
    effective_std,
    suggested_xavier_std,
)
from .matrix_multiplier import multiply
from .norm_engine import compute_norm, compute_norms

__all__ = [
    'generate_matrix',
    'standard_normal',
    'xavier_std',
    'effective_std',
    'suggested_xavier_std',
    'multiply',
    'compute_norm',
    'compute_norms'
]
