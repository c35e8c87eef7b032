"""Application services - Orchestration of the numeric pipeline."""
from .recompute_controller import RecomputeController
from .input_coercion import coerce_float, coerce_dim

__all__ = [
    'RecomputeController',
    'coerce_float',
    'coerce_dim'
]
