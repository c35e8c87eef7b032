"""Coercion of raw text-field input before it reaches the core.

Editing a field must never crash the explorer, so unparsable input maps to a
neutral value instead of raising.
"""
import math
from typing import Any

from normviz.domain.entities.dimensions import clamp_dim


def coerce_float(value: Any) -> float:
    """Parse a numeric field; unparsable input and NaN become 0.0."""
    try:
        number = float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(number) else number


def coerce_dim(value: Any) -> int:
    """Parse a dimension field; empty input means 1, anything else is clamped."""
    if value is None or (isinstance(value, str) and not value.strip()):
        return clamp_dim(1)
    return clamp_dim(value)
