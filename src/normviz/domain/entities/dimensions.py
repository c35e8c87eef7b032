"""Matrix dimensions entity - shared (m, k, n) shape of A, B and C."""
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

from normviz.domain.entities.init_config import FanInfo

MIN_DIM = 1
MAX_DIM = 32


def clamp_dim(value: Any) -> int:
    """Round to the nearest integer and clamp into [MIN_DIM, MAX_DIM].

    Halves round up (2.5 -> 3, -2.5 -> -2). Never raises: non-numeric input
    and NaN coerce to MIN_DIM, infinities and integers too large for a float
    to the matching bound.
    """
    try:
        number = float(value)
    except OverflowError:
        return MAX_DIM if value > 0 else MIN_DIM
    except (TypeError, ValueError):
        return MIN_DIM
    if math.isnan(number):
        return MIN_DIM
    if math.isinf(number):
        return MAX_DIM if number > 0 else MIN_DIM
    return max(MIN_DIM, min(MAX_DIM, int(math.floor(number + 0.5))))


@dataclass(frozen=True)
class Dimensions:
    """Shape triple for A (m×k), B (k×n) and C (m×n).

    The shared dimension k exists once, so A and B are always compatible.

    Attributes:
        m: Rows of A and C
        k: Columns of A, rows of B
        n: Columns of B and C
    """
    m: int = 8
    k: int = 8
    n: int = 8

    def __post_init__(self):
        """Validate dimensions after initialization."""
        for name in ("m", "k", "n"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer")
            if not MIN_DIM <= value <= MAX_DIM:
                raise ValueError(f"{name} must be between {MIN_DIM} and {MAX_DIM}")

    @classmethod
    def from_raw(cls, m: Any, k: Any, n: Any) -> "Dimensions":
        """Build dimensions from unchecked input, clamping every field."""
        return cls(m=clamp_dim(m), k=clamp_dim(k), n=clamp_dim(n))

    def with_changes(self, m: Optional[Any] = None, k: Optional[Any] = None,
                     n: Optional[Any] = None) -> "Dimensions":
        """Return new dimensions with the given fields replaced (and clamped)."""
        return Dimensions.from_raw(
            self.m if m is None else m,
            self.k if k is None else k,
            self.n if n is None else n,
        )

    @property
    def shape_a(self) -> Tuple[int, int]:
        return (self.m, self.k)

    @property
    def shape_b(self) -> Tuple[int, int]:
        return (self.k, self.n)

    @property
    def shape_c(self) -> Tuple[int, int]:
        return (self.m, self.n)

    @property
    def fan_info_a(self) -> FanInfo:
        """Fan context for A: k inputs feed m outputs."""
        return FanInfo(fan_in=self.k, fan_out=self.m)

    @property
    def fan_info_b(self) -> FanInfo:
        """Fan context for B: k inputs feed n outputs."""
        return FanInfo(fan_in=self.k, fan_out=self.n)

    @property
    def multiply_accumulate_count(self) -> int:
        """Number of multiply-accumulate steps needed for C."""
        return self.m * self.k * self.n

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {'m': self.m, 'k': self.k, 'n': self.n}
