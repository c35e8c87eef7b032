"""Initialization configuration entity - how one matrix is filled."""
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict


class InitType(str, Enum):
    """Recognized initialization strategies."""
    XAVIER = "xavier"
    NORMAL = "normal"
    CONSTANT = "constant"


@dataclass(frozen=True)
class FanInfo:
    """Input/output dimensionality of a weight matrix.

    Derived from the current dimensions on every generation call.
    """
    fan_in: int
    fan_out: int

    @property
    def xavier_std(self) -> float:
        """Glorot standard deviation sqrt(2 / (fan_in + fan_out))."""
        return math.sqrt(2 / (self.fan_in + self.fan_out))


@dataclass(frozen=True)
class InitConfig:
    """Distribution parameters for one generated matrix.

    Values are not validated: a negative std or non-finite
    mean/scale flows through the arithmetic unchanged, and an unrecognized
    init_type generates zeros.

    Attributes:
        init_type: One of "xavier", "normal", "constant"
        mean: Mean of the normal and Xavier distributions
        std: Standard deviation (0 selects the Xavier heuristic for "xavier")
        constant: Fill value for "constant"
        scale: Multiplier applied to every element (UI range 0 to 5)
    """
    init_type: str = InitType.XAVIER.value
    mean: float = 0.0
    std: float = 0.0
    constant: float = 0.0
    scale: float = 1.0

    def __post_init__(self):
        """Store enum members as their plain string value."""
        if isinstance(self.init_type, InitType):
            object.__setattr__(self, 'init_type', self.init_type.value)

    @property
    def is_random(self) -> bool:
        """Check if generation draws from the random source."""
        return self.init_type in (InitType.XAVIER.value, InitType.NORMAL.value)

    @property
    def is_recognized(self) -> bool:
        return self.init_type in tuple(t.value for t in InitType)

    def with_changes(self, **fields: Any) -> "InitConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **fields)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'init_type': self.init_type,
            'mean': self.mean,
            'std': self.std,
            'constant': self.constant,
            'scale': self.scale
        }
