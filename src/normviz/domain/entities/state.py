"""Explorer state entities - immutable per-step snapshots."""
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Tuple

from normviz.domain.entities.dimensions import Dimensions
from normviz.domain.entities.init_config import InitConfig
from normviz.domain.entities.matrix import Matrix, shape
from normviz.domain.entities.norm_type import NormType


_NAN = object()


def _config_key(config: InitConfig) -> Tuple[Any, ...]:
    return tuple(
        _NAN if isinstance(value, float) and math.isnan(value) else value
        for value in (config.init_type, config.mean, config.std, config.constant, config.scale)
    )


@dataclass(frozen=True)
class ExplorerState:
    """Every user-facing input of the explorer at one point in time.

    Transitions build a new state instead of mutating this one, so the
    generation-relevant part can be compared by value between steps.

    Attributes:
        dims: Shared matrix dimensions
        config_a: Initialization of A
        config_b: Initialization of B
        norm_type: Metric shown for all three matrices
    """
    dims: Dimensions = field(default_factory=Dimensions)
    config_a: InitConfig = field(default_factory=InitConfig)
    config_b: InitConfig = field(default_factory=InitConfig)
    norm_type: NormType = NormType.RMS

    @property
    def generation_key(self) -> Tuple[Any, ...]:
        """Inputs whose change requires regenerating A and B.

        NaN config fields compare equal to each other here, so re-entering
        NaN is not a change.
        """
        return (self.dims, _config_key(self.config_a), _config_key(self.config_b))

    def evolve(self, **changes: Any) -> "ExplorerState":
        """Return the next state with the given fields replaced."""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'dims': self.dims.to_dict(),
            'config_a': self.config_a.to_dict(),
            'config_b': self.config_b.to_dict(),
            'norm_type': self.norm_type.value
        }


@dataclass(frozen=True)
class MatrixSnapshot:
    """The current (A, B, C) triple, replaced as a whole on every recompute."""
    a: Matrix
    b: Matrix
    c: Matrix

    @property
    def shapes(self) -> Dict[str, Tuple[int, int]]:
        return {'A': shape(self.a), 'B': shape(self.b), 'C': shape(self.c)}

    def as_dict(self) -> Dict[str, Matrix]:
        return {'A': self.a, 'B': self.b, 'C': self.c}


@dataclass(frozen=True)
class NormReport:
    """Norms of A, B and C under a single metric."""
    norm_type: NormType
    norm_a: float
    norm_b: float
    norm_c: float

    def formatted(self, precision: int = 4) -> Dict[str, str]:
        """Display strings with fixed decimal precision."""
        return {
            'A': format_norm(self.norm_a, precision),
            'B': format_norm(self.norm_b, precision),
            'C': format_norm(self.norm_c, precision),
        }

    def __repr__(self) -> str:
        """String representation for debugging."""
        return (f"NormReport({self.norm_type.value}, A={self.norm_a:.4f}, "
                f"B={self.norm_b:.4f}, C={self.norm_c:.4f})")


def format_norm(value: float, precision: int = 4) -> str:
    """Render a norm with fixed decimals, as shown next to each matrix."""
    return f"{value:.{precision}f}"
