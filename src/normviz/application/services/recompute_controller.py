"""Recompute controller - keeps A, B, C in sync with the explorer inputs."""
import logging
from typing import Any, Dict, Optional, Union

from normviz.domain.entities.dimensions import Dimensions
from normviz.domain.entities.init_config import FanInfo, InitConfig
from normviz.domain.entities.matrix import Matrix
from normviz.domain.entities.norm_type import NormType
from normviz.domain.entities.state import ExplorerState, MatrixSnapshot, NormReport
from normviz.domain.services.matrix_generator import generate_matrix, suggested_xavier_std
from normviz.domain.services.matrix_multiplier import multiply
from normviz.domain.services.norm_engine import compute_norms
from normviz.domain.sources.uniform_source import UniformSource

logger = logging.getLogger(__name__)


class RecomputeController:
    """Single writer of the (A, B, C) snapshot.

    Every transition builds a new ExplorerState. When the generation key
    (dims, config_a, config_b) differs by value from the current one, A and B
    are regenerated from the uniform source, C is recomputed, and the whole
    snapshot is swapped in one assignment. A norm type change only affects
    which formula `norms()` applies to the existing snapshot.
    """

    def __init__(self, source: UniformSource, state: Optional[ExplorerState] = None):
        """Initialize the controller and compute the first snapshot.

        Args:
            source: Uniform randomness consumed by matrix generation
            state: Initial inputs (defaults to 8×8×8 Xavier matrices, RMS)
        """
        self.source = source
        self._state = state if state is not None else ExplorerState()
        self._state = self._state.evolve(norm_type=NormType.parse(self._state.norm_type))
        self._generation_count = 0
        self._snapshot = self._regenerate(self._state)

    @property
    def state(self) -> ExplorerState:
        return self._state

    @property
    def snapshot(self) -> MatrixSnapshot:
        return self._snapshot

    @property
    def matrices(self) -> Dict[str, Matrix]:
        """Current matrices keyed 'A', 'B', 'C'."""
        return self._snapshot.as_dict()

    @property
    def generation_count(self) -> int:
        """Number of snapshots generated so far, the initial one included."""
        return self._generation_count

    @property
    def fan_info_a(self) -> FanInfo:
        return self._state.dims.fan_info_a

    @property
    def fan_info_b(self) -> FanInfo:
        return self._state.dims.fan_info_b

    def apply(self, new_state: ExplorerState) -> bool:
        """Make `new_state` current, regenerating matrices only when needed.

        Returns:
            True if A, B and C were regenerated
        """
        new_state = new_state.evolve(norm_type=NormType.parse(new_state.norm_type))
        regenerate = new_state.generation_key != self._state.generation_key
        if regenerate:
            self._snapshot = self._regenerate(new_state)
        self._state = new_state
        return regenerate

    def set_dims(self, m: Optional[Any] = None, k: Optional[Any] = None,
                 n: Optional[Any] = None) -> bool:
        """Partially update dimensions; every field is clamped."""
        return self.apply(self._state.evolve(dims=self._state.dims.with_changes(m=m, k=k, n=n)))

    def resize_a(self, rows: Any, cols: Any) -> bool:
        """Resize A, which drives m and the shared k."""
        return self.set_dims(m=rows, k=cols)

    def resize_b(self, rows: Any, cols: Any) -> bool:
        """Resize B, which drives the shared k and n."""
        return self.set_dims(k=rows, n=cols)

    def resize_c(self, rows: Any, cols: Any) -> bool:
        """Resize C, which drives m and n."""
        return self.set_dims(m=rows, n=cols)

    def set_config_a(self, config: InitConfig) -> bool:
        return self.apply(self._state.evolve(config_a=config))

    def set_config_b(self, config: InitConfig) -> bool:
        return self.apply(self._state.evolve(config_b=config))

    def update_config_a(self, **fields: Any) -> bool:
        """Replace individual fields of A's config."""
        return self.set_config_a(self._state.config_a.with_changes(**fields))

    def update_config_b(self, **fields: Any) -> bool:
        """Replace individual fields of B's config."""
        return self.set_config_b(self._state.config_b.with_changes(**fields))

    def set_norm_type(self, norm_type: Union[NormType, str]) -> bool:
        """Select the displayed metric. Never regenerates matrices."""
        return self.apply(self._state.evolve(norm_type=NormType.parse(norm_type)))

    def norms(self) -> NormReport:
        """Norms of the current snapshot under the selected metric."""
        return compute_norms(self._snapshot, self._state.norm_type)

    def norms_for(self, norm_type: Union[NormType, str]) -> NormReport:
        """Norms of the current snapshot under any metric."""
        return compute_norms(self._snapshot, NormType.parse(norm_type))

    def xavier_hints(self) -> Dict[str, Optional[float]]:
        """Suggested Xavier std for A and B, None where not using Xavier."""
        return {
            'A': suggested_xavier_std(self._state.config_a, self.fan_info_a),
            'B': suggested_xavier_std(self._state.config_b, self.fan_info_b),
        }

    def _regenerate(self, state: ExplorerState) -> MatrixSnapshot:
        dims: Dimensions = state.dims
        a = generate_matrix(dims.m, dims.k, state.config_a, self.source, dims.fan_info_a)
        b = generate_matrix(dims.k, dims.n, state.config_b, self.source, dims.fan_info_b)
        c = multiply(a, b)
        self._generation_count += 1
        logger.debug("Regenerated snapshot #%d for dims=%s (%d multiply-accumulates)",
                     self._generation_count, dims.to_dict(), dims.multiply_accumulate_count)
        return MatrixSnapshot(a=a, b=b, c=c)
