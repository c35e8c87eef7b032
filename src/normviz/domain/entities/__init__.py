"""Domain entities - Core value objects.

This package contains the value objects that describe one exploration step:

- Dimensions: Shared (m, k, n) shape, with the clamp applied to raw input
- InitConfig / FanInfo: Per-matrix initialization parameters and fan context
- NormType: Selected magnitude metric
- ExplorerState / MatrixSnapshot / NormReport: Immutable inputs and outputs
"""

from .dimensions import Dimensions, clamp_dim, MIN_DIM, MAX_DIM
from .init_config import InitConfig, InitType, FanInfo
from .matrix import Matrix
from .norm_type import NormType
from .state import ExplorerState, MatrixSnapshot, NormReport, format_norm

__all__ = [
    'Dimensions',
    'clamp_dim',
    'MIN_DIM',
    'MAX_DIM',
    'InitConfig',
    'InitType',
    'FanInfo',
    'Matrix',
    'NormType',
    'ExplorerState',
    'MatrixSnapshot',
    'NormReport',
    'format_norm'
]
