"""Matrix generation - fill a matrix from an initialization config."""
import math
from typing import Optional

from normviz.domain.entities.init_config import FanInfo, InitConfig, InitType
from normviz.domain.entities.matrix import Matrix
from normviz.domain.sources.uniform_source import UniformSource

# Substituted for a zero first draw so log() stays finite
LOG_EPSILON = 1e-12


def standard_normal(source: UniformSource) -> float:
    """Draw one N(0, 1) sample with the Box-Muller transform.

    Consumes exactly two uniform draws, u1 first.
    """
    u1 = source.uniform()
    u2 = source.uniform()
    if u1 == 0:
        u1 = LOG_EPSILON
    return math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)


def xavier_std(fan_info: FanInfo) -> float:
    """Glorot heuristic sqrt(2 / (fan_in + fan_out))."""
    return fan_info.xavier_std


def effective_std(config: InitConfig, fan_info: Optional[FanInfo] = None) -> float:
    """Standard deviation actually used when sampling for `config`.

    Xavier falls back to the Glorot heuristic when std is exactly 0 and fan
    context is available; every other case uses config.std unchanged.
    """
    if config.init_type == InitType.XAVIER.value and fan_info is not None and config.std == 0:
        return xavier_std(fan_info)
    return config.std


def suggested_xavier_std(config: InitConfig, fan_info: Optional[FanInfo]) -> Optional[float]:
    """Xavier hint shown next to the std field, or None when not applicable."""
    if config.init_type != InitType.XAVIER.value or fan_info is None:
        return None
    return xavier_std(fan_info)


def generate_matrix(rows: int, cols: int, config: InitConfig, source: UniformSource,
                    fan_info: Optional[FanInfo] = None) -> Matrix:
    """Generate a rows×cols matrix.

    Args:
        rows: Number of rows
        cols: Number of columns
        config: Initialization parameters
        source: Uniform randomness consumed by normal and Xavier sampling
        fan_info: Fan context used by the Xavier fallback

    Returns:
        A new matrix, every element multiplied by config.scale. Constant and
        unrecognized init types draw nothing from the source.
    """
    std = effective_std(config, fan_info)
    matrix = []
    for _ in range(rows):
        row = []
        for _ in range(cols):
            if config.init_type == InitType.CONSTANT.value:
                value = config.constant
            elif config.is_random:
                value = config.mean + std * standard_normal(source)
            else:
                value = 0.0
            row.append(value * config.scale)
        matrix.append(row)
    return matrix
