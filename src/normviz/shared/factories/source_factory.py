"""Shared uniform source factory - one place decides the default RNG backend."""
from typing import Optional

from normviz.domain.sources.uniform_source import UniformSource
from normviz.infrastructure.sampling.torch_uniform_source import TorchUniformSource


def create_uniform_source(seed: Optional[int] = None) -> UniformSource:
    """Create the uniform source used for matrix generation.

    Args:
        seed: Seed for reproducible draws (None for a non-deterministic stream)

    Returns:
        Configured uniform source
    """
    return TorchUniformSource(seed=seed)
