"""Torch-backed uniform source - Infrastructure layer randomness."""
from typing import Optional

import torch

from normviz.domain.sources.uniform_source import UniformSource


class TorchUniformSource(UniformSource):
    """Uniform [0, 1) draws from a dedicated torch.Generator.

    The stream is independent of torch's global RNG.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize the source.

        Args:
            seed: Seed for the generator (None draws a non-deterministic seed)
        """
        self.generator = torch.Generator(device='cpu')
        self.draw_count = 0
        self.seed = seed
        self.reseed(seed)

    def reseed(self, seed: Optional[int] = None) -> None:
        """Restart the stream from `seed` and reset the draw counter."""
        if seed is None:
            self.seed = self.generator.seed()
        else:
            self.seed = seed
            self.generator.manual_seed(seed)
        self.draw_count = 0

    def uniform(self) -> float:
        """Draw one float64 sample from U[0, 1)."""
        self.draw_count += 1
        return torch.rand(1, generator=self.generator, dtype=torch.float64).item()

    def __repr__(self) -> str:
        """String representation for debugging."""
        return f"TorchUniformSource(seed={self.seed}, draws={self.draw_count})"
