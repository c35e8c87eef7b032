"""Infrastructure randomness sources."""
from .torch_uniform_source import TorchUniformSource

__all__ = [
    'TorchUniformSource'
]
