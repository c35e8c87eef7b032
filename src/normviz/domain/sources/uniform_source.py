"""Abstract uniform randomness - injectable source for the generator."""
from abc import ABC, abstractmethod


class UniformSource(ABC):
    """Abstract interface for uniform random draws.

    The generator never touches a global random generator; it consumes
    draws from an injected source, so seeded implementations make matrix
    generation reproducible.
    """

    @abstractmethod
    def uniform(self) -> float:
        """Draw one sample from the uniform distribution on [0, 1).

        Returns:
            A float in [0, 1)
        """
        pass
