"""Test fixtures for unit testing."""
import random
from typing import Iterable

import pytest

from normviz.domain.entities.dimensions import Dimensions
from normviz.domain.entities.init_config import InitConfig
from normviz.domain.entities.norm_type import NormType
from normviz.domain.entities.state import ExplorerState
from normviz.domain.sources.uniform_source import UniformSource


class CountingUniformSource(UniformSource):
    """Seeded uniform source that records how many draws were consumed."""

    def __init__(self, seed: int = 1234):
        self._rng = random.Random(seed)
        self.draw_count = 0

    def uniform(self) -> float:
        self.draw_count += 1
        return self._rng.random()


class FixedUniformSource(UniformSource):
    """Replays a fixed sequence of draws, cycling when exhausted."""

    def __init__(self, values: Iterable[float]):
        self.values = list(values)
        self.draw_count = 0

    def uniform(self) -> float:
        value = self.values[self.draw_count % len(self.values)]
        self.draw_count += 1
        return value


@pytest.fixture
def counting_source():
    """Deterministic, draw-counting uniform source."""
    return CountingUniformSource(seed=1234)


@pytest.fixture
def fixed_source():
    """Factory for sources replaying a fixed sequence."""
    def _make(*values: float) -> FixedUniformSource:
        return FixedUniformSource(values)
    return _make


@pytest.fixture
def sample_state():
    """Small non-square explorer state for testing."""
    return ExplorerState(
        dims=Dimensions(m=3, k=4, n=5),
        config_a=InitConfig(init_type="xavier", mean=0.0, std=0.0, constant=0.0, scale=1.0),
        config_b=InitConfig(init_type="normal", mean=0.5, std=2.0, constant=0.0, scale=0.5),
        norm_type=NormType.RMS
    )


@pytest.fixture
def sample_config_yaml():
    """Sample YAML configuration content."""
    return """
dimensions:
  m: 4
  k: 6
  n: 2

matrix_a:
  init_type: normal
  mean: 0.1
  std: 1.5
  constant: 0.0
  scale: 2.0

matrix_b:
  init_type: constant
  constant: 0.25
  scale: 4.0

norm_type: L2

random:
  seed: 7

logging:
  level: DEBUG
"""
