"""Tests for the torch-backed uniform source."""
import torch

from normviz.domain.entities.init_config import InitConfig
from normviz.domain.services.matrix_generator import generate_matrix
from normviz.domain.sources.uniform_source import UniformSource
from normviz.infrastructure.sampling import TorchUniformSource


class TestTorchUniformSource:
    """Test cases for TorchUniformSource."""

    def test_is_uniform_source(self):
        """Test the source satisfies the domain interface."""
        assert isinstance(TorchUniformSource(seed=0), UniformSource)

    def test_draws_in_unit_interval(self):
        """Test samples lie in [0, 1) and are Python floats."""
        source = TorchUniformSource(seed=123)
        draws = [source.uniform() for _ in range(500)]
        assert all(isinstance(x, float) for x in draws)
        assert all(0.0 <= x < 1.0 for x in draws)
        assert source.draw_count == 500

    def test_seed_reproducible(self):
        """Test equal seeds give equal streams."""
        first = TorchUniformSource(seed=42)
        second = TorchUniformSource(seed=42)
        assert [first.uniform() for _ in range(10)] == [second.uniform() for _ in range(10)]

    def test_different_seeds_differ(self):
        """Test different seeds give different streams."""
        first = TorchUniformSource(seed=1)
        second = TorchUniformSource(seed=2)
        assert [first.uniform() for _ in range(5)] != [second.uniform() for _ in range(5)]

    def test_reseed_restarts_stream(self):
        """Test reseeding replays the stream and resets the counter."""
        source = TorchUniformSource(seed=5)
        expected = [source.uniform() for _ in range(4)]
        source.reseed(5)
        assert source.draw_count == 0
        assert [source.uniform() for _ in range(4)] == expected

    def test_unseeded_records_seed(self):
        """Test an unseeded source still reports the seed it drew."""
        source = TorchUniformSource()
        assert isinstance(source.seed, int)
        assert "TorchUniformSource(seed=" in repr(source)

    def test_independent_of_global_rng(self):
        """Test the global torch RNG does not disturb the stream."""
        first = TorchUniformSource(seed=9)
        expected = [first.uniform() for _ in range(3)]
        second = TorchUniformSource(seed=9)
        torch.manual_seed(0)
        torch.rand(10)
        assert [second.uniform() for _ in range(3)] == expected

    def test_reproducible_matrices(self):
        """Test seeded sources reproduce generated matrices exactly."""
        config = InitConfig(init_type="xavier")
        first = generate_matrix(4, 4, config, TorchUniformSource(seed=11))
        second = generate_matrix(4, 4, config, TorchUniformSource(seed=11))
        assert first == second
