"""Tests for the recompute controller."""
import logging

import pytest

from normviz.application.services.recompute_controller import RecomputeController
from normviz.domain.entities.dimensions import Dimensions
from normviz.domain.entities.init_config import FanInfo, InitConfig
from normviz.domain.entities.norm_type import NormType
from normviz.domain.entities.state import ExplorerState
from normviz.domain.services.norm_engine import compute_norm


def _shape(matrix):
    return (len(matrix), len(matrix[0]) if matrix else 0)


class TestInitialSnapshot:
    """Test cases for controller construction."""

    def test_default_state(self, counting_source):
        """Test defaults of 8×8×8 Xavier matrices and RMS."""
        controller = RecomputeController(counting_source)
        assert controller.state == ExplorerState()
        assert controller.snapshot.shapes == {'A': (8, 8), 'B': (8, 8), 'C': (8, 8)}
        assert controller.generation_count == 1
        # two draws per element of A and B
        assert counting_source.draw_count == 2 * (64 + 64)

    def test_custom_state_shapes(self, counting_source, sample_state):
        """Test the shape invariant for a non-square state."""
        controller = RecomputeController(counting_source, sample_state)
        assert _shape(controller.matrices['A']) == (3, 4)
        assert _shape(controller.matrices['B']) == (4, 5)
        assert _shape(controller.matrices['C']) == (3, 5)

    def test_string_norm_type_is_normalized(self, counting_source):
        """Test string norm types are resolved to enum members."""
        controller = RecomputeController(counting_source, ExplorerState(norm_type="l1"))
        assert controller.state.norm_type is NormType.L1

    def test_fan_info(self, counting_source, sample_state):
        """Test fan context for A and B."""
        controller = RecomputeController(counting_source, sample_state)
        assert controller.fan_info_a == FanInfo(fan_in=4, fan_out=3)
        assert controller.fan_info_b == FanInfo(fan_in=4, fan_out=5)


class TestNormTypeIndependence:
    """Switching the metric must never regenerate matrices."""

    def test_norm_switch_keeps_snapshot(self, counting_source, sample_state):
        """Test the snapshot is identical and no draws are consumed."""
        controller = RecomputeController(counting_source, sample_state)
        snapshot = controller.snapshot
        draws = counting_source.draw_count

        for norm_type in (NormType.L2, NormType.L1, "RMS", NormType.L2):
            assert controller.set_norm_type(norm_type) is False
            assert controller.snapshot is snapshot

        assert counting_source.draw_count == draws
        assert controller.generation_count == 1
        assert controller.state.norm_type is NormType.L2

    def test_norms_follow_selected_metric(self, counting_source, sample_state):
        """Test norms() applies the current metric to the existing snapshot."""
        controller = RecomputeController(counting_source, sample_state)
        controller.set_norm_type(NormType.L1)
        report = controller.norms()
        assert report.norm_type is NormType.L1
        assert report.norm_a == compute_norm(controller.snapshot.a, NormType.L1)
        assert report.norm_b == compute_norm(controller.snapshot.b, NormType.L1)
        assert report.norm_c == compute_norm(controller.snapshot.c, NormType.L1)

    def test_norms_for_any_metric(self, counting_source, sample_state):
        """Test norms_for does not change the selection."""
        controller = RecomputeController(counting_source, sample_state)
        report = controller.norms_for("L2")
        assert report.norm_type is NormType.L2
        assert controller.state.norm_type is NormType.RMS

    def test_invalid_norm_type(self, counting_source):
        """Test an invalid metric name is rejected."""
        controller = RecomputeController(counting_source)
        with pytest.raises(ValueError):
            controller.set_norm_type("max")


class TestRegeneration:
    """Changes to dims or either config regenerate A, B and C."""

    def test_dims_change_regenerates(self, counting_source):
        """Test a dims change consumes new draws and replaces the snapshot."""
        controller = RecomputeController(counting_source, ExplorerState(dims=Dimensions(m=2, k=3, n=4)))
        old = controller.snapshot
        draws = counting_source.draw_count

        assert controller.set_dims(m=5) is True
        assert controller.snapshot is not old
        assert controller.snapshot.shapes == {'A': (5, 3), 'B': (3, 4), 'C': (5, 4)}
        assert counting_source.draw_count == draws + 2 * (5 * 3 + 3 * 4)
        assert controller.generation_count == 2

    def test_config_a_change_regenerates_both(self, counting_source, sample_state):
        """Test a change to A's config also regenerates B."""
        controller = RecomputeController(counting_source, sample_state)
        old = controller.snapshot
        assert controller.update_config_a(scale=2.0) is True
        assert controller.snapshot.a != old.a
        assert controller.snapshot.b != old.b
        assert controller.state.config_a.scale == 2.0

    def test_config_b_change_regenerates(self, counting_source, sample_state):
        """Test replacing B's config."""
        controller = RecomputeController(counting_source, sample_state)
        config = InitConfig(init_type="constant", constant=2.0, scale=0.5)
        assert controller.set_config_b(config) is True
        assert all(x == 1.0 for row in controller.snapshot.b for x in row)

    def test_reentering_nan_does_not_regenerate(self, counting_source):
        """Test that setting a NaN field to NaN again keeps the snapshot."""
        state = ExplorerState(dims=Dimensions(m=2, k=2, n=2),
                              config_a=InitConfig(init_type="normal", mean=float("nan"), std=1.0))
        controller = RecomputeController(counting_source, state)
        old = controller.snapshot
        draws = counting_source.draw_count

        assert controller.update_config_a(mean=float("nan")) is False
        assert controller.snapshot is old
        assert counting_source.draw_count == draws
        assert controller.generation_count == 1

    def test_regeneration_logged_with_work_size(self, counting_source, caplog):
        """Test the DEBUG record carries the multiply-accumulate count."""
        controller = RecomputeController(counting_source, ExplorerState(dims=Dimensions(m=2, k=3, n=4)))
        with caplog.at_level(logging.DEBUG, logger="normviz.application"):
            controller.set_dims(n=5)
        assert "(30 multiply-accumulates)" in caplog.text

    def test_equal_value_update_does_not_regenerate(self, counting_source, sample_state):
        """Test change detection compares by value, not identity."""
        controller = RecomputeController(counting_source, sample_state)
        draws = counting_source.draw_count
        assert controller.set_config_a(InitConfig(**sample_state.config_a.to_dict())) is False
        assert controller.set_dims(m=3, k=4, n=5) is False
        assert controller.apply(ExplorerState(**{
            'dims': Dimensions(m=3, k=4, n=5),
            'config_a': sample_state.config_a,
            'config_b': sample_state.config_b,
        })) is False
        assert counting_source.draw_count == draws

    def test_clamped_noop_does_not_regenerate(self, counting_source):
        """Test out-of-range input that clamps to the current value is a no-op."""
        controller = RecomputeController(counting_source, ExplorerState(dims=Dimensions(m=32, k=1, n=8)))
        assert controller.set_dims(m=50, k=-3) is False

    def test_old_snapshot_is_untouched(self, counting_source, sample_state):
        """Test readers holding the previous snapshot never see it change."""
        controller = RecomputeController(counting_source, sample_state)
        old = controller.snapshot
        old_values = ([row[:] for row in old.a], [row[:] for row in old.b], [row[:] for row in old.c])
        controller.set_dims(k=7)
        assert (old.a, old.b, old.c) == old_values
        assert controller.snapshot.shapes['A'] == (3, 7)

    def test_regeneration_order_a_then_b(self, fixed_source):
        """Test A is generated before B from the same stream."""
        source = fixed_source(1.0, 0.0)  # every sample is exactly the mean
        state = ExplorerState(
            dims=Dimensions(m=1, k=1, n=1),
            config_a=InitConfig(init_type="normal", mean=2.0, std=1.0),
            config_b=InitConfig(init_type="normal", mean=3.0, std=1.0),
        )
        controller = RecomputeController(source, state)
        assert controller.matrices == {'A': [[2.0]], 'B': [[3.0]], 'C': [[6.0]]}
        assert source.draw_count == 4

    def test_product_is_a_times_b(self, counting_source, sample_state):
        """Test C is the product of the current A and B."""
        controller = RecomputeController(counting_source, sample_state)
        a, b, c = controller.snapshot.a, controller.snapshot.b, controller.snapshot.c
        for i in range(3):
            for j in range(5):
                assert c[i][j] == pytest.approx(sum(a[i][t] * b[t][j] for t in range(4)))


class TestResize:
    """Test cases for per-matrix resize transitions."""

    def test_resize_a(self, counting_source, sample_state):
        """Test resizing A drives m and k."""
        controller = RecomputeController(counting_source, sample_state)
        controller.resize_a(6, 2)
        assert controller.state.dims == Dimensions(m=6, k=2, n=5)

    def test_resize_b(self, counting_source, sample_state):
        """Test resizing B drives k and n."""
        controller = RecomputeController(counting_source, sample_state)
        controller.resize_b(9, 1)
        assert controller.state.dims == Dimensions(m=3, k=9, n=1)

    def test_resize_c(self, counting_source, sample_state):
        """Test resizing C drives m and n."""
        controller = RecomputeController(counting_source, sample_state)
        controller.resize_c(40, 0.4)
        assert controller.state.dims == Dimensions(m=32, k=4, n=1)


class TestXavierHints:
    """Test cases for the Xavier std hint."""

    def test_hints(self, counting_source, sample_state):
        """Test hints only for Xavier-initialized matrices."""
        controller = RecomputeController(counting_source, sample_state)
        hints = controller.xavier_hints()
        assert hints['A'] == pytest.approx((2 / 7) ** 0.5)
        assert hints['B'] is None
