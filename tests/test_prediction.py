#!/usr/bin/env python3
"""
Tests for collision prediction.

Tests:
- Sampling grid (step, inclusive boundary)
- Absent other, diverging and parallel paths
- Closing paths checked against the analytic contact time
- Known discretization misses
- Timestamp offsetting and purity
"""

import numpy as np
import pytest

from arena_brain.physics import MovingCircle, Vector2
from arena_brain.prediction import (
    SAMPLE_STEP,
    estimate_collision_time,
    position_at_time,
    sample_offsets,
)


def circle(object_id, position, forward, radius=1.0, speed=1.0):
    """Shorthand for a moving circle."""
    return MovingCircle(
        object_id=object_id,
        position=Vector2(*position),
        forward=Vector2(*forward).normalized(),
        radius=radius,
        speed=speed,
    )


def analytic_contact_time(a: MovingCircle, b: MovingCircle):
    """Earliest t >= 0 with |Pb(t) - Pa(t)| == ra + rb, solved with numpy."""
    dp = np.array(b.position.to_tuple()) - np.array(a.position.to_tuple())
    dv = np.array(b.velocity.to_tuple()) - np.array(a.velocity.to_tuple())
    reach = a.radius + b.radius
    c = dp @ dp - reach ** 2
    if c <= 0:
        return 0.0
    roots = np.roots([dv @ dv, 2 * (dp @ dv), c])
    real = [r.real for r in roots if abs(r.imag) < 1e-9 and r.real >= 0]
    return min(real) if real else None


# =============================================================================
# SAMPLING GRID
# =============================================================================

class TestSampleOffsets:
    """Tests for the sampling grid."""

    def test_step_is_point_three(self):
        assert SAMPLE_STEP == 0.3

    def test_boundary_included(self):
        """3.0 / 0.3 must give 11 samples despite float error in the division."""
        offsets = sample_offsets(3.0)
        assert len(offsets) == 11
        assert offsets[0] == 0.0
        assert offsets[-1] == pytest.approx(3.0)

    def test_horizon_between_steps(self):
        offsets = sample_offsets(1.0)
        assert offsets == pytest.approx([0.0, 0.3, 0.6, 0.9])

    def test_zero_horizon_samples_now_only(self):
        assert sample_offsets(0.0) == [0.0]

    def test_negative_horizon_samples_nothing(self):
        assert sample_offsets(-1.0) == []

    @pytest.mark.parametrize("horizon,expected_count", [
        (3.0, 11),
        (4.0, 14),
        (80.0, 267),
    ])
    def test_bounded_work(self, horizon, expected_count):
        """Sample count is horizon / step + 1."""
        assert len(sample_offsets(horizon)) == expected_count


class TestPositionAtTime:
    """Tests for constant-velocity extrapolation."""

    def test_linear_motion(self):
        p = position_at_time(Vector2(1, 1), Vector2(2, 0), t0=10.0, t=12.5)
        assert p == Vector2(6, 1)

    def test_at_reference_time(self):
        assert position_at_time(Vector2(1, 1), Vector2(2, 0), 5.0, 5.0) == Vector2(1, 1)


# =============================================================================
# COLLISION ESTIMATE
# =============================================================================

class TestEstimateCollisionTime:
    """Tests for estimate_collision_time."""

    def test_absent_other(self):
        a = circle("a", (0, 0), (1, 0))
        assert estimate_collision_time(a, 1.0, None, 1.0, 80.0) is None

    def test_absent_other_regardless_of_self(self):
        a = circle("a", (5, -3), (0, 1), radius=50.0)
        assert estimate_collision_time(a, 0.0, None, 0.0, 3.0, now=7.0) is None

    def test_diverging_paths(self):
        """Circles moving apart never collide."""
        a = circle("a", (0, 0), (-1, 0))
        b = circle("b", (10, 0), (1, 0))
        assert estimate_collision_time(a, 1.0, b, 1.0, 80.0) is None

    def test_parallel_equal_speed(self):
        """Same heading and speed keeps the gap constant."""
        a = circle("a", (0, 0), (1, 0))
        b = circle("b", (100, 0), (1, 0))
        assert estimate_collision_time(a, 1.0, b, 1.0, 4.0) is None

    def test_head_on_sampled_time(self):
        """Gap 10, closing 2/unit, reach 2: contact at 4.0, first sample 4.2."""
        a = circle("a", (0, 0), (1, 0))
        b = circle("b", (10, 0), (-1, 0))
        hit = estimate_collision_time(a, 1.0, b, 1.0, 10.0)
        assert hit == pytest.approx(4.2)

    def test_collision_beyond_horizon(self):
        a = circle("a", (0, 0), (1, 0))
        b = circle("b", (20, 0), (-1, 0))
        assert estimate_collision_time(a, 1.0, b, 1.0, 3.0) is None

    def test_hit_on_boundary_sample(self):
        """The sample at exactly the horizon is tested."""
        a = circle("a", (0, 0), (1, 0))
        b = circle("b", (10, 0), (-1, 0))
        assert estimate_collision_time(a, 1.0, b, 1.0, 4.2) == pytest.approx(4.2)
        assert estimate_collision_time(a, 1.0, b, 1.0, 4.1) is None

    def test_already_touching_returns_now(self):
        a = circle("a", (0, 0), (1, 0))
        b = circle("b", (1.5, 0), (0, 1))
        assert estimate_collision_time(a, 1.0, b, 1.0, 3.0, now=42.0) == 42.0

    def test_result_is_absolute_time(self):
        """Reported time is offset by the current timestamp."""
        a = circle("a", (0, 0), (1, 0))
        b = circle("b", (10, 0), (-1, 0))
        hit = estimate_collision_time(a, 1.0, b, 1.0, 10.0, now=100.0)
        assert hit == pytest.approx(104.2)

    def test_explicit_speeds_override_object_speeds(self):
        """A shot fired from self uses the passed speed, not self.speed."""
        shooter = circle("a", (0, 0), (1, 0), speed=1.0)
        target = circle("b", (50, 0), (1, 0), speed=1.0)
        assert estimate_collision_time(shooter, 1.0, target, 1.0, 80.0) is None
        assert estimate_collision_time(shooter, 2.0, target, 1.0, 80.0) is not None

    def test_narrow_window_between_samples_is_missed(self):
        """A fast crossing that overlaps only between samples is not reported."""
        a = circle("a", (0, 0), (1, 0), radius=0.1, speed=0.0)
        b = circle("b", (-1.5, 0), (1, 0), radius=0.1, speed=10.0)
        # Overlap lasts from t=0.13 to t=0.17, both inside (0, 0.3)
        assert estimate_collision_time(a, 0.0, b, 10.0, 3.0) is None

    @pytest.mark.parametrize("a_args,b_args", [
        # head-on
        ((("a", (0, 0), (1, 0)), {}), (("b", (10, 0), (-1, 0)), {})),
        # chasing a stationary body
        ((("a", (0, 0), (1, 0)), {}), (("b", (7.05, 0), (1, 0)), {"speed": 0.0})),
        # crossing paths
        ((("a", (0, 0), (1, 0)), {"speed": 2.0}), (("b", (10, -10), (0, 1)), {"speed": 2.0})),
        # glancing pass with unequal radii
        ((("a", (0, 0), (1, 0)), {"radius": 2.0}), (("b", (12.5, 2.0), (-1, 0)), {"radius": 0.5, "speed": 1.5})),
    ])
    def test_within_one_step_of_analytic_time(self, a_args, b_args):
        """Sampled time lands at most one step after the true contact time."""
        a = circle(*a_args[0], **a_args[1])
        b = circle(*b_args[0], **b_args[1])
        expected = analytic_contact_time(a, b)
        assert expected is not None and expected < 10.0

        hit = estimate_collision_time(a, a.speed, b, b.speed, 10.0)
        assert hit is not None
        assert expected <= hit + 1e-9
        assert hit - expected <= SAMPLE_STEP + 1e-9

    def test_pure_and_deterministic(self):
        a = circle("a", (0, 0), (1, 0))
        b = circle("b", (10, 0), (-1, 0))
        before = (a, b)
        first = estimate_collision_time(a, 1.0, b, 1.0, 10.0, now=3.0)
        second = estimate_collision_time(a, 1.0, b, 1.0, 10.0, now=3.0)
        assert first == second
        assert (a, b) == before
