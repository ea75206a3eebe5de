#!/usr/bin/env python3
"""
Collision Prediction Module for the arena brain.

Estimates whether and when two moving circles will touch, assuming both keep
their current heading and speed. The search is discretized: time is sampled
forward in fixed steps and the first sample at which the circles overlap is
reported. Contacts that begin and end strictly between two samples are missed;
callers rely on this exact sampling, so it is not refined analytically.
"""

from __future__ import annotations

from typing import Optional

try:
    from .physics import MovingCircle, Vector2
except ImportError:
    from physics import MovingCircle, Vector2


# =============================================================================
# CONSTANTS
# =============================================================================

# Time between two prediction samples (arena time units)
SAMPLE_STEP = 0.3

# Guards the integer step count against float error, e.g. 3.0 / 0.3 = 9.999...
_STEP_EPSILON = 1e-9


# =============================================================================
# TRAJECTORIES
# =============================================================================

def position_at_time(
    position_at_t0: Vector2,
    velocity: Vector2,
    t0: float,
    t: float
) -> Vector2:
    """
    Position on a constant-velocity trajectory.

    P(t) = P0 + V * (t - t0)

    Args:
        position_at_t0: Position at the reference time.
        velocity: Constant velocity vector.
        t0: Reference time.
        t: Time to evaluate.

    Returns:
        Predicted position at time t.
    """
    return position_at_t0 + velocity * (t - t0)


def sample_offsets(horizon: float, step: float = SAMPLE_STEP) -> list[float]:
    """
    Sampled time offsets from 0 up to and including the last step <= horizon.

    Args:
        horizon: Length of the prediction window.
        step: Sampling interval.

    Returns:
        Offsets [0, step, 2*step, ...]; empty for a negative horizon.
    """
    if horizon < 0:
        return []
    count = int(horizon / step + _STEP_EPSILON)
    return [i * step for i in range(count + 1)]


# =============================================================================
# COLLISION ESTIMATE
# =============================================================================

def estimate_collision_time(
    self_obj: MovingCircle,
    self_speed: float,
    other: Optional[MovingCircle],
    other_speed: float,
    horizon: float,
    now: float = 0.0
) -> Optional[float]:
    """
    Predict the first sampled time at which two circles overlap.

    Speeds are passed explicitly so that the same body can stand in for a
    projectile it is about to fire (its own position and heading, projectile
    speed).

    Args:
        self_obj: First body (usually the controlled agent).
        self_speed: Speed to extrapolate self_obj with.
        other: Second body, or None.
        other_speed: Speed to extrapolate other with.
        horizon: Prediction window length in time units.
        now: Current simulation timestamp (t0).

    Returns:
        Absolute time (now + offset) of the first overlapping sample, or None
        if other is None or no sample within the horizon overlaps.
    """
    if other is None:
        return None

    reach = self_obj.radius + other.radius
    velocity_a = self_obj.forward * self_speed
    velocity_b = other.forward * other_speed

    for offset in sample_offsets(horizon):
        tested_time = now + offset
        pos_a = position_at_time(self_obj.position, velocity_a, now, tested_time)
        pos_b = position_at_time(other.position, velocity_b, now, tested_time)
        if (pos_a - pos_b).magnitude <= reach:
            return tested_time
    return None
