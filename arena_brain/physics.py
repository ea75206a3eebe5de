#!/usr/bin/env python3
"""
Kinematics Module for the arena brain.

Implements the planar primitives every other component works with:
- 2D vector operations (add, subtract, scale, dot, cross, magnitude, signed angle)
- Moving circles (position, heading, radius, scalar speed, liveness)
- Closest relative position on a wrap-around arena

All quantities are in arena units (distance) and arena time units. Headings
are unit vectors; angles are in degrees, counter-clockwise positive.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Hashable, Optional


# =============================================================================
# VECTOR2 CLASS
# =============================================================================

@dataclass(frozen=True)
class Vector2:
    """
    Immutable 2D vector for positions, velocities, and headings.

    Uses a right-handed planar coordinate system where:
    - X: east (heading 0 degrees)
    - Y: north (heading +90 degrees)
    """
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Vector2) -> Vector2:
        """Vector addition."""
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        """Vector subtraction."""
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        """Scalar multiplication."""
        return Vector2(self.x * scalar, self.y * scalar)

    def __rmul__(self, scalar: float) -> Vector2:
        """Right scalar multiplication."""
        return self.__mul__(scalar)

    def __neg__(self) -> Vector2:
        """Negation."""
        return Vector2(-self.x, -self.y)

    def dot(self, other: Vector2) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def cross(self, other: Vector2) -> float:
        """Z component of the 3D cross product (positive when other is counter-clockwise)."""
        return self.x * other.y - self.y * other.x

    @property
    def magnitude(self) -> float:
        """Vector magnitude (length)."""
        return math.hypot(self.x, self.y)

    def normalized(self) -> Vector2:
        """Return unit vector in same direction."""
        mag = self.magnitude
        if mag == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def distance_to(self, other: Vector2) -> float:
        """Distance to another point."""
        return (self - other).magnitude

    def signed_angle_from(self, reference: Vector2) -> float:
        """
        Signed angle in degrees from a reference direction to this vector.

        Positive when this vector lies counter-clockwise (to the left) of the
        reference, negative when clockwise. Zero-length vectors give 0.0.

        Args:
            reference: Direction the angle is measured from (e.g. a heading).

        Returns:
            Angle in degrees within (-180, 180].
        """
        if self.magnitude == 0 or reference.magnitude == 0:
            return 0.0
        return math.degrees(math.atan2(reference.cross(self), reference.dot(self)))

    def to_tuple(self) -> tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    @classmethod
    def from_tuple(cls, t) -> Vector2:
        """Create from a 2-element sequence."""
        return cls(float(t[0]), float(t[1]))

    @classmethod
    def zero(cls) -> Vector2:
        """Zero vector."""
        return cls(0.0, 0.0)

    @classmethod
    def from_heading(cls, degrees: float) -> Vector2:
        """Unit vector pointing along a heading given in degrees."""
        rad = math.radians(degrees)
        return cls(math.cos(rad), math.sin(rad))

    def __repr__(self) -> str:
        return f"Vector2({self.x:.6g}, {self.y:.6g})"


# =============================================================================
# MOVING CIRCLE
# =============================================================================

@dataclass(frozen=True)
class MovingCircle:
    """
    A circular body travelling along its heading at constant scalar speed.

    Used uniformly for the controlled agent, other vehicles and projectiles.
    Speed is a property of the object kind, so it is carried separately from
    the heading rather than as a velocity vector.

    Attributes:
        object_id: Stable identity handle assigned by the host.
        position: Current center in arena coordinates.
        forward: Unit heading vector.
        radius: Collision radius.
        speed: Scalar speed along the heading (arena units per time unit).
        is_alive: Whether the host still considers the object live.
    """
    object_id: Hashable
    position: Vector2
    forward: Vector2
    radius: float = 1.0
    speed: float = 0.0
    is_alive: bool = True

    def __post_init__(self) -> None:
        """Validate radius and speed."""
        if self.radius < 0:
            raise ValueError("Radius must be non-negative")
        if self.speed < 0:
            raise ValueError("Speed must be non-negative")

    @property
    def velocity(self) -> Vector2:
        """Velocity vector implied by heading and speed."""
        return self.forward * self.speed


# =============================================================================
# WRAP-AROUND GEOMETRY
# =============================================================================

def _wrap_axis(delta: float, extent: float) -> float:
    """Shortest signed displacement along one axis of length `extent`."""
    delta = math.fmod(delta, extent)
    if delta > extent / 2:
        delta -= extent
    elif delta < -extent / 2:
        delta += extent
    return delta


def closest_relative_position(
    origin: Vector2,
    target: Vector2,
    arena_size: Optional[tuple[float, float]] = None
) -> Vector2:
    """
    Displacement from origin to target along the shortest path.

    On an arena whose edges wrap around, an object near the opposite edge may
    be closer "across the seam" than straight through the middle. With no
    arena size the plain difference is returned.

    Args:
        origin: Observer position.
        target: Observed position.
        arena_size: (width, height) of a wrap-around arena, or None.

    Returns:
        Vector from origin to the nearest image of target.
    """
    delta = target - origin
    if arena_size is None:
        return delta
    width, height = arena_size
    return Vector2(_wrap_axis(delta.x, width), _wrap_axis(delta.y, height))
