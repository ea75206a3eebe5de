#!/usr/bin/env python3
"""
Target Acquisition for the arena brain.

Picks the nearest candidate to the agent. Distance is measured along the
closest relative position, so on a wrap-around arena a vehicle just across
the seam counts as near.
"""

from __future__ import annotations

from typing import Hashable, Iterable, Optional, TypeVar

try:
    from .physics import MovingCircle, Vector2, closest_relative_position
except ImportError:
    from physics import MovingCircle, Vector2, closest_relative_position


C = TypeVar("C", bound=MovingCircle)


def locate_closest(
    origin: Vector2,
    candidates: Iterable[C],
    exclude_id: Optional[Hashable] = None,
    arena_size: Optional[tuple[float, float]] = None
) -> Optional[C]:
    """
    Find the candidate nearest to origin.

    The agent is excluded by identity (object_id), never by position, so a
    different vehicle sitting exactly on the agent is still a valid result.
    Ties keep the first candidate encountered in iteration order.

    Args:
        origin: Agent position.
        candidates: Objects to choose from, in host order.
        exclude_id: Identity to skip (the agent's own id).
        arena_size: (width, height) of a wrap-around arena, or None.

    Returns:
        The nearest candidate, or None if there is no candidate besides the
        excluded one.
    """
    closest = None
    min_distance = float("inf")
    for candidate in candidates:
        if candidate.object_id == exclude_id:
            continue
        distance = closest_relative_position(
            origin, candidate.position, arena_size
        ).magnitude
        if distance < min_distance:
            min_distance = distance
            closest = candidate
    return closest
