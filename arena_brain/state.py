#!/usr/bin/env python3
"""
Arena State Adapter for the arena brain.

Read-only views the host hands to the brain once per tick:
- Vehicle: another combat vehicle (or the agent itself, as listed by the host)
- Projectile: a shot in flight
- AgentState: the controlled vehicle with its shield/weapon capabilities
- ArenaSnapshot: everything above plus the tick timestamp and arena size

The brain never owns these objects. It keeps identity handles (ObjectRef) in
its memory and resolves them against the current snapshot, so an object the
host destroyed between ticks simply stops resolving.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Hashable, Iterator, Optional, Union

try:
    from .physics import MovingCircle, Vector2
except ImportError:
    from physics import MovingCircle, Vector2


# =============================================================================
# WORLD OBJECTS
# =============================================================================

@dataclass(frozen=True)
class Vehicle(MovingCircle):
    """
    A combat vehicle as seen by the brain.

    Attributes:
        is_shield_up: Whether the vehicle's shield is currently raised.
    """
    is_shield_up: bool = False


@dataclass(frozen=True)
class Projectile(MovingCircle):
    """A shot in flight. Moves along its heading until the host removes it."""


@dataclass(frozen=True)
class AgentState(Vehicle):
    """
    The controlled vehicle's kinematics and capabilities for one tick.

    Attributes:
        can_shoot: Weapon is ready to fire this tick.
        can_raise_shield: Shield is off cooldown and may be raised.
    """
    can_shoot: bool = False
    can_raise_shield: bool = False


class ObjectKind(Enum):
    """Host list an object lives in. Ids are only unique within one kind."""
    VEHICLE = "vehicle"
    PROJECTILE = "projectile"


@dataclass(frozen=True)
class ObjectRef:
    """
    Non-owning handle to a host object.

    Holds identity only; liveness must be checked against the snapshot of the
    tick in which the handle is used. A vehicle and a projectile sharing an
    id are different objects.
    """
    object_id: Hashable
    kind: ObjectKind = ObjectKind.VEHICLE

    @classmethod
    def to(cls, obj: MovingCircle) -> ObjectRef:
        """Handle for a world object."""
        if isinstance(obj, Projectile):
            return cls(obj.object_id, ObjectKind.PROJECTILE)
        return cls(obj.object_id, ObjectKind.VEHICLE)


WorldObject = Union[Vehicle, Projectile]


# =============================================================================
# SNAPSHOT
# =============================================================================

@dataclass(frozen=True)
class ArenaSnapshot:
    """
    Complete host-supplied view of the arena for one tick.

    Attributes:
        time: Monotonic simulation timestamp of this tick.
        agent: The controlled vehicle.
        vehicles: Vehicles in the arena, in host iteration order. May include
                  the agent itself; it is excluded by identity where needed.
        projectiles: Projectiles in the arena, in host iteration order.
        arena_size: (width, height) when the arena edges wrap around, else None.
    """
    time: float
    agent: AgentState
    vehicles: tuple[Vehicle, ...] = ()
    projectiles: tuple[Projectile, ...] = ()
    arena_size: Optional[tuple[float, float]] = None
    _index: dict = field(default=None, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        """Normalize sequences and build one identity index per object kind."""
        object.__setattr__(self, "vehicles", tuple(self.vehicles))
        object.__setattr__(self, "projectiles", tuple(self.projectiles))
        if self.arena_size is not None:
            width, height = self.arena_size
            if width <= 0 or height <= 0:
                raise ValueError("Arena size must be positive")
            object.__setattr__(self, "arena_size", (float(width), float(height)))

        vehicles: dict[Hashable, Vehicle] = {}
        for vehicle in self.vehicles:
            vehicles.setdefault(vehicle.object_id, vehicle)
        vehicles[self.agent.object_id] = self.agent

        projectiles: dict[Hashable, Projectile] = {}
        for projectile in self.projectiles:
            projectiles.setdefault(projectile.object_id, projectile)

        index = {ObjectKind.VEHICLE: vehicles, ObjectKind.PROJECTILE: projectiles}
        object.__setattr__(self, "_index", index)

    def lookup(self, ref: Optional[ObjectRef]) -> Optional[WorldObject]:
        """
        Resolve a handle to the object of its kind present in this tick, if any.

        Does not check liveness; use resolve() to get only live objects.
        """
        if ref is None:
            return None
        return self._index[ref.kind].get(ref.object_id)

    def is_alive(self, ref: Optional[ObjectRef]) -> bool:
        """True if the handle points at an object that is present and alive."""
        obj = self.lookup(ref)
        return obj is not None and obj.is_alive

    def resolve(self, ref: Optional[ObjectRef]) -> Optional[WorldObject]:
        """Resolve a handle to a live object, or None if absent or dead."""
        obj = self.lookup(ref)
        if obj is None or not obj.is_alive:
            return None
        return obj

    def live_projectiles(self) -> Iterator[Projectile]:
        """Live projectiles in host order."""
        return (p for p in self.projectiles if p.is_alive)

    def live_vehicles(self) -> Iterator[Vehicle]:
        """Live vehicles in host order (agent included if the host lists it)."""
        return (v for v in self.vehicles if v.is_alive)

    # -------------------------------------------------------------------------
    # Host bridge
    # -------------------------------------------------------------------------

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ArenaSnapshot:
        """
        Build a snapshot from a plain mapping (e.g. decoded host JSON).

        Expected layout:
            {
                "time": 12.3,
                "arena_size": [800, 600],          # optional
                "agent": {"id": ..., "position": [x, y], "forward": [x, y],
                          "radius": r, "speed": s, "is_alive": true,
                          "is_shield_up": false, "can_shoot": true,
                          "can_raise_shield": true},
                "vehicles": [{...vehicle fields...}, ...],
                "projectiles": [{...circle fields...}, ...]
            }

        Args:
            data: Snapshot mapping.

        Returns:
            A validated ArenaSnapshot.

        Raises:
            KeyError: If a required key is missing.
            ValueError: If a value is out of range.
        """
        if "agent" not in data:
            raise KeyError("Snapshot data is missing 'agent'")
        if "time" not in data:
            raise KeyError("Snapshot data is missing 'time'")

        agent_data = data["agent"]
        agent = AgentState(
            **_circle_kwargs(agent_data),
            is_shield_up=bool(agent_data.get("is_shield_up", False)),
            can_shoot=bool(agent_data.get("can_shoot", False)),
            can_raise_shield=bool(agent_data.get("can_raise_shield", False)),
        )
        vehicles = tuple(
            Vehicle(
                **_circle_kwargs(v),
                is_shield_up=bool(v.get("is_shield_up", False)),
            )
            for v in data.get("vehicles", [])
        )
        projectiles = tuple(
            Projectile(**_circle_kwargs(p)) for p in data.get("projectiles", [])
        )
        arena_size = data.get("arena_size")
        return cls(
            time=float(data["time"]),
            agent=agent,
            vehicles=vehicles,
            projectiles=projectiles,
            arena_size=tuple(arena_size) if arena_size is not None else None,
        )


def _circle_kwargs(data: dict[str, Any]) -> dict[str, Any]:
    """Common MovingCircle fields from a mapping."""
    for key in ("id", "position", "forward"):
        if key not in data:
            raise KeyError(f"Object data is missing '{key}'")
    return {
        "object_id": data["id"],
        "position": Vector2.from_tuple(data["position"]),
        "forward": Vector2.from_tuple(data["forward"]),
        "radius": float(data.get("radius", 1.0)),
        "speed": float(data.get("speed", 0.0)),
        "is_alive": bool(data.get("is_alive", True)),
    }
