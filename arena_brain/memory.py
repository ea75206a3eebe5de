"""
Cross-tick memory of the decision policy.

The policy has no explicit state enum. Its "state" is the conjunction of the
fields below: which vehicle it is hunting, which vehicle it is ramming behind a
raised shield, which shot the shield was raised against, and two counters.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

try:
    from .state import ObjectRef
except ImportError:
    from state import ObjectRef


@dataclass
class DecisionMemory:
    """
    Mutable memory owned by exactly one brain instance.

    Attributes:
        locked_target: Vehicle currently being hunted.
        collision_lock_target: Vehicle the agent is ramming with its shield up.
        shield_source_threat: Projectile the current shield was raised against.
        target_hold_counter: Ticks since the target was last refreshed,
                             cycling in [0, target_hold_period).
        shield_hold_counter: Ticks the shield should still be held; never < 0.
        was_alive_last_tick: Liveness on the previous tick, for revival detection.
    """
    locked_target: Optional[ObjectRef] = None
    collision_lock_target: Optional[ObjectRef] = None
    shield_source_threat: Optional[ObjectRef] = None
    target_hold_counter: int = 0
    shield_hold_counter: int = 0
    was_alive_last_tick: bool = False

    def advance(self, target_hold_period: int) -> None:
        """Per-tick counter bookkeeping: cycle the target hold, drain the shield hold."""
        self.target_hold_counter = (self.target_hold_counter + 1) % target_hold_period
        self.shield_hold_counter = max(self.shield_hold_counter - 1, 0)

    def reset(self) -> None:
        """
        Forget the hunt and the shield hold after a revival.

        The collision lock is left as is. An empty locked_target forces a
        target refresh on the next alive tick, and the refresh clears it.
        """
        self.locked_target = None
        self.shield_source_threat = None
        self.target_hold_counter = 0
        self.shield_hold_counter = 0
