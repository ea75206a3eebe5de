#!/usr/bin/env python3
"""
Decision Policy for the arena brain.

ClingerBrain picks one action per tick, trying these rules in strict priority
order and stopping at the first that yields an action:

1. Shield against shots predicted to hit within a short window
2. Drop the shield early when the shot it was raised against is gone
3. Hold course while ramming a vehicle behind a raised shield
4. Keep the nearest vehicle as target, refreshing it periodically
5. Raise the shield when on a collision course with the target
6. Turn towards the target
7. Fire when a shot is predicted to hit an unshielded target

Memory (target lock, ram lock, shield source, counters) persists across ticks
in a DecisionMemory. The brain also detects its own revival, since the host
builds it once and never re-initializes it after the agent dies.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Hashable, Optional

try:
    from .actions import Action
    from .config import (
        RAM_HORIZON,
        SHOT_THREAT_HORIZON,
        STEERING_DEADBAND_DEG,
        BrainConfig,
    )
    from .memory import DecisionMemory
    from .physics import closest_relative_position
    from .prediction import estimate_collision_time
    from .shields import raise_shield_for
    from .state import ArenaSnapshot, ObjectRef, Vehicle
    from .targeting import locate_closest
except ImportError:
    from actions import Action
    from config import (
        RAM_HORIZON,
        SHOT_THREAT_HORIZON,
        STEERING_DEADBAND_DEG,
        BrainConfig,
    )
    from memory import DecisionMemory
    from physics import closest_relative_position
    from prediction import estimate_collision_time
    from shields import raise_shield_for
    from state import ArenaSnapshot, ObjectRef, Vehicle
    from targeting import locate_closest


logger = logging.getLogger(__name__)


# =============================================================================
# ENUMERATIONS
# =============================================================================

class DecisionRule(Enum):
    """Which priority rule produced the tick's action."""
    DEAD = "dead"
    SHOT_DEFENSE = "shot_defense"
    SHIELD_RELEASE = "shield_release"
    COLLISION_HOLD = "collision_hold"
    RAM = "ram"
    NO_TARGET = "no_target"
    STEER = "steer"
    FIRE = "fire"


class Posture(Enum):
    """Implicit state of the brain, derived from its memory."""
    NO_TARGET = "no_target"
    TRACKING = "tracking"
    BRACED_FOR_SHOT = "braced_for_shot"
    BRACED_FOR_RAM = "braced_for_ram"


@dataclass(frozen=True)
class DecisionTrace:
    """
    Record of one decision, kept for inspection by the host.

    Attributes:
        time: Snapshot timestamp of the tick.
        rule: Rule that decided the tick.
        action: Action returned.
        target_id: Locked target at the end of the tick, if any.
    """
    time: float
    rule: DecisionRule
    action: Action
    target_id: Optional[Hashable] = None


# =============================================================================
# BRAIN
# =============================================================================

class ClingerBrain:
    """
    Closest-target hunter that shields against shots and rams with its shield up.

    One instance controls one agent and must not be shared.

    Attributes:
        config: Tunables of the policy.
        memory: Cross-tick memory, mutated only by this brain.
        last_decision: Trace of the most recent call to next_action.
    """

    DEFAULT_NAME = "Clingger"
    BODY_TYPE = "xwing"

    def __init__(self, config: Optional[BrainConfig] = None) -> None:
        self.config = config or BrainConfig()
        self.memory = DecisionMemory()
        self.last_decision: Optional[DecisionTrace] = None

    @property
    def name(self) -> str:
        """Display name for the host."""
        return self.config.name or self.DEFAULT_NAME

    @property
    def posture(self) -> Posture:
        """Current implicit state, read from memory."""
        memory = self.memory
        if memory.shield_hold_counter > 0 and memory.collision_lock_target is not None:
            return Posture.BRACED_FOR_RAM
        if memory.shield_hold_counter > 0 and memory.shield_source_threat is not None:
            return Posture.BRACED_FOR_SHOT
        if memory.locked_target is not None:
            return Posture.TRACKING
        return Posture.NO_TARGET

    def next_action(self, snapshot: ArenaSnapshot) -> Action:
        """
        Decide the action for this tick.

        Args:
            snapshot: Host view of the arena for the current tick.

        Returns:
            Exactly one action.
        """
        self._update_memory(snapshot)
        if not snapshot.agent.is_alive:
            rule, action = DecisionRule.DEAD, Action.DO_NOTHING
        else:
            rule, action = self._choose(snapshot)

        target = self.memory.locked_target
        self.last_decision = DecisionTrace(
            time=snapshot.time,
            rule=rule,
            action=action,
            target_id=target.object_id if target is not None else None,
        )
        logger.debug(
            "t=%.2f %s -> %s (target=%s)",
            snapshot.time, rule.value, action.value, self.last_decision.target_id,
        )
        return action

    # -------------------------------------------------------------------------
    # Bookkeeping
    # -------------------------------------------------------------------------

    def _update_memory(self, snapshot: ArenaSnapshot) -> None:
        """Advance counters and reset memory on the first alive tick after death."""
        memory = self.memory
        memory.advance(self.config.target_hold_period)

        is_alive = snapshot.agent.is_alive
        if not memory.was_alive_last_tick and is_alive:
            logger.debug("Agent %s alive at t=%.2f, resetting memory",
                         snapshot.agent.object_id, snapshot.time)
            memory.reset()
        memory.was_alive_last_tick = is_alive

    # -------------------------------------------------------------------------
    # Priority rules
    # -------------------------------------------------------------------------

    def _choose(self, snapshot: ArenaSnapshot) -> tuple[DecisionRule, Action]:
        """Run the priority rules in order."""
        memory = self.memory
        agent = snapshot.agent
        now = snapshot.time

        # Defend against shots
        for shot in snapshot.live_projectiles():
            hit_time = estimate_collision_time(
                agent, agent.speed, shot, shot.speed, SHOT_THREAT_HORIZON, now
            )
            if hit_time is not None:
                memory.shield_source_threat = ObjectRef.to(shot)
                action = raise_shield_for(self.config.shot_shield_frames, memory, agent)
                return DecisionRule.SHOT_DEFENSE, action

        # The shot we shielded against is gone
        if (memory.shield_source_threat is not None
                and not snapshot.is_alive(memory.shield_source_threat)
                and agent.is_shield_up
                and memory.shield_hold_counter > 0):
            return DecisionRule.SHIELD_RELEASE, Action.SHIELD_DOWN

        # Committed to a ram: keep heading and shield
        if memory.shield_hold_counter > 0 and memory.collision_lock_target is not None:
            return DecisionRule.COLLISION_HOLD, Action.DO_NOTHING

        target = self._refresh_target(snapshot)

        # Ram the target behind the shield
        ram_time = None
        if target is not None:
            ram_time = estimate_collision_time(
                agent, agent.speed, target, target.speed, RAM_HORIZON, now
            )
        if ram_time is not None:
            memory.collision_lock_target = ObjectRef.to(target)
            action = raise_shield_for(self.config.ram_shield_frames, memory, agent)
            return DecisionRule.RAM, action
        memory.collision_lock_target = None

        if target is None:
            return DecisionRule.NO_TARGET, Action.DO_NOTHING

        steer = self._steer_towards(snapshot, target)
        if steer is not None:
            return DecisionRule.STEER, steer

        return DecisionRule.FIRE, self._try_to_shoot(snapshot, target)

    def _refresh_target(self, snapshot: ArenaSnapshot) -> Optional[Vehicle]:
        """Return the live target, looking up the nearest vehicle when due."""
        memory = self.memory
        target = snapshot.resolve(memory.locked_target)
        if memory.target_hold_counter == 0 or target is None:
            agent = snapshot.agent
            target = locate_closest(
                agent.position,
                snapshot.live_vehicles(),
                exclude_id=agent.object_id,
                arena_size=snapshot.arena_size,
            )
            new_ref = ObjectRef.to(target) if target is not None else None
            if new_ref != memory.locked_target:
                logger.debug("Target changed %s -> %s", memory.locked_target, new_ref)
            memory.locked_target = new_ref
            memory.collision_lock_target = None
        return target

    def _steer_towards(self, snapshot: ArenaSnapshot, target: Vehicle) -> Optional[Action]:
        """Turn when the target is outside the dead-band around the heading."""
        agent = snapshot.agent
        relative = closest_relative_position(
            agent.position, target.position, snapshot.arena_size
        )
        angle = relative.signed_angle_from(agent.forward)
        if angle >= STEERING_DEADBAND_DEG:
            return Action.TURN_LEFT
        if angle <= -STEERING_DEADBAND_DEG:
            return Action.TURN_RIGHT
        return None

    def _try_to_shoot(self, snapshot: ArenaSnapshot, target: Vehicle) -> Action:
        """Fire if able and a shot from the nose is predicted to hit an unshielded target."""
        agent = snapshot.agent
        hit_time = estimate_collision_time(
            agent,
            self.config.projectile_speed,
            target,
            target.speed,
            self.config.shoot_estimation_horizon,
            snapshot.time,
        )
        if agent.can_shoot and hit_time is not None and not target.is_shield_up:
            return Action.SHOOT
        return Action.DO_NOTHING

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}', posture={self.posture.value})"
