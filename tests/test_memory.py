#!/usr/bin/env python3
"""Tests for decision memory bookkeeping."""

import pytest

from arena_brain.memory import DecisionMemory
from arena_brain.state import ObjectRef


class TestDecisionMemory:
    """Tests for DecisionMemory counters and reset."""

    def test_initial_values(self):
        memory = DecisionMemory()
        assert memory.locked_target is None
        assert memory.collision_lock_target is None
        assert memory.shield_source_threat is None
        assert memory.target_hold_counter == 0
        assert memory.shield_hold_counter == 0
        assert memory.was_alive_last_tick is False

    def test_target_counter_cycles(self):
        memory = DecisionMemory()
        seen = []
        for _ in range(7):
            memory.advance(target_hold_period=3)
            seen.append(memory.target_hold_counter)
        assert seen == [1, 2, 0, 1, 2, 0, 1]

    @pytest.mark.parametrize("period", [1, 5, 100])
    def test_target_counter_stays_in_range(self, period):
        memory = DecisionMemory()
        for _ in range(3 * period + 1):
            memory.advance(period)
            assert 0 <= memory.target_hold_counter < period

    def test_shield_counter_clamped_at_zero(self):
        memory = DecisionMemory(shield_hold_counter=2)
        memory.advance(100)
        assert memory.shield_hold_counter == 1
        memory.advance(100)
        memory.advance(100)
        memory.advance(100)
        assert memory.shield_hold_counter == 0

    def test_reset_clears_hunt_and_counters(self):
        memory = DecisionMemory(
            locked_target=ObjectRef("t"),
            collision_lock_target=ObjectRef("t"),
            shield_source_threat=ObjectRef("s"),
            target_hold_counter=42,
            shield_hold_counter=13,
            was_alive_last_tick=True,
        )
        memory.reset()
        assert memory.locked_target is None
        assert memory.shield_source_threat is None
        assert memory.target_hold_counter == 0
        assert memory.shield_hold_counter == 0

    def test_reset_keeps_collision_lock_and_liveness(self):
        memory = DecisionMemory(collision_lock_target=ObjectRef("t"), was_alive_last_tick=True)
        memory.reset()
        assert memory.collision_lock_target == ObjectRef("t")
        assert memory.was_alive_last_tick is True
