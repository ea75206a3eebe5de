"""Closed set of actions the brain can hand back to the host."""

from __future__ import annotations

from enum import Enum


class Action(Enum):
    """One action per tick; the host applies it to the agent's body."""
    DO_NOTHING = "do_nothing"
    TURN_LEFT = "turn_left"
    TURN_RIGHT = "turn_right"
    SHIELD_UP = "shield_up"
    SHIELD_DOWN = "shield_down"
    SHOOT = "shoot"
