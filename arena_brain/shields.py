"""Shield raise/lower decisions gated by the shield hold counter."""

from __future__ import annotations

try:
    from .actions import Action
    from .memory import DecisionMemory
    from .state import AgentState
except ImportError:
    from actions import Action
    from memory import DecisionMemory
    from state import AgentState


def raise_shield_for(
    frames: int,
    memory: DecisionMemory,
    agent: AgentState
) -> Action:
    """
    Raise the shield and hold it for a number of ticks.

    Does not drain the hold counter; the policy does that once per tick.

    Args:
        frames: Ticks to hold the shield once raised.
        memory: Brain memory; shield_hold_counter is set on a raise.
        agent: Current agent capabilities.

    Returns:
        SHIELD_UP if the shield can be raised and is down, SHIELD_DOWN if the
        shield is up and its hold has expired, DO_NOTHING otherwise.
    """
    if agent.can_raise_shield and not agent.is_shield_up:
        memory.shield_hold_counter = frames
        return Action.SHIELD_UP
    if memory.shield_hold_counter == 0 and agent.is_shield_up:
        return Action.SHIELD_DOWN
    return Action.DO_NOTHING
