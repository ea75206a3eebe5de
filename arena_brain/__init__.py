"""Decision core for an autonomous combat vehicle in a 2D arena."""

from .actions import Action

from .brain import (
    ClingerBrain,
    DecisionRule,
    DecisionTrace,
    Posture,
)

from .config import (
    BrainConfig,
    create_config_from_data,
    load_brain_config,
    load_config_data,
)

from .memory import DecisionMemory

from .physics import (
    MovingCircle,
    Vector2,
    closest_relative_position,
)

from .prediction import (
    SAMPLE_STEP,
    estimate_collision_time,
    position_at_time,
)

from .shields import raise_shield_for

from .state import (
    AgentState,
    ArenaSnapshot,
    ObjectKind,
    ObjectRef,
    Projectile,
    Vehicle,
)

from .targeting import locate_closest

__all__ = [
    # Actions
    "Action",
    # Brain
    "ClingerBrain",
    "DecisionRule",
    "DecisionTrace",
    "Posture",
    # Config
    "BrainConfig",
    "create_config_from_data",
    "load_brain_config",
    "load_config_data",
    # Memory
    "DecisionMemory",
    # Physics
    "MovingCircle",
    "Vector2",
    "closest_relative_position",
    # Prediction
    "SAMPLE_STEP",
    "estimate_collision_time",
    "position_at_time",
    # Shields
    "raise_shield_for",
    # State
    "AgentState",
    "ArenaSnapshot",
    "ObjectKind",
    "ObjectRef",
    "Projectile",
    "Vehicle",
    # Targeting
    "locate_closest",
]
