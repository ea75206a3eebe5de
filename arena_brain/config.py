#!/usr/bin/env python3
"""
Brain Configuration for the arena brain.

Holds the tuning constants of the decision policy and loads them from JSON.
A config file is either a flat mapping of tunables or a set of named profiles:

    {
        "brains": {
            "clingger": {"target_hold_period": 100, "shot_shield_frames": 20},
            "skittish": {"shot_shield_frames": 35}
        }
    }

Missing keys fall back to the defaults below; unknown keys are ignored.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Optional


logger = logging.getLogger(__name__)


# =============================================================================
# POLICY CONSTANTS
# =============================================================================

# Prediction windows (arena time units)
SHOT_THREAT_HORIZON = 3.0
RAM_HORIZON = 4.0

# Half-width of the steering dead-band (degrees)
STEERING_DEADBAND_DEG = 20.0


# =============================================================================
# BRAIN CONFIG
# =============================================================================

@dataclass(frozen=True)
class BrainConfig:
    """
    Tunables of the decision policy.

    Attributes:
        shoot_estimation_horizon: Window over which a fired shot is predicted
                                  to reach the target.
        target_hold_period: Ticks a target is kept before the nearest vehicle
                            is looked up again.
        shot_shield_frames: Ticks the shield is held against an incoming shot.
        ram_shield_frames: Ticks the shield is held while ramming a vehicle.
        projectile_speed: Speed of the shots the agent fires.
        name: Display name reported to the host.
    """
    shoot_estimation_horizon: float = 80.0
    target_hold_period: int = 100
    shot_shield_frames: int = 20
    ram_shield_frames: int = 40
    projectile_speed: float = 2.0
    name: str = "Clingger"

    def __post_init__(self) -> None:
        """Validate tunables."""
        for name in ("target_hold_period", "shot_shield_frames", "ram_shield_frames"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise ValueError(f"{name} must be an integer tick count, got {value!r}")
        if self.shoot_estimation_horizon <= 0:
            raise ValueError("Shoot estimation horizon must be positive")
        if self.target_hold_period <= 0:
            raise ValueError("Target hold period must be positive")
        if self.shot_shield_frames < 0 or self.ram_shield_frames < 0:
            raise ValueError("Shield frames must be non-negative")
        if self.projectile_speed <= 0:
            raise ValueError("Projectile speed must be positive")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> BrainConfig:
        """
        Create a BrainConfig from a mapping.

        Args:
            data: Tunable values keyed by field name.

        Returns:
            A validated BrainConfig.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown brain config keys: %s", ", ".join(unknown))
        return cls(**{key: value for key, value in data.items() if key in known})

    def to_dict(self) -> dict[str, Any]:
        """Convert to a plain dictionary."""
        return asdict(self)


# =============================================================================
# LOADING
# =============================================================================

def load_config_data(filepath: str | Path) -> dict:
    """
    Load brain configuration data from a JSON file.

    Args:
        filepath: Path to the JSON file.

    Returns:
        Dictionary containing the raw configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    with open(filepath, "r") as f:
        return json.load(f)


def create_config_from_data(
    config_data: dict,
    profile: Optional[str] = None
) -> BrainConfig:
    """
    Create a BrainConfig from loaded configuration data.

    Args:
        config_data: Raw configuration (flat or with a "brains" section).
        profile: Profile name inside the "brains" section.

    Returns:
        The configured BrainConfig.

    Raises:
        KeyError: If the profile is not found in the config data.
    """
    if profile is None:
        if "brains" in config_data:
            raise KeyError("Config data has brain profiles; a profile name is required")
        return BrainConfig.from_dict(config_data)

    profiles = config_data.get("brains", {})
    if profile not in profiles:
        raise KeyError(f"Brain profile '{profile}' not found in config data")
    return BrainConfig.from_dict(profiles[profile])


def load_brain_config(
    filepath: str | Path,
    profile: Optional[str] = None
) -> BrainConfig:
    """Load a BrainConfig from a JSON file, optionally picking a named profile."""
    config = create_config_from_data(load_config_data(filepath), profile)
    logger.info("Loaded brain config %r from %s", config.name, filepath)
    return config
