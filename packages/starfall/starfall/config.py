"""Arcade configuration dataclasses."""
from __future__ import annotations

import enum
import math
import random
from dataclasses import dataclass, field

from starfall.types import InvalidConfigurationError


class CollisionPolicy(enum.Enum):
    """What a hazard hit does to the run."""

    RESET_SCORE = "reset-score"
    GAME_OVER = "game-over"


@dataclass(frozen=True)
class SpawnInterval:
    """Delay between spawns: ``base_ms`` plus a uniform ``[0, jitter_ms)`` extra."""

    base_ms: float
    jitter_ms: float = 0.0

    def next_after(self, now: float, rng: random.Random) -> float:
        return now + self.base_ms + rng.random() * self.jitter_ms


@dataclass(frozen=True)
class ArcadeConfig:
    """Immutable tuning for one arcade game.

    Attributes:
        hazard_cap: Maximum hazards alive at once.
        pickup_cap: Maximum pickups alive at once.
        base_speed: Downward displacement per tick before the ramp.
        speed_ramp_per_10_points: Fractional speed increase per full 10 points.
        hazard_spawn_interval: Delay between hazard spawns.
        pickup_spawn_interval: Delay between pickup spawns.
        hazard_radius: Collision radius of a hazard (bounding box is 2r square).
        pickup_radius: Collision radius of a pickup.
        player_radius: Collision radius of the player marker.
        player_width: Sprite width of the marker, used for horizontal clamping.
        player_height: Sprite height of the marker, used for its vertical center.
        player_x_padding: Minimum distance from the marker center to either side.
        player_bottom_ratio: Gap below the marker as a fraction of playfield height.
        collision_policy: Hazard hit behavior.
    """

    hazard_cap: int = 5
    pickup_cap: int = 10
    base_speed: float = 2.0
    speed_ramp_per_10_points: float = 0.0
    hazard_spawn_interval: SpawnInterval = field(
        default_factory=lambda: SpawnInterval(base_ms=250.0, jitter_ms=1000.0)
    )
    pickup_spawn_interval: SpawnInterval = field(
        default_factory=lambda: SpawnInterval(base_ms=1000.0)
    )
    hazard_radius: float = 40.0
    pickup_radius: float = 20.0
    player_radius: float = 25.0
    player_width: float = 50.0
    player_height: float = 60.0
    player_x_padding: float = 50.0
    player_bottom_ratio: float = 0.15
    collision_policy: CollisionPolicy = CollisionPolicy.RESET_SCORE

    def __post_init__(self) -> None:
        for name in ("hazard_cap", "pickup_cap"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidConfigurationError(name, f"{name} must be an integer")
            if value < 1:
                raise InvalidConfigurationError(name, f"{name} must be at least 1")

        for name in (
            "base_speed",
            "hazard_radius",
            "pickup_radius",
            "player_radius",
            "player_width",
            "player_height",
        ):
            if not _positive(getattr(self, name)):
                raise InvalidConfigurationError(name, f"{name} must be positive and finite")

        for name in ("speed_ramp_per_10_points", "player_x_padding"):
            if not _non_negative(getattr(self, name)):
                raise InvalidConfigurationError(
                    name, f"{name} must not be negative and must be finite"
                )

        if not (math.isfinite(self.player_bottom_ratio) and 0 <= self.player_bottom_ratio < 1):
            raise InvalidConfigurationError(
                "player_bottom_ratio", "player_bottom_ratio must be in [0, 1)"
            )

        for name in ("hazard_spawn_interval", "pickup_spawn_interval"):
            interval = getattr(self, name)
            if not _positive(interval.base_ms):
                raise InvalidConfigurationError(
                    name, f"{name}.base_ms must be positive and finite"
                )
            if not _non_negative(interval.jitter_ms):
                raise InvalidConfigurationError(
                    name, f"{name}.jitter_ms must not be negative and must be finite"
                )

        if not isinstance(self.collision_policy, CollisionPolicy):
            raise InvalidConfigurationError(
                "collision_policy",
                f"Unknown collision policy {self.collision_policy!r}",
            )


def _positive(value: float) -> bool:
    # NaN fails every comparison, so test finiteness first.
    return math.isfinite(value) and value > 0


def _non_negative(value: float) -> bool:
    return math.isfinite(value) and value >= 0
