"""starfall - Deterministic simulation loop for a falling-objects arcade game."""

from starfall.bus import EventBus
from starfall.clock import ManualClock, MonotonicClock
from starfall.config import ArcadeConfig, CollisionPolicy, SpawnInterval
from starfall.loop import advance, effective_speed, player_marker, reset
from starfall.session import ArcadeSession
from starfall.types import (
    Entity,
    EntityId,
    EntityKind,
    GameOverEntered,
    HazardHit,
    InvalidConfigurationError,
    PickupCollected,
    Playfield,
    PlayerMarker,
    RunPhase,
    SimulationState,
    SnapshotError,
)

__all__ = [
    "advance",
    "reset",
    "effective_speed",
    "player_marker",
    "ArcadeConfig",
    "ArcadeSession",
    "CollisionPolicy",
    "SpawnInterval",
    "EventBus",
    "ManualClock",
    "MonotonicClock",
    "Entity",
    "EntityId",
    "EntityKind",
    "Playfield",
    "PlayerMarker",
    "RunPhase",
    "SimulationState",
    "HazardHit",
    "GameOverEntered",
    "PickupCollected",
    "InvalidConfigurationError",
    "SnapshotError",
]
