"""Shared types for the arcade simulation: entities, state, events, errors."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from starfall.vec import Vec

EntityId = int


class EntityKind(enum.Enum):
    HAZARD = "hazard"
    PICKUP = "pickup"


class RunPhase(enum.Enum):
    RUNNING = "running"
    GAME_OVER = "game_over"


@dataclass(frozen=True, slots=True)
class Entity:
    """A falling object. ``position`` is the top-left corner of its bounding box."""

    id: EntityId
    kind: EntityKind
    position: Vec
    radius: float

    @property
    def center(self) -> Vec:
        x, y = self.position
        return (x + self.radius, y + self.radius)


@dataclass(frozen=True, slots=True)
class Playfield:
    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("playfield dimensions must be positive")


@dataclass(frozen=True, slots=True)
class PlayerMarker:
    """Collision circle derived each tick from the pointer position."""

    center: Vec
    radius: float


@dataclass(frozen=True)
class SimulationState:
    """Everything the loop needs between ticks.

    Spawn timestamps are in the same millisecond units as ``now``.
    """

    hazards: tuple[Entity, ...] = ()
    pickups: tuple[Entity, ...] = ()
    score: int = 0
    game_over: bool = False
    next_hazard_spawn_at: float = 0.0
    next_pickup_spawn_at: float = 0.0
    next_id: EntityId = 0

    @property
    def phase(self) -> RunPhase:
        return RunPhase.GAME_OVER if self.game_over else RunPhase.RUNNING


# -- Events --


@dataclass(frozen=True, slots=True)
class HazardHit:
    entity_id: EntityId
    center: Vec
    score_before: int


@dataclass(frozen=True, slots=True)
class GameOverEntered:
    score: int


@dataclass(frozen=True, slots=True)
class PickupCollected:
    """``center`` is where the pickup was when it was collected; ``score`` is post-increment."""

    entity_id: EntityId
    center: Vec
    score: int


Event = HazardHit | GameOverEntered | PickupCollected


# -- Errors --


class InvalidConfigurationError(ValueError):
    """Raised when an ArcadeConfig field is out of range."""

    def __init__(self, field_name: str, message: str) -> None:
        self.field_name = field_name
        super().__init__(message)


class SnapshotError(Exception):
    """Raised on restore failures (version mismatch, malformed data)."""
