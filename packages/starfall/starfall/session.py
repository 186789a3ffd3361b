"""ArcadeSession - the driver-side owner of the current simulation state."""
from __future__ import annotations

import logging
import os
import random
from typing import Any, Callable

from starfall.bus import EventBus
from starfall.clock import Clock, MonotonicClock
from starfall.config import ArcadeConfig
from starfall.loop import advance, reset
from starfall.types import (
    Entity,
    EntityKind,
    Event,
    GameOverEntered,
    Playfield,
    SimulationState,
    SnapshotError,
)

logger = logging.getLogger(__name__)

_SNAPSHOT_VERSION = 1

RunEndHook = Callable[[int], None]


class ArcadeSession:
    """Holds the mutable "current state" cell and threads it through ``advance``.

    The render loop calls ``tick`` once per frame. Events are returned and
    also delivered through ``bus`` so sound, score display and overlays can
    subscribe to the event types they care about.
    """

    def __init__(
        self,
        playfield: Playfield,
        config: ArcadeConfig | None = None,
        seed: int | None = None,
        clock: Clock | None = None,
        bus: EventBus | None = None,
    ) -> None:
        self._config = config if config is not None else ArcadeConfig()
        self._clock = clock if clock is not None else MonotonicClock()
        self._bus = bus if bus is not None else EventBus()
        self._playfield = playfield
        self._run_end_hooks: list[RunEndHook] = []
        self._high_score = 0
        self._high_score_at_start = 0
        self._run_ended = False

        if seed is None:
            seed = int.from_bytes(os.urandom(8))
        self._seed = seed
        self._rng = random.Random(seed)
        self._state = reset(self._config, self._clock.now(), playfield, self._rng)

    @property
    def state(self) -> SimulationState:
        return self._state

    @property
    def config(self) -> ArcadeConfig:
        return self._config

    @property
    def bus(self) -> EventBus:
        return self._bus

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def high_score(self) -> int:
        return self._high_score

    @property
    def playfield(self) -> Playfield:
        return self._playfield

    def on_run_end(self, hook: RunEndHook) -> None:
        self._run_end_hooks.append(hook)

    def tick(self, player_x: float, playfield: Playfield | None = None) -> list[Event]:
        if playfield is not None:
            self._playfield = playfield
        self._state, events = advance(
            self._state,
            self._clock.now(),
            player_x,
            self._playfield,
            self._config,
            self._rng,
        )
        self._high_score = max(self._high_score, self._state.score)

        self._bus.publish(events)
        self._bus.flush()

        if any(isinstance(e, GameOverEntered) for e in events):
            logger.info("Game over with score %d", self._state.score)
            self._end_run()
        return events

    def restart(self) -> None:
        """Start a new run. An unfinished run's score is dropped without firing hooks."""
        if not self._run_ended and self._state.score:
            logger.debug("Discarding unfinished run with score %d", self._state.score)
        self._bus.clear()
        self._state = reset(self._config, self._clock.now(), self._playfield, self._rng)
        self._high_score_at_start = self._high_score
        self._run_ended = False

    def finish(self) -> None:
        """End the current run explicitly, e.g. when the player leaves the game."""
        self._end_run()

    def _end_run(self) -> None:
        if self._run_ended:
            return
        self._run_ended = True
        score = self._state.score
        if score > self._high_score_at_start:
            logger.info("New high score: %d", score)
        for hook in self._run_end_hooks:
            hook(score)

    # -- Snapshot / restore --

    def snapshot(self) -> dict[str, Any]:
        return {
            "version": _SNAPSHOT_VERSION,
            "collision_policy": self._config.collision_policy.value,
            "seed": self._seed,
            "rng_state": _serialize_rng_state(self._rng.getstate()),
            "high_score": self._high_score,
            "high_score_at_start": self._high_score_at_start,
            "run_ended": self._run_ended,
            "state": _state_to_dict(self._state),
        }

    def restore(self, data: dict[str, Any]) -> None:
        """Replace the session's run with a snapshot. Nothing changes if it is rejected."""
        if not isinstance(data, dict):
            raise SnapshotError(f"Snapshot must be a dict, got {type(data).__name__}")

        version = data.get("version")
        if version != _SNAPSHOT_VERSION:
            raise SnapshotError(
                f"Unsupported snapshot version {version!r}, expected {_SNAPSHOT_VERSION}"
            )

        policy = data.get("collision_policy")
        if policy != self._config.collision_policy.value:
            raise SnapshotError(
                f"Collision policy mismatch: snapshot has {policy!r}, "
                f"session has {self._config.collision_policy.value!r}"
            )

        try:
            state = _state_from_dict(data["state"])
            rng = random.Random()
            rng.setstate(_deserialize_rng_state(data["rng_state"]))
            seed = data["seed"]
            high_score = data["high_score"]
            high_score_at_start = data["high_score_at_start"]
            run_ended = data["run_ended"]
        except (KeyError, TypeError, ValueError) as exc:
            raise SnapshotError(f"Malformed snapshot: {exc}") from exc

        self._rng = rng
        self._seed = seed
        self._high_score = high_score
        self._high_score_at_start = high_score_at_start
        self._run_ended = run_ended
        self._state = state
        self._bus.clear()


def _entity_to_dict(entity: Entity) -> dict[str, Any]:
    return {
        "id": entity.id,
        "kind": entity.kind.value,
        "position": list(entity.position),
        "radius": entity.radius,
    }


def _entity_from_dict(data: dict[str, Any]) -> Entity:
    x, y = data["position"]
    return Entity(
        id=data["id"],
        kind=EntityKind(data["kind"]),
        position=(x, y),
        radius=data["radius"],
    )


def _state_to_dict(state: SimulationState) -> dict[str, Any]:
    return {
        "hazards": [_entity_to_dict(e) for e in state.hazards],
        "pickups": [_entity_to_dict(e) for e in state.pickups],
        "score": state.score,
        "game_over": state.game_over,
        "next_hazard_spawn_at": state.next_hazard_spawn_at,
        "next_pickup_spawn_at": state.next_pickup_spawn_at,
        "next_id": state.next_id,
    }


def _state_from_dict(data: dict[str, Any]) -> SimulationState:
    return SimulationState(
        hazards=tuple(_entity_from_dict(e) for e in data["hazards"]),
        pickups=tuple(_entity_from_dict(e) for e in data["pickups"]),
        score=data["score"],
        game_over=data["game_over"],
        next_hazard_spawn_at=data["next_hazard_spawn_at"],
        next_pickup_spawn_at=data["next_pickup_spawn_at"],
        next_id=data["next_id"],
    )


def _serialize_rng_state(state: tuple[int, tuple[int, ...], float | None]) -> list[Any]:
    """Convert Random.getstate() tuple to a JSON-compatible list."""
    version, internalstate, gauss_next = state
    return [version, list(internalstate), gauss_next]


def _deserialize_rng_state(data: list[Any]) -> tuple[int, tuple[int, ...], float | None]:
    version, internalstate, gauss_next = data
    return (version, tuple(internalstate), gauss_next)
