"""Arcade simulation loop: spawn, fall, collide, score.

``advance`` is a pure state transition. Time and randomness are injected
so a seeded ``random.Random`` and a fixed sequence of timestamps always
reproduce the same run.
"""
from __future__ import annotations

import random
from dataclasses import replace

from starfall.collision import hits_player
from starfall.config import ArcadeConfig, CollisionPolicy, SpawnInterval
from starfall.types import (
    Entity,
    EntityId,
    EntityKind,
    Event,
    GameOverEntered,
    HazardHit,
    PickupCollected,
    Playfield,
    PlayerMarker,
    SimulationState,
)
from starfall.vec import clamp, offset


def effective_speed(config: ArcadeConfig, score: int) -> float:
    """Per-tick fall distance. Steps up once for every full 10 points."""
    return config.base_speed * (1 + (score // 10) * config.speed_ramp_per_10_points)


def player_marker(
    player_x: float, playfield: Playfield, config: ArcadeConfig
) -> PlayerMarker:
    """Build the player's collision circle from the raw pointer x.

    The sprite's left edge is clamped so its center stays at least
    ``player_x_padding`` away from either side of the playfield.
    """
    half_width = config.player_width / 2
    pad = config.player_x_padding
    left = clamp(
        player_x - half_width,
        pad - half_width,
        playfield.width - pad - half_width,
    )
    top = (
        playfield.height
        - playfield.height * config.player_bottom_ratio
        - config.player_height
    )
    return PlayerMarker(
        center=(left + half_width, top + config.player_height / 2),
        radius=config.player_radius,
    )


def reset(
    config: ArcadeConfig,
    now: float,
    playfield: Playfield,
    rng: random.Random,
) -> SimulationState:
    """Fresh run: one hazard at the top, no pickups, both spawn timers armed."""
    seed_hazard = Entity(
        id=0,
        kind=EntityKind.HAZARD,
        position=(rng.random() * playfield.width, 0.0),
        radius=config.hazard_radius,
    )
    return SimulationState(
        hazards=(seed_hazard,),
        pickups=(),
        score=0,
        game_over=False,
        next_hazard_spawn_at=config.hazard_spawn_interval.next_after(now, rng),
        next_pickup_spawn_at=config.pickup_spawn_interval.next_after(now, rng),
        next_id=1,
    )


def _spawn_and_fall(
    entities: tuple[Entity, ...],
    *,
    kind: EntityKind,
    radius: float,
    cap: int,
    interval: SpawnInterval,
    next_spawn_at: float,
    next_id: EntityId,
    now: float,
    speed: float,
    playfield: Playfield,
    rng: random.Random,
) -> tuple[list[Entity], float, EntityId]:
    moved = list(entities)
    if now >= next_spawn_at and len(moved) < cap:
        moved.append(
            Entity(
                id=next_id,
                kind=kind,
                position=(rng.random() * playfield.width, 0.0),
                radius=radius,
            )
        )
        next_id += 1
        next_spawn_at = interval.next_after(now, rng)

    for i, entity in enumerate(moved):
        position = offset(entity.position, dy=speed)
        if position[1] > playfield.height:
            # Recycled, not despawned: same id, back to the top.
            position = (rng.random() * playfield.width, 0.0)
        moved[i] = replace(entity, position=position)

    return moved, next_spawn_at, next_id


def advance(
    state: SimulationState,
    now: float,
    player_x: float,
    playfield: Playfield,
    config: ArcadeConfig,
    rng: random.Random,
) -> tuple[SimulationState, list[Event]]:
    """Run one frame and return the next state plus the events it produced.

    Hazards are processed fully before pickups. Under the game-over policy
    a hazard hit freezes the run on the spot: pickups are not touched this
    tick and the hazard stays where it hit.
    """
    if state.game_over:
        return state, []

    speed = effective_speed(config, state.score)
    player = player_marker(player_x, playfield, config)
    events: list[Event] = []
    score = state.score

    hazards, next_hazard_at, next_id = _spawn_and_fall(
        state.hazards,
        kind=EntityKind.HAZARD,
        radius=config.hazard_radius,
        cap=config.hazard_cap,
        interval=config.hazard_spawn_interval,
        next_spawn_at=state.next_hazard_spawn_at,
        next_id=state.next_id,
        now=now,
        speed=speed,
        playfield=playfield,
        rng=rng,
    )

    for hazard in hazards:
        if not hits_player(hazard, player):
            continue
        events.append(HazardHit(hazard.id, hazard.center, score))
        if config.collision_policy is CollisionPolicy.GAME_OVER:
            events.append(GameOverEntered(score))
            frozen = replace(
                state,
                hazards=tuple(hazards),
                score=score,
                game_over=True,
                next_hazard_spawn_at=next_hazard_at,
                next_id=next_id,
            )
            return frozen, events
        score = 0

    pickups, next_pickup_at, next_id = _spawn_and_fall(
        state.pickups,
        kind=EntityKind.PICKUP,
        radius=config.pickup_radius,
        cap=config.pickup_cap,
        interval=config.pickup_spawn_interval,
        next_spawn_at=state.next_pickup_spawn_at,
        next_id=next_id,
        now=now,
        speed=speed,
        playfield=playfield,
        rng=rng,
    )

    remaining: list[Entity] = []
    for pickup in pickups:
        if hits_player(pickup, player):
            score += 1
            events.append(PickupCollected(pickup.id, pickup.center, score))
        else:
            remaining.append(pickup)

    next_state = SimulationState(
        hazards=tuple(hazards),
        pickups=tuple(remaining),
        score=score,
        game_over=False,
        next_hazard_spawn_at=next_hazard_at,
        next_pickup_spawn_at=next_pickup_at,
        next_id=next_id,
    )
    return next_state, events
