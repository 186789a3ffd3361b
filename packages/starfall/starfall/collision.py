"""Pure collision tests between circles."""
from __future__ import annotations

from starfall.types import Entity, PlayerMarker
from starfall.vec import Vec, distance_sq


def circle_vs_circle(
    pos_a: Vec,
    radius_a: float,
    pos_b: Vec,
    radius_b: float,
) -> bool:
    """True when the circles overlap. Touching circles do not collide."""
    r_sum = radius_a + radius_b
    return distance_sq(pos_a, pos_b) < r_sum * r_sum


def hits_player(entity: Entity, player: PlayerMarker) -> bool:
    return circle_vs_circle(entity.center, entity.radius, player.center, player.radius)
