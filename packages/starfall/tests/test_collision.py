"""Tests for circle overlap checks."""
from __future__ import annotations

from starfall.collision import circle_vs_circle, hits_player
from starfall.types import Entity, EntityKind, PlayerMarker
from starfall.vec import clamp, offset


class TestCircleVsCircle:
    def test_no_overlap(self) -> None:
        assert not circle_vs_circle((0.0, 0.0), 1.0, (3.0, 0.0), 1.0)

    def test_touching_is_no_collision(self) -> None:
        assert not circle_vs_circle((0.0, 0.0), 1.0, (2.0, 0.0), 1.0)

    def test_overlapping(self) -> None:
        assert circle_vs_circle((0.0, 0.0), 1.0, (1.5, 0.0), 1.0)

    def test_coincident_centers(self) -> None:
        assert circle_vs_circle((5.0, 5.0), 1.0, (5.0, 5.0), 1.0)

    def test_symmetric(self) -> None:
        a = ((10.0, 10.0), 4.0)
        b = ((14.0, 13.0), 2.0)
        assert circle_vs_circle(*a, *b) == circle_vs_circle(*b, *a)

    def test_diagonal(self) -> None:
        """3-4-5 triangle: distance 5."""
        assert circle_vs_circle((0.0, 0.0), 3.0, (3.0, 4.0), 2.01)
        assert not circle_vs_circle((0.0, 0.0), 3.0, (3.0, 4.0), 2.0)


class TestHitsPlayer:
    def test_uses_entity_center_not_corner(self) -> None:
        """Entity at top-left (180, 750) r20 has its center at (200, 770)."""
        entity = Entity(id=1, kind=EntityKind.PICKUP, position=(180.0, 750.0), radius=20.0)
        player = PlayerMarker(center=(200.0, 770.0), radius=25.0)
        assert entity.center == (200.0, 770.0)
        assert hits_player(entity, player)

    def test_far_entity(self) -> None:
        entity = Entity(id=1, kind=EntityKind.HAZARD, position=(330.0, 755.0), radius=40.0)
        player = PlayerMarker(center=(200.0, 770.0), radius=25.0)
        assert not hits_player(entity, player)


def test_offset():
    assert offset((1.0, 2.0), dy=3.0) == (1.0, 5.0)
    assert offset((1.0, 2.0), dx=-1.0) == (0.0, 2.0)


def test_clamp():
    assert clamp(5.0, 0.0, 10.0) == 5.0
    assert clamp(-5.0, 0.0, 10.0) == 0.0
    assert clamp(15.0, 0.0, 10.0) == 10.0
    assert clamp(5.0, 10.0, 0.0) == 0.0
