"""Screen-space geometry of rotated cards.

Cards are drawn rotated clockwise on screen (the y axis points down) about
their integer center. The scale handle is the local bottom-right corner and
the rotate handle the local top-right corner.
"""

from __future__ import annotations

from typing import Iterable

import pygame

from .config import HANDLE_RADIUS
from .models import Card, CardId, HandleKind


def to_local(card: Card, point: tuple[float, float]) -> pygame.Vector2:
    """Return *point* in the card's unrotated frame, relative to its center."""

    offset = pygame.Vector2(point) - pygame.Vector2(card.center)
    return offset.rotate_rad(-card.rotation)


def to_screen(card: Card, local: tuple[float, float]) -> pygame.Vector2:
    """Inverse of :func:`to_local`."""

    return pygame.Vector2(card.center) + pygame.Vector2(local).rotate_rad(card.rotation)


def handle_offset(card: Card, kind: HandleKind) -> pygame.Vector2:
    width, height = card.size
    if kind is HandleKind.SCALE_HANDLE:
        return pygame.Vector2(width / 2, height / 2)
    if kind is HandleKind.ROTATE_HANDLE:
        return pygame.Vector2(width / 2, -height / 2)
    return pygame.Vector2()


def handle_position(card: Card, kind: HandleKind) -> pygame.Vector2:
    """Screen position of a handle, or of the center for the body."""

    return to_screen(card, handle_offset(card, kind))


def hit_test(
    card: Card, point: tuple[float, float], handle_radius: int = HANDLE_RADIUS
) -> HandleKind | None:
    """Return the part of *card* under *point*; handles win over the body."""

    local = to_local(card, point)
    for kind in (HandleKind.ROTATE_HANDLE, HandleKind.SCALE_HANDLE):
        if local.distance_to(handle_offset(card, kind)) <= handle_radius:
            return kind

    width, height = card.size
    if abs(local.x) <= width / 2 and abs(local.y) <= height / 2:
        return HandleKind.BODY
    return None


def find_target(
    cards: Iterable[Card],
    point: tuple[float, float],
    handle_radius: int = HANDLE_RADIUS,
) -> tuple[HandleKind, CardId] | None:
    """Find the front-most card part under *point*."""

    for card in sorted(cards, key=lambda c: c.z, reverse=True):
        kind = hit_test(card, point, handle_radius)
        if kind is not None:
            return kind, card.id
    return None
