"""Board domain models for Refboard."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import NewType, Union

CardId = NewType("CardId", int)


@dataclass(slots=True)
class Card:
    """A transformable image placed on the board.

    ``position`` is the absolute top-left corner and ``size`` the unrotated
    width and height, both in integer pixels. ``rotation`` is in radians and
    is never normalised. ``z`` is the stacking index, front-most highest.
    """

    id: CardId
    image: str
    position: tuple[int, int]
    size: tuple[int, int]
    rotation: float = 0.0
    z: int = 0

    @property
    def center(self) -> tuple[int, int]:
        x, y = self.position
        width, height = self.size
        return x + width // 2, y + height // 2

    @property
    def handle_angle(self) -> float:
        """Angle from the center to the handle corner in the unrotated frame."""

        width, height = self.size
        return math.atan2(height, width)


class HandleKind(Enum):
    """Part of a card that a press landed on."""

    BODY = "body"
    SCALE_HANDLE = "scale"
    ROTATE_HANDLE = "rotate"


@dataclass(frozen=True, slots=True)
class Idle:
    """Pointer movement is ignored."""


@dataclass(frozen=True, slots=True)
class MovingCard:
    """The card follows the pointer."""

    card_id: CardId


@dataclass(frozen=True, slots=True)
class ResizingCard:
    """The card is scaled from its bottom-right corner."""

    card_id: CardId


@dataclass(frozen=True, slots=True)
class RotatingCard:
    """The card is rotated about its center."""

    card_id: CardId


DragState = Union[Idle, MovingCard, ResizingCard, RotatingCard]

IDLE = Idle()
