"""Board events and the queue that feeds them to the drag engine."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Deque, Union

import pygame

from .models import CardId, HandleKind

if TYPE_CHECKING:
    from .drag import DragEngine

logger = logging.getLogger(__name__)

# Reserve a block of user events for the board.
USER_EVENT_BASE = pygame.USEREVENT + 1
CARD_CREATED = USER_EVENT_BASE + 0
CARD_REMOVED = USER_EVENT_BASE + 1


@dataclass(frozen=True)
class PressHandle:
    kind: HandleKind
    card_id: CardId


@dataclass(frozen=True)
class PointerMove:
    """Pointer motion: ``delta`` since the last event and absolute ``position``."""

    delta: tuple[int, int]
    position: tuple[int, int]


@dataclass(frozen=True)
class ResetRotation:
    card_id: CardId


@dataclass(frozen=True)
class Release:
    pass


@dataclass(frozen=True)
class CreateCard:
    image: str
    position: tuple[int, int]


@dataclass(frozen=True)
class RemoveCard:
    card_id: CardId


BoardEvent = Union[PressHandle, PointerMove, ResetRotation, Release, CreateCard, RemoveCard]


class EventQueue:
    """Single-consumer FIFO through which every board mutation passes."""

    def __init__(self) -> None:
        self._pending: Deque[BoardEvent] = deque()

    def __len__(self) -> int:
        return len(self._pending)

    def post(self, event: BoardEvent) -> None:
        self._pending.append(event)

    def drain(self, engine: DragEngine) -> bool:
        """Apply queued events in arrival order and report whether any changed the board."""

        changed = False
        while self._pending:
            event = self._pending.popleft()
            if engine.handle(event):
                changed = True
        return changed
