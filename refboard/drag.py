"""Drag interaction state machine for cards on the board."""

from __future__ import annotations

import logging
import math

from .events import (
    BoardEvent,
    CreateCard,
    PointerMove,
    PressHandle,
    Release,
    RemoveCard,
    ResetRotation,
)
from .models import (
    IDLE,
    Card,
    CardId,
    DragState,
    HandleKind,
    Idle,
    MovingCard,
    ResizingCard,
    RotatingCard,
)
from .store import CardStore

logger = logging.getLogger(__name__)


class DragEngine:
    """Turns pointer events into moves, resizes and rotations of cards.

    Every public method returns ``True`` when the board changed and needs a
    redraw. Events naming cards that no longer exist are ignored and leave
    the engine idle.
    """

    def __init__(self, store: CardStore) -> None:
        self.store = store
        self.state: DragState = IDLE

    def handle(self, event: BoardEvent) -> bool:
        """Apply a single normalized event."""

        if isinstance(event, PointerMove):
            return self.pointer_move(event.delta, event.position)
        if isinstance(event, PressHandle):
            return self.press_handle(event.kind, event.card_id)
        if isinstance(event, Release):
            return self.release()
        if isinstance(event, ResetRotation):
            return self.reset_rotation(event.card_id)
        if isinstance(event, CreateCard):
            self.create_card(event.image, event.position)
            return True
        if isinstance(event, RemoveCard):
            return self.remove_card(event.card_id)
        raise TypeError(f"Unsupported board event: {event!r}")

    # Event handlers ---------------------------------------------------

    def press_handle(self, kind: HandleKind, card_id: CardId) -> bool:
        """Start dragging a part of a card, abandoning any drag in progress."""

        if card_id not in self.store:
            logger.warning("Press on unknown card %s ignored", card_id)
            self.state = IDLE
            return False

        if kind is HandleKind.BODY:
            self.store.raise_to_front(card_id)
            self._transition(MovingCard(card_id))
        elif kind is HandleKind.SCALE_HANDLE:
            self._transition(ResizingCard(card_id))
        elif kind is HandleKind.ROTATE_HANDLE:
            self._transition(RotatingCard(card_id))
        else:
            raise ValueError(f"Unknown handle kind: {kind!r}")
        return True

    def pointer_move(self, delta: tuple[int, int], position: tuple[int, int]) -> bool:
        state = self.state
        if isinstance(state, Idle):
            return False

        card = self.store.get(state.card_id)
        if card is None:
            logger.warning("Card %s vanished mid-drag; dropping %s", state.card_id, state)
            self.state = IDLE
            return False

        if isinstance(state, MovingCard):
            self._move(card, delta)
        elif isinstance(state, ResizingCard):
            self._resize(card, delta)
        else:
            self._rotate(card, position)
        return True

    def reset_rotation(self, card_id: CardId) -> bool:
        return self.store.reset_rotation(card_id)

    def release(self) -> bool:
        if isinstance(self.state, Idle):
            return False
        self._transition(IDLE)
        return True

    def create_card(self, image: str, position: tuple[int, int]) -> CardId:
        return self.store.create(image, position)

    def remove_card(self, card_id: CardId) -> bool:
        """Remove a card, stopping the drag first when it targets that card."""

        if getattr(self.state, "card_id", None) == card_id:
            self._transition(IDLE)
        return self.store.remove(card_id)

    # Geometry ---------------------------------------------------------

    def _move(self, card: Card, delta: tuple[int, int]) -> None:
        x, y = card.position
        card.position = (x + int(delta[0]), y + int(delta[1]))

    def _resize(self, card: Card, delta: tuple[int, int]) -> None:
        width, height = card.size
        floor = self.store.min_card_size
        card.size = (
            max(floor, width + int(delta[0])),
            max(floor, height + int(delta[1])),
        )

    def _rotate(self, card: Card, position: tuple[int, int]) -> None:
        # The rotate handle sits at a corner, so offset the pointer angle by
        # the corner angle to keep the handle under the cursor.
        center_x, center_y = card.center
        target_angle = math.atan2(position[1] - center_y, position[0] - center_x)
        card.rotation = target_angle + card.handle_angle

    def _transition(self, state: DragState) -> None:
        logger.debug("Drag state %s -> %s", self.state, state)
        self.state = state
