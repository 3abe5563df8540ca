"""Card storage with dense z-order bookkeeping."""

from __future__ import annotations

import itertools
import logging
from typing import Iterator

from .config import DEFAULT_CARD_SIZE, MIN_CARD_SIZE
from .models import Card, CardId

logger = logging.getLogger(__name__)


class StoreInvariantError(RuntimeError):
    """Raised when the z values of a store stop being a dense permutation."""


class CardStore:
    """Ordered collection of cards keyed by stable identifiers.

    The ``z`` values of the stored cards always form the permutation
    ``0..N-1``. Cards are kept in creation order; callers that draw must use
    :meth:`in_draw_order`.
    """

    def __init__(
        self,
        *,
        default_size: tuple[int, int] = DEFAULT_CARD_SIZE,
        min_card_size: int = MIN_CARD_SIZE,
    ) -> None:
        self.default_size = default_size
        self.min_card_size = min_card_size
        self._cards: dict[CardId, Card] = {}
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._cards

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards.values()))

    # Mutations --------------------------------------------------------

    def create(
        self,
        image: str,
        position: tuple[int, int],
        size: tuple[int, int] | None = None,
    ) -> CardId:
        """Add a card on top of every other card and return its identifier."""

        width, height = size or self.default_size
        card_id = CardId(next(self._ids))
        card = Card(
            id=card_id,
            image=image,
            position=(int(position[0]), int(position[1])),
            size=(max(self.min_card_size, int(width)), max(self.min_card_size, int(height))),
            rotation=0.0,
            z=len(self._cards),
        )
        self._cards[card_id] = card
        logger.debug("Created card %s at %s with z=%d", card_id, card.position, card.z)
        return card_id

    def remove(self, card_id: CardId) -> bool:
        """Delete a card, closing the gap it leaves in the z-order."""

        card = self._cards.pop(card_id, None)
        if card is None:
            logger.debug("Ignoring removal of unknown card %s", card_id)
            return False
        for other in self._cards.values():
            if other.z > card.z:
                other.z -= 1
        logger.debug("Removed card %s (z=%d)", card_id, card.z)
        self._debug_check()
        return True

    def raise_to_front(self, card_id: CardId) -> bool:
        """Move a card to the top of the stack, compacting the cards above it."""

        card = self._cards.get(card_id)
        if card is None:
            logger.debug("Ignoring raise of unknown card %s", card_id)
            return False
        selected_z = card.z
        for other in self._cards.values():
            if other is not card and other.z >= selected_z:
                other.z -= 1
        card.z = len(self._cards) - 1
        self._debug_check()
        return True

    def reset_rotation(self, card_id: CardId) -> bool:
        card = self._cards.get(card_id)
        if card is None:
            logger.debug("Ignoring rotation reset of unknown card %s", card_id)
            return False
        card.rotation = 0.0
        return True

    # Accessors --------------------------------------------------------

    def get(self, card_id: CardId) -> Card | None:
        return self._cards.get(card_id)

    def cards(self) -> list[Card]:
        """Return every card in storage order."""

        return list(self._cards.values())

    def in_draw_order(self) -> list[Card]:
        """Return every card sorted back to front."""

        return sorted(self._cards.values(), key=lambda card: card.z)

    def topmost(self) -> Card | None:
        if not self._cards:
            return None
        return max(self._cards.values(), key=lambda card: card.z)

    def check_invariant(self) -> None:
        """Raise :class:`StoreInvariantError` unless z is exactly ``0..N-1``."""

        z_values = sorted(card.z for card in self._cards.values())
        if z_values != list(range(len(z_values))):
            raise StoreInvariantError(f"z-order is not dense: {z_values}")

    def _debug_check(self) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        try:
            self.check_invariant()
        except StoreInvariantError as exc:
            logger.error("%s", exc)
