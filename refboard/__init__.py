"""Refboard: move, resize and rotate image cards on a board."""

from .drag import DragEngine
from .models import Card, CardId, HandleKind
from .store import CardStore, StoreInvariantError

__all__ = [
    "Card",
    "CardId",
    "CardStore",
    "DragEngine",
    "HandleKind",
    "StoreInvariantError",
]
