"""Visual rendering of board cards."""

from __future__ import annotations

import math
from typing import ClassVar, Tuple

import pygame

from .config import HANDLE_RADIUS
from .geometry import handle_position
from .models import Card, CardId, HandleKind
from .resources import ResourceManager

Color = Tuple[int, int, int]


class CardSprite:
    """Draws a :class:`Card` with its image, outline and transform handles."""

    PLACEHOLDER_COLOR: ClassVar[Color] = (246, 246, 246)
    OUTLINE_COLOR: ClassVar[Color] = (24, 24, 24)
    HANDLE_COLORS: ClassVar[dict[HandleKind, Color]] = {
        HandleKind.SCALE_HANDLE: (70, 130, 180),
        HandleKind.ROTATE_HANDLE: (255, 215, 0),
    }

    def __init__(
        self,
        resources: ResourceManager,
        handle_radius: int = HANDLE_RADIUS,
    ) -> None:
        self.resources = resources
        self.handle_radius = handle_radius
        self._scaled: dict[CardId, tuple[tuple[str, tuple[int, int]], pygame.Surface]] = {}

    def render_face(self, card: Card) -> pygame.Surface:
        """Return the unrotated face of *card* at its current size."""

        key = (card.image, card.size)
        cached = self._scaled.get(card.id)
        if cached is not None and cached[0] == key:
            return cached[1]

        surface = pygame.Surface(card.size, pygame.SRCALPHA)
        image = self.resources.load_image(card.image)
        if image is None:
            surface.fill(self.PLACEHOLDER_COLOR)
        else:
            if image.get_bitsize() in (24, 32):
                scaled = pygame.transform.smoothscale(image, card.size)
            else:
                scaled = pygame.transform.scale(image, card.size)
            surface.blit(scaled, (0, 0))
        pygame.draw.rect(surface, self.OUTLINE_COLOR, surface.get_rect(), width=2)

        self._scaled[card.id] = (key, surface)
        return surface

    def forget(self, card_id: CardId) -> None:
        """Drop the cached face of a card that left the board."""

        self._scaled.pop(card_id, None)

    def draw(self, surface: pygame.Surface, card: Card) -> None:
        face = self.render_face(card)
        if card.rotation:
            face = pygame.transform.rotate(face, -math.degrees(card.rotation))
        surface.blit(face, face.get_rect(center=card.center))

        for kind, color in self.HANDLE_COLORS.items():
            position = handle_position(card, kind)
            pygame.draw.circle(surface, color, position, self.handle_radius)
            pygame.draw.circle(surface, self.OUTLINE_COLOR, position, self.handle_radius, width=1)
