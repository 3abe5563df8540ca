"""Pygame application bootstrap for Refboard."""

from __future__ import annotations

import logging
from typing import Iterable

import pygame

from .config import AppConfig
from .drag import DragEngine
from .events import (
    CARD_CREATED,
    CARD_REMOVED,
    CreateCard,
    EventQueue,
    PointerMove,
    PressHandle,
    Release,
    RemoveCard,
    ResetRotation,
)
from .geometry import find_target
from .models import HandleKind
from .resources import ResourceManager
from .sprites import CardSprite
from .store import CardStore

logger = logging.getLogger(__name__)

LEFT_BUTTON = 1
RIGHT_BUTTON = 3


class RefboardApp:
    """Minimal pygame wrapper that wires the board to the display."""

    def __init__(self, config: AppConfig | None = None, images: Iterable[str] = ()) -> None:
        self.config = config or AppConfig()
        board = self.config.board
        self.resources = ResourceManager(self.config.assets)
        self.store = CardStore(
            default_size=board.default_card_size,
            min_card_size=board.min_card_size,
        )
        self.engine = DragEngine(self.store)
        self.queue = EventQueue()
        self.sprite = CardSprite(self.resources, handle_radius=board.handle_radius)
        self.images = list(images)
        self.screen: pygame.Surface | None = None
        self.clock: pygame.time.Clock | None = None
        self.running = False
        self.dirty = True

    def setup(self) -> None:
        """Initialise pygame and the display surface."""

        pygame.init()
        display = self.config.display
        flags = 0
        size = (display.width, display.height)

        if display.fullscreen:
            flags |= pygame.FULLSCREEN
            if display.width <= 0 or display.height <= 0:
                info = pygame.display.Info()
                size = (info.current_w, info.current_h)

        self.screen = pygame.display.set_mode(size, flags)
        pygame.display.set_caption(display.caption)
        self.resources.ensure_directories()
        self.clock = pygame.time.Clock()
        self.running = True
        self._create_initial_cards()

    def handle_events(self) -> None:
        """Translate pygame events into board events and apply them."""

        for event in pygame.event.get():
            self.translate_event(event)
        self._apply_pending()

    def translate_event(self, event: pygame.event.Event) -> None:
        """Queue the board events corresponding to one pygame event."""

        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.MOUSEBUTTONDOWN:
            self._apply_pending()
            target = find_target(self.store, event.pos, self.config.board.handle_radius)
            if target is None:
                return
            kind, card_id = target
            if event.button == LEFT_BUTTON:
                self.queue.post(PressHandle(kind, card_id))
            elif event.button == RIGHT_BUTTON and kind is HandleKind.ROTATE_HANDLE:
                self.queue.post(ResetRotation(card_id))
        elif event.type == pygame.MOUSEMOTION:
            self.queue.post(PointerMove(tuple(event.rel), tuple(event.pos)))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == LEFT_BUTTON:
            self.queue.post(Release())
        elif event.type == pygame.DROPFILE:
            self._post_create(event.file, pygame.mouse.get_pos())
        elif event.type == pygame.KEYDOWN and event.key in (pygame.K_DELETE, pygame.K_BACKSPACE):
            self._post_remove_under(pygame.mouse.get_pos())
        elif event.type == CARD_REMOVED:
            self.sprite.forget(event.card_id)
        elif event.type == CARD_CREATED:
            logger.debug("Card for %r added to the board", event.image)
        elif event.type in (pygame.WINDOWEXPOSED, pygame.VIDEORESIZE):
            self.dirty = True

    def draw(self) -> None:
        """Render the board back to front."""

        assert self.screen is not None
        self.screen.fill(self.config.display.background)
        for card in self.store.in_draw_order():
            self.sprite.draw(self.screen, card)
        pygame.display.flip()
        self.dirty = False

    def run(self) -> None:
        """Run the main loop until the app stops."""

        if not self.running:
            self.setup()

        assert self.clock is not None
        display = self.config.display

        while self.running:
            self.handle_events()
            self.clock.tick(display.frame_rate)
            if self.dirty:
                self.draw()

        pygame.quit()

    # Internal helpers -------------------------------------------------

    def _create_initial_cards(self) -> None:
        """Lay out the starting cards followed by any requested images."""

        board = self.config.board
        for position in board.initial_cards:
            self.queue.post(CreateCard("", position))

        width, _ = board.default_card_size
        gap = width // 3
        x = len(board.initial_cards) * (width + gap)
        for image in self.images:
            self._post_create(image, (x, 0))
            x += width + gap
        self.queue.drain(self.engine)
        self.dirty = True

    def _post_create(self, image: str, position: tuple[int, int]) -> None:
        logger.info("Adding card for %r at %s", image, position)
        self.queue.post(CreateCard(image, position))
        self._notify(CARD_CREATED, image=image)

    def _post_remove_under(self, position: tuple[int, int]) -> None:
        self._apply_pending()
        target = find_target(self.store, position, self.config.board.handle_radius)
        if target is None:
            return
        _, card_id = target
        self.queue.post(RemoveCard(card_id))
        self._notify(CARD_REMOVED, card_id=card_id)

    def _apply_pending(self) -> None:
        """Apply queued events so hit-testing sees the current board."""

        if self.queue.drain(self.engine):
            self.dirty = True

    def _notify(self, event_type: int, **attributes: object) -> None:
        """Announce a board change to other pygame event consumers."""

        if pygame.display.get_init():
            pygame.event.post(pygame.event.Event(event_type, **attributes))
