"""Configuration helpers for the Refboard canvas."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

HANDLE_RADIUS = 5
MIN_CARD_SIZE = 2 * HANDLE_RADIUS + 1
DEFAULT_CARD_SIZE = (300, 300)


@dataclass(frozen=True)
class DisplayConfig:
    """Visual settings for the pygame display."""

    width: int = 1280
    height: int = 720
    caption: str = "Refboard"
    frame_rate: int = 60
    fullscreen: bool = False
    background: tuple[int, int, int] = (40, 44, 52)


@dataclass(frozen=True)
class BoardConfig:
    """Geometry of the cards laid out on the board."""

    handle_radius: int = HANDLE_RADIUS
    default_card_size: tuple[int, int] = DEFAULT_CARD_SIZE
    initial_cards: tuple[tuple[int, int], ...] = ((0, 0), (400, 0))

    @property
    def min_card_size(self) -> int:
        """Smallest width or height a card may shrink to."""

        return 2 * self.handle_radius + 1


@dataclass(frozen=True)
class AssetConfig:
    """Configuration for locating local assets."""

    root: Path = Path("assets")
    images: Path = Path("images")

    def image_path(self, name: str) -> Path:
        """Return the full path for an image asset."""

        return self.root / self.images / name


@dataclass(frozen=True)
class AppConfig:
    """High-level configuration structure for the application."""

    display: DisplayConfig = field(default_factory=DisplayConfig)
    board: BoardConfig = field(default_factory=BoardConfig)
    assets: AssetConfig = field(default_factory=AssetConfig)
