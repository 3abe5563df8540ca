"""Asset discovery and image loading for Refboard."""

from __future__ import annotations

import logging
from pathlib import Path

import pygame

from .config import AssetConfig

logger = logging.getLogger(__name__)


class ResourceManager:
    """Utility to locate and load card images."""

    def __init__(self, config: AssetConfig | None = None) -> None:
        self.config = config or AssetConfig()
        self._images: dict[Path, pygame.Surface | None] = {}

    def resolve(self, path: Path | str) -> Path:
        """Resolve a path relative to the image directory."""

        candidate = Path(path).expanduser()
        if not candidate.is_absolute() and not candidate.exists():
            candidate = self.config.image_path(str(candidate))
        return candidate

    def require(self, path: Path | str) -> Path:
        """Ensure that the given asset exists on disk."""

        resolved = self.resolve(path)
        if not resolved.exists():
            raise FileNotFoundError(f"Asset not found: {resolved}")
        return resolved

    def load_image(self, path: Path | str) -> pygame.Surface | None:
        """Load and cache an image, returning ``None`` when it is unusable."""

        if not str(path):
            return None
        resolved = self.resolve(path)
        if resolved in self._images:
            return self._images[resolved]

        surface: pygame.Surface | None
        try:
            surface = pygame.image.load(str(self.require(resolved)))
        except (FileNotFoundError, pygame.error) as exc:
            logger.warning("Could not load card image %s: %s", resolved, exc)
            surface = None
        else:
            if pygame.display.get_surface() is not None:
                surface = surface.convert_alpha()
        self._images[resolved] = surface
        return surface

    def ensure_directories(self) -> None:
        """Create the asset directories if they are missing."""

        for directory in (self.config.root, self.config.root / self.config.images):
            directory.mkdir(parents=True, exist_ok=True)
