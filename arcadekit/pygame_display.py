"""A display back end drawing game views in a pygame window."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional, Union

import pygame

from arcadekit.events import EventType, GameEvent
from arcadekit.exceptions import DisplayError
from arcadekit.resources import ResourceIdentifier, ResourceRegistry
from arcadekit.scene import Drawable, GameText
from arcadekit.view import Display, GameView

WINDOW_TITLE = "Arcade"
WINDOW_SIZE = (1920, 1080)
TILE_SIZE = 64
BACKGROUND = (0, 0, 0, 255)

_ARROW_KEYS = {
    pygame.K_UP: EventType.UP,
    pygame.K_DOWN: EventType.DOWN,
    pygame.K_LEFT: EventType.LEFT,
    pygame.K_RIGHT: EventType.RIGHT,
}


class TextureCache:
    """Loads resource images on first use and keeps them by file path."""

    def __init__(self, registry: Optional[ResourceRegistry] = None) -> None:
        self._registry = registry
        self._textures: dict[str, pygame.Surface] = {}

    @property
    def registry(self) -> ResourceRegistry:
        return self._registry if self._registry is not None else ResourceRegistry.instance()

    def get_texture(self, identifier: ResourceIdentifier) -> Optional[pygame.Surface]:
        """Return the image of a resource, or None if it cannot be loaded."""
        path = self.registry.graphical_path(identifier)
        key = str(path) if path is not None else ""
        cached = self._textures.get(key)
        if cached is not None:
            return cached
        texture = self._load(path)
        if texture is not None:
            self._textures[key] = texture
        return texture

    def clear(self) -> None:
        """Drop every cached image."""
        self._textures.clear()

    def __len__(self) -> int:
        return len(self._textures)

    @staticmethod
    def _load(path: Optional[Union[str, os.PathLike]]) -> Optional[pygame.Surface]:
        shown = "" if path is None else str(path)
        if path is None or not Path(path).exists():
            print(f"Texture file not found: {shown}", file=sys.stderr)
            return None
        try:
            surface = pygame.image.load(shown)
        except (pygame.error, OSError, ValueError) as exc:
            print(f"Failed to load texture: {shown} - {exc}", file=sys.stderr)
            return None
        if pygame.display.get_init() and pygame.display.get_surface() is not None:
            try:
                surface = surface.convert_alpha()
            except pygame.error as exc:
                print(f"Failed to create texture from surface: {exc}", file=sys.stderr)
                return None
        return surface


class PygameDisplay(Display):
    """Draws sprites of a game view as tiles in a window and reads the arrow keys."""

    def __init__(
        self,
        size: tuple[int, int] = WINDOW_SIZE,
        registry: Optional[ResourceRegistry] = None,
    ) -> None:
        try:
            pygame.display.init()
            self._screen = pygame.display.set_mode(size, pygame.SHOWN)
        except pygame.error as exc:
            pygame.display.quit()
            raise DisplayError(f"cannot open display: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)
        self._textures: Optional[TextureCache] = TextureCache(registry)

    @property
    def surface(self) -> pygame.Surface:
        """The window surface frames are drawn on."""
        self._ensure_open()
        return self._screen

    @property
    def textures(self) -> TextureCache:
        self._ensure_open()
        assert self._textures is not None
        return self._textures

    @property
    def closed(self) -> bool:
        return self._textures is None

    def display(self, game_view: GameView) -> None:
        """Clear the window, draw every drawable of the scene and show the frame."""
        self._ensure_open()
        self._screen.fill(BACKGROUND)
        for drawable in game_view.scene.drawables:
            self._render(drawable)
        pygame.display.flip()

    def game_event(self) -> GameEvent:
        """Consume pending input up to the first arrow key and report it.

        A quit request is remembered while the queue is drained; an arrow key
        seen afterwards takes precedence and leaves later events queued.
        """
        self._ensure_open()
        event = GameEvent()
        while True:
            pending = pygame.event.poll()
            if pending.type == pygame.NOEVENT:
                return event
            if pending.type == pygame.QUIT:
                event.type = EventType.QUIT
            elif pending.type == pygame.KEYDOWN:
                arrow = _ARROW_KEYS.get(getattr(pending, "key", None))
                if arrow is not None:
                    event.type = arrow
                    return event

    def close(self) -> None:
        """Release the images and close the window; safe to call twice."""
        if self._textures is None:
            return
        self._textures.clear()
        self._textures = None
        pygame.display.quit()

    def __enter__(self) -> "PygameDisplay":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _ensure_open(self) -> None:
        if self._textures is None:
            raise DisplayError("display is closed")

    def _render(self, drawable: Drawable) -> None:
        if isinstance(drawable, GameText):
            return
        assert self._textures is not None
        texture = self._textures.get_texture(drawable.resource_id())
        if texture is None:
            return
        x, y = drawable.position
        tile = pygame.transform.scale(texture, (TILE_SIZE, TILE_SIZE))
        self._screen.blit(tile, (int(x), int(y)))


def create_display() -> PygameDisplay:
    """Open a display with the default window size and shared registry."""
    return PygameDisplay()