"""Drawable objects and the scene that holds them."""

from __future__ import annotations

import abc
from typing import ClassVar, TypeVar

from arcadekit.resources import ResourceIdentifier, ResourceType

T = TypeVar("T", bound="Drawable")


class Drawable(abc.ABC):
    """Something placed in a scene at a position and drawn from a resource."""

    def __init__(self) -> None:
        self._position: tuple[float, float] = (0.0, 0.0)

    @property
    def position(self) -> tuple[float, float]:
        return self._position

    def set_position(self, x: float, y: float) -> None:
        """Move the drawable to (x, y)."""
        self._position = (float(x), float(y))

    @abc.abstractmethod
    def resource_id(self) -> ResourceIdentifier:
        """Return the resource used to draw this object."""


class GameText(Drawable):
    """A piece of text shown in the scene."""

    TEXT_RESOURCE: ClassVar[ResourceIdentifier] = ResourceIdentifier(
        ResourceType.PLAYER, "text"
    )

    def __init__(self, text: str = "", font_size: int = 12) -> None:
        super().__init__()
        self.text = text
        self.font_size = font_size

    @property
    def font_size(self) -> int:
        return self._font_size

    @font_size.setter
    def font_size(self, value: int) -> None:
        if value < 0:
            raise ValueError("font size must not be negative")
        self._font_size = int(value)

    def resource_id(self) -> ResourceIdentifier:
        return self.TEXT_RESOURCE


class GameSprite(Drawable):
    """An image-backed drawable identified by resource type and state."""

    def __init__(
        self, resource_type: ResourceType = ResourceType.FLOOR, state: str = "default"
    ) -> None:
        super().__init__()
        self.resource_type = resource_type
        self.state = state

    def resource_id(self) -> ResourceIdentifier:
        return ResourceIdentifier(self.resource_type, self.state)


class GameScene:
    """An ordered collection of drawables on a map of a given size."""

    def __init__(self) -> None:
        self._drawables: list[Drawable] = []
        self._map_size: tuple[int, int] = (0, 0)

    @property
    def drawables(self) -> tuple[Drawable, ...]:
        return tuple(self._drawables)

    @property
    def map_size(self) -> tuple[int, int]:
        return self._map_size

    def add_drawable(self, drawable: Drawable) -> None:
        """Append a drawable; it is drawn after those already present."""
        if not isinstance(drawable, Drawable):
            raise TypeError(f"expected a Drawable, got {type(drawable).__name__}")
        self._drawables.append(drawable)

    def clear_drawables(self) -> None:
        """Remove every drawable."""
        self._drawables.clear()

    def drawables_of_type(self, kind: type[T]) -> list[T]:
        """Return the drawables that are instances of ``kind``, in order."""
        return [d for d in self._drawables if isinstance(d, kind)]

    def set_map_size(self, width: int, height: int) -> None:
        """Set the map dimensions."""
        if width < 0 or height < 0:
            raise ValueError("map size must not be negative")
        self._map_size = (int(width), int(height))

    def __len__(self) -> int:
        return len(self._drawables)

    def __iter__(self):
        return iter(self._drawables)