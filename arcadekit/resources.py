"""Resource identifiers and the registry mapping them to assets."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional, Union


class ResourceType(enum.IntEnum):
    """Categories of drawable resources, ordered as declared."""

    PLAYER = 0
    ENEMY = 1
    WALL = 2
    FLOOR = 3


@dataclass(frozen=True, order=True)
class ResourceIdentifier:
    """Identifies a resource by type and name; orders by type, then name."""

    type: ResourceType
    id: str


class ResourceRegistry:
    """Maps resource identifiers to an image path and a text representation."""

    _instance: ClassVar[Optional["ResourceRegistry"]] = None

    def __init__(self) -> None:
        self._graphical_paths: dict[ResourceIdentifier, Path] = {}
        self._text_representations: dict[ResourceIdentifier, str] = {}

    @classmethod
    def instance(cls) -> "ResourceRegistry":
        """Return the process-wide shared registry."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    def register(
        self,
        identifier: ResourceIdentifier,
        graphical_path: Union[str, os.PathLike],
        text_representation: str,
    ) -> None:
        """Register or replace the assets of a resource."""
        self._graphical_paths[identifier] = Path(graphical_path)
        self._text_representations[identifier] = text_representation

    def graphical_path(self, identifier: ResourceIdentifier) -> Optional[Path]:
        """Return the image path of a resource, or None if it is unknown."""
        return self._graphical_paths.get(identifier)

    def text_representation(self, identifier: ResourceIdentifier) -> str:
        """Return the text form of a resource, or an empty string if unknown."""
        return self._text_representations.get(identifier, "")

    def reset(self) -> None:
        """Forget every registered resource."""
        self._graphical_paths.clear()
        self._text_representations.clear()

    def __contains__(self, identifier: object) -> bool:
        return identifier in self._graphical_paths

    def __len__(self) -> int:
        return len(self._graphical_paths)