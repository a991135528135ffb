"""Input events passed from a display to a game."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class EventType(enum.Enum):
    """Kinds of input a display can report."""

    UP = enum.auto()
    DOWN = enum.auto()
    LEFT = enum.auto()
    RIGHT = enum.auto()
    QUIT = enum.auto()
    NONE = enum.auto()


@dataclass
class GameEvent:
    """A single input event; defaults to no event."""

    type: EventType = EventType.NONE