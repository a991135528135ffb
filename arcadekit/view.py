"""Game state handed to displays, and the display and game interfaces."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Optional

from arcadekit.events import GameEvent
from arcadekit.resources import ResourceRegistry
from arcadekit.scene import GameScene


@dataclass
class GameView:
    """The score, elapsed party time and scene of a running game."""

    score: int = 0
    party_duration: timedelta = field(default_factory=timedelta)
    scene: GameScene = field(default_factory=GameScene)

    def set_scene(self, scene: Optional[GameScene]) -> None:
        """Replace the scene; None leaves the current scene in place."""
        if scene is not None:
            self.scene = scene


class Display(abc.ABC):
    """A back end that draws game views and reports input."""

    @abc.abstractmethod
    def display(self, game_view: GameView) -> None:
        """Draw one frame of the given view."""

    @abc.abstractmethod
    def game_event(self) -> GameEvent:
        """Return the next pending input event."""


class Game(abc.ABC):
    """A game that registers its resources and advances one step per loop."""

    @abc.abstractmethod
    def register_resources(self, registry: ResourceRegistry) -> None:
        """Register every resource the game draws."""

    @abc.abstractmethod
    def game_loop(self) -> GameView:
        """Advance the game and return its current view."""