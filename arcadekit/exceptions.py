"""Exception hierarchy shared by the arcade core, displays and games."""


class ArcadeError(Exception):
    """Base class for every error raised by the arcade."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class LibraryLoaderError(ArcadeError):
    """A display or game library could not be loaded or queried."""


class DisplayError(ArcadeError):
    """A display back end failed."""


class GameError(ArcadeError):
    """A game failed."""