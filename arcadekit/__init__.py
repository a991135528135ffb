"""Events, resources, scenes, views and a pygame display for arcade games."""

__version__ = "0.1.0"

__all__ = [
    "events",
    "exceptions",
    "pygame_display",
    "resources",
    "scene",
    "view",
]