[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "arcadekit"
version = "0.1.0"
description = "Shared building blocks for arcade games: events, resources, scenes, views and a pygame display"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["arcade", "game", "scene", "sprite", "pygame", "display"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
    "Topic :: Software Development :: Libraries :: pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["arcadekit"]

[tool.pytest.ini_options]
addopts = "-ra"
