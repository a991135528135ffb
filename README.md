# arcadekit

Building blocks shared between arcade games and the displays that draw them.

A game describes what is on screen as a `GameView`: a score, how long the
party has lasted, and a `GameScene` holding drawables (`GameSprite` and
`GameText`). A display turns that view into pixels and reports player input
back as a `GameEvent`.

## Install

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `arcadekit.exceptions`: `ArcadeError` and its subclasses `LibraryLoaderError`,
  `DisplayError` and `GameError`. `str()` of an error is its message.
- `arcadekit.events`: `EventType` (`UP`, `DOWN`, `LEFT`, `RIGHT`, `QUIT`, `NONE`)
  and `GameEvent`, a dataclass whose `type` defaults to `EventType.NONE`.
- `arcadekit.resources`: `ResourceType` (`PLAYER`, `ENEMY`, `WALL`, `FLOOR`),
  `ResourceIdentifier` (a frozen, ordered dataclass of `type` and `id`, sorted
  by type and then by id) and `ResourceRegistry`.
  `ResourceRegistry.instance()` returns one shared registry.
  `register(identifier, graphical_path, text_representation)` adds or
  replaces an entry. `graphical_path(identifier)` returns a `Path`, or `None`
  for an unknown identifier. `text_representation(identifier)` returns a
  string, or `""` for an unknown identifier. `reset()` empties the registry,
  which also supports `in` and `len()`.
- `arcadekit.scene`:
  - `Drawable` is the abstract base. It has a read-only `position`, which
    starts at `(0.0, 0.0)`, a `set_position(x, y)` method, and an abstract
    `resource_id()`.
  - `GameSprite(resource_type=ResourceType.FLOOR, state="default")` is
    identified by `ResourceIdentifier(resource_type, state)`.
  - `GameText(text="", font_size=12)` always uses `GameText.TEXT_RESOURCE`. A
    negative font size raises `ValueError`.
  - `GameScene` keeps drawables in insertion order. Use `add_drawable()` to add
    one; anything that is not a `Drawable` raises `TypeError`. The other
    methods are `clear_drawables()`, `drawables_of_type(kind)` and
    `set_map_size(width, height)`; negative sizes raise `ValueError`. The read-only
    `drawables` and `map_size` properties give the scene's contents and size.
    `len()` and iteration work on a scene.
- `arcadekit.view`:
  - `GameView` is a dataclass with `score` (default `0`), `party_duration`
    (a `timedelta`, default zero) and `scene` (a new `GameScene` by default).
    `set_scene(scene)` ignores `None`.
  - The abstract `Display` interface has `display(game_view)` and
    `game_event()`.
  - The abstract `Game` interface has `register_resources(registry)` and
    `game_loop()`.
- `arcadekit.pygame_display`: `PygameDisplay`, a `Display` drawn with pygame,
  its `TextureCache`, and `create_display()`.

## Example

```python
from arcadekit.resources import ResourceIdentifier, ResourceRegistry, ResourceType
from arcadekit.scene import GameSprite
from arcadekit.view import GameView
from arcadekit.pygame_display import create_display

registry = ResourceRegistry.instance()
registry.register(
    ResourceIdentifier(ResourceType.PLAYER, "default"),
    "assets/player.png",
    "@",
)

view = GameView()
player = GameSprite(ResourceType.PLAYER)
player.set_position(128, 64)
view.scene.add_drawable(player)

with create_display() as display:
    display.display(view)
    event = display.game_event()
    print(event.type)
```

## The pygame display

`create_display()` opens a 1920x1080 window titled "Arcade" that uses the
shared registry. `PygameDisplay(size, registry)` lets you choose the window
size and the registry. If the window cannot be opened, a `DisplayError` is
raised.

Each frame, `display()` does the following:

1. It clears the window to black.
2. It draws every sprite as a 64x64 square at the sprite's position.
3. It skips `GameText` drawables.
4. It leaves out any sprite whose image file is missing or cannot be loaded,
   and writes a message to standard error.

`TextureCache` loads images on first use and keeps them by file path.

`game_event()` reads pending input as follows:

- An arrow key gives `UP`, `DOWN`, `LEFT` or `RIGHT`. Reading stops at the
  first arrow key, and later input stays queued.
- A window close request gives `QUIT`, unless an arrow key follows it in the
  same read.
- With no relevant input, the event type is `NONE`.

`close()` releases the images and closes the window. It is safe to call twice.
Leaving a `with` block calls it too. Any other use of a closed display raises
`DisplayError`.

## What this package does not do

- There is no command to start, and no main loop.
- It includes no games and no menu.
- It has no mechanism for finding or loading display or game plug-ins.
  `LibraryLoaderError` is defined but nothing in the package raises it.
- The pygame display does not render text.