import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame
import pytest

from arcadekit.events import EventType
from arcadekit.exceptions import DisplayError
from arcadekit.pygame_display import TILE_SIZE, PygameDisplay, TextureCache
from arcadekit.resources import ResourceIdentifier, ResourceRegistry, ResourceType
from arcadekit.scene import GameScene, GameSprite, GameText
from arcadekit.view import GameView

RED = (255, 0, 0, 255)
BLACK = (0, 0, 0, 255)
WALL = ResourceIdentifier(ResourceType.WALL, "default")


@pytest.fixture
def image_path(tmp_path):
    surface = pygame.Surface((8, 8))
    surface.fill(RED)
    path = tmp_path / "wall.png"
    pygame.image.save(surface, str(path))
    return path


@pytest.fixture
def registry(image_path):
    reg = ResourceRegistry()
    reg.register(WALL, image_path, "#")
    return reg


@pytest.fixture
def display(registry):
    disp = PygameDisplay(size=(200, 200), registry=registry)
    pygame.event.clear()
    yield disp
    disp.close()


def _post_key(key):
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=key))


def test_cache_returns_same_surface(registry):
    cache = TextureCache(registry)
    first = cache.get_texture(WALL)
    second = cache.get_texture(WALL)
    assert first is second
    assert len(cache) == 1


def test_cache_unknown_identifier_is_none(registry):
    cache = TextureCache(registry)
    assert cache.get_texture(ResourceIdentifier(ResourceType.ENEMY, "x")) is None
    assert len(cache) == 0


def test_cache_missing_file_is_none(tmp_path):
    reg = ResourceRegistry()
    reg.register(WALL, tmp_path / "absent.png", "#")
    cache = TextureCache(reg)
    assert cache.get_texture(WALL) is None
    assert len(cache) == 0


def test_cache_corrupt_file_is_none(tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    reg = ResourceRegistry()
    reg.register(WALL, bad, "#")
    assert TextureCache(reg).get_texture(WALL) is None


def test_cache_clear(registry):
    cache = TextureCache(registry)
    first = cache.get_texture(WALL)
    cache.clear()
    assert len(cache) == 0
    assert cache.get_texture(WALL) is not first


def test_display_draws_sprite_tile(display):
    sprite = GameSprite(ResourceType.WALL)
    sprite.set_position(10, 20)
    scene = GameScene()
    scene.add_drawable(sprite)
    display.display(GameView(scene=scene))
    screen = display.surface
    assert tuple(screen.get_at((10, 20))) == RED
    assert tuple(screen.get_at((10 + TILE_SIZE - 1, 20 + TILE_SIZE - 1))) == RED
    assert tuple(screen.get_at((10 + TILE_SIZE, 20 + TILE_SIZE))) == BLACK
    assert tuple(screen.get_at((0, 0))) == BLACK


def test_display_skips_text_and_unknown(display):
    text = GameText("hello")
    sprite = GameSprite(ResourceType.ENEMY, "ghost")
    sprite.set_position(100, 100)
    scene = GameScene()
    scene.add_drawable(text)
    scene.add_drawable(sprite)
    display.surface.fill(RED)
    display.display(GameView(scene=scene))
    assert tuple(display.surface.get_at((0, 0))) == BLACK
    assert tuple(display.surface.get_at((100, 100))) == BLACK


def test_no_events_gives_none(display):
    assert display.game_event().type is EventType.NONE


def test_arrow_key_reported(display):
    _post_key(pygame.K_UP)
    assert display.game_event().type is EventType.UP


def test_quit_kept_when_no_arrow_follows(display):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    _post_key(pygame.K_a)
    assert display.game_event().type is EventType.QUIT
    assert display.game_event().type is EventType.NONE


def test_arrow_after_quit_wins(display):
    pygame.event.post(pygame.event.Event(pygame.QUIT))
    _post_key(pygame.K_LEFT)
    assert display.game_event().type is EventType.LEFT


def test_arrow_leaves_later_events_queued(display):
    _post_key(pygame.K_DOWN)
    _post_key(pygame.K_RIGHT)
    assert display.game_event().type is EventType.DOWN
    assert display.game_event().type is EventType.RIGHT


def test_closed_display_raises(registry):
    disp = PygameDisplay(size=(50, 50), registry=registry)
    disp.close()
    disp.close()
    assert disp.closed
    with pytest.raises(DisplayError):
        disp.display(GameView())
    with pytest.raises(DisplayError):
        disp.game_event()


def test_context_manager_closes(registry):
    with PygameDisplay(size=(50, 50), registry=registry) as disp:
        assert disp.surface.get_size() == (50, 50)
    assert disp.closed