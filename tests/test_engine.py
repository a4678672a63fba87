import pygame
import pytest

from streetdash.engine import GameEngine
from streetdash.errors import EngineError
from streetdash.objects import GameObject
from streetdash.resources import Resources
from streetdash.scene import Scene


class RecordingScene(Scene):
    def __init__(self):
        super().__init__()
        self.events = []
        self.deltas = []
        self.keys = []

    def initialize(self):
        self.events.append("initialize")

    def terminate(self):
        self.events.append("terminate")
        super().terminate()

    def update(self, delta_time):
        self.deltas.append(delta_time)
        super().update(delta_time)

    def on_key_down(self, key_code):
        self.keys.append(key_code)


class WhiteBox(GameObject):
    def draw(self, surface):
        surface.fill((255, 255, 255), pygame.Rect(5, 5, 2, 2))


def _engine_with(*names):
    engine = GameEngine()
    scenes = {}
    for name in names:
        scenes[name] = RecordingScene()
        engine.add_new_scene(name, scenes[name])
    return engine, scenes


def test_get_instance_is_shared():
    first = GameEngine.get_instance()
    second = GameEngine.get_instance()
    assert isinstance(first, GameEngine)
    assert first is second


def test_add_duplicate_scene_raises():
    engine, _ = _engine_with("a")
    with pytest.raises(ValueError):
        engine.add_new_scene("a", RecordingScene())


def test_get_scene():
    engine, scenes = _engine_with("a", "b")
    assert engine.get_scene("b") is scenes["b"]
    with pytest.raises(ValueError):
        engine.get_scene("missing")


def test_change_scene_is_deferred_until_update():
    engine, scenes = _engine_with("a", "b")
    engine.change_scene("a")
    assert engine.active_scene is None
    engine.update(0.01)
    assert engine.active_scene is scenes["a"]
    assert scenes["a"].events == ["initialize"]
    assert scenes["a"].deltas == [0.01]

    engine.change_scene("b")
    assert engine.active_scene is scenes["a"]
    engine.update(0.02)
    assert engine.active_scene is scenes["b"]
    assert scenes["a"].events == ["initialize", "terminate"]
    assert scenes["b"].events == ["initialize"]
    assert scenes["b"].deltas == [0.02]


def test_change_to_unknown_scene_raises_on_update():
    engine, _ = _engine_with("a")
    engine.change_scene("nowhere")
    with pytest.raises(ValueError):
        engine.update(0.01)


def test_update_without_scene_raises():
    engine = GameEngine()
    with pytest.raises(EngineError):
        engine.update(0.01)


def test_update_caps_delta_time():
    engine, scenes = _engine_with("a")
    engine.change_scene("a")
    engine.update(1.0)
    engine.update(0.05)
    assert scenes["a"].deltas == [engine.delta_time_threshold, engine.delta_time_threshold]
    assert engine.delta_time_threshold == 0.05


def test_start_with_unknown_scene_raises():
    engine, _ = _engine_with("a")
    with pytest.raises(ValueError):
        engine.start("missing")


def test_draw_without_screen_raises():
    engine, _ = _engine_with("a")
    engine.change_scene("a")
    engine.update(0)
    with pytest.raises(EngineError):
        engine.draw()


def test_draw_clears_and_draws_objects():
    engine, scenes = _engine_with("a")
    engine.change_scene("a")
    engine.update(0)
    scenes["a"].add_object(WhiteBox())
    screen = pygame.Surface((10, 10))
    screen.fill((255, 0, 0))
    engine.screen = screen
    engine.draw()
    assert tuple(screen.get_at((0, 0)))[:3] == (0, 0, 0)
    assert tuple(screen.get_at((5, 5)))[:3] == (255, 255, 255)


def test_free_memory_on_scene_change_releases_cache():
    loads = []

    def loader(path):
        loads.append(path)
        return pygame.Surface((1, 1))

    resources = Resources(image_loader=loader)
    engine = GameEngine(resources=resources)
    scene = RecordingScene()
    engine.add_new_scene("a", scene)
    engine.free_memory_on_scene_changed = True
    resources.get_bitmap("x.png")
    engine.change_scene("a")
    engine.update(0)
    reloaded = resources.get_bitmap("x.png")
    assert engine.active_scene is scene
    assert reloaded.get_size() == (1, 1)
    assert loads == ["Resource/images/x.png", "Resource/images/x.png"]


def test_cache_kept_without_free_memory():
    loads = []

    def loader(path):
        loads.append(path)
        return pygame.Surface((1, 1))

    resources = Resources(image_loader=loader)
    engine = GameEngine(resources=resources)
    scene = RecordingScene()
    engine.add_new_scene("a", scene)
    first = resources.get_bitmap("x.png")
    engine.change_scene("a")
    engine.update(0)
    second = resources.get_bitmap("x.png")
    assert engine.active_scene is scene
    assert second is first
    assert loads == ["Resource/images/x.png"]


def test_handle_event_quit_and_key():
    engine, scenes = _engine_with("a")
    engine.change_scene("a")
    engine.update(0)
    closing = engine._handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP))
    assert closing is False
    assert scenes["a"].keys == [pygame.K_UP]
    assert engine._handle_event(pygame.event.Event(pygame.QUIT)) is True


def test_screen_size():
    engine = GameEngine()
    size = engine.screen_size
    assert (size.x, size.y) == (engine.screen_width, engine.screen_height)
    assert (engine.screen_width, engine.screen_height) == (800, 600)