"""The game loop: window, events, and switching between scenes."""

from __future__ import annotations

import time
from typing import Any, Dict, Optional

import pygame

from .errors import EngineError
from .geometry import Point
from .log import LogType, log
from .resources import Resources
from .scene import Scene

DEFAULT_TITLE = "Tower Defense (I2P(II)_2025 Mini Project 2)"

# pygame numbers the middle button 2 and the right button 3; scenes expect the reverse.
_MOUSE_BUTTONS = {1: 1, 2: 3, 3: 2}


class GameEngine:
    """Owns the window and the scenes, and drives the active scene's updates and drawing."""

    _instance: Optional["GameEngine"] = None

    def __init__(self, resources: Optional[Resources] = None) -> None:
        self._resources = resources
        self.fps = 60
        self.screen_width = 800
        self.screen_height = 600
        self.reserve_samples = 1000
        self.title = DEFAULT_TITLE
        self.icon: Optional[str] = "icon.png"
        self.free_memory_on_scene_changed = False
        self.delta_time_threshold = 0.05
        self.resume = False
        self.screen: Any = None
        self._scenes: Dict[str, Scene] = {}
        self._active_scene: Optional[Scene] = None
        self._next_scene = ""
        self._owns_display = False
        self._icon_bitmap: Any = None

    @staticmethod
    def get_instance() -> "GameEngine":
        """Return the shared engine, creating it on first use."""
        if GameEngine._instance is None:
            GameEngine._instance = GameEngine()
        return GameEngine._instance

    @property
    def resources(self) -> Resources:
        """The resource cache the engine releases between scenes."""
        if self._resources is None:
            return Resources.get_instance()
        return self._resources

    @property
    def active_scene(self) -> Optional[Scene]:
        """The scene that currently receives updates, drawing and events."""
        return self._active_scene

    @property
    def screen_size(self) -> Point:
        """The window size as a point."""
        return Point(self.screen_width, self.screen_height)

    def add_new_scene(self, name: str, scene: Scene) -> None:
        """Register ``scene`` under ``name``; raise ValueError if the name is taken."""
        if name in self._scenes:
            raise ValueError("Cannot add scenes with the same name.")
        self._scenes[name] = scene

    def change_scene(self, name: str) -> None:
        """Switch to the scene ``name`` at the next update."""
        self._next_scene = name

    def get_scene(self, name: str) -> Scene:
        """Return the scene registered as ``name``; raise ValueError if there is none."""
        if name not in self._scenes:
            raise ValueError("Cannot get scenes that aren't added.")
        return self._scenes[name]

    def _change_scene(self, name: str) -> None:
        if name not in self._scenes:
            raise ValueError("Cannot change to a unknown scene.")
        if self._active_scene is not None:
            self._active_scene.terminate()
        self._active_scene = self._scenes[name]
        if self.free_memory_on_scene_changed:
            self.resources.release_unused()
        self._active_scene.initialize()
        log(LogType.INFO, "Changed to ", name, " scene")

    def update(self, delta_time: float) -> None:
        """Apply a pending scene change, then update the active scene.

        ``delta_time`` is capped at ``delta_time_threshold`` so fast objects
        cannot skip past each other after a stall.
        """
        if self._next_scene:
            name = self._next_scene
            self._next_scene = ""
            self._change_scene(name)
        if delta_time >= self.delta_time_threshold:
            delta_time = self.delta_time_threshold
        if self._active_scene is None:
            raise EngineError("no active scene")
        self._active_scene.update(delta_time)

    def draw(self) -> None:
        """Draw the active scene onto the screen and show it."""
        if self.screen is None:
            raise EngineError("display is not created")
        if self._active_scene is None:
            raise EngineError("no active scene")
        self._active_scene.draw(self.screen)
        if self._owns_display:
            pygame.display.flip()

    def get_mouse_position(self) -> Point:
        """Return the mouse position in window coordinates."""
        x, y = pygame.mouse.get_pos()
        return Point(x, y)

    def is_key_down(self, key_code: int) -> bool:
        """Return whether the key ``key_code`` is held down."""
        return bool(pygame.key.get_pressed()[key_code])

    def start(
        self,
        first_scene_name: str,
        fps: int = 60,
        screen_w: int = 800,
        screen_h: int = 600,
        reserve_samples: int = 1000,
        title: str = DEFAULT_TITLE,
        icon: Optional[str] = "icon.png",
        free_memory_on_scene_changed: bool = False,
        delta_time_threshold: float = 0.05,
    ) -> None:
        """Open the window and run the game until it is closed; scenes must be added first."""
        log(LogType.INFO, "Game Initializing...")
        self.fps = fps
        self.screen_width = screen_w
        self.screen_height = screen_h
        self.reserve_samples = reserve_samples
        self.title = title
        self.icon = icon
        self.free_memory_on_scene_changed = free_memory_on_scene_changed
        self.delta_time_threshold = delta_time_threshold
        if first_scene_name not in self._scenes:
            raise ValueError("The scene is not added yet.")
        self._active_scene = self._scenes[first_scene_name]

        self._init_media()
        log(LogType.INFO, "pygame initialized")
        log(LogType.INFO, "Game begin")
        try:
            self._active_scene.initialize()
            log(LogType.INFO, "Game initialized")
            self.draw()
            log(LogType.INFO, "Game start event loop")
            self._event_loop()
            log(LogType.INFO, "Game Terminating...")
            self._active_scene.terminate()
            log(LogType.INFO, "Game terminated")
            log(LogType.INFO, "Game end")
        finally:
            self._destroy()

    def _init_media(self) -> None:
        try:
            pygame.init()
            if not pygame.display.get_init():
                raise EngineError("failed to initialize display")
            if not pygame.mixer.get_init():
                pygame.mixer.init()
            pygame.mixer.set_num_channels(self.reserve_samples)
            self.screen = pygame.display.set_mode((self.screen_width, self.screen_height))
        except pygame.error as exc:
            raise EngineError(f"failed to initialize: {exc}") from exc
        self._owns_display = True
        pygame.display.set_caption(self.title)
        if self.icon:
            self._icon_bitmap = self.resources.get_bitmap(self.icon)
            pygame.display.set_icon(self._icon_bitmap)
            log(LogType.INFO, "Loaded window icon from: ", self.icon)
        log(LogType.INFO, "There are total ", len(_MOUSE_BUTTONS), " supported mouse buttons")

    def _event_loop(self) -> None:
        self.resume = False
        clock = pygame.time.Clock()
        timestamp = time.perf_counter()
        done = False
        while not done:
            for event in pygame.event.get():
                if self._handle_event(event):
                    done = True
            if done:
                break
            clock.tick(self.fps)
            now = time.perf_counter()
            elapsed = now - timestamp
            timestamp = now
            self.update(elapsed)
            self.draw()

    def _handle_event(self, event: Any) -> bool:
        """Forward one pygame event to the active scene; return True when the window is closing."""
        scene = self._active_scene
        if event.type == pygame.QUIT:
            log(LogType.VERBOSE, "Window close button clicked")
            return True
        if scene is None:
            return False
        if event.type == pygame.KEYDOWN:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " down")
            scene.on_key_down(event.key)
        elif event.type == pygame.KEYUP:
            log(LogType.VERBOSE, "Key with keycode ", event.key, " up")
            scene.on_key_up(event.key)
        elif event.type in (pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
            button = _MOUSE_BUTTONS.get(event.button)
            if button is None:
                return False
            mx, my = event.pos
            if event.type == pygame.MOUSEBUTTONDOWN:
                log(LogType.VERBOSE, "Mouse button ", button, " down at (", mx, ", ", my, ")")
                scene.on_mouse_down(button, mx, my)
            else:
                log(LogType.VERBOSE, "Mouse button ", button, " up at (", mx, ", ", my, ")")
                scene.on_mouse_up(button, mx, my)
        elif event.type == pygame.MOUSEMOTION:
            if event.rel != (0, 0):
                mx, my = event.pos
                log(LogType.VERBOSE, "Mouse move to (", mx, ", ", my, ")")
                scene.on_mouse_move(mx, my)
        elif event.type == pygame.MOUSEWHEEL:
            if event.y != 0:
                mx, my = pygame.mouse.get_pos()
                log(LogType.VERBOSE, "Mouse scroll at (", mx, ", ", my, ") with delta ", event.y)
                scene.on_mouse_scroll(mx, my, event.y)
        elif event.type == pygame.WINDOWLEAVE:
            log(LogType.VERBOSE, "Mouse leave display.")
            scene.on_mouse_move(-1, -1)
        elif event.type == pygame.WINDOWENTER:
            log(LogType.VERBOSE, "Mouse enter display.")
        return False

    def _destroy(self) -> None:
        if self._owns_display:
            pygame.quit()
        self._owns_display = False
        self.screen = None
        self._icon_bitmap = None
        self._scenes.clear()