"""Cached loading of images, fonts and sounds."""

from __future__ import annotations

import sys
from typing import Any, Callable, Dict, Optional, Tuple

import pygame

from .errors import EngineError
from .log import LogType, log

# A value reached through a container subscript and handed to sys.getrefcount
# is counted once by the container and once by the call itself.
_CACHE_ONLY = 2


def _load_image(path: str) -> Any:
    return pygame.image.load(path)


def _load_font(path: str, size: int) -> Any:
    if not pygame.font.get_init():
        pygame.font.init()
    return pygame.font.Font(path, size)


def _load_sound(path: str) -> Any:
    return pygame.mixer.Sound(path)


def _scale(image: Any, width: int, height: int) -> Any:
    try:
        return pygame.transform.smoothscale(image, (width, height))
    except ValueError:
        return pygame.transform.scale(image, (width, height))


def _mixer_frequency() -> int:
    settings = pygame.mixer.get_init()
    if settings is None:
        raise EngineError("audio mixer is not initialised")
    return settings[0]


class SampleInstance:
    """A playable copy of a sound with its own loop flag, gain and start position.

    ``position`` and ``length`` are counted in frames at ``frequency`` frames per second.
    """

    def __init__(self, sample: Any, frequency: int) -> None:
        self.sample = sample
        self.frequency = frequency
        self.loop = False
        self.gain = 1.0
        self.position = 0
        self.channel: Any = None
        self._sound: Any = None

    @property
    def length(self) -> int:
        """Length of the sound in frames."""
        return int(round(self.sample.get_length() * self.frequency))

    @property
    def playing(self) -> bool:
        """Whether the instance is currently audible."""
        return self.channel is not None and bool(self.channel.get_busy())

    def play(self) -> bool:
        """Start playing from ``position``; return whether a channel was available."""
        self.stop()
        self._sound = self.sample if self.position == 0 else self._tail()
        self.channel = self._sound.play(loops=-1 if self.loop else 0)
        if self.channel is None:
            return False
        self.channel.set_volume(self.gain)
        return True

    def stop(self) -> bool:
        """Stop playing; return whether anything was playing."""
        if not self.playing:
            return False
        self.channel.stop()
        return True

    def _tail(self) -> Any:
        raw = self.sample.get_raw()
        length = self.length
        frame_bytes = len(raw) // length if length else 0
        return pygame.mixer.Sound(buffer=raw[self.position * frame_bytes:])


class Resources:
    """Loads images, fonts and sounds once and hands out the cached copies.

    Loaders are given the full path of the file; they default to pygame's.
    """

    BITMAP_PATH_PREFIX = "Resource/images/"
    FONT_PATH_PREFIX = "Resource/fonts/"
    SAMPLE_PATH_PREFIX = "Resource/audios/"

    _instance: Optional["Resources"] = None

    def __init__(
        self,
        *,
        image_loader: Callable[[str], Any] = _load_image,
        font_loader: Callable[[str, int], Any] = _load_font,
        sound_loader: Callable[[str], Any] = _load_sound,
        scaler: Callable[[Any, int, int], Any] = _scale,
        frequency: Optional[int] = None,
    ) -> None:
        self._image_loader = image_loader
        self._font_loader = font_loader
        self._sound_loader = sound_loader
        self._scaler = scaler
        self._frequency = frequency
        self._bitmaps: Dict[str, Any] = {}
        self._fonts: Dict[str, Any] = {}
        self._samples: Dict[str, Any] = {}
        self._sample_instances: Dict[str, Tuple[SampleInstance, Any]] = {}

    @staticmethod
    def get_instance() -> "Resources":
        """Return the shared instance, creating it on first use."""
        if Resources._instance is None:
            Resources._instance = Resources()
        return Resources._instance

    def release_unused(self) -> None:
        """Drop every cached resource that nothing outside the cache refers to."""
        for key in list(self._bitmaps):
            if sys.getrefcount(self._bitmaps[key]) <= _CACHE_ONLY:
                log(LogType.INFO, "Destroyed Resource<image>: ", key)
                del self._bitmaps[key]
        for key in list(self._fonts):
            if sys.getrefcount(self._fonts[key]) <= _CACHE_ONLY:
                log(LogType.INFO, "Destroyed Resource<font>: ", key)
                del self._fonts[key]
        for key in list(self._sample_instances):
            if sys.getrefcount(self._sample_instances[key][0]) <= _CACHE_ONLY:
                log(LogType.INFO, "Destroyed<sample_instance>: ", key)
                del self._sample_instances[key]
        for key in list(self._samples):
            if sys.getrefcount(self._samples[key]) <= _CACHE_ONLY:
                log(LogType.INFO, "Destroyed Resource<audio>: ", key)
                del self._samples[key]

    @staticmethod
    def _load(kind: str, path: str, loader: Callable[..., Any], *args: Any) -> Any:
        try:
            resource = loader(path, *args)
        except (pygame.error, OSError) as exc:
            raise EngineError(f"failed to load {kind}: {path}") from exc
        if resource is None:
            raise EngineError(f"failed to load {kind}: {path}")
        return resource

    def get_bitmap(self, name: str, width: Optional[int] = None, height: Optional[int] = None) -> Any:
        """Return the image ``name``, scaled to ``width`` x ``height`` when both are given."""
        if (width is None) != (height is None):
            raise ValueError("width and height must be given together")
        if width is None:
            if name in self._bitmaps:
                return self._bitmaps[name]
            path = self.BITMAP_PATH_PREFIX + name
            bitmap = self._load("image", path, self._image_loader)
            log(LogType.INFO, "Loaded Resource<image>: ", path)
            self._bitmaps[name] = bitmap
            return bitmap

        key = f"{name}?{width}x{height}"
        if key in self._bitmaps:
            return self._bitmaps[key]
        path = self.BITMAP_PATH_PREFIX + name
        original = self._load("image", path, self._image_loader)
        try:
            resized = self._scaler(original, width, height)
        except (pygame.error, ValueError) as exc:
            raise EngineError(f"failed to create bitmap when creating resized image: {path}") from exc
        if resized is None:
            raise EngineError(f"failed to create bitmap when creating resized image: {path}")
        log(LogType.INFO, "Loaded Resource<image>: ", path, " scaled to ", width, "x", height)
        self._bitmaps[key] = resized
        return resized

    def get_font(self, name: str, font_size: int) -> Any:
        """Return the font ``name`` at ``font_size``."""
        key = f"{name}?{font_size}"
        if key in self._fonts:
            return self._fonts[key]
        path = self.FONT_PATH_PREFIX + name
        font = self._load("font", path, self._font_loader, font_size)
        log(LogType.INFO, "Loaded Resource<font>: ", path, " with size ", font_size)
        self._fonts[key] = font
        return font

    def get_sample(self, name: str) -> Any:
        """Return the sound ``name``."""
        if name in self._samples:
            return self._samples[name]
        path = self.SAMPLE_PATH_PREFIX + name
        sample = self._load("audio", path, self._sound_loader)
        log(LogType.INFO, "Loaded Resource<audio>: ", path)
        self._samples[name] = sample
        return sample

    def get_sample_instance(self, name: str) -> SampleInstance:
        """Return a new playable instance of the sound ``name``."""
        sample = self.get_sample(name)
        frequency = self._frequency if self._frequency is not None else _mixer_frequency()
        instance = SampleInstance(sample, frequency)
        log(LogType.INFO, "Created<sample_instance>: ", self.SAMPLE_PATH_PREFIX + name)
        self._sample_instances[name] = (instance, sample)
        return instance