"""Playing sound effects, background music and controllable sound instances."""

from __future__ import annotations

from typing import Any, Optional

from .errors import EngineError
from .log import LogType, log
from .resources import Resources, SampleInstance


class AudioPlayer:
    """Plays sounds loaded through :class:`Resources`.

    ``sfx_volume`` applies to one-shot effects and ``bgm_volume`` to looping music.
    """

    def __init__(
        self,
        resources: Optional[Resources] = None,
        bgm_volume: float = 1.0,
        sfx_volume: float = 1.0,
    ) -> None:
        self._resources = resources
        self.bgm_volume = bgm_volume
        self.sfx_volume = sfx_volume

    @property
    def resources(self) -> Resources:
        """The resource cache sounds are taken from."""
        if self._resources is None:
            return Resources.get_instance()
        return self._resources

    def _play(self, name: str, volume: float, loop: bool, label: str) -> Any:
        sample = self.resources.get_sample(name)
        channel = sample.play(loops=-1 if loop else 0)
        if channel is None:
            log(LogType.INFO, f"failed to play audio ({label})")
            return None
        channel.set_volume(volume)
        log(LogType.VERBOSE, f"played audio ({label})")
        return channel

    def play_audio(self, name: str) -> Any:
        """Play ``name`` once at the effects volume; return its channel, or None if none was free."""
        return self._play(name, self.sfx_volume, False, "once")

    def play_bgm(self, name: str) -> Any:
        """Loop ``name`` at the music volume; return its channel, or None if none was free."""
        return self._play(name, self.bgm_volume, True, "bgm")

    def stop_bgm(self, channel: Any) -> None:
        """Stop music started by :meth:`play_bgm`."""
        if channel is not None:
            channel.stop()
        log(LogType.INFO, "stopped audio (bgm)")

    def play_sample(
        self,
        name: str,
        loop: bool = False,
        volume: float = 1.0,
        position: float = 0.0,
    ) -> SampleInstance:
        """Create an instance of ``name``, set it up and start it; return the instance."""
        instance = self.resources.get_sample_instance(name)
        instance.loop = loop
        if volume != 1:
            self.change_sample_volume(instance, volume)
        if position != 0:
            self.change_sample_position(instance, position)
        if instance.play():
            log(LogType.VERBOSE, "played audio (sample)")
        else:
            log(LogType.INFO, "failed to play audio (sample)")
        return instance

    def stop_sample(self, sample: SampleInstance) -> None:
        """Stop an instance if it is playing."""
        if not sample.playing:
            return
        if sample.stop():
            log(LogType.INFO, "stopped audio (sample)")
        else:
            log(LogType.INFO, "failed to stop audio (sample)")

    def change_sample_volume(self, sample: SampleInstance, volume: float) -> None:
        """Set the gain of an instance; raise EngineError for a negative gain."""
        if volume < 0:
            raise EngineError(f"failed to change sample volume to {volume:.6f}")
        sample.gain = volume
        if sample.playing:
            sample.channel.set_volume(volume)

    def change_sample_position(self, sample: SampleInstance, position: float) -> None:
        """Move an instance to ``position`` seconds; raise EngineError outside the sound."""
        frame = int(sample.frequency * position)
        if position < 0 or frame > sample.length:
            raise EngineError(f"failed to change sample position to {position:.6f} s")
        sample.position = frame
        if sample.playing:
            sample.play()

    def get_sample_length(self, sample: SampleInstance) -> int:
        """Return the length of an instance in whole seconds."""
        return sample.length // sample.frequency