"""Exceptions raised by the engine."""


class EngineError(RuntimeError):
    """Raised when the media backend fails to initialise, load or play something."""