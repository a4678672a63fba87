"""Simple logging to the console and to a log file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


class LogType(Enum):
    """Kinds of log message; the value is the label printed before the line."""

    VERBOSE = "VERBOSE"
    DEBUGGING = "DEBUGGING"
    INFO = "INFO"
    WARN = "WARN"
    ERROR = "ERROR"


@dataclass
class _Config:
    enabled: bool = False
    log_verbose: bool = False
    file_path: PathLike = "log.txt"


_config = _Config()


def set_config(enabled: bool = False, log_verbose: bool = False, file_path: PathLike = "log.txt") -> None:
    """Set the global logging options and empty the log file."""
    _config.enabled = enabled
    _config.log_verbose = log_verbose
    _config.file_path = file_path
    with open(file_path, "w", encoding="utf-8"):
        pass


def can_log(log_type: LogType) -> bool:
    """Return whether messages of ``log_type`` are written under the current options."""
    return _config.enabled and (log_type is not LogType.VERBOSE or _config.log_verbose)


def log(log_type: LogType = LogType.DEBUGGING, *args: object) -> None:
    """Write one line made of ``args`` joined without separators, prefixed by its label."""
    if not can_log(log_type):
        return
    line = f"[{log_type.value}] " + "".join(str(arg) for arg in args)
    print(line)
    with open(_config.file_path, "a", encoding="utf-8") as stream:
        stream.write(line + "\n")