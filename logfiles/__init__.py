"""On-disk log file management: naming, rotation-on-create and per-tag symlinks."""

import threading
from datetime import datetime
from typing import IO

from logfiles.config import Config, load_config
from logfiles.dirs import DirectoryResolver
from logfiles.errors import (
    CreateFailedError,
    DirectoryCreateError,
    LogFileError,
    NoDestinationError,
    NotFoundError,
)
from logfiles.identity import ProcessIdentity, detect_identity
from logfiles.manager import LogFileManager

__all__ = [
    "Config",
    "CreateFailedError",
    "DirectoryCreateError",
    "DirectoryResolver",
    "LogFileError",
    "LogFileManager",
    "NoDestinationError",
    "NotFoundError",
    "ProcessIdentity",
    "configure",
    "create_log_file",
    "get_manager",
    "open_existing_log_file",
]

_default_lock = threading.Lock()
_default_manager: LogFileManager | None = None


def _build_manager(config: Config) -> LogFileManager:
    identity = detect_identity(config.program or None)
    return LogFileManager(identity.program, DirectoryResolver(config.log_dir))


def configure(config: Config | None = None) -> LogFileManager:
    """Install the process-wide manager. Later calls replace it."""
    global _default_manager
    manager = _build_manager(config or load_config())
    with _default_lock:
        _default_manager = manager
    return manager


def get_manager() -> LogFileManager:
    """Return the process-wide manager, building it from env config on first use."""
    global _default_manager
    with _default_lock:
        if _default_manager is None:
            _default_manager = _build_manager(load_config())
        return _default_manager


def create_log_file(tag: str, t: datetime | None = None) -> tuple[IO[str], str]:
    return get_manager().create(tag, t)


def open_existing_log_file(tag: str) -> IO[str]:
    return get_manager().open(tag)
