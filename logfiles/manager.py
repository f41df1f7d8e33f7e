"""Create, rotate and reopen per-tag log files across candidate directories."""

import logging
import os
import threading
from dataclasses import dataclass
from datetime import datetime
from typing import IO

from logfiles.dirs import DirectoryResolver
from logfiles.errors import (
    CreateFailedError,
    DirectoryCreateError,
    NoDestinationError,
    NotFoundError,
)
from logfiles.naming import logical_name, rotated_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SideEffect:
    """Outcome of a best-effort filesystem operation.

    ``attempted`` is False when the operation was skipped; ``error`` holds the
    failure that was ignored, if any.
    """

    attempted: bool
    error: OSError | None = None

    @property
    def ok(self) -> bool:
        return self.attempted and self.error is None


SKIPPED = SideEffect(attempted=False)


def _best_effort(func, *args) -> SideEffect:
    try:
        func(*args)
    except OSError as e:
        return SideEffect(attempted=True, error=e)
    return SideEffect(attempted=True)


class LogFileManager:
    """Hands out writable log files named after a program and a tag.

    The returned file objects belong to the caller. Creates for the same tag
    are serialized within this manager; separate processes writing the same
    tag in the same directory can still race on rename-then-create.
    """

    def __init__(self, program: str, resolver: DirectoryResolver | None = None):
        self._program = program
        self._resolver = resolver or DirectoryResolver()
        self._locks_guard = threading.Lock()
        self._tag_locks: dict[str, threading.Lock] = {}
        # creation time of the current file per tag, written under the tag lock
        self._created: dict[str, datetime] = {}

    @property
    def program(self) -> str:
        return self._program

    def log_dirs(self) -> tuple[str, ...]:
        dirs = self._resolver.resolve()
        if not dirs:
            raise NoDestinationError()
        return dirs

    def _tag_lock(self, tag: str) -> threading.Lock:
        with self._locks_guard:
            lock = self._tag_locks.get(tag)
            if lock is None:
                lock = self._tag_locks[tag] = threading.Lock()
            return lock

    def rotate(self, directory: str, tag: str, t: datetime | None = None) -> SideEffect:
        """Move an existing current file for tag aside under a timestamped name.

        ``t`` is when the displaced file was created. Without it the file's
        modification time is used, which covers files left by an earlier run.
        """
        name, _ = logical_name(self._program, tag)
        path = os.path.join(directory, name)
        if not os.path.exists(path):
            return SKIPPED
        if t is None:
            try:
                t = datetime.fromtimestamp(os.stat(path).st_mtime)
            except OSError as e:
                logger.warning("Could not rotate %s: %s", path, e)
                return SideEffect(attempted=True, error=e)
        new_name, _ = rotated_name(self._program, tag, t)
        result = _best_effort(os.rename, path, os.path.join(directory, new_name))
        if result.error is not None:
            logger.warning("Could not rotate %s: %s", path, result.error)
        else:
            logger.info("Rotated %s -> %s", name, new_name)
        return result

    def update_symlink(self, directory: str, tag: str) -> tuple[SideEffect, SideEffect]:
        """Point the tag's symlink at the current file. Errors are ignored."""
        name, link = logical_name(self._program, tag)
        symlink = os.path.join(directory, link)
        removed = SKIPPED
        if os.path.lexists(symlink):
            removed = _best_effort(os.remove, symlink)
        linked = _best_effort(os.symlink, name, symlink)
        for effect in (removed, linked):
            if effect.error is not None:
                logger.debug("Symlink update for %s failed: %s", symlink, effect.error)
        return removed, linked

    def create(self, tag: str, t: datetime | None = None) -> tuple[IO[str], str]:
        """Create a fresh log file for tag, rotating any previous one.

        Returns the open file and its absolute path. A directory that cannot be
        created aborts the attempt; a file that cannot be created falls through
        to the next candidate directory.
        """
        dirs = self.log_dirs()
        t = t or datetime.now()
        name, _ = logical_name(self._program, tag)

        with self._tag_lock(tag):
            last_error = None
            for directory in dirs:
                fname = os.path.abspath(os.path.join(directory, name))
                self.rotate(directory, tag, self._created.get(tag))

                try:
                    os.makedirs(directory, mode=0o777, exist_ok=True)
                except OSError as e:
                    raise DirectoryCreateError(directory, e) from e

                try:
                    f = open(fname, "w", encoding="utf-8")
                except OSError as e:
                    logger.warning("Cannot create %s: %s", fname, e)
                    last_error = e
                    continue

                self._created[tag] = t
                self.update_symlink(directory, tag)
                return f, fname

        raise CreateFailedError(last_error) from last_error

    def open(self, tag: str) -> IO[str]:
        """Reopen the current log file for tag without truncating or rotating it.

        The returned file is positioned at the end so writes append.
        """
        dirs = self.log_dirs()
        name, _ = logical_name(self._program, tag)

        last_error = None
        for directory in dirs:
            fname = os.path.join(directory, name)
            if not os.path.exists(fname):
                continue
            try:
                f = open(fname, "r+", encoding="utf-8")
            except OSError as e:
                last_error = e
                continue
            f.seek(0, os.SEEK_END)
            return f

        if last_error is not None:
            raise NotFoundError(tag, last_error) from last_error
        raise NotFoundError(tag)
