"""Inspector logic: list current and rotated log files and resolve tag symlinks."""

import os
from datetime import datetime

from logfiles.naming import ROTATION_FORMAT, logical_name


def list_log_files(log_dir: str, program: str) -> list[str]:
    """Return current files, rotated files and tag symlinks for program, sorted by name."""
    if not os.path.isdir(log_dir):
        return []
    prefix = program + "."
    files = []
    for name in os.listdir(log_dir):
        path = os.path.join(log_dir, name)
        if name.startswith(prefix):
            files.append(name)
        elif os.path.islink(path) and os.readlink(path) == logical_name(program, name)[0]:
            files.append(name)
    files.sort()
    return files


def get_rotated_files(log_dir: str, program: str, tag: str) -> list[str]:
    """List rotated files for tag sorted oldest-first (lexicographic on timestamp suffix)."""
    return [
        name for name in list_log_files(log_dir, program)
        if parse_rotation_timestamp(name, program, tag) is not None
    ]


def parse_rotation_timestamp(filename: str, program: str, tag: str) -> datetime | None:
    """Extract the rotation timestamp from a rotated filename. Returns None on failure."""
    prefix = logical_name(program, tag)[0] + "."
    if not filename.startswith(prefix):
        return None
    try:
        return datetime.strptime(filename[len(prefix):], ROTATION_FORMAT)
    except ValueError:
        return None


def current_target(log_dir: str, tag: str) -> str | None:
    """Return what the tag symlink points at, or None when there is no symlink."""
    path = os.path.join(log_dir, tag)
    if not os.path.islink(path):
        return None
    return os.readlink(path)
