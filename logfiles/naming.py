"""Filename scheme for current and rotated log files."""

from datetime import datetime

ROTATION_FORMAT = "%Y%m%d-%H%M%S"


def logical_name(program: str, tag: str) -> tuple[str, str]:
    """Return the stable file name for tag and the name of its symlink."""
    return f"{program}.{tag}", tag


def rotated_name(program: str, tag: str, t: datetime) -> tuple[str, str]:
    """Return the timestamped name for a displaced file, plus its link base.

    The timestamp is rendered in the wall clock of ``t`` itself, so an aware
    UTC datetime yields UTC digits and a naive one yields local time.
    """
    return f"{program}.{tag}.{t.strftime(ROTATION_FORMAT)}", f"{program}.{tag}"
