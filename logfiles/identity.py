"""Process identity: program, pid, host and user, resolved once at startup."""

import getpass
import logging
import os
import socket
import sys
from dataclasses import dataclass

logger = logging.getLogger(__name__)

UNKNOWN_HOST = "unknownhost"
UNKNOWN_USER = "unknownuser"


@dataclass(frozen=True)
class ProcessIdentity:
    program: str
    pid: int
    host: str = UNKNOWN_HOST
    user: str = UNKNOWN_USER


def short_hostname(hostname: str) -> str:
    """Truncate at the first period: "www.google.com" becomes "www"."""
    return hostname.split(".", 1)[0]


def program_name(argv0: str | None = None) -> str:
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv and sys.argv[0] else "python"
    return os.path.basename(argv0) or "python"


def detect_identity(program: str | None = None) -> ProcessIdentity:
    host = UNKNOWN_HOST
    try:
        host = short_hostname(socket.gethostname()) or UNKNOWN_HOST
    except OSError as e:
        logger.debug("Hostname lookup failed: %s", e)

    user = UNKNOWN_USER
    try:
        user = getpass.getuser()
    except (OSError, KeyError) as e:
        logger.debug("User lookup failed: %s", e)
    # Windows user names may carry a DOMAIN\ prefix
    user = user.replace("\\", "_")

    return ProcessIdentity(
        program=program or program_name(),
        pid=os.getpid(),
        host=host,
        user=user,
    )
