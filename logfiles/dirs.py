"""Candidate directory resolution, computed once per resolver."""

import logging
import tempfile
import threading

logger = logging.getLogger(__name__)


class DirectoryResolver:
    """Thread-safe, run-once computation of the candidate log directories."""

    def __init__(self, override: str = ""):
        self._override = override
        self._lock = threading.Lock()
        self._done = False
        self._dirs: tuple[str, ...] = ()

    def _compute(self) -> tuple[str, ...]:
        if self._override:
            return (self._override,)
        return (tempfile.gettempdir(),)

    def resolve(self) -> tuple[str, ...]:
        """Return the candidate directories in priority order.

        Writability is not checked here; it surfaces when a file is created.
        """
        with self._lock:
            if not self._done:
                self._dirs = self._compute()
                self._done = True
                logger.debug("Candidate log dirs: %s", ", ".join(self._dirs))
            return self._dirs

    @property
    def resolved(self) -> bool:
        with self._lock:
            return self._done
