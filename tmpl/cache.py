"""Compiled render step cache.

Entries are keyed by resolved path and validated against a SHA-256 digest
of the template text, so an edited template is recompiled on next use.
Thread-safe for concurrent renders.
"""

import hashlib
import logging
import threading
from collections.abc import Callable

from tmpl.compiler import RenderStep

logger = logging.getLogger(__name__)


def _digest(text: str) -> str:
    return hashlib.sha256(text.encode("utf-8", "surrogatepass")).hexdigest()


class RenderStepCache:
    """Maps path -> (content digest, RenderStep)."""

    def __init__(self):
        self._entries: dict[str, tuple[str, RenderStep]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def get_or_compile(
        self,
        path: str,
        text: str,
        compile_fn: Callable[[str], RenderStep],
    ) -> RenderStep:
        """Return the cached step for this path and text, compiling on a miss.

        Compilation runs outside the lock. Two threads missing on the same
        key may both compile; RenderStep is pure, so the last write wins
        harmlessly.
        """
        digest = _digest(text)

        with self._lock:
            entry = self._entries.get(path)
            if entry is not None and entry[0] == digest:
                self._hits += 1
                return entry[1]
            self._misses += 1

        step = compile_fn(text)

        with self._lock:
            self._entries[path] = (digest, step)
        logger.debug(f"Cached render step for {path}")
        return step

    def invalidate(self, path: str | None = None) -> None:
        """Drop one path, or everything when path is None."""
        with self._lock:
            if path is None:
                count = len(self._entries)
                self._entries.clear()
                logger.info(f"Cleared {count} cached render steps")
            elif self._entries.pop(path, None) is not None:
                logger.info(f"Invalidated cached render step for {path}")

    def stats(self) -> dict:
        """Get cache counters."""
        with self._lock:
            return {
                "entries": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
