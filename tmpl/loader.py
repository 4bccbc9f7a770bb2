"""Template sources.

The engine only needs `read(path) -> str`. Loaders translate their own
failures into TemplateNotFoundError / TemplateReadError so callers can
tell a missing template from a broken one.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Protocol

from tmpl.errors import TemplateNotFoundError, TemplateReadError

logger = logging.getLogger(__name__)


class TemplateLoader(Protocol):
    """Anything that can return template text for a resolved path."""

    def read(self, path: str) -> str: ...


class FileSystemLoader:
    """Read templates from disk. Never writes."""

    def __init__(self, encoding: str = "utf-8"):
        self._encoding = encoding

    @property
    def encoding(self) -> str:
        return self._encoding

    def read(self, path: str) -> str:
        try:
            # newline="" keeps \r\n and \r exactly as stored
            with Path(path).open(encoding=self._encoding, newline="") as f:
                return f.read()
        except (FileNotFoundError, IsADirectoryError, NotADirectoryError) as e:
            raise TemplateNotFoundError(path) from e
        except UnicodeDecodeError as e:
            raise TemplateReadError(path, f"not valid {self._encoding}") from e
        except OSError as e:
            logger.warning(f"Failed to read template {path}: {e}")
            raise TemplateReadError(path, e.strerror or str(e)) from e


class DictLoader:
    """Serve templates from an in-memory mapping of path -> text."""

    def __init__(self, templates: Mapping[str, str]):
        self._templates = dict(templates)

    def read(self, path: str) -> str:
        try:
            return self._templates[path]
        except KeyError:
            raise TemplateNotFoundError(path) from None
