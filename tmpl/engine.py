"""Template engine.

Renders `{{ path }}` placeholders in template files under a fixed root:

    engine = TemplateEngine("templates")
    engine.render("greeting.txt", {"user": {"name": "Ada"}})

Each render is one linear pass: read -> tokenize -> compile -> execute.
The only state an engine carries is its settings (and, when enabled, the
render step cache).
"""

import logging
import os
from collections.abc import Mapping
from typing import Any

from tmpl.cache import RenderStepCache
from tmpl.compiler import RenderStep, compile_tokens
from tmpl.config import EngineSettings
from tmpl.loader import FileSystemLoader, TemplateLoader
from tmpl.tokenizer import tokenize

logger = logging.getLogger(__name__)


class TemplateEngine:
    """Renders template files from a root directory."""

    def __init__(
        self,
        root: str | os.PathLike,
        loader: TemplateLoader | None = None,
        *,
        strict: bool = True,
        cache: bool = False,
        encoding: str = "utf-8",
    ):
        self._settings = EngineSettings(
            root=os.fspath(root),
            encoding=encoding,
            strict=strict,
            cache_enabled=cache,
        )
        self._loader = loader if loader is not None else FileSystemLoader(encoding=encoding)
        self._cache = RenderStepCache() if cache else None

    @classmethod
    def init(cls, root: str | os.PathLike) -> "TemplateEngine":
        """Create an engine with default settings."""
        return cls(root)

    @classmethod
    def from_settings(
        cls, settings: EngineSettings, loader: TemplateLoader | None = None
    ) -> "TemplateEngine":
        """Create an engine from an EngineSettings instance."""
        return cls(
            settings.root,
            loader,
            strict=settings.strict,
            cache=settings.cache_enabled,
            encoding=settings.encoding,
        )

    @property
    def root(self) -> str:
        return self._settings.root

    @property
    def settings(self) -> EngineSettings:
        return self._settings

    @property
    def cache(self) -> RenderStepCache | None:
        return self._cache

    def resolve(self, path: str) -> str:
        """Join a template path onto the root directory."""
        if self.root == "/":
            return f"/{path}"
        return f"{self.root}/{path}"

    def _compile_text(self, text: str, name: str) -> RenderStep:
        tokens = tokenize(text, name=name, strict=self._settings.strict)
        logger.debug(f"Tokenized {name}: {len(tokens)} tokens")
        return compile_tokens(tokens)

    def compile(self, path: str) -> RenderStep:
        """Read and compile a template without rendering it.

        Raises:
            TemplateNotFoundError: No template at the resolved path
            TemplateReadError: Template could not be read
            TemplateParseError: Template has an unterminated '{{'
        """
        full_path = self.resolve(path)
        text = self._loader.read(full_path)

        if self._cache is not None:
            return self._cache.get_or_compile(
                full_path, text, lambda t: self._compile_text(t, full_path)
            )
        return self._compile_text(text, full_path)

    def render(self, path: str, data: Mapping[str, Any] | None = None) -> str:
        """Render the template at root/path with the given data.

        Missing data paths render as "". Read and parse errors propagate
        and no partial output is produced.
        """
        step = self.compile(path)
        result = step(data if data is not None else {})
        logger.debug(f"Rendered {path} ({len(result)} chars)")
        return result

    def render_string(
        self,
        template: str,
        data: Mapping[str, Any] | None = None,
        name: str = "<string>",
    ) -> str:
        """Render template text directly, bypassing the loader and cache."""
        step = self._compile_text(template, name)
        return step(data if data is not None else {})
