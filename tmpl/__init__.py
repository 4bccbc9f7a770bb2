"""Minimal text templating.

Templates are plain text with `{{ dotted.path }}` placeholders:

    from tmpl import TemplateEngine

    engine = TemplateEngine("templates")
    engine.render("welcome.txt", {"user": {"name": "Ada"}})

Missing paths, None, False and zero render as "". There are no loops,
conditionals, filters or escapes.

Modules:
    tokenizer, tokens  split template text into literal and {{ }} tokens
    compiler, paths    build reusable render steps, resolve data paths
    engine, loader     read templates under a root and render them
    cache, config      optional compiled step cache, engine settings
    utils              standalone sequence, number and string helpers
"""

from tmpl.cache import RenderStepCache
from tmpl.compiler import EmitLiteral, EmitLookup, RenderStep, compile_tokens
from tmpl.config import EngineSettings
from tmpl.engine import TemplateEngine
from tmpl.errors import (
    TemplateError,
    TemplateNotFoundError,
    TemplateParseError,
    TemplateReadError,
)
from tmpl.loader import DictLoader, FileSystemLoader, TemplateLoader
from tmpl.tokenizer import tokenize
from tmpl.tokens import Interpolation, Literal, Token, detokenize
from tmpl import utils

__version__ = "0.1.0"

__all__ = [
    # Main API
    "TemplateEngine",
    "EngineSettings",
    # Pipeline
    "tokenize",
    "detokenize",
    "compile_tokens",
    "RenderStep",
    "EmitLiteral",
    "EmitLookup",
    "Literal",
    "Interpolation",
    "Token",
    # Loaders
    "TemplateLoader",
    "FileSystemLoader",
    "DictLoader",
    "RenderStepCache",
    # Errors
    "TemplateError",
    "TemplateNotFoundError",
    "TemplateReadError",
    "TemplateParseError",
    # Helpers
    "utils",
]
