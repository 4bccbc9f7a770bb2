"""Split raw template text into literal and interpolation tokens."""

import logging
import re

from tmpl.errors import TemplateParseError
from tmpl.tokens import OPEN, Interpolation, Literal, Token

logger = logging.getLogger(__name__)

# Non-greedy: the first "}}" after a "{{" closes it, so placeholders never nest.
# Inner text excludes line terminators, so a placeholder must open and close
# on one line.
INTERPOLATION_PATTERN = re.compile(r"\{\{([^\r\n\u2028\u2029]*?)\}\}")


def _position(template: str, offset: int) -> tuple[int, int]:
    """Convert a string offset to a 1-based (line, column) pair."""
    line = template.count("\n", 0, offset) + 1
    line_start = template.rfind("\n", 0, offset) + 1
    return line, offset - line_start + 1


def _literal(template: str, start: int, end: int, name: str | None, strict: bool) -> Literal | None:
    text = template[start:end]
    if not text:
        return None

    stray = text.find(OPEN)
    if stray != -1:
        line, column = _position(template, start + stray)
        if strict:
            raise TemplateParseError(line, column, name)
        logger.warning(f"Unterminated '{{{{' in {name or '<template>'} at {line}:{column}, treating as text")

    return Literal(text)


def tokenize(template: str, name: str | None = None, strict: bool = True) -> list[Token]:
    """Tokenize a template.

    Args:
        template: Raw template text
        name: Template name used in parse error messages
        strict: Raise TemplateParseError for a '{{' that is never closed.
            When False the stray delimiter is kept as literal text.

    Returns:
        Ordered list of Literal and Interpolation tokens. Empty literals
        are never emitted, so an empty template yields an empty list.
    """
    tokens: list[Token] = []
    pos = 0

    for match in INTERPOLATION_PATTERN.finditer(template):
        literal = _literal(template, pos, match.start(), name, strict)
        if literal is not None:
            tokens.append(literal)

        raw = match.group(1)
        tokens.append(Interpolation(expr=raw.strip(), raw=raw))
        pos = match.end()

    literal = _literal(template, pos, len(template), name, strict)
    if literal is not None:
        tokens.append(literal)

    return tokens
