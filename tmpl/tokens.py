"""Token types produced by the tokenizer.

A template is an ordered list of tokens. Joining every token's `source`
gives back the template text exactly as it was written.
"""

from collections.abc import Iterable
from dataclasses import dataclass

OPEN = "{{"
CLOSE = "}}"


@dataclass(frozen=True)
class Literal:
    """Plain text copied to the output verbatim."""

    text: str

    @property
    def source(self) -> str:
        return self.text


@dataclass(frozen=True)
class Interpolation:
    """A {{ expr }} placeholder.

    `expr` is the trimmed data path; `raw` keeps the inner text as written
    (surrounding whitespace included).
    """

    expr: str
    raw: str

    @property
    def source(self) -> str:
        return f"{OPEN}{self.raw}{CLOSE}"


Token = Literal | Interpolation


def detokenize(tokens: Iterable[Token]) -> str:
    """Rebuild the original template text from its tokens."""
    return "".join(token.source for token in tokens)
