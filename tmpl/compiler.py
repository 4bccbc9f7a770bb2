"""Compile a token list into a reusable render step.

All structural work (classifying tokens, splitting data paths) happens
here, once. Rendering is a loop over prepared steps; no source code is
generated or evaluated.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from tmpl.paths import lookup, split_path, to_text
from tmpl.tokens import Interpolation, Literal, Token


@dataclass(frozen=True)
class EmitLiteral:
    """Emit fixed text."""

    text: str

    def __call__(self, data: Any) -> str:
        return self.text


@dataclass(frozen=True)
class EmitLookup:
    """Emit the value found at a data path, or "" if it doesn't resolve."""

    segments: tuple[str, ...]
    expr: str

    def __call__(self, data: Any) -> str:
        return to_text(lookup(data, self.segments))


Step = EmitLiteral | EmitLookup


class RenderStep:
    """Compiled template: a pure function from data context to text.

    Holds no reference to any data context and can be applied to as many
    contexts as needed, from any thread.
    """

    __slots__ = ("_steps",)

    def __init__(self, steps: Iterable[Step]):
        self._steps: tuple[Step, ...] = tuple(steps)

    @property
    def steps(self) -> tuple[Step, ...]:
        return self._steps

    @property
    def variables(self) -> list[str]:
        """Data path expressions referenced by the template, in first-use order."""
        seen: dict[str, None] = {}
        for step in self._steps:
            if isinstance(step, EmitLookup):
                seen.setdefault(step.expr, None)
        return list(seen)

    def __call__(self, data: Mapping[str, Any] | None = None) -> str:
        if data is None:
            data = {}
        return "".join(step(data) for step in self._steps)

    def __repr__(self) -> str:
        return f"RenderStep(steps={len(self._steps)}, variables={self.variables!r})"


def _compile_token(token: Token) -> Step:
    if isinstance(token, Literal):
        return EmitLiteral(token.text)
    if isinstance(token, Interpolation):
        return EmitLookup(segments=split_path(token.expr), expr=token.expr)
    raise TypeError(f"Unknown token type: {type(token).__name__}")


def compile_tokens(tokens: Iterable[Token]) -> RenderStep:
    """Build a RenderStep from tokenizer output."""
    return RenderStep(_compile_token(token) for token in tokens)
