"""Tests for compiling tokens into render steps."""

import pytest

from tmpl.compiler import EmitLiteral, EmitLookup, RenderStep, compile_tokens
from tmpl.tokenizer import tokenize
from tmpl.tokens import Literal


def _render(template: str, data: dict) -> str:
    return compile_tokens(tokenize(template))(data)


class TestCompileTokens:
    """Test the steps produced for each token type."""

    def test_steps(self):
        step = compile_tokens(tokenize("Hi {{ user.name }}!"))
        assert step.steps == (
            EmitLiteral("Hi "),
            EmitLookup(segments=("user", "name"), expr="user.name"),
            EmitLiteral("!"),
        )

    def test_empty_tokens(self):
        step = compile_tokens([])
        assert step.steps == ()
        assert step({"a": 1}) == ""

    def test_unknown_token_type(self):
        with pytest.raises(TypeError):
            compile_tokens(["not a token"])

    def test_variables_in_first_use_order(self):
        step = compile_tokens(tokenize("{{b}} {{a.x}} {{b}}"))
        assert step.variables == ["b", "a.x"]


class TestRenderStep:
    """Test executing compiled templates."""

    def test_hello_world(self):
        assert _render("Hello {{name}}!", {"name": "World"}) == "Hello World!"

    def test_missing_key(self):
        assert _render("Hello {{name}}!", {}) == "Hello !"

    def test_adjacent(self):
        assert _render("{{a}}-{{b}}", {"a": "x", "b": "y"}) == "x-y"

    def test_dotted(self):
        assert _render("{{user.name}}", {"user": {"name": "Ada"}}) == "Ada"

    def test_dotted_missing(self):
        assert _render("{{user.name}}", {"user": {}}) == ""

    def test_falsy_values_render_empty(self):
        data = {"zero": 0, "none": None, "no": False, "blank": ""}
        assert _render("[{{zero}}|{{none}}|{{no}}|{{blank}}]", data) == "[|||]"

    def test_numbers(self):
        assert _render("{{n}} items", {"n": 3}) == "3 items"

    def test_unsupported_expression_degrades(self):
        assert _render("x{{ name | upper }}y", {"name": "ada"}) == "xy"

    def test_quotes_and_backslashes_are_plain_text(self):
        template = 'He said "{{word}}" \\n \'ok\' ${x} `y`'
        assert _render(template, {"word": "hi"}) == 'He said "hi" \\n \'ok\' ${x} `y`'

    def test_none_data(self):
        assert compile_tokens([Literal("a")])(None) == "a"

    def test_reusable_across_contexts(self):
        step = compile_tokens(tokenize("{{greeting}}, {{name}}"))
        assert step({"greeting": "Hi", "name": "Ada"}) == "Hi, Ada"
        assert step({"greeting": "Bye", "name": "Bob"}) == "Bye, Bob"
        assert step({}) == ", "

    def test_compiling_twice_is_idempotent(self):
        tokens = tokenize("{{a}} and {{b.c}}")
        data = {"a": 1, "b": {"c": "two"}}
        assert compile_tokens(tokens)(data) == compile_tokens(tokens)(data) == "1 and two"

    def test_does_not_mutate_data(self):
        data = {"user": {"name": "Ada"}}
        _render("{{user.name}} {{user.age}}", data)
        assert data == {"user": {"name": "Ada"}}

    def test_static_text_unchanged(self):
        assert _render("static text", {"static": "x"}) == "static text"

    def test_repr(self):
        assert repr(RenderStep([EmitLookup(("a",), "a")])) == "RenderStep(steps=1, variables=['a'])"
