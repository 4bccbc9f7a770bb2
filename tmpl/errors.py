"""Template engine exceptions.

Lookup misses are not errors: an absent data path renders as "".
Everything that stops a render from producing its full output is a
TemplateError subclass.
"""


class TemplateError(Exception):
    """Base class for all template engine failures."""


class TemplateNotFoundError(TemplateError):
    """No template exists at the resolved path."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Template not found: {path}")


class TemplateReadError(TemplateError):
    """Template exists but could not be read or decoded."""

    def __init__(self, path: str, reason: str = ""):
        self.path = path
        message = f"Could not read template: {path}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class TemplateParseError(TemplateError):
    """An interpolation was opened with '{{' but never closed.

    Line and column are 1-based and point at the opening delimiter.
    """

    def __init__(self, line: int, column: int, name: str | None = None):
        self.line = line
        self.column = column
        self.name = name
        super().__init__(f"{name or '<template>'}:{line}:{column}: unterminated '{{{{'")
