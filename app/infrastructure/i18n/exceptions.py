"""Custom exceptions for the template engine.

Parse-time syntax problems are absorbed by the parser, which degrades the
offending span to literal text. Every other error aborts the render call
that raised it.
"""

from typing import TYPE_CHECKING, List, Optional

if TYPE_CHECKING:
    from infrastructure.i18n.validator import ValidationIssue


class TemplateError(Exception):
    """Base exception for all template engine errors.

    Example:
        try:
            engine.render(text, args)
        except TemplateError as e:
            logger.error("render_failed", error=str(e))
    """

    pass


class TemplateSyntaxError(TemplateError):
    """Raised when a placeholder, conditional or formatter argument is malformed.

    Example:
        >>> parse_placeholder("   ")
        Traceback (most recent call last):
        ...
        TemplateSyntaxError: empty placeholder expression
    """

    pass


class ValueNotFoundError(TemplateError):
    """Raised when a placeholder path does not resolve against the arguments."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"value not found: {path}")


class UnknownFormatterError(TemplateError):
    """Raised when a formatter name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"unknown formatter: {name}")


class FormatterError(TemplateError):
    """Raised when a formatter rejects its input or argument.

    The original exception is available as ``__cause__``.

    Attributes:
        formatter: Name of the formatter that failed.
    """

    def __init__(self, formatter: str, message: str):
        self.formatter = formatter
        super().__init__(f"formatter {formatter!r} failed: {message}")


class UnsupportedOperationError(TemplateError):
    """Raised when a conditional operator cannot be applied to the value."""

    pass


class UnsupportedTypeError(TemplateError):
    """Raised when a conditional compares a value of an unsupported type."""

    pass


class RenderDepthExceededError(TemplateError):
    """Raised when conditional branches nest deeper than the engine allows.

    Guards against a branch that re-renders a template containing itself.
    """

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"render depth exceeded maximum of {max_depth}")


class TemplateValidationError(TemplateError):
    """Raised by ``TemplateEngine.check`` when a template has lint issues.

    Attributes:
        issues: Every issue found, in report order.
    """

    def __init__(self, issues: List["ValidationIssue"], message: Optional[str] = None):
        self.issues = issues
        super().__init__(message or "; ".join(issue.message for issue in issues))
