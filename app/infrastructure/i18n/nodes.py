"""Parsed template model.

A template parses into a ``TemplateAST``: an ordered tuple of ``TextNode``
and ``PlaceholderNode`` values. Nodes are immutable, compare structurally
and are shared between renders through the template cache.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, Iterator, Optional, Tuple

from infrastructure.i18n.exceptions import (
    FormatterError,
    TemplateSyntaxError,
    UnsupportedOperationError,
    UnsupportedTypeError,
    ValueNotFoundError,
)
from infrastructure.i18n.formatters import FormatterRegistry
from infrastructure.i18n.values import resolve

CONDITIONAL_OPERATORS = ("eq", "gt", "lt")


@dataclass(frozen=True)
class RenderContext:
    """Collaborators a node needs while evaluating.

    Attributes:
        registry: Formatter registry used for formatter chains.
        render_branch: Callback rendering a conditional branch template
            one level deeper, through the cache.
    """

    registry: FormatterRegistry
    render_branch: Callable[[str, Any], str]


class Node(ABC):
    """Base class for template nodes."""

    @abstractmethod
    def evaluate(self, args: Any, context: RenderContext) -> str:
        """Render this node against the argument bag."""
        pass


@dataclass(frozen=True)
class TextNode(Node):
    """Literal text, emitted verbatim."""

    text: str

    def evaluate(self, args: Any, context: RenderContext) -> str:
        return self.text


@dataclass(frozen=True)
class FormatterCall:
    """One ``name:arg`` step of a formatter chain."""

    name: str
    arg: str = ""


@dataclass(frozen=True)
class Conditional:
    """Ternary selection between two raw branch templates.

    Branches are kept unparsed; only the selected one is rendered.
    """

    op: str
    test_value: str
    true_template: str
    false_template: str


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float, Decimal)) and not isinstance(value, bool)


def compare_values(value: Any, op: str, test_value: str) -> bool:
    """Compare a formatted value against a conditional's test value.

    Numbers compare as floats with eq, gt and lt. Strings support eq only.

    Raises:
        TemplateSyntaxError: If a numeric comparison has a non-numeric test value.
        UnsupportedOperationError: If op does not apply to the value.
        UnsupportedTypeError: If the value is neither a number nor a string.
    """
    if _is_number(value):
        try:
            right = float(test_value)
        except ValueError as e:
            raise TemplateSyntaxError(
                f"invalid numeric test value: {test_value!r}"
            ) from e
        left = float(value)
        if op == "eq":
            return left == right
        if op == "gt":
            return left > right
        if op == "lt":
            return left < right
        raise UnsupportedOperationError(f"unknown op: {op}")

    if isinstance(value, str):
        if op == "eq":
            return value == test_value
        raise UnsupportedOperationError(f"unsupported string op: {op}")

    raise UnsupportedTypeError(
        f"unsupported type for compare: {type(value).__name__}"
    )


@dataclass(frozen=True)
class PlaceholderNode(Node):
    """A ``{path | formatter:arg | op:value?true:false}`` placeholder."""

    path: str
    formatters: Tuple[FormatterCall, ...] = ()
    conditional: Optional[Conditional] = None

    def __post_init__(self):
        if not self.path:
            raise TemplateSyntaxError("placeholder has empty path")

    def evaluate(self, args: Any, context: RenderContext) -> str:
        value, found = resolve(args, self.path)
        if not found:
            raise ValueNotFoundError(self.path)

        for call in self.formatters:
            formatter = context.registry.get(call.name)
            try:
                value = formatter(value, call.arg)
            except Exception as e:
                raise FormatterError(call.name, str(e)) from e

        if self.conditional is not None:
            cond = self.conditional
            if compare_values(value, cond.op, cond.test_value):
                return context.render_branch(cond.true_template, args)
            return context.render_branch(cond.false_template, args)

        return str(value)


@dataclass(frozen=True)
class TemplateAST:
    """Ordered nodes of a parsed template. Empty is valid."""

    nodes: Tuple[Node, ...] = field(default_factory=tuple)

    def evaluate(self, args: Any, context: RenderContext) -> str:
        """Concatenate every node's output, stopping at the first failure."""
        return "".join(node.evaluate(args, context) for node in self.nodes)

    def placeholders(self) -> Iterator[PlaceholderNode]:
        for node in self.nodes:
            if isinstance(node, PlaceholderNode):
                yield node

    def __iter__(self) -> Iterator[Node]:
        return iter(self.nodes)

    def __len__(self) -> int:
        return len(self.nodes)
