"""Static template validation for lint tooling.

Checks brace balance over the raw text, then inspects every placeholder of
a lenient parse. Conditional branch templates are only checked for being
non-empty; placeholders nested inside them are not linted.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from infrastructure.i18n.formatters import FormatterRegistry, parse_integer
from infrastructure.i18n.nodes import CONDITIONAL_OPERATORS, PlaceholderNode
from infrastructure.i18n.parser import parse_template


class IssueCode(str, Enum):
    """Kinds of problems reported by the validator."""

    UNCLOSED_BRACE = "unclosed_brace"
    EXTRA_CLOSING_BRACE = "extra_closing_brace"
    EMPTY_PATH = "empty_path"
    EMPTY_FORMATTER_NAME = "empty_formatter_name"
    UNKNOWN_FORMATTER = "unknown_formatter"
    INVALID_FORMATTER_ARGUMENT = "invalid_formatter_argument"
    UNKNOWN_OPERATOR = "unknown_operator"
    EMPTY_BRANCH = "empty_branch"


@dataclass(frozen=True)
class ValidationIssue:
    """A single lint finding.

    Attributes:
        code: Kind of problem.
        message: Human readable description.
        position: Character offset for brace problems, None otherwise.
        placeholder: Path of the offending placeholder, if any.
    """

    code: IssueCode
    message: str
    position: Optional[int] = None
    placeholder: Optional[str] = None

    def __str__(self) -> str:
        return self.message


def check_braces(text: str) -> List[ValidationIssue]:
    """Report stray ``}`` characters and the start of an unclosed ``{``."""
    issues = []
    depth = 0
    first_open = -1
    for index, char in enumerate(text):
        if char == "{":
            if depth == 0:
                first_open = index
            depth += 1
        elif char == "}":
            if depth == 0:
                issues.append(
                    ValidationIssue(
                        IssueCode.EXTRA_CLOSING_BRACE,
                        f"extra closing '}}' at position {index}",
                        position=index,
                    )
                )
                continue
            depth -= 1

    if depth != 0:
        issues.append(
            ValidationIssue(
                IssueCode.UNCLOSED_BRACE,
                f"unclosed placeholder starting at position {first_open}",
                position=first_open,
            )
        )
    return issues


def _check_placeholder(
    node: PlaceholderNode, registry: FormatterRegistry
) -> List[ValidationIssue]:
    issues = []
    path = node.path

    def issue(code: IssueCode, message: str):
        issues.append(ValidationIssue(code, message, placeholder=path))

    if not path.strip():
        issue(IssueCode.EMPTY_PATH, "placeholder has empty path")

    for call in node.formatters:
        name = call.name.strip()
        if not name:
            issue(IssueCode.EMPTY_FORMATTER_NAME, "empty formatter name")
            continue
        if name not in registry:
            issue(IssueCode.UNKNOWN_FORMATTER, f"unknown formatter: {name}")
            continue
        if name == "number" and call.arg:
            try:
                parse_integer(call.arg)
            except ValueError:
                issue(
                    IssueCode.INVALID_FORMATTER_ARGUMENT,
                    f"invalid precision for number formatter: {call.arg!r}",
                )

    cond = node.conditional
    if cond is not None:
        if cond.op not in CONDITIONAL_OPERATORS:
            issue(
                IssueCode.UNKNOWN_OPERATOR,
                f"unknown conditional operator: {cond.op}",
            )
        if not cond.true_template.strip() or not cond.false_template.strip():
            issue(
                IssueCode.EMPTY_BRANCH,
                "invalid conditional expression: true/false branch must not be empty",
            )
    return issues


def validate_template(text: str, registry: FormatterRegistry) -> List[ValidationIssue]:
    """Lint a template without evaluating it.

    Args:
        text: Raw template text.
        registry: Registry used to check formatter names.

    Returns:
        Issues in report order: brace problems first, then placeholder problems
        in source order. Empty when the template is clean.
    """
    issues = check_braces(text)
    for node in parse_template(text).placeholders():
        issues.extend(_check_placeholder(node, registry))
    return issues
