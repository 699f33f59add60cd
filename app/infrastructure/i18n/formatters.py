"""Formatter registry and built-in formatters.

A formatter is a pure function ``(value, arg) -> value``. It signals bad
input by raising; the evaluator wraps the failure in ``FormatterError``.
"""

import re
import threading
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Dict, List

import structlog

from infrastructure.i18n.exceptions import TemplateSyntaxError, UnknownFormatterError

logger = structlog.get_logger()

FormatterFunc = Callable[[Any, str], Any]

DEFAULT_DATE_LAYOUT = "%Y-%m-%d"
DEFAULT_CURRENCY_SYMBOL = "$"

# Symbols stripped from currency strings before parsing
_KNOWN_CURRENCY_SYMBOLS = ("$", "¥", "€", "£")

_WORD_START = re.compile(r"\b(\w)")

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_integer(text: str) -> int:
    """Parse a formatter argument as a plain ASCII decimal integer.

    Underscores, whitespace and non-ASCII digits are rejected.

    Raises:
        ValueError: If text is not an optionally signed run of digits 0-9.
    """
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


class FormatterRegistry:
    """Thread-safe mapping of formatter names to formatter functions.

    Registration is expected during start-up. The lock keeps concurrent
    lookups and occasional registrations memory-safe; it does not order a
    late registration against a render that already saw the name missing.

    Attributes:
        _formatters: Dict mapping formatter name to function.
        _lock: Threading lock for thread-safe operations.
    """

    def __init__(self, include_builtins: bool = True):
        """Initialize the registry.

        Args:
            include_builtins: Register upper, lower, title, number, currency and date.
        """
        self._formatters: Dict[str, FormatterFunc] = {}
        self._lock = threading.Lock()
        if include_builtins:
            for name, func in BUILTIN_FORMATTERS.items():
                self._formatters[name] = func

    def register(self, name: str, func: FormatterFunc) -> None:
        """Register or replace a formatter.

        Args:
            name: Formatter name as written in templates.
            func: Callable taking (value, arg) and returning the new value.

        Raises:
            ValueError: If name is empty or func is not callable.
        """
        name = name.strip()
        if not name:
            raise ValueError("Formatter name must not be empty")
        if not callable(func):
            raise ValueError(f"Formatter '{name}' must be callable")

        with self._lock:
            replaced = name in self._formatters
            self._formatters[name] = func
        logger.info("formatter_registered", formatter=name, replaced=replaced)

    def get(self, name: str) -> FormatterFunc:
        """Get a formatter by name.

        Raises:
            UnknownFormatterError: If no formatter is registered under name.
        """
        with self._lock:
            func = self._formatters.get(name)
        if func is None:
            raise UnknownFormatterError(name)
        return func

    def apply(self, name: str, value: Any, arg: str = "") -> Any:
        """Apply a formatter by name.

        Raises:
            UnknownFormatterError: If name is not registered.
            Exception: Whatever the formatter itself raises.
        """
        return self.get(name)(value, arg)

    def names(self) -> List[str]:
        """Get the sorted list of registered formatter names."""
        with self._lock:
            return sorted(self._formatters)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._formatters


def _to_float(value: Any, formatter: str) -> float:
    if isinstance(value, bool):
        raise TypeError(
            f"{formatter} formatter requires numeric or numeric-string type, got bool"
        )
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    if isinstance(value, str):
        text = value.strip().replace(",", "")
        try:
            return float(text)
        except ValueError as e:
            raise ValueError(f"{formatter} formatter: cannot parse {value!r}") from e
    raise TypeError(
        f"{formatter} formatter requires numeric or numeric-string type, "
        f"got {type(value).__name__}"
    )


def _group_thousands(number: float, precision: int) -> str:
    return f"{number:,.{precision}f}"


def format_upper(value: Any, arg: str) -> str:
    return str(value).upper()


def format_lower(value: Any, arg: str) -> str:
    return str(value).lower()


def format_title(value: Any, arg: str) -> str:
    """Capitalize the first letter of each word, leaving the rest untouched."""
    return _WORD_START.sub(lambda m: m.group(1).upper(), str(value))


def format_number(value: Any, arg: str) -> str:
    """Format a number with thousands separators and ``arg`` decimals.

    Raises:
        TemplateSyntaxError: If arg is not a non-negative integer.
        ValueError: If a string value is not numeric.
        TypeError: If value is neither numeric nor a string.
    """
    precision = 0
    if arg:
        try:
            precision = parse_integer(arg)
        except ValueError:
            precision = -1
        if precision < 0:
            raise TemplateSyntaxError(f"number formatter: invalid precision {arg!r}")
    return _group_thousands(_to_float(value, "number"), precision)


def format_currency(value: Any, arg: str) -> str:
    """Format a number as money with two decimals and a leading symbol.

    Strings may already carry a currency symbol; it is stripped first.
    """
    symbol = arg or DEFAULT_CURRENCY_SYMBOL
    if isinstance(value, str):
        text = value.strip()
        for known in _KNOWN_CURRENCY_SYMBOLS + (symbol,):
            if text.startswith(known):
                text = text[len(known):]
        value = text
    return symbol + _group_thousands(_to_float(value, "currency"), 2)


def _parse_rfc3339(text: str) -> datetime:
    candidate = text.strip()
    if candidate[-1:] in ("Z", "z"):
        candidate = candidate[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError as e:
        raise TypeError(f"not an RFC 3339 timestamp: {text!r}") from e
    if "T" not in candidate.upper() or parsed.tzinfo is None:
        raise TypeError(f"not an RFC 3339 timestamp: {text!r}")
    return parsed


def format_date(value: Any, arg: str) -> str:
    """Format a date, datetime or RFC 3339 string with a strftime layout."""
    layout = arg or DEFAULT_DATE_LAYOUT
    if isinstance(value, (datetime, date)):
        return value.strftime(layout)
    if isinstance(value, str):
        return _parse_rfc3339(value).strftime(layout)
    raise TypeError(f"not a time: {value!r}")


BUILTIN_FORMATTERS: Dict[str, FormatterFunc] = {
    "upper": format_upper,
    "lower": format_lower,
    "title": format_title,
    "number": format_number,
    "currency": format_currency,
    "date": format_date,
}
