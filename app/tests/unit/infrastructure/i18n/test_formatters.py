"""Tests for infrastructure.i18n.formatters module."""

import threading
from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from infrastructure.i18n import (
    FormatterRegistry,
    TemplateSyntaxError,
    UnknownFormatterError,
)
from infrastructure.i18n.formatters import (
    BUILTIN_FORMATTERS,
    format_currency,
    format_date,
    format_lower,
    format_number,
    format_title,
    format_upper,
    parse_integer,
)


class TestFormatterRegistry:
    """Tests for FormatterRegistry."""

    def test_builtins_registered_by_default(self):
        """A new registry carries every built-in formatter."""
        registry = FormatterRegistry()
        assert registry.names() == sorted(BUILTIN_FORMATTERS)

    def test_without_builtins(self):
        """include_builtins=False starts empty."""
        registry = FormatterRegistry(include_builtins=False)
        assert registry.names() == []
        assert "upper" not in registry

    def test_register_and_apply(self):
        """Registered formatters are applied with (value, arg)."""
        registry = FormatterRegistry()
        registry.register("repeat", lambda v, arg: str(v) * int(arg or 1))
        assert "repeat" in registry
        assert registry.apply("repeat", "ab", "3") == "ababab"

    def test_register_replaces_existing(self):
        """Registering an existing name replaces the formatter."""
        registry = FormatterRegistry()
        registry.register("upper", lambda v, arg: "replaced")
        assert registry.apply("upper", "x") == "replaced"

    def test_apply_unknown_formatter(self):
        """Unknown names raise UnknownFormatterError."""
        registry = FormatterRegistry()
        with pytest.raises(UnknownFormatterError) as exc_info:
            registry.apply("bogus", "x")
        assert exc_info.value.name == "bogus"

    def test_apply_propagates_formatter_error(self):
        """The formatter's own exception is not swallowed."""
        registry = FormatterRegistry()
        with pytest.raises(ValueError):
            registry.apply("number", "abc")

    @pytest.mark.parametrize("name", ["", "   "])
    def test_register_empty_name(self, name):
        """Empty names are rejected."""
        with pytest.raises(ValueError):
            FormatterRegistry().register(name, lambda v, arg: v)

    def test_register_not_callable(self):
        """Non-callables are rejected."""
        with pytest.raises(ValueError):
            FormatterRegistry().register("bad", "not callable")

    def test_registries_are_independent(self):
        """Registrations do not leak between registries."""
        first = FormatterRegistry()
        second = FormatterRegistry()
        first.register("shout", lambda v, arg: f"{v}!")
        assert "shout" in first
        assert "shout" not in second

    def test_concurrent_registration_and_lookup(self):
        """Concurrent registrations and lookups complete without errors."""
        registry = FormatterRegistry()
        errors = []

        def worker(index):
            try:
                registry.register(f"f{index}", lambda v, arg: v)
                for _ in range(100):
                    registry.apply("upper", "x")
            except Exception as e:  # pragma: no cover
                errors.append(e)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert errors == []
        assert all(f"f{i}" in registry for i in range(8))


class TestCaseFormatters:
    """Tests for upper, lower and title."""

    def test_upper(self):
        assert format_upper("tom", "") == "TOM"

    def test_lower(self):
        assert format_lower("ToM", "") == "tom"

    def test_case_formatters_stringify(self):
        """Non-string input is stringified first."""
        assert format_upper(12, "") == "12"
        assert format_lower(True, "") == "true"

    def test_title_capitalizes_each_word(self):
        assert format_title("hello world", "") == "Hello World"

    def test_title_keeps_other_letters(self):
        """Only first letters change."""
        assert format_title("mcDonald's iPhone", "") == "McDonald'S IPhone"

    def test_title_with_punctuation(self):
        assert format_title("hello , jane-doe", "") == "Hello , Jane-Doe"


class TestNumberFormatter:
    """Tests for format_number()."""

    def test_default_precision(self):
        """Default precision is zero decimals."""
        assert format_number(1234567, "") == "1,234,567"

    def test_precision_and_rounding(self):
        assert format_number(12345.678, "2") == "12,345.68"

    def test_negative_numbers(self):
        """The sign stays in front of the grouped digits."""
        assert format_number(-1234.5, "1") == "-1,234.5"

    def test_small_numbers_have_no_separator(self):
        assert format_number(999, "") == "999"

    def test_numeric_string_with_separators(self):
        """Thousands separators in strings are stripped before parsing."""
        assert format_number(" 1,234.5 ", "2") == "1,234.50"

    def test_decimal_input(self):
        assert format_number(Decimal("1000.26"), "1") == "1,000.3"

    def test_non_numeric_string(self):
        with pytest.raises(ValueError):
            format_number("abc", "")

    @pytest.mark.parametrize("value", [None, [1], True])
    def test_unsupported_types(self, value):
        with pytest.raises(TypeError):
            format_number(value, "")

    @pytest.mark.parametrize("arg", ["x", "-1", "1.5", "1_0", "\u0662", " 2"])
    def test_invalid_precision(self, arg):
        """Precision must be a non-negative integer."""
        with pytest.raises(TemplateSyntaxError):
            format_number(1, arg)


class TestCurrencyFormatter:
    """Tests for format_currency()."""

    def test_default_symbol(self):
        assert format_currency(1234.5, "") == "$1,234.50"

    def test_custom_symbol(self):
        assert format_currency(12345.678, "¥") == "¥12,345.68"

    def test_strips_known_symbol_from_string(self):
        assert format_currency("$1,000", "") == "$1,000.00"
        assert format_currency("€99.9", "€") == "€99.90"

    def test_strips_custom_symbol_from_string(self):
        assert format_currency("CHF 12", "CHF ") == "CHF 12.00"

    def test_negative_amount(self):
        assert format_currency(-5, "") == "$-5.00"

    def test_unparseable_string(self):
        with pytest.raises(ValueError):
            format_currency("twelve", "")

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            format_currency(None, "")


class TestDateFormatter:
    """Tests for format_date()."""

    def test_datetime_default_layout(self):
        assert format_date(datetime(2024, 3, 5, 14, 30), "") == "2024-03-05"

    def test_custom_layout(self):
        assert format_date(datetime(2024, 3, 5, 14, 30), "%Y/%m/%d %H:%M") == (
            "2024/03/05 14:30"
        )

    def test_date_value(self):
        assert format_date(date(2024, 1, 2), "%d.%m.%Y") == "02.01.2024"

    def test_aware_datetime(self):
        value = datetime(2024, 3, 5, tzinfo=timezone.utc)
        assert format_date(value, "%Y-%m-%d %z") == "2024-03-05 +0000"

    @pytest.mark.parametrize(
        "text",
        ["2024-03-05T14:30:00Z", "2024-03-05T14:30:00+02:00", "2024-03-05T14:30:00.123-05:00"],
    )
    def test_rfc3339_strings(self, text):
        assert format_date(text, "") == "2024-03-05"

    @pytest.mark.parametrize(
        "text", ["not a date", "2024-03-05", "2024-03-05T14:30:00", ""]
    )
    def test_non_rfc3339_strings(self, text):
        """Unparseable or offset-less strings are rejected."""
        with pytest.raises(TypeError):
            format_date(text, "")

    @pytest.mark.parametrize("value", [42, None, 1.5])
    def test_non_temporal_values(self, value):
        with pytest.raises(TypeError):
            format_date(value, "")


class TestParseInteger:
    """Tests for parse_integer()."""

    @pytest.mark.parametrize("text,expected", [("0", 0), ("12", 12), ("+3", 3), ("-4", -4)])
    def test_plain_integers(self, text, expected):
        assert parse_integer(text) == expected

    @pytest.mark.parametrize("text", ["", "1_000", "٣", " 1", "1.0", "--1", "0x1"])
    def test_python_only_forms_are_rejected(self, text):
        """Only an optional sign followed by ASCII digits is accepted."""
        with pytest.raises(ValueError):
            parse_integer(text)
