"""Tests for infrastructure.i18n.checker module."""

import pytest

from infrastructure.i18n import IssueCode, TemplateEngine, check_messages
from tests.factories.i18n import write_message_file


class TestCheckMessages:
    """Tests for check_messages()."""

    def test_union_of_keys_without_reference(self, messages_dir):
        report = check_messages(messages_dir)
        assert report.languages == ["de", "en", "fr"]
        assert report.all_keys == ["broken", "cart.summary", "greeting", "only_en", "price"]
        assert report.reference_language is None
        assert report.missing_keys == {
            "de": ["broken", "cart.summary", "only_en", "price"],
            "fr": ["only_en"],
        }
        assert report.redundant_keys == {}
        assert report.has_issues

    def test_reference_language(self, messages_dir):
        report = check_messages(messages_dir, reference_language="fr")
        assert report.reference_language == "fr"
        assert report.missing_keys == {"de": ["broken", "cart.summary", "price"]}
        assert report.redundant_keys == {"en": ["only_en"]}

    def test_unknown_reference_uses_union(self, messages_dir):
        report = check_messages(messages_dir, reference_language="ja")
        assert report.reference_language is None
        assert "fr" in report.missing_keys

    def test_runtime_failures_are_not_syntax_errors(self, messages_dir):
        """An unresolvable path is valid syntax."""
        assert check_messages(messages_dir).syntax_errors == {}

    def test_syntax_errors(self, messages_dir):
        write_message_file(
            messages_dir,
            "es",
            {"greeting": "Hola {user.name|bogus}", "price": "a}b", "ok": "fine"},
        )
        errors = check_messages(messages_dir).syntax_errors
        assert sorted(errors) == ["es"]
        assert sorted(errors["es"]) == ["greeting", "price"]
        assert errors["es"]["greeting"][0].code == IssueCode.UNKNOWN_FORMATTER
        assert errors["es"]["price"][0].code == IssueCode.EXTRA_CLOSING_BRACE

    def test_engine_formatters_are_known(self, tmp_path):
        write_message_file(tmp_path, "en", {"a": "{x|shout}"})
        engine = TemplateEngine()
        engine.register_formatter("shout", lambda v, arg: v)
        report = check_messages(tmp_path, engine=engine)
        assert not report.has_issues

    def test_clean_directory(self, tmp_path):
        write_message_file(tmp_path, "en", {"a": "A {n|number:2}"})
        write_message_file(tmp_path, "fr", {"a": "B {n|number:2}"})
        report = check_messages(tmp_path, reference_language="en")
        assert report.missing_keys == {}
        assert report.redundant_keys == {}
        assert not report.has_issues

    def test_invalid_directory(self, tmp_path):
        with pytest.raises(ValueError):
            check_messages(tmp_path / "missing")

    def test_language_with_empty_file_is_reported(self, tmp_path):
        """A language whose file has no messages is missing every key."""
        write_message_file(tmp_path, "en", {"a": "A", "b": "B"})
        write_message_file(tmp_path, "fr", {})
        report = check_messages(tmp_path)
        assert report.languages == ["en", "fr"]
        assert report.missing_keys == {"fr": ["a", "b"]}
        assert report.has_issues

    def test_empty_reference_language(self, tmp_path):
        """An empty reference expects no keys, so everything else is redundant."""
        write_message_file(tmp_path, "en", None)
        write_message_file(tmp_path, "fr", {"a": "A"})
        report = check_messages(tmp_path, reference_language="en")
        assert report.reference_language == "en"
        assert report.missing_keys == {}
        assert report.redundant_keys == {"fr": ["a"]}
