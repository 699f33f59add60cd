"""Test data factories for deterministic test data generation."""

from tests.factories.i18n import (
    make_message_catalog,
    make_placeholder,
    write_message_file,
)

__all__ = [
    "make_message_catalog",
    "make_placeholder",
    "write_message_file",
]
