"""Message models for the i18n system.

Defines the on-disk message file document and the in-memory per-language
catalog.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, field_validator


def _scalar_text(value):
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return value


class MessageFile(BaseModel):
    """One YAML message file.

    Expected format:
        language: en
        messages:
          user.login.success: "Welcome back, {user.name|title}"
    """

    language: str
    messages: Dict[str, str] = Field(default_factory=dict)

    @field_validator("language")
    @classmethod
    def _language_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("language must not be empty")
        return value

    @field_validator("messages", mode="before")
    @classmethod
    def _scalars_to_text(cls, value):
        """Treat a null section as empty and read scalar values as text.

        YAML turns ``5``, ``1.5`` or ``true`` into numbers and booleans; they
        are kept as their text (booleans lowercase, null as an empty string).
        """
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        return {_scalar_text(key): _scalar_text(item) for key, item in value.items()}


@dataclass
class MessageCatalog:
    """Container for the messages of a single language.

    Keys are flat dotted strings (e.g. "user.login.success").

    Attributes:
        language: Language tag this catalog is for.
        messages: Dict mapping message key to raw template text.
        loaded_at: Timestamp (ISO 8601) when messages were loaded.
    """

    language: str
    messages: Dict[str, str] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get_message(self, key: str) -> Optional[str]:
        """Retrieve a raw message template by key, or None if absent."""
        return self.messages.get(key)

    def set_message(self, key: str, message: str) -> None:
        self.messages[key] = message

    def has_message(self, key: str) -> bool:
        return key in self.messages

    def keys(self) -> List[str]:
        """Sorted message keys."""
        return sorted(self.messages)

    def merge(self, other: "MessageCatalog") -> None:
        """Merge another catalog into this one.

        Later entries override earlier ones; nothing is removed.

        Args:
            other: MessageCatalog to merge.
        """
        self.messages.update(other.messages)
        if other.loaded_at:
            self.loaded_at = other.loaded_at
