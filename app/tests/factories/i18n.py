"""Test data factories for i18n system testing.

Provides deterministic test data builders for:
- MessageCatalog
- PlaceholderNode
- YAML message files on disk
"""

from pathlib import Path
from typing import Dict, Optional

import yaml

from infrastructure.i18n import (
    Conditional,
    FormatterCall,
    MessageCatalog,
    PlaceholderNode,
)


def make_message_catalog(
    language: str = "en",
    messages: Optional[Dict[str, str]] = None,
    loaded_at: Optional[str] = None,
) -> MessageCatalog:
    """Create a MessageCatalog instance.

    Args:
        language: Language tag for the catalog.
        messages: Dict {key: template}.
        loaded_at: ISO 8601 timestamp.
    """
    if messages is None:
        messages = {
            "user.login.success": "Welcome back, {user.name|title}",
            "cart.summary": "{count|eq:0?No items:{count} items}",
        }

    return MessageCatalog(
        language=language,
        messages=dict(messages),
        loaded_at=loaded_at or "2024-01-01T00:00:00Z",
    )


def make_placeholder(
    path: str = "user.name",
    formatters: tuple = (),
    conditional: Optional[Conditional] = None,
) -> PlaceholderNode:
    """Create a PlaceholderNode from (name, arg) pairs."""
    return PlaceholderNode(
        path=path,
        formatters=tuple(FormatterCall(name, arg) for name, arg in formatters),
        conditional=conditional,
    )


def write_message_file(
    directory: Path,
    language: Optional[str],
    messages: Optional[Dict[str, str]],
    filename: Optional[str] = None,
) -> Path:
    """Write one ``{language, messages}`` YAML document and return its path."""
    directory = Path(directory)
    directory.mkdir(parents=True, exist_ok=True)
    path = directory / (filename or f"{language}.yml")

    document = {}
    if language is not None:
        document["language"] = language
    if messages is not None:
        document["messages"] = messages

    with open(path, "w", encoding="utf-8") as f:
        yaml.dump(document, f, allow_unicode=True)
    return path
