"""Message loading interface and implementations.

Defines the contract for loading message catalogs and provides a YAML
directory loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List

import yaml
from pydantic import ValidationError

import structlog
from infrastructure.i18n.models import MessageCatalog, MessageFile

logger = structlog.get_logger()

YAML_SUFFIXES = (".yml", ".yaml")


class MessageLoader(ABC):
    """Abstract base for message loaders."""

    @abstractmethod
    def load_all(self) -> Dict[str, MessageCatalog]:
        """Load the catalogs of every available language.

        Returns:
            Dict mapping language to MessageCatalog.
        """
        pass

    def clear_cache(self) -> None:
        """Drop any cached catalogs so the next load reads from source."""
        pass

    def load(self, language: str) -> MessageCatalog:
        """Load the catalog for one language.

        Raises:
            FileNotFoundError: If no messages exist for language.
        """
        catalogs = self.load_all()
        if language not in catalogs:
            raise FileNotFoundError(f"No messages found for language {language}")
        return catalogs[language]


class YAMLMessageLoader(MessageLoader):
    """Loader for a directory tree of YAML message files.

    Every ``*.yml`` / ``*.yaml`` file below the directory is one
    ``{language, messages}`` document. Files for the same language are
    merged in path order.

    Attributes:
        messages_dir: Root directory of the message files.
        cache: Catalogs from the last load (language -> catalog).
    """

    def __init__(self, messages_dir: Path, use_cache: bool = True):
        """Initialize YAML message loader.

        Args:
            messages_dir: Directory with YAML message files.
            use_cache: Whether to keep loaded catalogs in memory.

        Raises:
            ValueError: If messages_dir does not exist.
        """
        self.messages_dir = Path(messages_dir)
        self.use_cache = use_cache
        self.cache: Dict[str, MessageCatalog] = {}

        if not self.messages_dir.is_dir():
            raise ValueError(f"Messages directory not found: {self.messages_dir}")

        logger.info(
            "initialized_yaml_loader",
            messages_dir=str(self.messages_dir),
            use_cache=use_cache,
        )

    def find_files(self) -> List[Path]:
        """List message files below messages_dir, sorted by path."""
        return sorted(
            path
            for path in self.messages_dir.rglob("*")
            if path.is_file() and path.suffix in YAML_SUFFIXES
        )

    def read_file(self, path: Path) -> MessageFile:
        """Parse and validate a single message file.

        Raises:
            ValueError: If the YAML is invalid or the document has no language.
        """
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        if not isinstance(data, dict):
            raise ValueError(f"File {path} must contain a mapping")
        if not data.get("language"):
            raise ValueError(f"File {path} missing 'language' field")

        try:
            return MessageFile.model_validate(data)
        except ValidationError as e:
            logger.error("invalid_message_file", file=str(path), error=str(e))
            raise ValueError(f"Invalid message file {path}: {e}") from e

    def load_all(self) -> Dict[str, MessageCatalog]:
        """Load every message file and merge them per language.

        Returns:
            Dict mapping language to MessageCatalog.
        """
        if self.use_cache and self.cache:
            logger.info("loaded_from_cache", language_count=len(self.cache))
            return self.cache

        loaded_at = datetime.now(timezone.utc).isoformat()
        catalogs: Dict[str, MessageCatalog] = {}
        files = self.find_files()
        for path in files:
            document = self.read_file(path)
            if not document.messages:
                logger.info("skipped_empty_message_file", file=str(path))
                continue
            catalog = catalogs.setdefault(
                document.language,
                MessageCatalog(language=document.language, loaded_at=loaded_at),
            )
            catalog.messages.update(document.messages)

        logger.info(
            "loaded_messages",
            messages_dir=str(self.messages_dir),
            file_count=len(files),
            languages=sorted(catalogs),
        )

        if self.use_cache:
            self.cache = catalogs
        return catalogs

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache = {}
        logger.info("cleared_message_cache")
