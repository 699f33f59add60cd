"""Message catalog coverage and syntax checks.

Compares the key sets of every language in a message directory and lints
each message template.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional

import structlog
from infrastructure.i18n.engine import TemplateEngine
from infrastructure.i18n.loader import YAMLMessageLoader
from infrastructure.i18n.validator import ValidationIssue

logger = structlog.get_logger()


@dataclass
class CoverageReport:
    """Result of checking a message directory.

    Attributes:
        languages: Sorted languages found.
        all_keys: Sorted union of every language's keys.
        reference_language: Language the others are compared to, if any.
        missing_keys: language -> sorted keys it lacks.
        redundant_keys: language -> sorted keys the reference language lacks.
        syntax_errors: language -> key -> lint issues.
    """

    languages: List[str] = field(default_factory=list)
    all_keys: List[str] = field(default_factory=list)
    reference_language: Optional[str] = None
    missing_keys: Dict[str, List[str]] = field(default_factory=dict)
    redundant_keys: Dict[str, List[str]] = field(default_factory=dict)
    syntax_errors: Dict[str, Dict[str, List[ValidationIssue]]] = field(
        default_factory=dict
    )

    @property
    def has_issues(self) -> bool:
        return any(
            any(group.values())
            for group in (self.missing_keys, self.redundant_keys, self.syntax_errors)
        )


def _read_catalogs(messages_dir: Path) -> Dict[str, Dict[str, str]]:
    """Read every message file, keeping languages whose files are empty."""
    loader = YAMLMessageLoader(messages_dir, use_cache=False)
    catalogs: Dict[str, Dict[str, str]] = {}
    for path in loader.find_files():
        document = loader.read_file(path)
        catalogs.setdefault(document.language, {}).update(document.messages)
    return catalogs


def check_messages(
    messages_dir: Path,
    reference_language: Optional[str] = None,
    engine: Optional[TemplateEngine] = None,
) -> CoverageReport:
    """Check key coverage and template syntax of a message directory.

    Args:
        messages_dir: Directory of YAML message files.
        reference_language: Language whose keys every other language should
            have. When None or absent, the union of all keys is expected and
            no key is redundant.
        engine: Engine whose formatter registry is used for linting.

    Returns:
        CoverageReport

    Raises:
        ValueError: If the directory or a message file is invalid.
    """
    engine = engine or TemplateEngine()
    catalogs = _read_catalogs(messages_dir)

    languages = sorted(catalogs)
    all_keys = sorted({key for messages in catalogs.values() for key in messages})

    reference = catalogs.get(reference_language) if reference_language else None
    expected = set(reference) if reference is not None else set(all_keys)

    report = CoverageReport(
        languages=languages,
        all_keys=all_keys,
        reference_language=reference_language if reference is not None else None,
    )

    for language in languages:
        keys = set(catalogs[language])
        missing = sorted(expected - keys)
        if missing:
            report.missing_keys[language] = missing
        if reference is not None:
            redundant = sorted(keys - expected)
            if redundant:
                report.redundant_keys[language] = redundant

        for key, text in sorted(catalogs[language].items()):
            issues = engine.validate(text)
            if issues:
                report.syntax_errors.setdefault(language, {})[key] = issues

    logger.info(
        "checked_messages",
        messages_dir=str(messages_dir),
        languages=languages,
        key_count=len(all_keys),
        has_issues=report.has_issues,
    )
    return report
