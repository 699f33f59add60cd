"""Factory functions for creating i18n components.

Provides convenience functions for initializing engines and translators
from application settings.
"""

from pathlib import Path
from typing import Dict, List, Optional

import structlog
from core.config import settings
from infrastructure.i18n.engine import TemplateEngine
from infrastructure.i18n.formatters import FormatterFunc, FormatterRegistry
from infrastructure.i18n.loader import YAMLMessageLoader
from infrastructure.i18n.translator import Translator

logger = structlog.get_logger()


def create_engine(
    formatters: Optional[Dict[str, FormatterFunc]] = None,
    max_depth: Optional[int] = None,
) -> TemplateEngine:
    """Create a TemplateEngine with the built-in formatters plus extras.

    Args:
        formatters: Additional formatters by name, registered at start-up.
        max_depth: Branch nesting limit (default: settings.i18n.MAX_RENDER_DEPTH).

    Returns:
        TemplateEngine: Configured engine instance
    """
    registry = FormatterRegistry()
    for name, func in (formatters or {}).items():
        registry.register(name, func)
    return TemplateEngine(registry=registry, max_depth=max_depth)


def create_translator(
    messages_dir: Path | None = None,
    default_language: Optional[str] = None,
    fallbacks: Optional[Dict[str, List[str]]] = None,
    engine: Optional[TemplateEngine] = None,
    use_cache: bool = True,
    preload: bool = True,
) -> Translator:
    """Create and configure a Translator instance.

    Unset arguments fall back to ``settings.i18n``.

    Args:
        messages_dir: Directory of YAML message files (default: I18N_MESSAGES_DIR)
        default_language: Last language probed (default: I18N_DEFAULT_LANGUAGE)
        fallbacks: Explicit fallback chains (default: I18N_FALLBACKS)
        engine: Template engine (default: create_engine())
        use_cache: Whether loader should cache parsed YAML (default: True)
        preload: Whether to load all languages immediately (default: True)

    Returns:
        Translator: Configured translator instance

    Raises:
        ValueError: If messages_dir does not exist

    Usage:
        # Use settings
        translator = create_translator()

        # Custom messages directory, lazy loading
        translator = create_translator(messages_dir=Path("/srv/locales"), preload=False)
        translator.load_all()
    """
    i18n_settings = settings.i18n
    messages_dir = Path(messages_dir or i18n_settings.MESSAGES_DIR)

    loader = YAMLMessageLoader(messages_dir=messages_dir, use_cache=use_cache)
    translator = Translator(
        loader=loader,
        engine=engine or create_engine(),
        default_language=default_language or i18n_settings.DEFAULT_LANGUAGE,
        fallbacks=fallbacks if fallbacks is not None else i18n_settings.FALLBACKS,
    )

    if preload:
        translator.load_all()
        logger.info(
            "translator_created_with_preload",
            messages_dir=str(messages_dir),
            language_count=len(translator.get_available_languages()),
        )
    else:
        logger.info("translator_created_lazy", messages_dir=str(messages_dir))

    return translator
