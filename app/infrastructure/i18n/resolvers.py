"""Language fallback chains and language negotiation.

Determines which languages are probed, in order, when looking up a message
key for a requested language.
"""

from typing import Dict, List, Optional, Sequence

import structlog

logger = structlog.get_logger().bind(component="i18n.resolver")


class FallbackResolver:
    """Builds the ordered list of languages to probe for a request.

    Resolution:
    1. Explicitly configured chain for the language, if non-empty
    2. ``[language, default_language]`` without duplicates
    3. ``[default_language]`` when no language was requested
    """

    def __init__(
        self,
        default_language: str = "en",
        fallbacks: Optional[Dict[str, List[str]]] = None,
    ):
        """Initialize fallback resolver.

        Args:
            default_language: Language probed last (and alone when none is requested).
            fallbacks: Explicit chains keyed by requested language,
                e.g. {"zh-CN": ["zh-CN", "zh", "en"]}.
        """
        self.default_language = default_language or "en"
        self.fallbacks: Dict[str, List[str]] = dict(fallbacks or {})
        self.log = logger.bind(default_language=self.default_language)

    def chain(self, language: Optional[str] = None) -> List[str]:
        """Return the languages to probe for a requested language.

        Args:
            language: Requested language tag; empty or None means "no preference".

        Returns:
            Ordered list of language tags.
        """
        if not language:
            return [self.default_language]

        configured = self.fallbacks.get(language)
        if configured:
            return list(configured)

        if language == self.default_language:
            return [language]
        return [language, self.default_language]

    def resolve_from_header(
        self,
        accept_language: Optional[str],
        supported_languages: Sequence[str],
    ) -> str:
        """Resolve a language from an HTTP Accept-Language header.

        Args:
            accept_language: Header value, e.g. "fr-CA,fr;q=0.9,en;q=0.8".
            supported_languages: Languages that have message catalogs.

        Returns:
            Best supported language, or the default language if none match.
        """
        if not accept_language:
            return self.default_language

        preferences = []
        for part in accept_language.split(","):
            lang_range = part.split(";")[0].strip()
            if not lang_range or lang_range == "*":
                continue
            quality = 1.0
            if ";" in part and "q=" in part:
                try:
                    quality = float(part.split("q=")[1])
                except ValueError:
                    quality = 1.0
            preferences.append((lang_range, quality))

        ranked = [
            lang for lang, _ in sorted(preferences, key=lambda x: x[1], reverse=True)
        ]
        match = LanguageNegotiator.find_best_match(ranked, list(supported_languages))
        if match is None:
            self.log.info("no_matching_language_in_header")
            return self.default_language

        self.log.info("resolved_from_header", language=match)
        return match


class LanguageNegotiator:
    """Matches requested language tags against available ones.

    Exact tag matches win over primary-subtag matches
    (e.g. "pt-BR" falls back to "pt").
    """

    @staticmethod
    def matches_language(
        requested: str,
        available: str,
        strict: bool = False,
    ) -> bool:
        """Check if available language matches requested language.

        Args:
            requested: Requested language tag (e.g., "en-US").
            available: Available language tag (e.g., "en").
            strict: If True, requires exact match. If False, allows language-only match.
        """
        if requested.lower() == available.lower():
            return True

        if strict:
            return False

        requested_lang = requested.split("-")[0].lower()
        available_lang = available.split("-")[0].lower()
        return requested_lang == available_lang

    @staticmethod
    def find_best_match(
        requested: List[str],
        available: List[str],
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Find best matching language from available options.

        Args:
            requested: Requested language tags in preference order.
            available: Available language tags.
            default: Returned when nothing matches.
        """
        for req_lang in requested:
            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=True
                ):
                    return avail_lang

            for avail_lang in available:
                if LanguageNegotiator.matches_language(
                    req_lang, avail_lang, strict=False
                ):
                    return avail_lang

        return default
