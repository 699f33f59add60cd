"""Translation service for retrieving and rendering localized messages.

Looks a key up along the language fallback chain and renders the first
message found through the template engine.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from core.logging import get_module_logger
from infrastructure.i18n.engine import TemplateEngine
from infrastructure.i18n.exceptions import TemplateError
from infrastructure.i18n.loader import MessageLoader
from infrastructure.i18n.models import MessageCatalog
from infrastructure.i18n.resolvers import FallbackResolver

logger = get_module_logger()


class Translator:
    """Service for translating message keys into rendered text.

    Attributes:
        loader: MessageLoader for loading message files (optional).
        engine: TemplateEngine used to render messages.
        resolver: FallbackResolver producing language chains.
        catalogs: Loaded MessageCatalogs by language.
    """

    def __init__(
        self,
        loader: Optional[MessageLoader] = None,
        engine: Optional[TemplateEngine] = None,
        default_language: str = "en",
        fallbacks: Optional[Dict[str, List[str]]] = None,
    ):
        """Initialize Translator.

        Args:
            loader: MessageLoader instance; messages can also be registered directly.
            engine: TemplateEngine (default: new engine with built-in formatters).
            default_language: Language probed last (default: "en").
            fallbacks: Explicit fallback chains by requested language.
        """
        self.loader = loader
        self.engine = engine or TemplateEngine()
        self.resolver = FallbackResolver(default_language, fallbacks)
        self.catalogs: Dict[str, MessageCatalog] = {}
        logger.info("initialized_translator", default_language=default_language)

    @property
    def default_language(self) -> str:
        return self.resolver.default_language

    def load_all(self) -> None:
        """Load all available languages from the loader."""
        if self.loader is None:
            raise ValueError("Translator has no loader configured")
        for language, catalog in self.loader.load_all().items():
            self._catalog_for(language).merge(catalog)
        logger.info("loaded_all_messages", language_count=len(self.catalogs))

    def reload(self) -> None:
        """Drop every catalog and load again from the loader."""
        self.catalogs = {}
        if self.loader is not None:
            self.loader.clear_cache()
        self.load_all()
        logger.info("reloaded_all_messages")

    def register_messages(self, language: str, messages: Dict[str, str]) -> None:
        """Merge messages into a language's catalog. Existing keys are overwritten."""
        self._catalog_for(language).messages.update(messages)
        logger.info(
            "registered_messages", language=language, message_count=len(messages)
        )

    def _catalog_for(self, language: str) -> MessageCatalog:
        catalog = self.catalogs.get(language)
        if catalog is None:
            catalog = MessageCatalog(language=language)
            self.catalogs[language] = catalog
        return catalog

    def translate(
        self,
        key: str,
        language: Optional[str] = None,
        variables: Optional[Any] = None,
        strict: bool = False,
    ) -> str:
        """Retrieve and render a translated message.

        Args:
            key: Message key, e.g. "user.login.success".
            language: Requested language (default: the default language).
            variables: Argument bag for placeholder paths.
            strict: Re-raise render failures instead of returning the raw text.

        Returns:
            Rendered message; the raw message text if rendering failed; the key
            itself if no language in the chain has it.

        Raises:
            TemplateError: Only when strict is True and rendering fails.
        """
        return self._translate(key, self.resolver.chain(language), variables, strict)

    def _translate(
        self,
        key: str,
        chain: List[str],
        variables: Optional[Any],
        strict: bool,
    ) -> str:
        for language in chain:
            catalog = self.catalogs.get(language)
            message = catalog.get_message(key) if catalog else None
            if message is None:
                continue

            if language != chain[0]:
                logger.debug(
                    "used_fallback_translation",
                    key=key,
                    requested_language=chain[0],
                    language=language,
                )
            try:
                return self.engine.render(message, variables or {})
            except TemplateError as e:
                if strict:
                    raise
                logger.warning(
                    "translation_fallback_to_raw_text",
                    key=key,
                    language=language,
                    error=str(e),
                )
                return message

        logger.warning("translation_not_found", key=key, languages=chain)
        return key

    def for_language(self, language: Optional[str] = None) -> "LocalizedTranslator":
        """Return a view bound to the fallback chain of a language."""
        return LocalizedTranslator(self, self.resolver.chain(language))

    def for_accept_language(
        self, accept_language: Optional[str]
    ) -> "LocalizedTranslator":
        """Return a view for the best loaded language of an Accept-Language header.

        Args:
            accept_language: Header value, e.g. "fr-CA,fr;q=0.9,en;q=0.8".
        """
        language = self.resolver.resolve_from_header(
            accept_language, self.get_available_languages()
        )
        return self.for_language(language)

    def has_message(self, key: str, language: str) -> bool:
        """Check if a message exists for key in exactly this language."""
        catalog = self.catalogs.get(language)
        return catalog.has_message(key) if catalog else False

    def get_available_languages(self) -> List[str]:
        """Get sorted list of languages with a catalog."""
        return sorted(self.catalogs)

    def get_catalog(self, language: str) -> Optional[MessageCatalog]:
        return self.catalogs.get(language)


@dataclass(frozen=True)
class LocalizedTranslator:
    """Translator view bound to one language fallback chain.

    Usage:
        fr = translator.for_language("fr")
        fr.translate("cart.summary", {"count": 3})
    """

    translator: Translator
    languages: List[str]

    def translate(
        self, key: str, variables: Optional[Any] = None, strict: bool = False
    ) -> str:
        return self.translator._translate(key, self.languages, variables, strict)
