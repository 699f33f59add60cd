"""Translation service for dependency injection.

Provides a class-based interface to the i18n system for easier DI and testing.
"""

from typing import Any, List, Optional

from infrastructure.i18n.factory import create_translator
from infrastructure.i18n.formatters import FormatterFunc
from infrastructure.i18n.translator import Translator
from infrastructure.i18n.validator import ValidationIssue


class TranslationService:
    """Class-based translation service.

    Thin facade over a Translator (and its TemplateEngine) so callers can
    depend on one object and tests can swap it for a mock.

    Usage:
        service = TranslationService()
        service.translate("cart.summary", "fr", {"count": 3})
    """

    def __init__(self, translator: Optional[Translator] = None):
        """Initialize translation service.

        Args:
            translator: Optional pre-configured Translator instance.
                       If not provided, creates default via factory.
        """
        self._translator = translator or create_translator()

    def translate(
        self,
        key: str,
        language: Optional[str] = None,
        variables: Optional[Any] = None,
    ) -> str:
        """Retrieve and render a translated message.

        Never raises on render failure; see Translator.translate.
        """
        return self._translator.translate(key, language, variables)

    def render(self, text: str, variables: Optional[Any] = None) -> str:
        """Render raw template text with the translator's engine.

        Raises:
            TemplateError: If rendering fails.
        """
        return self._translator.engine.render(text, variables)

    def register_formatter(self, name: str, func: FormatterFunc) -> None:
        self._translator.engine.register_formatter(name, func)

    def validate(self, text: str) -> List[ValidationIssue]:
        return self._translator.engine.validate(text)

    def get_available_languages(self) -> List[str]:
        return self._translator.get_available_languages()

    @property
    def translator(self) -> Translator:
        """Access the underlying Translator instance."""
        return self._translator
