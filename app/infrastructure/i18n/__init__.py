"""i18n system - message lookup and template rendering.

Resolves message keys along a language fallback chain and renders
``{path | formatter:arg | op:value?a:b}`` placeholders against runtime data.

Main components:
- engine: TemplateEngine (cached parse + evaluate, formatter registration, lint)
- parser / nodes: template parser and parsed template model
- formatters: FormatterRegistry and built-in formatters
- values: dotted path resolution
- validator: static template checks
- loader: MessageLoader and YAMLMessageLoader
- translator: Translator with fallback chains
- resolvers: FallbackResolver and LanguageNegotiator
- checker: key coverage report across languages
"""

from infrastructure.i18n.cache import TemplateCache
from infrastructure.i18n.checker import CoverageReport, check_messages
from infrastructure.i18n.engine import TemplateEngine
from infrastructure.i18n.exceptions import (
    FormatterError,
    RenderDepthExceededError,
    TemplateError,
    TemplateSyntaxError,
    TemplateValidationError,
    UnknownFormatterError,
    UnsupportedOperationError,
    UnsupportedTypeError,
    ValueNotFoundError,
)
from infrastructure.i18n.factory import create_engine, create_translator
from infrastructure.i18n.formatters import FormatterRegistry
from infrastructure.i18n.loader import MessageLoader, YAMLMessageLoader
from infrastructure.i18n.models import MessageCatalog, MessageFile
from infrastructure.i18n.nodes import (
    Conditional,
    FormatterCall,
    PlaceholderNode,
    TemplateAST,
    TextNode,
)
from infrastructure.i18n.parser import parse_placeholder, parse_template
from infrastructure.i18n.resolvers import FallbackResolver, LanguageNegotiator
from infrastructure.i18n.translator import LocalizedTranslator, Translator
from infrastructure.i18n.validator import IssueCode, ValidationIssue

__all__ = [
    "TemplateEngine",
    "TemplateCache",
    "FormatterRegistry",
    "TemplateAST",
    "TextNode",
    "PlaceholderNode",
    "FormatterCall",
    "Conditional",
    "parse_template",
    "parse_placeholder",
    "IssueCode",
    "ValidationIssue",
    "TemplateError",
    "TemplateSyntaxError",
    "ValueNotFoundError",
    "UnknownFormatterError",
    "FormatterError",
    "UnsupportedOperationError",
    "UnsupportedTypeError",
    "RenderDepthExceededError",
    "TemplateValidationError",
    "MessageCatalog",
    "MessageFile",
    "MessageLoader",
    "YAMLMessageLoader",
    "Translator",
    "LocalizedTranslator",
    "FallbackResolver",
    "LanguageNegotiator",
    "CoverageReport",
    "check_messages",
    "create_engine",
    "create_translator",
]
