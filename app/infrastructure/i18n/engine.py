"""Template engine: cached parsing plus evaluation.

One engine owns its formatter registry and parsed template cache, so
different engines can carry different formatter sets.
"""

from typing import Any, List, Optional

from core.config import settings
from core.logging import get_module_logger
from infrastructure.i18n.cache import TemplateCache
from infrastructure.i18n.exceptions import (
    RenderDepthExceededError,
    TemplateValidationError,
)
from infrastructure.i18n.formatters import FormatterFunc, FormatterRegistry
from infrastructure.i18n.nodes import RenderContext, TemplateAST
from infrastructure.i18n.parser import parse_template
from infrastructure.i18n.validator import ValidationIssue, validate_template

logger = get_module_logger()


class TemplateEngine:
    """Renders ``{path | formatter:arg | op:value?a:b}`` templates.

    Usage:
        engine = TemplateEngine()
        engine.render("Hello {user.name|title}", {"user": {"name": "tom"}})
        # "Hello Tom"

    Attributes:
        registry: FormatterRegistry used by every render.
        cache: TemplateCache of parsed templates.
        max_depth: Deepest allowed nesting of conditional branch renders.
    """

    def __init__(
        self,
        registry: Optional[FormatterRegistry] = None,
        cache: Optional[TemplateCache] = None,
        max_depth: Optional[int] = None,
    ):
        """Initialize the engine.

        Args:
            registry: Formatter registry (default: new registry with built-ins).
            cache: Parsed template cache (default: new empty cache).
            max_depth: Branch nesting limit (default: settings.i18n.MAX_RENDER_DEPTH).
        """
        self.registry = registry if registry is not None else FormatterRegistry()
        self.cache = cache if cache is not None else TemplateCache()
        self.max_depth = (
            max_depth if max_depth is not None else settings.i18n.MAX_RENDER_DEPTH
        )

    def parse(self, text: str) -> TemplateAST:
        """Parse text without touching the cache."""
        return parse_template(text)

    def get_ast(self, text: str) -> TemplateAST:
        """Return the cached TemplateAST for text, parsing it on a miss."""
        ast = self.cache.get(text)
        if ast is None:
            ast = parse_template(text)
            self.cache.set(text, ast)
            logger.debug("template_cache_miss", node_count=len(ast))
        return ast

    def render(self, text: str, args: Any = None) -> str:
        """Render a template against an argument bag.

        Args:
            text: Raw template text.
            args: Mapping or record-like value that placeholder paths resolve
                against (default: empty dict).

        Returns:
            The rendered string.

        Raises:
            ValueNotFoundError: If a placeholder path does not resolve.
            UnknownFormatterError: If a formatter is not registered.
            FormatterError: If a formatter rejects its input.
            UnsupportedOperationError: If a conditional op does not apply.
            UnsupportedTypeError: If a conditional compares an unsupported type.
            RenderDepthExceededError: If conditional branches nest too deeply.
        """
        return self._render(text, {} if args is None else args, 0)

    def _render(self, text: str, args: Any, depth: int) -> str:
        if depth > self.max_depth:
            raise RenderDepthExceededError(self.max_depth)

        context = RenderContext(
            registry=self.registry,
            render_branch=lambda branch, branch_args: self._render(
                branch, branch_args, depth + 1
            ),
        )
        return self.get_ast(text).evaluate(args, context)

    def register_formatter(self, name: str, func: FormatterFunc) -> None:
        """Register a formatter on this engine's registry."""
        self.registry.register(name, func)

    def validate(self, text: str) -> List[ValidationIssue]:
        """Lint a template; returns an empty list when it is clean."""
        return validate_template(text, self.registry)

    def check(self, text: str) -> None:
        """Lint a template.

        Raises:
            TemplateValidationError: If any issue is found.
        """
        issues = self.validate(text)
        if issues:
            raise TemplateValidationError(issues)
