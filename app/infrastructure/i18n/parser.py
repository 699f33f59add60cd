"""Template parsing.

``parse_template`` never fails: an unmatched ``{`` is kept as a literal
character and a balanced ``{...}`` span whose contents do not parse as a
placeholder is kept verbatim, braces included.

Placeholder grammar::

    {path | name:arg | ... | op:value?true-template:false-template}

Segments are split on every ``|`` inside the braces, including pipes that
sit inside a conditional branch. A branch such as ``{x|upper}`` therefore
breaks the enclosing placeholder, which then renders as literal text.
"""

from typing import List, Optional, Tuple

from infrastructure.i18n.exceptions import TemplateSyntaxError
from infrastructure.i18n.nodes import (
    Conditional,
    FormatterCall,
    Node,
    PlaceholderNode,
    TemplateAST,
    TextNode,
)


def _split_once(text: str, sep: str) -> Optional[Tuple[str, str]]:
    head, found, tail = text.partition(sep)
    if not found:
        return None
    return head, tail


def parse_formatter_segment(segment: str) -> FormatterCall:
    """Parse ``name`` or ``name:arg`` into a FormatterCall.

    Raises:
        TemplateSyntaxError: If the formatter name is empty.
    """
    name, _, arg = segment.partition(":")
    name = name.strip()
    if not name:
        raise TemplateSyntaxError(f"empty formatter name in segment {segment!r}")
    return FormatterCall(name=name, arg=arg.strip())


def parse_conditional(segment: str) -> Conditional:
    """Parse ``op:value?true:false`` into a Conditional.

    Raises:
        TemplateSyntaxError: If the segment lacks the ``?`` or either ``:``.
    """
    question = _split_once(segment, "?")
    if question is None:
        raise TemplateSyntaxError(f"invalid conditional: {segment}")
    condition, branches = question

    true_false = _split_once(branches, ":")
    if true_false is None:
        raise TemplateSyntaxError(f"invalid conditional: {segment}")

    op_value = _split_once(condition, ":")
    if op_value is None:
        raise TemplateSyntaxError(f"invalid condition: {condition}")

    return Conditional(
        op=op_value[0].strip(),
        test_value=op_value[1].strip(),
        true_template=true_false[0].strip(),
        false_template=true_false[1].strip(),
    )


def parse_placeholder(expr: str) -> PlaceholderNode:
    """Parse the text between a placeholder's braces.

    When several segments carry a ``?`` the last one wins.

    Raises:
        TemplateSyntaxError: If the expression, path or a segment is empty, or
            a conditional is malformed.
    """
    expr = expr.strip()
    if not expr:
        raise TemplateSyntaxError("empty placeholder expression")

    parts = expr.split("|")
    path = parts[0].strip()
    if not path:
        raise TemplateSyntaxError("placeholder has empty path")

    formatters: List[FormatterCall] = []
    conditional = None
    for part in parts[1:]:
        segment = part.strip()
        if not segment:
            raise TemplateSyntaxError("empty formatter segment")
        if "?" in segment:
            conditional = parse_conditional(segment)
            continue
        formatters.append(parse_formatter_segment(segment))

    return PlaceholderNode(
        path=path, formatters=tuple(formatters), conditional=conditional
    )


def _find_closing_brace(text: str, start: int) -> int:
    """Return the index of the brace closing the one at ``start``, or -1."""
    depth = 1
    for index in range(start + 1, len(text)):
        char = text[index]
        if char == "{":
            depth += 1
        elif char == "}":
            depth -= 1
            if depth == 0:
                return index
    return -1


def parse_template(text: str) -> TemplateAST:
    """Parse a raw template into a TemplateAST.

    Args:
        text: Raw template text.

    Returns:
        TemplateAST whose nodes follow source order. Adjacent literal text is
        merged into a single TextNode.
    """
    nodes: List[Node] = []
    buffer: List[str] = []

    def flush():
        if buffer:
            nodes.append(TextNode("".join(buffer)))
            buffer.clear()

    i = 0
    length = len(text)
    while i < length:
        char = text[i]
        if char != "{":
            buffer.append(char)
            i += 1
            continue

        end = _find_closing_brace(text, i)
        if end < 0:
            # unclosed, keep the brace as text
            buffer.append(char)
            i += 1
            continue

        raw = text[i + 1 : end]
        i = end + 1
        try:
            placeholder = parse_placeholder(raw)
        except TemplateSyntaxError:
            buffer.append("{" + raw + "}")
            continue

        flush()
        nodes.append(placeholder)

    flush()
    return TemplateAST(tuple(nodes))
