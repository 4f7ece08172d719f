"""Build the minimalcss rule tree from stylesheet source using tinycss2.

Syntax example:
    @media screen { div.ingress p { font-weight: bold } }
    @font-face { font-family: 'Lato'; }
    .hover\\:color-bg-accent:hover { color: pink }
"""

from __future__ import annotations

import logging

import tinycss2

from minimalcss.errors import StyleParseError
from minimalcss.stylesheet.model import (
    AtRule,
    Comment,
    ComponentKind,
    Declaration,
    Node,
    Rule,
    Selector,
    SelectorComponent,
    SelectorList,
    Stylesheet,
    basename,
)

__all__ = ["parse_stylesheet"]

logger = logging.getLogger(__name__)

# At-rules whose block is a list of rules rather than declarations.
RULE_LIST_AT_RULES = frozenset({
    "media",
    "supports",
    "document",
    "layer",
    "container",
    "scope",
    "starting-style",
    "keyframes",
})

_COMBINATORS = frozenset({">", "+", "~"})

_WHITESPACE = SelectorComponent(kind=ComponentKind.WHITESPACE, text=" ")


def _build_selector(tokens: list) -> Selector:
    """Group selector tokens into compound, combinator and whitespace parts."""
    components: list[SelectorComponent] = []
    compound: list = []

    def flush() -> None:
        if compound:
            components.append(
                SelectorComponent(
                    kind=ComponentKind.COMPOUND, text=tinycss2.serialize(compound)
                )
            )
            compound.clear()

    for token in tokens:
        if token.type == "comment":
            continue
        if token.type == "whitespace":
            flush()
            if components and components[-1].kind is not ComponentKind.WHITESPACE:
                components.append(_WHITESPACE)
        elif token.type == "literal" and token.value in _COMBINATORS:
            flush()
            components.append(
                SelectorComponent(kind=ComponentKind.COMBINATOR, text=token.value)
            )
        else:
            compound.append(token)
    flush()

    while components and components[-1].kind is ComponentKind.WHITESPACE:
        components.pop()
    return Selector(components=components)


def _parse_selector_list(prelude: list) -> SelectorList:
    """Split a rule prelude on top-level commas."""
    groups: list[list] = [[]]
    for token in prelude:
        if token.type == "literal" and token.value == ",":
            groups.append([])
        else:
            groups[-1].append(token)
    selectors = [_build_selector(tokens) for tokens in groups]
    return SelectorList(selectors=[s for s in selectors if s.components])


def _parse_declarations(content: list) -> list[Declaration]:
    """Parse the body of a rule block into declarations.

    Invalid declarations are dropped with a warning, the way browsers
    ignore them.
    """
    declarations: list[Declaration] = []
    items = tinycss2.parse_declaration_list(
        content, skip_comments=True, skip_whitespace=True
    )
    for item in items:
        if item.type == "declaration":
            declarations.append(
                Declaration(
                    name=item.name,
                    value=tinycss2.serialize(item.value).strip(),
                    important=item.important,
                )
            )
        elif item.type == "error":
            logger.warning(
                "Dropping invalid declaration at line %s: %s",
                item.source_line,
                item.message,
            )
        else:
            logger.warning(
                "Dropping @%s nested in a declaration block at line %s",
                item.at_keyword,
                item.source_line,
            )
    return declarations


def _parse_at_rule(node) -> AtRule:
    prelude = tinycss2.serialize(node.prelude).strip()
    if node.content is None:
        return AtRule(name=node.at_keyword, prelude=prelude)
    if basename(node.at_keyword) in RULE_LIST_AT_RULES:
        items = tinycss2.parse_rule_list(
            node.content, skip_comments=False, skip_whitespace=True
        )
        return AtRule(name=node.at_keyword, prelude=prelude, rules=_parse_nodes(items))
    return AtRule(
        name=node.at_keyword,
        prelude=prelude,
        declarations=_parse_declarations(node.content),
    )


def _parse_nodes(items) -> list[Node]:
    nodes: list[Node] = []
    for item in items:
        if item.type == "qualified-rule":
            nodes.append(
                Rule(
                    selectors=_parse_selector_list(item.prelude),
                    declarations=_parse_declarations(item.content),
                )
            )
        elif item.type == "at-rule":
            nodes.append(_parse_at_rule(item))
        elif item.type == "comment":
            nodes.append(Comment(text=item.value))
        elif item.type == "error":
            raise StyleParseError(item.message, item.source_line, item.source_column)
        # whitespace tokens carry nothing
    return nodes


def parse_stylesheet(source: str) -> Stylesheet:
    """Parse stylesheet *source* into a :class:`Stylesheet`.

    Raises :class:`StyleParseError` when a rule cannot be parsed.
    """
    items = tinycss2.parse_stylesheet(source, skip_comments=False, skip_whitespace=True)
    return Stylesheet(children=_parse_nodes(items))
