from minimalcss.stylesheet.parser import parse_stylesheet
from minimalcss.stylesheet.serializer import compress, serialize
from minimalcss.stylesheet.model import (
    AtRule,
    Comment,
    ComponentKind,
    Declaration,
    Rule,
    Selector,
    SelectorComponent,
    SelectorList,
    Stylesheet,
)

__all__ = [
    "parse_stylesheet",
    "serialize",
    "compress",
    "AtRule",
    "Comment",
    "ComponentKind",
    "Declaration",
    "Rule",
    "Selector",
    "SelectorComponent",
    "SelectorList",
    "Stylesheet",
]
