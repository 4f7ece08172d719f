"""Stylesheet model: rule tree nodes produced by the parser.

The tree is a closed set of node kinds.  Transforms never mutate nodes in
place; they build filtered copies with :func:`dataclasses.replace`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Union

_VENDOR_PREFIX_RE = re.compile(r"^-[a-z0-9]+-")


def basename(name: str) -> str:
    """Return *name* lower-cased and without a vendor prefix.

    ``-webkit-keyframes`` becomes ``keyframes``; custom properties (``--x``)
    are returned unchanged apart from case.
    """
    lowered = name.lower()
    if lowered.startswith("--"):
        return lowered
    return _VENDOR_PREFIX_RE.sub("", lowered, count=1)


class ComponentKind(Enum):
    """Kind of a syntactic fragment of a selector."""

    COMPOUND = "compound"
    COMBINATOR = "combinator"
    WHITESPACE = "whitespace"


@dataclass(frozen=True)
class SelectorComponent:
    kind: ComponentKind
    text: str  # serialized source text, escapes preserved


@dataclass(frozen=True)
class Selector:
    """One complex selector from a comma-separated selector list."""

    components: list[SelectorComponent]

    @property
    def text(self) -> str:
        return "".join(c.text for c in self.components).strip()


@dataclass(frozen=True)
class SelectorList:
    selectors: list[Selector]

    def __len__(self) -> int:
        return len(self.selectors)

    def __iter__(self):
        return iter(self.selectors)

    @property
    def text(self) -> str:
        return ", ".join(s.text for s in self.selectors)


@dataclass(frozen=True)
class Declaration:
    """A single ``name: value`` declaration."""

    name: str
    value: str
    important: bool = False

    @property
    def lower_name(self) -> str:
        return self.name.lower()

    @property
    def basename(self) -> str:
        return basename(self.name)


@dataclass(frozen=True)
class Rule:
    """A qualified rule: selector list plus declaration block."""

    selectors: SelectorList
    declarations: list[Declaration] = field(default_factory=list)


@dataclass(frozen=True)
class AtRule:
    """An ``@name prelude`` rule.

    At most one of *rules* and *declarations* is set.  Statement at-rules
    such as ``@import`` have neither.
    """

    name: str  # without the leading "@"
    prelude: str = ""
    rules: list[Node] | None = None
    declarations: list[Declaration] | None = None

    @property
    def basename(self) -> str:
        return basename(self.name)

    @property
    def has_block(self) -> bool:
        return self.rules is not None or self.declarations is not None


@dataclass(frozen=True)
class Comment:
    text: str  # without the /* */ delimiters

    @property
    def is_bang(self) -> bool:
        return self.text.startswith("!")


Node = Union[Rule, AtRule, Comment]


@dataclass(frozen=True)
class Stylesheet:
    """A parsed stylesheet: top-level nodes in source order."""

    children: list[Node]

    def iter_rules(self):
        """Yield ``(rule, enclosing_at_rules)`` for every rule in the tree."""
        yield from _iter_rules(self.children, ())


def _iter_rules(nodes: list[Node], parents: tuple[AtRule, ...]):
    for node in nodes:
        if isinstance(node, Rule):
            yield node, parents
        elif isinstance(node, AtRule) and node.rules is not None:
            yield from _iter_rules(node.rules, parents + (node,))
