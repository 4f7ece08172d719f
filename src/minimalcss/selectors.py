"""Selector decomposition: split a selector into reduced segments.

A selector such as ``div.ingress > p a:hover`` becomes the chain
``("div.ingress", "p", "a")``.  Every combinator is a segment boundary.
Segments after a descendant or child combinator are looked for anywhere
below the elements matched so far; segments after a sibling combinator
anywhere below their parents.  The check is conservative: it may keep a
selector whose combinators would not match, never drop one that could.
"""

from __future__ import annotations

from dataclasses import dataclass

from minimalcss.stylesheet.model import ComponentKind, Selector

__all__ = ["SelectorChain", "decompose", "reduce_selector"]

WILDCARD = "*"
DESCENDANT = " "
SIBLING_COMBINATORS = frozenset({"+", "~"})


@dataclass(frozen=True)
class SelectorChain:
    """Reduced segments of one selector, outermost ancestor first.

    ``combinators[i]`` is the combinator in front of ``segments[i]``
    (``" "`` for the first segment and for descendants).
    """

    segments: tuple[str, ...]
    combinators: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.combinators:
            object.__setattr__(self, "combinators", (DESCENDANT,) * len(self.segments))

    @property
    def always_reachable(self) -> bool:
        """True for ``*`` and for selectors made only of pseudo parts."""
        return not self.segments or self.segments == (WILDCARD,)


def reduce_selector(selector: str) -> str:
    """Strip pseudo-classes and pseudo-elements from a compound selector.

    Returns everything before the first colon that is neither escaped nor
    inside a quoted string:

        a:hover                      -> a
        input::-moz-focus-inner      -> input
        a[href^="javascript:"]:after -> a[href^="javascript:"]
        .hover\\:text-red:hover       -> .hover\\:text-red
    """
    quote = None
    i = 0
    while i < len(selector):
        ch = selector[i]
        if ch == "\\":
            i += 2
            continue
        if quote:
            if ch == quote:
                quote = None
        elif ch in ("'", '"'):
            quote = ch
        elif ch == ":":
            return selector[:i]
        i += 1
    return selector


def decompose(selector: Selector) -> SelectorChain:
    """Split *selector* at whitespace and combinators into reduced segments."""
    segments: list[str] = []
    combinators: list[str] = []
    pending = DESCENDANT
    for component in selector.components:
        if component.kind is ComponentKind.COMBINATOR:
            pending = component.text
        elif component.kind is ComponentKind.COMPOUND:
            reduced = reduce_selector(component.text).strip()
            if reduced:
                segments.append(reduced)
                combinators.append(pending if len(segments) > 1 else DESCENDANT)
            pending = DESCENDANT
    return SelectorChain(segments=tuple(segments), combinators=tuple(combinators))
