"""Markup document wrapper: lenient parsing and scoped selector queries."""

from __future__ import annotations

from typing import Iterable

import soupsieve
from bs4 import BeautifulSoup, Tag

from minimalcss.errors import SelectorSyntaxError

__all__ = ["Document", "parse_document", "parents_of"]


class Document:
    """A parsed markup document that answers selector queries.

    ``select`` is the only way the rest of the package touches the markup
    tree, so the parser and matcher stay swappable.
    """

    def __init__(self, soup: BeautifulSoup) -> None:
        self.soup = soup
        self.queries = 0

    def select(
        self, selector: str, scope: Iterable[Tag] | None = None
    ) -> tuple[Tag, ...]:
        """Return every element matching *selector*.

        With *scope* ``None`` the whole document is searched.  Otherwise the
        result is the union of matches inside the subtrees of all elements in
        *scope*, in order of first appearance and without duplicates.
        """
        try:
            pattern = soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as exc:
            raise SelectorSyntaxError(
                f"Invalid selector {selector!r}: {exc}", segment=selector
            ) from exc

        self.queries += 1
        if scope is None:
            return tuple(pattern.select(self.soup))

        seen: set[int] = set()
        matches: list[Tag] = []
        for element in scope:
            for match in pattern.select(element):
                if id(match) not in seen:
                    seen.add(id(match))
                    matches.append(match)
        return tuple(matches)


def parse_document(markup: str, features: str = "html.parser") -> Document:
    """Parse *markup* with BeautifulSoup.

    Malformed markup degrades to a best-effort tree rather than failing.
    """
    return Document(BeautifulSoup(markup, features))


def parents_of(elements: Iterable[Tag]) -> tuple[Tag, ...]:
    """Return the distinct parents of *elements*, in order of first appearance."""
    seen: set[int] = set()
    parents: list[Tag] = []
    for element in elements:
        parent = element.parent
        if parent is not None and id(parent) not in seen:
            seen.add(id(parent))
            parents.append(parent)
    return tuple(parents)
