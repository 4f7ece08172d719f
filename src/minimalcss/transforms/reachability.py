"""Reachability transform: drop selectors that match nothing in the document."""

from __future__ import annotations

import logging
from dataclasses import replace

from minimalcss.cache import CacheState, ReachabilityCache
from minimalcss.document import Document, parents_of
from minimalcss.errors import SelectorSyntaxError
from minimalcss.selectors import SIBLING_COMBINATORS, WILDCARD, SelectorChain, decompose
from minimalcss.stylesheet.model import AtRule, Comment, Node, Rule, SelectorList, Stylesheet

logger = logging.getLogger(__name__)


class ReachabilityTransform:
    """Remove selectors, rules and emptied grouping at-rules that can't apply.

    Each selector is decomposed into a chain of segments.  Segments are
    queried left to right, every query scoped to all elements matched by the
    prefix before it, and each prefix result is cached.  Rules inside
    ``@keyframes`` are not selectors and are kept untouched.
    """

    def __init__(self, document: Document, cache: ReachabilityCache | None = None) -> None:
        self.document = document
        self.cache = cache if cache is not None else ReachabilityCache()

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        children = self._prune(stylesheet.children)
        logger.debug(
            "Reachability: %d queries, %d cache hits, %d cached prefixes",
            self.document.queries,
            self.cache.hits,
            len(self.cache),
        )
        return Stylesheet(children=children)

    def _prune(self, nodes: list[Node]) -> list[Node]:
        kept: list[Node] = []
        for node in nodes:
            if isinstance(node, Rule):
                selectors = [
                    s for s in node.selectors if self.is_reachable(decompose(s), s.text)
                ]
                if selectors:
                    if len(selectors) < len(node.selectors):
                        node = replace(node, selectors=SelectorList(selectors=selectors))
                    kept.append(node)
            elif isinstance(node, AtRule):
                if node.rules is None or node.basename == "keyframes":
                    kept.append(node)
                    continue
                rules = self._prune(node.rules)
                # grouping rules emptied by pruning go too
                if node.rules and not any(isinstance(r, (Rule, AtRule)) for r in rules):
                    continue
                kept.append(replace(node, rules=rules))
            elif isinstance(node, Comment):
                kept.append(node)
            else:
                raise TypeError(f"Unknown stylesheet node: {node!r}")
        return kept

    def is_reachable(self, chain: SelectorChain, selector: str = "") -> bool:
        """Return whether every segment of *chain* matches inside its prefix.

        Raises :class:`SelectorSyntaxError` when a segment cannot be parsed
        by the selector engine.
        """
        if chain.always_reachable:
            return True

        scope = None
        key = ""
        sibling = False
        for segment, combinator in zip(chain.segments, chain.combinators):
            if combinator in SIBLING_COMBINATORS:
                sibling = True
            if segment == WILDCARD:
                continue
            if key:
                # siblings live under the parents, so they get their own key
                key += " ~ " if sibling else " "
            key += segment

            entry = self.cache.lookup(key)
            if entry.state is CacheState.EMPTY:
                return False
            if entry.state is CacheState.MATCHED:
                scope = entry.elements
                sibling = False
                continue

            if sibling and scope is not None:
                scope = parents_of(scope)
            try:
                matches = self.document.select(segment, scope)
            except SelectorSyntaxError as exc:
                raise SelectorSyntaxError(
                    f"Invalid selector {selector or key!r}: segment {segment!r} "
                    "is not understood by the selector engine",
                    selector=selector or key,
                    segment=segment,
                ) from exc
            if not matches:
                self.cache.record_empty(key)
                return False
            self.cache.record_matched(key, matches)
            scope = matches
            sibling = False
        return True
