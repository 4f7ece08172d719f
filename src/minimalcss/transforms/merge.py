"""Merge transform: fold adjacent rules that share a selector list."""

from __future__ import annotations

import logging
from dataclasses import replace

from minimalcss.stylesheet.model import AtRule, Node, Rule, Stylesheet

logger = logging.getLogger(__name__)


class MergeTransform:
    """Join runs of adjacent rules with identical selector text.

    ``h1 { color: blue } h1 { font-weight: bold }`` becomes one ``h1`` rule
    carrying both declarations in their original order.  Only neighbours are
    merged, so the cascade order against other rules is unchanged.  Applied
    at every nesting level except inside ``@keyframes``.
    """

    def __init__(self) -> None:
        self.merged = 0

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        children = self._merge(stylesheet.children)
        if self.merged:
            logger.debug("Merged %d adjacent duplicate rules", self.merged)
        return Stylesheet(children=children)

    def _merge(self, nodes: list[Node]) -> list[Node]:
        merged: list[Node] = []
        for node in nodes:
            if isinstance(node, AtRule) and node.rules is not None:
                if node.basename != "keyframes":
                    node = replace(node, rules=self._merge(node.rules))
            elif (
                isinstance(node, Rule)
                and merged
                and isinstance(merged[-1], Rule)
                and merged[-1].selectors.text == node.selectors.text
            ):
                previous = merged[-1]
                merged[-1] = replace(
                    previous, declarations=previous.declarations + node.declarations
                )
                self.merged += 1
                continue
            merged.append(node)
        return merged
