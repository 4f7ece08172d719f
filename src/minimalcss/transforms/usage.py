"""Usage transform: drop ``@keyframes`` and ``@font-face`` nobody refers to.

Runs after reachability pruning, so only declarations of rules that
survived count as references.  ``@media print`` blocks are always removed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable

from minimalcss.stylesheet.model import AtRule, Declaration, Node, Stylesheet

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UsageSets:
    """Animation and font-family names referenced by surviving rules."""

    animation_names: frozenset[str] = frozenset()
    font_family_names: frozenset[str] = frozenset()


def unquote(text: str) -> str:
    """Strip one matching pair of single or double quotes from *text*."""
    if len(text) >= 2 and text[0] == text[-1] and text[0] in ("'", '"'):
        return text[1:-1]
    return text


def _rule_declarations(stylesheet: Stylesheet):
    """Yield declarations of every rule outside ``@keyframes`` blocks."""
    for rule, parents in stylesheet.iter_rules():
        if any(p.basename == "keyframes" for p in parents):
            continue
        yield from rule.declarations


def collect_animation_names(stylesheet: Stylesheet) -> frozenset[str]:
    """Names used by ``animation`` (first token) and ``animation-name``."""
    names: set[str] = set()
    for decl in _rule_declarations(stylesheet):
        if decl.basename == "animation":
            tokens = decl.value.split()
            if tokens:
                names.add(tokens[0])
        elif decl.basename == "animation-name":
            names.add(decl.value)
    return frozenset(names)


def collect_font_family_names(stylesheet: Stylesheet) -> frozenset[str]:
    """Every comma-separated, unquoted name of every ``font-family``."""
    names: set[str] = set()
    for decl in _rule_declarations(stylesheet):
        if decl.lower_name == "font-family":
            for value in decl.value.split(","):
                names.add(unquote(value.strip()))
    return frozenset(names)


def _font_face_family(at_rule: AtRule) -> str | None:
    family = None
    for decl in at_rule.declarations or []:
        if decl.lower_name == "font-family":
            family = unquote(decl.value.strip())
    return family


def _filter_at_rules(nodes: list[Node], keep: Callable[[AtRule], bool]) -> list[Node]:
    """Drop at-rules rejected by *keep*, at any nesting depth."""
    kept: list[Node] = []
    for node in nodes:
        if isinstance(node, AtRule):
            if not keep(node):
                continue
            if node.rules is not None:
                node = replace(node, rules=_filter_at_rules(node.rules, keep))
        kept.append(node)
    return kept


class UsageTransform:
    """Four ordered passes: animation names, keyframes and print media,
    font-family names, font faces.

    ``usage`` holds the sets collected by the last :meth:`apply` call.
    """

    def __init__(self) -> None:
        self.usage = UsageSets()

    def apply(self, stylesheet: Stylesheet) -> Stylesheet:
        animation_names = collect_animation_names(stylesheet)

        def keep_used_keyframes(at_rule: AtRule) -> bool:
            if at_rule.basename == "keyframes":
                if at_rule.prelude not in animation_names:
                    logger.debug("Removing unused @keyframes %s", at_rule.prelude)
                    return False
            elif at_rule.basename == "media" and at_rule.prelude.lower() == "print":
                logger.debug("Removing @media print")
                return False
            return True

        stylesheet = Stylesheet(
            children=_filter_at_rules(stylesheet.children, keep_used_keyframes)
        )

        font_family_names = collect_font_family_names(stylesheet)

        def keep_used_font_faces(at_rule: AtRule) -> bool:
            if at_rule.basename != "font-face":
                return True
            family = _font_face_family(at_rule)
            if family is not None and family not in font_family_names:
                logger.debug("Removing unused @font-face %s", family)
                return False
            return True

        stylesheet = Stylesheet(
            children=_filter_at_rules(stylesheet.children, keep_used_font_faces)
        )

        self.usage = UsageSets(
            animation_names=animation_names, font_family_names=font_family_names
        )
        return stylesheet
