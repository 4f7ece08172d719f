"""Base protocol for rule tree transforms."""

from __future__ import annotations

from typing import Protocol

from minimalcss.stylesheet.model import Stylesheet


class Transform(Protocol):
    """A stylesheet-to-stylesheet pruning step."""

    def apply(self, stylesheet: Stylesheet) -> Stylesheet: ...
