"""Options and Result dataclasses for :func:`minimalcss.minimize`."""

from __future__ import annotations

from dataclasses import dataclass

from minimalcss.stylesheet.model import Stylesheet


@dataclass(frozen=True)
class Options:
    """Settings for one minimize call.

    Attributes:
        include_stats_comment: Prepend a ``/* length before: N length
            after: M */`` comment to the output.
        remove_exclamation_comments: Drop ``/*! ... */`` comments, which
            are kept by default.
        markup_parser: Name of the BeautifulSoup tree builder for the markup.
        compress: Compress the output; when false the readable
            serialization is returned.
    """

    include_stats_comment: bool = False
    remove_exclamation_comments: bool = False
    markup_parser: str = "html.parser"  # any BeautifulSoup tree builder
    compress: bool = True


@dataclass(frozen=True)
class Result:
    """Outcome of one minimize call.

    Attributes:
        final_css: The pruned, serialized (and usually compressed) CSS.
        size_before: Length of the input stylesheet text.
        size_after: Length of the output, excluding the stats comment.
        tree: The rule tree after selector reachability pruning.
        final_tree: The rule tree after unused at-rules were removed and
            adjacent duplicate rules were merged.
    """

    final_css: str
    size_before: int
    size_after: int
    tree: Stylesheet
    final_tree: Stylesheet
