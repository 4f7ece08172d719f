"""The minimize entry point: prune a stylesheet against one document."""

from __future__ import annotations

import logging
import time

from minimalcss.cache import ReachabilityCache
from minimalcss.document import parse_document
from minimalcss.options import Options, Result
from minimalcss.stylesheet import compress, parse_stylesheet, serialize
from minimalcss.transforms import (
    MergeTransform,
    ReachabilityTransform,
    UsageTransform,
    apply_transforms,
)

logger = logging.getLogger(__name__)


def minimize(html: str, css: str, options: Options | None = None) -> Result:
    """Return *css* reduced to the rules that can apply to *html*.

    Every call parses both inputs and builds its own cache; nothing is
    shared between calls.  Raises :class:`~minimalcss.errors.StyleParseError`
    or :class:`~minimalcss.errors.SelectorSyntaxError`; there is no partial
    output.
    """
    options = options or Options()

    start = time.monotonic()
    document = parse_document(html, options.markup_parser)
    stylesheet = parse_stylesheet(css)
    logger.debug("Parsed markup and stylesheet in %.3fs", time.monotonic() - start)

    start = time.monotonic()
    tree = ReachabilityTransform(document, ReachabilityCache()).apply(stylesheet)
    final_tree = apply_transforms(tree, [UsageTransform(), MergeTransform()])
    logger.debug("Pruned rule tree in %.3fs", time.monotonic() - start)

    start = time.monotonic()
    keep_bang_comments = not options.remove_exclamation_comments
    final_css = serialize(final_tree, keep_bang_comments=keep_bang_comments)
    if options.compress:
        final_css = compress(final_css, keep_bang_comments=keep_bang_comments)
    logger.debug("Serialized output in %.3fs", time.monotonic() - start)

    size_before = len(css)
    size_after = len(final_css)
    if options.include_stats_comment:
        final_css = (
            f"/* length before: {size_before} length after: {size_after} */\n"
            f"{final_css}"
        )
    logger.info("Reduced stylesheet from %d to %d characters", size_before, size_after)

    return Result(
        final_css=final_css,
        size_before=size_before,
        size_after=size_after,
        tree=tree,
        final_tree=final_tree,
    )
