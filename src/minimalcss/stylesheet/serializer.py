"""Turn a rule tree back into CSS text, optionally compressed with rcssmin."""

from __future__ import annotations

import rcssmin

from minimalcss.stylesheet.model import (
    AtRule,
    Comment,
    Declaration,
    Node,
    Rule,
    Stylesheet,
)

__all__ = ["serialize", "compress"]


def _serialize_declarations(declarations: list[Declaration]) -> str:
    parts = []
    for decl in declarations:
        important = " !important" if decl.important else ""
        parts.append(f"{decl.name}: {decl.value}{important};")
    return " ".join(parts)


def _serialize_node(node: Node, indent: str, keep_bang_comments: bool) -> str:
    if isinstance(node, Rule):
        body = _serialize_declarations(node.declarations)
        return f"{indent}{node.selectors.text} {{ {body} }}"
    if isinstance(node, AtRule):
        head = f"{indent}@{node.name}"
        if node.prelude:
            head += f" {node.prelude}"
        if not node.has_block:
            return f"{head};"
        if node.rules is not None:
            inner = _serialize_nodes(node.rules, indent + "  ", keep_bang_comments)
            return f"{head} {{\n{inner}\n{indent}}}"
        return f"{head} {{ {_serialize_declarations(node.declarations)} }}"
    if isinstance(node, Comment):
        return f"{indent}/*{node.text}*/"
    raise TypeError(f"Unknown stylesheet node: {node!r}")


def _serialize_nodes(nodes: list[Node], indent: str, keep_bang_comments: bool) -> str:
    return "\n".join(
        _serialize_node(node, indent, keep_bang_comments)
        for node in nodes
        if keep_bang_comments or not (isinstance(node, Comment) and node.is_bang)
    )


def serialize(stylesheet: Stylesheet, keep_bang_comments: bool = True) -> str:
    """Serialize *stylesheet* as readable CSS, one top-level node per line.

    ``/*! ... */`` comments are left out unless *keep_bang_comments* is true.
    """
    return _serialize_nodes(stylesheet.children, "", keep_bang_comments)


def compress(css: str, keep_bang_comments: bool = True) -> str:
    """Syntactically compress *css*.

    Comments are removed except ``/*! ... */`` ones when
    *keep_bang_comments* is true.
    """
    return rcssmin.cssmin(css, keep_bang_comments=keep_bang_comments)
