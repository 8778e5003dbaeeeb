"""Helpers for reading tree-sitter nodes as JavaScript values and positions."""

from __future__ import annotations

from tree_sitter import Node

# Node types that only carry trivia and never count as an expression
TRIVIA_TYPES = {"comment", "html_comment"}

STRING_TYPES = {"string"}

_SIMPLE_ESCAPES = {
    "n": "\n",
    "t": "\t",
    "r": "\r",
    "b": "\b",
    "f": "\f",
    "v": "\v",
}

_LINE_TERMINATORS = "\r\n\u2028\u2029"


def node_position(node: Node, source: bytes) -> tuple[int, int]:
    """Return the 1-based line and 0-based character column of a node.

    tree-sitter reports columns in bytes, so the current line is decoded up to
    the node start to count characters instead.
    """
    row, byte_column = node.start_point
    line_start = node.start_byte - byte_column
    prefix = source[line_start:node.start_byte].decode("utf-8", errors="replace")
    return row + 1, len(prefix)


def node_text(node: Node) -> str:
    if node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def expression_children(node: Node) -> list[Node]:
    """Named children of a node with comments filtered out."""
    return [child for child in node.named_children if child.type not in TRIVIA_TYPES]


def unwrap_parentheses(node: Node) -> Node:
    """Strip grouping parentheses, which carry no node in an ESTree tree."""
    while node.type == "parenthesized_expression":
        children = expression_children(node)
        if len(children) != 1:
            break
        node = children[0]
    return node


def is_string_literal(node: Node) -> bool:
    return unwrap_parentheses(node).type in STRING_TYPES


def string_value(node: Node) -> str | None:
    """Decode a string literal node into its runtime value.

    Returns None for anything that is not a plain string literal; template
    strings are excluded since they are not literals.
    """
    if not is_string_literal(node):
        return None
    node = unwrap_parentheses(node)

    parts = []
    for child in node.named_children:
        if child.type == "string_fragment":
            parts.append(node_text(child))
        elif child.type == "escape_sequence":
            parts.append(decode_escape(node_text(child)))
        elif child.type == "html_character_reference":
            parts.append(node_text(child))

    value = "".join(parts)
    # Re-pair UTF-16 surrogates written as two \uXXXX escapes
    return value.encode("utf-16", "surrogatepass").decode("utf-16", "surrogatepass")


def decode_escape(sequence: str) -> str:
    """Decode a single JavaScript escape sequence such as ``\\n`` or ``\\u{1F600}``."""
    body = sequence[1:]
    if not body:
        return ""

    head = body[0]
    if head in _LINE_TERMINATORS:
        return ""
    if head in _SIMPLE_ESCAPES:
        return _SIMPLE_ESCAPES[head]
    if head == "x" and len(body) == 3:
        return chr(int(body[1:], 16))
    if body.startswith("u{") and body.endswith("}"):
        return chr(int(body[2:-1], 16))
    if head == "u" and len(body) == 5:
        return chr(int(body[1:], 16))
    if body.isdigit() and all(c in "01234567" for c in body):
        return chr(int(body, 8))
    return body


def iter_nodes(root: Node):
    """Yield every node under ``root`` in document (pre-order) order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))
