"""Call-site discoverer — find keyword calls in a parsed tree.

Callees hidden behind parentheses or comma expressions, as emitted by
transpilers (``(0, _i18n._)("Hello")``), are unwrapped to their last
expression before the name is looked up.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Container

from tree_sitter import Node

from jsgettext.models import ArgumentNode, Match, TranslatorComment
from jsgettext.nodes import expression_children, iter_nodes, node_position, node_text
from jsgettext.parser import ParsedSource

logger = logging.getLogger(__name__)

CALL_TYPES = {"call_expression"}

# Expressions that evaluate to their last child
WRAPPER_TYPES = {"parenthesized_expression", "sequence_expression"}


def _identifier_name(node: Node) -> str | None:
    return node_text(node)


def _member_name(node: Node) -> str | None:
    prop = node.child_by_field_name("property")
    if prop is None:
        return None
    return node_text(prop)


# Callee node type -> name reader
CALLEE_NAMERS: dict[str, Callable[[Node], str | None]] = {
    "identifier": _identifier_name,
    "member_expression": _member_name,
}


def discover_matches(parsed: ParsedSource, keywords: Container[str]) -> list[Match]:
    """Return a Match for every call to a registered keyword, in document order.

    Nested calls are each reported, so ``_(_("x"))`` yields two matches, the
    outer one first.
    """
    matches = []
    for node in iter_nodes(parsed.root):
        if node.type not in CALL_TYPES:
            continue
        match = _match_call(node, parsed, keywords)
        if match is not None:
            matches.append(match)

    logger.debug("Discovered %d keyword call(s)", len(matches))
    return matches


def _match_call(node: Node, parsed: ParsedSource, keywords: Container[str]) -> Match | None:
    callee = node.child_by_field_name("function")
    if callee is None:
        return None

    name = callee_name(callee)
    if name is None or name not in keywords:
        return None

    # Tagged templates parse as calls with a template_string argument
    args_node = node.child_by_field_name("arguments")
    if args_node is None or args_node.type != "arguments":
        return None

    arguments = tuple(
        ArgumentNode(child, *node_position(child, parsed.source))
        for child in expression_children(args_node)
    )
    line, column = node_position(node, parsed.source)

    return Match(
        keyword=name,
        arguments=arguments,
        line=line,
        column=column,
        comment=associate_comment(parsed.comments, line, column),
    )


def unwrap_callee(node: Node) -> Node:
    """Resolve parenthesized and comma expressions to their final expression."""
    while node.type in WRAPPER_TYPES:
        children = expression_children(node)
        if not children:
            break
        node = children[-1]
    return node


def callee_name(node: Node) -> str | None:
    """Name a call is made through: the identifier, or a member's property."""
    resolved = unwrap_callee(node)
    namer = CALLEE_NAMERS.get(resolved.type)
    if namer is None:
        return None
    return namer(resolved)


def associate_comment(comments: list[TranslatorComment], line: int, column: int) -> str | None:
    """Pick the translator comment for a call starting at ``line``/``column``.

    Only comments on the call's line or the line above qualify. A comment on
    the same line wins over one on the line above; on the same line the last
    comment before the call wins, then the first one after it.
    """
    leading = trailing = previous = None
    for comment in comments:
        if comment.line == line:
            if comment.column <= column:
                leading = comment
            elif trailing is None:
                trailing = comment
        elif comment.line == line - 1:
            previous = comment

    chosen = leading or trailing or previous
    return chosen.text if chosen is not None else None
