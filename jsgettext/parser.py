"""Source parser adapter — tree-sitter parsing plus translator comment collection.

tree-sitter is error tolerant, so a tree containing ERROR or MISSING nodes is
turned into a ParseError here rather than being walked.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field

from tree_sitter import Language, Node, Parser, Tree

from jsgettext.errors import ConfigurationError, ParseError
from jsgettext.models import TranslatorComment
from jsgettext.nodes import iter_nodes, node_position, node_text

logger = logging.getLogger(__name__)

COMMENT_TYPES = {"comment", "html_comment"}


def _load_grammar(language: str) -> Language:
    if language == "javascript":
        import tree_sitter_javascript

        return Language(tree_sitter_javascript.language())
    if language == "typescript":
        import tree_sitter_typescript

        return Language(tree_sitter_typescript.language_typescript())
    if language == "tsx":
        import tree_sitter_typescript

        return Language(tree_sitter_typescript.language_tsx())
    raise ConfigurationError(f"No grammar available for language '{language}'")


# Cache loaded grammars.
_grammar_cache: dict[str, Language] = {}


def get_grammar(language: str) -> Language:
    if language not in _grammar_cache:
        logger.debug("Loading tree-sitter grammar for %s", language)
        _grammar_cache[language] = _load_grammar(language)
    return _grammar_cache[language]


@dataclass
class ParsedSource:
    """A syntax tree together with the translator comments found in it."""

    tree: Tree
    source: bytes
    comments: list[TranslatorComment] = field(default_factory=list)

    @property
    def root(self) -> Node:
        return self.tree.root_node


def parse_source(
    source: str | bytes,
    comment_pattern: re.Pattern | None = None,
    language: str = "javascript",
) -> ParsedSource:
    """Parse source text and collect comments matching ``comment_pattern``.

    Args:
        source: JavaScript (or TypeScript) source text.
        comment_pattern: Compiled translator prefix, anchored at the start of
            the comment body. None disables comment collection.
        language: Grammar to parse with.

    Raises:
        ParseError: The source contains syntax errors.
    """
    data = source.encode("utf-8") if isinstance(source, str) else source

    parser = Parser(get_grammar(language))
    tree = parser.parse(data)

    if tree.root_node.has_error:
        raise _parse_error(tree.root_node, data)

    parsed = ParsedSource(tree=tree, source=data)
    if comment_pattern is not None:
        parsed.comments = collect_comments(tree.root_node, data, comment_pattern)
        logger.debug("Collected %d translator comment(s)", len(parsed.comments))

    return parsed


def collect_comments(root: Node, source: bytes, pattern: re.Pattern) -> list[TranslatorComment]:
    """Return translator comments in source order, prefix stripped and trimmed."""
    comments = []
    for node in iter_nodes(root):
        if node.type not in COMMENT_TYPES:
            continue
        body = comment_body(node_text(node))
        if not pattern.match(body):
            continue
        line, column = node_position(node, source)
        comments.append(
            TranslatorComment(text=pattern.sub("", body, count=1).strip(), line=line, column=column)
        )
    return comments


def comment_body(text: str) -> str:
    """Strip comment delimiters, leaving the text a JavaScript parser reports."""
    if text.startswith("//"):
        return text[2:]
    if text.startswith("/*"):
        return text[2:-2] if text.endswith("*/") and len(text) >= 4 else text[2:]
    if text.startswith("<!--"):
        return text[4:]
    return text


def _parse_error(root: Node, source: bytes) -> ParseError:
    for node in iter_nodes(root):
        if node.is_missing:
            line, column = node_position(node, source)
            return ParseError(f"Missing '{node.type}'", line, column)
        if node.is_error:
            line, column = node_position(node, source)
            snippet = node_text(node).splitlines()[0][:40] if node_text(node) else ""
            return ParseError(f"Unexpected token {snippet!r}", line, column)
    line, column = node_position(root, source)
    return ParseError("Invalid syntax", line, column)
