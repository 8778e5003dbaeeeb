"""Extraction data models — comments, matches, transform results and records.

A parse produces TranslatorComments, the discoverer turns keyword calls into
Matches, and the transformer maps each Match through its keyword transform
into ExtractedRecords (or raw structured values a transform chose to emit).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Union

from tree_sitter import Node

from jsgettext.nodes import is_string_literal, node_text, string_value


@dataclass(frozen=True)
class TranslatorComment:
    """A comment that starts with the translator prefix, prefix stripped."""

    text: str
    line: int
    column: int = 0


@dataclass(frozen=True)
class ArgumentNode:
    """Read-only view over one call argument in the syntax tree."""

    node: Node
    line: int
    column: int

    @property
    def type(self) -> str:
        return self.node.type

    @property
    def text(self) -> str:
        """Source text of the argument expression."""
        return node_text(self.node)

    @property
    def is_string(self) -> bool:
        return is_string_literal(self.node)

    @property
    def value(self) -> str | None:
        """Decoded value for string literals, None for any other expression."""
        return string_value(self.node)


@dataclass(frozen=True)
class Match:
    """A call to a registered keyword function."""

    keyword: str
    arguments: tuple[ArgumentNode, ...]
    line: int
    column: int = 0
    comment: str | None = None


# --- Transform results ---


@dataclass(frozen=True)
class StringList:
    """Transform produced zero or more candidate strings."""

    strings: tuple[Any, ...] = ()


@dataclass(frozen=True)
class RawRecord:
    """Transform produced a structured value that is emitted verbatim."""

    value: Any


@dataclass(frozen=True)
class Empty:
    """Transform produced nothing for this match."""


TransformResult = Union[StringList, RawRecord, Empty]

Transform = Callable[[Match], Any]


@dataclass(frozen=True)
class ExtractedRecord:
    """A translatable string found in the source."""

    string: str
    line: int
    comment: str | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"string": self.string, "line": self.line}
        if self.comment is not None:
            data["comment"] = self.comment
        return data


@dataclass
class ExtractionResult:
    """Records extracted from one file, used by the command line."""

    path: str
    language: str
    records: list[Any] = field(default_factory=list)
    error: str = ""

    @property
    def ok(self) -> bool:
        return not self.error
