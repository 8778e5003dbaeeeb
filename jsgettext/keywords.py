"""Keyword registry — maps keyword function names to transforms.

Configuration values are either a transform callable, used unchanged, or a
positive 1-based argument position, which becomes a transform that returns
that argument when it is a plain string literal.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from jsgettext.errors import ConfigurationError
from jsgettext.models import Match, Transform


def positional_transform(position: int) -> Transform:
    """Build a transform returning the string literal at ``position`` (1-based)."""
    index = position - 1

    def transform(match: Match) -> str | None:
        if len(match.arguments) > index and match.arguments[index].is_string:
            return match.arguments[index].value
        return None

    transform.__name__ = f"argument_{position}"
    return transform


def resolve_transform(name: str, value: object) -> Transform:
    """Turn one keyword configuration value into a transform."""
    # bool is an int subclass but never a meaningful position
    if isinstance(value, bool):
        raise ConfigurationError(f"Keyword '{name}': expected a callable or positive integer, got {value!r}")
    if isinstance(value, int):
        if value < 1:
            raise ConfigurationError(f"Keyword '{name}': argument position must be >= 1, got {value}")
        return positional_transform(value)
    if callable(value):
        return value
    raise ConfigurationError(
        f"Keyword '{name}': expected a callable or positive integer, got {type(value).__name__}"
    )


class KeywordRegistry(Mapping):
    """Immutable mapping of keyword name to transform."""

    def __init__(self, keywords: Mapping[str, object]):
        if not isinstance(keywords, Mapping):
            raise ConfigurationError(f"Keywords must be a mapping, got {type(keywords).__name__}")

        transforms: dict[str, Transform] = {}
        for name, value in keywords.items():
            if not isinstance(name, str) or not name:
                raise ConfigurationError(f"Keyword names must be non-empty strings, got {name!r}")
            transforms[name] = resolve_transform(name, value)

        self._transforms = MappingProxyType(transforms)
        self.names: tuple[str, ...] = tuple(transforms)

    def __getitem__(self, name: str) -> Transform:
        return self._transforms[name]

    def __contains__(self, name: object) -> bool:
        return name in self._transforms

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)

    def __repr__(self) -> str:
        return f"KeywordRegistry({', '.join(self.names)})"


def positions_transform(positions: tuple[int, ...]) -> Transform:
    """Build a transform returning the string literals at several positions.

    Used for plural keywords such as ``ngettext:1,2`` where each position
    yields its own record.
    """
    for position in positions:
        if isinstance(position, bool) or not isinstance(position, int) or position < 1:
            raise ConfigurationError(f"Argument positions must be integers >= 1, got {position!r}")
    single = [positional_transform(position) for position in positions]

    def transform(match: Match) -> list[str | None]:
        return [pick(match) for pick in single]

    transform.__name__ = "arguments_" + "_".join(str(p) for p in positions)
    return transform
