"""Extractor configuration — immutable settings built once per engine.

Settings can be passed directly, loaded from a YAML file, or assembled from
``NAME[:N]`` command line keyword options.
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType

import yaml

from jsgettext.errors import ConfigurationError
from jsgettext.keywords import KeywordRegistry, positions_transform

DEFAULT_KEYWORDS: Mapping[str, int] = MappingProxyType({"_": 1})
DEFAULT_COMMENT_PREFIX = "translators:"
DEFAULT_LANGUAGE = "javascript"
SUPPORTED_LANGUAGES = ("javascript", "typescript", "tsx")

CONFIG_KEYS = {"keywords", "comment_prefix", "language"}


@dataclass(frozen=True)
class ExtractorConfig:
    """Validated engine configuration.

    The comment pattern is derived from ``comment_prefix`` on construction,
    so direct construction and create() yield the same behaviour.
    """

    keywords: KeywordRegistry
    comment_prefix: str | None = DEFAULT_COMMENT_PREFIX
    language: str = DEFAULT_LANGUAGE
    comment_pattern: re.Pattern | None = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self):
        if not isinstance(self.keywords, KeywordRegistry):
            object.__setattr__(self, "keywords", KeywordRegistry(self.keywords))
        if self.language not in SUPPORTED_LANGUAGES:
            raise ConfigurationError(
                f"Unsupported language '{self.language}'. Must be one of: {', '.join(SUPPORTED_LANGUAGES)}"
            )
        object.__setattr__(self, "comment_pattern", compile_comment_prefix(self.comment_prefix))

    @classmethod
    def create(
        cls,
        keywords: Mapping[str, object] | None = None,
        comment_prefix: str | None = DEFAULT_COMMENT_PREFIX,
        language: str = DEFAULT_LANGUAGE,
    ) -> ExtractorConfig:
        """Validate raw settings. ``keywords=None`` selects the defaults."""
        return cls(
            keywords=KeywordRegistry(DEFAULT_KEYWORDS if keywords is None else keywords),
            comment_prefix=comment_prefix,
            language=language,
        )


def compile_comment_prefix(prefix: str | None) -> re.Pattern | None:
    """Compile the translator comment prefix, or None when comments are disabled."""
    if prefix is None:
        return None
    if not isinstance(prefix, str):
        raise ConfigurationError(f"Comment prefix must be a string or None, got {type(prefix).__name__}")
    try:
        return re.compile(rf"^\s*(?:{prefix})", re.IGNORECASE)
    except re.error as e:
        raise ConfigurationError(f"Invalid comment prefix pattern '{prefix}': {e}") from e


def parse_keyword_option(option: str) -> tuple[str, object]:
    """Parse an xgettext-style keyword option: ``_``, ``__:2`` or ``ngettext:1,2``."""
    name, sep, positions_text = option.partition(":")
    name = name.strip()
    if not name:
        raise ConfigurationError(f"Keyword option '{option}' has no function name")
    if not sep:
        return name, 1

    try:
        positions = tuple(int(part) for part in positions_text.split(","))
    except ValueError as e:
        raise ConfigurationError(f"Keyword option '{option}': argument positions must be integers") from e

    if len(positions) == 1:
        return name, positions[0]
    return name, positions_transform(positions)


def parse_keyword_options(options: list[str] | tuple[str, ...]) -> dict[str, object]:
    keywords: dict[str, object] = {}
    for option in options:
        name, value = parse_keyword_option(option)
        keywords[name] = value
    return keywords


def load_config(path: str | Path) -> ExtractorConfig:
    """Load extractor settings from a YAML file.

    Example::

        keywords:
          _: 1
          __: 2
          ngettext: "1,2"
        comment_prefix: "translators:"
        language: javascript

    A ``comment_prefix: null`` entry disables translator comments.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigurationError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file {path} must contain a mapping")

    unknown = set(data) - CONFIG_KEYS
    if unknown:
        raise ConfigurationError(f"Unknown config keys in {path}: {', '.join(sorted(unknown))}")

    keywords = None
    if "keywords" in data:
        keywords = _keywords_from_yaml(data["keywords"])

    return ExtractorConfig.create(
        keywords=keywords,
        comment_prefix=data.get("comment_prefix", DEFAULT_COMMENT_PREFIX),
        language=data.get("language", DEFAULT_LANGUAGE),
    )


def _keywords_from_yaml(raw: object) -> dict[str, object]:
    """Accept either a name -> position mapping or a list of keyword options."""
    if isinstance(raw, list):
        return parse_keyword_options([str(item) for item in raw])
    if not isinstance(raw, dict):
        raise ConfigurationError("'keywords' must be a mapping or a list of NAME[:N] entries")

    keywords: dict[str, object] = {}
    for name, value in raw.items():
        if isinstance(value, str):
            _, keywords[str(name)] = parse_keyword_option(f"{name}:{value}")
        else:
            keywords[str(name)] = value
    return keywords
