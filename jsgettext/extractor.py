"""XGettext engine — parse, discover keyword calls, and transform them.

Example::

    >>> XGettext().get_matches('_( "Hello World!" );')
    [{'string': 'Hello World!', 'line': 1}]
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jsgettext.config import DEFAULT_COMMENT_PREFIX, DEFAULT_LANGUAGE, ExtractorConfig
from jsgettext.discovery import discover_matches
from jsgettext.errors import ParseError
from jsgettext.models import ExtractedRecord, ExtractionResult
from jsgettext.parser import parse_source
from jsgettext.transformer import transform_matches
from jsgettext.utils.file_scanner import classify_file

logger = logging.getLogger(__name__)


class XGettext:
    """Extracts translatable strings from source text.

    Args:
        keywords: Keyword function name mapped to a transform callable or a
            1-based argument position. Replaces the default ``{"_": 1}``.
        comment_prefix: Translator comment prefix, matched case-insensitively
            at the start of a comment. None disables translator comments.
        language: ``javascript``, ``typescript`` or ``tsx``.
        config: A prebuilt configuration; when given, the other arguments
            are ignored.
    """

    def __init__(
        self,
        keywords: Mapping[str, object] | None = None,
        comment_prefix: str | None = DEFAULT_COMMENT_PREFIX,
        language: str = DEFAULT_LANGUAGE,
        config: ExtractorConfig | None = None,
    ):
        if config is None:
            config = ExtractorConfig.create(
                keywords=keywords, comment_prefix=comment_prefix, language=language
            )
        self.config = config

    @classmethod
    def from_config(cls, config: ExtractorConfig) -> XGettext:
        return cls(config=config)

    @property
    def keywords(self) -> tuple[str, ...]:
        return self.config.keywords.names

    def extract(self, source: str | bytes, language: str | None = None) -> list[Any]:
        """Return records for every keyword call in ``source``, in source order.

        Entries are ExtractedRecords, except where a transform returned a
        structured object, which is passed through unchanged.

        Raises:
            ParseError: ``source`` is not valid for the configured language.
            TransformError: A keyword transform raised.
        """
        parsed = parse_source(
            source,
            comment_pattern=self.config.comment_pattern,
            language=language or self.config.language,
        )
        matches = discover_matches(parsed, self.config.keywords)
        return transform_matches(matches, self.config.keywords)

    def get_matches(self, source: str | bytes) -> list[Any]:
        """Like extract(), with records rendered as plain dicts."""
        return [
            entry.to_dict() if isinstance(entry, ExtractedRecord) else entry
            for entry in self.extract(source)
        ]

    def extract_file(self, path: str | Path) -> ExtractionResult:
        """Extract from one file, choosing the grammar from its suffix.

        Parse errors are recorded on the result instead of raised so that a
        batch can continue past a broken file.
        """
        path = Path(path)
        language = classify_file(path) or self.config.language
        result = ExtractionResult(path=str(path), language=language)

        source = path.read_bytes()
        try:
            result.records = self.extract(source, language=language)
        except ParseError as e:
            logger.warning("Skipping %s: %s", path, e)
            result.error = str(e)
        return result
