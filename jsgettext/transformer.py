"""Match transformer — run keyword transforms and normalize what they return.

A transform may return a string, a list of strings, a falsy value, or any
other structured object. Structured objects are emitted as-is; strings become
ExtractedRecords carrying the match's line and comment.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from jsgettext.errors import TransformError
from jsgettext.models import (
    Empty,
    ExtractedRecord,
    Match,
    RawRecord,
    StringList,
    Transform,
    TransformResult,
)

logger = logging.getLogger(__name__)


def classify_result(value: Any) -> TransformResult:
    """Wrap a transform's raw return value in its result variant.

    Only scalar falsy values and empty string lists count as nothing; any
    other object, empty mappings included, is a structured record.
    """
    if isinstance(value, str):
        return StringList((value,)) if value else Empty()
    if isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value if v):
        return StringList(tuple(value)) if value else Empty()
    if value is None or isinstance(value, (bool, int, float)) and not value:
        return Empty()
    return RawRecord(value)


def apply_transform(match: Match, transforms: Mapping[str, Transform]) -> TransformResult:
    """Invoke the transform registered for ``match.keyword`` exactly once."""
    transform = transforms[match.keyword]
    try:
        value = transform(match)
    except Exception as e:
        raise TransformError(match.keyword, match.line, e) from e
    return classify_result(value)


def records_for(match: Match, result: TransformResult) -> list[Any]:
    """Build the output entries for one match."""
    if isinstance(result, RawRecord):
        return [result.value]
    if isinstance(result, Empty):
        return []
    return [
        ExtractedRecord(string=string, line=match.line, comment=match.comment)
        for string in result.strings
        if string
    ]


def transform_matches(matches: list[Match], transforms: Mapping[str, Transform]) -> list[Any]:
    """Transform every match in order and flatten the results into one list."""
    output: list[Any] = []
    for match in matches:
        output.extend(records_for(match, apply_transform(match, transforms)))

    logger.debug("Produced %d record(s) from %d match(es)", len(output), len(matches))
    return output
