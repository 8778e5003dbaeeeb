"""Error taxonomy for the extraction engine."""

from __future__ import annotations


class ExtractionError(Exception):
    """Base class for every error raised by jsgettext."""


class ConfigurationError(ExtractionError, ValueError):
    """Keyword, comment prefix, language or config file settings are invalid."""


class ParseError(ExtractionError):
    """The source text is not valid for the selected language."""

    def __init__(self, message: str, line: int = 0, column: int = 0):
        self.message = message
        self.line = line
        self.column = column
        super().__init__(f"{message} ({line}:{column})")


class TransformError(ExtractionError):
    """A keyword transform raised while handling a match."""

    def __init__(self, keyword: str, line: int, cause: BaseException):
        self.keyword = keyword
        self.line = line
        super().__init__(f"Transform for '{keyword}' failed at line {line}: {cause}")
