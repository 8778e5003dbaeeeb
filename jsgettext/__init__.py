"""jsgettext — extract translatable strings from JavaScript source.

Finds calls to configured keyword functions (``_("Hello")``) in a tree-sitter
syntax tree, attaches nearby translator comments, and runs each call through a
keyword transform to produce extracted string records.
"""

from jsgettext.errors import ConfigurationError, ExtractionError, ParseError, TransformError
from jsgettext.extractor import XGettext
from jsgettext.models import ExtractedRecord, Match

__version__ = "0.3.0"

__all__ = [
    "ConfigurationError",
    "ExtractedRecord",
    "ExtractionError",
    "Match",
    "ParseError",
    "TransformError",
    "XGettext",
    "__version__",
]
