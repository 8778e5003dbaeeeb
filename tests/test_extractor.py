"""Tests for the XGettext engine."""

import pytest

from jsgettext import ExtractedRecord, ParseError, TransformError, XGettext
from jsgettext.config import ExtractorConfig
from jsgettext.keywords import KeywordRegistry


def test_instantiable_with_defaults():
    parser = XGettext()
    assert isinstance(parser, XGettext)
    assert parser.keywords == ("_",)
    assert parser.config.comment_prefix == "translators:"


def test_returns_translatable_strings():
    matches = XGettext().get_matches('_( "Hello World!" );')
    assert matches == [{"string": "Hello World!", "line": 1}]


def test_extract_returns_records():
    records = XGettext().extract('_( "Hello World!" );')
    assert records == [ExtractedRecord(string="Hello World!", line=1)]


def test_comment_on_same_line():
    matches = XGettext().get_matches('_( "Hello World!" ); /* translators: greeting */')
    assert matches == [{"string": "Hello World!", "comment": "greeting", "line": 1}]


def test_comment_on_previous_line():
    matches = XGettext().get_matches('/* translators: greeting */\n_( "Hello World!" );')
    assert matches == [{"string": "Hello World!", "comment": "greeting", "line": 2}]


def test_line_comment_on_previous_line():
    matches = XGettext().get_matches('// translators: greeting\n_( "Hello World!" );')
    assert matches == [{"string": "Hello World!", "comment": "greeting", "line": 2}]


def test_comment_two_lines_away_is_ignored():
    matches = XGettext().get_matches('/* translators: greeting */\n\n_( "Hello World!" );')
    assert matches == [{"string": "Hello World!", "line": 3}]


def test_comment_without_prefix_is_ignored():
    matches = XGettext().get_matches('// just a note\n_( "Hello World!" );')
    assert matches == [{"string": "Hello World!", "line": 2}]


def test_comment_prefix_is_case_insensitive():
    matches = XGettext().get_matches('// TRANSLATORS: greeting\n_( "Hello World!" );')
    assert matches[0]["comment"] == "greeting"


def test_custom_comment_prefix():
    parser = XGettext(comment_prefix="note:")
    matches = parser.get_matches('_( "Hello World!" ); /* note: greeting */')
    assert matches == [{"string": "Hello World!", "comment": "greeting", "line": 1}]


def test_comments_disabled():
    parser = XGettext(comment_prefix=None)
    matches = parser.get_matches('_( "Hello World!" ); /* translators: greeting */')
    assert matches == [{"string": "Hello World!", "line": 1}]


def test_custom_keyword_returning_string():
    def context_transform(match):
        if len(match.arguments) == 2:
            return match.arguments[1].value + "\u0004" + match.arguments[0].value
        return match.arguments[0].value

    parser = XGettext(keywords={"_x": context_transform})
    matches = parser.get_matches('_x( "Hello World!", "greeting" );')
    assert matches == [{"string": "greeting\u0004Hello World!", "line": 1}]


def test_custom_keywords_replace_defaults():
    parser = XGettext(keywords={"_x": 1})
    assert parser.get_matches('_( "Hello" ); _x( "World" );') == [{"string": "World", "line": 1}]


def test_custom_keyword_returning_object():
    parser = XGettext(keywords={"_": lambda match: {"isOkay": True}})
    assert parser.get_matches('_( "Hello World!" );') == [{"isOkay": True}]


def test_custom_keyword_returning_list():
    parser = XGettext(keywords={"_n": lambda match: [a.value for a in match.arguments]})
    matches = parser.get_matches('_n( "One file", "%d files" );')
    assert matches == [
        {"string": "One file", "line": 1},
        {"string": "%d files", "line": 1},
    ]


@pytest.mark.parametrize("falsy", ["", False, None, 0, []])
def test_falsy_transform_result_yields_nothing(falsy):
    parser = XGettext(keywords={"_": lambda match: falsy})
    assert parser.get_matches('_( "Hello World!" );') == []


def test_number_selects_argument_position():
    parser = XGettext(keywords={"_": 2})
    matches = parser.get_matches('_( null, "Hello World!" );')
    assert matches == [{"string": "Hello World!", "line": 1}]


def test_number_skips_missing_or_non_literal_argument():
    parser = XGettext(keywords={"_": 2})
    assert parser.get_matches('_( "Only one" ); _( "a", greeting );') == []


def test_sequence_expression_callee():
    matches = XGettext().get_matches('(0, transpilerGeneratedName._)("Hello World!")')
    assert matches == [{"string": "Hello World!", "line": 1}]


def test_nested_sequence_expression_callee():
    matches = XGettext().get_matches('(0, (0, transpilerGeneratedName._))("Hello World!")')
    assert matches == [{"string": "Hello World!", "line": 1}]


def test_sequence_callee_matches_direct_call():
    direct = XGettext().get_matches('_("x")')
    wrapped = XGettext().get_matches('(0, _)("x")')
    double_wrapped = XGettext().get_matches('(0, (0, _))("x")')
    assert direct == wrapped == double_wrapped


def test_parses_es2015_by_default():
    source = 'const i = 0; _("Hello World!");'
    assert XGettext().get_matches(source) == [{"string": "Hello World!", "line": 1}]


def test_es2015_features_around_calls():
    source = """
import { _ } from "./i18n";

export const greet = (name) => `${_("Hello")}, ${name}`;

class Menu {
  label() {
    return _("Open");
  }
}
"""
    matches = XGettext().get_matches(source)
    assert matches == [
        {"string": "Hello", "line": 4},
        {"string": "Open", "line": 8},
    ]


def test_nested_keyword_calls_are_both_found():
    parser = XGettext(keywords={"_": lambda match: match.arguments[0].value or "outer"})
    matches = parser.get_matches('_( _( "inner" ) );')
    assert matches == [
        {"string": "outer", "line": 1},
        {"string": "inner", "line": 1},
    ]


def test_multiline_source_reports_lines():
    source = '_("one");\n\nfoo(_("two"));\n'
    matches = XGettext().get_matches(source)
    assert [m["line"] for m in matches] == [1, 3]


def test_escape_sequences_are_decoded():
    source = r'_("Tab\there"); _("café"); _(' + "'It\\'s'" + ");"
    strings = [m["string"] for m in XGettext().get_matches(source)]
    assert strings == ["Tab\there", "café", "It's"]


def test_typescript_source():
    parser = XGettext(language="typescript")
    matches = parser.get_matches('const label: string = _("Save");')
    assert matches == [{"string": "Save", "line": 1}]


def test_idempotent():
    parser = XGettext()
    source = '/* translators: greeting */\n_( "Hello World!" ); _( "Bye" );'
    assert parser.get_matches(source) == parser.get_matches(source)


def test_no_state_between_calls():
    parser = XGettext()
    parser.get_matches('_( "First" ); // translators: only here')
    assert parser.get_matches('_( "Second" );') == [{"string": "Second", "line": 1}]


def test_invalid_source_raises_parse_error():
    with pytest.raises(ParseError) as exc_info:
        XGettext().extract('_( "Hello World!" ;')
    assert exc_info.value.line == 1


def test_transform_exception_aborts_extraction():
    calls = []

    def failing(match):
        calls.append(match.line)
        raise ValueError("boom")

    parser = XGettext(keywords={"_": failing})
    with pytest.raises(TransformError) as exc_info:
        parser.extract('_("a");\n_("b");')

    assert calls == [1]
    assert exc_info.value.keyword == "_"
    assert isinstance(exc_info.value.__cause__, ValueError)


def test_transform_called_once_per_match_in_order():
    seen = []

    def recording(match):
        seen.append(match.arguments[0].value)
        return match.arguments[0].value

    XGettext(keywords={"_": recording}).extract('_("a"); _("b");\n_("c");')
    assert seen == ["a", "b", "c"]


def test_parenthesized_string_argument():
    assert XGettext().get_matches('_( ("Hello") );') == [{"string": "Hello", "line": 1}]
    assert XGettext().get_matches('_( (("Hello")) );') == [{"string": "Hello", "line": 1}]


def test_parenthesized_sequence_argument_is_not_a_literal():
    assert XGettext().get_matches('_( (0, "Hello") );') == []


def test_custom_keyword_returning_empty_object():
    parser = XGettext(keywords={"_": lambda match: {}})
    assert parser.get_matches('_( "Hello World!" );') == [{}]


def test_from_config_uses_configuration():
    config = ExtractorConfig(keywords=KeywordRegistry({"t": 1}), comment_prefix="note:")
    parser = XGettext.from_config(config)
    assert parser.config is config
    assert parser.keywords == ("t",)
    matches = parser.get_matches('t( "Close" ); // note: button')
    assert matches == [{"string": "Close", "line": 1, "comment": "button"}]


def test_config_argument_overrides_other_arguments():
    config = ExtractorConfig.create(comment_prefix=None)
    parser = XGettext(keywords={"x": 1}, config=config)
    assert parser.keywords == ("_",)
    assert parser.config.comment_pattern is None
