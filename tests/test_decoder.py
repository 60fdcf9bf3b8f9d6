import logging
import pickle

import pytest

from jsontree import (
    Array,
    Boolean,
    ExpectedToken,
    NestingTooDeep,
    Null,
    Number,
    NumericConversionFailure,
    Object,
    ParseError,
    Parser,
    String,
    TrailingCharacters,
    UnexpectedEndOfInput,
    UnrecognizedLiteral,
    parse,
)
from jsontree.constants import MAX_NESTING_DEPTH


class TestScalars:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("null", Null()),
            ("true", Boolean(True)),
            ("false", Boolean(False)),
            ("0", Number(0)),
            ("-12", Number(-12)),
            ("+3.5", Number(3.5)),
            ("1.25e2", Number(125)),
            ("2E-2", Number(0.02)),
            ('""', String("")),
            ('"plain"', String("plain")),
        ],
    )
    def test_scalar(self, text, expected) -> None:
        assert parse(text) == expected

    def test_surrounding_whitespace(self) -> None:
        assert parse(" \t\r\n 7 \n") == Number(7)


class TestStrings:
    def test_newline_escape(self) -> None:
        value = parse('"a\\nb"').as_string()
        assert value == "a\nb"
        assert len(value) == 3

    def test_all_named_escapes(self) -> None:
        assert parse(r'"\n\t\r\b\f\"\\"').as_string() == '\n\t\r\b\f"\\'

    def test_unknown_escape_keeps_character(self) -> None:
        assert parse(r'"\/\q"').as_string() == "/q"

    def test_numeric_escape_is_not_decoded(self) -> None:
        assert parse(r'"\u0041"').as_string() == "u0041"

    def test_raw_characters_pass_through(self) -> None:
        assert parse('"tab\there é"').as_string() == "tab\there é"

    @pytest.mark.parametrize("text", ['"abc', '"abc\\', '"'])
    def test_unterminated(self, text) -> None:
        with pytest.raises(UnexpectedEndOfInput):
            parse(text)


class TestContainers:
    def test_nested(self) -> None:
        tree = parse('{"a": [1, {"b": null}], "c": {}}')
        expected = Object(
            [
                ("a", Array([Number(1), Object({"b": Null()})])),
                ("c", Object()),
            ]
        )
        assert tree == expected

    def test_object_preserves_document_order(self) -> None:
        assert parse('{"z":1,"a":2,"m":3}').as_object().keys() == ("z", "a", "m")

    def test_duplicate_key_keeps_first_position(self) -> None:
        obj = parse('{"k":1,"x":2,"k":3}').as_object()
        assert obj.keys() == ("k", "x")
        assert obj.get("k") == Number(3)

    def test_empty_containers_with_whitespace(self) -> None:
        assert parse("[ ]") == Array()
        assert parse("{\n}") == Object()

    def test_parsed_children_are_owned(self) -> None:
        arr = parse("[[1]]").as_array()
        assert arr.get(0).owner is arr
        assert arr.owner is None


class TestErrors:
    def test_trailing_comma_in_object(self) -> None:
        with pytest.raises(ExpectedToken) as excinfo:
            parse('{"a":1,}')
        assert excinfo.value.pos == 7
        assert excinfo.value.expected == "string key"

    def test_unterminated_array(self) -> None:
        with pytest.raises(UnexpectedEndOfInput) as excinfo:
            parse("[1,2")
        assert excinfo.value.pos == 4

    def test_partial_literal(self) -> None:
        with pytest.raises(UnrecognizedLiteral) as excinfo:
            parse("tru")
        assert "'tru'" in excinfo.value.msg

    def test_trailing_characters(self) -> None:
        with pytest.raises(TrailingCharacters) as excinfo:
            parse("  42  extra")
        assert excinfo.value.pos == 6

    @pytest.mark.parametrize(
        "text, error",
        [
            ("", UnexpectedEndOfInput),
            ("   ", UnexpectedEndOfInput),
            ("[1,]", ExpectedToken),
            ("[1 2]", ExpectedToken),
            ("{1:2}", ExpectedToken),
            ('{"a" 1}', ExpectedToken),
            ('{"a":1 "b":2}', ExpectedToken),
            ('{"a":', UnexpectedEndOfInput),
            ('{"a"', UnexpectedEndOfInput),
            ("{", UnexpectedEndOfInput),
            ("]", ExpectedToken),
            ("@", ExpectedToken),
            ("nul", UnrecognizedLiteral),
            ("None", UnrecognizedLiteral),
            ("-", NumericConversionFailure),
            ("1.", NumericConversionFailure),
            ("1.2.3", NumericConversionFailure),
            ("1e", NumericConversionFailure),
            ("--1", NumericConversionFailure),
            ("1e999", NumericConversionFailure),
            ("[1]]", TrailingCharacters),
            ("truex", TrailingCharacters),
        ],
    )
    def test_failure_kinds(self, text, error) -> None:
        with pytest.raises(error):
            parse(text)

    def test_all_parse_errors_share_a_base(self) -> None:
        with pytest.raises(ParseError):
            parse("[")
        with pytest.raises(ValueError):
            parse("[")

    def test_position_reports_line_and_column(self) -> None:
        with pytest.raises(ExpectedToken) as excinfo:
            parse('{\n  "a": 1,\n  ]\n}')
        error = excinfo.value
        assert (error.lineno, error.colno) == (3, 3)
        assert str(error).endswith(f"line 3 column 3 (char {error.pos})")

    def test_error_pickles(self) -> None:
        with pytest.raises(ExpectedToken) as excinfo:
            parse("[1 2]")
        restored = pickle.loads(pickle.dumps(excinfo.value))
        assert isinstance(restored, ExpectedToken)
        assert restored.pos == excinfo.value.pos

    def test_rejects_bytes(self) -> None:
        with pytest.raises(TypeError):
            parse(b"[]")


def test_parser_is_single_use() -> None:
    parser = Parser("[1]")
    assert parser.parse() == Array([Number(1)])
    assert parser.pos == 3
    with pytest.raises(RuntimeError):
        parser.parse()


def test_failures_are_logged_at_debug(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="jsontree.decoder"):
        with pytest.raises(TrailingCharacters):
            parse("1 2")
    assert "TrailingCharacters" in caplog.text


class TestNesting:
    def test_nesting_at_the_limit(self) -> None:
        text = "[" * MAX_NESTING_DEPTH + "]" * MAX_NESTING_DEPTH
        assert parse(text).serialize() == text

    def test_valid_input_past_the_limit(self) -> None:
        levels = MAX_NESTING_DEPTH + 400
        with pytest.raises(NestingTooDeep) as excinfo:
            parse("[" * levels + "]" * levels)
        assert excinfo.value.pos == MAX_NESTING_DEPTH

    def test_unclosed_brackets_past_the_limit(self) -> None:
        with pytest.raises(ParseError) as excinfo:
            parse("[" * 5000)
        assert isinstance(excinfo.value, NestingTooDeep)

    def test_objects_count_towards_depth(self) -> None:
        levels = MAX_NESTING_DEPTH + 1
        with pytest.raises(NestingTooDeep):
            parse('{"a":' * levels + "1" + "}" * levels)

    def test_custom_limit(self) -> None:
        assert Parser("[[1]]", max_depth=2).parse() == Array([Array([Number(1)])])
        with pytest.raises(NestingTooDeep):
            Parser("[[[1]]]", max_depth=2).parse()
