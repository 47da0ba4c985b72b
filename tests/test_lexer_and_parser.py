import pytest
from hypothesis import given, strategies as st

from paren.errors import (
    FailedToParseInteger,
    NoIdentifier,
    ParenError,
    UnbalancedParentheses,
    UnexpectedEndOfInput,
)
from paren.reader.parser import Reader, parse
from paren.types.node import Form, Identifier, Integer, String


@pytest.mark.parametrize(
    "source,expected",
    [
        ("", []),
        ("   \n\t ", []),
        ("42", [Integer(42, 0)]),
        ('"foo"', [String("foo", 0)]),
        ('""', [String("", 0)]),
        ("foo", [Identifier("foo", 0)]),
        ("(42)", [Form((Integer(42, 1),), 0)]),
        ("()", [Form((), 0)]),
        ("(42 33)", [Form((Integer(42, 1), Integer(33, 4)), 0)]),
        (
            "(42 (9 33))",
            [Form((Integer(42, 1), Form((Integer(9, 5), Integer(33, 7)), 4)), 0)],
        ),
        (
            "(+ 42 (- 9 33))",
            [
                Form(
                    (
                        Identifier("+", 1),
                        Integer(42, 3),
                        Form((Identifier("-", 7), Integer(9, 9), Integer(33, 11)), 6),
                    ),
                    0,
                )
            ],
        ),
        (
            "(def inc (x) (+ 1 x))",
            [
                Form(
                    (
                        Identifier("def", 1),
                        Identifier("inc", 5),
                        Form((Identifier("x", 10),), 9),
                        Form((Identifier("+", 14), Integer(1, 16), Identifier("x", 18)), 13),
                    ),
                    0,
                )
            ],
        ),
        ('(str "a b" 1)', [Form((Identifier("str", 1), String("a b", 5), Integer(1, 11)), 0)]),
        ("1 (+ 2)  ", [Integer(1, 0), Form((Identifier("+", 3), Integer(2, 5)), 2)]),
        ("((+))", [Form((Form((Identifier("+", 2),), 1),), 0)]),
        ("  (+\n\t1)", [Form((Identifier("+", 3), Integer(1, 6)), 2)]),
        ("9223372036854775807", [Integer(2 ** 63 - 1, 0)]),
        ("007", [Integer(7, 0)]),
        ("-5", [Identifier("-5", 0)]),
    ],
)
def test_parse(source, expected):
    assert parse(source) == expected


def test_offsets_are_bytes_not_characters():
    # 'é' is two bytes in UTF-8
    assert parse('"é" x') == [String("é", 0), Identifier("x", 5)]
    assert parse("(str \"日本\" 1)")[0].elements[2] == Integer(1, 14)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("0" * 5000 + "7", [Integer(7, 0)]),
        ("0" * 30, [Integer(0, 0)]),
        ("0000" + str(2 ** 63 - 1), [Integer(2 ** 63 - 1, 0)]),
    ],
)
def test_parse_long_integer_literals(source, expected):
    assert parse(source) == expected


@pytest.mark.parametrize(
    "source,expected",
    [
        # NBSP is 2 bytes, U+3000 is 3
        ("(+ 1\u00a0\u30002)", [Form((Identifier("+", 1), Integer(1, 3), Integer(2, 9)), 0)]),
        ("foo\u00a0bar", [Identifier("foo", 0), Identifier("bar", 5)]),
        ("\u2028(+)\u0085", [Form((Identifier("+", 4),), 3)]),
        ("12\u3000", [Integer(12, 0)]),
        # U+001C..U+001F are not White_Space
        ("a\x1cb", [Identifier("a\x1cb", 0)]),
        # U+200B (zero width space) is not White_Space either
        ("a\u200bb", [Identifier("a\u200bb", 0)]),
    ],
)
def test_unicode_whitespace_separates_tokens(source, expected):
    assert parse(source) == expected


def test_parse_accepts_bytes():
    assert parse(b"(+ 1)") == parse("(+ 1)")


@pytest.mark.parametrize(
    "source,error",
    [
        (")", UnbalancedParentheses(0)),
        ("(", UnexpectedEndOfInput(0)),
        ("(+ 1 2", UnexpectedEndOfInput(0)),
        ("(+ (- 1", UnexpectedEndOfInput(3)),
        ("1 2 )", UnbalancedParentheses(4)),
        ("(+ 1 2))", UnbalancedParentheses(7)),
        ("(+ 2x)", FailedToParseInteger(3)),
        ("(1_000)", FailedToParseInteger(1)),
        ("12(", FailedToParseInteger(0)),
        ("1" * 5000, FailedToParseInteger(0)),
        ("(+ " + "1" * 5000 + ")", FailedToParseInteger(3)),
        ("1" + "0" * 19, FailedToParseInteger(0)),
        ("a\u00a0)", UnbalancedParentheses(3)),
        ("9223372036854775808", FailedToParseInteger(0)),
        ('(str "abc', UnexpectedEndOfInput(5)),
        ('"', UnexpectedEndOfInput(0)),
        # the first error in the scan wins
        ("(+ 2x) )", FailedToParseInteger(3)),
        (") (", UnbalancedParentheses(0)),
    ],
)
def test_parse_errors(source, error):
    with pytest.raises(type(error)) as info:
        parse(source)
    assert info.value == error
    assert info.value.at == error.at


def test_parse_int():
    reader = Reader("42")
    assert reader.parse_int() == Integer(42, 0)
    assert reader.pos == 2

    reader = Reader("42", 1)
    assert reader.parse_int() == Integer(2, 1)
    assert reader.pos == 2

    with pytest.raises(FailedToParseInteger) as info:
        Reader(" 1x", 1).parse_int()
    assert info.value.at == 1


def test_parse_str():
    reader = Reader('"foo"')
    assert reader.parse_str() == String("foo", 0)
    assert reader.pos == 5


def test_parse_identifier():
    reader = Reader("test")
    assert reader.parse_identifier() == Identifier("test", 0)
    assert reader.pos == 4

    reader = Reader("+)")
    assert reader.parse_identifier() == Identifier("+", 0)
    assert reader.pos == 1

    with pytest.raises(NoIdentifier) as info:
        Reader("f ", 1).parse_identifier()
    assert info.value.at == 1


def test_nodes_are_immutable():
    node = parse("(+ 1 2)")[0]
    with pytest.raises(AttributeError):
        node.at = 3


# -------------------------------
# Strategies
# -------------------------------
identifier_strat = st.text(alphabet="abcxyz+-*/!?<>=_", min_size=1, max_size=8).map(
    lambda s: (s, lambda at: Identifier(s, at))
)

integer_strat = st.integers(min_value=0, max_value=2 ** 63 - 1).map(
    lambda n: (str(n), lambda at: Integer(n, at))
)

string_strat = st.text(
    st.characters(exclude_characters='"', exclude_categories=("Cs",)), max_size=10
).map(lambda s: (f'"{s}"', lambda at: String(s, at)))

token_strat = st.one_of(identifier_strat, integer_strat, string_strat)
separator_strat = st.sampled_from([" ", "  ", "\n", "\t", "\r\n", " \x0c", "\u00a0", "\u3000", "\u2028"])


# -------------------------------
# Hypothesis tests
# -------------------------------
@given(st.lists(st.tuples(separator_strat, token_strat), max_size=8), separator_strat)
def test_top_level_offsets_are_byte_indices(items, trailing):
    source = ""
    expected = []
    for sep, (text, make) in items:
        source += sep
        expected.append(make(len(source.encode("utf-8"))))
        source += text
    source += trailing
    assert parse(source) == expected


@given(st.lists(st.tuples(separator_strat, token_strat), max_size=8))
def test_form_element_offsets_are_byte_indices(items):
    source = "("
    expected = []
    for sep, (text, make) in items:
        source += sep
        expected.append(make(len(source.encode("utf-8"))))
        source += text
    source += ")"
    assert parse(source) == [Form(tuple(expected), 0)]


@given(st.text(alphabet='() "1a+\n', max_size=30))
def test_parse_is_deterministic(source):
    def attempt():
        try:
            return parse(source)
        except ParenError as e:
            return e

    assert attempt() == attempt()
