"""
Tests for the generic parser combinators.

This module covers:
- Consumption and remainder reporting of each primitive
- Failure kinds and the "no partial consumption" rule for Err results
- Termination of repetition combinators
- Referential transparency of composed parsers
"""

from typing import NamedTuple

import pytest

from tagshell.core.position import Position
from tagshell.exceptions.core import ErrorKind
from tagshell.parsing.combinators import (
    and_then,
    any_char,
    either,
    end_of_input,
    fail,
    label,
    left,
    literal,
    map,
    one_or_more,
    pair,
    pred,
    right,
    succeed,
    zero_or_more,
)


class LiteralCase(NamedTuple):
    """Test case for literal matching."""

    expected: str
    text: str


LITERAL_CASES = [
    LiteralCase("<", "<a/>"),
    LiteralCase("/>", "/> rest"),
    LiteralCase("</", "</a>"),
    LiteralCase("vim", "vim"),
    LiteralCase("text.txt", "text.txt/>"),
]


class TestLiteral:
    """Tests for literal()."""

    @pytest.mark.parametrize("case", LITERAL_CASES, ids=lambda case: repr(case.text))
    def test_consumes_exactly_the_literal(self, case):
        result = literal(case.expected).parse(case.text)

        assert result.ok
        assert result.value == case.expected
        assert result.position.offset == len(case.expected)
        assert result.position.remaining == case.text[len(case.expected) :]

    def test_matches_relative_to_position(self):
        result = literal("ab").parse(Position("xxabc", 2))
        assert result.ok
        assert result.position.offset == 4

    def test_failure_reports_expected_and_found(self):
        result = literal("abc").parse("abd")

        assert not result.ok
        assert result.position.offset == 0
        assert result.failure.kind == ErrorKind.EXPECTED_LITERAL
        assert result.failure.expected == "abc"
        assert result.failure.found == "abd"
        assert result.failure.offset == 0

    def test_failure_at_end_of_input(self):
        result = literal(">").parse(Position("<a", 2))
        assert not result.ok
        assert result.failure.found == ""
        assert result.failure.offset == 2

    def test_empty_literal_matches_without_consuming(self):
        result = literal("").parse(Position("ab", 1))
        assert result.ok
        assert result.value == ""
        assert result.position.offset == 1


class TestSequencing:
    """Tests for pair(), left() and right()."""

    def test_pair_keeps_both_values(self):
        result = pair(literal("a"), literal("b")).parse("abc")
        assert result.value == ("a", "b")
        assert result.position.remaining == "c"

    def test_pair_failure_on_first_parser(self):
        result = pair(literal("a"), literal("b")).parse("xb")
        assert not result.ok
        assert result.failure.offset == 0
        assert result.position.offset == 0

    def test_pair_failure_on_second_parser_resets_position(self):
        result = pair(literal("a"), literal("b")).parse("ac")

        assert not result.ok
        assert result.position.offset == 0
        assert result.failure.offset == 1
        assert result.failure.expected == "b"

    def test_left_keeps_first_value(self):
        result = left(literal("a"), literal("b")).parse("ab")
        assert result.value == "a"
        assert result.position.at_end

    def test_right_keeps_second_value(self):
        result = right(literal("a"), literal("b")).parse("ab")
        assert result.value == "b"
        assert result.position.at_end

    def test_left_and_right_share_failure_semantics(self):
        for combinator in (left, right):
            result = combinator(literal("a"), literal("b")).parse("aX")
            assert not result.ok
            assert result.position.offset == 0
            assert result.failure.offset == 1


class TestMapAndPred:
    """Tests for map() and pred()."""

    def test_map_transforms_value(self):
        result = map(literal("ab"), str.upper).parse("abc")
        assert result.value == "AB"
        assert result.position.remaining == "c"

    def test_map_passes_failure_through(self):
        result = map(literal("ab"), str.upper).parse("x")
        assert not result.ok
        assert result.failure.kind == ErrorKind.EXPECTED_LITERAL

    def test_pred_accepts_matching_value(self):
        result = pred(any_char, str.isdigit).parse("7x")
        assert result.value == "7"
        assert result.position.offset == 1

    def test_pred_rejects_non_matching_value(self):
        result = pred(any_char, str.isdigit, "digit").parse("x7")

        assert not result.ok
        assert result.position.offset == 0
        assert result.failure.kind == ErrorKind.PREDICATE_REJECTED
        assert result.failure.expected == "digit"
        assert result.failure.found == "x"

    def test_pred_reports_inner_failure_as_cause(self):
        result = pred(any_char, str.isdigit).parse("")

        assert result.failure.kind == ErrorKind.PREDICATE_REJECTED
        assert result.failure.cause is not None
        assert result.failure.cause.kind == ErrorKind.EXPECTED_LITERAL


class TestEither:
    """Tests for either()."""

    def test_first_alternative_wins(self):
        result = either(literal("a"), literal("ab")).parse("abc")
        # first-match, not longest-match
        assert result.value == "a"
        assert result.position.remaining == "bc"

    def test_second_alternative_runs_from_start_position(self):
        first = pair(literal("a"), literal("b"))
        result = either(map(first, "".join), literal("a")).parse("ac")

        assert result.value == "a"
        assert result.position.remaining == "c"

    def test_both_failing_returns_input_position(self):
        start = Position("zzz", 1)
        first = pair(literal("z"), literal("a"))
        result = either(map(first, "".join), literal("y"))(start)

        assert not result.ok
        assert result.position == start

    def test_both_failing_reports_second_failure_with_alternatives(self):
        result = either(literal("x"), literal("y")).parse("z")

        assert result.failure.kind == ErrorKind.EXPECTED_LITERAL
        assert result.failure.expected == "y"
        assert [alt.expected for alt in result.failure.alternatives] == ["x", "y"]

    def test_or_operator(self):
        parser = literal("a") | literal("b")
        assert parser.parse("b").value == "b"


class TestRepetition:
    """Tests for zero_or_more() and one_or_more()."""

    def test_zero_or_more_on_no_match_succeeds_empty(self):
        result = zero_or_more(literal("ab")).parse("xyz")
        assert result.ok
        assert result.value == []
        assert result.position.offset == 0

    def test_zero_or_more_collects_in_order(self):
        result = zero_or_more(literal("ab")).parse("ababa")
        assert result.value == ["ab", "ab"]
        assert result.position.remaining == "a"

    def test_zero_or_more_does_not_consume_failing_attempt(self):
        parser = zero_or_more(map(pair(literal("a"), literal("b")), "".join))
        result = parser.parse("abac")

        assert result.value == ["ab"]
        assert result.position.offset == 2

    def test_zero_or_more_stops_on_zero_width_success(self):
        # succeed() never consumes; repetition must still terminate
        result = zero_or_more(succeed(1)).parse("abc")
        assert result.ok
        assert result.value == []
        assert result.position.offset == 0

    def test_nested_zero_or_more_terminates(self):
        result = zero_or_more(zero_or_more(literal("a"))).parse("aab")
        assert result.value == [["a", "a"]]
        assert result.position.remaining == "b"

    def test_one_or_more_collects(self):
        result = one_or_more(literal("a")).parse("aaab")
        assert result.value == ["a", "a", "a"]
        assert result.position.remaining == "b"

    def test_one_or_more_fails_without_a_first_match(self):
        result = one_or_more(literal("a")).parse("baa")

        assert not result.ok
        assert result.position.offset == 0
        assert result.failure.kind == ErrorKind.EXPECTED_AT_LEAST_ONE
        assert result.failure.cause.kind == ErrorKind.EXPECTED_LITERAL


class TestAndThen:
    """Tests for and_then() dependent sequencing."""

    def test_value_selects_next_parser(self):
        repeated = and_then(any_char, literal)
        result = repeated.parse("aab")
        assert result.value == "a"
        assert result.position.remaining == "b"

    def test_dependent_failure_resets_position(self):
        repeated = and_then(any_char, literal)
        result = repeated.parse("ab")

        assert not result.ok
        assert result.position.offset == 0
        assert result.failure.offset == 1
        assert result.failure.expected == "a"

    def test_method_form(self):
        parser = literal("<").and_then(lambda _: literal(">"))
        assert parser.parse("<>").position.at_end


class TestSupportingPrimitives:
    """Tests for any_char, succeed, fail, label and end_of_input."""

    def test_any_char_consumes_one_character(self):
        result = any_char.parse("xy")
        assert result.value == "x"
        assert result.position.offset == 1

    def test_any_char_fails_at_end(self):
        assert not any_char.parse("").ok

    def test_succeed_consumes_nothing(self):
        result = succeed("value").parse("abc")
        assert result.value == "value"
        assert result.position.offset == 0

    def test_fail_reports_kind(self):
        result = fail(ErrorKind.EXPECTED_IDENTIFIER, "name").parse("1")
        assert result.failure.kind == ErrorKind.EXPECTED_IDENTIFIER
        assert result.failure.found == "1"

    def test_label_relabels_failure_and_keeps_cause(self):
        result = label(literal("a"), ErrorKind.EXPECTED_IDENTIFIER, "thing").parse("b")

        assert result.failure.kind == ErrorKind.EXPECTED_IDENTIFIER
        assert result.failure.expected == "thing"
        assert result.failure.cause.kind == ErrorKind.EXPECTED_LITERAL

    def test_label_leaves_success_untouched(self):
        result = literal("a").label(ErrorKind.EXPECTED_IDENTIFIER).parse("ab")
        assert result.value == "a"

    def test_end_of_input(self):
        assert end_of_input().parse("").ok
        result = end_of_input().parse(Position("ab", 1))
        assert result.failure.kind == ErrorKind.TRAILING_INPUT
        assert result.failure.found == "b"


class TestReferentialTransparency:
    """Parsers must give identical results for identical positions."""

    def test_same_position_same_result(self):
        parser = zero_or_more(either(literal("a"), literal("b")))
        position = Position("abbaX")

        assert parser(position) == parser(position)

    def test_same_failure_twice(self):
        parser = one_or_more(literal("a"))
        position = Position("b")

        assert parser(position) == parser(position)
