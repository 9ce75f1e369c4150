"""Unit tests for sequence_predictor/parsing.py"""

import logging

import pytest

from sequence_predictor.exceptions import SequenceInputError, SequencePredictorError
from sequence_predictor.parsing import (
    EXAMPLE_SEQUENCES,
    MAX_SEQUENCE_LENGTH,
    parse_number,
    parse_sequence,
)


class TestParseNumber:

    @pytest.mark.parametrize("token, expected", [
        ("42", 42.0),
        ("-3.5", -3.5),
        ("+7", 7.0),
        (".5", 0.5),
        ("1e3", 1000.0),
        ("3rd", 3.0),
    ])
    def test_leading_number(self, token, expected):
        assert parse_number(token) == expected

    @pytest.mark.parametrize("token", ["", "abc", "-", "nan", "inf"])
    def test_not_a_number(self, token):
        assert parse_number(token) is None

    def test_overflow_is_not_finite(self):
        assert parse_number("1e999") is None


class TestParseSequence:

    def test_commas_and_whitespace(self):
        assert parse_sequence(" 2, 4 ,6,\t8 ") == [2.0, 4.0, 6.0, 8.0]

    def test_spaces_inside_numbers_are_dropped(self):
        assert parse_sequence("1 0, 20, 30") == [10.0, 20.0, 30.0]

    def test_bad_tokens_are_skipped(self):
        assert parse_sequence("1, x, 2, , 3") == [1.0, 2.0, 3.0]

    @pytest.mark.parametrize("text", ["", None, "1, 2", "a, b, c, 4"])
    def test_too_few_numbers(self, text):
        with pytest.raises(SequenceInputError) as excinfo:
            parse_sequence(text)
        assert str(excinfo.value) == "Please enter at least 3 numbers separated by commas"
        assert excinfo.value.text == text

    def test_error_hierarchy(self):
        with pytest.raises(SequencePredictorError):
            parse_sequence("1, 2")
        with pytest.raises(ValueError):
            parse_sequence("1, 2")

    def test_parsed_count(self):
        with pytest.raises(SequenceInputError) as excinfo:
            parse_sequence("1, two, 3")
        assert excinfo.value.parsed_count == 2

    def test_truncated_to_twenty(self, caplog):
        text = ",".join(str(i) for i in range(25))
        with caplog.at_level(logging.WARNING, logger="sequence_predictor.parsing"):
            numbers = parse_sequence(text)
        assert len(numbers) == MAX_SEQUENCE_LENGTH
        assert numbers[-1] == 19.0
        assert "first 20 numbers" in caplog.text

    def test_custom_max_length(self):
        assert parse_sequence("1,2,3,4,5", max_length=3) == [1.0, 2.0, 3.0]


@pytest.mark.parametrize("name", sorted(EXAMPLE_SEQUENCES))
def test_example_sequences_are_valid_input(name):
    values = EXAMPLE_SEQUENCES[name]
    assert parse_sequence(", ".join(str(v) for v in values)) == [float(v) for v in values]
