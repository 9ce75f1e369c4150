# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""
Exceptions raised around the prediction core.

The engine itself never raises for a non-empty sequence; these cover the
layers that turn user text into a sequence.

Usage:
    from sequence_predictor.exceptions import SequenceInputError

    try:
        values = parse_sequence(text)
    except SequenceInputError as e:
        print(f"Invalid input: {e}")
"""


class SequencePredictorError(Exception):
    """Base exception for every sequence-predictor error."""
    pass


class SequenceInputError(SequencePredictorError, ValueError):
    """
    Free-text input could not be turned into a usable sequence.

    Raised when fewer than the minimum number of values can be parsed.
    """

    def __init__(self, message: str, text: str = None, parsed_count: int = 0):
        self.text = text
        self.parsed_count = parsed_count
        super().__init__(message)
