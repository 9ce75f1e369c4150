# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""
Turns free text such as "2, 4, 6, 8" into a sequence the engine accepts:
3 to 20 finite numbers.
"""
import logging
import math
import re
from typing import List, Optional

from .exceptions import SequenceInputError

logger = logging.getLogger(__name__)

MIN_SEQUENCE_LENGTH = 3
MAX_SEQUENCE_LENGTH = 20

# Leading numeric literal of a token; whatever follows it is ignored ("3rd" -> 3).
_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

EXAMPLE_SEQUENCES = {
    "arithmetic": [2, 4, 6, 8, 10],
    "geometric": [1, 2, 4, 8, 16],
    "fibonacci": [1, 1, 2, 3, 5, 8],
    "square": [1, 4, 9, 16, 25],
    "interleaved": [7, 10, 8, 11, 9, 12],
}


def parse_number(token: str) -> Optional[float]:
    """The finite number a token starts with, or None."""
    match = _LEADING_NUMBER.match(token)
    if match is None:
        return None
    value = float(match.group(0))
    return value if math.isfinite(value) else None


def parse_sequence(text: str, max_length: int = MAX_SEQUENCE_LENGTH) -> List[float]:
    """
    Parses comma-separated numbers. Whitespace is ignored and tokens that do
    not start with a number are dropped.

    Raises:
        SequenceInputError: fewer than three numbers could be read.
    """
    cleaned = re.sub(r"\s+", "", text or "")
    numbers = [n for n in (parse_number(token) for token in cleaned.split(",")) if n is not None]

    if len(numbers) < MIN_SEQUENCE_LENGTH:
        raise SequenceInputError(
            f"Please enter at least {MIN_SEQUENCE_LENGTH} numbers separated by commas",
            text=text, parsed_count=len(numbers))

    if len(numbers) > max_length:
        logger.warning("Using only the first %d numbers (got %d)", max_length, len(numbers))
        numbers = numbers[:max_length]
    return numbers
