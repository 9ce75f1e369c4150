# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""Identify the family of a short number sequence and extrapolate it."""
from .catalog import PatternCatalog, PatternEntry
from .engine import PredictionEngine, predict_sequence
from .exceptions import SequenceInputError, SequencePredictorError
from .formatting import format_number
from .models import PredictionResult, RuleType
from .parsing import parse_sequence

__all__ = [
    "PatternCatalog",
    "PatternEntry",
    "PredictionEngine",
    "PredictionResult",
    "RuleType",
    "SequenceInputError",
    "SequencePredictorError",
    "format_number",
    "parse_sequence",
    "predict_sequence",
]

__version__ = "1.0.0"
