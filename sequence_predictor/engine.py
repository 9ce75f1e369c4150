# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""
Prediction engine: runs the pattern catalog over a sequence and turns the
first match into a `PredictionResult` with three successors.
"""
import logging
from typing import Optional, Sequence

import numpy as np

from .catalog import PatternCatalog, PatternEntry
from .models import PredictionResult, RuleType

logger = logging.getLogger(__name__)

SUCCESSOR_COUNT = 3
MIN_PREDICTABLE_LENGTH = 3


class PredictionEngine:
    """
    Classifies a sequence against the catalog in priority order.

    `predict` is total: it returns a result for every non-empty input. A
    detector or generator that fails on an input is logged and skipped,
    and the fallback entry catches whatever no family explains.
    """

    def __init__(self, catalog: Optional[PatternCatalog] = None):
        self.catalog = catalog if catalog is not None else PatternCatalog()

    def predict(self, sequence: Sequence[float]) -> PredictionResult:
        if len(sequence) < MIN_PREDICTABLE_LENGTH:
            return insufficient_input_result()

        seq = np.asarray(sequence, dtype=float)
        # Overflow and 0/0 inside detectors become inf/NaN and simply fail the match.
        with np.errstate(all="ignore"):
            for entry in self.catalog:
                result = self._evaluate(entry, seq)
                if result is not None:
                    logger.debug("Sequence matched '%s' (confidence %.2f)", entry.name, entry.confidence)
                    return result
            result = self._evaluate(self.catalog.fallback, seq)

        if result is None:
            # Only reachable with a custom fallback that refuses the input.
            logger.warning("Fallback entry '%s' did not produce a result", self.catalog.fallback.name)
            return insufficient_input_result()
        logger.debug("No family matched; using fallback '%s'", self.catalog.fallback.name)
        return result

    def _evaluate(self, entry: PatternEntry, seq: np.ndarray) -> Optional[PredictionResult]:
        try:
            params = entry.detect(seq, self.catalog.tolerance)
            if params is None:
                return None
            next_elements = entry.extend(seq, params, SUCCESSOR_COUNT)
            description, formula = entry.describe(seq, params)
        except (ArithmeticError, ValueError) as e:
            logger.warning("Pattern '%s' skipped, it failed with %s: %s", entry.name, type(e).__name__, e)
            return None
        return PredictionResult(
            next_elements=tuple(next_elements),
            rule_type=entry.rule_type,
            rule_description=description,
            formula=formula,
            confidence=entry.confidence,
            pattern=entry.name,
            parameters=params,
        )


def insufficient_input_result() -> PredictionResult:
    return PredictionResult(
        next_elements=(),
        rule_type=RuleType.UNKNOWN,
        rule_description="insufficient input",
        formula="N/A",
        confidence=0.0,
        pattern="insufficient_input",
    )


_default_engine: Optional[PredictionEngine] = None


def predict_sequence(sequence: Sequence[float]) -> PredictionResult:
    """Predicts with a shared engine built on the default catalog."""
    global _default_engine
    if _default_engine is None:
        _default_engine = PredictionEngine()
    return _default_engine.predict(sequence)
