# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""
The ordered table of sequence families.

Each `PatternEntry` bundles a detector, the generator of successors, the
wording of the result, the family tag and its fixed confidence. The engine
walks the table in order and the first entry whose detector matches wins;
there is no comparison of fit quality between entries.
"""
import logging
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

import numpy as np

from . import detectors as det
from . import generators as gen
from .metrics import DEFAULT_TOLERANCE
from .models import RuleType

logger = logging.getLogger(__name__)

Detector = Callable[[np.ndarray, float], Optional[Dict[str, Any]]]
Extender = Callable[..., List[float]]
Describer = Callable[[np.ndarray, Dict[str, Any]], Tuple[str, str]]


@dataclass(frozen=True)
class PatternEntry:
    name: str
    rule_type: RuleType
    confidence: float
    detect: Detector
    extend: Extender
    describe: Describer


def default_entries() -> Tuple[PatternEntry, ...]:
    """The built-in families in priority order."""
    E, R = PatternEntry, RuleType
    return (
        E("complex_alternating", R.ALTERNATING, 0.95,
          det.detect_complex_alternating, gen.extend_complex_alternating, gen.describe_complex_alternating),
        E("difference_cycle", R.ALTERNATING, 0.94,
          det.detect_difference_cycle, gen.extend_difference_cycle, gen.describe_difference_cycle),
        # The literal [a, a+3, a+1, a+4, a+2, a+5] case of the constant-step interleave,
        # kept ahead of it for its higher confidence.
        E("interleaved_unit_step", R.HYBRID, 0.99,
          det.detect_unit_step_interleave, gen.extend_interleaved, gen.describe_unit_step_interleave),
        E("alternating_with_step", R.ALTERNATING, 0.98,
          det.detect_constant_gap_interleave, gen.extend_interleaved, gen.describe_alternating_with_step),
        E("arithmetic", R.ARITHMETIC, 0.95,
          det.detect_arithmetic, gen.extend_arithmetic, gen.describe_arithmetic),
        E("geometric", R.GEOMETRIC, 0.93,
          det.detect_geometric, gen.extend_geometric, gen.describe_geometric),
        E("fibonacci", R.FIBONACCI, 0.90,
          det.detect_fibonacci, gen.extend_fibonacci, gen.describe_fibonacci),
        E("square", R.SQUARE, 0.92,
          det.detect_square, gen.extend_square, gen.describe_square),
        E("cube", R.CUBE, 0.91,
          det.detect_cube, gen.extend_cube, gen.describe_cube),
        E("alternating_difference", R.ALTERNATING, 0.92,
          det.detect_alternating_difference, gen.extend_alternating_difference,
          gen.describe_alternating_difference),
        E("interleaved_progressions", R.HYBRID, 0.90,
          det.detect_interleaved, gen.extend_interleaved, gen.describe_interleaved_progressions),
        E("alternating_branch_steps", R.ALTERNATING, 0.89,
          det.detect_alternating_branch_steps, gen.extend_interleaved, gen.describe_alternating_branch_steps),
        E("power", R.POWER, 0.90,
          det.detect_power, gen.extend_power, gen.describe_power),
        E("cyclic_block", R.HYBRID, 0.90,
          det.detect_cyclic_block, gen.extend_cyclic_block, gen.describe_cyclic_block),
        E("difference_order_1", R.DIFFERENCE_PATTERN, 0.90,
          partial(det.detect_constant_difference, order=1), gen.extend_difference_table,
          gen.describe_difference_table),
        E("difference_order_2", R.DIFFERENCE_PATTERN, 0.87,
          partial(det.detect_constant_difference, order=2), gen.extend_difference_table,
          gen.describe_difference_table),
        E("difference_order_3", R.DIFFERENCE_PATTERN, 0.85,
          partial(det.detect_constant_difference, order=3), gen.extend_difference_table,
          gen.describe_difference_table),
        E("ratio_order_1", R.RATIO_PATTERN, 0.90,
          partial(det.detect_constant_ratio, order=1), gen.extend_ratio_table, gen.describe_ratio_table),
        E("ratio_order_2", R.RATIO_PATTERN, 0.86,
          partial(det.detect_constant_ratio, order=2), gen.extend_ratio_table, gen.describe_ratio_table),
        E("delay_constant", R.DIFFERENCE_PATTERN, 0.90,
          det.detect_delay_constant, gen.extend_delay_constant, gen.describe_delay_constant),
        E("interleaved_common_difference", R.HYBRID, 0.95,
          det.detect_interleaved_common_difference, gen.extend_interleaved,
          gen.describe_interleaved_common_difference),
        E("hybrid_arithmetic_geometric", R.HYBRID, 0.82,
          det.detect_hybrid_arithmetic_geometric, gen.extend_interleaved,
          gen.describe_hybrid_arithmetic_geometric),
        E("parity_groups", R.ALTERNATING, 0.95,
          det.detect_parity_groups, gen.extend_parity_groups, gen.describe_parity_groups),
    )


FALLBACK_ENTRY = PatternEntry("last_difference", RuleType.UNKNOWN, 0.5,
                              det.detect_last_difference, gen.extend_last_difference,
                              gen.describe_last_difference)


class PatternCatalog:
    """
    Ordered collection of pattern entries plus the always-matching fallback.

    Args:
        entries: entries in priority order; the built-in table when omitted.
        tolerance: absolute epsilon handed to every detector.
        fallback: entry used when nothing else matches.
    """

    def __init__(self, entries: Optional[Iterable[PatternEntry]] = None,
                 tolerance: float = DEFAULT_TOLERANCE,
                 fallback: PatternEntry = FALLBACK_ENTRY):
        if tolerance <= 0:
            raise ValueError(f"tolerance must be positive, got {tolerance}")
        self.entries = tuple(entries) if entries is not None else default_entries()
        self.tolerance = tolerance
        self.fallback = fallback
        names = [entry.name for entry in self.entries]
        if len(set(names)) != len(names):
            raise ValueError("Pattern entry names must be unique.")

    def __iter__(self) -> Iterator[PatternEntry]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def names(self) -> List[str]:
        return [entry.name for entry in self.entries]

    def get(self, name: str) -> PatternEntry:
        for entry in self.entries:
            if entry.name == name:
                return entry
        if name == self.fallback.name:
            return self.fallback
        raise KeyError(f"No pattern entry named '{name}'")

    def detect(self, name: str, sequence: Sequence[float]) -> Optional[Dict[str, Any]]:
        """Runs one entry's detector with this catalog's tolerance."""
        return self.get(name).detect(np.asarray(sequence, dtype=float), self.tolerance)

    def matches(self, sequence: Sequence[float]) -> List[Tuple[PatternEntry, Dict[str, Any]]]:
        """
        Every entry whose detector accepts the sequence, in priority order.
        Diagnostic only: prediction still uses the first one.
        """
        values = np.asarray(sequence, dtype=float)
        found = []
        with np.errstate(all="ignore"):
            for entry in self.entries:
                try:
                    params = entry.detect(values, self.tolerance)
                except (ArithmeticError, ValueError) as e:
                    logger.debug("Detector '%s' failed with %s: %s", entry.name, type(e).__name__, e)
                    continue
                if params is not None:
                    found.append((entry, params))
        return found

    def with_entries(self, entries: Iterable[PatternEntry]) -> "PatternCatalog":
        """A copy of this catalog with a different table, same tolerance and fallback."""
        return PatternCatalog(entries, tolerance=self.tolerance, fallback=self.fallback)
