# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""
Recognisers for the numeric sequence families.

Every detector has the signature ``detect(seq, tolerance) -> Optional[dict]``:
`seq` is a float numpy array, `tolerance` the absolute epsilon for every
comparison. ``None`` means the family does not explain the sequence; a dict
(possibly with few keys) carries the family's parameters. Detectors are
pure and never mutate their input.
"""
import math
from typing import Any, Dict, Optional, Sequence, Tuple

import numpy as np

from .metrics import (
    all_approximately_equal,
    approximately_equal,
    differences,
    even_positions,
    is_integer_like,
    odd_positions,
    ratios,
)

Params = Optional[Dict[str, Any]]

ARITHMETIC = "arithmetic"
GEOMETRIC = "geometric"

# Largest integer exponent tried for a "power" hop in the complex alternating detector.
MAX_HOP_EXPONENT = 5


# ===================================================================
# 1. SIMPLE PROGRESSIONS
# ===================================================================
def detect_arithmetic(seq: np.ndarray, tolerance: float, min_length: int = 3) -> Params:
    """Constant first difference."""
    if len(seq) < min_length:
        return None
    diffs = differences(seq)
    if not all_approximately_equal(diffs, tolerance):
        return None
    return {"difference": float(diffs[0])}


def detect_geometric(seq: np.ndarray, tolerance: float, min_length: int = 3) -> Params:
    """Constant first ratio; a single undefined ratio rules the family out."""
    if len(seq) < min_length:
        return None
    r = ratios(seq)
    if np.ma.is_masked(r):
        return None
    r = np.ma.getdata(r)
    if not all_approximately_equal(r, tolerance):
        return None
    return {"ratio": float(r[0])}


def detect_fibonacci(seq: np.ndarray, tolerance: float) -> Params:
    """Each term is the sum of the two preceding ones."""
    if len(seq) < 3:
        return None
    if not np.all(np.abs(seq[2:] - (seq[1:-1] + seq[:-2])) < tolerance):
        return None
    return {"seed": (float(seq[0]), float(seq[1]))}


def _integral_roots(seq: np.ndarray, roots: np.ndarray, tolerance: float) -> Params:
    if len(seq) < 3 or not np.all(np.isfinite(roots)):
        return None
    if not np.all(np.abs(np.round(roots) - roots) < tolerance):
        return None
    return {"roots": tuple(float(v) for v in roots), "last_root": float(roots[-1])}


def detect_square(seq: np.ndarray, tolerance: float) -> Params:
    """Every term is a perfect square (the terms need not be consecutive squares)."""
    with np.errstate(invalid="ignore"):
        roots = np.sqrt(seq)
    return _integral_roots(seq, roots, tolerance)


def detect_cube(seq: np.ndarray, tolerance: float) -> Params:
    """Every term is a perfect cube; negative cubes included."""
    return _integral_roots(seq, np.cbrt(seq), tolerance)


def detect_power(seq: np.ndarray, tolerance: float, bases: Sequence[int] = range(2, 11)) -> Params:
    """
    Terms are consecutive integer powers of a small base:
    a_i = base^(s + i), with the start exponent s read off the first term.
    """
    if len(seq) < 3 or seq[0] < 1:
        return None
    for base in bases:
        start = int(round(math.log(seq[0], base)))
        exponents = np.arange(start, start + len(seq))
        with np.errstate(over="ignore"):
            expected = np.power(float(base), exponents)
        if np.all(np.abs(expected - seq) < tolerance):
            return {"base": int(base), "start_exponent": start}
    return None


# ===================================================================
# 2. ALTERNATING OPERATIONS AND DIFFERENCES
# ===================================================================
def _hop_operation(sources: np.ndarray, targets: np.ndarray, tolerance: float) -> Optional[Tuple[str, float]]:
    """(Auxiliary) The single operation mapping every source onto its target."""
    steps = targets - sources
    if all_approximately_equal(steps, tolerance):
        return "add", float(steps[0])
    if np.all(sources != 0):
        with np.errstate(over="ignore"):
            factors = targets / sources
        if np.all(np.isfinite(factors)) and all_approximately_equal(factors, tolerance):
            return "multiply", float(factors[0])
    for exponent in range(2, MAX_HOP_EXPONENT + 1):
        with np.errstate(over="ignore", invalid="ignore"):
            powered = np.power(sources, exponent)
        if np.all(np.abs(powered - targets) < tolerance):
            return "power", exponent
    return None


def detect_complex_alternating(seq: np.ndarray, tolerance: float) -> Params:
    """
    Hops from an odd position to the next even one all apply one operation,
    hops from an even position to the next odd one all apply another
    (add, multiply or integer power). Two plain additions are left to the
    alternating-difference detectors, and two identical operations are a
    single progression rather than an alternation.
    """
    if len(seq) < 5:
        return None
    sources, targets = seq[:-1], seq[1:]
    odd_to_even = _hop_operation(sources[0::2], targets[0::2], tolerance)
    even_to_odd = _hop_operation(sources[1::2], targets[1::2], tolerance)
    if odd_to_even is None or even_to_odd is None:
        return None
    if odd_to_even[0] == "add" and even_to_odd[0] == "add":
        return None
    if odd_to_even[0] == even_to_odd[0] and approximately_equal(odd_to_even[1], even_to_odd[1], tolerance):
        return None
    return {"odd_to_even": odd_to_even, "even_to_odd": even_to_odd}


def detect_difference_cycle(seq: np.ndarray, tolerance: float, min_cycles: int = 3) -> Params:
    """Differences repeat a non-constant block of 2 to 4 values."""
    diffs = differences(seq)
    for period in range(2, 5):
        if len(diffs) < period * min_cycles:
            break
        block = diffs[:period]
        if all_approximately_equal(block, tolerance):
            continue
        if np.all(np.abs(diffs - np.resize(block, len(diffs))) < tolerance):
            return {"block": tuple(float(d) for d in block), "period": period}
    return None


def detect_alternating_difference(seq: np.ndarray, tolerance: float) -> Params:
    """Differences alternate strictly between two distinct constants."""
    if len(seq) < 4:
        return None
    diffs = differences(seq)
    first, second = diffs[0::2], diffs[1::2]
    if not (all_approximately_equal(first, tolerance) and all_approximately_equal(second, tolerance)):
        return None
    if approximately_equal(first[0], second[0], tolerance):
        return None
    return {"steps": (float(first[0]), float(second[0]))}


def detect_delay_constant(seq: np.ndarray, tolerance: float) -> Params:
    """Every term is the term two positions back plus a fixed constant."""
    if len(seq) < 4:
        return None
    steps = seq[2:] - seq[:-2]
    if not all_approximately_equal(steps, tolerance):
        return None
    return {"constant": float(steps[0])}


def detect_parity_groups(seq: np.ndarray, tolerance: float) -> Params:
    """
    Consecutive even and odd integers taken in runs of a fixed size, e.g.
    2, 4, 6, 7, 9, 11, 12 (three evens, three odds, ...). Each term is the
    next integer of the required parity after its predecessor.
    """
    n = len(seq)
    if n < 4 or not is_integer_like(seq, tolerance):
        return None
    integers = np.round(seq).astype(np.int64)
    steps = np.diff(integers)
    if np.any(steps < 1) or np.any(steps > 2):
        return None
    evens = integers % 2 == 0
    for group_size in range(1, n // 2 + 1):
        first_run = (np.arange(n) // group_size) % 2 == 0
        if np.array_equal(evens, first_run):
            return {"start": "even-first", "group_size": group_size}
        if np.array_equal(evens, ~first_run):
            return {"start": "odd-first", "group_size": group_size}
    return None


# ===================================================================
# 3. INTERLEAVED PROGRESSIONS
# ===================================================================
def _progression(values: np.ndarray, kind: str, tolerance: float, min_length: int) -> Optional[Tuple[str, float]]:
    if kind == ARITHMETIC:
        match = detect_arithmetic(values, tolerance, min_length)
        return (ARITHMETIC, match["difference"]) if match is not None else None
    match = detect_geometric(values, tolerance, min_length)
    return (GEOMETRIC, match["ratio"]) if match is not None else None


def detect_interleaved(seq: np.ndarray, tolerance: float,
                       odd_kinds: Sequence[str] = (ARITHMETIC, GEOMETRIC),
                       even_kinds: Sequence[str] = (ARITHMETIC, GEOMETRIC),
                       min_odd: int = 3, min_even: int = 3) -> Params:
    """
    Splits the sequence into its odd- and even-position sub-sequences and
    checks that each one is a progression of one of the allowed kinds (tried
    in the given order). A sequence that is already one arithmetic
    progression is not reported as two.

    Returns:
        {"odd": (kind, value), "even": (kind, value), "odd_start",
         "even_start", "gap"} where `gap` is even[0] - odd[0].
    """
    odd, even = odd_positions(seq), even_positions(seq)
    if len(odd) < min_odd or len(even) < min_even:
        return None
    if detect_arithmetic(seq, tolerance) is not None:
        return None
    odd_match = next((m for m in (_progression(odd, k, tolerance, min_odd) for k in odd_kinds) if m), None)
    if odd_match is None:
        return None
    even_match = next((m for m in (_progression(even, k, tolerance, min_even) for k in even_kinds) if m), None)
    if even_match is None:
        return None
    return {
        "odd": odd_match,
        "even": even_match,
        "odd_start": float(odd[0]),
        "even_start": float(even[0]),
        "gap": float(even[0] - odd[0]),
    }


def detect_constant_gap_interleave(seq: np.ndarray, tolerance: float) -> Params:
    """Two arithmetic branches whose paired terms keep a constant step apart."""
    match = detect_interleaved(seq, tolerance, odd_kinds=(ARITHMETIC,), even_kinds=(ARITHMETIC,))
    if match is None:
        return None
    odd, even = odd_positions(seq), even_positions(seq)
    gaps = even - odd[:len(even)]
    if not all_approximately_equal(gaps, tolerance):
        return None
    match["step"] = float(gaps[0])
    return match


def detect_unit_step_interleave(seq: np.ndarray, tolerance: float) -> Params:
    """The six-term shape [a, a+3, a+1, a+4, a+2, a+5]."""
    if len(seq) != 6:
        return None
    match = detect_constant_gap_interleave(seq, tolerance)
    if match is None:
        return None
    if not (approximately_equal(match["odd"][1], 1.0, tolerance)
            and approximately_equal(match["even"][1], 1.0, tolerance)
            and approximately_equal(match["step"], 3.0, tolerance)):
        return None
    return match


def detect_alternating_branch_steps(seq: np.ndarray, tolerance: float) -> Params:
    """Odd positions step by one constant, even positions by another."""
    if len(seq) < 5:
        return None
    return detect_interleaved(seq, tolerance, odd_kinds=(ARITHMETIC,), even_kinds=(ARITHMETIC,),
                              min_odd=3, min_even=2)


def detect_interleaved_common_difference(seq: np.ndarray, tolerance: float) -> Params:
    """Both branches arithmetic with the same common difference."""
    match = detect_interleaved(seq, tolerance, odd_kinds=(ARITHMETIC,), even_kinds=(ARITHMETIC,))
    if match is None or not approximately_equal(match["odd"][1], match["even"][1], tolerance):
        return None
    return match


def detect_hybrid_arithmetic_geometric(seq: np.ndarray, tolerance: float) -> Params:
    """Arithmetic on odd positions, geometric on even positions."""
    if len(seq) < 6:
        return None
    return detect_interleaved(seq, tolerance, odd_kinds=(ARITHMETIC,), even_kinds=(GEOMETRIC,))


# ===================================================================
# 4. REPETITION AND HIGHER-ORDER ANALYSIS
# ===================================================================
def detect_cyclic_block(seq: np.ndarray, tolerance: float) -> Params:
    """The sequence repeats a block of 2..n/2 values; the shortest block wins."""
    n = len(seq)
    for period in range(2, n // 2 + 1):
        block = seq[:period]
        if all_approximately_equal(block, tolerance):
            continue
        if np.all(np.abs(seq - np.resize(block, n)) < tolerance):
            return {"block": tuple(float(v) for v in block), "period": period}
    return None


def detect_constant_difference(seq: np.ndarray, tolerance: float, order: int = 1) -> Params:
    """The order-th differences are constant (at least two of them are observed)."""
    values = np.asarray(seq, dtype=float)
    for _ in range(order):
        values = differences(values)
    if len(values) < 2 or not all_approximately_equal(values, tolerance):
        return None
    return {"order": order, "constant": float(values[0])}


def detect_constant_ratio(seq: np.ndarray, tolerance: float, order: int = 1) -> Params:
    """The order-th ratios are all defined and constant."""
    values = np.asarray(seq, dtype=float)
    for _ in range(order):
        r = ratios(values)
        if np.ma.is_masked(r):
            return None
        values = np.ma.getdata(r)
    if len(values) < 2 or not all_approximately_equal(values, tolerance):
        return None
    return {"order": order, "constant": float(values[0])}


def detect_last_difference(seq: np.ndarray, tolerance: float) -> Params:
    """Fallback: always matches, keeping the final observed difference."""
    return {"difference": float(seq[-1] - seq[-2])}
