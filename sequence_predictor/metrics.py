# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""
Numeric helpers shared by every detector: successive differences,
successive ratios and tolerance comparisons.
"""
from typing import Sequence, Union

import numpy as np

# Single absolute epsilon for every comparison in the catalog. It is not
# scaled to the magnitude of the sequence.
DEFAULT_TOLERANCE = 1e-4

ArrayLike = Union[Sequence[float], np.ndarray]


def differences(seq: ArrayLike) -> np.ndarray:
    """seq[i] - seq[i-1] for i = 1..n-1."""
    return np.diff(np.asarray(seq, dtype=float))


def ratios(seq: ArrayLike) -> np.ma.MaskedArray:
    """
    seq[i] / seq[i-1] for i = 1..n-1.

    A ratio whose denominator is zero (or whose quotient overflows) is
    undefined and comes back masked instead of as NaN, so composing
    higher-order ratios keeps track of it. Use `np.ma.is_masked` to test
    for undefined entries and `.compressed()` to drop them.
    """
    values = np.asarray(seq, dtype=float)
    numerators, denominators = values[1:], values[:-1]
    undefined = denominators == 0
    with np.errstate(divide="ignore", over="ignore", invalid="ignore"):
        quotients = numerators / np.where(undefined, 1.0, denominators)
    undefined = undefined | ~np.isfinite(quotients)
    return np.ma.array(quotients, mask=undefined)


def all_approximately_equal(values: ArrayLike, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    """True if every value lies within `tolerance` of the first one."""
    values = np.asarray(values, dtype=float)
    if values.size <= 1:
        return True
    return bool(np.all(np.abs(values - values[0]) < tolerance))


def approximately_equal(a: float, b: float, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    return abs(a - b) < tolerance


def is_integer_like(values: ArrayLike, tolerance: float = DEFAULT_TOLERANCE) -> bool:
    values = np.asarray(values, dtype=float)
    if not np.all(np.isfinite(values)):
        return False
    return bool(np.all(np.abs(values - np.round(values)) < tolerance))


# ===================================================================
# Interleaving
# ===================================================================
# Positions are counted from 1, as they are shown to the user: the "odd"
# positions are indices 0, 2, 4, ... and the "even" ones 1, 3, 5, ...
def odd_positions(seq: ArrayLike) -> np.ndarray:
    return np.asarray(seq, dtype=float)[0::2]


def even_positions(seq: ArrayLike) -> np.ndarray:
    return np.asarray(seq, dtype=float)[1::2]
