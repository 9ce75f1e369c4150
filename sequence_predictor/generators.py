# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""
Successor generation and wording for each sequence family.

For every family there is an ``extend_*(seq, params, count)`` returning
`count` successors computed from the detector's parameters, and a
``describe_*(seq, params)`` returning ``(rule_description, formula)``.
"""
from typing import Any, Dict, List, Tuple

import numpy as np

from .formatting import format_number, format_signed, format_values
from .metrics import differences, even_positions, odd_positions, ratios

Params = Dict[str, Any]
Wording = Tuple[str, str]

_OPERATION_SYMBOLS = {"add": "+", "multiply": "×", "power": "^"}


# ===================================================================
# Simple progressions
# ===================================================================
def extend_arithmetic(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    d = params["difference"]
    return [seq[-1] + d * k for k in range(1, count + 1)]


def describe_arithmetic(seq: np.ndarray, params: Params) -> Wording:
    d = format_number(params["difference"])
    return (f"Arithmetic sequence with common difference d = {d}",
            f"a_n = a_1 + (n-1)d = {format_number(seq[0])} + (n-1) × {d}")


def extend_geometric(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    r = params["ratio"]
    return [seq[-1] * r ** k for k in range(1, count + 1)]


def describe_geometric(seq: np.ndarray, params: Params) -> Wording:
    r = format_number(params["ratio"])
    return (f"Geometric sequence with common ratio r = {r}",
            f"a_n = a_1 × r^(n-1) = {format_number(seq[0])} × {r}^(n-1)")


def extend_fibonacci(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    """
    Kept exactly as the published behaviour: the third successor is
    2·last + previous, which repeats the second one instead of continuing
    the recurrence (1, 1, 2, 3, 5, 8 -> 13, 21, 21).
    """
    last, previous = seq[-1], seq[-2]
    successors = [last + previous, last + previous + last, last * 2 + previous]
    return successors[:count]


def describe_fibonacci(seq: np.ndarray, params: Params) -> Wording:
    return ("Fibonacci-like sequence where each number is the sum of the two preceding ones",
            "a_n = a_(n-1) + a_(n-2)")


def _extend_powers(params: Params, exponent: int, count: int) -> List[float]:
    next_index = params["last_root"] + 1
    return [(next_index + k) ** exponent for k in range(count)]


def extend_square(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    return _extend_powers(params, 2, count)


def describe_square(seq: np.ndarray, params: Params) -> Wording:
    return "Square numbers sequence", "a_n = n²"


def extend_cube(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    return _extend_powers(params, 3, count)


def describe_cube(seq: np.ndarray, params: Params) -> Wording:
    return "Cube numbers sequence", "a_n = n³"


def extend_power(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    base, first = float(params["base"]), params["start_exponent"] + len(seq)
    return [base ** (first + k) for k in range(count)]


def describe_power(seq: np.ndarray, params: Params) -> Wording:
    base, start = params["base"], params["start_exponent"]
    exponent = "n" if start == 0 else f"(n+{start})"
    return f"Power sequence with base {base}", f"a_n = {base}^{exponent}"


# ===================================================================
# Alternating operations and differences
# ===================================================================
def _apply(operation: Tuple[str, float], value: float) -> float:
    name, operand = operation
    if name == "add":
        return value + operand
    if name == "multiply":
        return value * operand
    return value ** operand


def _operation_text(operation: Tuple[str, float]) -> str:
    name, operand = operation
    return f"{_OPERATION_SYMBOLS[name]}{format_number(operand)}"


def extend_complex_alternating(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    successors = []
    value, index = seq[-1], len(seq) - 1
    for _ in range(count):
        # A hop leaving index i starts from an odd position when i is even.
        operation = params["odd_to_even"] if index % 2 == 0 else params["even_to_odd"]
        value = _apply(operation, value)
        successors.append(value)
        index += 1
    return successors


def describe_complex_alternating(seq: np.ndarray, params: Params) -> Wording:
    return (f"Complex alternating pattern: odd to even {_operation_text(params['odd_to_even'])}, "
            f"even to odd {_operation_text(params['even_to_odd'])}",
            "Alternating operations between odd/even positions")


def _extend_by_step_cycle(seq: np.ndarray, steps: Tuple[float, ...], count: int) -> List[float]:
    successors = []
    value, position = seq[-1], len(seq) - 1
    for _ in range(count):
        value = value + steps[position % len(steps)]
        successors.append(value)
        position += 1
    return successors


def extend_difference_cycle(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    return _extend_by_step_cycle(seq, params["block"], count)


def describe_difference_cycle(seq: np.ndarray, params: Params) -> Wording:
    return (f"Cyclic differences pattern: [{format_values(params['block'])}]",
            f"Differences alternate in a cycle of {params['period']}")


def extend_alternating_difference(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    return _extend_by_step_cycle(seq, params["steps"], count)


def describe_alternating_difference(seq: np.ndarray, params: Params) -> Wording:
    first, second = (format_signed(s) for s in params["steps"])
    return (f"Alternating differences: {first} and {second}",
            f"Alternates between {first} and {second}")


def extend_delay_constant(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    extended = list(seq)
    for _ in range(count):
        extended.append(extended[-2] + params["constant"])
    return extended[len(seq):]


def describe_delay_constant(seq: np.ndarray, params: Params) -> Wording:
    c = format_number(params["constant"])
    return (f"Each element follows the pattern: a_n = a_(n-2) + {c}",
            f"a_(n+2) = a_n + {c}")


def extend_parity_groups(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    group_size = params["group_size"]
    cycle = group_size * 2
    last = int(round(seq[-1]))
    successors = []
    for i in range(count):
        position = (len(seq) + i) % cycle
        in_first_run = position < group_size
        should_be_even = in_first_run if params["start"] == "even-first" else not in_first_run
        candidate = last + 1
        while (candidate % 2 == 0) != should_be_even:
            candidate += 1
        successors.append(float(candidate))
        last = candidate
    return successors


def describe_parity_groups(seq: np.ndarray, params: Params) -> Wording:
    order = "even then odd" if params["start"] == "even-first" else "odd then even"
    size = params["group_size"]
    return f"Consecutive {order} numbers in groups of {size}", f"Groups of {size} {order} numbers"


# ===================================================================
# Interleaved progressions
# ===================================================================
def _branch_successor(branch: np.ndarray, progression: Tuple[str, float], steps: int) -> float:
    kind, value = progression
    if kind == "arithmetic":
        return branch[-1] + value * steps
    return branch[-1] * value ** steps


def extend_interleaved(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    """Advance each branch on its own and interleave them in position order."""
    branches = {0: (odd_positions(seq), params["odd"]), 1: (even_positions(seq), params["even"])}
    advanced = {0: 0, 1: 0}
    successors = []
    for index in range(len(seq), len(seq) + count):
        parity = index % 2
        advanced[parity] += 1
        branch, progression = branches[parity]
        successors.append(_branch_successor(branch, progression, advanced[parity]))
    return successors


def _branch_rule(progression: Tuple[str, float]) -> str:
    kind, value = progression
    symbol = "d" if kind == "arithmetic" else "r"
    return f"{kind} ({symbol} = {format_number(value)})"


def _branch_preview(values: np.ndarray) -> str:
    return f"[{format_values(values, ',')},...]"


def describe_unit_step_interleave(seq: np.ndarray, params: Params) -> Wording:
    odd_start, even_start = format_number(params["odd_start"]), format_number(params["even_start"])
    return ("Pattern with two interleaved arithmetic sequences: "
            f"odd positions {_branch_preview(odd_positions(seq))} "
            f"and even positions {_branch_preview(even_positions(seq))}",
            f"Odd positions: a_n = {odd_start} + (n-1), Even positions: a_n = {even_start} + (n-1)")


def describe_alternating_with_step(seq: np.ndarray, params: Params) -> Wording:
    odd_diff, even_diff = format_number(params["odd"][1]), format_number(params["even"][1])
    odd_start, even_start = format_number(params["odd_start"]), format_number(params["even_start"])
    return ("Two interleaved arithmetic sequences: "
            f"odd positions {_branch_preview(odd_positions(seq))} with diff={odd_diff} "
            f"and even positions {_branch_preview(even_positions(seq))} with diff={even_diff}, "
            f"step={format_number(params['step'])}",
            f"Odd positions: a_n = {odd_start} + (n/2)×{odd_diff}, "
            f"Even positions: a_n = {even_start} + (n/2)×{even_diff}")


def describe_interleaved_progressions(seq: np.ndarray, params: Params) -> Wording:
    odd_rule, even_rule = _branch_rule(params["odd"]), _branch_rule(params["even"])
    return (f"Interleaved sequences: odd positions follow {odd_rule}, even positions follow {even_rule}",
            f"Two separate sequences: {odd_rule} and {even_rule}")


def describe_alternating_branch_steps(seq: np.ndarray, params: Params) -> Wording:
    return ("Alternating sequence with different patterns for odd/even positions",
            f"Odd positions: {format_signed(params['odd'][1])}, "
            f"Even positions: {format_signed(params['even'][1])}")


def describe_interleaved_common_difference(seq: np.ndarray, params: Params) -> Wording:
    diff = format_number(params["odd"][1])
    return (f"Two interleaved arithmetic sequences with common difference {diff}",
            f"Odd positions: start at {format_number(params['odd_start'])} with +{diff}, "
            f"Even positions: start at {format_number(params['even_start'])} with +{diff}")


def describe_hybrid_arithmetic_geometric(seq: np.ndarray, params: Params) -> Wording:
    odd_diff, even_ratio = format_number(params["odd"][1]), format_number(params["even"][1])
    return ("Hybrid pattern: arithmetic for odd positions, geometric for even positions",
            f"Odd positions: a_n = {format_number(params['odd_start'])} + (n/2)×{odd_diff}, "
            f"Even positions: a_n = {format_number(params['even_start'])} × {even_ratio}^(n/2)")


# ===================================================================
# Repetition and higher-order tables
# ===================================================================
def extend_cyclic_block(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    block, period = params["block"], params["period"]
    return [block[(len(seq) + i) % period] for i in range(count)]


def describe_cyclic_block(seq: np.ndarray, params: Params) -> Wording:
    values = format_values(params["block"])
    return (f"Cyclic pattern with period {params['period']}: [{values}]",
            f"Repeating sequence with values [{values}]")


def extend_difference_table(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    """
    Extends the finite-difference table: the deepest row keeps its constant
    and every row above is rebuilt by summation.
    """
    order, constant = params["order"], params["constant"]
    rows = [np.asarray(seq, dtype=float)]
    for _ in range(order):
        rows.append(differences(rows[-1]))
    tails = [row[-1] for row in rows]
    successors = []
    for _ in range(count):
        tails[order] = constant
        for level in range(order - 1, -1, -1):
            tails[level] = tails[level] + tails[level + 1]
        successors.append(tails[0])
    return successors


def extend_ratio_table(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    """Same as the difference table, with ratios and products."""
    order, constant = params["order"], params["constant"]
    rows = [np.asarray(seq, dtype=float)]
    for _ in range(order):
        rows.append(np.ma.getdata(ratios(rows[-1])))
    tails = [row[-1] for row in rows]
    successors = []
    for _ in range(count):
        tails[order] = constant
        for level in range(order - 1, -1, -1):
            tails[level] = tails[level] * tails[level + 1]
        successors.append(tails[0])
    return successors


_ORDER_NAMES = {1: "first-order", 2: "second-order", 3: "third-order"}
_DIFFERENCE_FORMULAS = {
    1: "Linear: a_n = a_1 + (n-1)d",
    2: "Quadratic with constant second difference",
    3: "Cubic with constant third difference",
}
_RATIO_FORMULAS = {
    1: "a_n = a_1 × r^(n-1)",
    2: "Sequence with second-order ratio pattern",
}


def describe_difference_table(seq: np.ndarray, params: Params) -> Wording:
    order = params["order"]
    return (f"Sequence with constant {_ORDER_NAMES[order]} difference = {format_number(params['constant'])}",
            _DIFFERENCE_FORMULAS[order])


def describe_ratio_table(seq: np.ndarray, params: Params) -> Wording:
    order = params["order"]
    return (f"Sequence with constant {_ORDER_NAMES[order]} ratio = {format_number(params['constant'])}",
            _RATIO_FORMULAS[order])


# ===================================================================
# Fallback
# ===================================================================
def extend_last_difference(seq: np.ndarray, params: Params, count: int = 3) -> List[float]:
    d = params["difference"]
    return [seq[-1] + d * k for k in range(1, count + 1)]


def describe_last_difference(seq: np.ndarray, params: Params) -> Wording:
    return ("Pattern not definitively identified, using last difference",
            f"Based on last difference = {format_number(params['difference'])}")
