# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""Number rendering used in rule descriptions, formulas and reports."""
import math
from typing import Iterable


def format_number(num: float) -> str:
    """
    Integers render without a decimal point, everything else with at most
    three decimals and no trailing zeros (2.50 -> '2.5', 1/3 -> '0.333').
    """
    num = float(num)
    if math.isfinite(num) and num.is_integer():
        return str(int(num))
    text = f"{num:.3f}".rstrip("0").rstrip(".")
    # -0.0001 rounds to "-0"
    return "0" if text == "-0" else text


def format_signed(num: float) -> str:
    """Operand form with an explicit sign: '+3', '-2', '+0.5'."""
    text = format_number(num)
    return text if text.startswith("-") else f"+{text}"


def format_values(values: Iterable[float], separator: str = ", ") -> str:
    return separator.join(format_number(v) for v in values)
