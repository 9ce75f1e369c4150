# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""Result record returned by the prediction engine."""
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Tuple


class RuleType(str, Enum):
    """Family tag attached to a prediction."""

    ARITHMETIC = "arithmetic"
    GEOMETRIC = "geometric"
    FIBONACCI = "fibonacci"
    SQUARE = "square"
    CUBE = "cube"
    # Reserved: no catalog entry produces these two.
    FACTORIAL = "factorial"
    PRIME = "prime"
    ALTERNATING = "alternating"
    POWER = "power"
    HYBRID = "hybrid"
    DIFFERENCE_PATTERN = "difference_pattern"
    RATIO_PATTERN = "ratio_pattern"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class PredictionResult:
    """
    Outcome of one classification call.

    Attributes:
        next_elements: the three extrapolated successors (empty when the
            input had fewer than three numbers).
        rule_type: family tag of the matched rule.
        rule_description: human-readable explanation.
        formula: symbolic formula string.
        confidence: fixed confidence of the matched rule, in [0, 1].
        pattern: name of the catalog entry that produced the match.
        parameters: parameters extracted by that entry's detector.
    """

    next_elements: Tuple[float, ...]
    rule_type: RuleType
    rule_description: str
    formula: str
    confidence: float
    pattern: str = "last_difference"
    parameters: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not 0.0 <= self.confidence <= 1.0:
            raise ValueError(f"confidence must be between 0.0 and 1.0, got {self.confidence}")
        # Frozen dataclass: bypass __setattr__ to store the normalised fields.
        object.__setattr__(self, "next_elements", tuple(float(v) for v in self.next_elements))
        object.__setattr__(self, "rule_type", RuleType(self.rule_type))
        object.__setattr__(self, "parameters", MappingProxyType(dict(self.parameters)))

    def to_dict(self) -> Dict[str, Any]:
        return {
            "next_elements": list(self.next_elements),
            "rule_type": self.rule_type.value,
            "rule_description": self.rule_description,
            "formula": self.formula,
            "confidence": self.confidence,
            "pattern": self.pattern,
            "parameters": {key: _plain(value) for key, value in self.parameters.items()},
        }


def _plain(value: Any) -> Any:
    """Tuples to lists so that parameters serialise to JSON."""
    if isinstance(value, tuple):
        return [_plain(v) for v in value]
    return value
