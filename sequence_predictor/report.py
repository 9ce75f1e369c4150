# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""Text rendering of a prediction for the terminal."""
from typing import List, Sequence, Tuple

from .formatting import format_values
from .models import PredictionResult, RuleType

# (lower bound, tier name, colour attribute); the first tier whose bound the
# confidence exceeds is used.
CONFIDENCE_TIERS: Tuple[Tuple[float, str, str], ...] = (
    (0.9, "high", "GREEN"),
    (0.7, "good", "BLUE"),
    (0.5, "moderate", "YELLOW"),
)
LOWEST_TIER = ("low", "GRAY")


class Colors:
    def __init__(self, enabled: bool):
        if enabled:
            self.HEADER, self.BLUE, self.GREEN, self.YELLOW, self.GRAY, self.ENDC, self.BOLD = (
                '\033[95m', '\033[94m', '\033[92m', '\033[93m', '\033[90m', '\033[0m', '\033[1m')
        else:
            self.HEADER, self.BLUE, self.GREEN, self.YELLOW, self.GRAY, self.ENDC, self.BOLD = ('',) * 7


def confidence_percentage(confidence: float) -> int:
    return int(round(confidence * 100))


def confidence_tier(confidence: float) -> Tuple[str, str]:
    """(tier name, colour attribute) for a confidence value."""
    for bound, name, color in CONFIDENCE_TIERS:
        if confidence > bound:
            return name, color
    return LOWEST_TIER


def rule_label(rule_type: RuleType) -> str:
    """Badge text: the capitalised tag, or 'Complex Pattern' when unknown."""
    rule_type = RuleType(rule_type)
    if rule_type is RuleType.UNKNOWN:
        return "Complex Pattern"
    return rule_type.value[:1].upper() + rule_type.value[1:]


def render_report(sequence: Sequence[float], result: PredictionResult, colors_enabled: bool = False,
                  title: str = "Sequence Analysis") -> str:
    colors = Colors(colors_enabled)
    tier, tier_color = confidence_tier(result.confidence)
    tint = getattr(colors, tier_color)
    lines = [
        f"{colors.BOLD}{colors.HEADER}{'=' * 60}",
        title.center(60),
        f"{'=' * 60}{colors.ENDC}",
        f"{colors.BLUE}sequence{colors.ENDC}: {format_values(sequence)}",
        f"{colors.BLUE}next{colors.ENDC}: {format_values(result.next_elements) or '-'}",
        f"{colors.BLUE}pattern{colors.ENDC}: {rule_label(result.rule_type)}",
        f"{colors.BLUE}confidence{colors.ENDC}: "
        f"{tint}{confidence_percentage(result.confidence)}% ({tier}){colors.ENDC}",
        f"{colors.BLUE}description{colors.ENDC}: {result.rule_description}",
    ]
    if result.formula:
        lines.append(f"{colors.BLUE}formula{colors.ENDC}: {result.formula}")
    return "\n".join(lines)


def render_matches(matches: List[Tuple[str, float]], colors_enabled: bool = False) -> str:
    """Lists (entry name, confidence) pairs in priority order, the winner first."""
    colors = Colors(colors_enabled)
    if not matches:
        return f"{colors.GRAY}no family matched; the last difference is extrapolated{colors.ENDC}"
    lines = [f"{colors.BOLD}matching families{colors.ENDC}:"]
    for i, (name, confidence) in enumerate(matches):
        marker = "*" if i == 0 else " "
        lines.append(f"  {marker} {name} ({confidence_percentage(confidence)}%)")
    return "\n".join(lines)


def print_report(sequence: Sequence[float], result: PredictionResult, colors_enabled: bool = False) -> None:
    print(render_report(sequence, result, colors_enabled))
