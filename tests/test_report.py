"""Unit tests for sequence_predictor/report.py"""

import pytest

from sequence_predictor.engine import insufficient_input_result
from sequence_predictor.models import PredictionResult, RuleType
from sequence_predictor.report import (
    Colors,
    confidence_percentage,
    confidence_tier,
    print_report,
    render_matches,
    render_report,
    rule_label,
)


@pytest.fixture
def square_result():
    return PredictionResult(
        next_elements=(36, 49, 64),
        rule_type=RuleType.SQUARE,
        rule_description="Square numbers sequence",
        formula="a_n = n²",
        confidence=0.92,
        pattern="square",
    )


@pytest.mark.parametrize("confidence, tier", [
    (0.99, ("high", "GREEN")),
    (0.91, ("high", "GREEN")),
    (0.90, ("good", "BLUE")),
    (0.82, ("good", "BLUE")),
    (0.70, ("moderate", "YELLOW")),
    (0.50, ("low", "GRAY")),
    (0.0, ("low", "GRAY")),
])
def test_confidence_tier(confidence, tier):
    assert confidence_tier(confidence) == tier


def test_confidence_percentage():
    assert confidence_percentage(0.92) == 92
    assert confidence_percentage(0.875) == 88
    assert confidence_percentage(0.0) == 0


@pytest.mark.parametrize("rule_type, label", [
    (RuleType.UNKNOWN, "Complex Pattern"),
    (RuleType.HYBRID, "Hybrid"),
    ("difference_pattern", "Difference_pattern"),
])
def test_rule_label(rule_type, label):
    assert rule_label(rule_type) == label


class TestRenderReport:

    def test_plain_report(self, square_result):
        text = render_report([1, 4, 9, 16, 25], square_result)
        assert "\033[" not in text
        lines = text.splitlines()
        assert "sequence: 1, 4, 9, 16, 25" in lines
        assert "next: 36, 49, 64" in lines
        assert "pattern: Square" in lines
        assert "confidence: 92% (high)" in lines
        assert "description: Square numbers sequence" in lines
        assert "formula: a_n = n²" in lines

    def test_colored_report(self, square_result):
        text = render_report([1, 4, 9, 16, 25], square_result, colors_enabled=True)
        assert Colors(True).GREEN + "92% (high)" in text

    def test_insufficient_input(self):
        text = render_report([5, 7], insufficient_input_result())
        assert "next: -" in text
        assert "pattern: Complex Pattern" in text
        assert "confidence: 0% (low)" in text

    def test_title(self, square_result):
        assert "Squares" in render_report([1, 4, 9], square_result, title="Squares")


class TestRenderMatches:

    def test_winner_is_marked(self):
        text = render_matches([("arithmetic", 0.95), ("difference_order_1", 0.90)])
        assert text.splitlines() == [
            "matching families:",
            "  * arithmetic (95%)",
            "    difference_order_1 (90%)",
        ]

    def test_no_match(self):
        assert render_matches([]).startswith("no family matched")


def test_print_report(square_result, capsys):
    print_report([1, 4, 9, 16, 25], square_result)
    assert "next: 36, 49, 64" in capsys.readouterr().out


def test_colors_disabled_are_empty():
    colors = Colors(False)
    assert colors.GREEN == colors.ENDC == colors.BOLD == ""
