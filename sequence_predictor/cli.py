# Copyright (c) 2025  Feklin Dmitry (FeklinDN@gmail.com)
"""Command-line entry point: `sequence-predictor 2, 4, 6, 8`."""
import argparse
import json
import sys
from typing import List, Optional, Sequence

from .catalog import PatternCatalog
from .engine import PredictionEngine
from .exceptions import SequenceInputError
from .logging_config import setup_logging
from .metrics import DEFAULT_TOLERANCE
from .parsing import EXAMPLE_SEQUENCES, parse_sequence
from .report import print_report, render_matches


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sequence-predictor",
        description="Identify the pattern of a number sequence and predict the next three values.")
    parser.add_argument("values", nargs="*",
                        help="3 to 20 numbers separated by commas, e.g. '2, 4, 6, 8'")
    parser.add_argument("--example", choices=sorted(EXAMPLE_SEQUENCES),
                        help="analyse one of the built-in example sequences")
    parser.add_argument("--tolerance", type=float, default=DEFAULT_TOLERANCE,
                        help="absolute tolerance for numeric comparisons (default: %(default)s)")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("--all-matches", action="store_true",
                        help="also list every family that matches, in priority order")
    parser.add_argument("--color", action="store_true", help="colour the text report")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING, ... (default: $SEQUENCE_PREDICTOR_LOG_LEVEL or WARNING)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.example:
            sequence: List[float] = [float(v) for v in EXAMPLE_SEQUENCES[args.example]]
        else:
            sequence = parse_sequence(",".join(args.values))
        catalog = PatternCatalog(tolerance=args.tolerance)
    except (SequenceInputError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    engine = PredictionEngine(catalog)
    result = engine.predict(sequence)
    matches = [(entry.name, entry.confidence) for entry, _ in catalog.matches(sequence)] if args.all_matches else None

    if args.json:
        payload = {"sequence": sequence, "result": result.to_dict()}
        if matches is not None:
            payload["matches"] = [{"pattern": name, "confidence": conf} for name, conf in matches]
        print(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        print_report(sequence, result, colors_enabled=args.color)
        if matches is not None:
            print(render_matches(matches, colors_enabled=args.color))
    return 0


if __name__ == "__main__":
    sys.exit(main())
