"""Plan checker - validates a season plan JSON file from the command line.

Usage:
    python -m checker.validate_plan plan.json                  # publish gate
    python -m checker.validate_plan plan.json --mode save      # save gate
    python -m checker.validate_plan plan.json --format table

Exit codes: 0 when the plan passes the gate for the mode (can_save in save
mode, can_publish otherwise), 1 when it does not, 2 when the plan cannot be
loaded.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from season_validator.engine import run_validation
from season_validator.exceptions import PlanLoadError
from season_validator.loader import load_plan
from season_validator.models.enums import ValidationMode
from season_validator.registry import all_rules, blocking_rules, critical_rules
from season_validator.reporting import format_report, issues_to_frame, summarize_by_rule

from checker.config import DEFAULT_MODE, LOG_LEVEL, OUTPUT_FORMAT

logger = logging.getLogger(__name__)

_RULE_BUNDLES = {
    "all": all_rules,
    "critical": critical_rules,
    "blocking": blocking_rules,
}

EXIT_OK = 0
EXIT_FAILED_GATE = 1
EXIT_LOAD_ERROR = 2

MODE_CHOICES = [m.value for m in ValidationMode]
FORMAT_CHOICES = ["text", "table", "csv", "json"]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Validate a training-season plan")
    parser.add_argument("plan", help="Path to the plan JSON file")
    parser.add_argument(
        "--mode",
        choices=MODE_CHOICES,
        default=DEFAULT_MODE,
        help="Validation mode (default: %(default)s)",
    )
    parser.add_argument(
        "--rules",
        choices=sorted(_RULE_BUNDLES),
        default="all",
        help="Rule bundle to run (default: %(default)s)",
    )
    parser.add_argument(
        "--format",
        choices=FORMAT_CHOICES,
        default=OUTPUT_FORMAT,
        help="Output format (default: %(default)s)",
    )
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser


def _check_env_defaults(parser: argparse.ArgumentParser, args: argparse.Namespace) -> None:
    # argparse does not check defaults against choices
    if args.mode not in MODE_CHOICES:
        parser.error(
            f"invalid mode {args.mode!r} from SEASON_VALIDATOR_MODE "
            f"(choose from {', '.join(MODE_CHOICES)})"
        )
    if args.format not in FORMAT_CHOICES:
        parser.error(
            f"invalid format {args.format!r} from SEASON_VALIDATOR_FORMAT "
            f"(choose from {', '.join(FORMAT_CHOICES)})"
        )


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    _check_env_defaults(parser, args)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    try:
        plan = load_plan(args.plan)
    except PlanLoadError as exc:
        logger.error("Failed to load plan: %s", exc)
        return EXIT_LOAD_ERROR

    mode = ValidationMode(args.mode)
    result = run_validation(plan, _RULE_BUNDLES[args.rules](), mode)

    if args.format == "json":
        print(json.dumps(result.to_dict(), indent=2))
    elif args.format == "csv":
        print(issues_to_frame(result).to_csv(index=False), end="")
    elif args.format == "table":
        if result.issues:
            print(summarize_by_rule(result).to_string(index=False))
        print(format_report(result))
    else:
        print(format_report(result))

    passed = result.can_save if mode == ValidationMode.SAVE else result.can_publish
    return EXIT_OK if passed else EXIT_FAILED_GATE


if __name__ == "__main__":
    sys.exit(main())
