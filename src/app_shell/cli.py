import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from src.adapters.rules_ports import RulesPortAdapter
from src.components import report as report_component
from src.components.caching import hints_from_mapping
from src.components.validator import parse_declared_config
from src.rules.loader import load_rules, resolve_rules_path

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

EXIT_OK = 0
EXIT_BLOCKING = 1
EXIT_INVALID_INPUT = 2


def read_request(path: Path) -> dict[str, Any]:
    """Read a YAML or JSON request file with profile, hints and config keys."""
    with open(path) as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a mapping")
    if "profile" not in data:
        raise ValueError(f"{path} has no 'profile' section")
    return data


def handle_recommend(args: argparse.Namespace) -> int:
    try:
        rules = load_rules(resolve_rules_path(args.rules))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return EXIT_INVALID_INPUT

    try:
        request = read_request(Path(args.input))
        hints = hints_from_mapping(request.get("hints"))
        raw_config = request.get("config")
        config = parse_declared_config(raw_config) if raw_config is not None else None
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error(f"Invalid request: {e}")
        return EXIT_INVALID_INPUT

    result = report_component.run(
        report_component.RecommendInput(
            raw_profile=request["profile"], hints=hints, config=config
        ),
        rules=RulesPortAdapter(rules),
    )
    if not result.success or result.report is None:
        for error in result.errors:
            logger.error(f"{error.code}: {error.message}")
        return EXIT_INVALID_INPUT

    print(json.dumps(result.report.to_dict(), indent=2))

    if result.report.has_blocking_findings:
        logger.error(f"{len(result.report.errors)} blocking finding(s)")
        return EXIT_BLOCKING
    return EXIT_OK


def handle_validate_rules(args: argparse.Namespace) -> int:
    path = resolve_rules_path(args.rules)
    try:
        rules = load_rules(path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        return EXIT_INVALID_INPUT
    print(f"Rules valid: {path} ({rules.project.slug} v{rules.project.rules_version})")
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Render Strategy Advisor CLI")
    parser.add_argument("--rules", help="Path to rules.yaml (default: $RULES_PATH or ./rules.yaml)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # recommend
    recommend_parser = subparsers.add_parser(
        "recommend", help="Recommend a rendering strategy for a page"
    )
    recommend_parser.add_argument("input", help="YAML or JSON file with profile/hints/config")

    # validate-rules
    subparsers.add_parser("validate-rules", help="Validate the rules file")

    args = parser.parse_args(argv)

    if args.command == "recommend":
        return handle_recommend(args)
    if args.command == "validate-rules":
        return handle_validate_rules(args)
    return EXIT_INVALID_INPUT


if __name__ == "__main__":
    sys.exit(main())
