"""
Command-line interface for checking submissions against a date/time profile.

Usage:
    python -m datetime_constraints.cli.check_cli check --profile <rules.yaml> --input <submission.json>
"""

import argparse
import json
import sys
from pathlib import Path
from typing import Any

from datetime_constraints.core.errors import ConfigurationError
from datetime_constraints.core.formats import FormatRegistry
from datetime_constraints.core.models import FormSubmission
from datetime_constraints.core.rules import RuleConfigLoader, RuleEngine
from datetime_constraints.observability.logger import get_logger

logger = get_logger(__name__)


def load_submissions(input_path: Path) -> list[FormSubmission]:
    """
    Read submissions from a JSON file.

    The file holds one submission or a list of them. A submission is either
    {"submission_id": ..., "fields": {...}} or a bare object of field values.
    """
    with open(input_path) as f:
        data = json.load(f)

    items = data if isinstance(data, list) else [data]
    submissions = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Submission {idx} must be a JSON object")
        if "fields" in item:
            submissions.append(FormSubmission(**item))
        else:
            submissions.append(FormSubmission(submission_id=f"{input_path.stem}-{idx}", fields=item))
    return submissions


def render_result(result: Any, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(result.model_dump(), default=str, indent=2)

    lines = [f"{result.submission_id}: {'PASSED' if result.passed else 'FAILED'}"]
    for name, value in result.valid.items():
        lines.append(f"  valid    {name} = {value}")
    for name in result.invalid:
        lines.append(f"  invalid  {name}")
    for name in result.missing:
        lines.append(f"  missing  {name}")
    for rule_name in result.warnings:
        lines.append(f"  warning  {rule_name}")
    return "\n".join(lines)


def check_command(args) -> int:
    """
    Execute the check command.

    Returns:
        0 if every submission passed, 1 if any failed, 2 on configuration errors
    """
    profile_path = Path(args.profile)
    input_path = Path(args.input)
    if not input_path.exists():
        logger.error(f"Input file not found: {args.input}")
        return 2

    try:
        loader = RuleConfigLoader(profile_path)
        formats = None
        if args.formats:
            formats = FormatRegistry([name.strip() for name in args.formats.split(",") if name.strip()])
        engine = RuleEngine(loader.load_rules(), required=loader.load_required(), formats=formats)
        submissions = load_submissions(input_path)
    except (ConfigurationError, ValueError, FileNotFoundError) as e:
        logger.error(f"Cannot run check: {e}")
        return 2

    results = engine.validate_batch(submissions)
    for result in results:
        print(render_result(result, args.format))

    return 0 if all(result.passed for result in results) else 1


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Validate date/time fields of form submissions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Check one submission
  datetime-constraints check --profile profiles/signup.yaml --input signup.json

  # Human-readable output, MySQL rules only
  datetime-constraints check --profile profiles/signup.yaml --input signup.json \\
      --format text --formats mysql
        """
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Check submissions against a profile")
    check_parser.add_argument(
        "--profile",
        required=True,
        help="Path to the YAML validation profile"
    )
    check_parser.add_argument(
        "--input",
        required=True,
        help="Path to a JSON file with one submission or a list of submissions"
    )
    check_parser.add_argument(
        "--format",
        default="json",
        choices=["json", "text"],
        help="Output format (default: json)"
    )
    check_parser.add_argument(
        "--formats",
        default=None,
        help="Comma separated database formats to enable (default: DATETIME_CONSTRAINTS_FORMATS)"
    )

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "check":
        return check_command(args)
    return 1


if __name__ == "__main__":
    sys.exit(main())
