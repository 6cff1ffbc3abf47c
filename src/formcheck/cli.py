"""Command-line front end: validate a values file against a field-set file."""

from __future__ import annotations

import argparse
import logging
import sys

import yaml

from formcheck.config.loader import load_field_set, load_values
from formcheck.validation.field_validator import validate

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_BAD_INPUT = 2


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="formcheck", description="Validate submitted form values against field rules")
    p.add_argument("--rules", "-r", required=True, help="Path to field-set YAML file")
    p.add_argument("--values", required=True, help="Path to submitted values (YAML or JSON)")
    p.add_argument("--success-message", "-m", default=None, help="Override the file's success message")
    p.add_argument("--verbose", "-v", action="store_true", help="Log each failing field")
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        config = load_field_set(args.rules)
        values = load_values(args.values)
    except OSError as e:
        # missing file, directory, permission denied
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT
    except (yaml.YAMLError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_BAD_INPUT

    success_message = args.success_message or config.success_message
    result = validate(config.field_set(), values, success_message)
    print(result.message)
    return EXIT_VALID if result.success else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
