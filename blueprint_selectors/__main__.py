"""Command line front end for the selector vocabulary.

Usage:
    python -m blueprint_selectors validate selector.yaml blueprint.yaml
    python -m blueprint_selectors schema > selectors.schema.json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from .const import CONF_BLUEPRINT, DOMAIN
from .exceptions import SelectorError
from .json_schema import selector_json_schema
from .loader import load_document_file, validate_blueprint
from .validation import collect_errors

_LOGGER = logging.getLogger(__name__)


def _check_file(path: Path) -> list[SelectorError]:
    """Return the problems found in one selector or blueprint file."""

    document = load_document_file(path)
    if isinstance(document, dict) and CONF_BLUEPRINT in document:
        _LOGGER.debug("Checking %s as a blueprint", path)
        return [
            error
            for errors in validate_blueprint(document).values()
            for error in errors
        ]

    _LOGGER.debug("Checking %s as a selector document", path)
    return collect_errors(document)


def cmd_validate(args: argparse.Namespace, out: TextIO) -> int:
    failed = 0
    for path in args.files:
        try:
            errors = _check_file(path)
        except OSError as exc:
            out.write(f"{path}: {exc.strerror or exc}\n")
            failed += 1
            continue
        except SelectorError as exc:
            errors = [exc]

        if not errors:
            out.write(f"{path}: ok\n")
            continue

        failed += 1
        for error in errors:
            out.write(f"{path}: {error}\n")

    return 1 if failed else 0


def cmd_schema(args: argparse.Namespace, out: TextIO) -> int:
    json.dump(selector_json_schema(), out, indent=args.indent)
    out.write("\n")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=DOMAIN,
        description="Validate blueprint selectors and export their JSON Schema.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    validate = subparsers.add_parser(
        "validate", help="Validate selector documents or blueprints"
    )
    validate.add_argument("files", nargs="+", type=Path, metavar="FILE")
    validate.set_defaults(handler=cmd_validate)

    schema = subparsers.add_parser("schema", help="Print the selector JSON Schema")
    schema.add_argument("--indent", type=int, default=2)
    schema.set_defaults(handler=cmd_schema)

    return parser


def main(argv: Sequence[str] | None = None, out: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    return args.handler(args, out or sys.stdout)


if __name__ == "__main__":
    sys.exit(main())
