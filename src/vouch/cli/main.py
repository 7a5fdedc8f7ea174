"""CLI entrypoint for Vouch."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any

import yaml

from vouch import __version__
from vouch.config import VouchConfig, load_config
from vouch.constants.cli import CLI_DESCRIPTION, EXIT_ERROR, EXIT_INVALID, EXIT_OK
from vouch.exceptions import ConfigError, VouchError
from vouch.plan.compiler import compile_plan
from vouch.plan.executor import execute
from vouch.spec.loader import load_spec_file
from vouch.types.common import JsonObject


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = argparse.ArgumentParser(prog="vouch", description=CLI_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-c", "--config", type=Path, help="Explicit config file (default: ./vouch.yaml)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    check_spec = subparsers.add_parser("check-spec", help="Validate specification documents")
    check_spec.add_argument("files", type=Path, nargs="+", help="Specification YAML files")

    validate = subparsers.add_parser("validate", help="Validate a YAML/JSON data document against a type")
    validate.add_argument("-s", "--spec", type=Path, required=True, help="Specification YAML file")
    validate.add_argument("-t", "--type", dest="type_name", required=True, help="Type name in the spec document")
    validate.add_argument("data", type=Path, help="YAML or JSON data document")
    validate.add_argument(
        "--format",
        choices=["json", "text"],
        default="json",
        help="Violation output format (default: json)",
    )

    describe = subparsers.add_parser("describe", help="Print a type's constraints as JSON")
    describe.add_argument("-s", "--spec", type=Path, required=True, help="Specification YAML file")
    describe.add_argument("-t", "--type", dest="type_name", required=True, help="Type name in the spec document")

    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        config = load_config(Path.cwd(), args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    if args.command == "check-spec":
        return _handle_check_spec(args.files, config)
    if args.command == "validate":
        return _handle_validate(args, config)
    if args.command == "describe":
        return _handle_describe(args, config)
    parser.error(f"Unsupported command: {args.command}")
    return EXIT_ERROR


def _handle_check_spec(files: list[Path], config: VouchConfig) -> int:
    """Load every file and report all failures, one line each."""
    failures = 0
    for path in files:
        try:
            registry = load_spec_file(path, config=config)
            for name in registry.names():
                compile_plan(name, registry)
        except VouchError as exc:
            failures += 1
            print(f"{path}: {exc}", file=sys.stderr)
            continue
        print(f"{path}: ok ({len(registry)} types)")
    return EXIT_ERROR if failures else EXIT_OK


def _handle_validate(args: argparse.Namespace, config: VouchConfig) -> int:
    try:
        registry = load_spec_file(args.spec, config=config)
        plan = compile_plan(args.type_name, registry)
        data = _load_data(args.data)
    except VouchError as exc:
        print(f"Spec error: {exc}", file=sys.stderr)
        return EXIT_ERROR

    err = execute(plan, data)
    if args.format == "json":
        result: JsonObject = {"valid": not err, "violations": err.to_list()}
        print(json.dumps(result, indent=2))
    elif err:
        print(err.format())
    else:
        print("valid")
    return EXIT_INVALID if err else EXIT_OK


def _handle_describe(args: argparse.Namespace, config: VouchConfig) -> int:
    try:
        registry = load_spec_file(args.spec, config=config)
        spec = registry.get(args.type_name)
    except VouchError as exc:
        print(f"Spec error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    print(json.dumps(spec.describe(), indent=2, default=str))
    return EXIT_OK


def _load_data(path: Path) -> Any:
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise VouchError(f"Cannot read data file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise VouchError(f"Invalid data document {path}: {exc}") from exc


if __name__ == "__main__":
    raise SystemExit(main())
