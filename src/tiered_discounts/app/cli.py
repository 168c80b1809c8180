from __future__ import annotations

import argparse
import json
import sys
from typing import Optional, TextIO

from tiered_discounts.application.errors import TieredDiscountsError
from tiered_discounts.application.registry import Registry
from tiered_discounts.application.run_context import RunContext
from tiered_discounts.application.runner import Runner
from tiered_discounts.domain.common.amounts import format_amount
from tiered_discounts.domain.tiered_discount.config import ConfigRejected, decode_config
from tiered_discounts.observability.logging import configure_logging
from tiered_discounts.settings import get_settings


def read_document(path: Optional[str], stdin: TextIO) -> str:
    if path is None or path == "-":
        return stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def _run(args: argparse.Namespace, registry: Registry) -> int:
    try:
        document = read_document(args.input_path, sys.stdin)
    except OSError as e:
        print(f"ERROR: Cannot read input: {e}", file=sys.stderr)
        return 1

    try:
        payload = json.loads(document)
    except json.JSONDecodeError as e:
        print(f"ERROR: Invalid JSON input: {e}", file=sys.stderr)
        return 1

    ctx = RunContext.from_args(target=args.target, correlation_id=args.correlation_id)
    try:
        output = Runner(registry=registry).run(ctx, payload)
    except TieredDiscountsError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output))
    return 0


def _validate_config(args: argparse.Namespace) -> int:
    try:
        document = read_document(args.config_path, sys.stdin)
    except OSError as e:
        print(f"ERROR: Cannot read config: {e}", file=sys.stderr)
        return 1

    result = decode_config(document)
    if isinstance(result, ConfigRejected):
        print(f"ERROR: {result.reason} (defaults would be used)", file=sys.stderr)
        return 1

    config = result.config
    print(
        json.dumps(
            {
                "quantity_threshold": config.quantity_threshold,
                "quantity_discount_percentage": format_amount(config.quantity_discount_percentage),
                "order_threshold_1": format_amount(config.order_threshold_1),
                "order_discount_percentage_1": format_amount(config.order_discount_percentage_1),
                "free_shipping_threshold": format_amount(config.free_shipping_threshold),
            }
        )
    )
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    configure_logging()
    settings = get_settings()
    registry = Registry()

    parser = argparse.ArgumentParser(description="Tiered Discounts CLI")
    subparsers = parser.add_subparsers(dest="command")

    run_parser = subparsers.add_parser("run", help="Evaluate a function target against an input document")
    run_parser.add_argument("--target", default=settings.default_target)
    run_parser.add_argument("--input", dest="input_path", help="Input JSON file (default: stdin)")
    run_parser.add_argument("--correlation-id", dest="correlation_id")

    subparsers.add_parser("targets", help="List registered function targets")

    validate_parser = subparsers.add_parser("validate-config", help="Decode a merchant tier configuration")
    validate_parser.add_argument("config_path", nargs="?", help="Config JSON file (default: stdin)")

    args = parser.parse_args(argv)
    if args.command == "run":
        return _run(args, registry)
    if args.command == "targets":
        for target in registry.targets():
            print(target)
        return 0
    if args.command == "validate-config":
        return _validate_config(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
