#!/usr/bin/env python3
"""Validation script for merchant tier configuration JSON files.

Scans the configs directory (or the directory given as the first argument) for
*.json files and validates them against the tier configuration schema.
Exits with error code if any invalid files are found, since the discount
engine would silently fall back to its defaults for them.
"""

from __future__ import annotations

import sys
from pathlib import Path

from tiered_discounts.domain.tiered_discount.config import ConfigRejected, decode_config


def find_repo_root() -> Path:
    """Find the repository root by looking for pyproject.toml."""
    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    # Fallback to current working directory
    return Path.cwd()


def validate_json_file(file_path: Path) -> tuple[bool, str | None]:
    """Decode a JSON file exactly as the discount engine decodes a metafield value."""
    with open(file_path, "r", encoding="utf-8") as f:
        result = decode_config(f.read())
    if isinstance(result, ConfigRejected):
        return False, result.reason
    return True, None


def main(argv: list[str] | None = None) -> int:
    """Main validation function."""
    args = sys.argv[1:] if argv is None else argv
    configs_dir = Path(args[0]) if args else find_repo_root() / "configs"

    if not configs_dir.exists():
        print(f"ERROR: Configs directory not found: {configs_dir}", file=sys.stderr)
        return 1

    errors: list[str] = []
    for config_file in sorted(configs_dir.glob("*.json")):
        valid, error = validate_json_file(config_file)
        if not valid:
            errors.append(f"{config_file}: {error}")
        else:
            print(f"✓ {config_file}")

    # Report errors
    if errors:
        print("\nValidation errors:", file=sys.stderr)
        for error in errors:
            print(f"  {error}", file=sys.stderr)
        return 1

    print("\nAll files validated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
