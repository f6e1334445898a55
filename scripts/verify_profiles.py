#!/usr/bin/env python3
"""
Aircraft Profile Verification Script

Validates an aircraft catalogue (profiles.yaml) and reports slots that
have no weight limit configured.

Usage:
    python scripts/verify_profiles.py
    python scripts/verify_profiles.py --profiles custom_profiles.yaml --strict
"""

import argparse
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

# Add project root to path
PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from ramp_placement.aircraft.config_loader import (  # noqa: E402
    DEFAULT_PROFILES_PATH,
    load_profiles,
)


def verify_profiles(profiles_path: Path = DEFAULT_PROFILES_PATH, strict: bool = False) -> bool:
    """
    Verify an aircraft catalogue.

    Args:
        profiles_path: Path to the catalogue YAML
        strict: Treat slots without a weight limit as failures

    Returns:
        True if all checks pass
    """
    print("=" * 60)
    print("  Aircraft Profile Verification  ")
    print(f"  Catalogue: {profiles_path}")
    print("=" * 60)
    print()

    catalog = load_profiles(profiles_path)
    profiles = catalog.to_profiles()

    print(f"Default profile: {catalog.default_profile}")
    print()
    print("Validation Checks:")

    checks = []
    for tag, profile in profiles.items():
        summary = (
            f"{tag} ({profile.display_name}): "
            f"{profile.ramp_width_m:g}m x {profile.ramp_length_m:g}m, "
            f"{profile.total_rows} rows"
        )
        missing = profile.missing_limit_codes()
        if not missing:
            print(f"  ✓ {summary}, all {len(profile.slot_codes())} slots limited")
            checks.append(True)
        elif strict:
            print(f"  ✗ {summary}, no limit for {', '.join(missing)}")
            checks.append(False)
        else:
            print(f"  ⚠ {summary}, unlimited: {', '.join(missing)}")
            checks.append(True)  # Warning but acceptable

    print()

    passed = sum(checks)
    total = len(checks)

    print("=" * 60)
    if all(checks):
        print(f"✅ Catalogue VERIFIED: {total} profiles passed")
        print("=" * 60)
        return True

    print(f"⚠️  Catalogue WARNING: {passed}/{total} profiles passed")
    print("=" * 60)
    return False


def main():
    parser = argparse.ArgumentParser(description="Validate an aircraft profile catalogue")
    parser.add_argument(
        "--profiles",
        type=Path,
        default=DEFAULT_PROFILES_PATH,
        help="Catalogue YAML (default: bundled profiles.yaml)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a slot has no weight limit",
    )
    args = parser.parse_args()

    try:
        success = verify_profiles(args.profiles, strict=args.strict)
    except (FileNotFoundError, yaml.YAMLError, ValidationError) as e:
        print(f"\n❌ Error: {e}")
        return 1
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
