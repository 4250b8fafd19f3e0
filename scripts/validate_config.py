#!/usr/bin/env python3
"""Configuration validation script."""

import sys
from pathlib import Path
from typing import List

# Add the project root to the Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import yaml

from fx_calc.config.loader import ConfigLoader
from fx_calc.config.validation import ConfigValidator, ValidationError
from fx_calc.data.reference import CURRENCY_PAIRS


def validate_pair_config(loader: ConfigLoader, pair_name: str) -> List[ValidationError]:
    """Validate merged configuration for a specific currency pair."""
    config = loader.merge_config(pair_name)
    return ConfigValidator.validate_config(config)


def configured_pairs(loader: ConfigLoader) -> List[str]:
    """Pair names listed in pairs.yaml."""
    pairs_file = loader.config_dir / "pairs.yaml"
    if not pairs_file.exists():
        return []

    with open(pairs_file) as f:
        return list((yaml.safe_load(f) or {}).get("pairs", {}))


def main() -> int:
    """Main validation function."""
    print("🔍 Validating FX Calc configuration...")

    loader = ConfigLoader.create()
    pair_names = sorted(set(CURRENCY_PAIRS) | set(configured_pairs(loader)))

    all_valid = True

    for pair_name in pair_names:
        try:
            errors = validate_pair_config(loader, pair_name)
        except yaml.YAMLError as e:
            print(f"❌ Could not read pairs.yaml: {e}")
            return 1

        if errors:
            print(f"❌ {pair_name}: {len(errors)} validation errors")
            for error in errors:
                print(f"  • {error.field}: {error.message} (value: {error.value})")
            all_valid = False
        else:
            print(f"✅ {pair_name} configuration is valid")

    if all_valid:
        print("\n🎉 All configuration is valid!")
        return 0

    print("\n💥 Configuration validation failed!")
    return 1


if __name__ == "__main__":
    sys.exit(main())
