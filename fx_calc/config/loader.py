"""
Configuration loader with 3-tier parameter precedence.

Global defaults are overridden per currency pair from ``pairs.yaml`` and
then by overrides supplied with a calculation.
"""

from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from .defaults import DefaultConfig, get_default_config


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Merge override into a copy of base, section by section."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


@dataclass(frozen=True)
class ConfigLoader:
    """Resolves calculator settings from defaults, pair overrides and call overrides."""

    config_dir: Optional[Path]
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Loader reading pair overrides from config_dir (the shipped config/ by default)."""
        if config_dir is None:
            config_dir = Path(__file__).parent.parent.parent / "config"

        return cls(config_dir=Path(config_dir), defaults=get_default_config())

    @classmethod
    def defaults_only(cls, defaults: Optional[DefaultConfig] = None) -> "ConfigLoader":
        """Loader with no pair override file; only defaults and call overrides apply."""
        return cls(config_dir=None, defaults=defaults or get_default_config())

    def load_pair_config(self, pair_name: str) -> dict[str, Any]:
        """Overrides for one currency pair, e.g. "XAU/USD"; empty when none exist."""
        if self.config_dir is None:
            return {}

        pairs_file = self.config_dir / "pairs.yaml"
        if not pairs_file.exists():
            return {}

        with open(pairs_file) as f:
            pairs_config = yaml.safe_load(f) or {}

        return pairs_config.get("pairs", {}).get(pair_name, {})  # type: ignore[no-any-return]

    def merge_config(
        self,
        pair_name: Optional[str] = None,
        call_overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Per-call overrides (highest priority)
        2. Currency-pair overrides
        3. Global defaults (lowest priority)
        """
        config = asdict(self.defaults)

        if pair_name:
            config = deep_merge(config, self.load_pair_config(pair_name))

        if call_overrides:
            config = deep_merge(config, call_overrides)

        return config
