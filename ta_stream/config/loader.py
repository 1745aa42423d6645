"""Configuration loader with 3-tier parameter precedence."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ta_stream.logging.config import get_logger

from .defaults import DefaultConfig, get_default_config

logger = get_logger(__name__)

CONFIG_FILENAME = "indicators.yaml"
CONFIG_DIR_ENV = "TA_STREAM_CONFIG_DIR"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages indicator parameter loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """
        Create a ConfigLoader instance.

        The directory is, in order: the argument, the TA_STREAM_CONFIG_DIR
        environment variable, then config/ at the root of a source checkout.
        """
        if config_dir is None:
            config_dir = os.environ.get(CONFIG_DIR_ENV) or Path(__file__).parent.parent.parent / "config"

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    def load_file_overrides(self) -> dict[str, Any]:
        """Load per-indicator overrides from the YAML file, if present."""
        config_file = self.config_dir / CONFIG_FILENAME

        if not config_file.exists():
            logger.debug("No indicator overrides file", path=str(config_file))
            return {}

        with open(config_file) as f:
            file_config = yaml.safe_load(f) or {}

        overrides = file_config.get("indicators") or {}
        logger.debug("Loaded indicator overrides", path=str(config_file), indicators=sorted(overrides))
        return {str(key).lower(): value for key, value in overrides.items()}

    def merge_config(self, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Call-site overrides (highest priority)
        2. Overrides from indicators.yaml
        3. Global defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)

        config = self._deep_merge(config, self.load_file_overrides())

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def indicator_params(self, key: str, overrides: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Effective construction parameters for a single indicator key."""
        merged = self.merge_config({key: overrides} if overrides else None)
        return dict(merged.get(key) or {})

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            result = {}
            for field_name in obj.__dataclass_fields__:
                value = getattr(obj, field_name)
                if hasattr(value, '__dataclass_fields__'):
                    result[field_name] = self._dataclass_to_dict(value)
                else:
                    result[field_name] = value
            return result
        return obj  # type: ignore[no-any-return]

    def _deep_merge(self, base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result
