"""Configuration loader with 3-tier parameter precedence."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from ..errors import ConfigurationError
from ..logging.config import configure_logging
from .defaults import DefaultConfig, get_default_config
from .validation import ConfigValidator, ValidationError

CONFIG_FILENAME = "typed_operation.yaml"


@dataclass(frozen=True)
class ConfigLoader:
    """Manages configuration loading with 3-tier precedence."""

    config_dir: Path
    defaults: DefaultConfig

    @classmethod
    def create(cls, config_dir: Optional[Path] = None) -> "ConfigLoader":
        """Create a ConfigLoader reading from ``config_dir`` (cwd by default)."""
        if config_dir is None:
            config_dir = Path.cwd()

        return cls(
            config_dir=Path(config_dir),
            defaults=get_default_config(),
        )

    @property
    def config_file(self) -> Path:
        return self.config_dir / CONFIG_FILENAME

    def load_profile(self, profile: str) -> dict[str, Any]:
        """
        Load one named profile from the YAML file, {} when absent.

        Raises:
            ConfigurationError: If the document, its ``profiles`` section or
                the profile itself is not a mapping
        """
        if not self.config_file.exists():
            return {}

        with open(self.config_file) as f:
            document = yaml.safe_load(f) or {}

        document = self._require_mapping(document, "document")
        profiles = self._require_mapping(document.get("profiles") or {}, "profiles")
        return self._require_mapping(profiles.get(profile) or {}, f"profiles.{profile}")

    def _require_mapping(self, value: Any, field: str) -> dict[str, Any]:
        if isinstance(value, dict):
            return value
        raise ConfigurationError(
            f"Invalid configuration file {self.config_file}: {field}: Must be a mapping",
            errors=[ValidationError(field=field, message="Must be a mapping", value=value)],
            context={"config_file": str(self.config_file)},
        )

    def merge_config(
        self,
        profile: str = "default",
        overrides: Optional[dict[str, Any]] = None
    ) -> dict[str, Any]:
        """
        Merge configuration with 3-tier precedence.

        Priority order:
        1. Explicit overrides (highest priority)
        2. Named profile from typed_operation.yaml
        3. Dataclass defaults (lowest priority)
        """
        config = self._dataclass_to_dict(self.defaults)
        config = self._deep_merge(config, self.load_profile(profile))

        if overrides:
            config = self._deep_merge(config, overrides)

        return config

    def _dataclass_to_dict(self, obj: Any) -> dict[str, Any]:
        """Convert nested dataclasses to dictionary."""
        if hasattr(obj, '__dataclass_fields__'):
            return {
                name: self._dataclass_to_dict(getattr(obj, name))
                for name in obj.__dataclass_fields__
            }
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


def setup(
    profile: str = "default",
    config_dir: Optional[Path] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> dict[str, Any]:
    """
    Load, validate and apply configuration.

    Args:
        profile: Profile name under ``profiles:`` in typed_operation.yaml
        config_dir: Directory holding typed_operation.yaml
        overrides: Values taking precedence over file and defaults

    Returns:
        The merged configuration

    Raises:
        ConfigurationError: If any value fails validation
    """
    config = ConfigLoader.create(config_dir).merge_config(profile, overrides)

    errors = ConfigValidator.validate_config(config)
    if errors:
        raise ConfigurationError(
            "Invalid configuration: " + "; ".join(f"{e.field}: {e.message}" for e in errors),
            errors=errors,
            context={"profile": profile},
        )

    configure_logging(**config["logging"])
    return config
