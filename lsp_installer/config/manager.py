"""Configuration manager."""

import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import ValidationError

from .defaults import DEFAULT_ASSETS, DEFAULT_SERVERS
from .models import InstallerConfig, expand_path

DEFAULT_CONFIG_PATH = "~/.config/lsp-installer/config.yaml"


class ConfigManager:
    """Loads the optional YAML file and overlays it on the built-in registries."""

    def __init__(self, config_path: Optional[Union[str, Path]] = None):
        self.explicit = config_path is not None
        if config_path is None:
            config_path = os.getenv("LSP_INSTALLER_CONFIG", DEFAULT_CONFIG_PATH)
        self.config_path = expand_path(config_path)
        self.config: Optional[InstallerConfig] = None

    def load_config(self, **overrides: Any) -> InstallerConfig:
        """Load and validate configuration.

        ``overrides`` are applied to the ``settings`` section; ``None`` values
        are ignored so CLI options can be passed straight through.
        """
        config_data = {}
        if self.config_path.exists():
            config_data = self._read_file()
        elif self.explicit:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")

        settings = dict(config_data.get("settings") or {})
        settings.update({k: v for k, v in overrides.items() if v is not None})

        try:
            self.config = InstallerConfig(
                settings=settings,
                servers={**DEFAULT_SERVERS, **(config_data.get("servers") or {})},
                assets={**DEFAULT_ASSETS, **(config_data.get("assets") or {})},
            )
        except ValidationError as e:
            raise ValueError(f"Configuration validation failed: {e}")
        return self.config

    def _read_file(self) -> dict:
        try:
            with open(self.config_path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML syntax: {e}")

        if not isinstance(config_data, dict):
            raise ValueError(
                f"Configuration root must be a mapping: {self.config_path}"
            )

        for section in ("settings", "servers", "assets"):
            value = config_data.get(section)
            if value is not None and not isinstance(value, dict):
                raise ValueError(f"Configuration section '{section}' must be a mapping")

        # Expand environment variables
        return self._expand_env_vars(config_data)

    def _expand_env_vars(self, data: Any) -> Any:
        """Recursively expand environment variables in configuration."""
        if isinstance(data, dict):
            return {k: self._expand_env_vars(v) for k, v in data.items()}
        elif isinstance(data, list):
            return [self._expand_env_vars(item) for item in data]
        elif isinstance(data, str) and data.startswith("${") and data.endswith("}"):
            env_var = data[2:-1]
            return os.getenv(env_var, data)
        else:
            return data
