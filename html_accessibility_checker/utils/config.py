# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Configuration management utilities for the html_accessibility_checker package.

This module provides a centralized configuration system that manages default
options, user-provided settings, and environment variables across all modules.
"""

import json
import os
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict

import yaml

from html_accessibility_checker.utils.logging_helper import (
    ConfigurationError,
    setup_logger,
)

# Configure module-level logger
logger = setup_logger(__name__)


class ConfigManager:
    """
    Centralized configuration manager for the accessibility checker.

    Resolution order, lowest precedence first:
    - Default options
    - Stored user configuration (e.g. from a config file)
    - Environment variables
    - Runtime options passed by the caller
    """

    def __init__(
        self, defaults: Dict[str, Any] = None, env_prefix: str = "HTML_A11Y_"
    ):
        """
        Initialize a configuration manager.

        Args:
            defaults: Dictionary of default options
            env_prefix: Prefix for environment variables
        """
        self.defaults = defaults or {}
        self.env_prefix = env_prefix
        self.user_config = {}

    def get_config(
        self, user_options: Dict[str, Any] = None, section: str = None
    ) -> Dict[str, Any]:
        """
        Get the resolved configuration with defaults, environment vars, and user options.

        Args:
            user_options: User-provided option overrides
            section: Optional section name to retrieve ('audit', 'remediate', 'server')

        Returns:
            Dict with the resolved configuration options
        """
        if section and section in self.defaults:
            config = deepcopy(self.defaults[section])
        else:
            config = deepcopy(self.defaults)

        if section and section in self.user_config:
            config.update(self.user_config[section])
        elif not section:
            config.update(self.user_config)

        self._apply_env_vars(config, section)

        # Runtime options have the highest precedence
        if user_options:
            config.update(user_options)

        return config

    def set_user_config(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Set persistent user configuration.

        Args:
            config: Dictionary of configuration options
            section: Optional section name
        """
        if section:
            if section not in self.user_config:
                self.user_config[section] = {}
            self.user_config[section].update(config)
        else:
            self.user_config.update(config)

    def load_user_config(self, file_config: Dict[str, Any]) -> None:
        """
        Store a whole configuration file's content as user configuration.

        Top-level keys naming a known section are stored under that section;
        any other key is stored unscoped.

        Args:
            file_config: Parsed configuration file content
        """
        for key, value in file_config.items():
            if key in self.defaults and isinstance(value, dict):
                self.set_user_config(value, section=key)
            else:
                self.set_user_config({key: value})

    def _apply_env_vars(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Apply relevant environment variables to the configuration.

        Args:
            config: Configuration dictionary to update
            section: Optional section name to scope environment variables
        """
        prefix = self.env_prefix
        if section:
            prefix = f"{prefix}{section.upper()}_"

        for env_var, value in os.environ.items():
            if not env_var.startswith(prefix):
                continue

            option_name = env_var[len(prefix) :].lower()

            # Convert to the type of the existing value where there is one
            if option_name in config and config[option_name] is not None:
                existing_type = type(config[option_name])
                try:
                    if existing_type == bool:
                        value = value.lower() in ("true", "1", "yes", "y")
                    elif existing_type == int:
                        value = int(value)
                    elif existing_type == float:
                        value = float(value)
                    elif existing_type == list:
                        value = [item.strip() for item in value.split(",")]
                except (ValueError, TypeError):
                    logger.warning(
                        f"Could not convert environment variable {env_var} to {existing_type.__name__}"
                    )

            config[option_name] = value
            logger.debug(f"Applied environment variable {env_var}")


def validate_options(options: Dict[str, Any], option_types: Dict[str, Any]) -> None:
    """
    Check the types of runtime options.

    Options without an entry in ``option_types`` are passed through unchecked.

    Args:
        options: Runtime options given by the caller
        option_types: Option name to a type or tuple of accepted types

    Raises:
        ConfigurationError: If an option has the wrong type
    """
    for name, value in options.items():
        expected = option_types.get(name)
        if expected is None or isinstance(value, expected):
            continue

        accepted = expected if isinstance(expected, tuple) else (expected,)
        raise ConfigurationError(
            f"Option '{name}' has incorrect type. Expected "
            f"{' or '.join(t.__name__ for t in accepted)}, got {type(value).__name__}"
        )


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML (.yaml, .yml) and JSON (.json) formats.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration options

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. "
            "Supported formats: YAML (.yaml, .yml), JSON (.json)"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                return json.load(f)
            return yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration file: {e}") from e


def save_config(config: Dict[str, Any], file_path: str, file_format: str = "yaml") -> None:
    """
    Save configuration to a file.

    Args:
        config: Configuration dictionary
        file_path: Path to save the configuration file
        file_format: File format ('yaml' or 'json')

    Raises:
        ConfigurationError: If file cannot be written
    """
    if file_format.lower() not in ("yaml", "json"):
        raise ConfigurationError(f"Unsupported format: {file_format}")

    try:
        with open(file_path, "w", encoding="utf-8") as f:
            if file_format.lower() == "yaml":
                yaml.safe_dump(config, f, default_flow_style=False)
            else:
                json.dump(config, f, indent=2)
        logger.info(f"Configuration saved to {file_path}")
    except OSError as e:
        raise ConfigurationError(f"Error saving configuration: {e}") from e


DEFAULT_CONFIG = {
    # Accessibility auditing defaults
    "audit": {
        "use_generative_fixes": False,
        "report_format": "json",  # json, text
    },
    # Fix suggestion defaults
    "remediate": {
        "model_id": "us.amazon.nova-lite-v1:0",
        "profile": None,
        "max_tokens": 500,
        "max_concurrency": 4,
        "fix_timeout": 30.0,  # seconds for the whole fix resolution phase
        "fallback_fix": "No suggested fix available.",
    },
    # Upload endpoint defaults
    "server": {
        "host": "0.0.0.0",
        "port": 8000,
        "upload_field": "htmlFile",
    },
}

# Global instance for shared configuration
config_manager = ConfigManager(deepcopy(DEFAULT_CONFIG))
