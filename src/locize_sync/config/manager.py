"""Configuration manager for locize-sync.

This module provides functionality for loading, validating, and saving
YAML configuration files with Pydantic model validation.
"""

import logging
import os
import tempfile
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from ..utils.core.exceptions import ConfigurationError
from .schema import LocizeConfig, LocizeSyncConfig


logger = logging.getLogger(__name__)

API_KEY_ENV_VAR = "LOCIZE_API_KEY"


class ConfigManager:
    """
    Configuration manager for YAML config files with Pydantic validation.

    Provides methods for loading, saving, and validating configuration files
    while keeping writes atomic.
    """

    @staticmethod
    def load_config(
        config_path: Path, environ: Mapping[str, str] | None = None
    ) -> LocizeSyncConfig:
        """
        Load and validate configuration from a YAML file.

        Args:
            config_path: Path to the YAML configuration file
            environ: Environment used for overrides (defaults to os.environ)

        Returns:
            LocizeSyncConfig: Validated configuration object

        Raises:
            FileNotFoundError: If the config file doesn't exist
            ConfigurationError: If the YAML is invalid or fails validation
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                raw_config_data: object = yaml.safe_load(f)  # pyright: ignore[reportAny]
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML syntax in {config_path}: {e}") from e

        if raw_config_data is None:
            config_data: dict[str, object] = {}
        elif isinstance(raw_config_data, dict):
            config_data = raw_config_data  # pyright: ignore[reportUnknownVariableType]
        else:
            raise ConfigurationError(
                f"Configuration file must contain a YAML dictionary, got {type(raw_config_data).__name__}"
            )

        parsed_data = ConfigManager._apply_environment(
            config_data, os.environ if environ is None else environ
        )

        try:
            config = LocizeSyncConfig.model_validate(parsed_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration in {config_path}: {e}"
            ) from e

        logger.debug(
            f"Loaded configuration for project {config.locize.project_id} "
            + f"(version={config.locize.version}, namespace={config.locize.namespace})"
        )
        return config

    @staticmethod
    def _apply_environment(
        config_data: dict[str, object], environ: Mapping[str, str]
    ) -> dict[str, object]:
        """
        Apply environment overrides to raw configuration data.

        Args:
            config_data: Raw configuration data from YAML
            environ: Environment variables

        Returns:
            dict[str, object]: Configuration data with overrides applied
        """
        parsed_data = config_data.copy()

        api_key = environ.get(API_KEY_ENV_VAR)
        if api_key:
            locize_section = parsed_data.get("locize")
            match locize_section:
                case dict():
                    parsed_data["locize"] = {**locize_section, "api_key": api_key}  # pyright: ignore[reportUnknownArgumentType]
                case None:
                    parsed_data["locize"] = {"api_key": api_key}
                case _:
                    # Leave it for validation to report
                    pass

        return parsed_data

    @staticmethod
    def save_config(config: LocizeSyncConfig, config_path: Path) -> None:
        """
        Save configuration to a YAML file with atomic operation.

        The API key is never written out; it belongs in the environment.

        Args:
            config: Configuration object to save
            config_path: Path where to save the configuration

        Raises:
            OSError: If file operations fail
        """
        config_dict = config.model_dump(exclude={"locize": {"api_key"}})

        content_to_write = yaml.dump(
            config_dict,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
            indent=2,
        )

        temp_file = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="w",
                encoding="utf-8",
                dir=config_path.parent,
                prefix=f".{config_path.name}.",
                suffix=".tmp",
                delete=False,
            ) as temp_file:
                _ = temp_file.write(content_to_write)
                temp_file.flush()
                temp_path = Path(temp_file.name)

            _ = temp_path.replace(config_path)

        except Exception as e:
            if temp_file and Path(temp_file.name).exists():
                Path(temp_file.name).unlink(missing_ok=True)
            raise OSError(f"Failed to save configuration to {config_path}: {e}") from e

    @staticmethod
    def create_starter_config(project_id: str = "your-project-id") -> LocizeSyncConfig:
        """
        Build a configuration with defaults for every optional setting.

        Args:
            project_id: locize project id to put in the file

        Returns:
            LocizeSyncConfig: Starter configuration
        """
        return LocizeSyncConfig(locize=LocizeConfig(project_id=project_id))
