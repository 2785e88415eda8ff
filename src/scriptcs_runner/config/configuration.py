"""
Configuration models for the ScriptCS runner build step.
"""
import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from ..error.exceptions import ConfigurationError, ErrorContext

logger = logging.getLogger(__name__)

# Persisted key of the global executable path, as bound by the admin form
EXECUTABLE_KEY = "scriptcsexe"

EXECUTABLE_ENV_VAR = "SCRIPTCS_EXE"
CONFIG_PATH_ENV_VAR = "SCRIPTCS_RUNNER_CONFIG"


class StepConfig(BaseModel):
    """Per-step configuration set when the job is configured."""

    script_file: str = Field(default="", alias="scriptfile", description="Path to an existing script")
    arguments: str = Field(default="", description="Trailing argument string passed as one element")
    custom_script: str = Field(default="", alias="customScript", description="Inline script body")

    @field_validator("script_file", "arguments", "custom_script", mode="before")
    @classmethod
    def default_to_empty(cls, value: Any) -> str:
        """Absent fields have empty string semantics."""
        if value is None:
            return ""
        return value

    @property
    def uses_custom_script(self) -> bool:
        """An inline script takes precedence over the script file."""
        return bool(self.custom_script.strip())

    @property
    def has_arguments(self) -> bool:
        return bool(self.arguments.strip())

    class Config:
        """Pydantic configuration."""
        frozen = True
        populate_by_name = True


class GlobalSettings(BaseModel):
    """Installation-wide settings shared by every step of this type."""

    executable_path: Optional[str] = Field(
        default=None,
        alias=EXECUTABLE_KEY,
        description="Filesystem location of the scriptcs interpreter"
    )

    @field_validator("executable_path", mode="before")
    @classmethod
    def strip_executable_path(cls, value: Any) -> Optional[str]:
        if isinstance(value, str):
            return value.strip() or None
        return value

    def to_persisted(self) -> Dict[str, Any]:
        """Dictionary in the on-disk layout."""
        return self.model_dump(by_alias=True)

    class Config:
        """Pydantic configuration."""
        populate_by_name = True
        validate_assignment = True


def default_config_search_paths() -> List[Path]:
    """Standard locations of the global settings file, in lookup order."""
    return [
        Path.cwd() / "scriptcs_runner.yaml",
        Path.cwd() / "scriptcs_runner.yml",
        Path.cwd() / "scriptcs_runner.json",
        Path.home() / ".scriptcs_runner" / "config.yaml",
    ]


def find_default_config() -> Optional[Path]:
    """
    Locate the global settings file.

    The ``SCRIPTCS_RUNNER_CONFIG`` environment variable wins over the
    standard search paths, even when the file does not exist yet.

    Returns:
        Path of the settings file, or None if none was found
    """
    explicit = os.environ.get(CONFIG_PATH_ENV_VAR)
    if explicit:
        return Path(explicit).expanduser()

    for path in default_config_search_paths():
        if path.exists():
            return path

    logger.debug("No settings file found in standard locations")
    return None


def is_json_path(path: Path) -> bool:
    """Settings files are JSON when named ``*.json``, YAML otherwise."""
    return path.suffix.lower() == ".json"


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file (YAML or JSON).

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration

    Raises:
        ConfigurationError: If the file is not found or cannot be parsed
    """
    path = Path(file_path).expanduser()
    context = ErrorContext(component="configuration", operation="load_config_file", path=str(path))

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}", context)

    try:
        content = path.read_text(encoding='utf-8')

        if is_json_path(path):
            loaded_config = json.loads(content) or {}
        else:
            loaded_config = yaml.safe_load(content) or {}

    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML format in {file_path}: {str(e)}", context) from e
    except json.JSONDecodeError as e:
        raise ConfigurationError(f"Invalid JSON format in {file_path}: {str(e)}", context) from e
    except OSError as e:
        raise ConfigurationError(f"Error reading config file {file_path}: {str(e)}", context) from e

    if not isinstance(loaded_config, dict):
        raise ConfigurationError(f"Configuration in {file_path} must be a mapping", context)

    logger.debug(f"Loaded configuration from {file_path}")
    return loaded_config


def write_config_file(file_path: Path, config: Dict[str, Any]) -> None:
    """
    Write configuration to a YAML file, or JSON when the suffix says so.

    Raises:
        ConfigurationError: If the file cannot be written
    """
    path = Path(file_path).expanduser()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            if is_json_path(path):
                json.dump(config, f, indent=2)
            else:
                yaml.safe_dump(config, f, default_flow_style=False)
    except OSError as e:
        raise ConfigurationError(
            f"Error writing config file {file_path}: {str(e)}",
            ErrorContext(component="configuration", operation="write_config_file", path=str(path))
        ) from e
    logger.debug(f"Wrote configuration to {path}")


def merge_configs(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Merge two configuration dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if isinstance(value, dict) and key in result and isinstance(result[key], dict):
            result[key] = merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def load_configuration_from_env() -> Dict[str, Any]:
    """Settings supplied through environment variables."""
    config = {}
    executable = os.environ.get(EXECUTABLE_ENV_VAR)
    if executable:
        config[EXECUTABLE_KEY] = executable
    return config
