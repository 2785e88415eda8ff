"""
Persistent store for the installation-wide runner settings.
"""
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from ..error.exceptions import ConfigurationError, ErrorContext
from .configuration import (
    EXECUTABLE_KEY,
    GlobalSettings,
    default_config_search_paths,
    find_default_config,
    load_config_file,
    load_configuration_from_env,
    merge_configs,
    write_config_file,
)

logger = logging.getLogger(__name__)


class SettingsStore:
    """
    Holds the GlobalSettings of one installation.

    Settings are loaded once, on first access, and only change through
    ``save``, ``configure`` or an explicit ``reload``. Reads are not
    locked; a run sees whatever value is current when it starts.
    """

    def __init__(self, path: Optional[Union[str, Path]] = None):
        """
        Args:
            path: Settings file. Defaults to the first standard location
                that exists, or the user-level file when none does.
        """
        self.path = Path(path).expanduser() if path else None
        self._settings: Optional[GlobalSettings] = None

    def _resolve_path(self) -> Path:
        if self.path is None:
            self.path = find_default_config() or default_config_search_paths()[-1]
        return self.path

    def load(self) -> GlobalSettings:
        """
        Load settings from disk, with environment overrides applied.

        Returns:
            The loaded settings, which also become the current value

        Raises:
            ConfigurationError: If the settings file is malformed
        """
        path = self._resolve_path()
        config: Dict[str, Any] = {}

        if path.exists():
            logger.info(f"Loading runner settings from {path}")
            config = load_config_file(str(path))
        else:
            logger.info(f"No settings file at {path}, using defaults")

        config = merge_configs(config, load_configuration_from_env())
        self._settings = self._build(config)
        return self._settings

    def get(self) -> GlobalSettings:
        """Current settings, loading them on first access."""
        if self._settings is None:
            return self.load()
        return self._settings

    def reload(self) -> GlobalSettings:
        """Refresh the current settings from disk."""
        logger.debug("Reloading runner settings")
        return self.load()

    def save(self, settings: GlobalSettings) -> None:
        """
        Persist settings and make them current.

        Args:
            settings: Settings to store
        """
        path = self._resolve_path()
        write_config_file(path, settings.to_persisted())
        self._settings = settings
        logger.info(f"Saved runner settings to {path}")

    def configure(self, form_data: Dict[str, Any]) -> bool:
        """
        Apply a submitted global configuration form.

        Args:
            form_data: Submitted form fields, keyed by field name

        Returns:
            True once the settings have been saved

        Raises:
            ConfigurationError: If the executable field is missing
        """
        if EXECUTABLE_KEY not in form_data:
            raise ConfigurationError(
                f"Form data has no '{EXECUTABLE_KEY}' field",
                ErrorContext(component="SettingsStore", operation="configure")
            )

        settings = self._build({EXECUTABLE_KEY: form_data[EXECUTABLE_KEY]})
        self.save(settings)
        return True

    def _build(self, config: Dict[str, Any]) -> GlobalSettings:
        try:
            return GlobalSettings(**config)
        except PydanticValidationError as e:
            raise ConfigurationError(
                f"Invalid runner settings: {str(e)}",
                ErrorContext(component="SettingsStore", operation="load", path=str(self.path))
            ) from e
