"""
Configuration components for the ScriptCS runner.
"""
from .configuration import (
    EXECUTABLE_KEY,
    GlobalSettings,
    StepConfig,
    find_default_config,
    load_config_file,
    merge_configs,
)
from .store import SettingsStore
from .validation import FormValidation, ValidationKind, check_name

__all__ = [
    "EXECUTABLE_KEY",
    "GlobalSettings",
    "StepConfig",
    "find_default_config",
    "load_config_file",
    "merge_configs",
    "SettingsStore",
    "FormValidation",
    "ValidationKind",
    "check_name",
]
