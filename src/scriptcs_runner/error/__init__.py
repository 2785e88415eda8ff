"""
Error handling utilities and exceptions.
"""
from .exceptions import (
    ErrorContext,
    ScriptRunnerError,
    ConfigurationError,
    ExecutionError,
    LaunchError,
    ScriptMaterializationError,
)

__all__ = [
    'ErrorContext',
    'ScriptRunnerError',
    'ConfigurationError',
    'ExecutionError',
    'LaunchError',
    'ScriptMaterializationError',
]
