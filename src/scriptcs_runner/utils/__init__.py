"""
Utility functions for the ScriptCS runner.
"""
from .subprocess_utils import ArgumentListBuilder, secure_join_args, is_command_available
from .logging import configure_logging, get_logger

__all__ = [
    "ArgumentListBuilder",
    "secure_join_args",
    "is_command_available",
    "configure_logging",
    "get_logger",
]
