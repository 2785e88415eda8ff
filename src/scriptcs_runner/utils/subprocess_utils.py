"""
Argument vector helpers for launching the interpreter without a shell.
"""
import logging
import platform
import shlex
import shutil
import subprocess
from typing import Iterator, List, Optional

logger = logging.getLogger(__name__)


def secure_join_args(args: List[str]) -> str:
    """
    Join command arguments into a display string, quoted for the platform.

    Args:
        args: List of command arguments

    Returns:
        Joined command as string
    """
    if platform.system() == 'Windows':
        # Use list2cmdline for Windows
        return subprocess.list2cmdline(args)
    else:
        # Use shlex.quote for Unix-like systems
        return ' '.join(shlex.quote(arg) for arg in args)


class ArgumentListBuilder:
    """
    Accumulates an argument vector one element at a time.

    Elements are never split or shell-interpreted: a string added once
    stays exactly one element of the launched command.
    """

    def __init__(self, *args: str):
        self._args: List[str] = []
        for arg in args:
            self.add(arg)

    def add(self, arg: str) -> 'ArgumentListBuilder':
        if arg is None:
            raise ValueError("Argument must not be None")
        self._args.append(str(arg))
        return self

    def to_list(self) -> List[str]:
        return list(self._args)

    def __iter__(self) -> Iterator[str]:
        return iter(self._args)

    def __len__(self) -> int:
        return len(self._args)

    def __str__(self) -> str:
        return secure_join_args(self._args)


def is_command_available(command: Optional[str]) -> bool:
    """
    Check if a command is available in the system.

    Args:
        command: Command name or path to check

    Returns:
        True if command is available, False otherwise
    """
    if not command:
        return False
    return shutil.which(command) is not None
