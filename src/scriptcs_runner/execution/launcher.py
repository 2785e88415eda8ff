"""
Process launching for the build step.
"""
import abc
import logging
import subprocess
from pathlib import Path
from typing import Dict, List, Optional, Union

from ..error.exceptions import ErrorContext, LaunchError
from .context import BuildLog

logger = logging.getLogger(__name__)


class Launcher(abc.ABC):
    """Starts the interpreter and waits for it to finish."""

    @abc.abstractmethod
    def launch(
        self,
        argv: List[str],
        env: Dict[str, str],
        cwd: Optional[Union[str, Path]],
        log: BuildLog
    ) -> int:
        """
        Run a process to completion.

        Args:
            argv: Argument vector, executable first
            env: Complete environment of the child
            cwd: Working directory of the child
            log: Sink receiving the child's merged stdout and stderr

        Returns:
            Exit code of the process

        Raises:
            LaunchError: If the process could not be created
        """
        pass


class SubprocessLauncher(Launcher):
    """Launcher backed by ``subprocess.Popen``, never through a shell."""

    def launch(
        self,
        argv: List[str],
        env: Dict[str, str],
        cwd: Optional[Union[str, Path]],
        log: BuildLog
    ) -> int:
        logger.debug(f"Launching {argv[0] if argv else '<empty>'} in {cwd}")
        try:
            process = subprocess.Popen(
                argv,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                env=env,
                cwd=str(cwd) if cwd is not None else None,
                universal_newlines=True,
                errors="replace",
                shell=False
            )
        except (OSError, subprocess.SubprocessError, ValueError) as e:
            raise LaunchError(
                f"Failed to start {argv[0] if argv else '<empty command>'}: {e}",
                ErrorContext(component="SubprocessLauncher", operation="launch"),
                details={"argv": list(argv), "cwd": str(cwd)}
            ) from e

        with process:
            for line in process.stdout:
                log.write(line)
            exit_code = process.wait()

        logger.debug(f"Process exited with code {exit_code}")
        return exit_code


def display_launch_error(error: LaunchError, log: BuildLog) -> None:
    """
    Write a hint about a common cause of a launch failure to the build log.

    Args:
        error: The launch failure
        log: Build log of the failed execution
    """
    cause = error.__cause__
    argv = error.details.get("argv") or []
    target = getattr(cause, "filename", None) or (argv[0] if argv else None)

    if isinstance(cause, FileNotFoundError):
        log.println(
            f"{target}: no such file or directory. "
            "Check the ScriptCS executable path in the global configuration "
            "and the working directory of the build."
        )
    elif isinstance(cause, PermissionError):
        log.println(f"{target}: permission denied. Make sure the ScriptCS executable is runnable.")
