"""
Per-build execution context: working directory, environment and build log.
"""
import os
import sys
import traceback
from pathlib import Path
from typing import Dict, Optional, TextIO, Union


class BuildLog:
    """
    Append-only, line-oriented sink for the output a job user sees.

    Child process output is written through unchanged; runner messages
    are written one per line.
    """

    FATAL_PREFIX = "FATAL: "

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def println(self, message: str = "") -> None:
        self.stream.write(f"{message}\n")
        self.stream.flush()

    def write(self, text: str) -> None:
        """Write raw text, such as a line of child output."""
        self.stream.write(text)
        self.stream.flush()

    def fatal_error(self, message: str, exc: Optional[BaseException] = None) -> None:
        """
        Write a fatal entry, followed by the stack trace of ``exc``.

        Args:
            message: Short description of what failed
            exc: Exception whose traceback is appended, if any
        """
        self.println(f"{self.FATAL_PREFIX}{message}")
        if exc is not None:
            self.write("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)))


class RunContext:
    """
    What the host supplies to one execution of the step.

    Without an explicit ``env`` the build inherits the current process
    environment; a mapping that is passed in is used as given.
    """

    def __init__(
        self,
        module_root: Union[str, Path],
        env: Optional[Dict[str, str]] = None,
        log: Optional[BuildLog] = None
    ):
        self.module_root = Path(module_root)
        self.env = dict(env) if env is not None else os.environ.copy()
        self.log = log or BuildLog()

    def environment(self) -> Dict[str, str]:
        """Environment variables of the build, as a fresh mapping."""
        return dict(self.env)

    @classmethod
    def from_process(
        cls,
        module_root: Union[str, Path],
        overrides: Optional[Dict[str, str]] = None,
        stream: Optional[TextIO] = None
    ) -> 'RunContext':
        """
        Context inheriting the current process environment.

        Args:
            module_root: Working directory of the build
            overrides: Job variables layered over the inherited environment
            stream: Where the build log is written, stdout by default

        Returns:
            RunContext for a build run from this process
        """
        env = os.environ.copy()
        if overrides:
            env.update(overrides)
        return cls(module_root, env, BuildLog(stream))
