"""
Execution components: run context, process launching and temporary scripts.
"""
from .context import BuildLog, RunContext
from .launcher import Launcher, SubprocessLauncher, display_launch_error
from .temp_script import TEMP_SCRIPT_PREFIX, TEMP_SCRIPT_SUFFIX, materialize_script

__all__ = [
    "BuildLog",
    "RunContext",
    "Launcher",
    "SubprocessLauncher",
    "display_launch_error",
    "TEMP_SCRIPT_PREFIX",
    "TEMP_SCRIPT_SUFFIX",
    "materialize_script",
]
