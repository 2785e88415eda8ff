"""
ScriptCS Runner: a build step that runs scriptcs scripts, from a file or inline.
"""
__version__ = "1.0.0"

from .builder import DISPLAY_NAME, ScriptCSBuilder, execute
from .config import GlobalSettings, SettingsStore, StepConfig
from .execution import BuildLog, Launcher, RunContext, SubprocessLauncher

__all__ = [
    "DISPLAY_NAME",
    "ScriptCSBuilder",
    "execute",
    "GlobalSettings",
    "SettingsStore",
    "StepConfig",
    "BuildLog",
    "Launcher",
    "RunContext",
    "SubprocessLauncher",
    "__version__",
]
