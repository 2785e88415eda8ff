"""
The ScriptCS runner build step.
"""
from contextlib import ExitStack
from typing import Optional

from .config.configuration import GlobalSettings, StepConfig
from .config.store import SettingsStore
from .error.exceptions import LaunchError, ScriptMaterializationError
from .execution.context import RunContext
from .execution.launcher import Launcher, SubprocessLauncher, display_launch_error
from .execution.temp_script import materialize_script
from .utils.logging import get_logger
from .utils.subprocess_utils import ArgumentListBuilder


DISPLAY_NAME = "ScriptCS Runner"

# Separates the script from the arguments handed to it
ARGUMENT_SEPARATOR = "--"


def execute(
    config: StepConfig,
    settings: GlobalSettings,
    ctx: RunContext,
    launcher: Optional[Launcher] = None
) -> bool:
    """
    Run one build invocation of the interpreter.

    Every expected failure (no executable configured, an inline script
    that cannot be written, a process that cannot be started, a nonzero
    exit) is reported in the build log and yields False.

    Args:
        config: Step configuration
        settings: Global settings read for this run
        ctx: Working directory, environment and build log of the build
        launcher: Process launcher, a SubprocessLauncher by default

    Returns:
        True iff the interpreter exited with code 0
    """
    launcher = launcher or SubprocessLauncher()
    log = ctx.log
    step_logger = get_logger(__name__, step=DISPLAY_NAME, module_root=str(ctx.module_root))

    if not settings.executable_path:
        log.fatal_error("No ScriptCS executable configured; set it in the global configuration")
        return False

    args = ArgumentListBuilder(settings.executable_path)

    with ExitStack() as scope:
        if config.uses_custom_script:
            log.println("Using custom script")
            try:
                script_path = scope.enter_context(materialize_script(config.custom_script))
            except ScriptMaterializationError as e:
                step_logger.error(f"Inline script could not be written: {e}")
                log.fatal_error("could not write custom script", e)
                return False
            args.add(str(script_path))
        else:
            args.add(config.script_file)

        if config.has_arguments:
            args.add(ARGUMENT_SEPARATOR)
            args.add(config.arguments)

        log.println(f"Executing command: {args}")
        env = ctx.environment()

        try:
            exit_code = launcher.launch(args.to_list(), env, ctx.module_root, log)
        except LaunchError as e:
            step_logger.error(f"Launch failed: {e}")
            display_launch_error(e, log)
            log.fatal_error("command execution failed", e)
            return False

    step_logger.debug(f"Interpreter exited with code {exit_code}")
    return exit_code == 0


class ScriptCSBuilder:
    """A configured instance of the build step."""

    def __init__(
        self,
        config: StepConfig,
        store: Optional[SettingsStore] = None,
        launcher: Optional[Launcher] = None
    ):
        self.config = config
        self.store = store or SettingsStore()
        self.launcher = launcher

    @property
    def display_name(self) -> str:
        return DISPLAY_NAME

    def perform(self, ctx: RunContext) -> bool:
        """Run the step with the settings current at invocation time."""
        return execute(self.config, self.store.get(), ctx, self.launcher)
