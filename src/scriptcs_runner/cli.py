import os
import logging
from pathlib import Path
from typing import Dict, List, Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.prompt import Prompt
from rich.table import Table

from . import __version__
from .builder import DISPLAY_NAME, ScriptCSBuilder, execute
from .config.configuration import EXECUTABLE_KEY, GlobalSettings, StepConfig
from .config.store import SettingsStore
from .config.validation import ValidationKind, check_name
from .error.exceptions import ConfigurationError
from .execution.context import RunContext
from .utils.logging import configure_logging
from .utils.subprocess_utils import is_command_available

# Load environment variables
load_dotenv()

app = typer.Typer(
    name="scriptcs-runner",
    help=f"{DISPLAY_NAME}: run scriptcs scripts as a build step"
)
console = Console()
logger = logging.getLogger("scriptcs-runner")


def parse_env_pairs(pairs: List[str]) -> Dict[str, str]:
    """Parse KEY=VALUE pairs given on the command line."""
    env = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise typer.BadParameter(f"Expected KEY=VALUE, got '{pair}'", param_hint="--env")
        env[key] = value
    return env


@app.callback()
def main(
    log_level: str = typer.Option(
        os.getenv("LOG_LEVEL", "WARNING"), "--log-level", "-l", help="Diagnostic log level"
    ),
    log_file: Optional[Path] = typer.Option(None, "--log-file", help="Write diagnostics to a rotating file"),
    json_logs: bool = typer.Option(False, "--json-logs", help="Format the log file as JSON lines")
):
    """Configure diagnostics before any command runs."""
    configure_logging(
        log_level=log_level,
        log_file=str(log_file) if log_file else None,
        json_logging=json_logs
    )


@app.command("run")
def run(
    script_file: str = typer.Option("", "--script-file", "-s", help="Path to the script to run"),
    arguments: str = typer.Option("", "--arguments", "-a", help="Arguments passed to the script as one string"),
    custom_script: str = typer.Option("", "--custom-script", help="Inline script body"),
    custom_script_file: Optional[Path] = typer.Option(
        None, "--custom-script-file", exists=True, dir_okay=False, help="Read the inline script body from a file"
    ),
    executable: Optional[str] = typer.Option(None, "--exe", help="Override the configured executable path"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to settings file"),
    workdir: Path = typer.Option(Path("."), "--workdir", "-w", help="Module root of the build"),
    env: List[str] = typer.Option([], "--env", "-e", help="Build variables in format KEY=VALUE")
):
    """Run the build step once, exiting with 0 on success and 1 on failure."""
    if custom_script_file is not None:
        if custom_script:
            raise typer.BadParameter("Use either --custom-script or --custom-script-file", param_hint="--custom-script")
        custom_script = custom_script_file.read_text(encoding="utf-8")

    if not custom_script.strip() and not script_file:
        raise typer.BadParameter("A script file or an inline script is required", param_hint="--script-file")

    step = StepConfig(script_file=script_file, arguments=arguments, custom_script=custom_script)
    ctx = RunContext.from_process(workdir.resolve(), parse_env_pairs(env))
    logger.debug(f"Running build step in {ctx.module_root}")

    try:
        if executable:
            succeeded = execute(step, GlobalSettings(executable_path=executable), ctx)
        else:
            succeeded = ScriptCSBuilder(step, SettingsStore(config_path)).perform(ctx)
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    raise typer.Exit(code=0 if succeeded else 1)


@app.command("configure")
def configure(
    executable: Optional[str] = typer.Option(None, "--exe", help="Path to the scriptcs executable"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to settings file")
):
    """Set the executable path shared by every build step."""
    store = SettingsStore(config_path)

    try:
        if executable is None:
            executable = Prompt.ask(
                "ScriptCS executable path",
                default=store.get().executable_path or "",
                console=console
            )

        validation = check_name(executable)
        if validation.kind == ValidationKind.ERROR:
            console.print(f"[red]Error:[/red] {validation.message}")
            raise typer.Exit(code=1)
        if validation.kind == ValidationKind.WARNING:
            console.print(f"[yellow]Warning:[/yellow] {validation.message}")

        store.configure({EXECUTABLE_KEY: executable})
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    console.print(f"[green]Saved settings to {store.path}[/green]")


@app.command("show-config")
def show_config(
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to settings file")
):
    """Show the current global settings."""
    store = SettingsStore(config_path)
    try:
        settings = store.get()
    except ConfigurationError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(code=2)

    table = Table(title=f"{DISPLAY_NAME} {__version__}")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("Settings file", str(store.path))
    table.add_row(EXECUTABLE_KEY, settings.executable_path or "<not set>")
    table.add_row("Executable found", "yes" if is_command_available(settings.executable_path) else "no")
    console.print(table)


@app.command("check-name")
def check_name_command(value: str = typer.Argument("", help="Value to validate")):
    """Validate a configuration form value."""
    validation = check_name(value)
    if validation.kind == ValidationKind.OK:
        console.print("[green]OK[/green]")
        return
    if validation.kind == ValidationKind.WARNING:
        console.print(f"[yellow]Warning:[/yellow] {validation.message}")
        return
    console.print(f"[red]Error:[/red] {validation.message}")
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
