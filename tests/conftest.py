"""Pytest configuration and fixtures."""
import io
import tempfile
from pathlib import Path

import pytest

from scriptcs_runner.config import GlobalSettings
from scriptcs_runner.execution import BuildLog, Launcher, RunContext

EXECUTABLE = "/opt/scriptcs/scriptcs"


class FakeLauncher(Launcher):
    """Records each launch and answers with a fixed exit code or error."""

    def __init__(self, exit_code: int = 0, error: Exception = None):
        self.exit_code = exit_code
        self.error = error
        self.calls = []
        self.script_contents = []

    def launch(self, argv, env, cwd, log):
        self.calls.append({"argv": list(argv), "env": dict(env), "cwd": cwd})
        # Snapshot inline scripts while they still exist
        for arg in argv[1:]:
            path = Path(arg)
            if path.name.startswith("ScriptCS_") and path.exists():
                self.script_contents.append(path.read_bytes())
        if self.error is not None:
            raise self.error
        log.println("child output")
        return self.exit_code

    @property
    def argv(self):
        return self.calls[-1]["argv"]


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch):
    """Keep the developer's own settings out of the tests."""
    monkeypatch.delenv("SCRIPTCS_EXE", raising=False)
    monkeypatch.delenv("SCRIPTCS_RUNNER_CONFIG", raising=False)


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    """Platform temp directory redirected to a per-test folder."""
    scratch = tmp_path / "tmp"
    scratch.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(scratch))
    return scratch


@pytest.fixture
def log_stream():
    return io.StringIO()


@pytest.fixture
def run_context(tmp_path, log_stream):
    module_root = tmp_path / "workspace"
    module_root.mkdir()
    return RunContext(module_root, {"BUILD_NUMBER": "7", "JOB_NAME": "nightly"}, BuildLog(log_stream))


@pytest.fixture
def settings():
    return GlobalSettings(executable_path=EXECUTABLE)


@pytest.fixture
def fake_launcher():
    return FakeLauncher()


@pytest.fixture
def make_launcher():
    """Factory for launchers with a chosen exit code or launch error."""
    return FakeLauncher
