"""Tests for the global settings store."""
import json

import pytest
import yaml

from scriptcs_runner.config import GlobalSettings, SettingsStore, find_default_config
from scriptcs_runner.error.exceptions import ConfigurationError


@pytest.fixture
def settings_file(tmp_path):
    return tmp_path / "settings" / "scriptcs_runner.yaml"


def test_missing_file_yields_defaults(settings_file):
    store = SettingsStore(settings_file)

    assert store.load().executable_path is None
    assert not settings_file.exists()


def test_save_persists_under_form_key(settings_file):
    store = SettingsStore(settings_file)

    store.save(GlobalSettings(executable_path="/usr/local/bin/scriptcs"))

    assert yaml.safe_load(settings_file.read_text()) == {"scriptcsexe": "/usr/local/bin/scriptcs"}
    assert SettingsStore(settings_file).load().executable_path == "/usr/local/bin/scriptcs"


def test_save_as_json(tmp_path):
    path = tmp_path / "scriptcs_runner.json"
    SettingsStore(path).save(GlobalSettings(scriptcsexe="C:\\tools\\scriptcs.exe"))

    assert json.loads(path.read_text()) == {"scriptcsexe": "C:\\tools\\scriptcs.exe"}
    assert SettingsStore(path).get().executable_path == "C:\\tools\\scriptcs.exe"


@pytest.mark.parametrize("name", ["runner.conf", "runner.YAML", "runner", "RUNNER.JSON"])
def test_saved_settings_load_back_whatever_the_suffix(tmp_path, name):
    path = tmp_path / name
    SettingsStore(path).save(GlobalSettings(executable_path="/opt/scriptcs/scriptcs"))

    assert SettingsStore(path).load().executable_path == "/opt/scriptcs/scriptcs"


def test_get_loads_once_and_reload_refreshes(settings_file):
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("scriptcsexe: /opt/first/scriptcs\n")
    store = SettingsStore(settings_file)

    assert store.get().executable_path == "/opt/first/scriptcs"
    settings_file.write_text("scriptcsexe: /opt/second/scriptcs\n")
    assert store.get().executable_path == "/opt/first/scriptcs"
    assert store.reload().executable_path == "/opt/second/scriptcs"
    assert store.get().executable_path == "/opt/second/scriptcs"


def test_configure_saves_form_value(settings_file):
    store = SettingsStore(settings_file)

    assert store.configure({"scriptcsexe": "/usr/bin/scriptcs", "unrelated": "ignored"}) is True

    assert store.get().executable_path == "/usr/bin/scriptcs"
    assert yaml.safe_load(settings_file.read_text()) == {"scriptcsexe": "/usr/bin/scriptcs"}


def test_configure_requires_executable_field(settings_file):
    with pytest.raises(ConfigurationError):
        SettingsStore(settings_file).configure({})


def test_environment_overrides_file(settings_file, monkeypatch):
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("scriptcsexe: /opt/file/scriptcs\n")
    monkeypatch.setenv("SCRIPTCS_EXE", "/opt/env/scriptcs")

    assert SettingsStore(settings_file).load().executable_path == "/opt/env/scriptcs"


def test_malformed_file_raises_configuration_error(settings_file):
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("scriptcsexe: [unterminated\n")

    with pytest.raises(ConfigurationError):
        SettingsStore(settings_file).load()


def test_non_mapping_file_raises_configuration_error(settings_file):
    settings_file.parent.mkdir(parents=True)
    settings_file.write_text("- just\n- a list\n")

    with pytest.raises(ConfigurationError):
        SettingsStore(settings_file).load()


def test_default_path_from_environment(tmp_path, monkeypatch):
    path = tmp_path / "custom.yaml"
    monkeypatch.setenv("SCRIPTCS_RUNNER_CONFIG", str(path))

    assert find_default_config() == path
    SettingsStore().save(GlobalSettings(executable_path="/opt/scriptcs/scriptcs"))
    assert path.exists()


def test_default_path_discovered_in_working_directory(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    (tmp_path / "scriptcs_runner.yml").write_text("scriptcsexe: /opt/cwd/scriptcs\n")

    store = SettingsStore()

    assert store.get().executable_path == "/opt/cwd/scriptcs"
    assert store.path == tmp_path / "scriptcs_runner.yml"
