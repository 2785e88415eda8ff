"""Tests for argument vector helpers."""
import platform

import pytest

from scriptcs_runner.utils.subprocess_utils import ArgumentListBuilder, is_command_available, secure_join_args


def test_builder_keeps_elements_intact():
    args = ArgumentListBuilder("/opt/scriptcs/scriptcs").add("build.csx").add("--").add("a b c")

    assert args.to_list() == ["/opt/scriptcs/scriptcs", "build.csx", "--", "a b c"]
    assert len(args) == 4
    assert list(args) == args.to_list()


def test_to_list_returns_a_copy():
    args = ArgumentListBuilder("scriptcs")
    args.to_list().append("mutated")

    assert args.to_list() == ["scriptcs"]


def test_none_is_rejected():
    with pytest.raises(ValueError):
        ArgumentListBuilder().add(None)


@pytest.mark.skipif(platform.system() == "Windows", reason="POSIX quoting")
def test_display_form_is_shell_quoted():
    args = ArgumentListBuilder("/opt/scriptcs/scriptcs", "build.csx", "--", "-c Release")

    assert str(args) == "/opt/scriptcs/scriptcs build.csx -- '-c Release'"
    assert secure_join_args(["plain"]) == "plain"


def test_is_command_available(tmp_path):
    assert not is_command_available(None)
    assert not is_command_available("")
    assert not is_command_available(str(tmp_path / "absent"))
