import os
import stat
import sys

import pytest

from ripkit.ghrunner import GithubRunner
from ripkit.runner import Behavior

FAKE_GH = """
import os, sys
marker = os.environ.get("FAKE_GH_MARKER")
if marker:
    open(marker, "w").write("ran")
print(" ".join(sys.argv[1:]))
"""


def _install_tool(bin_dir, name, body):
    path = bin_dir / name
    path.write_text(f"#!{sys.executable}\n{body}")
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def tool_path(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    _install_tool(bin_dir, "gh", FAKE_GH)
    monkeypatch.setenv("PATH", str(bin_dir) + os.pathsep + os.environ.get("PATH", ""))
    marker = tmp_path / "marker"
    monkeypatch.setenv("FAKE_GH_MARKER", str(marker))
    return marker


def test_release_passes_arguments(tool_path, tmp_path):
    gh = GithubRunner(Behavior.DO_IT, str(tmp_path), 30.0)
    gh.release("v1.0.0", ["a.tar.gz", "b.zip"])
    assert gh.out.split() == [
        "release",
        "create",
        "v1.0.0",
        "--verify-tag",
        "--draft",
        "--generate-notes",
        "a.tar.gz",
        "b.zip",
    ]
    assert tool_path.exists()


def test_release_faked_does_nothing(tool_path, tmp_path):
    gh = GithubRunner(Behavior.FAKE_IT, str(tmp_path), 30.0)
    gh.release("v1.0.0", ["a.tar.gz"])
    assert not tool_path.exists()
    assert gh.out == ""


def test_missing_gh_raises(tmp_path, monkeypatch):
    monkeypatch.setenv("PATH", str(tmp_path))
    with pytest.raises(FileNotFoundError):
        GithubRunner(Behavior.DO_IT, str(tmp_path), 30.0)