import logging

import pytest

from ripkit.gobuilder import LdVars
from ripkit.release import (
    TagMismatchError,
    build_and_push_docker_image,
    build_release_assets,
    find_tag,
    main,
    release,
)


class FakeGit:
    def __init__(self, latest, head, tags):
        self.latest = latest
        self.head = head
        self.tags = tags
        self.asked = []

    def latest_tag(self):
        return self.latest

    def head_commit(self):
        return self.head

    def tag_at_commit(self, commit_hash):
        self.asked.append(commit_hash)
        if commit_hash not in self.tags:
            raise RuntimeError("no tag")
        return self.tags[commit_hash]


def test_find_tag_matching():
    git = FakeGit("v1.2.3", "abc123", {"abc123": "v1.2.3"})
    assert find_tag(git) == ("v1.2.3", "abc123")
    assert git.asked == ["abc123"]


def test_find_tag_mismatch():
    git = FakeGit("v1.2.3", "abc123", {"abc123": "v1.2.2"})
    with pytest.raises(TagMismatchError) as info:
        find_tag(git)
    assert info.value.tag == "v1.2.3"
    assert info.value.commit == "abc123"
    assert info.value.tag_at_head == "v1.2.2"
    assert str(info.value) == "tag mismatch"


def test_find_tag_propagates_lookup_failure():
    git = FakeGit("v1.2.3", "abc123", {})
    with pytest.raises(RuntimeError, match="no tag"):
        find_tag(git)


def test_main_requires_token(monkeypatch, caplog):
    monkeypatch.delenv("GH_TOKEN", raising=False)
    with caplog.at_level(logging.ERROR):
        assert main(["/some/where"]) == 1
    assert "GH_TOKEN" in caplog.text


@pytest.mark.parametrize(
    "argv, fragment",
    [
        ([], "Specify the absolute path"),
        (["/a", "/b"], "Specify only"),
        (["relative/dir"], "is not an absolute path"),
    ],
)
def test_main_argument_errors(monkeypatch, caplog, argv, fragment):
    monkeypatch.setenv("GH_TOKEN", "token")
    with caplog.at_level(logging.ERROR):
        assert main(argv) == 1
    assert fragment in caplog.text


def test_build_release_assets_needs_go(monkeypatch, tmp_path):
    monkeypatch.setenv("PATH", "")
    ld = LdVars(import_path="x/provenance", kvs={"version": "v1.0.0"})
    with pytest.raises(FileNotFoundError):
        build_release_assets(str(tmp_path), str(tmp_path), ld)


def test_docker_image_needs_docker(monkeypatch, tmp_path):
    monkeypatch.setenv("PATH", "")
    ld = LdVars(import_path="x/provenance", kvs={"version": "v1.0.0"})
    with pytest.raises(FileNotFoundError):
        build_and_push_docker_image(str(tmp_path), str(tmp_path), ld)


def test_release_needs_git(monkeypatch, tmp_path):
    monkeypatch.setenv("PATH", "")
    with pytest.raises(FileNotFoundError):
        release(str(tmp_path))


def test_main_reports_release_failure(monkeypatch, tmp_path):
    monkeypatch.setenv("GH_TOKEN", "token")
    monkeypatch.setenv("PATH", "")
    assert main([str(tmp_path)]) == 1