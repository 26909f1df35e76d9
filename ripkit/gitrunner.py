"""A few git queries needed when cutting a release."""

from __future__ import annotations

import re

from ripkit.runner import Behavior, CommandRunner, SafetyLevel

MAIN_BRANCH = "master"

_TAG_PATTERN = re.compile(r"^v[0-9].")


class GitRunner:
    """Runs some git commands in the current working directory."""

    def __init__(self, behavior: Behavior, duration: float) -> None:
        self.runner = CommandRunner("git", "", behavior, duration)

    @property
    def out(self) -> str:
        return self.runner.out

    def assure_clean_workspace(self) -> None:
        """Raise RuntimeError unless the working tree is clean."""
        self.runner.comment("assuring a clean workspace")
        self.runner.run(SafetyLevel.NO_HARM_DONE, "status")
        if "nothing to commit, working tree clean" not in self.runner.out:
            raise RuntimeError("the workspace isn't clean")

    def latest_tag(self) -> str:
        """Return the most recent tag, which must look like a version."""
        self.runner.comment("getting latest tag")
        self.runner.run(SafetyLevel.NO_HARM_DONE, "describe", "--tags", "--abbrev=0")
        if not _TAG_PATTERN.match(self.runner.out):
            raise ValueError(
                f'purported tag "{self.runner.out}" doesn\'t match '
                f're "{_TAG_PATTERN.pattern}"'
            )
        return self.runner.out.strip()

    def tag_at_commit(self, commit_hash: str) -> str:
        """Return the tag placed exactly at the given commit."""
        self.runner.comment("getting tag closest to hash " + commit_hash)
        try:
            self.runner.run(
                SafetyLevel.NO_HARM_DONE, "describe", "--exact-match", commit_hash
            )
        except RuntimeError as err:
            raise RuntimeError(f"{self.runner.out} {err}") from err
        return self.runner.out.strip()

    def head_commit(self) -> str:
        """Return the commit hash of HEAD."""
        self.runner.comment("getting the commit hash of HEAD")
        try:
            self.runner.run(SafetyLevel.NO_HARM_DONE, "rev-parse", "--verify", "HEAD")
        except RuntimeError as err:
            raise RuntimeError(f"{self.runner.out} {err}") from err
        return self.runner.out.strip()