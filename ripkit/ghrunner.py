"""Create GitHub releases with the gh command line tool."""

from __future__ import annotations

from typing import Iterable

from ripkit.runner import Behavior, CommandRunner, SafetyLevel


class GithubRunner:
    """Runs some gh commands."""

    def __init__(self, behavior: Behavior, dir_src: str, duration: float) -> None:
        self.runner = CommandRunner("gh", dir_src, behavior, duration)

    @property
    def out(self) -> str:
        return self.runner.out

    def release(self, tag: str, assets: Iterable[str]) -> None:
        """Create a draft release at an existing tag, uploading the assets."""
        self.runner.comment("releasing at tag " + tag)
        self.runner.run(
            SafetyLevel.UNDO_IS_HARD,
            "release",
            "create",
            tag,
            "--verify-tag",
            "--draft",
            "--generate-notes",  # title and notes are generated
            *assets,
        )