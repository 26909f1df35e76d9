"""Initial state of the web app, computed from rendered markdown files."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

BAD_ID = -1


@dataclass
class RenderedFile:
    """A markdown file rendered to HTML, with the names of its code blocks."""

    path: str
    html: str
    block_names: list[str] = field(default_factory=list)


@dataclass
class Facts:
    initial_file_index: int = 0
    initial_code_block_index: int = 0
    num_folders: int = 0
    max_code_blocks_in_a_file: int = 0
    max_nav_word_length: int = 0
    is_nav_visible: bool = False
    is_title_visible: bool = False


@dataclass
class HtmlAndLabels:
    """Rendered HTML of one file plus one label per code block."""

    html: str
    code_block_names: list[str] = field(default_factory=list)


@dataclass
class AppState:
    title: str = ""
    data_source: str = ""
    ordered_paths: list[str] = field(default_factory=list)
    facts: Facts = field(default_factory=Facts)
    rendered_files: list[HtmlAndLabels] = field(default_factory=list)

    @classmethod
    def from_files(
        cls, data_source: str, files: Iterable[RenderedFile], title: str
    ) -> "AppState":
        """Build the initial app state from rendered files, in order."""
        files = list(files)
        facts = Facts(
            initial_file_index=BAD_ID,
            initial_code_block_index=BAD_ID,
            max_code_blocks_in_a_file=max(
                (len(f.block_names) for f in files), default=0
            ),
            is_nav_visible=False,
            is_title_visible=True,
        )
        return cls(
            title=title,
            data_source=data_source,
            ordered_paths=[f.path for f in files],
            facts=facts,
            rendered_files=[
                HtmlAndLabels(html=f.html, code_block_names=list(f.block_names))
                for f in files
            ],
        )

    def initial_labels(self) -> list[str]:
        """Return placeholder labels, one per code block of the largest file."""
        return [f"label{j}" for j in range(self.facts.max_code_blocks_in_a_file)]

    def set_initial_file_index(self, path: str) -> None:
        """Point the initial file index at path (a URL path), else at 0."""
        self.facts.initial_file_index = 0
        if path.startswith("/"):
            path = path[1:]
        if not path:
            return
        for i, candidate in enumerate(self.ordered_paths):
            if candidate == path:
                self.facts.initial_file_index = i