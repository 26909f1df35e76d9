"""Left navigation tree of markdown files and folders, rendered as HTML."""

from __future__ import annotations

import html
from dataclasses import dataclass, field
from typing import Union

CURRENT_DIR = "."
ROOT_SLASH = "/"
INDENT_PER_DEPTH = 2
_STEP = "  "

TMPL_NAME_ROOT = "tmplNavLeftRoot"
TMPL_NAME_FILE = "tmplNavLeftFile"
TMPL_NAME_FOLDER = "tmplNavLeftFolder"
TMPL_NAME_TOP_FOLDER = "tmplNavLeftTopFolder"


@dataclass
class NavFile:
    name: str

    def accept(self, visitor: "NavRenderer") -> None:
        visitor.visit_file(self)


@dataclass
class NavFolder:
    name: str
    children: list[Union[NavFile, "NavFolder"]] = field(default_factory=list)

    def add_file(self, nav_file: NavFile) -> "NavFolder":
        self.children.append(nav_file)
        return self

    def add_folder(self, folder: "NavFolder") -> "NavFolder":
        self.children.append(folder)
        return self

    def visit_children(self, visitor: "NavRenderer") -> None:
        for child in self.children:
            child.accept(visitor)

    def accept(self, visitor: "NavRenderer") -> None:
        visitor.visit_folder(self)


@dataclass
class NavTopFolder:
    """The top of a tree; its own name is not shown, only its children."""

    folder: NavFolder

    def visit_children(self, visitor: "NavRenderer") -> None:
        self.folder.visit_children(visitor)

    def accept(self, visitor: "NavRenderer") -> None:
        visitor.visit_top_folder(self)


Node = Union[NavFile, NavFolder, NavTopFolder]


def _indented(lines: list[str], level: int) -> list[str]:
    prefix = _STEP * level
    return [prefix + line for line in lines]


def _wrap(open_tag: str, inner: list[str], level: int) -> list[str]:
    if not inner:
        return [open_tag + "</div>"]
    return [open_tag, *_indented(inner, level), "</div>"]


class NavRenderer:
    """Renders left-nav HTML; files and folders are numbered depth first."""

    def __init__(self) -> None:
        self._lines: list[str] = []
        self._index_folder = -1
        self._index_file = -1
        self._depth = 0
        self._names: list[str] = []
        self.max_file_name_length = 0
        self.file_paths: list[str] = []
        self.folder_paths: list[str] = []

    @property
    def num_files(self) -> int:
        return self._index_file + 1

    @property
    def num_folders(self) -> int:
        return self._index_folder + 1

    @property
    def html(self) -> str:
        """Everything rendered so far."""
        return "\n".join(self._lines)

    def render(self, node: Node) -> str:
        """Render node and return its HTML."""
        start = len(self._lines)
        node.accept(self)
        return "\n".join(self._lines[start:])

    def _path(self) -> str:
        if len(self._names) > 1 and self._names[0] == CURRENT_DIR:
            return ROOT_SLASH.join(self._names[1:])
        return ROOT_SLASH.join(self._names)

    def _render_children(self, node: Union[NavFolder, NavTopFolder]) -> list[str]:
        saved = self._lines
        self._lines = []
        self._depth += 1
        try:
            node.visit_children(self)
            return self._lines
        finally:
            self._depth -= 1
            self._lines = saved

    def visit_file(self, nav_file: NavFile) -> None:
        self._index_file += 1
        self._names.append(nav_file.name)
        self.file_paths.append(self._path())
        shown = nav_file.name.removesuffix(".md")
        length = self._depth * INDENT_PER_DEPTH + len(shown)
        self.max_file_name_length = max(self.max_file_name_length, length)
        self._lines += _wrap(
            "<div class='navLeftFile navLeftFileDeactivated' "
            f"id='navLeftFileId{self._index_file}'>",
            [html.escape(shown)],
            1,
        )
        self._names.pop()

    def visit_folder(self, folder: NavFolder) -> None:
        self._index_folder += 1
        folder_id = self._index_folder
        self._names.append(folder.name)
        self.folder_paths.append(self._path())
        children = self._render_children(folder)
        inner = [
            *_wrap("<div class='navLeftFolderName'>", [html.escape(folder.name)], 1),
            *_wrap("<div class='navLeftFolderChildren'>", children, 1),
        ]
        self._lines += _wrap(
            f"<div class='navLeftFolder' id='navLeftFolderId{folder_id}'>", inner, 1
        )
        self._names.pop()

    def visit_top_folder(self, top: NavTopFolder) -> None:
        children = self._render_children(top)
        self._lines += _wrap("<div class='navLeftTopFolder'>", children, 1)