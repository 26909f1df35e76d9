"""Template helpers and the default parameters shared by page widgets."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field
from typing import Any, Callable

from ripkit.routes import (
    KEY_BLOCK_INDEX,
    KEY_IS_NAV_ON,
    KEY_IS_TITLE_ON,
    KEY_MD_FILE_INDEX,
    KEY_MD_SESS_ID,
    Route,
    dynamic,
)


def as_tmpl(name: str, body: str) -> str:
    """Wrap body in a named template definition."""
    return '\n{{define "' + name + '"}}' + body + "{{end}}\n"


def _f32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def num_chars_to_em(count: int) -> str:
    """Convert a character count to a CSS em width (an em is about 5/6 char)."""
    em = _f32(_f32(5.0 * _f32(float(count))) / 6.0)
    return f"{em:.1f}em"


@dataclass(frozen=True)
class IdAndLabel:
    id: int
    label: str


def id_and_label(index: int, label: str) -> IdAndLabel:
    """Pair an index with a label for use inside a template."""
    return IdAndLabel(id=index, label=str(label))


def make_func_map() -> dict[str, Callable[..., Any]]:
    """Return the functions that templates may call, by name."""
    return {
        "toUpper": str.upper,
        "idAndLabel": id_and_label,
        "numCharsToEm": num_chars_to_em,
    }


@dataclass
class JsCssParams:
    """Values substituted into the javascript and css of the web app."""

    md_host: str = "www.example.com"
    max_nav_word_length: int = 43
    path_run_block: str = field(default_factory=lambda: dynamic(Route.RUN_BLOCK))
    path_save: str = field(default_factory=lambda: dynamic(Route.SAVE))
    path_reload: str = field(default_factory=lambda: dynamic(Route.RELOAD))
    path_get_html_for_file: str = field(
        default_factory=lambda: dynamic(Route.HTML_FOR_FILE)
    )
    path_get_labels_for_file: str = field(
        default_factory=lambda: dynamic(Route.LABELS_FOR_FILE)
    )
    key_md_sess_id: str = KEY_MD_SESS_ID
    key_md_file_index: str = KEY_MD_FILE_INDEX
    key_block_index: str = KEY_BLOCK_INDEX
    key_is_title_on: str = KEY_IS_TITLE_ON
    key_is_nav_on: str = KEY_IS_NAV_ON
    md_sess_id: str = "notARealSessId"
    transition_speed_ms: int = 250


def default_params() -> JsCssParams:
    """Return a fresh copy of the default javascript/css parameters."""
    return JsCssParams()