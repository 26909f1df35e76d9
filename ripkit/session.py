"""Session state kept in a cookie."""

from __future__ import annotations

import secrets
from dataclasses import dataclass
from typing import Any, Mapping, MutableMapping

from ripkit.routes import (
    KEY_BLOCK_INDEX,
    KEY_IS_NAV_ON,
    KEY_IS_TITLE_ON,
    KEY_MD_FILE_INDEX,
    KEY_MD_SESS_ID,
)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def make_session_id() -> str:
    """Return a fresh random session id of six hex digits."""
    return secrets.token_bytes(3).hex()


def assure_defaults(values: MutableMapping[str, Any]) -> None:
    """Fill in default values for missing or mistyped session entries, in place."""
    if not isinstance(values.get(KEY_MD_SESS_ID), str):
        values[KEY_MD_SESS_ID] = make_session_id()
    if not isinstance(values.get(KEY_IS_TITLE_ON), bool):
        values[KEY_IS_TITLE_ON] = True
    if not isinstance(values.get(KEY_IS_NAV_ON), bool):
        values[KEY_IS_NAV_ON] = False
    if not _is_int(values.get(KEY_MD_FILE_INDEX)):
        values[KEY_MD_FILE_INDEX] = 0
    if not _is_int(values.get(KEY_BLOCK_INDEX)):
        values[KEY_BLOCK_INDEX] = -1


def _typed(values: Mapping[str, Any], key: str, check, kind: str) -> Any:
    value = values[key]
    if not check(value):
        raise TypeError(f"session value {key!r} is not {kind}: {value!r}")
    return value


@dataclass
class Bucket:
    """Session data in typed fields."""

    md_sess_id: str
    is_header_on: bool
    is_nav_on: bool
    md_file_index: int
    block_index: int

    @classmethod
    def from_values(cls, values: Mapping[str, Any]) -> "Bucket":
        """Build a Bucket from raw session values.

        Raises KeyError for a missing entry and TypeError for a mistyped one.
        """
        is_str = lambda v: isinstance(v, str)  # noqa: E731
        is_bool = lambda v: isinstance(v, bool)  # noqa: E731
        return cls(
            md_sess_id=_typed(values, KEY_MD_SESS_ID, is_str, "a string"),
            is_header_on=_typed(values, KEY_IS_TITLE_ON, is_bool, "a bool"),
            is_nav_on=_typed(values, KEY_IS_NAV_ON, is_bool, "a bool"),
            md_file_index=_typed(values, KEY_MD_FILE_INDEX, _is_int, "an int"),
            block_index=_typed(values, KEY_BLOCK_INDEX, _is_int, "an int"),
        )