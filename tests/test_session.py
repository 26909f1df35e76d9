import string

import pytest

from ripkit.session import Bucket, assure_defaults, make_session_id


def test_session_id_is_hex():
    sid = make_session_id()
    assert len(sid) == 6
    assert set(sid) <= set(string.hexdigits.lower())


def test_defaults_on_empty():
    values = {}
    assure_defaults(values)
    assert len(values["sid"]) == 6
    assert values["tit"] is True
    assert values["nav"] is False
    assert values["fix"] == 0
    assert values["bix"] == -1


def test_existing_values_kept():
    values = {"sid": "abc", "tit": False, "nav": True, "fix": 4, "bix": 2}
    before = dict(values)
    assure_defaults(values)
    assert values == before


def test_mistyped_values_replaced():
    values = {"sid": 17, "tit": "yes", "nav": 1, "fix": True, "bix": "3"}
    assure_defaults(values)
    assert isinstance(values["sid"], str)
    assert values["tit"] is True
    assert values["nav"] is False
    assert values["fix"] == 0
    assert values["bix"] == -1


def test_bucket_from_values():
    values = {"sid": "abc", "tit": False, "nav": True, "fix": 4, "bix": 2}
    assert Bucket.from_values(values) == Bucket("abc", False, True, 4, 2)


def test_bucket_after_defaults():
    values = {"fix": 9}
    assure_defaults(values)
    bucket = Bucket.from_values(values)
    assert bucket.md_file_index == 9
    assert bucket.md_sess_id == values["sid"]


def test_bucket_missing_value():
    with pytest.raises(KeyError):
        Bucket.from_values({"sid": "abc"})


def test_bucket_wrong_type():
    values = {"sid": "abc", "tit": False, "nav": True, "fix": "4", "bix": 2}
    with pytest.raises(TypeError):
        Bucket.from_values(values)