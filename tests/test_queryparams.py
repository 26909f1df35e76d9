from urllib.parse import parse_qs

import pytest

from ripkit.queryparams import (
    RangeError,
    check_in_range,
    get_bool_param,
    get_int_param,
    parse_go_bool,
)


def test_int_from_parsed_query():
    query = parse_qs("fix=7&bix=2")
    assert get_int_param(query, "fix", -1) == 7
    assert get_int_param(query, "bix", -1) == 2


def test_int_from_plain_mapping():
    assert get_int_param({"s": "300"}, "s", 1) == 300
    assert get_int_param({"s": "+3"}, "s", 1) == 3
    assert get_int_param({"s": "-4"}, "s", 1) == -4


@pytest.mark.parametrize("text", ["", "abc", " 7", "7 ", "1_000", "3.5", "0x10"])
def test_int_falls_back_to_default(text):
    assert get_int_param({"n": text}, "n", 99) == 99


def test_int_missing_and_empty_list():
    assert get_int_param({}, "n", 5) == 5
    assert get_int_param({"n": []}, "n", 5) == 5


def test_int_limits():
    big = str(2**63 - 1)
    assert get_int_param({"n": big}, "n", 0) == 2**63 - 1
    assert get_int_param({"n": str(2**63)}, "n", 0) == 0


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_bool_true(text):
    assert parse_go_bool(text) is True
    assert get_bool_param({"nav": text}, "nav", False) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_bool_false(text):
    assert parse_go_bool(text) is False
    assert get_bool_param({"nav": [text]}, "nav", True) is False


@pytest.mark.parametrize("text", ["", "yes", "tRuE", "2"])
def test_bool_invalid(text):
    with pytest.raises(ValueError):
        parse_go_bool(text)
    assert get_bool_param({"nav": text}, "nav", True) is True


def test_in_range_accepts():
    assert check_in_range("bix", 2, 5) == 2
    assert check_in_range("fix", -1, 3) == -1


def test_in_range_rejects():
    with pytest.raises(RangeError, match="out of range") as info:
        check_in_range("fix", -1, -3)
    assert info.value.name == "fix"
    assert info.value.arg == -1
    assert info.value.n == -3