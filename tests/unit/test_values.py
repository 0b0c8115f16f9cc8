from __future__ import annotations

import pytest

from flickr_api_client.core.values import to_flag, to_int, to_text


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("42", 42),
        (" 7 ", 7),
        ("-3", -3),
        ("+3", 3),
        (5, 5),
        ("", None),
        ("-", None),
        ("--5", None),
        ("²", None),
        ("٣", None),
        ("1.5", None),
        (True, None),
        (None, None),
    ],
)
def test_to_int(raw, expected):
    assert to_int(raw) == expected


def test_to_text_reads_content_of_attributed_element():
    assert to_text({"content": "hello", "lang": "en"}) == "hello"
    assert to_text({"lang": "en"}) is None
    assert to_text(12) == "12"


def test_to_flag():
    assert to_flag("1") is True
    assert to_flag("0") is False
    assert to_flag("²") is None
