from __future__ import annotations

import pytest

from pgident import utils


@pytest.mark.parametrize(
    "raw",
    ["foo", "_foo", "foo_bar", "foo$1", "t1", "é", "ñandú", "_", "a" * 63],
)
def test_is_ident_compatible_accepts_lower_case_names(raw):
    assert utils.is_ident_compatible(raw)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "a" * 64,
        "FOO",
        "Foo",
        "1foo",
        "$foo",
        "foo bar",
        "foo-bar",
        "foo.bar",
        'foo"bar',
        "foo\x00",
    ],
)
def test_is_ident_compatible_rejects_other_names(raw):
    assert not utils.is_ident_compatible(raw)


def test_length_limit_counts_utf8_bytes():
    # 32 two-byte characters is 64 bytes even though it is only 32 characters
    assert not utils.is_ident_compatible("é" * 32)
    assert utils.is_ident_compatible("é" * 31)
    assert utils.MAX_IDENT_BYTES == utils.NAMEDATALEN - 1 == 63


def test_escape_quotes_doubles_every_quote():
    assert utils.escape_quotes('a"b""c') == 'a""b""""c'
    assert utils.escape_quotes("plain") == "plain"


def test_is_ident_compatible_handles_lone_surrogates():
    assert not utils.is_ident_compatible("a\udcff")
    assert not utils.is_ident_compatible("\ud800")
