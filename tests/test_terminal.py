"""Tests for terminal key decoding."""

from __future__ import annotations

import pytest

from bdoprofile.terminal import KeyDecoder, decode_keys


@pytest.mark.parametrize(
    ("data", "expected"),
    [
        ("abc", ["a", "b", "c"]),
        ("\r", ["enter"]),
        ("\x03", ["ctrl+c"]),
        ("\x7f", ["backspace"]),
        ("\x1b", ["esc"]),
        ("\x1b[A\x1b[B", ["up", "down"]),
        ("\x1b[5~\x1b[6~", ["pageup", "pagedown"]),
        ("\x1bOH\x1b[4~", ["home", "end"]),
        ("\x1b[3~", ["delete"]),
        ("ç", ["ç"]),
    ],
)
def test_decode_keys(data, expected):
    assert decode_keys(data) == expected


def test_unknown_sequences_are_dropped():
    assert decode_keys("\x1b[1;5Dx") == ["x"]


def test_lone_escape_before_text():
    assert decode_keys("\x1bq") == ["esc", "q"]


def test_key_decoder_joins_character_split_across_reads():
    decoder = KeyDecoder()
    encoded = "ã".encode("utf-8")
    assert decoder.feed(encoded[:1]) == []
    assert decoder.feed(encoded[1:] + b"\r") == ["ã", "enter"]


def test_key_decoder_drops_invalid_bytes():
    assert KeyDecoder().feed(b"a\xffb") == ["a", "b"]
