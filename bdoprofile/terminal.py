"""Raw terminal input: mode switching and key decoding (POSIX only)."""

from __future__ import annotations

import codecs
import os
import sys
from contextlib import contextmanager
from typing import Iterator, List

_ESCAPE_SEQUENCES = {
    "\x1b[A": "up",
    "\x1b[B": "down",
    "\x1b[C": "right",
    "\x1b[D": "left",
    "\x1bOA": "up",
    "\x1bOB": "down",
    "\x1bOC": "right",
    "\x1bOD": "left",
    "\x1b[H": "home",
    "\x1b[F": "end",
    "\x1bOH": "home",
    "\x1bOF": "end",
    "\x1b[1~": "home",
    "\x1b[4~": "end",
    "\x1b[3~": "delete",
    "\x1b[5~": "pageup",
    "\x1b[6~": "pagedown",
}

_CONTROL_KEYS = {
    "\r": "enter",
    "\n": "enter",
    "\t": "tab",
    "\x03": "ctrl+c",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\x1b": "esc",
}


def decode_keys(data: str) -> List[str]:
    """Split a chunk of terminal input into key names.

    Known escape sequences become names such as ``"up"`` or ``"pagedown"``,
    control bytes become ``"enter"``, ``"ctrl+c"`` and friends, and printable
    characters are returned as themselves. Unknown sequences are dropped.
    """
    keys: List[str] = []
    index = 0
    while index < len(data):
        if data[index] == "\x1b" and index + 1 < len(data):
            for sequence, name in _ESCAPE_SEQUENCES.items():
                if data.startswith(sequence, index):
                    keys.append(name)
                    index += len(sequence)
                    break
            else:
                if data[index + 1] in "[O":
                    index = _skip_unknown_sequence(data, index)
                else:
                    keys.append("esc")
                    index += 1
            continue

        char = data[index]
        if char in _CONTROL_KEYS:
            keys.append(_CONTROL_KEYS[char])
        elif char.isprintable():
            keys.append(char)
        index += 1
    return keys


def _skip_unknown_sequence(data: str, index: int) -> int:
    # CSI/SS3 sequences end with a byte in the @..~ range.
    index += 2
    while index < len(data) and not ("@" <= data[index] <= "~"):
        index += 1
    return index + 1


@contextmanager
def raw_mode(fd: int) -> Iterator[None]:
    """Put the terminal behind ``fd`` in raw mode for the duration of the block.

    Output post-processing stays on so the renderer's newlines still return
    the carriage; ctrl+c arrives as a key instead of SIGINT.
    """
    import termios
    import tty

    previous = termios.tcgetattr(fd)
    mode = termios.tcgetattr(fd)
    mode[tty.IFLAG] &= ~(termios.IXON | termios.ICRNL)
    mode[tty.LFLAG] &= ~(termios.ECHO | termios.ICANON | termios.ISIG | termios.IEXTEN)
    mode[tty.CC][termios.VMIN] = 1
    mode[tty.CC][termios.VTIME] = 0
    try:
        termios.tcsetattr(fd, termios.TCSAFLUSH, mode)
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, previous)


class KeyDecoder:
    """Turn raw input chunks into key names across reads.

    A multi-byte character split between two reads is held back until its
    remaining bytes arrive.
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")

    def feed(self, data: bytes) -> List[str]:
        return decode_keys(self._decoder.decode(data))


def read_available(fd: int, size: int = 1024) -> bytes:
    return os.read(fd, size)


def stdin_is_terminal() -> bool:
    return sys.stdin.isatty() and os.name == "posix"
