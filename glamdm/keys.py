# keys.py
# Raw terminal input: cbreak-mode stdin reader and a decoder from bytes to key names
# ("a", "tab", "shift+tab", "left", "esc", "ctrl+c", ...).

import codecs
import logging
import os
import select
import sys
from typing import List, Optional

from .errors import TerminalUnavailableError

try:
    import termios
    import tty
except ImportError:  # Windows
    termios = None
    tty = None

log = logging.getLogger(__name__)

ESC = "\x1b"
ESC_WAIT = 0.05  # seconds to wait for the rest of an escape sequence

CSI_KEYS = {
    "A": "up", "B": "down", "C": "right", "D": "left",
    "H": "home", "F": "end", "Z": "shift+tab",
    "1~": "home", "7~": "home", "4~": "end", "8~": "end", "3~": "delete",
}
SS3_KEYS = {"A": "up", "B": "down", "C": "right", "D": "left", "H": "home", "F": "end"}


def _decode_char(ch: str) -> Optional[str]:
    if ch == "\t": return "tab"
    if ch in ("\r", "\n"): return "enter"
    if ch in ("\x7f", "\x08"): return "backspace"
    if "\x01" <= ch <= "\x1a":
        return "ctrl+" + chr(ord(ch) + 96)
    if ch.isprintable():
        return ch
    return None

def incomplete_sequence(data: str) -> bool:
    i = data.rfind(ESC)
    if i < 0:
        return False
    tail = data[i + 1:]
    if not tail:
        return True
    if tail[0] == "O":
        return len(tail) < 2
    if tail[0] == "[":
        return not any("@" <= c <= "~" for c in tail[1:])
    return False

def decode_keys(data: str) -> List[str]:
    keys: List[str] = []
    i, n = 0, len(data)
    while i < n:
        ch = data[i]
        if ch != ESC:
            key = _decode_char(ch)
            if key:
                keys.append(key)
            i += 1
            continue
        # lone ESC, or ESC ESC
        if i + 1 >= n or data[i + 1] == ESC:
            keys.append("esc")
            i += 1
            continue
        nxt = data[i + 1]
        # meta-prefixed printable, e.g. alt+b arrives as ESC b
        if nxt not in "[O" or (nxt == "O" and i + 2 >= n):
            if nxt.isprintable():
                keys.append("alt+" + nxt)
                i += 2
            else:
                keys.append("esc")
                i += 1
            continue
        intro = nxt
        j = i + 2
        if intro == "O":
            seq = data[j:j + 1]
            j += 1
            key = SS3_KEYS.get(seq)
        else:
            # CSI: parameter bytes, then one final byte in @..~
            while j < n and not ("@" <= data[j] <= "~"):
                j += 1
            seq = data[i + 2:j + 1]
            j += 1
            key = CSI_KEYS.get(seq)
            if key is None and seq.startswith("1;"):
                key = CSI_KEYS.get(seq[-1])  # modified keys, e.g. ESC [1;5C
        if key:
            keys.append(key)
        else:
            log.debug("Dropped unknown escape sequence %r", ESC + intro + seq)
        i = j
    return keys


class TerminalKeyReader:
    """cbreak-mode stdin reader; restores the terminal on exit.

    Ctrl+C still raises KeyboardInterrupt (cbreak keeps ISIG); the driver treats it as quit.
    """

    def __init__(self, stream=None):
        self.stream = stream or sys.stdin
        self._fd: Optional[int] = None
        self._old_settings = None
        # keeps a multi-byte character split across two os.read chunks
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")

    def __enter__(self) -> "TerminalKeyReader":
        if termios is None or tty is None:
            raise TerminalUnavailableError("termios is not available on this platform")
        try:
            fd = self.stream.fileno()
        except (AttributeError, ValueError, OSError) as e:
            raise TerminalUnavailableError(f"stdin has no file descriptor: {e}") from e
        if not os.isatty(fd):
            raise TerminalUnavailableError("stdin is not a terminal")
        try:
            self._old_settings = termios.tcgetattr(fd)
            tty.setcbreak(fd)
        except termios.error as e:
            raise TerminalUnavailableError(f"cannot switch terminal to cbreak mode: {e}") from e
        self._fd = fd
        self._decoder.reset()
        log.debug("Terminal switched to cbreak mode")
        return self

    def __exit__(self, *exc) -> None:
        if self._fd is not None and self._old_settings is not None:
            termios.tcsetattr(self._fd, termios.TCSADRAIN, self._old_settings)
            log.debug("Terminal settings restored")
        self._fd = None

    def _ready(self, timeout: Optional[float]) -> bool:
        r, _, _ = select.select([self._fd], [], [], timeout)
        return bool(r)

    def _read_chunk(self) -> str:
        return self._decoder.decode(os.read(self._fd, 1024))

    def read(self, timeout: Optional[float]) -> List[str]:
        """Wait up to ``timeout`` seconds for input; returns decoded keys (possibly none)."""
        if self._fd is None:
            raise TerminalUnavailableError("reader used outside its context")
        if not self._ready(timeout):
            return []
        data = self._read_chunk()
        # an escape sequence can arrive split across reads
        while incomplete_sequence(data) and self._ready(ESC_WAIT):
            data += self._read_chunk()
        return decode_keys(data)
