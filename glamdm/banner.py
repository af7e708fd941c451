# banner.py
# Text + font name -> rectangular, space-padded FIGlet grid.

import logging
from typing import List, NamedTuple, Set, Tuple

from pyfiglet import Figlet, FigletError, FontError, FontNotFound

from .fonts import DEFAULT_FONT

log = logging.getLogger(__name__)

# wide enough that pyfiglet never wraps a banner onto a second block
FIGLET_WIDTH = 1000

_warned_fonts: Set[str] = set()


class BannerGrid(NamedTuple):
    lines: Tuple[str, ...]
    width: int


def measure_block(block: List[str]) -> Tuple[int, int]:
    h = len(block)
    w = max((len(line) for line in block), default=0)
    return w, h

def pad_block(block: List[str], width: int) -> List[str]:
    return [line.ljust(width) for line in block]

def trim_block(block: List[str]) -> List[str]:
    """Drop trailing blank lines and the blank margin right of the art.

    The left margin stays: leading spaces in the text are part of the banner.
    """
    block = [line.rstrip() for line in block]
    end = len(block)
    while end and not block[end - 1]:
        end -= 1
    return block[:end]

def _figlet(font: str, width: int) -> Figlet:
    try:
        return Figlet(font=font, width=width)
    except (FontNotFound, FontError) as e:
        if font not in _warned_fonts:
            _warned_fonts.add(font)
            log.warning("Font %r could not be loaded (%s), using %r", font, e, DEFAULT_FONT)
        return Figlet(font=DEFAULT_FONT, width=width)

def render_figlet_block(text: str, font: str, width: int = FIGLET_WIDTH) -> List[str]:
    f = _figlet(font, width)
    try:
        art = f.renderText(text)
    except FigletError as e:
        log.warning("pyfiglet could not render %r in %r: %s", text, font, e)
        return []
    return art.rstrip("\n").split("\n")

def build_banner(text: str, font: str, width: int = FIGLET_WIDTH) -> BannerGrid:
    """Shape ``text`` in ``font`` and return a grid whose lines all have the same length.

    Trailing blank lines and the blank right margin are dropped, so the last
    column always holds ink somewhere. Text that renders to nothing visible
    yields a single empty line of width 0.
    """
    block = trim_block(render_figlet_block(text, font, width))
    if not block:
        return BannerGrid(("",), 0)
    w, _ = measure_block(block)
    return BannerGrid(tuple(pad_block(block, w)), w)
