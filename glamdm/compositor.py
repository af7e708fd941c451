# compositor.py
# Banner grid + endpoints + hue phase + render mode -> colored cells.
# The gradient runs left to right by column only; whitespace is never colored.

from enum import Enum
from typing import List, NamedTuple, Optional, Sequence, Tuple

from rich.text import Text

from .color import Color, lerp_color, rotate_hue


class RenderMode(Enum):
    BLOCK = "BLOCK █"  # full block
    GLYPH = "GLYPH"    # keep the FIGlet character
    LIGHT = "LIGHT ▓"  # medium shade
    DOTS = "DOTS ·"    # center dot

    @property
    def label(self) -> str:
        return self.value

    def next(self) -> "RenderMode":
        modes = list(RenderMode)
        return modes[(modes.index(self) + 1) % len(modes)]


MODE_GLYPHS = {
    RenderMode.BLOCK: "█",
    RenderMode.LIGHT: "▓",
    RenderMode.DOTS: "·",
}


class Cell(NamedTuple):
    char: str
    color: Optional[Color]


Frame = List[List[Cell]]
BLANK = Cell(" ", None)


def effective_colors(start: Color, end: Color, animate: bool, hue_shift: float) -> Tuple[Color, Color]:
    if not animate:
        return start, end
    return rotate_hue(start, hue_shift), rotate_hue(end, hue_shift)

def gradient_position(x: int, width: int) -> float:
    if width <= 1:
        return 0.0
    return x / (width - 1)

def substitute(ch: str, mode: RenderMode) -> str:
    return MODE_GLYPHS.get(mode, ch)

def compose(
    grid: Sequence[str],
    width: int,
    start: Color,
    end: Color,
    animate: bool,
    hue_shift: float,
    mode: RenderMode,
) -> Frame:
    eff_start, eff_end = effective_colors(start, end, animate, hue_shift)
    # one color per column, shared by every row
    column_colors = [lerp_color(eff_start, eff_end, gradient_position(x, width)) for x in range(width)]
    frame: Frame = []
    for line in grid:
        line = line.ljust(width)
        row = []
        for x in range(width):
            ch = line[x]
            if ch.isspace():
                row.append(BLANK)
                continue
            row.append(Cell(substitute(ch, mode), column_colors[x]))
        frame.append(row)
    return frame

def compose_state(state) -> Frame:
    return compose(
        state.grid, state.max_width,
        state.base_start, state.base_end,
        state.animate, state.hue_shift, state.mode,
    )

def frame_to_text(frame: Frame) -> Text:
    out = Text(no_wrap=True, overflow="crop")
    for y, row in enumerate(frame):
        if y:
            out.append("\n")
        for cell in row:
            if cell.color is None:
                out.append(cell.char)
            else:
                out.append(cell.char, style=cell.color.hex)
    return out
