# color.py
# RGB value type, hex parsing/formatting, gradient interpolation, HSV hue rotation.
# All conversions truncate toward zero (int()), never round.

import math
import re
from dataclasses import dataclass
from typing import NamedTuple, Optional

HEX_RE = re.compile(r"#([0-9a-fA-F]{3}|[0-9a-fA-F]{6})")

# ----------------------- Utils -----------------------
def clamp(v, lo, hi): return lo if v < lo else hi if v > hi else v
def clamp01(x: float) -> float: return clamp(x, 0.0, 1.0)
def lerp(a: float, b: float, t: float) -> float: return a + (b - a) * t

# ----------------------- Types -----------------------
@dataclass(frozen=True)
class Color:
    r: int
    g: int
    b: int

    def __post_init__(self):
        # channels are truncated and clamped on the way in so nothing out of range is ever stored
        for name in ("r", "g", "b"):
            object.__setattr__(self, name, clamp(int(getattr(self, name)), 0, 255))

    @property
    def hex(self) -> str:
        return format_hex(self)

    def as_tuple(self):
        return (self.r, self.g, self.b)


class HSV(NamedTuple):
    h: float  # degrees, [0, 360)
    s: float
    v: float


# ----------------------- Hex -----------------------
def parse_hex(s: str) -> Optional[Color]:
    """Parse ``#RGB`` or ``#RRGGBB``; returns None for anything else."""
    m = HEX_RE.fullmatch(s.strip())
    if not m:
        return None
    digits = m.group(1)
    if len(digits) == 3:
        r, g, b = (int(d, 16) * 17 for d in digits)
    else:
        r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    return Color(r, g, b)

def format_hex(c: Color) -> str:
    return f"#{c.r:02x}{c.g:02x}{c.b:02x}"

# ----------------------- Gradient -----------------------
def lerp_color(a: Color, b: Color, t: float) -> Color:
    return Color(
        int(lerp(a.r, b.r, t)),
        int(lerp(a.g, b.g, t)),
        int(lerp(a.b, b.b, t)),
    )

# ----------------------- HSV -----------------------
def rgb_to_hsv(c: Color) -> HSV:
    r, g, b = c.r / 255.0, c.g / 255.0, c.b / 255.0
    maxv = max(r, g, b)
    minv = min(r, g, b)
    d = maxv - minv
    if maxv == 0:  # black
        return HSV(0.0, 0.0, 0.0)
    s = d / maxv
    if d == 0:
        h = 0.0
    elif maxv == r:
        h = (g - b) / d
        if g < b:
            h += 6
    elif maxv == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return HSV(h * 60.0, s, maxv)

def hsv_to_rgb(h: float, s: float, v: float) -> Color:
    h = math.fmod(h, 360.0)
    if h < 0:
        h += 360.0
    s, v = clamp01(s), clamp01(v)
    c = v * s
    x = c * (1 - abs(math.fmod(h / 60.0, 2) - 1))
    m = v - c
    if h < 60:    r1, g1, b1 = c, x, 0.0
    elif h < 120: r1, g1, b1 = x, c, 0.0
    elif h < 180: r1, g1, b1 = 0.0, c, x
    elif h < 240: r1, g1, b1 = 0.0, x, c
    elif h < 300: r1, g1, b1 = x, 0.0, c
    else:         r1, g1, b1 = c, 0.0, x
    return Color(int((r1 + m) * 255), int((g1 + m) * 255), int((b1 + m) * 255))

def rotate_hue(c: Color, delta: float) -> Color:
    h, s, v = rgb_to_hsv(c)
    return hsv_to_rgb(h + delta, s, v)
