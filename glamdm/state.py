# state.py
# Session state and its transition function.
# apply(state, event) is the only way a session changes: it returns the new
# state plus effects for the driver. QUIT leaves the loop, SCHEDULE_TICK arms
# exactly one future tick `interval` seconds away. State never mutates in place.

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from .banner import BannerGrid, build_banner
from .color import Color, clamp, parse_hex
from .compositor import RenderMode
from .config import MAX_STEP, MIN_STEP, STEP_DELTA, Config
from .fields import TextField
from .fonts import FONT_CATALOG

log = logging.getLogger(__name__)

Builder = Callable[[str, str], BannerGrid]

# field slots
TEXT, START, END = 0, 1, 2


class EventType(str, Enum):
    QUIT = "quit"
    FOCUS_NEXT = "focus_next"
    FOCUS_PREV = "focus_prev"
    FONT_NEXT = "font_next"
    FONT_PREV = "font_prev"
    CYCLE_MODE = "cycle_mode"
    TOGGLE_ANIMATE = "toggle_animate"
    SPEED_UP = "speed_up"
    SLOW_DOWN = "slow_down"
    RESIZE = "resize"
    TICK = "tick"
    FIELD_EDIT = "field_edit"


class Effect(str, Enum):
    QUIT = "quit"
    SCHEDULE_TICK = "schedule_tick"


@dataclass(frozen=True)
class Event:
    type: EventType
    key: str = ""
    width: int = 0
    height: int = 0


KEYMAP = {
    "q": EventType.QUIT, "esc": EventType.QUIT, "ctrl+c": EventType.QUIT,
    "tab": EventType.FOCUS_NEXT, "shift+tab": EventType.FOCUS_PREV,
    "left": EventType.FONT_PREV, "[": EventType.FONT_PREV,
    "right": EventType.FONT_NEXT, "]": EventType.FONT_NEXT,
    "m": EventType.CYCLE_MODE,
    "a": EventType.TOGGLE_ANIMATE,
    "+": EventType.SPEED_UP, "=": EventType.SPEED_UP,
    "-": EventType.SLOW_DOWN, "_": EventType.SLOW_DOWN,
}

TICK = Event(EventType.TICK)
QUIT = Event(EventType.QUIT)

def key_event(key: str) -> Event:
    return Event(KEYMAP.get(key, EventType.FIELD_EDIT), key=key)

def resize_event(width: int, height: int) -> Event:
    return Event(EventType.RESIZE, width=width, height=height)


@dataclass(frozen=True)
class SessionState:
    fields: Tuple[TextField, ...]
    fonts: Tuple[str, ...]
    base_start: Color
    base_end: Color
    grid: Tuple[str, ...] = ("",)
    max_width: int = 0
    focus_index: int = TEXT
    font_index: int = 0
    mode: RenderMode = RenderMode.GLYPH
    animate: bool = True
    hue_shift: float = 0.0
    step_deg: float = 3.0
    interval: float = 0.06
    viewport: Tuple[int, int] = (0, 0)

    @property
    def text(self) -> str: return self.fields[TEXT].value
    @property
    def start_text(self) -> str: return self.fields[START].value
    @property
    def end_text(self) -> str: return self.fields[END].value
    @property
    def font(self) -> str: return self.fonts[self.font_index]


Transition = Tuple[SessionState, List[Effect]]

# ----------------------- Phases -----------------------
def rebuild(state: SessionState, builder: Builder = build_banner) -> SessionState:
    grid = builder(state.text, state.font)
    return replace(state, grid=grid.lines, max_width=grid.width)

def adopt_colors(state: SessionState) -> SessionState:
    """Adopt whichever color fields currently parse; keep the last good base otherwise."""
    start = parse_hex(state.start_text) or state.base_start
    end = parse_hex(state.end_text) or state.base_end
    if start == state.base_start and end == state.base_end:
        return state
    return replace(state, base_start=start, base_end=end)

def refocus(fields: Sequence[TextField], index: int) -> Tuple[TextField, ...]:
    return tuple(f.focus() if i == index else f.blur() for i, f in enumerate(fields))

def _with_field(fields: Sequence[TextField], index: int, field: TextField) -> Tuple[TextField, ...]:
    return tuple(field if i == index else f for i, f in enumerate(fields))

# ----------------------- Construction -----------------------
def initial_state(
    config: Optional[Config] = None,
    fonts: Sequence[str] = FONT_CATALOG,
    builder: Builder = build_banner,
) -> SessionState:
    cfg = (config or Config()).clamp()
    if not fonts:
        raise ValueError("font catalog is empty")
    fields = refocus((
        TextField.new("text", cfg.text),
        TextField.new("start hex", cfg.start_hex),
        TextField.new("end hex", cfg.end_hex),
    ), TEXT)
    state = SessionState(
        fields=fields,
        fonts=tuple(fonts),
        base_start=parse_hex(cfg.start_hex) or Color(138, 43, 226),
        base_end=parse_hex(cfg.end_hex) or Color(0, 255, 255),
        font_index=cfg.font_index % len(fonts),
        mode=cfg.render_mode,
        animate=cfg.animate,
        step_deg=clamp(cfg.step_deg, MIN_STEP, MAX_STEP),
        interval=cfg.interval,
    )
    return rebuild(state, builder)

def initial_effects(state: SessionState) -> List[Effect]:
    return [Effect.SCHEDULE_TICK] if state.animate else []

# ----------------------- Transition -----------------------
def apply(state: SessionState, event: Event, builder: Builder = build_banner) -> Transition:
    t = event.type

    if t is EventType.QUIT:
        return state, [Effect.QUIT]

    if t is EventType.FOCUS_NEXT or t is EventType.FOCUS_PREV:
        step = 1 if t is EventType.FOCUS_NEXT else -1
        idx = (state.focus_index + step) % len(state.fields)
        return replace(state, focus_index=idx, fields=refocus(state.fields, idx)), []

    if t is EventType.FONT_NEXT or t is EventType.FONT_PREV:
        step = 1 if t is EventType.FONT_NEXT else -1
        idx = (state.font_index + step) % len(state.fonts)
        log.debug("font %d -> %d (%s)", state.font_index, idx, state.fonts[idx])
        return rebuild(replace(state, font_index=idx), builder), []

    if t is EventType.CYCLE_MODE:
        return replace(state, mode=state.mode.next()), []

    if t is EventType.TOGGLE_ANIMATE:
        animate = not state.animate
        log.debug("animation %s at hue %.1f", "on" if animate else "off", state.hue_shift)
        return replace(state, animate=animate), ([Effect.SCHEDULE_TICK] if animate else [])

    if t is EventType.SPEED_UP:
        return replace(state, step_deg=min(MAX_STEP, state.step_deg + STEP_DELTA)), []

    if t is EventType.SLOW_DOWN:
        return replace(state, step_deg=max(MIN_STEP, state.step_deg - STEP_DELTA)), []

    if t is EventType.RESIZE:
        return replace(state, viewport=(event.width, event.height)), []

    if t is EventType.TICK:
        if not state.animate:
            return state, []
        return replace(state, hue_shift=(state.hue_shift + state.step_deg) % 360), [Effect.SCHEDULE_TICK]

    # FIELD_EDIT: the focused field takes the key, then text and colors are re-read
    idx = state.focus_index
    edited = state.fields[idx].handle_key(event.key)
    state = replace(state, fields=_with_field(state.fields, idx, edited))
    return adopt_colors(rebuild(state, builder)), []
