# view.py
# Controls panel + colored banner, centered in the terminal.

from rich import box
from rich.align import Align
from rich.console import Group, RenderableType
from rich.panel import Panel
from rich.text import Text

from .compositor import compose_state, frame_to_text
from .state import END, START, TEXT, SessionState

LABEL_STYLE = "dim"

def chip(name: str, fg: str, bg: str) -> Text:
    return Text(f" {name} ", style=f"color({fg}) on color({bg})")

def animation_label(state: SessionState) -> str:
    return f"on ({state.step_deg:.1f}°/tick)" if state.animate else "off"

def control_line(label: str, *parts) -> Text:
    line = Text(label, style=LABEL_STYLE)
    line.append(" ")
    for p in parts:
        line.append(p)
    return line

def controls_panel(state: SessionState) -> Panel:
    lines = [
        control_line("Text:", state.fields[TEXT].render()),
        control_line("Start:", state.fields[START].render()),
        control_line("End:", state.fields[END].render()),
        control_line("Font:", chip(state.font, "212", "57"), "  (←/→ or [/])"),
        control_line("Mode:", chip(state.mode.label, "118", "237"), "  (m)"),
        control_line("Hue cycle:", chip(animation_label(state), "51", "240"), "  (a, +/-)"),
    ]
    return Panel(
        Text("\n").join(lines),
        box=box.ROUNDED,
        border_style="bright_black",
        padding=(0, 1),
        expand=False,
    )

def render_view(state: SessionState) -> RenderableType:
    w, h = state.viewport
    if not w or not h:
        return Text("\n  loading…", style="dim")
    art = frame_to_text(compose_state(state))
    content = Group(controls_panel(state), art)
    return Align(content, align="center", vertical="middle", width=w, height=h)
