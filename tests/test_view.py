import io
from dataclasses import replace

from rich.console import Console
from rich.text import Text

from glamdm.view import animation_label, chip, render_view


def render(renderable, width=120, height=40):
    console = Console(file=io.StringIO(), width=width, height=height, color_system=None, legacy_windows=False)
    console.print(renderable)
    return console.file.getvalue()


def test_loading_until_viewport_known(state):
    view = render_view(state)
    assert isinstance(view, Text)
    assert "loading" in view.plain


def test_controls_and_art_are_drawn(state):
    out = render(render_view(replace(state, viewport=(120, 40))))
    for label in ("Text:", "Start:", "End:", "Font:", "Mode:", "Hue cycle:"):
        assert label in out
    assert "glam dm" in out
    assert "#8A2BE2" in out and "#00FFFF" in out
    assert "standard" in out
    assert "GLYPH" in out
    assert "on (3.0°/tick)" in out
    assert "standard:glam dm" in out


def test_animation_label(state):
    assert animation_label(state) == "on (3.0°/tick)"
    assert animation_label(replace(state, step_deg=12.5)) == "on (12.5°/tick)"
    assert animation_label(replace(state, animate=False)) == "off"


def test_chip_pads_name():
    assert chip("GLYPH", "118", "237").plain == " GLYPH "
