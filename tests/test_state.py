from dataclasses import replace

import pytest

from glamdm.color import Color
from glamdm.compositor import RenderMode
from glamdm.config import Config
from glamdm.fields import TextField
from glamdm.fonts import FONT_CATALOG
from glamdm.state import (
    END, START, TEXT, TICK, Effect, EventType,
    adopt_colors, apply, initial_effects, initial_state, key_event, refocus, resize_event,
)


def press(state, builder, *keys):
    for key in keys:
        state, _ = apply(state, key_event(key), builder)
    return state


def focused_count(state):
    return sum(f.focused for f in state.fields)


def test_initial_state(state, builder):
    assert state.focus_index == TEXT
    assert focused_count(state) == 1 and state.fields[TEXT].focused
    assert state.font == "standard"
    assert state.mode is RenderMode.GLYPH
    assert state.animate and state.step_deg == 3.0 and state.hue_shift == 0.0
    assert state.base_start == Color(138, 43, 226)
    assert state.base_end == Color(0, 255, 255)
    assert state.grid == ("standard:glam dm",)
    assert builder.calls == [("glam dm", "standard")]
    assert initial_effects(state) == [Effect.SCHEDULE_TICK]


def test_no_tick_scheduled_when_starting_still(builder):
    state = initial_state(Config(animate=False), builder=builder)
    assert initial_effects(state) == []


def test_empty_font_catalog_rejected(builder):
    with pytest.raises(ValueError):
        initial_state(Config(), fonts=(), builder=builder)


def test_key_mapping():
    assert key_event("q").type is EventType.QUIT
    assert key_event("]").type is EventType.FONT_NEXT
    assert key_event("_").type is EventType.SLOW_DOWN
    assert key_event("x").type is EventType.FIELD_EDIT
    assert key_event("backspace").type is EventType.FIELD_EDIT


@pytest.mark.parametrize("key", ["q", "esc", "ctrl+c"])
def test_quit_keys_leave_state_alone(state, builder, key):
    new, effects = apply(state, key_event(key), builder)
    assert new is state
    assert effects == [Effect.QUIT]


@pytest.mark.parametrize("key", ["alt+b", "alt+q"])
def test_alt_keys_neither_quit_nor_type(state, builder, key):
    assert key_event(key).type is EventType.FIELD_EDIT
    new, effects = apply(state, key_event(key), builder)
    assert effects == []
    assert new.text == state.text


def test_focus_wraps_and_keeps_one_field_focused(state, builder):
    back = press(state, builder, "shift+tab")
    assert back.focus_index == END and back.fields[END].focused
    assert focused_count(back) == 1
    s = state
    for expected in (START, END, TEXT):
        s = press(s, builder, "tab")
        assert s.focus_index == expected
        assert focused_count(s) == 1


def test_font_wraps_both_ways(state, builder):
    last = len(FONT_CATALOG) - 1
    prev = press(state, builder, "left")
    assert prev.font_index == last
    assert prev.grid == (f"{FONT_CATALOG[last]}:glam dm",)
    assert press(prev, builder, "]").font_index == 0
    assert press(state, builder, "[").font_index == last
    assert press(state, builder, "right").font_index == 1


def test_mode_cycles_through_four(state, builder):
    seen = []
    s = state
    for _ in range(4):
        s = press(s, builder, "m")
        seen.append(s.mode)
    assert seen == [RenderMode.LIGHT, RenderMode.DOTS, RenderMode.BLOCK, RenderMode.GLYPH]


def test_toggle_animation(state, builder):
    ticked, _ = apply(state, TICK, builder)
    off, effects = apply(ticked, key_event("a"), builder)
    assert not off.animate and effects == []
    assert off.hue_shift == ticked.hue_shift
    on, effects = apply(off, key_event("a"), builder)
    assert on.animate and effects == [Effect.SCHEDULE_TICK]


def test_speed_saturates(state, builder):
    fast = press(state, builder, *["+"] * 100)
    assert fast.step_deg == 30.0
    slow = press(state, builder, *["-"] * 100)
    assert slow.step_deg == 0.5
    assert press(state, builder, "=").step_deg == 3.5
    assert press(state, builder, "_").step_deg == 2.5
    assert fast.hue_shift == slow.hue_shift == state.hue_shift


def test_resize_only_touches_viewport(state, builder):
    new, effects = apply(state, resize_event(120, 40), builder)
    assert new.viewport == (120, 40) and effects == []
    assert replace(new, viewport=state.viewport) == state


def test_ticks_ignored_while_still(state, builder):
    still = replace(state, animate=False, hue_shift=42.0)
    for _ in range(10):
        new, effects = apply(still, TICK, builder)
        assert new is still and effects == []


def test_ticks_wrap_after_full_turn(state, builder):
    s = state
    for i in range(120):
        s, effects = apply(s, TICK, builder)
        assert effects == [Effect.SCHEDULE_TICK]
        if i == 0:
            assert s.hue_shift == 3.0
    assert s.hue_shift == 0.0


def test_last_good_color_is_kept(state, builder):
    s = press(state, builder, "tab", "ctrl+u", *"#zzzzzz")
    assert s.start_text == "#zzzzzz"
    assert s.base_start.hex == "#8a2be2"
    s = press(s, builder, "ctrl+u", *"#000000")
    assert s.base_start == Color(0, 0, 0)
    assert s.base_end == Color(0, 255, 255)


def test_adopt_colors_phase(state):
    fields = list(state.fields)
    fields[START] = fields[START].set_value("#fff")
    fields[END] = fields[END].set_value("nope")
    s = adopt_colors(replace(state, fields=tuple(fields)))
    assert s.base_start == Color(255, 255, 255)
    assert s.base_end == state.base_end
    assert adopt_colors(state) is state


def test_field_edit_rebuilds_grid(state, builder):
    s = press(state, builder, "!")
    assert s.text == "glam dm!"
    assert s.grid == ("standard:glam dm!",)
    assert builder.calls[-1] == ("glam dm!", "standard")


def test_edit_goes_to_focused_field_only(state, builder):
    s = press(state, builder, "tab", "tab", "backspace")
    assert s.end_text == "#00FFF"
    assert s.text == state.text and s.start_text == state.start_text


def test_command_keys_never_reach_fields(state, builder):
    s = press(state, builder, "a", "m", "[")
    assert s.text == state.text


def test_refocus_marks_exactly_one():
    fields = (TextField.new("a", ""), TextField.new("b", "", focused=True), TextField.new("c", "", focused=True))
    assert [f.focused for f in refocus(fields, 1)] == [False, True, False]


def test_indices_stay_in_range(state, builder):
    keys = ["left", "tab", "m", "shift+tab", "+", "]", "a", "-", "[", "tab", "x", "m", "a"] * 40
    s = state
    for key in keys:
        s, _ = apply(s, key_event(key), builder)
        s, _ = apply(s, TICK, builder)
        assert 0 <= s.font_index < len(s.fonts)
        assert 0 <= s.focus_index < 3 and focused_count(s) == 1
        assert 0.0 <= s.hue_shift < 360.0
        assert 0.5 <= s.step_deg <= 30.0
