"""Tests for motion dispatch across selections and modes."""

from __future__ import annotations

import pytest

from vimotion.core.vim import VimMode
from vimotion.editing.buffer import SelectionList, TextBuffer
from vimotion.editing.dispatcher import apply_motion
from vimotion.editing.exceptions import MissingCharacterError, UnknownMotionError
from vimotion.editing.motions.registry import (
    CHAR_MOTIONS,
    CHAR_SEARCH_MOTIONS,
    MOTIONS,
    execute_motion,
    repeat_char_search,
)
from vimotion.editing.state import END_OF_LINE, VimState
from vimotion.editing.types import (
    CharSearch,
    CharSearchKind,
    Position,
    SearchDirection,
    Selection,
)


def _host(text: str, *cursors: tuple[int, int]) -> SelectionList:
    return SelectionList.with_cursors(TextBuffer(text), *(cursors or ((0, 0),)))


class TestMotionRegistry:
    """Tests for the MOTIONS registry."""

    def test_all_motions_registered(self) -> None:
        expected = {
            "left", "right", "up", "down",
            "word_forward", "WORD_forward", "word_backward", "WORD_backward",
            "word_end", "WORD_end",
            "find_forward", "find_backward", "till_forward", "till_backward",
            "first_line", "last_line", "paragraph_forward", "paragraph_backward",
            "line_end", "first_non_blank",
        }
        assert set(MOTIONS.keys()) == expected

    def test_char_motions_identified(self) -> None:
        assert CHAR_MOTIONS == {"find_forward", "find_backward", "till_forward", "till_backward"}

    def test_every_char_search_has_a_motion(self) -> None:
        assert len(CHAR_SEARCH_MOTIONS) == 4

    def test_unknown_motion(self) -> None:
        with pytest.raises(UnknownMotionError):
            execute_motion(VimState(), _host("abc"), "teleport")

    def test_find_without_char(self) -> None:
        with pytest.raises(MissingCharacterError):
            execute_motion(VimState(), _host("abc"), "find_forward")


class TestDispatch:
    def test_no_host_is_noop(self) -> None:
        state = VimState(desired_columns=[3])
        assert execute_motion(state, None, "left") is False
        assert state.desired_columns == [3]

    def test_apply_motion_without_host(self) -> None:
        assert apply_motion(VimState(), None, lambda ctx: ctx.position) is False

    def test_insert_mode_leaves_selection(self) -> None:
        host = _host("hello", (0, 2))
        state = VimState(mode=VimMode.INSERT)
        assert execute_motion(state, host, "right") is False
        assert host.cursors == [Position(0, 2)]

    def test_every_selection_moves(self) -> None:
        host = _host("hello world\nfoo bar", (0, 0), (1, 0))
        execute_motion(VimState(), host, "word_forward")
        assert host.cursors == [Position(0, 6), Position(1, 4)]

    def test_selection_count_is_preserved(self) -> None:
        host = _host("abc", (0, 0), (0, 1), (0, 2))
        execute_motion(VimState(), host, "line_end")
        assert len(host.selections) == 3
        assert host.cursors == [Position(0, 2)] * 3

    def test_reveals_primary_cursor(self) -> None:
        host = _host("hello\nworld", (0, 0), (1, 0))
        execute_motion(VimState(), host, "line_end", center=False)
        assert host.revealed == [(Position(0, 4), False)]

    def test_committed_selections_are_clamped(self) -> None:
        host = _host("ab", (0, 0))
        apply_motion(VimState(), host, lambda ctx: Position(5, 9))
        assert host.cursors == [Position(0, 2)]

    def test_motion_receives_selection_index(self) -> None:
        host = _host("abc\ndef", (0, 0), (1, 0))
        seen: list[int] = []

        def motion(ctx):
            seen.append(ctx.selection_index)
            return ctx.position

        apply_motion(VimState(), host, motion)
        assert seen == [0, 1]


class TestModeGating:
    def test_word_motion_not_in_visual_line(self) -> None:
        host = SelectionList(TextBuffer("hello world"), [Selection(Position(0, 0), Position(0, 11))])
        state = VimState(mode=VimMode.VISUAL_LINE)
        assert execute_motion(state, host, "word_forward") is False

    def test_vertical_motion_in_visual_line(self) -> None:
        host = SelectionList(TextBuffer("one\ntwo\nthree"), [Selection(Position(0, 0), Position(0, 3))])
        state = VimState(mode=VimMode.VISUAL_LINE)
        assert execute_motion(state, host, "down") is True
        assert host.selections == [Selection(Position(0, 0), Position(1, 3))]

    def test_visual_line_upwards_past_anchor(self) -> None:
        host = SelectionList(TextBuffer("one\ntwo\nthree"), [Selection(Position(1, 0), Position(1, 3))])
        state = VimState(mode=VimMode.VISUAL_LINE)
        execute_motion(state, host, "up")
        assert host.selections == [Selection(Position(1, 3), Position(0, 0))]


class TestVisualMode:
    def test_right_extends_selection(self) -> None:
        host = SelectionList(TextBuffer("hello"), [Selection(Position(0, 1), Position(0, 2))])
        execute_motion(VimState(mode=VimMode.VISUAL), host, "right")
        assert host.selections == [Selection(Position(0, 1), Position(0, 3))]

    def test_left_past_anchor_flips_selection(self) -> None:
        host = SelectionList(TextBuffer("hello"), [Selection(Position(0, 2), Position(0, 3))])
        execute_motion(VimState(mode=VimMode.VISUAL), host, "left")
        # Cells 1..2 selected, cursor on 1
        assert host.selections == [Selection(Position(0, 3), Position(0, 1))]

    def test_right_onto_line_break(self) -> None:
        host = SelectionList(TextBuffer("ab\ncd"), [Selection(Position(0, 0), Position(0, 2))])
        execute_motion(VimState(mode=VimMode.VISUAL), host, "right")
        assert host.selections == [Selection(Position(0, 0), Position(1, 0))]

    def test_word_forward(self) -> None:
        host = SelectionList(TextBuffer("foo bar baz"), [Selection(Position(0, 0), Position(0, 1))])
        execute_motion(VimState(mode=VimMode.VISUAL), host, "word_forward")
        assert host.selections == [Selection(Position(0, 0), Position(0, 5))]

    def test_down_seeds_column_from_selected_cell(self) -> None:
        host = SelectionList(TextBuffer("abcdef\nabcdef"), [Selection(Position(0, 1), Position(0, 4))])
        state = VimState(mode=VimMode.VISUAL)
        execute_motion(state, host, "down")
        # Host end 4 is exclusive, so the cursor cell is column 3
        assert state.desired_columns == [3]
        assert host.selections == [Selection(Position(0, 1), Position(1, 4))]


class TestDesiredColumns:
    TEXT = "a long line here\nab\n\nanother long line"

    def test_vertical_motions_keep_desired_column(self) -> None:
        host = _host(self.TEXT, (0, 7))
        state = VimState()
        execute_motion(state, host, "down")
        assert host.cursors == [Position(1, 1)]
        execute_motion(state, host, "down")
        assert host.cursors == [Position(2, 0)]
        execute_motion(state, host, "down")
        assert host.cursors == [Position(3, 7)]
        execute_motion(state, host, "up")
        execute_motion(state, host, "up")
        execute_motion(state, host, "up")
        assert host.cursors == [Position(0, 7)]
        assert state.desired_columns == [7]

    def test_seeded_before_any_selection_moves(self) -> None:
        host = _host("abcdef\nabcdef\nabcdef", (0, 4), (1, 2))
        state = VimState()
        execute_motion(state, host, "down")
        assert state.desired_columns == [4, 2]
        assert host.cursors == [Position(1, 4), Position(2, 2)]

    def test_horizontal_motion_clears(self) -> None:
        host = _host(self.TEXT, (0, 7))
        state = VimState()
        execute_motion(state, host, "down")
        execute_motion(state, host, "left")
        assert state.desired_columns == []
        execute_motion(state, host, "down")
        assert host.cursors == [Position(2, 0)]
        execute_motion(state, host, "down")
        assert host.cursors == [Position(3, 0)]

    def test_line_end_then_up_sticks_to_end(self) -> None:
        host = _host("hello world\nhi\nlonger line", (2, 0))
        state = VimState()
        execute_motion(state, host, "line_end")
        assert host.cursors == [Position(2, 10)]
        assert state.desired_columns == [END_OF_LINE]
        execute_motion(state, host, "up")
        assert host.cursors == [Position(1, 1)]
        execute_motion(state, host, "up")
        assert host.cursors == [Position(0, 10)]

    def test_jumps_clear(self) -> None:
        for name in ("first_line", "last_line", "paragraph_backward", "first_non_blank"):
            state = VimState(desired_columns=[5])
            execute_motion(state, _host(self.TEXT, (1, 0)), name)
            assert state.desired_columns == [], name

    def test_paragraph_forward_keeps(self) -> None:
        state = VimState(desired_columns=[5])
        host = _host(self.TEXT, (0, 0))
        execute_motion(state, host, "paragraph_forward")
        assert host.cursors == [Position(2, 0)]
        assert state.desired_columns == [5]

    def test_first_and_last_line(self) -> None:
        host = _host(self.TEXT, (1, 1))
        execute_motion(VimState(), host, "last_line")
        assert host.cursors == [Position(3, 0)]
        execute_motion(VimState(), host, "first_line")
        assert host.cursors == [Position(0, 0)]


class TestCharSearchRepeat:
    def test_find_and_repeat(self) -> None:
        host = _host("abxcdx", (0, 0))
        state = VimState()
        execute_motion(state, host, "find_forward", "x")
        assert host.cursors == [Position(0, 2)]
        repeat_char_search(state, host)
        assert host.cursors == [Position(0, 5)]
        repeat_char_search(state, host, reverse=True)
        assert host.cursors == [Position(0, 2)]

    def test_find_records_search(self) -> None:
        state = VimState()
        execute_motion(state, _host("abxcdx"), "till_backward", "x")
        assert state.last_char_search == CharSearch(
            SearchDirection.BACKWARD, CharSearchKind.TILL, "x"
        )

    def test_repeat_does_not_rebind(self) -> None:
        host = _host("abxcdx", (0, 0))
        state = VimState()
        execute_motion(state, host, "find_forward", "x")
        recorded = state.last_char_search
        execute_motion(state, host, "repeat_char_search_reverse")
        execute_motion(state, host, "repeat_char_search")
        assert state.last_char_search == recorded
        assert host.cursors == [Position(0, 5)]

    def test_reverse_of_backward_search_goes_forward(self) -> None:
        host = _host("x.x.x", (0, 4))
        state = VimState()
        execute_motion(state, host, "find_backward", "x")
        assert host.cursors == [Position(0, 2)]
        repeat_char_search(state, host, reverse=True)
        assert host.cursors == [Position(0, 4)]

    def test_till_forward(self) -> None:
        host = _host("abxcdx", (0, 0))
        execute_motion(VimState(), host, "till_forward", "x")
        assert host.cursors == [Position(0, 1)]

    def test_repeat_without_search(self) -> None:
        host = _host("abc", (0, 1))
        assert repeat_char_search(VimState(), host) is False
        assert host.cursors == [Position(0, 1)]

    def test_not_found_stays(self) -> None:
        host = _host("abc", (0, 1))
        state = VimState()
        execute_motion(state, host, "find_forward", "z")
        assert host.cursors == [Position(0, 1)]

    def test_find_clears_desired_columns(self) -> None:
        state = VimState(desired_columns=[3])
        execute_motion(state, _host("abxcdx"), "find_forward", "x")
        assert state.desired_columns == []
