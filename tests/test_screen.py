"""Tests for the differential renderer."""

import pytest

from term_snake.screen import ScreenWriter


@pytest.fixture()
def writer(term):
    screen = ScreenWriter(term, with_border=False)
    screen.update_size(rows=3, columns=4)
    return screen


def _visible(term, lines):
    return [term.strip_seqs(line) for line in lines]


class TestRender:
    def test_first_render_writes_every_row(self, writer):
        assert writer.render(["aaaa", "bbbb", "cccc"]) == 3

    def test_same_frame_twice_writes_nothing(self, writer, term):
        frame = ["aaaa", "bbbb", "cccc"]
        writer.render(frame)
        before = term.stream.getvalue()
        assert writer.render(frame) == 0
        assert term.stream.getvalue() == before

    def test_one_changed_row_is_one_write(self, writer, term):
        writer.render(["aaaa", "bbbb", "cccc"])
        before = len(term.stream.getvalue())
        assert writer.render(["aaaa", "bxbb", "cccc"]) == 1
        written = term.stream.getvalue()[before:]
        assert written == term.move_yx(1, 0) + "bxbb" + term.hide_cursor

    def test_styling_change_counts_as_change(self, writer, term):
        writer.render(["aaaa", "bbbb", "cccc"])
        assert writer.render(["aaaa", term.red("bbbb"), "cccc"]) == 1

    def test_cursor_hidden_after_render(self, writer, term):
        writer.render(["aaaa", "bbbb", "cccc"])
        assert term.stream.getvalue().endswith(term.hide_cursor)

    def test_cursor_hidden_after_every_render_that_writes(self, writer, term):
        writer.render(["aaaa", "bbbb", "cccc"])
        before = len(term.stream.getvalue())
        writer.render(["aaaa", "bxbb", "cccc"])
        assert term.stream.getvalue()[before:].endswith(term.hide_cursor)

    def test_resize_forces_full_redraw(self, writer):
        frame = ["aaaa", "bbbb", "cccc"]
        writer.render(frame)
        writer.update_size(rows=3, columns=4)
        assert writer.render(frame) == 3

    def test_clear_forces_full_redraw(self, writer, term):
        frame = ["aaaa", "bbbb", "cccc"]
        writer.render(frame)
        writer.clear()
        assert term.stream.getvalue().endswith(term.home + term.clear)
        assert writer.render(frame) == 3

    def test_restore_shows_cursor(self, writer, term):
        writer.render(["aaaa", "bbbb", "cccc"])
        writer.restore()
        assert term.stream.getvalue().endswith(term.normal_cursor)


class TestCenterLines:
    def test_exact_fit_passes_through(self, writer):
        frame = ["aaaa", "bbbb", "cccc"]
        assert writer.center_lines(frame) == frame

    def test_pads_vertically_and_horizontally(self, term):
        writer = ScreenWriter(term, with_border=False)
        writer.update_size(rows=5, columns=6)
        assert writer.center_lines(["ab"]) == [
            "      ", "      ", "  ab  ", "      ", "      ",
        ]

    def test_odd_vertical_padding_goes_below(self, term):
        writer = ScreenWriter(term, with_border=False)
        writer.update_size(rows=5, columns=2)
        centered = writer.center_lines(["ab", "cd"])
        assert centered == ["  ", "ab", "cd", "  ", "  "]

    def test_uses_fill_char(self, term):
        writer = ScreenWriter(term, with_border=False, fill_char=".")
        writer.update_size(rows=3, columns=5)
        assert writer.center_lines(["ab"]) == [".....", ".ab..", "....."]

    def test_render_centers_small_frame(self, term):
        writer = ScreenWriter(term, with_border=False)
        writer.update_size(rows=4, columns=4)
        assert writer.render(["xx"]) == 4


class TestCenterString:
    def test_exact_width_unchanged(self, writer, term):
        styled = term.red("abcd")
        assert writer.center_string(styled, 4) == styled

    def test_floor_left_ceil_right(self, writer):
        assert writer.center_string("ab", 5, "-") == "-ab--"
        assert writer.center_string("ab", 6, "-") == "--ab--"

    def test_stripping_fill_recovers_text(self, writer):
        assert writer.center_string("hello", 12, "*").strip("*") == "hello"

    def test_styled_text_measured_by_visible_width(self, writer, term):
        styled = term.green("ab")
        centered = writer.center_string(styled, 4)
        assert centered == " " + styled + " "

    def test_defaults_to_screen_width(self, writer):
        assert writer.center_string("ab") == " ab "

    def test_truncates_long_text(self, writer):
        assert writer.center_string("abcdef", 3) == "abc"

    def test_truncation_drops_styling(self, writer, term):
        # Truncation works on the stripped text, so colors are lost.
        assert writer.center_string(term.red("abcdef"), 3) == "abc"

    @pytest.mark.parametrize("width", [0, -1])
    def test_non_positive_width_raises(self, writer, width):
        with pytest.raises(ValueError, match="bigger than 0"):
            writer.center_string("ab", width)


class TestBorder:
    def test_usable_size_excludes_border(self, term):
        writer = ScreenWriter(term)
        assert writer.update_size(rows=5, columns=6) == (3, 4)
        assert writer.rows == 3
        assert writer.columns == 4

    def test_no_border_uses_full_size(self, writer):
        assert not writer.border
        assert (writer.rows, writer.columns) == (3, 4)

    def test_border_disabled_without_colors(self, term):
        writer = ScreenWriter(term, border_color=None, border_bg_color=None)
        assert not writer.border

    def test_add_border(self, term):
        writer = ScreenWriter(term)
        framed = writer.add_border(["ab", "cd"])
        assert _visible(term, framed) == ["┌──┐", "│ab│", "│cd│", "└──┘"]

    def test_border_measures_visible_width(self, term):
        writer = ScreenWriter(term)
        framed = writer.add_border([term.on_red("ab")])
        assert term.strip_seqs(framed[0]) == "┌──┐"

    def test_render_with_border_fills_screen(self, term):
        writer = ScreenWriter(term)
        writer.update_size(rows=4, columns=4)
        assert writer.render(["ab", "cd"]) == 4
        assert writer.render(["ab", "ce"]) == 1


class TestOptions:
    @pytest.mark.parametrize("fill_char", ["", "ab"])
    def test_fill_char_must_be_single(self, term, fill_char):
        with pytest.raises(ValueError, match="exactly one"):
            ScreenWriter(term, fill_char=fill_char)
