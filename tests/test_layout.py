"""Unit tests for layout.py."""

from datetime import datetime

import pytest
from ticktty.analog import GlyphSet
from ticktty.layout import (
    FOOTER_BASE,
    DisplayStyle,
    Renderer,
    compose_frame,
    fit_warning,
    footer_text,
)
from ticktty.styling import strip_styles
from ticktty.terminal import TerminalSize

TEN_AM = datetime(2023, 1, 1, 10, 0, 0)


def frame_lines(frame):
    return strip_styles(frame).split("\n")


def compose(fonts, time_point, style, rows=24, columns=80, label=None,
            font="x", is_paused=False, glyph_set=GlyphSet.STANDARD):
    return compose_frame(
        time_point, style, label, font, is_paused, glyph_set,
        TerminalSize(rows=rows, columns=columns), fonts,
    )


class TestTextStyle:
    """Test the plain text body and centering."""

    def test_clock_text(self, fonts):
        frame = compose(fonts, TEN_AM, "text")
        assert "10:00:00" in strip_styles(frame)

    def test_timer_with_label_and_pause(self, fonts):
        text = strip_styles(compose(fonts, 65000, "text", label="My Timer", is_paused=True))
        assert "00:01:05" in text
        assert "PAUSED" in text
        assert "My Timer" in text

    def test_frame_fills_terminal(self, fonts):
        lines = frame_lines(compose(fonts, TEN_AM, "text", rows=24, columns=80))
        assert len(lines) == 24

    def test_vertical_and_horizontal_centering(self, fonts):
        lines = frame_lines(compose(fonts, TEN_AM, "text", rows=24, columns=80))
        # one content line: (24 - 1 - 1) // 2 blank rows above it
        assert all(line == "" for line in lines[:11])
        assert lines[11] == " " * 34 + "  10:00:00  "

    def test_lines_centered_inside_block(self, fonts):
        lines = frame_lines(compose(fonts, 65000, "text", rows=24, columns=80, label="My Timer"))
        content = [line for line in lines[:-1] if line]
        assert content == [" " * 36 + "My Timer", " " * 34 + "  00:01:05  "]

    def test_tiny_terminal_clamps_padding(self, fonts):
        frame = compose(fonts, 65000, "text", rows=2, columns=10, label="My Timer", is_paused=True)
        lines = frame_lines(frame)
        # no room for padding above, below or to the left of the block
        assert len(lines) == 4
        assert lines[0].strip() == "My Timer"
        assert lines[2] == "  00:01:05  "
        assert lines[-1].startswith(FOOTER_BASE)


class TestStyleFallback:
    """Test downgrade to text on small terminals."""

    def test_digital_falls_back(self, fonts):
        text = strip_styles(compose(fonts, TEN_AM, "digital", rows=20, columns=40, font="wide"))
        assert "Terminal too small for digital clock with font 'wide'" in text
        assert "needs 62x4" in text
        assert "10:00:00" in text
        assert "Font:" not in text

    def test_analog_falls_back(self, fonts):
        text = strip_styles(compose(fonts, TEN_AM, "analog", rows=20, columns=40))
        assert "Terminal too small for large analog clock (needs 90x45)" in text
        assert "10:00:00" in text
        assert "⊕" not in text

    def test_digital_needs_two_spare_rows(self, fonts):
        # font "tall" is 6 rows high
        fits = strip_styles(compose(fonts, TEN_AM, "digital", rows=8, columns=80, font="tall"))
        too_short = strip_styles(compose(fonts, TEN_AM, "digital", rows=7, columns=80, font="tall"))
        assert "Font: tall" in fits
        assert "Terminal too small" in too_short

    @pytest.mark.parametrize(
        "columns, rows, falls_back",
        [(89, 45, True), (90, 44, True), (90, 45, False)],
    )
    def test_analog_size_limits(self, fonts, columns, rows, falls_back):
        size = TerminalSize(rows=rows, columns=columns)
        warning = fit_warning(DisplayStyle.ANALOG, "x", size, fonts)
        assert (warning is not None) == falls_back

    def test_text_never_falls_back(self, fonts):
        text = strip_styles(compose(fonts, TEN_AM, "text", rows=3, columns=5))
        assert "Terminal too small" not in text

    def test_footer_keeps_requested_style(self, fonts):
        lines = frame_lines(compose(fonts, TEN_AM, "analog", rows=20, columns=40))
        assert "g: Glyphs (OFF)" in lines[-1]


class TestDigitalAndAnalog:
    """Test full-size bodies."""

    def test_digital_body(self, fonts):
        lines = frame_lines(compose(fonts, TEN_AM, DisplayStyle.DIGITAL, rows=24, columns=80))
        assert any("1000" in line and "000000" in line for line in lines)
        assert any(line.strip() == "Font: x" for line in lines)

    def test_analog_body(self, fonts):
        text = strip_styles(compose(fonts, TEN_AM, "analog", rows=50, columns=100))
        assert "⊕" in text
        assert "12" in text
        assert "10:00:00" in text

    def test_analog_timer(self, fonts):
        text = strip_styles(compose(fonts, 65000, "analog", rows=50, columns=100, label="My Timer"))
        assert "●" in text
        assert "00:01:05" in text


class TestFooter:
    """Test context-sensitive key hints."""

    def test_timer_digital(self):
        text = footer_text(DisplayStyle.DIGITAL, True, GlyphSet.STANDARD)
        assert text.startswith(FOOTER_BASE)
        assert "f: Cycle Font" in text
        assert "r: Reset | space: Start/Pause" in text

    def test_clock_analog(self):
        text = footer_text(DisplayStyle.ANALOG, False, GlyphSet.EXTENDED)
        assert "g: Glyphs (ON)" in text
        assert "r: Reset" not in text
        assert "f: Cycle Font" not in text

    def test_text_clock(self):
        assert footer_text(DisplayStyle.TEXT, False, GlyphSet.STANDARD) == FOOTER_BASE

    def test_footer_centered_on_last_line(self, fonts):
        lines = frame_lines(compose(fonts, TEN_AM, "text", rows=24, columns=80))
        assert lines[-1] == " " * ((80 - len(FOOTER_BASE)) // 2) + FOOTER_BASE


class TestRenderer:
    """Test the repaint entry point."""

    def test_one_repaint_per_render(self, fonts):
        frames = []
        renderer = Renderer(frames.append, size=lambda: TerminalSize(24, 80), fonts=fonts)
        renderer.render(TEN_AM, "text")
        renderer.render(65000, "text", "My Timer", is_paused=True)
        assert len(frames) == 2
        assert "10:00:00" in strip_styles(frames[0])
        assert "PAUSED" in strip_styles(frames[1])

    def test_default_fonts(self):
        frames = []
        renderer = Renderer(frames.append, size=lambda: TerminalSize(50, 120))
        renderer.render(TEN_AM, "digital", None)
        assert "Font: standard" in strip_styles(frames[0])

    def test_rejects_unknown_style(self, fonts):
        renderer = Renderer(lambda frame: None, size=lambda: TerminalSize(24, 80), fonts=fonts)
        with pytest.raises(ValueError):
            renderer.render(TEN_AM, "sundial")
