"""Frame layout: style fallback, centering and the footer line."""

import logging
from enum import Enum
from typing import Callable, List, Optional, Union

from .analog import SIZE_X as ANALOG_MIN_COLUMNS
from .analog import SIZE_Y as ANALOG_MIN_ROWS
from .analog import GlyphSet, render_analog
from .digital import render_digital
from .fonts import DEFAULT_FONT, FontMetricsCache
from .formatting import TimePoint, format_time_point, is_duration
from .styling import paint, visible_len
from .terminal import TerminalSize, get_size

logger = logging.getLogger(__name__)

FOOTER_HEIGHT = 1
FOOTER_BASE = "q: Quit | d: Digital | a: Analog | t: Text"
FOOTER_TIMER = " | r: Reset | space: Start/Pause"


class DisplayStyle(Enum):
    """Visual style of the clock body."""
    DIGITAL = "digital"
    ANALOG = "analog"
    TEXT = "text"


StyleLike = Union[DisplayStyle, str]


def footer_text(style: DisplayStyle, is_timer: bool, glyph_set: GlyphSet) -> str:
    """Key hints for the requested style, even when the body fell back to text."""
    text = FOOTER_BASE
    if style is DisplayStyle.DIGITAL:
        text += " | f: Cycle Font"
    elif style is DisplayStyle.ANALOG:
        state = "ON" if glyph_set is GlyphSet.EXTENDED else "OFF"
        text += f" | g: Glyphs ({state})"
    if is_timer:
        text += FOOTER_TIMER
    return text


def fit_warning(
    style: DisplayStyle, font: str, size: TerminalSize, fonts: FontMetricsCache
) -> Optional[str]:
    """Warning text when the terminal cannot hold the style, else None."""
    if style is DisplayStyle.DIGITAL:
        metrics = fonts.metrics_for(font)
        if size.columns < metrics.required_width or size.rows < metrics.height + 2:
            return (
                f"Terminal too small for digital clock with font '{font}' "
                f"(needs {metrics.required_width}x{metrics.height}), switching to text."
            )
    elif style is DisplayStyle.ANALOG:
        if size.columns < ANALOG_MIN_COLUMNS or size.rows < ANALOG_MIN_ROWS:
            return (
                f"Terminal too small for large analog clock "
                f"(needs {ANALOG_MIN_COLUMNS}x{ANALOG_MIN_ROWS}), switching to text."
            )
    return None


def body_lines(
    style: DisplayStyle,
    time_point: TimePoint,
    text: str,
    font: str,
    glyph_set: GlyphSet,
    fonts: FontMetricsCache,
) -> List[str]:
    if style is DisplayStyle.DIGITAL:
        art = render_digital(text, font, fonts)
        lines = [paint(line, "green") for line in art.split("\n")]
        lines.append(paint(f"Font: {font}", "dim"))
        return lines
    if style is DisplayStyle.ANALOG:
        art = render_analog(time_point, is_duration(time_point), glyph_set)
        return art.split("\n") + [paint(text, "bold")]
    return [paint(f"  {text}  ", "bold white on black")]


def compose_frame(
    time_point: TimePoint,
    style: StyleLike,
    label: Optional[str],
    font: str,
    is_paused: bool,
    glyph_set: GlyphSet,
    size: TerminalSize,
    fonts: FontMetricsCache,
) -> str:
    """Build one full-screen frame.

    The content block (label, pause banner, fit warning, body) is centered
    as a unit: a single left offset is computed from its widest line and
    each line is then centered inside the block, so the block edge does not
    shift when individual lines change width. The footer is centered on its
    own against the full terminal width and occupies the last row.

    Args:
        time_point: A datetime for clock mode or remaining milliseconds for
            timer mode.
        style: Requested display style; falls back to text when the
            terminal is too small for it.
        label: Optional line shown above the body.
        font: Figlet font for the digital style.
        is_paused: Show the PAUSED banner.
        glyph_set: Characters for the analog face.
        size: Terminal dimensions to lay out against.
        fonts: Metrics and glyph cache for figlet fonts.

    Returns:
        The frame text, with no trailing newline.
    """
    style = DisplayStyle(style)
    is_timer = is_duration(time_point)
    text = format_time_point(time_point)

    lines: List[str] = []
    if label:
        lines.append(paint(label, "cyan"))
    if is_paused:
        lines.append(paint(" PAUSED ", "bold white on red"))

    effective = style
    warning = fit_warning(style, font, size, fonts)
    if warning is not None:
        logger.debug("Falling back to text: %s", warning)
        lines.append(paint(warning, "yellow"))
        effective = DisplayStyle.TEXT

    lines.extend(body_lines(effective, time_point, text, font, glyph_set, fonts))

    widths = [visible_len(line) for line in lines]
    content_height = len(lines)
    content_width = max(widths)

    top_pad = max(0, (size.rows - FOOTER_HEIGHT - content_height) // 2)
    block_left = (size.columns - content_width) // 2

    out = ["\n" * top_pad]
    for line, width in zip(lines, widths):
        pad = max(0, block_left + (content_width - width) // 2)
        out.append(" " * pad + line + "\n")

    bottom_pad = size.rows - FOOTER_HEIGHT - (top_pad + content_height)
    out.append("\n" * max(0, bottom_pad))

    footer = footer_text(style, is_timer, glyph_set)
    footer_pad = max(0, (size.columns - visible_len(footer)) // 2)
    out.append(" " * footer_pad + paint(footer, "dim"))
    return "".join(out)


class Renderer:
    """Renders frames and hands them to a repaint sink.

    Holds no display state of its own; everything that changes between
    frames is passed to ``render``. The font cache is built once here (or
    injected) and lives as long as the renderer.
    """

    def __init__(
        self,
        sink: Callable[[str], None],
        size: Callable[[], TerminalSize] = get_size,
        fonts: Optional[FontMetricsCache] = None,
    ) -> None:
        self.sink = sink
        self.size = size
        self.fonts = fonts if fonts is not None else FontMetricsCache()

    def render(
        self,
        time_point: TimePoint,
        style: StyleLike,
        label: Optional[str] = None,
        font: str = DEFAULT_FONT,
        is_paused: bool = False,
        glyph_set: GlyphSet = GlyphSet.STANDARD,
    ) -> None:
        """Repaint the whole screen with one frame."""
        frame = compose_frame(
            time_point, style, label, font, is_paused, glyph_set, self.size(), self.fonts
        )
        self.sink(frame)
