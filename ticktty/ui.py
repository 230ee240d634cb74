"""Textual-based full-screen UI for the clock and timer."""

import logging
import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum, auto
from typing import Callable, Optional

from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.timer import Timer
from textual.widgets import Static

from .analog import GlyphSet
from .config import Config, save_config
from .fonts import FONTS
from .formatting import TimePoint
from .layout import DisplayStyle, Renderer
from .scheduler import Countdown
from .terminal import TerminalSize, get_size

logger = logging.getLogger(__name__)

TICK_SECONDS = 0.1
DEFAULT_LABEL = "Timer"
FINISHED = "finished"


class Mode(Enum):
    """What the app is showing."""
    CLOCK = auto()
    TIMER = auto()


@dataclass
class AppState:
    """Display preferences the user can change while the app runs."""

    mode: Mode = Mode.CLOCK
    style: DisplayStyle = DisplayStyle.DIGITAL
    font_index: int = 0
    use_glyphs: bool = False
    label: str = DEFAULT_LABEL

    @property
    def font(self) -> str:
        return FONTS[self.font_index % len(FONTS)]

    @property
    def glyph_set(self) -> GlyphSet:
        return GlyphSet.EXTENDED if self.use_glyphs else GlyphSet.STANDARD

    def to_config(self) -> Config:
        return Config(
            style=self.style.value,
            font_index=self.font_index,
            use_glyphs=self.use_glyphs,
        )


class FrameView(Static):
    """The whole screen, repainted one frame at a time."""

    def __init__(self, **kwargs) -> None:
        super().__init__(**kwargs)
        self.last_frame = ""

    def paint_frame(self, frame: str) -> None:
        self.last_frame = frame
        self.update(Text.from_ansi(frame, no_wrap=True, overflow="crop"))


class TickApp(App):
    """Clock and countdown timer application."""

    CSS_PATH = "ticktty.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("ctrl+c", "quit", "Quit", priority=True),
        Binding("d", "set_style('digital')", "Digital"),
        Binding("a", "set_style('analog')", "Analog"),
        Binding("t", "set_style('text')", "Text"),
        Binding("f", "cycle_font", "Cycle Font"),
        Binding("g", "toggle_glyphs", "Glyphs"),
        Binding("r", "reset", "Reset"),
        Binding("space", "toggle", "Start/Pause"),
    ]

    def __init__(
        self,
        state: AppState,
        duration_ms: Optional[int] = None,
        save: Callable[[Config], None] = save_config,
        clock: Callable[[], float] = time.monotonic,
        now: Callable[[], datetime] = datetime.now,
    ) -> None:
        super().__init__()
        self.state = state
        self.duration_ms = duration_ms
        self._save = save
        self._clock = clock
        self._now = now
        self.countdown: Optional[Countdown] = None
        self.renderer = Renderer(sink=self._paint, size=self._terminal_size)
        self._tick_timer: Optional[Timer] = None

    @property
    def is_timer(self) -> bool:
        return self.state.mode is Mode.TIMER

    def compose(self) -> ComposeResult:
        yield FrameView(id="frame")

    def on_mount(self) -> None:
        if self.is_timer:
            self.countdown = Countdown(self.duration_ms, clock=self._clock)
        self._tick_timer = self.set_interval(TICK_SECONDS, self._tick)
        self._tick()

    def _terminal_size(self) -> TerminalSize:
        width, height = self.size
        if not width or not height:
            return get_size()
        return TerminalSize(rows=height, columns=width)

    def _paint(self, frame: str) -> None:
        self.query_one("#frame", FrameView).paint_frame(frame)

    def _render(self, time_point: TimePoint, label: Optional[str], is_paused: bool = False) -> None:
        self.renderer.render(
            time_point,
            self.state.style,
            label,
            self.state.font,
            is_paused,
            self.state.glyph_set,
        )

    def _tick(self) -> None:
        """Called every TICK_SECONDS while not paused."""
        if not self.is_timer:
            self._render(self._now(), None)
            return

        if self.countdown.tick():
            self._finish()
            return
        if not self.countdown.is_paused:
            self._render(self.countdown.remaining_ms(), self.state.label)

    def _refresh_frame(self) -> None:
        """Repaint now, so preference changes show while paused."""
        if self.is_timer and self.countdown.is_paused:
            self._render(self.countdown.remaining_ms(), self.state.label, is_paused=True)
        else:
            self._tick()

    def _finish(self) -> None:
        """Show the final zero frame and exit."""
        self._tick_timer.stop()
        self._render(0, self.state.label)
        logger.info("Timer %r finished", self.state.label)
        self.exit(FINISHED)

    def _save_state(self) -> None:
        self._save(self.state.to_config())

    def action_set_style(self, style: str) -> None:
        """Switch display style."""
        new_style = DisplayStyle(style)
        if new_style is self.state.style:
            return
        self.state.style = new_style
        self._save_state()
        self._refresh_frame()

    def action_cycle_font(self) -> None:
        """Next figlet font, digital style only."""
        if self.state.style is not DisplayStyle.DIGITAL:
            return
        self.state.font_index = (self.state.font_index + 1) % len(FONTS)
        self._save_state()
        self._refresh_frame()

    def action_toggle_glyphs(self) -> None:
        """Toggle Nerd Font glyphs, analog style only."""
        if self.state.style is not DisplayStyle.ANALOG:
            return
        self.state.use_glyphs = not self.state.use_glyphs
        self._save_state()
        self._refresh_frame()

    def action_toggle(self) -> None:
        """Pause or resume the timer."""
        if not self.is_timer:
            return
        self.countdown.toggle()
        if self.countdown.is_paused:
            self._tick_timer.pause()
            logger.debug("Paused with %.0f ms left", self.countdown.remaining_ms())
        else:
            self._tick_timer.resume()
        self._refresh_frame()

    def action_reset(self) -> None:
        """Restart the timer from its full duration."""
        if not self.is_timer:
            return
        self.countdown.reset()
        self._tick_timer.resume()
        self._tick()


def run_ui(state: AppState, duration_ms: Optional[int] = None) -> Optional[str]:
    """Run the UI until the user quits or the timer finishes.

    Args:
        state: Initial display preferences and mode.
        duration_ms: Countdown length for timer mode.

    Returns:
        FINISHED if the timer ran out, otherwise None.
    """
    app = TickApp(state, duration_ms)
    return app.run()
