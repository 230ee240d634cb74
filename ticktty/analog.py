"""ASCII analog clock face."""

import math
from dataclasses import dataclass
from enum import Enum, auto
from typing import List, Tuple

from .formatting import TimePoint, is_duration, split_duration
from .styling import paint

SIZE_Y = 45
SIZE_X = 90
RADIUS = 21
# Terminal cells are about twice as tall as they are wide.
X_SCALE = 2

CENTER_Y = SIZE_Y // 2
CENTER_X = SIZE_X // 2

# Numerals in angular order, starting at 3 o'clock.
NUMERALS = [3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 1, 2]


class GlyphSet(Enum):
    """Characters used for dial marks and hands."""
    STANDARD = auto()
    EXTENDED = auto()


@dataclass(frozen=True)
class Glyphs:
    dial_hour: str
    dial_minute: str
    dial_other: str
    hand_hour: str
    hand_minute: str
    hand_second: str
    center: str


GLYPHS = {
    GlyphSet.STANDARD: Glyphs(
        dial_hour="●",
        dial_minute="•",
        dial_other="·",
        hand_hour="█",
        hand_minute="●",
        hand_second="·",
        center="⊕",
    ),
    # Nerd Font private-use codepoints
    GlyphSet.EXTENDED: Glyphs(
        dial_hour="\uf111",
        dial_minute="\uf192",
        dial_other="·",
        hand_hour="█",
        hand_minute="\uf111",
        hand_second="\uf192",
        center="\uf017",
    ),
}


@dataclass(frozen=True)
class Hand:
    """One clock hand: position is value/total of a full turn."""

    value: float
    total: int
    length_ratio: float
    char: str
    style: str


def _round(value: float) -> int:
    """Round half up."""
    return math.floor(value + 0.5)


def hand_values(time_point: TimePoint, is_timer: bool) -> Tuple[int, int, int]:
    """The (hours 0-11, minutes, seconds) the hands should show."""
    if is_timer and is_duration(time_point):
        hours, minutes, seconds = split_duration(time_point)
        return hours % 12, minutes, seconds
    if not is_timer and not is_duration(time_point):
        return time_point.hour % 12, time_point.minute, time_point.second
    return 0, 0, 0


class ClockFace:
    """A SIZE_Y x SIZE_X grid of styled cells, built fresh for each frame."""

    def __init__(self) -> None:
        self.rows: List[List[str]] = [[" "] * SIZE_X for _ in range(SIZE_Y)]

    def put(self, y: int, x: int, cell: str) -> None:
        if 0 <= y < SIZE_Y and 0 <= x < SIZE_X:
            self.rows[y][x] = cell

    def polar(self, angle: float, r: float) -> Tuple[int, int]:
        """Grid (y, x) for a radius along an angle in radians."""
        y = _round(CENTER_Y + math.sin(angle) * r)
        x = _round(CENTER_X + math.cos(angle) * r * X_SCALE)
        return y, x

    def draw_dial(self, glyphs: Glyphs) -> None:
        for degrees in range(0, 360, 2):
            y, x = self.polar(math.radians(degrees), RADIUS)
            if degrees % 30 == 0:
                self.put(y, x, paint(glyphs.dial_hour, "bold white"))
            elif degrees % 6 == 0:
                self.put(y, x, paint(glyphs.dial_minute, "bright_black"))
            else:
                self.put(y, x, paint(glyphs.dial_other, "dim"))

    def draw_numerals(self) -> None:
        for i, number in enumerate(NUMERALS):
            y, x = self.polar(math.radians(i * 30), RADIUS - 2)
            if not (0 <= y < SIZE_Y and 0 <= x < SIZE_X):
                continue
            if number > 9:
                # tens digit sits one column left of the units digit
                if x > 0:
                    self.put(y, x - 1, str(number // 10))
                self.put(y, x, str(number % 10))
            else:
                self.put(y, x, str(number))

    def draw_hand(self, hand: Hand) -> None:
        # zero points straight up, clockwise positive
        angle = (hand.value / hand.total) * 2 * math.pi - math.pi / 2
        length = RADIUS * hand.length_ratio
        cell = paint(hand.char, hand.style)
        for step in range(int(length / 0.5) + 1):
            y, x = self.polar(angle, step * 0.5)
            self.put(y, x, cell)

    def draw_center(self, glyphs: Glyphs) -> None:
        self.put(CENTER_Y, CENTER_X, paint(glyphs.center, "white"))

    def __str__(self) -> str:
        return "\n".join("".join(row) for row in self.rows)


def clock_hands(hours: int, minutes: int, seconds: int, glyphs: Glyphs) -> List[Hand]:
    """Hands in draw order; later hands overwrite earlier ones."""
    return [
        Hand(seconds, 60, 0.9, glyphs.hand_second, "blue"),
        Hand(minutes, 60, 0.75, glyphs.hand_minute, "bold green"),
        Hand(hours + minutes / 60, 12, 0.5, glyphs.hand_hour, "bold red"),
    ]


def render_analog(
    time_point: TimePoint,
    is_timer: bool,
    glyph_set: GlyphSet = GlyphSet.STANDARD,
    second_hand_on_top: bool = False,
) -> str:
    """Render the analog face for a wall-clock moment or a remaining duration.

    Args:
        time_point: A datetime in clock mode, remaining milliseconds in timer mode.
        is_timer: Whether time_point is a countdown duration.
        glyph_set: Which characters to draw marks and hands with.
        second_hand_on_top: Draw hour, minute, second instead of the default
            second, minute, hour, so the second hand wins overlaps.

    Returns:
        SIZE_Y lines of SIZE_X cells joined with newlines.
    """
    glyphs = GLYPHS[glyph_set]
    hours, minutes, seconds = hand_values(time_point, is_timer)

    face = ClockFace()
    face.draw_dial(glyphs)
    face.draw_numerals()

    hands = clock_hands(hours, minutes, seconds, glyphs)
    if second_hand_on_top:
        hands.reverse()
    for hand in hands:
        face.draw_hand(hand)

    face.draw_center(glyphs)
    return str(face)
