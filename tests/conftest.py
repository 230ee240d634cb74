"""Shared fixtures: a predictable stand-in for figlet and a fake clock."""

import pytest

from ticktty.fonts import FontMetricsCache, GlyphBlockCache

# Rows per font; anything else is 4 rows tall.
FONT_HEIGHTS = {"tall": 6}
# Columns per character; "1" and ":" are always one column.
FONT_WIDTHS = {"wide": 10}


def fake_figlet(text, font):
    """Render each character as a run of itself, repeated on every row."""
    height = FONT_HEIGHTS.get(font, 4)
    width = FONT_WIDTHS.get(font, 3)
    row = "".join(ch if ch in "1:" else ch * width for ch in text)
    return "\n".join([row] * height) + "\n"


class CountingFiglet:
    def __init__(self):
        self.calls = []

    def __call__(self, text, font):
        self.calls.append((text, font))
        return fake_figlet(text, font)


class FakeClock:
    """Monotonic seconds that only move when told to."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


@pytest.fixture
def figlet():
    return CountingFiglet()


@pytest.fixture
def fonts(figlet):
    return FontMetricsCache(GlyphBlockCache(render=figlet))


@pytest.fixture
def clock():
    return FakeClock()
