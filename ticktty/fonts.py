"""Figlet fonts and the glyph caches behind the digital display."""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

import pyfiglet

logger = logging.getLogger(__name__)

# Cycled in order with the "f" key. Names are pyfiglet font names.
FONTS = [
    "standard",
    "slant",
    "small",
    "big",
    "banner",
    "larry3d",
    "doom",
]
DEFAULT_FONT = FONTS[0]

SEPARATOR = ":"

# Every two-digit value a minutes or seconds field can show.
DIGIT_PAIRS = tuple(f"{i:02d}" for i in range(60))

FigletRenderer = Callable[[str, str], str]


def figlet_text(text: str, font: str) -> str:
    """Render text in a large figlet font."""
    return pyfiglet.figlet_format(text, font=font, width=200)


@dataclass(frozen=True)
class FontMetrics:
    """Worst-case footprint of a font's digit pairs and separator."""

    block_width: int
    sep_width: int
    height: int

    @property
    def required_width(self) -> int:
        """Columns needed for HH:MM:SS."""
        return 3 * self.block_width + 2 * self.sep_width


class GlyphBlockCache:
    """Rendered figlet lines per (font, text) pair.

    Entries are created on first use and never invalidated.
    """

    def __init__(self, render: FigletRenderer = figlet_text) -> None:
        self._render = render
        self._blocks: Dict[Tuple[str, str], Tuple[str, ...]] = {}

    def __len__(self) -> int:
        return len(self._blocks)

    def block_for(self, text: str, font: str) -> Tuple[str, ...]:
        key = (font, text)
        block = self._blocks.get(key)
        if block is None:
            art = self._render(text, font)
            block = tuple(art.rstrip("\n").split("\n"))
            self._blocks[key] = block
        return block


class FontMetricsCache:
    """Lazily measured FontMetrics, one entry per font.

    Measuring a font renders all sixty digit pairs plus the separator, so
    the cost is paid once per font; the rendered blocks stay in ``blocks``
    for the digital renderer to reuse.
    """

    def __init__(self, blocks: Optional[GlyphBlockCache] = None) -> None:
        self.blocks = blocks if blocks is not None else GlyphBlockCache()
        self._metrics: Dict[str, FontMetrics] = {}

    def metrics_for(self, font: str) -> FontMetrics:
        metrics = self._metrics.get(font)
        if metrics is not None:
            return metrics

        block_width = 0
        height = 0
        for pair in DIGIT_PAIRS:
            lines = self.blocks.block_for(pair, font)
            height = max(height, len(lines))
            block_width = max(block_width, max(len(line) for line in lines))

        sep_lines = self.blocks.block_for(SEPARATOR, font)
        sep_width = max(len(line) for line in sep_lines)
        height = max(height, len(sep_lines))

        metrics = FontMetrics(block_width=block_width, sep_width=sep_width, height=height)
        logger.debug("Measured font %s: %s", font, metrics)
        self._metrics[font] = metrics
        return metrics
