"""Large block-digit rendering of HH:MM:SS."""

from typing import List, Sequence

from .fonts import SEPARATOR, FontMetricsCache


def pad_block(lines: Sequence[str], width: int, height: int) -> List[str]:
    """Center every line of a glyph block in ``width`` columns.

    Missing rows are filled with blanks so the block is exactly ``height``
    lines tall. Odd padding puts the extra space on the right.
    """
    padded = []
    for i in range(height):
        line = lines[i] if i < len(lines) else ""
        pad = max(0, width - len(line))
        left = pad // 2
        padded.append(" " * left + line + " " * (pad - left))
    return padded


def render_digital(text: str, font: str, fonts: FontMetricsCache) -> str:
    """Render an "HH:MM:SS" string as aligned figlet art.

    Digit pairs are padded to the widest pair the font can produce, so the
    display keeps its width from one second to the next.
    """
    metrics = fonts.metrics_for(font)
    hours, minutes, seconds = text.split(":")

    def block(part: str, width: int) -> List[str]:
        return pad_block(fonts.blocks.block_for(part, font), width, metrics.height)

    h_block = block(hours, metrics.block_width)
    m_block = block(minutes, metrics.block_width)
    s_block = block(seconds, metrics.block_width)
    sep_block = block(SEPARATOR, metrics.sep_width)

    return "\n".join(
        h + sep + m + sep + s
        for h, sep, m, s in zip(h_block, sep_block, m_block, s_block)
    )
