"""Rendering text into premultiplied ARGB32 pixel buffers."""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from PIL import Image, ImageDraw, ImageFont

from edgekit.color import Color
from edgekit.draw import pre_multiply_and_to_little_endian_argb

log = logging.getLogger(__name__)


class Canvas:
    """A width x height buffer of premultiplied BGRA pixels, row-major."""

    def __init__(self, width: int, height: int) -> None:
        self.width = max(width, 0)
        self.height = max(height, 0)
        self.stride = self.width * 4
        self.data = bytearray(self.width * self.height * 4)

    def set_pixel_color(self, color: Color, x: int, y: int) -> None:
        """Store ``color`` at ``(x, y)``; offsets outside the buffer are ignored."""
        start = self.stride * y + x * 4
        if start < 0 or start > len(self.data) - 4:
            return
        self.data[start : start + 4] = pre_multiply_and_to_little_endian_argb(color)


@dataclass(frozen=True)
class TextConfig:
    """Font family, weight, colour and pixel size of rendered text."""

    family: Optional[str]
    weight: Optional[int]
    color: Color
    size: int


def _apply_weight(font, weight: int) -> None:
    try:
        axes = font.get_variation_axes()
    except (AttributeError, OSError):
        return
    values = []
    for axis in axes:
        name = axis.get("name")
        if name in (b"Weight", "Weight"):
            values.append(max(axis["minimum"], min(weight, axis["maximum"])))
        else:
            values.append(axis.get("default", axis["minimum"]))
    try:
        font.set_variation_by_axes(values)
    except OSError:
        log.debug("could not apply font weight %s", weight)


@lru_cache(maxsize=32)
def _load_font(family: Optional[str], weight: Optional[int], size: int):
    font = None
    if family:
        try:
            font = ImageFont.truetype(family, size)
        except OSError:
            log.debug("font family %r not found, using default", family)
    if font is None:
        try:
            font = ImageFont.load_default(size=size)
        except TypeError:
            font = ImageFont.load_default()
    if weight is not None:
        _apply_weight(font, weight)
    return font


def _layout(font, lines: list[str], size: int) -> tuple[list[float], int, int]:
    ascent, descent = font.getmetrics()
    first = (size + ascent - descent) / 2
    baselines = [first + index * size for index, _ in enumerate(lines)]
    width = max(font.getlength(line) for line in lines)
    last = lines[-1]
    below = max(0, font.getbbox(last, anchor="ls")[3]) if last else 0
    height = baselines[-1] + below
    return baselines, max(math.ceil(width), 0), max(math.ceil(height), 0)


def draw_text(text: str, config: TextConfig) -> Canvas:
    """Render ``text`` with ``config`` into a tightly sized canvas."""
    font = _load_font(config.family, config.weight, config.size)
    lines = text.split("\n")
    baselines, width, height = _layout(font, lines, config.size)
    canvas = Canvas(width, height)
    if width == 0 or height == 0:
        return canvas

    mask = Image.new("L", (width, height), 0)
    pen = ImageDraw.Draw(mask)
    for line, baseline in zip(lines, baselines):
        if line:
            pen.text((0, baseline), line, font=font, fill=255, anchor="ls")

    color = config.color
    for index, coverage in enumerate(mask.tobytes()):
        if not coverage:
            continue
        alpha = round(color.a * coverage / 255)
        if alpha == 0:
            continue
        y, x = divmod(index, width)
        canvas.set_pixel_color(Color(color.r, color.g, color.b, alpha), x, y)
    return canvas