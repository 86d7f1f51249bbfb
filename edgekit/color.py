"""Colour values: parsing CSS-style strings, interpolation and blending."""

from __future__ import annotations

import math
import re
import struct
from typing import NamedTuple


class Color(NamedTuple):
    """An 8-bit RGBA colour, not premultiplied."""

    r: int
    g: int
    b: int
    a: int = 255


COLOR_BLACK = Color(0, 0, 0)
COLOR_RED = Color(255, 0, 0)
COLOR_GREEN = Color(0, 255, 0)
COLOR_BLUE = Color(0, 0, 255)
COLOR_WHITE = Color(255, 255, 255)
COLOR_TRANSPARENT = Color(0, 0, 0, 0)


class ParseColorError(ValueError):
    """Raised when a colour string cannot be parsed."""


_INVALID_HEX = "invalid hex format"
_INVALID_FORMAT = "invalid color format"
_INT_INVALID_DIGIT = "parse int error: invalid digit found in string"
_INT_EMPTY = "parse int error: cannot parse integer from empty string"
_INT_TOO_LARGE = "parse int error: number too large to fit in target type"
_FLOAT_ERROR = "parse float error"

_RGB_RE = re.compile(
    r"rgba?\(\s*(\d+%?)\s*,\s*(\d+%?)\s*,\s*(\d+%?)\s*(?:,\s*([\d.]+%?)\s*)?\)",
    re.ASCII | re.IGNORECASE,
)
_HSL_RE = re.compile(
    r"hsla?\(\s*(\d+\.?\d*)\s*,\s*(\d+\.?\d*)%\s*,\s*(\d+\.?\d*)%\s*(?:,\s*([\d.]+%?)\s*)?\)",
    re.ASCII | re.IGNORECASE,
)

# byte length of the hex body -> (digits per colour channel, digits of alpha)
_HEX_LAYOUT = {
    3: (1, 0),
    4: (1, 1),
    6: (2, 0),
    8: (2, 2),
    9: (3, 0),
    12: (3, 3),
    16: (4, 4),
}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _f32(x: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", x))[0]
    except OverflowError:
        return math.copysign(math.inf, x)


def _round_saturating(x: float, upper: int) -> int:
    """Round half away from zero, then saturate into [0, upper]; NaN gives 0."""
    if math.isnan(x):
        return 0
    if x <= 0:
        return 0
    if math.isinf(x):
        return upper
    whole = math.floor(x)
    if x - whole >= 0.5:
        whole += 1
    return min(whole, upper)


def _round_u8(x: float) -> int:
    return _round_saturating(x, 255)


def parse_color(s: str) -> Color:
    """Parse ``#hex``, ``rgb()/rgba()`` or ``hsl()/hsla()`` notation."""
    text = s.strip().lower()
    if text.startswith("#"):
        return _parse_hex(text[1:])
    if text.startswith("rgb"):
        return _parse_rgb(text)
    if text.startswith("hsl"):
        return _parse_hsl(text)
    raise ParseColorError(_INVALID_FORMAT)


def _parse_hex(body: str) -> Color:
    layout = _HEX_LAYOUT.get(len(body.encode("utf-8")))
    if layout is None:
        raise ParseColorError(_INVALID_HEX)
    digits, alpha_digits = layout
    r, g, b = (
        _parse_hex_component(body[start : start + digits], digits)
        for start in (0, digits, 2 * digits)
    )
    if alpha_digits:
        a = _parse_hex_component(body[3 * digits : 3 * digits + alpha_digits], alpha_digits)
    else:
        a = 255
    return Color(r, g, b, a)


def _parse_hex_component(text: str, digits: int) -> int:
    if not text:
        raise ParseColorError(_INT_EMPTY)
    body = text[1:] if text.startswith("+") else text
    if not body or not set(body) <= _HEX_DIGITS:
        raise ParseColorError(_INT_INVALID_DIGIT)
    value = int(body, 16)
    max_val = (1 << (digits * 4)) - 1
    scaled = _f32(_f32(_f32(value) * 255.0) / _f32(max_val))
    return _round_u8(scaled)


def _parse_float(text: str) -> float:
    try:
        return _f32(float(text))
    except ValueError:
        raise ParseColorError(_FLOAT_ERROR) from None


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(value, high))


def _percent_to_byte(text: str) -> int:
    value = _clamp(_parse_float(text), 0.0, 100.0)
    return _round_u8(_f32(value * _f32(2.55)))


def _parse_percent_or_byte(text: str) -> int:
    if text.endswith("%"):
        return _percent_to_byte(text[:-1])
    if not text:
        raise ParseColorError(_INT_EMPTY)
    if not text.isdigit() or not text.isascii():
        raise ParseColorError(_INT_INVALID_DIGIT)
    value = int(text)
    if value > 255:
        raise ParseColorError(_INT_TOO_LARGE)
    return value


def _parse_alpha(text: str) -> int:
    if text.endswith("%"):
        return _percent_to_byte(text[:-1])
    value = _clamp(_parse_float(text), 0.0, 1.0)
    return _round_u8(_f32(value * 255.0))


def _parse_rgb(text: str) -> Color:
    match = _RGB_RE.fullmatch(text)
    if match is None:
        raise ParseColorError(_INVALID_FORMAT)
    red, green, blue, alpha = match.groups()
    return Color(
        _parse_percent_or_byte(red),
        _parse_percent_or_byte(green),
        _parse_percent_or_byte(blue),
        _parse_alpha(alpha) if alpha is not None else 255,
    )


def _parse_hsl(text: str) -> Color:
    match = _HSL_RE.fullmatch(text)
    if match is None:
        raise ParseColorError(_INVALID_FORMAT)
    hue_text, sat_text, light_text, alpha = match.groups()

    hue = _parse_float(hue_text)
    hue = math.nan if math.isinf(hue) else _f32(math.fmod(hue, 360.0))
    saturation = _f32(_clamp(_parse_float(sat_text), 0.0, 100.0) / 100.0)
    lightness = _f32(_clamp(_parse_float(light_text), 0.0, 100.0) / 100.0)

    alpha_value = _parse_alpha(alpha) if alpha is not None else 255
    r, g, b = _hsl_to_rgb(hue, saturation, lightness)
    return Color(r, g, b, alpha_value)


def _hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    c = _f32(_f32(1.0 - abs(_f32(_f32(2.0 * l) - 1.0))) * s)
    sector = _f32(math.fmod(_f32(h / 60.0), 2.0))
    x = _f32(c * _f32(1.0 - abs(_f32(sector - 1.0))))
    m = _f32(l - _f32(c / 2.0))

    if 0.0 <= h < 60.0:
        rgb = (c, x, 0.0)
    elif 60.0 <= h < 120.0:
        rgb = (x, c, 0.0)
    elif 120.0 <= h < 180.0:
        rgb = (0.0, c, x)
    elif 180.0 <= h < 240.0:
        rgb = (0.0, x, c)
    elif 240.0 <= h < 300.0:
        rgb = (x, 0.0, c)
    else:
        rgb = (c, 0.0, x)

    red, green, blue = (_round_u8(_f32(_f32(v + m) * 255.0)) for v in rgb)
    return red, green, blue


def color_transition(start: Color, end: Color, t: float) -> Color:
    """Interpolate from ``start`` to ``end``; ``t`` is clamped to [0, 1]."""
    t = _f32(t)
    if t <= 0.0:
        return start
    if t >= 1.0:
        return end
    n = _round_saturating(_f32(t * 256.0), 0xFFFF)
    return Color(
        *(((s * (256 - n) + e * n + 128) >> 8) & 0xFF for s, e in zip(start, end))
    )


def color_mix(one: Color, two: Color) -> Color:
    """Composite ``one`` over ``two`` (source-over)."""
    a1 = one.a / 255.0
    a2 = two.a / 255.0
    a = 1.0 - (1.0 - a1) * (1.0 - a2)
    if a == 0.0:
        return COLOR_TRANSPARENT

    def channel(c1: int, c2: int) -> int:
        v1 = c1 / 255.0
        v2 = c2 / 255.0
        return _round_u8((v1 * a1 + v2 * a2 * (1.0 - a1)) / a * 255.0)

    return Color(
        channel(one.r, two.r),
        channel(one.g, two.g),
        channel(one.b, two.b),
        _round_u8(a * 255.0),
    )