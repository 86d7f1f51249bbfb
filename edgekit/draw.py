"""Path construction and raw ARGB32 pixel-buffer helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Sequence, Tuple


class PathOpKind(Enum):
    """The kind of a path operation."""

    MOVE_TO = "move_to"
    LINE_TO = "line_to"
    ARC = "arc"
    CLOSE_PATH = "close_path"


@dataclass(frozen=True)
class PathOp:
    """One step of a vector path.

    ``MOVE_TO``/``LINE_TO`` take ``(x, y)``; ``ARC`` takes
    ``(cx, cy, radius, angle1, angle2)`` in radians; ``CLOSE_PATH`` takes nothing.
    """

    kind: PathOpKind
    args: Tuple[float, ...] = ()


def _move_to(x: float, y: float) -> PathOp:
    return PathOp(PathOpKind.MOVE_TO, (float(x), float(y)))


def _line_to(x: float, y: float) -> PathOp:
    return PathOp(PathOpKind.LINE_TO, (float(x), float(y)))


def _arc(cx: float, cy: float, radius: float, angle1: float, angle2: float) -> PathOp:
    return PathOp(
        PathOpKind.ARC,
        (float(cx), float(cy), float(radius), float(angle1), float(angle2)),
    )


_CLOSE = PathOp(PathOpKind.CLOSE_PATH)


def draw_rect_path(
    radius: float, size: Tuple[float, float], corners: Sequence[bool]
) -> list[PathOp]:
    """Build a rectangle path whose selected corners are rounded.

    ``corners`` are top-left, top-right, bottom-right, bottom-left.
    """
    width, height = size
    top_left, top_right, bottom_right, bottom_left = corners
    pi = math.pi

    ops = [_move_to(0.0, radius)]

    if top_left:
        ops.append(_arc(radius, radius, radius, pi, 1.5 * pi))
    else:
        ops.append(_line_to(0.0, 0.0))
    ops.append(_line_to(width - radius, 0.0))

    if top_right:
        ops.append(_arc(width - radius, radius, radius, 1.5 * pi, 2.0 * pi))
    else:
        ops.append(_line_to(width, 0.0))
    ops.append(_line_to(width, height - radius))

    if bottom_right:
        ops.append(_arc(width - radius, height - radius, radius, 0.0, 0.5 * pi))
    else:
        ops.append(_line_to(width, height))
    ops.append(_line_to(radius, height))

    if bottom_left:
        ops.append(_arc(radius, height - radius, radius, 0.5 * pi, pi))
    else:
        ops.append(_line_to(0.0, height))
    ops.append(_line_to(0.0, radius))

    ops.append(_CLOSE)
    return ops


def draw_fan(
    point: Tuple[float, float], radius: float, start: float, end: float
) -> list[PathOp]:
    """Build a pie-slice path; ``start`` and ``end`` are multiples of pi."""
    x, y = point
    return [
        _arc(x, y, radius, start * math.pi, end * math.pi),
        _line_to(x, y),
        _CLOSE,
    ]


def copy_pixmap(
    src: bytes,
    src_width: int,
    src_height: int,
    dst: bytes,
    dst_width: int,
    dst_height: int,
    x: int,
    y: int,
) -> bytearray:
    """Return a copy of ``dst`` with ``src`` blitted at ``(x, y)``, clipped.

    Both buffers hold 4-byte pixels in row-major order.
    """
    if len(src) < src_width * src_height * 4:
        raise ValueError("source buffer is smaller than its dimensions")
    if len(dst) < dst_width * dst_height * 4:
        raise ValueError("destination buffer is smaller than its dimensions")

    sx_start, dx_start = max(-x, 0), max(x, 0)
    copy_width = max(min(src_width - sx_start, dst_width - dx_start), 0)
    sy_start, dy_start = max(-y, 0), max(y, 0)
    copy_height = max(min(src_height - sy_start, dst_height - dy_start), 0)

    result = bytearray(dst)
    if copy_width == 0 or copy_height == 0:
        return result

    row_bytes = copy_width * 4
    for row in range(copy_height):
        src_start = ((sy_start + row) * src_width + sx_start) * 4
        dst_start = ((dy_start + row) * dst_width + dx_start) * 4
        result[dst_start : dst_start + row_bytes] = src[src_start : src_start + row_bytes]
    return result


def pre_multiply_and_to_little_endian_argb(rgba: Sequence[int]) -> bytes:
    """Premultiply an RGBA pixel by its alpha and return it as BGRA bytes."""
    red, green, blue, alpha = rgba
    return bytes(
        (
            blue * alpha // 255,
            green * alpha // 255,
            red * alpha // 255,
            alpha,
        )
    )