from edgekit.color import Color
from edgekit.text import Canvas, TextConfig, draw_text


def _pixels(canvas):
    data = canvas.data
    return [tuple(data[i : i + 4]) for i in range(0, len(data), 4)]


def test_canvas_dimensions():
    canvas = Canvas(3, 2)
    assert canvas.stride == 12
    assert len(canvas.data) == 24
    assert set(canvas.data) == {0}


def test_set_pixel_writes_bgra():
    canvas = Canvas(2, 2)
    canvas.set_pixel_color(Color(255, 0, 0, 255), 1, 0)
    assert bytes(canvas.data[4:8]) == b"\x00\x00\xff\xff"
    assert set(canvas.data[:4]) == {0}
    assert set(canvas.data[8:]) == {0}


def test_set_pixel_out_of_range_ignored():
    canvas = Canvas(2, 2)
    canvas.set_pixel_color(Color(255, 255, 255, 255), 2, 2)
    canvas.set_pixel_color(Color(255, 255, 255, 255), 0, -1)
    assert set(canvas.data) == {0}


def test_set_pixel_premultiplies():
    canvas = Canvas(1, 1)
    canvas.set_pixel_color(Color(255, 255, 255, 0), 0, 0)
    assert bytes(canvas.data) == b"\x00\x00\x00\x00"


def _config(color=Color(255, 0, 0, 255), size=20):
    return TextConfig(None, None, color, size)


def test_draw_text_buffer_matches_size():
    canvas = draw_text("12", _config())
    assert canvas.width > 0
    assert canvas.height > 0
    assert len(canvas.data) == canvas.width * canvas.height * 4
    assert canvas.stride == canvas.width * 4


def test_draw_text_draws_only_the_colour():
    canvas = draw_text("8", _config())
    pixels = _pixels(canvas)
    drawn = [p for p in pixels if p[3] > 0]
    assert drawn
    assert all(b == 0 and g == 0 and r <= a for b, g, r, a in drawn)


def test_draw_text_premultiplied_invariant():
    canvas = draw_text("0.5%", _config(Color(200, 100, 50, 255)))
    assert all(max(b, g, r) <= a for b, g, r, a in _pixels(canvas))


def test_longer_text_is_wider():
    short = draw_text("1", _config())
    long = draw_text("1111", _config())
    assert long.width > short.width


def test_larger_size_is_taller():
    small = draw_text("9", _config(size=10))
    large = draw_text("9", _config(size=40))
    assert large.height > small.height


def test_empty_text_has_no_pixels():
    canvas = draw_text("", _config())
    assert canvas.width == 0
    assert len(canvas.data) == 0


def test_unknown_family_falls_back():
    config = TextConfig("no-such-font-family", 700, Color(0, 0, 255, 255), 20)
    canvas = draw_text("7", config)
    assert any(a > 0 for _, _, _, a in _pixels(canvas))