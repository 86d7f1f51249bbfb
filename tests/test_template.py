from unittest import mock

import pytest

from edgekit.template import (
    TEMPLATE_ARG_FLOAT,
    TEMPLATE_ARG_RING_PRESET,
    FloatArgParser,
    FloatArgProcessor,
    RingPresetArgParser,
    RingPresetArgProcessor,
    Template,
    TemplateError,
    TemplateProcessor,
    parse_float_arg,
    parse_template,
)


@pytest.fixture(autouse=True)
def _no_notifications():
    with mock.patch("shutil.which", return_value=None):
        yield


def _make(raw):
    processors = (
        TemplateProcessor()
        .add_processor(FloatArgProcessor())
        .add_processor(RingPresetArgProcessor())
    )
    return parse_template(raw, processors)


@pytest.mark.parametrize(
    "raw, count",
    [
        (r"\{\}", 1),
        (r"\{}", 1),
        (r"{\}", 1),
        ("{preset:}{float:}", 2),
        ("{preset}{float}", 2),
        (" {preset}{float}", 3),
        ("{preset} {float}", 3),
        ("{preset}{float} ", 3),
        (" {preset} {float} ", 5),
        ("  { preset }  { float }  ", 5),
        ("{{preset}}{float}", 4),
        (r"\{preset\} \{float\}", 1),
        (r"\{preset\} {float\}", 1),
        ("{{preset}}{{float}", 4),
    ],
)
def test_ring_template(raw, count):
    assert len(_make(raw).contents) == count


def _callback(preset_str, value):
    def callback(parser):
        if parser.name == TEMPLATE_ARG_RING_PRESET:
            return parser.parse(preset_str)
        if parser.name == TEMPLATE_ARG_FLOAT:
            return parser.format(value)
        raise AssertionError(parser.name)

    return callback


@pytest.mark.parametrize(
    "raw, preset_str, value, expected",
    [
        ("", "hh", 2.0, ""),
        ("a", "hh", 2.0, "a"),
        ("{}{}", "hh", 2.0, ""),
        ("{float}", "hh", 2.0, "2.00"),
        (" { preset}a{ float }", "hh", 2.0, " hha2.00"),
    ],
)
def test_parse_content(raw, preset_str, value, expected):
    assert _make(raw).render(_callback(preset_str, value)) == expected


def test_escaped_braces_become_literal_text():
    template = _make(r"\{preset\} {float\}")
    assert template.contents == ["{preset} {float}"]


def test_content_kinds_in_order():
    template = _make("{{preset}}{float}")
    assert template.contents[0] == "{"
    assert isinstance(template.contents[1], RingPresetArgParser)
    assert template.contents[2] == "}"
    assert isinstance(template.contents[3], FloatArgParser)


def test_invalid_argument_placeholder_is_dropped():
    template = _make("x{float:abc}y")
    assert template.contents == ["x", "y"]


def test_unknown_placeholder_is_dropped():
    template = _make("a{nope}b")
    assert template.contents == ["a", "b"]


def test_float_arg_passed_through_processor():
    template = _make("{float:3,2}")
    assert template.render(_callback("", 0.5125)) == "1.025"


def test_template_render_direct():
    template = Template(["v=", FloatArgParser(precision=1)])
    assert template.render(lambda p: p.format(1.25)) == "v=1.2"


@pytest.mark.parametrize(
    "arg",
    [",", "", "2,", "2", " 2,", " 2", "2,1", "2, 1", " 2, 1 ", " , 1 "],
)
def test_float_template(arg):
    assert parse_float_arg(arg).format(0.5125) == "0.51"


@pytest.mark.parametrize(
    "arg, expected",
    [
        ("0", "1"),
        ("1", "0.5"),
        ("2", "0.51"),
        ("4", "0.5125"),
        ("10", "0.5125000000"),
        (",0", "0.00"),
        ("3,2", "1.025"),
        (",10", "5.12"),
        (",100", "51.25"),
    ],
)
def test_float_template_parse(arg, expected):
    assert parse_float_arg(arg).format(0.5125) == expected


@pytest.mark.parametrize("arg", ["x", "-1", "2,abc", "1.5", "2,1_0"])
def test_float_arg_errors(arg):
    with pytest.raises(TemplateError):
        parse_float_arg(arg)


def test_float_processor_name_and_result():
    parser = FloatArgProcessor().process("1,10")
    assert parser.name == "float"
    assert parser.precision == 1
    assert parser.multiply == 10.0


def test_ring_preset_processor_ignores_argument():
    parser = RingPresetArgProcessor().process("anything")
    assert parser.name == "preset"
    assert parser.parse("text") == "text"