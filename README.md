# edgekit

Building blocks for hidden widgets that live on the edges of the screen:
colour parsing and blending, vector paths and raw ARGB32 pixel buffers,
text rendering, `{name:arg}` text templates, shell helpers, and a command
line that turns subcommands into requests for a widget daemon.

## Installation

```
pip install edgekit
```

For running the test suite:

```
pip install "edgekit[test]"
pytest
```

## Command line

```
edgekit add <group>                 # alias: a
edgekit rm <group>                  # alias: r
edgekit togglepin <group>:<widget>
edgekit reload
edgekit quit                        # alias: q
```

Each subcommand is parsed into an `edgekit.cli.Command` and printed to
standard output as one JSON line, for example:

```
$ edgekit togglepin main:clock
{"command": "togglepin", "args": ["main", "clock"]}
```

`togglepin` without a `group:widget` target prints an error and exits
with status 2. The option `-d`/`--mouse-debug` is accepted and recorded
in the parsed arguments. The `daemon` subcommand (alias `d`) is accepted
but deprecated and is treated like running with no subcommand.

The log level is read from the `EDGEKIT_LOG` environment variable
(default `INFO`).

The same parsing is available from Python:

```python
from edgekit.cli import parse_args

args = parse_args(["add", "main"])
args.command.to_ipc()   # ("add", ["main"])
```

`complete_only_group` and `complete_group_and_widget` compute completion
candidates for group names and `group:widget` targets from names you
pass in.

## What it does not do

There is no widget daemon in this package and no IPC transport. Running
`edgekit` with no subcommand (or with `daemon`) logs an error and exits
with status 1; subcommands print their request instead of sending it.
Configuration files are not read, so completion helpers work only on the
names given to them.

## Library

### Colours — `edgekit.color`

```python
from edgekit.color import parse_color, color_transition, color_mix

red = parse_color("#f00")                     # Color(255, 0, 0, 255)
half = parse_color("rgba(255, 0, 0, 0.5)")    # Color(255, 0, 0, 128)
green = parse_color("hsl(120, 100%, 50%)")    # Color(0, 255, 0, 255)

midway = color_transition(red, green, 0.5)
blended = color_mix(half, green)
```

`Color` is a named tuple `(r, g, b, a)`. `parse_color` accepts hex
(3, 4, 6, 8, 9, 12 or 16 digits), `rgb()`/`rgba()` and `hsl()`/`hsla()`,
and raises `ParseColorError` (a `ValueError`) on anything else.
`color_transition` interpolates with `t` clamped to `[0, 1]`;
`color_mix` composites the first colour over the second. Constants such
as `COLOR_BLACK`, `COLOR_WHITE` and `COLOR_TRANSPARENT` are provided.

### Text templates — `edgekit.template`

```python
from edgekit.template import (
    FloatArgParser,
    FloatArgProcessor,
    TemplateProcessor,
    parse_template,
)

processors = TemplateProcessor().add_processor(FloatArgProcessor())
template = parse_template("load: {float:1,100}%", processors)
text = template.render(
    lambda arg: arg.format(0.5125) if isinstance(arg, FloatArgParser) else ""
)
# "load: 51.2%"
```

A `{float:precision,multiply}` placeholder formats a number with the given
precision (default 2) after an optional scale; `parse_float_arg` parses
its argument and raises `TemplateError` on bad input. `{preset}` is
handled by `RingPresetArgProcessor`. Braces preceded by a backslash are
kept as literal text and backslashes are removed from literals.
Placeholders with an unknown name or a bad argument are logged, reported
through a desktop notification and dropped.

### Text rendering — `edgekit.text`

`draw_text(text, TextConfig(family, weight, color, size))` renders text
with Pillow into a `Canvas`, a tightly sized buffer of premultiplied
BGRA pixels (`width`, `height`, `stride`, `data`). `family` is a font
file name or path; when it cannot be loaded Pillow's default font is
used.

### Drawing helpers — `edgekit.draw`

`draw_rect_path` and `draw_fan` build rounded-rectangle and pie-slice
paths as lists of `PathOp` steps (move, line, arc, close).
`copy_pixmap` returns a copy of a destination buffer with a source block
of 4-byte pixels copied in at an offset, clipped to both buffers.
`pre_multiply_and_to_little_endian_argb` turns an RGBA pixel into
premultiplied BGRA bytes.

### Lookups — `edgekit.search`

`binary_search_within_range` finds which sorted half-open range holds a
value; `binary_search_end` finds the segment for a value in a list of
cumulative end positions. Both return `None` when nothing matches.

### Shell — `edgekit.shell`

`shell_cmd` runs a command through `/bin/sh -c` and returns its standard
output; on failure it logs, sends a critical notification and raises
`ShellCommandError`. `shell_cmd_non_block` runs a command on a
background thread and returns the thread. `notify_send` shows a desktop
notification through the `notify-send` program and only logs if that
fails.