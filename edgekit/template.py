"""Text templates with ``{name:arg}`` placeholders and their argument parsers."""

from __future__ import annotations

import logging
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Callable, Iterator, Optional, Union

from edgekit.shell import notify_send

log = logging.getLogger(__name__)

TEMPLATE_ARG_FLOAT = "float"
TEMPLATE_ARG_RING_PRESET = "preset"

_NOTIFY_SUMMARY = "edgekit"


class TemplateError(ValueError):
    """Raised when a placeholder argument cannot be parsed."""


class TemplateArgParser:
    """A parsed placeholder; ``name`` identifies its kind."""

    name: str = ""


class TemplateArgProcessor(ABC):
    """Turns the argument text of a named placeholder into a parser."""

    name: str = ""

    @abstractmethod
    def process(self, param: str) -> TemplateArgParser:
        """Parse ``param``; raise ``ValueError`` when it is invalid."""


class TemplateProcessor:
    """A registry of placeholder processors keyed by name."""

    def __init__(self) -> None:
        self._processors: dict[str, TemplateArgProcessor] = {}

    def add_processor(self, processor: TemplateArgProcessor) -> "TemplateProcessor":
        """Register ``processor`` under its name and return ``self``."""
        self._processors[processor.name] = processor
        return self

    def _get(self, name: str) -> Optional[TemplateArgProcessor]:
        return self._processors.get(name)


TemplateContent = Union[str, TemplateArgParser]


@dataclass
class Template:
    """A parsed template: literal strings interleaved with placeholders."""

    contents: list[TemplateContent] = field(default_factory=list)

    def render(self, callback: Callable[[TemplateArgParser], str]) -> str:
        """Join the literal parts with ``callback``'s text for each placeholder."""
        return "".join(
            item if isinstance(item, str) else callback(item) for item in self.contents
        )


def _extract_braces(raw: str) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` spans of unescaped ``{...}`` groups, end exclusive."""
    start: Optional[int] = None
    escaped = False
    for index, char in enumerate(raw):
        if char == "\\":
            escaped = not escaped
        elif char == "{" and not escaped:
            start = index
        elif char == "}" and not escaped:
            if start is not None:
                yield start, index + 1
            start = None


def _report(message: str) -> None:
    log.error("%s", message)
    notify_send(_NOTIFY_SUMMARY, message, True)


def parse_template(raw: str, processors: TemplateProcessor) -> Template:
    """Split ``raw`` into literals and placeholders handled by ``processors``.

    Backslashes are removed from literal text. Placeholders with an unknown
    name or an invalid argument are reported and dropped.
    """
    contents: list[TemplateContent] = []
    record = 0

    for start, end in _extract_braces(raw):
        if start > record:
            contents.append(raw[record:start].replace("\\", ""))
        record = end

        name, _, arg = raw[start + 1 : end - 1].partition(":")
        name, arg = name.strip(), arg.strip()

        processor = processors._get(name)
        if processor is None:
            _report(f"Unknown template: {name}")
            continue
        try:
            parser = processor.process(arg)
        except ValueError as exc:
            _report(f"Failed to parse template: {name}: {exc}")
            continue
        contents.append(parser)

    if record < len(raw):
        contents.append(raw[record:].replace("\\", ""))

    return Template(contents)


_USIZE_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:e[+-]?[0-9]+)?)",
    re.IGNORECASE,
)


@dataclass(frozen=True)
class FloatArgParser(TemplateArgParser):
    """Formats a number with fixed precision, optionally scaled first."""

    precision: int = 2
    multiply: Optional[float] = None
    name: str = field(default=TEMPLATE_ARG_FLOAT, init=False)

    def format(self, value: float) -> str:
        """Return ``value`` (times ``multiply``) with ``precision`` decimals."""
        if self.multiply is not None:
            value *= self.multiply
        if value != value:
            return "NaN"
        return f"{value:.{self.precision}f}"


def parse_float_arg(s: str) -> FloatArgParser:
    """Parse ``"precision[,multiply]"``; either part may be empty."""
    text = s.strip()
    if not text:
        return FloatArgParser()

    precision_text, sep, multiply_text = text.partition(",")
    precision_text = precision_text.strip()
    multiply_text = multiply_text.strip() if sep else ""

    precision = 2
    if precision_text:
        if not _USIZE_RE.fullmatch(precision_text):
            raise TemplateError("invalid digit found in string")
        precision = int(precision_text)

    multiply = None
    if multiply_text:
        if not _FLOAT_RE.fullmatch(multiply_text):
            raise TemplateError("invalid float literal")
        multiply = float(multiply_text)

    return FloatArgParser(precision=precision, multiply=multiply)


class FloatArgProcessor(TemplateArgProcessor):
    """Processor for ``{float:precision,multiply}`` placeholders."""

    name = TEMPLATE_ARG_FLOAT

    def process(self, param: str) -> FloatArgParser:
        return parse_float_arg(param)


@dataclass(frozen=True)
class RingPresetArgParser(TemplateArgParser):
    """A placeholder replaced verbatim by a preset string."""

    name: str = field(default=TEMPLATE_ARG_RING_PRESET, init=False)

    def parse(self, arg: str) -> str:
        """Return ``arg`` unchanged."""
        return arg


class RingPresetArgProcessor(TemplateArgProcessor):
    """Processor for ``{preset}`` placeholders; the argument is ignored."""

    name = TEMPLATE_ARG_RING_PRESET

    def process(self, param: str) -> RingPresetArgParser:
        return RingPresetArgParser()