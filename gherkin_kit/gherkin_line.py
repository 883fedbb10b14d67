"""A single line of Gherkin source and the pieces that can be cut from it."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from itertools import pairwise

_CELL_PART = re.compile(r"\\.|\|", re.DOTALL)
_CELL_ESCAPE = re.compile(r"\\(.?)", re.DOTALL)
_LANGUAGE_LINE = re.compile(r"# *language *:")


@dataclass(frozen=True)
class Span:
    """A piece of a line and the 1-based column it starts at."""

    column: int
    text: str


def _unescape(match: re.Match) -> str:
    escaped = match.group(1)
    if escaped == "n":
        return "\n"
    if escaped in ("|", "\\"):
        return escaped
    return "\\" + escaped


@dataclass
class GherkinLine:
    """A line of source text with its leading indentation measured."""

    line_text: str
    line_number: int
    indent: int = field(init=False)
    trimmed_line: str = field(init=False)

    def __post_init__(self) -> None:
        self.trimmed_line = self.line_text.lstrip(" \t")
        self.indent = len(self.line_text) - len(self.trimmed_line)

    def start_with(self, prefix: str) -> bool:
        """True when the line, after its indentation, starts with prefix."""
        return self.trimmed_line.startswith(prefix)

    def start_with_title_keyword(self, keyword: str) -> bool:
        """True when the line starts with keyword directly followed by a colon."""
        return self.trimmed_line.startswith(keyword + ":")

    def is_empty(self) -> bool:
        """True when the line holds nothing but indentation."""
        return not self.trimmed_line

    def rest_trimmed(self, length: int) -> str:
        """The text after the first length characters, with spaces stripped."""
        return self.trimmed_line[length:].strip(" ")

    def line_text_without_indent(self, indent_to_remove: int) -> str:
        """The line with up to indent_to_remove leading characters removed.

        When the requested amount is negative or exceeds the line's own
        indentation, all of the indentation is removed.
        """
        if indent_to_remove < 0 or indent_to_remove > self.indent:
            return self.trimmed_line
        return self.line_text[indent_to_remove:]

    def table_cells(self) -> list[Span]:
        """The cells between unescaped pipes, with escapes resolved."""
        text = self.trimmed_line
        bars = [m.start() for m in _CELL_PART.finditer(text) if m.group() == "|"]
        cells = []
        for opening, closing in pairwise(bars):
            left_stripped = text[opening + 1:closing].lstrip(" ")
            start = closing - len(left_stripped)
            content = _CELL_ESCAPE.sub(_unescape, left_stripped.rstrip(" "))
            cells.append(Span(self.indent + start + 1, content))
        return cells

    def tags(self) -> list[Span]:
        """Each tag on the line, running from one '@' to the next."""
        text = self.trimmed_line
        starts = [index for index, char in enumerate(text) if char == "@"]
        ends = starts[1:] + [len(text)]
        return [
            Span(self.indent + start + 1, text[start:end].rstrip(" "))
            for start, end in zip(starts, ends)
        ]

    def is_language_line(self) -> bool:
        """True for a '# language:' header line."""
        return _LANGUAGE_LINE.match(self.trimmed_line) is not None

    def language(self) -> str:
        """The word after the first colon of the line, or '' if there is no colon."""
        _, colon, rest = self.trimmed_line.partition(":")
        if not colon:
            return ""
        return rest.lstrip(" ").partition(" ")[0]