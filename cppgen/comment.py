"""Plain ``//`` comments, optionally framed as headings."""

from __future__ import annotations

from dataclasses import dataclass

from .formatter import Formatter, _lines

_HEADING_WIDTH = 100


@dataclass
class Comment:
    """A regular comment block preceded by an empty line."""

    text: str = ""
    is_heading: bool = False

    def set_heading(self) -> Comment:
        """Turn the comment into a heading framed by lines of slashes."""
        self.is_heading = True
        return self

    def _push_heading(self, fmt: Formatter) -> None:
        if self.is_heading:
            fmt.writeln("/" * max(0, _HEADING_WIDTH - fmt.indent_level))

    def fmt(self, fmt: Formatter) -> None:
        """Write the comment to the formatter."""
        fmt.writeln()
        self._push_heading(fmt)
        for line in _lines(self.text):
            fmt.writeln(f"// {line}")
        self._push_heading(fmt)

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()