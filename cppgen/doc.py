"""Documentation comments (``///``) for generated code."""

from __future__ import annotations

from .formatter import Formatter, _lines

_WRAP_AFTER = 90


class Doc:
    """A block of documentation comment lines; long lines are wrapped."""

    def __init__(self, text: str | None = None) -> None:
        self._lines: list[str] = []
        if text is not None:
            self.add_text(text)

    @property
    def lines(self) -> tuple[str, ...]:
        """The documentation lines in order."""
        return tuple(self._lines)

    def add_line(self, line: str) -> Doc:
        """Append a line verbatim; an empty line adds a blank entry."""
        if not line:
            self._lines.append("")
        else:
            self._lines.extend(_lines(line))
        return self

    def add_text(self, text: str) -> Doc:
        """Append text, breaking lines that run past the wrap width at spaces."""
        for line in _lines(text):
            if not line:
                self.add_line("")
                continue
            start = end = 0
            for offset, char in enumerate(line):
                if char == " " and offset - start > _WRAP_AFTER:
                    self.add_line(line[start : end + 1])
                    start = end
                end = offset
            self.add_line("" if start == end else line[start : end + 1])
        return self

    def fmt(self, fmt: Formatter) -> None:
        """Write the documentation block to the formatter."""
        for line in self._lines:
            fmt.writeln(f"/// {line}")

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()