"""Indentation-aware text buffer used to emit C and C++ source code."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

DEFAULT_INDENT = 4


def _lines(text: str) -> list[str]:
    """Split text into lines, dropping one trailing line ending and any CR before LF."""
    parts = text.split("\n")
    tail = parts.pop()
    lines = [part[:-1] if part.endswith("\r") else part for part in parts]
    if tail:
        lines.append(tail)
    return lines


class Formatter:
    """Accumulates generated code, indenting every new non-empty line."""

    def __init__(self) -> None:
        self._chunks: list[str] = []
        self._last = ""
        self._spaces = 0
        self._scope: list[str] = []

    @property
    def indent_level(self) -> int:
        """The current indentation in spaces."""
        return self._spaces

    def _push(self, text: str) -> None:
        if text:
            self._chunks.append(text)
            self._last = text[-1]

    def write(self, s: str) -> None:
        """Write text, indenting lines that start at the beginning of a line."""
        should_indent = self.is_start_of_line()
        for number, line in enumerate(_lines(s)):
            if number:
                self._push("\n")
            if should_indent and line:
                self._push(" " * self._spaces)
            should_indent = True
            self._push(line)
        if s.endswith("\n"):
            self._push("\n")

    def writeln(self, s: str = "") -> None:
        """Write text followed by a line break."""
        self.write(s + "\n")

    def is_start_of_line(self) -> bool:
        """Whether the buffer is empty or ends with a line break."""
        return not self._chunks or self._last == "\n"

    @contextmanager
    def indent(self) -> Iterator[Formatter]:
        """Increase the indentation for the duration of the context."""
        self._spaces += DEFAULT_INDENT
        try:
            yield self
        finally:
            self._spaces -= DEFAULT_INDENT

    @contextmanager
    def block(self) -> Iterator[Formatter]:
        """Wrap the output of the context in an indented ``{ ... }`` block."""
        if not self.is_start_of_line():
            self.write(" ")
        self.writeln("{")
        with self.indent():
            yield self
        self.write("}")

    @contextmanager
    def scope(self, name: str) -> Iterator[Formatter]:
        """Enter a named scope used to qualify names written in it."""
        self._scope.append(name)
        try:
            yield self
        finally:
            self._scope.pop()

    def write_scoped_name(self, name: str) -> None:
        """Write a space and the name qualified by every enclosing scope."""
        self.write(" ")
        for scope_name in self._scope:
            self._push(scope_name)
            self._push("::")
        self.write(name)

    def getvalue(self) -> str:
        """Return everything written so far."""
        return "".join(self._chunks)

    def __str__(self) -> str:
        return self.getvalue()