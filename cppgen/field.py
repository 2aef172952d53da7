"""Struct fields as in C."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .doc import Doc
from .formatter import Formatter

_MAX_WIDTH = 255


@dataclass
class Field:
    """A struct field with a type, optional bit width and documentation."""

    name: str
    ty: Any
    width: int | None = None
    doc: Doc | None = None

    def to_type(self) -> Any:
        """Return the type of the field."""
        return self.ty

    @property
    def is_bitfield(self) -> bool:
        """Whether the field has a bit width."""
        return self.width is not None

    def push_doc_str(self, doc: str) -> Field:
        """Add text to the documentation comment."""
        if self.doc is None:
            self.doc = Doc(doc)
        else:
            self.doc.add_text(doc)
        return self

    def set_doc(self, doc: Doc) -> Field:
        """Replace the documentation comment."""
        self.doc = doc
        return self

    def set_bitfield_width(self, width: int) -> Field:
        """Set the bit width; ignored unless the type is an integer."""
        if not 0 <= width <= _MAX_WIDTH:
            raise ValueError(f"bitfield width out of range: {width}")
        if self.ty.is_integer():
            self.width = width
        return self

    def fmt(self, fmt: Formatter) -> None:
        """Write the field declaration to the formatter."""
        if self.doc is not None:
            self.doc.fmt(fmt)
        self.ty.fmt(fmt)
        fmt.write(f" {self.name}")
        if self.width is not None:
            fmt.write(f" : {self.width}")
        fmt.writeln(";")

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()