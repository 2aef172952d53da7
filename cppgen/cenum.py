"""C enumerations."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .doc import Doc
from .formatter import Formatter


@dataclass
class CEnum:
    """A C ``enum`` with ordered variants."""

    name: str
    variants: list[Any] = field(default_factory=list)
    doc: Doc | None = None

    @classmethod
    def with_variants(cls, name: str, variants: Iterable[Any]) -> CEnum:
        return cls(name, list(variants))

    def set_doc(self, doc: Doc) -> CEnum:
        """Replace the documentation comment."""
        self.doc = doc
        return self

    def doc_str(self, doc: str) -> CEnum:
        """Add text to the documentation comment."""
        if self.doc is None:
            self.doc = Doc(doc)
        else:
            self.doc.add_text(doc)
        return self

    def push_variant(self, variant: Any) -> CEnum:
        """Append a variant."""
        self.variants.append(variant)
        return self

    def variant_by_name(self, name: str) -> Any | None:
        """Return the first variant with the given name, or None."""
        return next((v for v in self.variants if v.name == name), None)

    def fmt_decl(self, fmt: Formatter) -> None:
        """Write a forward declaration of the enum."""
        fmt.write(f"enum {self.name};   // forward declaration")

    def fmt(self, fmt: Formatter) -> None:
        """Write the enum definition."""
        if self.doc is not None:
            self.doc.fmt(fmt)
        fmt.write(f"enum {self.name}")
        with fmt.block():
            for position, variant in enumerate(self.variants):
                if position:
                    fmt.writeln(",")
                variant.fmt(fmt)
        fmt.writeln(";")

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()