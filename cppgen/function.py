"""C-style function declarations and definitions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .block import Block
from .doc import Doc
from .formatter import Formatter


@dataclass
class Function:
    """A free function with parameters, return type and body."""

    name: str
    ret: Any
    doc: Doc | None = None
    params: list[Any] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    is_static: bool = False
    is_inline: bool = False
    is_extern: bool = False
    body: Block = field(default_factory=Block)

    def set_doc(self, doc: Doc) -> Function:
        """Replace the documentation comment."""
        self.doc = doc
        return self

    def push_doc_str(self, doc: str) -> Function:
        """Add text to the documentation comment."""
        if self.doc is None:
            self.doc = Doc(doc)
        else:
            self.doc.add_text(doc)
        return self

    def push_param(self, param: Any) -> Function:
        """Append a parameter."""
        self.params.append(param)
        return self

    def param_by_name(self, name: str) -> Any | None:
        """Return the first parameter with the given name, or None."""
        return next((p for p in self.params if p.name == name), None)

    def push_attribute(self, attr: str) -> Function:
        """Add a compiler attribute."""
        self.attributes.append(attr)
        return self

    def set_static(self, val: bool = True) -> Function:
        """Make the function static; a static function is not extern."""
        if val:
            self.is_extern = False
        self.is_static = val
        return self

    def set_inline(self, val: bool = True) -> Function:
        """Make the function inline; an inline function is not extern."""
        if val:
            self.is_extern = False
        self.is_inline = val
        return self

    def set_extern(self, val: bool = True) -> Function:
        """Make the function extern; an extern function is not inline."""
        if val:
            self.is_inline = False
        self.is_extern = val
        return self

    def set_body(self, body: Block) -> Function:
        """Replace the body; a function with a body is not extern."""
        if len(body):
            self.is_extern = False
        self.body = body
        return self

    def do_fmt(self, fmt: Formatter, decl_only: bool) -> None:
        """Write the function, as a declaration only if ``decl_only``."""
        if self.doc is not None:
            self.doc.fmt(fmt)
        has_body = len(self.body) > 0
        if not has_body and self.is_extern:
            fmt.write("extern ")
        if self.is_static:
            fmt.write("static ")
        if self.is_inline:
            fmt.write("inline ")
        self.ret.fmt(fmt)
        fmt.write(f" {self.name}(")
        if self.params:
            for position, param in enumerate(self.params):
                if position:
                    fmt.write(", ")
                param.fmt(fmt)
        else:
            fmt.write("void")
        fmt.write(")")
        if self.attributes:
            fmt.write(f" __attribute__(({', '.join(self.attributes)}))")
        if has_body and (not decl_only or self.is_inline):
            with fmt.block():
                self.body.fmt(fmt)
            fmt.writeln()
        else:
            fmt.writeln(";")

    def fmt(self, fmt: Formatter) -> None:
        self.do_fmt(fmt, False)

    def fmt_decl(self, fmt: Formatter) -> None:
        self.do_fmt(fmt, True)

    def fmt_def(self, fmt: Formatter) -> None:
        """Write the definition; inline functions are defined in the declaration."""
        if self.is_inline:
            return
        self.do_fmt(fmt, False)

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()