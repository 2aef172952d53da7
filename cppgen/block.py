"""Statement blocks and if/else conditionals for function and loop bodies."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol

from .comment import Comment
from .expr import Expr, new_str
from .formatter import Formatter


class _Statement(Protocol):
    def fmt(self, fmt: Formatter) -> None: ...


def _fmt_args(fmt: Formatter, args: Iterable[Expr]) -> None:
    for position, arg in enumerate(args):
        if position:
            fmt.write(", ")
        arg.fmt(fmt)


@dataclass
class _Line:
    text: str

    def fmt(self, fmt: Formatter) -> None:
        fmt.writeln(self.text)


@dataclass
class _ExprStmt:
    expr: Expr

    def fmt(self, fmt: Formatter) -> None:
        self.expr.fmt(fmt)
        fmt.writeln(";")


@dataclass
class _Assign:
    lhs: Expr
    rhs: Expr

    def fmt(self, fmt: Formatter) -> None:
        self.lhs.fmt(fmt)
        fmt.write(" = ")
        self.rhs.fmt(fmt)
        fmt.writeln(";")


@dataclass
class _Return:
    expr: Expr | None

    def fmt(self, fmt: Formatter) -> None:
        if self.expr is None:
            fmt.writeln("return;")
            return
        fmt.write("return ")
        self.expr.fmt(fmt)
        fmt.writeln(";")


@dataclass
class _Call:
    name: str
    args: list[Expr]

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"{self.name}(")
        _fmt_args(fmt, self.args)
        fmt.writeln(");")


@dataclass
class _MethodCall:
    obj: Expr
    method: str
    args: list[Expr]

    def fmt(self, fmt: Formatter) -> None:
        self.obj.fmt(fmt)
        arrow = "->" if self.obj.is_ptr() else "."
        fmt.write(f"{arrow}{self.method}(")
        _fmt_args(fmt, self.args)
        fmt.writeln(");")


@dataclass
class _VariableDef:
    var: Any

    def fmt(self, fmt: Formatter) -> None:
        self.var.fmt_def(fmt)


class Block:
    """An ordered sequence of statements."""

    def __init__(self) -> None:
        self._items: list[_Statement] = []

    def __len__(self) -> int:
        return len(self._items)

    def _push(self, item: _Statement) -> Block:
        self._items.append(item)
        return self

    def merge(self, other: Block) -> Block:
        """Append all statements of another block."""
        self._items.extend(other._items)
        return self

    def clear(self) -> None:
        """Remove every statement."""
        self._items.clear()

    def empty_line(self) -> Block:
        """Add an empty line."""
        return self._push(_Line(""))

    def break_stmt(self) -> Block:
        """Add a ``break`` statement."""
        return self._push(_Line("break;"))

    def continue_stmt(self) -> Block:
        """Add a ``continue`` statement."""
        return self._push(_Line("continue;"))

    def raw(self, raw: str) -> Block:
        """Add a verbatim statement terminated by a semicolon."""
        return self._push(_Line(f"{raw};"))

    def assign(self, lhs: Expr, rhs: Expr) -> Block:
        """Add an assignment ``lhs = rhs;``."""
        return self._push(_Assign(lhs, rhs))

    def label(self, label: str) -> Block:
        """Add a jump label."""
        return self._push(_Line(f"{label}:"))

    def goto(self, label: str) -> Block:
        """Add a ``goto`` statement."""
        return self._push(_Line(f"goto {label};"))

    def comment(self, comment: Comment | str) -> Block:
        """Add a comment, given as a ``Comment`` or as its text."""
        if isinstance(comment, str):
            comment = Comment(comment)
        return self._push(comment)

    def new_ifelse(self, cond: Expr) -> IfElse:
        """Add a new if/else conditional and return it for further building."""
        ifelse = IfElse(cond)
        self._push(ifelse)
        return ifelse

    def ifelse(self, s: IfElse) -> Block:
        """Add an existing if/else conditional."""
        return self._push(s)

    def for_loop(self, s: Any) -> Block:
        """Add a for loop."""
        return self._push(s)

    def while_loop(self, s: Any) -> Block:
        """Add a while loop."""
        return self._push(s)

    def dowhile_loop(self, s: Any) -> Block:
        """Add a do-while loop."""
        return self._push(s)

    def variable(self, var: Any) -> Block:
        """Add a variable definition."""
        return self._push(_VariableDef(var))

    def raw_expr(self, expr: Expr) -> Block:
        """Add an expression statement."""
        return self._push(_ExprStmt(expr))

    def return_stmt(self, expr: Expr | None = None) -> Block:
        """Add a return statement, with a value if one is given."""
        return self._push(_Return(expr))

    def printf(self, format: str, vars: Iterable[Expr] = ()) -> Block:
        """Add a ``printf`` call with the format string and arguments."""
        return self._push(_Call("printf", [new_str(format), *vars]))

    def printstr(self, format: str) -> Block:
        """Add a ``printf`` call printing a string."""
        return self._push(_Call("printf", [new_str(format)]))

    def fn_call(self, name: str, args: Iterable[Expr] = ()) -> Block:
        """Add a function call statement."""
        return self._push(_Call(name, list(args)))

    def method_call(self, obj: Expr, method: str, args: Iterable[Expr] = ()) -> Block:
        """Add a method call statement."""
        return self._push(_MethodCall(obj, method, list(args)))

    def fmt(self, fmt: Formatter) -> None:
        """Write every statement to the formatter."""
        for item in self._items:
            item.fmt(fmt)

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()


@dataclass
class IfElse:
    """An ``if`` conditional with an optional ``else`` branch."""

    cond: Expr
    then: Block = field(default_factory=Block)
    other: Block = field(default_factory=Block)

    def fmt(self, fmt: Formatter) -> None:
        """Write the conditional to the formatter."""
        fmt.write("if (")
        self.cond.fmt(fmt)
        fmt.writeln(") ")
        with fmt.block():
            self.then.fmt(fmt)
        if len(self.other):
            fmt.write(" else ")
            with fmt.block():
                self.other.fmt(fmt)
        fmt.writeln()

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()