"""Expression trees that render as C and C++ expressions."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .formatter import Formatter

_U64_LIMIT = 1 << 64


class Expr(ABC):
    """Base class of every expression."""

    def set_ptr(self) -> Expr:
        """Mark a member access as going through a pointer; no-op elsewhere."""
        return self

    def is_ptr(self) -> bool:
        """Whether the expression yields a pointer."""
        return False

    def is_struct(self) -> bool:
        """Whether the expression yields a struct or object."""
        return False

    @abstractmethod
    def fmt(self, fmt: Formatter) -> None:
        """Write the expression to the formatter."""

    def __str__(self) -> str:
        f = Formatter()
        self.fmt(f)
        return f.getvalue()


def _fmt_args(fmt: Formatter, args: Iterable[Expr]) -> None:
    for position, arg in enumerate(args):
        if position:
            fmt.write(", ")
        arg.fmt(fmt)


@dataclass
class VarExpr(Expr):
    """A named variable of a given type."""

    name: str
    ty: Any

    def is_ptr(self) -> bool:
        return bool(self.ty.is_ptr())

    def is_struct(self) -> bool:
        return bool(self.ty.is_struct())

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(self.name)


@dataclass
class ConstNum(Expr):
    """An unsigned 64-bit constant, rendered in hexadecimal."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError("numeric constant must be an integer")
        if not 0 <= self.value < _U64_LIMIT:
            raise ValueError(f"numeric constant out of range: {self.value}")

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"0x{self.value:x}")


@dataclass
class ConstString(Expr):
    """A string literal."""

    value: str

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f'"{self.value}"')


@dataclass
class ConstBool(Expr):
    """A boolean literal."""

    value: bool

    def fmt(self, fmt: Formatter) -> None:
        fmt.write("true" if self.value else "false")


@dataclass
class NewObject(Expr):
    """Allocation of an object with ``new``."""

    name: str
    args: list[Expr] = field(default_factory=list)

    def is_ptr(self) -> bool:
        return True

    def is_struct(self) -> bool:
        return True

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"new {self.name}(")
        fmt.write(", ".join(str(arg) for arg in self.args))
        fmt.write(")")


@dataclass
class DeleteObject(Expr):
    """Release of an array allocation with ``delete[]``."""

    var: Expr

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"delete[] {self.var}")


@dataclass
class FnCall(Expr):
    """A call of a free function."""

    name: str
    args: list[Expr] = field(default_factory=list)

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"{self.name}(")
        _fmt_args(fmt, self.args)
        fmt.write(")")


@dataclass
class MethodCall(Expr):
    """A method call on an object or pointer."""

    var: Expr
    method: str
    args: list[Expr] = field(default_factory=list)
    via_ptr: bool = False

    def set_ptr(self) -> Expr:
        self.via_ptr = True
        return self

    def is_ptr(self) -> bool:
        return self.via_ptr

    def fmt(self, fmt: Formatter) -> None:
        self.var.fmt(fmt)
        arrow = "->" if self.var.is_ptr() else "."
        fmt.write(f"{arrow}{self.method}(")
        _fmt_args(fmt, self.args)
        fmt.write(")")


@dataclass
class Deref(Expr):
    """The dereference operator ``*(expr)``."""

    expr: Expr

    def is_ptr(self) -> bool:
        raise ValueError("cannot tell whether a dereferenced expression is a pointer")

    def fmt(self, fmt: Formatter) -> None:
        fmt.write("*(")
        self.expr.fmt(fmt)
        fmt.write(")")


@dataclass
class AddrOf(Expr):
    """The address-of operator ``&(expr)``."""

    expr: Expr

    def is_ptr(self) -> bool:
        return True

    def fmt(self, fmt: Formatter) -> None:
        fmt.write("&(")
        self.expr.fmt(fmt)
        fmt.write(")")


@dataclass
class FieldAccess(Expr):
    """Access of a field of a struct or object."""

    var: Expr
    field: str
    via_ptr: bool = False

    def set_ptr(self) -> Expr:
        self.via_ptr = True
        return self

    def is_ptr(self) -> bool:
        return self.via_ptr

    def fmt(self, fmt: Formatter) -> None:
        self.var.fmt(fmt)
        arrow = "->" if self.var.is_ptr() else "."
        fmt.write(f"{arrow}{self.field}")


@dataclass
class BinOp(Expr):
    """A parenthesised binary operation."""

    lhs: Expr
    op: str
    rhs: Expr

    def fmt(self, fmt: Formatter) -> None:
        fmt.write("(")
        self.lhs.fmt(fmt)
        fmt.write(f" {self.op} ")
        self.rhs.fmt(fmt)
        fmt.write(")")


@dataclass
class UnOp(Expr):
    """A unary operator applied to a parenthesised operand."""

    op: str
    expr: Expr

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(f"{self.op}(")
        self.expr.fmt(fmt)
        fmt.write(")")


@dataclass
class Ternary(Expr):
    """The conditional expression ``(cond) ? (then) : (other)``."""

    cond: Expr
    then: Expr
    other: Expr

    def fmt(self, fmt: Formatter) -> None:
        fmt.write("(")
        self.cond.fmt(fmt)
        fmt.write(") ? (")
        self.then.fmt(fmt)
        fmt.write(") : (")
        self.other.fmt(fmt)
        fmt.write(")")


@dataclass
class RawExpr(Expr):
    """Verbatim expression text."""

    text: str

    def is_ptr(self) -> bool:
        return True

    def is_struct(self) -> bool:
        return True

    def fmt(self, fmt: Formatter) -> None:
        fmt.write(self.text)


def new_str(s: str) -> ConstString:
    return ConstString(s)


def new_num(n: int) -> ConstNum:
    return ConstNum(n)


def new_var(name: str, ty: Any) -> VarExpr:
    return VarExpr(name, ty)


def btrue() -> ConstBool:
    return ConstBool(True)


def bfalse() -> ConstBool:
    return ConstBool(False)


def uop(op: str, expr: Expr) -> UnOp:
    return UnOp(op, expr)


def lnot(expr: Expr) -> UnOp:
    return UnOp("!", expr)


def binop(lhs: Expr, op: str, rhs: Expr) -> BinOp:
    return BinOp(lhs, op, rhs)


def ternary(cond: Expr, then: Expr, other: Expr) -> Ternary:
    return Ternary(cond, then, other)


def new_object(cls: str, args: Iterable[Expr] = ()) -> NewObject:
    return NewObject(cls, list(args))


def delete(var: Expr) -> DeleteObject:
    return DeleteObject(var)


def addr_of(var: Expr) -> AddrOf:
    return AddrOf(var)


def deref(var: Expr) -> Deref:
    return Deref(var)


def field_access(var: Expr, field: str) -> FieldAccess:
    return FieldAccess(var, field)


def method_call(var: Expr, method: str, args: Iterable[Expr] = ()) -> MethodCall:
    return MethodCall(var, method, list(args))


def fn_call(name: str, args: Iterable[Expr] = ()) -> FnCall:
    return FnCall(name, list(args))


def raw(s: str) -> RawExpr:
    return RawExpr(s)


def from_param(p: Any) -> Expr:
    """Build the expression that refers to a parameter or attribute."""
    return p.to_expr()