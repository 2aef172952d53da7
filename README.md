# cppgen

`cppgen` is a small builder library for generating C source code from
Python. You build a tree of expressions, statements, functions, struct
fields and enums, and render it as indented code.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `cppgen.formatter.Formatter`: collects output text and indents every new
  non-empty line. `indent()`, `block()` and `scope(name)` are context
  managers; `block()` wraps its output in `{ ... }`, and
  `write_scoped_name(name)` writes the name qualified as `Outer::name` by the
  enclosing scopes. `getvalue()` returns the text written so far.
- `cppgen.doc.Doc`: `///` documentation comments. Lines longer than about
  90 characters are broken at spaces.
- `cppgen.comment.Comment`: plain `//` comments preceded by an empty line.
  `set_heading()` frames the comment with lines of slashes that reach
  column 100.
- `cppgen.expr`: expression classes (`VarExpr`, `ConstNum`, `ConstString`,
  `ConstBool`, `NewObject`, `DeleteObject`, `FnCall`, `MethodCall`, `Deref`,
  `AddrOf`, `FieldAccess`, `BinOp`, `UnOp`, `Ternary`, `RawExpr`) and helpers
  to build them: `new_var`, `new_num`, `new_str`, `btrue`, `bfalse`, `uop`,
  `lnot`, `binop`, `ternary`, `new_object`, `delete`, `addr_of`, `deref`,
  `field_access`, `method_call`, `fn_call`, `raw` and `from_param`.
- `cppgen.block.Block` and `cppgen.block.IfElse`: statement sequences with
  assignments, returns, labels, `goto`, `break`, `continue`, comments,
  function and method calls, `printf` calls and if/else conditionals.
- `cppgen.field.Field`: struct fields, including bitfields.
- `cppgen.function.Function`: free functions that may be static, inline or
  extern, rendered as a declaration (`fmt_decl`) or a definition (`fmt`,
  `fmt_def`).
- `cppgen.cenum.CEnum`: C enumerations and their forward declarations.

## Example

```python
from cppgen.block import Block
from cppgen.expr import binop, new_num, new_var
from cppgen.formatter import Formatter

body = Block()
body.return_stmt(binop(new_var("a", None), "+", new_num(1)))

fmt = Formatter()
body.fmt(fmt)
print(fmt.getvalue())   # return (a + 0x1);
```

Every element also renders itself through `str()`, so `print(body)` gives
the same text.

Numeric constants are written in hexadecimal (`0x1`) and must fit in an
unsigned 64-bit integer. Binary operations are always put in parentheses,
so the generated code does not depend on operator precedence.

## What the package does not provide

- There are no type, parameter, enum variant, variable or loop objects.
  `Field`, `Function`, `CEnum`, `VarExpr` and `Block` accept any object
  that offers the methods they call: a type needs `fmt(fmt)` and, where
  used, `is_ptr()`, `is_struct()` and `is_integer()`; parameters and
  variants need a `name` and `fmt(fmt)`; a variable added to a block needs
  `fmt_def(fmt)`; loops need `fmt(fmt)`.
- There is no support for C++ classes, class data members, constructors
  or destructors, and no preprocessor blocks or file-level scopes.
- There is no command-line program; the package is used as a library.