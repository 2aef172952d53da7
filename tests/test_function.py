from dataclasses import dataclass

from cppgen.block import Block
from cppgen.expr import new_num
from cppgen.formatter import Formatter
from cppgen.function import Function


@dataclass
class FakeType:
    name: str

    def fmt(self, fmt):
        fmt.write(self.name)

    def is_integer(self):
        return True


@dataclass
class FakeParam:
    name: str
    ty: FakeType

    def fmt(self, fmt):
        self.ty.fmt(fmt)
        fmt.write(f" {self.name}")


def render(method):
    f = Formatter()
    method(f)
    return f.getvalue()


def with_body():
    fn = Function("foo", FakeType("int"))
    body = Block()
    body.return_stmt(new_num(0))
    fn.set_body(body)
    return fn


def test_declaration_without_params_uses_void():
    fn = Function("foo", FakeType("int"))
    out = str(fn)
    assert "foo(void)" in out
    assert out.endswith(";\n")


def test_params_are_comma_separated():
    fn = Function("foo", FakeType("int"))
    fn.push_param(FakeParam("a", FakeType("int")))
    fn.push_param(FakeParam("b", FakeType("char")))
    assert "(int a, char b)" in str(fn)


def test_param_by_name():
    fn = Function("foo", FakeType("int"))
    a = FakeParam("a", FakeType("int"))
    fn.push_param(a)
    assert fn.param_by_name("a") is a
    assert fn.param_by_name("missing") is None


def test_body_in_definition_but_not_declaration():
    fn = with_body()
    definition = render(fn.fmt_def)
    assert "{\n" in definition
    assert definition.endswith("}\n")
    assert "return " in definition
    declaration = render(fn.fmt_decl)
    assert declaration.endswith(";\n")
    assert "return " not in declaration


def test_inline_definition_is_empty_and_declaration_has_body():
    fn = with_body().set_inline()
    assert render(fn.fmt_def) == ""
    decl = render(fn.fmt_decl)
    assert decl.startswith("inline ")
    assert "return " in decl


def test_extern_without_body():
    fn = Function("foo", FakeType("int")).set_extern()
    assert str(fn).startswith("extern ")


def test_static_clears_extern():
    fn = Function("foo", FakeType("int")).set_extern().set_static()
    assert not fn.is_extern
    assert str(fn).startswith("static ")


def test_extern_clears_inline():
    fn = Function("foo", FakeType("int")).set_inline().set_extern()
    assert not fn.is_inline
    assert fn.is_extern


def test_body_clears_extern():
    fn = Function("foo", FakeType("int")).set_extern()
    body = Block()
    body.return_stmt()
    fn.set_body(body)
    assert not fn.is_extern
    assert not str(fn).startswith("extern ")


def test_attributes_are_rendered():
    fn = Function("foo", FakeType("int")).push_attribute("noreturn")
    assert "__attribute__((noreturn))" in str(fn)


def test_doc_comes_first():
    fn = Function("foo", FakeType("int")).push_doc_str("does things")
    assert str(fn).startswith("/// ")