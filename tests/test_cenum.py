from dataclasses import dataclass

from cppgen.cenum import CEnum
from cppgen.formatter import Formatter


@dataclass
class FakeVariant:
    name: str

    def fmt(self, fmt):
        fmt.write(self.name)


def test_forward_declaration():
    f = Formatter()
    CEnum("Color").fmt_decl(f)
    assert f.getvalue() == "enum Color;   // forward declaration"


def test_variant_by_name():
    red = FakeVariant("RED")
    e = CEnum("Color").push_variant(red).push_variant(FakeVariant("GREEN"))
    assert e.variant_by_name("RED") is red
    assert e.variant_by_name("BLUE") is None


def test_with_variants_keeps_order():
    variants = [FakeVariant("A"), FakeVariant("B")]
    e = CEnum.with_variants("E", variants)
    assert [v.name for v in e.variants] == ["A", "B"]


def test_definition_lists_variants_separated_by_commas():
    e = CEnum.with_variants("Color", [FakeVariant("RED"), FakeVariant("GREEN")])
    out = str(e)
    assert out.startswith("enum Color {\n")
    assert "    RED,\n" in out
    assert "GREEN" in out
    assert out.endswith(";\n")
    assert out.index("RED") < out.index("GREEN")


def test_empty_enum_has_no_commas():
    out = str(CEnum("Empty"))
    assert out.startswith("enum Empty")
    assert "," not in out
    assert out.endswith(";\n")


def test_doc_precedes_enum():
    e = CEnum("Color").doc_str("colours").doc_str("more")
    lines = str(e).splitlines()
    assert lines[0].startswith("/// ") and "colours" in lines[0]
    assert "more" in lines[1]
    assert lines[2].startswith("enum Color")