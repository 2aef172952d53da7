import pytest

from cppgen.block import Block, IfElse
from cppgen.comment import Comment
from cppgen.expr import btrue, fn_call, new_num, new_str, raw
from cppgen.formatter import Formatter


class _Loop:
    def __init__(self, text):
        self.text = text

    def fmt(self, fmt):
        fmt.writeln(self.text)


class _Var:
    def __init__(self, name):
        self.name = name

    def fmt(self, fmt):
        fmt.writeln("wrong")

    def fmt_def(self, fmt):
        fmt.writeln(f"int {self.name};")


def test_len_and_clear():
    b = Block()
    b.break_stmt().continue_stmt()
    assert len(b) == 2
    b.clear()
    assert len(b) == 0
    assert str(b) == ""


def test_break_continue():
    b = Block().break_stmt().continue_stmt()
    assert str(b) == "break;\ncontinue;\n"


def test_raw_label_goto():
    b = Block().raw("x++").label("out").goto("out")
    assert str(b).splitlines() == ["x++;", "out:", "goto out;"]


def test_merge_appends_statements():
    a = Block().raw("a")
    b = Block().raw("b").break_stmt()
    expected = str(a) + str(b)
    a.merge(b)
    assert str(a) == expected
    assert len(a) == 3


def test_assign():
    b = Block().assign(raw("a"), new_num(1))
    assert str(b) == "a = 0x1;\n"


@pytest.mark.parametrize(
    "expr, expected",
    [(None, "return;\n"), (btrue(), "return true;\n")],
)
def test_return(expr, expected):
    assert str(Block().return_stmt(expr)) == expected


def test_printf_and_printstr():
    b = Block().printf("%d", [new_num(3)]).printstr("hi")
    assert str(b).splitlines() == ['printf("%d", 0x3);', 'printf("hi");']


def test_fn_call_and_raw_expr():
    b = Block().fn_call("foo", [new_num(2)]).raw_expr(fn_call("bar", []))
    assert str(b).splitlines() == ["foo(0x2);", "bar();"]


@pytest.mark.parametrize(
    "obj, expected",
    [(raw("p"), "p->run(0x1);\n"), (new_str("s"), '"s".run(0x1);\n')],
)
def test_method_call_arrow(obj, expected):
    assert str(Block().method_call(obj, "run", [new_num(1)])) == expected


def test_empty_line():
    assert str(Block().empty_line()) == "\n"


def test_comment_from_text_matches_comment():
    assert str(Block().comment("note")) == str(Comment("note"))
    assert str(Block().comment(Comment("x"))) == str(Comment("x"))


def test_variable_uses_definition():
    assert str(Block().variable(_Var("n"))) == "int n;\n"


def test_loops_are_formatted_in_order():
    b = Block().for_loop(_Loop("L1")).while_loop(_Loop("L2")).dowhile_loop(_Loop("L3"))
    assert str(b).splitlines() == ["L1", "L2", "L3"]


def test_block_respects_indent():
    f = Formatter()
    with f.indent():
        Block().break_stmt().fmt(f)
    assert f.getvalue() == "    break;\n"


def test_empty_ifelse():
    assert str(IfElse(raw("x"))) == "if (x) \n{\n}\n"


def test_new_ifelse_is_part_of_block():
    b = Block()
    cond = b.new_ifelse(raw("x"))
    cond.then.break_stmt()
    assert len(b) == 1
    assert str(b) == str(cond)
    lines = str(b).splitlines()
    assert "    break;" in lines
    assert not any("else" in line for line in lines)


def test_ifelse_with_else_branch():
    cond = IfElse(raw("x"))
    cond.then.break_stmt()
    cond.other.continue_stmt()
    text = str(cond)
    assert "else" in text
    assert text.index("break;") < text.index("else") < text.index("continue;")
    assert text.endswith("}\n")


def test_ifelse_added_to_block():
    cond = IfElse(raw("y"))
    b = Block().ifelse(cond)
    assert str(b) == str(cond)