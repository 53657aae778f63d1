import pytest
from m68k_asm.parser import parse_operand, parse_operands
from m68k_asm.errors import MalformedIndirect
from m68k_asm.ast import (
    Register, RegisterType, Immediate, Indirect, IndirectWithDisplacement,
    PostIndirect, PreIndirect, Address, Sym, Other,
)

D0 = Register(RegisterType.DATA, "d0")
A0 = Register(RegisterType.ADDRESS, "a0")

@pytest.mark.parametrize("tok, expected", [
    ("d0", D0),
    ("a1", Register(RegisterType.ADDRESS, "a1")),
    ("SP", Register(RegisterType.STACK_POINTER, "SP")),
    ("#4", Immediate("#4")),
    ("$ff00", Address("$ff00")),
    ("loop", Sym("loop")),
    ("x,y", Other("x,y")),
    ("a(b)(c,d)", Other("a(b)(c,d)")),
])
def test_flat_operands(tok, expected):
    assert parse_operand(tok) == expected

def test_indirect_single_operand():
    assert parse_operand("(a0)") == Indirect(offset="", operand=A0)
    assert parse_operand("8(a1)") == Indirect(offset="8", operand=Register(RegisterType.ADDRESS, "a1"))

def test_indirect_with_displacement():
    op = parse_operand("4(a0,d1.w)")
    assert isinstance(op, IndirectWithDisplacement)
    assert op.offset == "4"
    assert len(op.operands) == 2
    assert op.operands[0] == A0
    # el sufijo de tamaño del índice no se interpreta aquí
    assert op.operands[1] == Sym("d1.w")

def test_post_and_pre_increment():
    assert parse_operand("(a0)+") == PostIndirect(A0)
    assert parse_operand("-(sp)") == PreIndirect(Register(RegisterType.STACK_POINTER, "sp"))

def test_malformed_indirect_raises():
    with pytest.raises(MalformedIndirect) as exc:
        parse_operand("x(;,y)")
    assert exc.value.token == "x(;,y)"

def test_operands_stop_at_comment():
    assert parse_operands(["d0", "#1 ; comment"]) == [D0]
    assert parse_operands(["; c", "d0"]) == []
    assert parse_operands(["d0", "(a0)+"]) == [D0, PostIndirect(A0)]
