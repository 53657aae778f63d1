import pytest
from m68k_asm.ast import Size
from m68k_asm.patterns import (
    OperandKind, LineKind, OPERAND_RULES,
    operand_kind, line_kind, split_instruction_and_size,
)

# --- operand_kind ---
@pytest.mark.parametrize("tok, kind", [
    ("d0", OperandKind.REGISTER),
    ("a7", OperandKind.REGISTER),
    ("sp", OperandKind.REGISTER),
    ("D3", OperandKind.REGISTER),
    ("(a0)+", OperandKind.POST_INDIRECT),
    ("-(sp)", OperandKind.PRE_INDIRECT),
    ("#4", OperandKind.IMMEDIATE),
    ("#$ff", OperandKind.IMMEDIATE),
    ("(a0)", OperandKind.INDIRECT),
    ("8(a1)", OperandKind.INDIRECT),
    ("4(a0,d1.w)", OperandKind.INDIRECT_DISPLACEMENT),
    ("$1000", OperandKind.ADDRESS),
    ("loop", OperandKind.LABEL),
    ("d10", OperandKind.LABEL),
])
def test_operand_kind(tok, kind):
    assert operand_kind(tok) == kind

def test_rule_order():
    assert [k for k, _ in OPERAND_RULES] == [
        OperandKind.REGISTER,
        OperandKind.POST_INDIRECT,
        OperandKind.PRE_INDIRECT,
        OperandKind.IMMEDIATE,
        OperandKind.INDIRECT,
        OperandKind.INDIRECT_DISPLACEMENT,
        OperandKind.ADDRESS,
    ]

def test_pre_and_immediate_win_over_indirect():
    indirect = dict(OPERAND_RULES)[OperandKind.INDIRECT]
    # el patrón indirecto también acepta estas formas; el orden decide
    assert indirect.fullmatch("-(a0)")
    assert operand_kind("-(a0)") == OperandKind.PRE_INDIRECT
    assert indirect.fullmatch("#(a0)")
    assert operand_kind("#(a0)") == OperandKind.IMMEDIATE
    assert operand_kind("#1,2") == OperandKind.IMMEDIATE

# --- line_kind ---
@pytest.mark.parametrize("line, kind", [
    ("", LineKind.EMPTY),
    ("   ", LineKind.EMPTY),
    ("; comment", LineKind.COMMENT),
    ("; a: b", LineKind.COMMENT),
    ("loop: move.w d0,d1", LineKind.LABEL),
    ("loop:", LineKind.LABEL),
    ("org $1000", LineKind.DIRECTIVE),
    ("foo equ 4", LineKind.DIRECTIVE),
    ("dc.b 1,2", LineKind.DIRECTIVE),
    ("end", LineKind.DIRECTIVE),
    ("move.w d0,d1", LineKind.INSTRUCTION),
    ("rts", LineKind.UNKNOWN),
])
def test_line_kind(line, kind):
    assert line_kind(line) == kind

def test_line_kind_custom_directives():
    assert line_kind("org $1000", frozenset()) == LineKind.INSTRUCTION
    assert line_kind("rts", frozenset({"rts"})) == LineKind.DIRECTIVE

# --- split_instruction_and_size ---
@pytest.mark.parametrize("tok, name, size", [
    ("move.b", "move", Size.BYTE),
    ("move.w", "move", Size.WORD),
    ("move.l", "move", Size.LONG),
    ("move", "move", Size.UNSPECIFIED),
    ("move.x", "move", Size.UNKNOWN),
    ("a.b.c", "a.b.c", Size.UNSPECIFIED),
])
def test_split_instruction_and_size(tok, name, size):
    assert split_instruction_and_size(tok) == (name, size)
