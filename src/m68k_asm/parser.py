# src/m68k_asm/parser.py
from __future__ import annotations
from typing import List, Sequence

from .ast import (
    Register, Immediate, Indirect, IndirectWithDisplacement,
    PostIndirect, PreIndirect, Address, Sym, Other, Operand,
)
from .constants import COMMENT, OPERAND_SEPARATOR
from .errors import MalformedIndirect
from .lexer import split_operand_args
from .patterns import OperandKind, operand_kind
from .regs import register_type

def _parse_indirect(token: str) -> Operand:
    # 'off(op1,op2)': exactamente un '(' separa el desplazamiento del contenido
    split = token.split('(')
    if len(split) != 2:
        return Other(token)
    displacement, inner = split
    inner = inner.replace(')', '')
    offset = displacement.strip()
    operands = parse_operands(split_operand_args(inner, OPERAND_SEPARATOR))
    if not operands:
        raise MalformedIndirect(token)
    if len(operands) == 1:
        return Indirect(offset=offset, operand=operands[0])
    return IndirectWithDisplacement(offset=offset, operands=tuple(operands))

def parse_operand(token: str) -> Operand:
    """
    Construye el árbol de un operando ya recortado:
      - d0/a0/sp          -> Register
      - #valor            -> Immediate
      - (op)+ / -(op)     -> PostIndirect / PreIndirect (recursivo)
      - off(op[,op...])   -> Indirect / IndirectWithDisplacement (recursivo)
      - $dirección        -> Address
      - resto             -> Sym

    Lanza UnrecognizedRegister o MalformedIndirect (ambos LexError).
    """
    kind = operand_kind(token)
    if kind is OperandKind.REGISTER:
        return Register(type=register_type(token), name=token)
    if kind is OperandKind.IMMEDIATE:
        return Immediate(token)
    if kind in (OperandKind.INDIRECT, OperandKind.INDIRECT_DISPLACEMENT):
        return _parse_indirect(token)
    if kind is OperandKind.POST_INDIRECT:
        return PostIndirect(parse_operand(token[1:-2]))
    if kind is OperandKind.PRE_INDIRECT:
        return PreIndirect(parse_operand(token[2:-1]))
    if kind is OperandKind.ADDRESS:
        return Address(token)
    return Sym(token)

def parse_operands(tokens: Sequence[str]) -> List[Operand]:
    """Parsea los operandos hasta el primero que contenga un comentario (excluido)."""
    out: List[Operand] = []
    for tok in tokens:
        if COMMENT in tok:
            break
        out.append(parse_operand(tok))
    return out
