'''
clasificación por patrones: modo de direccionamiento de un operando y tipo de línea
'''

from __future__ import annotations
import re
from enum import Enum
from typing import AbstractSet, Callable, List, Optional, Tuple

from .ast import Size
from .constants import DIRECTIVES

class OperandKind(Enum):
    REGISTER = "register"
    POST_INDIRECT = "post_indirect"
    PRE_INDIRECT = "pre_indirect"
    IMMEDIATE = "immediate"
    INDIRECT = "indirect"
    INDIRECT_DISPLACEMENT = "indirect_displacement"
    ADDRESS = "address"
    LABEL = "label"

class LineKind(Enum):
    EMPTY = "empty"
    COMMENT = "comment"
    LABEL = "label"
    DIRECTIVE = "directive"
    INSTRUCTION = "instruction"
    UNKNOWN = "unknown"

_REG = r"(?:[da]\d|sp)"

# El orden importa: '(a0)+' debe ser POST_INDIRECT antes que INDIRECT,
# y '#1,2' IMMEDIATE antes que INDIRECT_DISPLACEMENT.
OPERAND_RULES: Tuple[Tuple[OperandKind, re.Pattern], ...] = (
    (OperandKind.REGISTER,              re.compile(_REG, re.IGNORECASE)),
    (OperandKind.POST_INDIRECT,         re.compile(r"\(\S+\)\+")),
    (OperandKind.PRE_INDIRECT,          re.compile(r"-\(\S+\)")),
    (OperandKind.IMMEDIATE,             re.compile(r"#\S+")),
    (OperandKind.INDIRECT,              re.compile(r"\S*\(" + _REG + r"\)", re.IGNORECASE)),
    (OperandKind.INDIRECT_DISPLACEMENT, re.compile(r".+,.+")),
    (OperandKind.ADDRESS,               re.compile(r"\$\S*")),
)

def operand_kind(token: str) -> OperandKind:
    """Primer patrón (completo) que encaja con el token; LABEL si ninguno."""
    for kind, rx in OPERAND_RULES:
        if rx.fullmatch(token):
            return kind
    return OperandKind.LABEL

COMMENT_LINE_RE = re.compile(r";.*")
LABEL_LINE_RE = re.compile(r"\S+:.*")

LineRule = Callable[[str, List[str], AbstractSet[str]], bool]

# Reglas evaluadas en orden sobre (línea, tokens, directivas).
# Etiqueta, comentario y directiva van antes del caso genérico de instrucción.
LINE_RULES: Tuple[Tuple[LineKind, LineRule], ...] = (
    (LineKind.EMPTY,       lambda line, toks, dirs: not toks),
    (LineKind.COMMENT,     lambda line, toks, dirs: COMMENT_LINE_RE.match(line) is not None),
    (LineKind.LABEL,       lambda line, toks, dirs: LABEL_LINE_RE.match(line) is not None),
    (LineKind.DIRECTIVE,   lambda line, toks, dirs: any(t in dirs for t in toks)),
    (LineKind.INSTRUCTION, lambda line, toks, dirs: len(toks) >= 2),
)

def line_kind(line: str, directives: Optional[AbstractSet[str]] = None) -> LineKind:
    """Clasifica una línea ya normalizada (minúsculas); UNKNOWN si ninguna regla aplica."""
    s = line.strip()
    toks = s.split()
    dirs = DIRECTIVES if directives is None else directives
    for kind, rule in LINE_RULES:
        if rule(s, toks, dirs):
            return kind
    return LineKind.UNKNOWN

_SIZES = {"b": Size.BYTE, "w": Size.WORD, "l": Size.LONG}

def split_instruction_and_size(token: str) -> Tuple[str, Size]:
    """'move.w' -> ('move', Size.WORD); 'nop' -> ('nop', Size.UNSPECIFIED)."""
    parts = token.split('.')
    if len(parts) == 1:
        return parts[0], Size.UNSPECIFIED
    if len(parts) == 2:
        return parts[0], _SIZES.get(parts[1], Size.UNKNOWN)
    return token, Size.UNSPECIFIED
