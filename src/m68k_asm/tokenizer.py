from __future__ import annotations
import logging
from typing import AbstractSet, Iterator, List, Optional, Tuple

from .ast import (
    Label, Directive, Instruction, Comment, Empty, Unknown, Line, ParsedLine,
    Indirect, IndirectWithDisplacement, PostIndirect, PreIndirect, Other,
    Operand, Size,
)
from .constants import DIRECTIVES
from .diagnostics import Diagnostic, from_lex_error, warning
from .equ import apply_equ
from .errors import LexError
from .lexer import split_at_spaces, split_lines, split_operand_args, split_separated_args
from .parser import parse_operands
from .patterns import LineKind, line_kind, split_instruction_and_size

logger = logging.getLogger(__name__)

def _walk(op: Operand) -> Iterator[Operand]:
    yield op
    if isinstance(op, (Indirect, PostIndirect, PreIndirect)):
        yield from _walk(op.operand)
    elif isinstance(op, IndirectWithDisplacement):
        for sub in op.operands:
            yield from _walk(sub)

class Lexer:
    """Convierte texto fuente 68000 en una secuencia de ParsedLine, una por línea física.

    Pasos: sustitución de 'equ' -> clasificación de la línea -> división de
    operandos -> árbol de cada operando. Los errores al construir operandos
    no detienen el proceso: se registran en `diagnostics` y la línea queda
    como Unknown.
    """

    def __init__(self, *, directives: Optional[AbstractSet[str]] = None,
                 filename: Optional[str] = None):
        self.directives = DIRECTIVES if directives is None else frozenset(d.lower() for d in directives)
        self.filename = filename
        self.lines: List[ParsedLine] = []
        self.diagnostics: List[Diagnostic] = []

    def lex(self, code: str) -> List[ParsedLine]:
        self.lines = []
        self.diagnostics = []
        for lineno, raw in enumerate(apply_equ(split_lines(code)), start=1):
            line = raw.strip()
            try:
                parsed = self._parse_line(line, lineno)
            except LexError as exc:
                self.diagnostics.append(from_lex_error(exc, line=lineno, file=self.filename))
                parsed = Unknown()
            logger.debug("línea %d: %s", lineno, type(parsed).__name__)
            self.lines.append(ParsedLine(line=line, parsed=parsed))
        return self.lines

    def get_lines(self) -> List[ParsedLine]:
        return list(self.lines)

    def _parse_line(self, line: str, lineno: int) -> Line:
        kind = line_kind(line.lower(), self.directives)
        args = split_at_spaces(line)

        if kind is LineKind.INSTRUCTION:
            name, size = split_instruction_and_size(args[0].lower())
            if size is Size.UNKNOWN:
                self.diagnostics.append(warning(
                    f"Sufijo de tamaño desconocido en '{args[0]}'", line=lineno,
                    file=self.filename, hint="use .b, .w o .l", token=args[0]))
            operands = parse_operands(split_operand_args(" ".join(args[1:])))
            for op in operands:
                for sub in _walk(op):
                    if isinstance(sub, Other):
                        self.diagnostics.append(warning(
                            f"Operando sin analizar: '{sub.text}'", line=lineno,
                            file=self.filename, token=sub.text))
            return Instruction(name=name, operands=tuple(operands), size=size)
        if kind is LineKind.LABEL:
            name = args[0].replace(":", "")
            return Label(name=name, args=tuple(split_separated_args(" ".join(args[1:]))))
        if kind is LineKind.DIRECTIVE:
            return Directive(args=tuple(args))
        if kind is LineKind.COMMENT:
            return Comment(content=line)
        if kind is LineKind.EMPTY:
            return Empty()
        return Unknown()

def lex_text(text: str, *, filename: str | None = None) -> Tuple[List[ParsedLine], List[Diagnostic]]:
    """Tokeniza el texto completo. Devuelve (líneas, diagnósticos)."""
    lexer = Lexer(filename=filename)
    lines = lexer.lex(text)
    return lines, lexer.diagnostics
