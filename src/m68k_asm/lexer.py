from __future__ import annotations
from enum import Enum
from typing import List, Optional, Tuple

from .ast import ArgSeparated, Comma, Space
from .constants import COMMENT, OPERAND_SEPARATOR

class ScanState(Enum):
    """Estado del escáner: fuera o dentro de un paréntesis (un solo nivel)."""
    NORMAL = "normal"
    IN_PARENS = "in_parens"

def split_comment(line: str) -> Tuple[str, Optional[str]]:
    """Separa 'código ; comentario' en (código, comentario); comentario None si no hay."""
    code, sep, comment = line.partition(COMMENT)
    if not sep:
        return line, None
    return code, comment

def split_lines(text: str) -> List[str]:
    """Divide solo por '\\n' (sin línea vacía final) y quita un '\\r' final de cada línea."""
    if not text:
        return []
    lines = text.split('\n')
    if text.endswith('\n'):
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]

def split_at_spaces(line: str) -> List[str]:
    return line.split()

def _scan_parens(ch: str, state: ScanState) -> ScanState:
    if ch == '(':
        return ScanState.IN_PARENS
    if ch == ')':
        return ScanState.NORMAL
    return state

def split_operand_args(line: str, separator: str = OPERAND_SEPARATOR) -> List[str]:
    """Divide por el separador salvo dentro de paréntesis: 'd0,4(a0,d1)' -> ['d0', '4(a0,d1)']."""
    if not line.strip():
        return []
    out = []
    cur = []
    state = ScanState.NORMAL
    for ch in line:
        state = _scan_parens(ch, state)
        if ch == separator and state is ScanState.NORMAL:
            out.append(''.join(cur).strip())
            cur = []
        else:
            cur.append(ch)
    out.append(''.join(cur).strip())
    return out

def split_separated_args(line: str) -> List[ArgSeparated]:
    """Divide por ',' o ' ' marcando qué separador terminó cada argumento.

    Reglas:
      - Dentro de paréntesis ni ',' ni ' ' separan.
      - Los espacios que siguen a una ',' se descartan, así 'a, b' da dos
        argumentos y no tres.
      - Un espacio con el argumento actual vacío no emite nada.
      - El último argumento toma el tipo del último separador visto
        (Space si no hubo ninguno).
    """
    out: List[ArgSeparated] = []
    cur = []
    state = ScanState.NORMAL
    last_ch = ' '
    last_sep = ' '
    for ch in line:
        if ch == ' ':
            # no actualiza last_ch: se saltan todos los espacios tras la coma
            if last_ch == ',':
                continue
            if state is ScanState.IN_PARENS:
                cur.append(ch)
            elif not cur:
                continue
            else:
                out.append(Space(''.join(cur).strip()))
                cur = []
                last_sep = ch
        elif ch == ',' and state is ScanState.NORMAL:
            out.append(Comma(''.join(cur).strip()))
            cur = []
            last_sep = ch
        else:
            state = _scan_parens(ch, state)
            cur.append(ch)
        last_ch = ch

    rest = ''.join(cur).strip()
    if rest:
        out.append(Comma(rest) if last_sep == ',' else Space(rest))
    return out
