'''
sustitución de constantes 'NOMBRE equ VALOR' antes de clasificar las líneas
'''

from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import List, Set, Tuple

from .constants import COMMENT, EQU
from .lexer import split_at_spaces, split_comment

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class EquValue:
    """Par nombre -> texto de reemplazo, válido solo durante la pasada."""
    name: str
    replacement: str

def collect_equs(lines: List[str]) -> Tuple[List[EquValue], Set[int]]:
    """Devuelve (definiciones en orden, índices de las líneas que las definen)."""
    equs: List[EquValue] = []
    indexes: Set[int] = set()
    for i, line in enumerate(lines):
        args = split_at_spaces(line)
        if len(args) >= 3 and args[1].lower() == EQU:
            equs.append(EquValue(name=args[0], replacement=args[2]))
            indexes.add(i)
            logger.debug("equ %s -> %s (línea %d)", args[0], args[2], i + 1)
    return equs, indexes

def apply_equ(lines: List[str]) -> List[str]:
    """Reemplaza literalmente cada nombre definido con 'equ' en el código de las demás líneas.

    Todas las definiciones se recogen antes de sustituir nada; los valores no
    se sustituyen entre sí. Los comentarios (tras ';') y las líneas de
    definición se conservan intactos.
    """
    equs, indexes = collect_equs(lines)
    if not equs:
        return list(lines)

    out: List[str] = []
    for i, line in enumerate(lines):
        if i in indexes:
            out.append(line)
            continue
        code, comment = split_comment(line)
        for equ in equs:
            if equ.name in code:
                code = code.replace(equ.name, equ.replacement)
        out.append(code if comment is None else code + COMMENT + comment)
    return out
