'''
vocabulario léxico del ensamblador 68000 (comentarios, separadores, directivas)
'''

from __future__ import annotations
from typing import FrozenSet

# Delimitador de comentario de línea (también marca comentarios en operandos)
COMMENT = ";"

# Separador entre operandos de una instrucción
OPERAND_SEPARATOR = ","

# Palabra clave de definición de constantes: 'NOMBRE equ VALOR'
EQU = "equ"

# Directivas reconocidas por nombre (en minúsculas)
DIRECTIVES: FrozenSet[str] = frozenset({
    "equ", "org", "section", "end",
    "dc", "dc.b", "dc.w", "dc.l",
    "ds", "ds.b", "ds.w", "ds.l",
    "dcb", "dcb.b", "dcb.w", "dcb.l",
})
