'''
registros del 68000: clasificación d/a/sp y validaciones
'''

from __future__ import annotations
from typing import Dict

from .ast import RegisterType
from .errors import UnrecognizedRegister

# Primer carácter del registro -> tipo
PREFIX_TO_TYPE: Dict[str, RegisterType] = {
    "d": RegisterType.DATA,
    "a": RegisterType.ADDRESS,
    "s": RegisterType.STACK_POINTER,
}

def register_type(token: str) -> RegisterType:
    """Devuelve el tipo de registro según su primer carácter o lanza UnrecognizedRegister."""
    t = token.strip().lower()
    if not t or t[0] not in PREFIX_TO_TYPE:
        raise UnrecognizedRegister(token)
    return PREFIX_TO_TYPE[t[0]]
