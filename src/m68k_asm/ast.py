'''
dataclasses de la representación por líneas (Line, Operand, ParsedLine)
'''

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union

# ---- Etiquetas de clasificación ----

class RegisterType(Enum):
    ADDRESS = "address"
    DATA = "data"
    STACK_POINTER = "sp"

class Size(Enum):
    """Sufijo de tamaño del mnemónico (.b/.w/.l)."""
    BYTE = "b"
    WORD = "w"
    LONG = "l"
    UNSPECIFIED = "unspecified"   # sin sufijo
    UNKNOWN = "unknown"           # sufijo presente pero no reconocido

# ---- Operandos ----

@dataclass(frozen=True)
class Register:
    """Registro directo: d0-d7, a0-a7 o sp."""
    type: RegisterType
    name: str

@dataclass(frozen=True)
class Immediate:
    """Inmediato '#valor', texto sin interpretar."""
    value: str

@dataclass(frozen=True)
class Indirect:
    """offset(op): un único operando entre paréntesis."""
    offset: str
    operand: 'Operand'

@dataclass(frozen=True)
class IndirectWithDisplacement:
    """offset(op1,op2,...): base e índice entre paréntesis."""
    offset: str
    operands: Tuple['Operand', ...]

@dataclass(frozen=True)
class PostIndirect:
    """(op)+"""
    operand: 'Operand'

@dataclass(frozen=True)
class PreIndirect:
    """-(op)"""
    operand: 'Operand'

@dataclass(frozen=True)
class Address:
    """Dirección absoluta '$...'."""
    value: str

@dataclass(frozen=True)
class Sym:
    """Símbolo referenciado; también el caso por defecto si nada más encaja."""
    name: str

@dataclass(frozen=True)
class Other:
    """Indirecto con paréntesis que no se pudo descomponer."""
    text: str

Operand = Union[Register, Immediate, Indirect, IndirectWithDisplacement,
                PostIndirect, PreIndirect, Address, Sym, Other]

# ---- Argumentos con separador (líneas con etiqueta) ----

@dataclass(frozen=True)
class Comma:
    """Argumento terminado por ','."""
    text: str

@dataclass(frozen=True)
class Space:
    """Argumento terminado por ' '."""
    text: str

ArgSeparated = Union[Comma, Space]

# ---- Nodos a nivel de línea ----

@dataclass(frozen=True)
class Label:
    """Línea 'nombre: ...' con el resto de argumentos y su separador."""
    name: str
    args: Tuple[ArgSeparated, ...] = ()

@dataclass(frozen=True)
class Directive:
    """Línea con una directiva; args son los tokens crudos."""
    args: Tuple[str, ...] = ()

@dataclass(frozen=True)
class Instruction:
    """Instrucción con mnemónico, tamaño y operandos tipados."""
    name: str
    operands: Tuple[Operand, ...]
    size: Size = Size.UNSPECIFIED

@dataclass(frozen=True)
class Comment:
    content: str

@dataclass(frozen=True)
class Empty:
    pass

@dataclass(frozen=True)
class Unknown:
    pass

Line = Union[Label, Directive, Instruction, Comment, Empty, Unknown]

@dataclass(frozen=True)
class ParsedLine:
    """Texto original (recortado) de la línea junto a su forma analizada."""
    line: str
    parsed: Line
