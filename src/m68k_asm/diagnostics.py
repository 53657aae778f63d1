'''
clase Diagnostic y helpers (línea, token, severidad)
'''

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional, Literal

from .errors import LexError

# Severidad de los diagnósticos
Severity = Literal["error", "advertencia"]

_SEV_TO_LABEL = {
    "error": "ERROR",
    "advertencia": "ADVERTENCIA",
}

@dataclass(frozen=True)
class Diagnostic:
    """Problema encontrado al tokenizar una línea.

    Los errores provienen de LexError (registro u operando indirecto que no se
    pudo construir); las advertencias marcan formas que el lexer deja sin
    analizar (Other, tamaño desconocido) para que las etapas posteriores
    decidan qué hacer con ellas.
    """
    severity: Severity
    message: str
    line: Optional[int] = None
    col: Optional[int] = None
    hint: Optional[str] = None
    file: Optional[str] = None
    token: Optional[str] = None

    def __str__(self) -> str:
        loc = ""
        if self.file is not None:
            loc += f"{self.file}:"
        if self.line is not None:
            loc += f"{self.line}"
            if self.col is not None:
                loc += f":{self.col}"
        if loc:
            loc += ": "
        sev = _SEV_TO_LABEL.get(self.severity, str(self.severity).upper())
        core = f"{sev}: {self.message}"
        if self.hint:
            core += f"  (pista: {self.hint})"
        return loc + core

def error(message: str, *, line: int | None = None, col: int | None = None,
          file: str | None = None, hint: str | None = None,
          token: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo error."""
    return Diagnostic("error", message, line, col, hint, file, token)

def warning(message: str, *, line: int | None = None, col: int | None = None,
            file: str | None = None, hint: str | None = None,
            token: str | None = None) -> Diagnostic:
    """Crea un diagnóstico de tipo advertencia."""
    return Diagnostic("advertencia", message, line, col, hint, file, token)

def from_lex_error(exc: LexError, *, line: int | None = None,
                   file: str | None = None) -> Diagnostic:
    """Convierte un LexError en un diagnóstico de error."""
    return error(str(exc), line=line, file=file, token=exc.token)
