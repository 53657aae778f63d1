'''
excepciones del lexer (operandos que no se pueden descomponer)
'''

from __future__ import annotations


class LexError(ValueError):
    """Error recuperable al construir el árbol de un operando."""
    def __init__(self, token: str, reason: str):
        self.token = token
        self.reason = reason
        super().__init__(f"{reason}: '{token}'")


class UnrecognizedRegister(LexError):
    """El token parece un registro pero su prefijo no es d/a/sp."""
    def __init__(self, token: str):
        super().__init__(token, "Registro inválido")


class MalformedIndirect(LexError):
    """Operando indirecto cuyo paréntesis no contiene ningún operando."""
    def __init__(self, token: str):
        super().__init__(token, "Operando indirecto inválido")
