# --------------------------------------------------------------
# File: errors.py
# Description: Jerarquía de errores de la capa criptográfica.
# --------------------------------------------------------------
"""Errores tipados que la capa criptográfica devuelve al llamante.

Un fallo de verificación no es un error: ``verify`` devuelve ``False``.
Ninguno de estos errores es reintentable.
"""

from __future__ import annotations

from typing import Optional


class TextSealError(Exception):
    """Clase base de todos los errores de textseal."""


class KeyTooShort(TextSealError):
    """El material de clave tiene menos bytes de los requeridos.

    Attributes:
        required (int): Longitud mínima exigida en bytes.
        actual (int): Longitud recibida en bytes.

    """

    def __init__(self, required: int, actual: int) -> None:
        self.required = required
        self.actual = actual
        super().__init__(
            f"La clave debe tener al menos {required} bytes (recibidos {actual})."
        )


class UnsupportedAlgorithm(TextSealError):
    """El algoritmo no existe o no admite la operación solicitada."""

    def __init__(self, name: str, operation: Optional[str] = None) -> None:
        self.name = name
        self.operation = operation
        if operation is None:
            message = f"Algoritmo no soportado: {name!r}."
        else:
            message = f"El algoritmo {name!r} no admite la operación {operation!r}."
        super().__init__(message)


class DecodeError(TextSealError):
    """La firma candidata no es Base64 válido o no es estructuralmente una firma."""


class CiphertextTooShort(TextSealError):
    """El bloque cifrado es más corto que el nonce que debe contener."""

    def __init__(self, minimum: int, actual: int) -> None:
        self.minimum = minimum
        self.actual = actual
        super().__init__(
            f"Texto cifrado inválido: {actual} bytes, se requieren al menos {minimum}."
        )


class AEADAuthenticationFailure(TextSealError):
    """La etiqueta AEAD no valida: clave incorrecta o datos alterados."""


class InvalidKeyMaterial(TextSealError):
    """La clave tiene una longitud aceptable pero la primitiva la rechaza."""
