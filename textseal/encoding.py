# --------------------------------------------------------------
# File: encoding.py
# Description: Codificación Base64 URL-safe sin relleno para firmas y etiquetas.
# --------------------------------------------------------------
"""Conversión entre bytes y Base64 URL-safe sin caracteres de relleno."""

import base64
import binascii
import re

from textseal.errors import DecodeError

_B64U_ALPHABET = re.compile(r"[A-Za-z0-9_-]*")


def b64u(data: bytes) -> str:
    """Codifica datos binarios en Base64 URL-safe sin relleno.

    Args:
        data (bytes): Datos binarios a convertir.

    Returns:
        str: Representación apta para un parámetro de URL.

    """

    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def unb64u(value: str) -> bytes:
    """Decodifica Base64 URL-safe sin relleno rechazando entradas mal formadas.

    Args:
        value (str): Cadena codificada sin relleno.

    Returns:
        bytes: Datos originales en formato binario.

    Raises:
        DecodeError: Si la cadena contiene caracteres fuera del alfabeto
            URL-safe, tiene una longitud imposible o no es canónica.

    """

    if not _B64U_ALPHABET.fullmatch(value):
        raise DecodeError("La firma contiene caracteres fuera de Base64 URL-safe.")
    try:
        raw = base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"Base64 URL-safe inválido: {exc}") from exc
    # Los bits sobrantes del último carácter deben ser cero.
    if b64u(raw) != value:
        raise DecodeError("Base64 URL-safe no canónico.")
    return raw
