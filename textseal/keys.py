# --------------------------------------------------------------
# File: keys.py
# Description: Carga y normalización del material de clave de 32 bytes.
# --------------------------------------------------------------
"""Validación compartida del material de clave simétrico y de semillas."""

from textseal.errors import KeyTooShort

SECRET_KEY_LEN = 32


def load_secret(raw: bytes) -> bytes:
    """Normaliza material de clave a un secreto de exactamente 32 bytes.

    Los bytes sobrantes se descartan; no realiza lectura de archivos.

    Args:
        raw (bytes): Material de clave ya leído por el proveedor de buffers.

    Returns:
        bytes: Los primeros 32 bytes de ``raw``.

    Raises:
        KeyTooShort: Si ``raw`` tiene menos de 32 bytes.

    """

    if len(raw) < SECRET_KEY_LEN:
        raise KeyTooShort(SECRET_KEY_LEN, len(raw))
    return bytes(raw[:SECRET_KEY_LEN])
