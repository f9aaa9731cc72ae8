# --------------------------------------------------------------
# File: crypto_sym.py
# Description: Primitivas ChaCha20-Poly1305 para cifrado y descifrado autenticado.
# --------------------------------------------------------------
"""Rutinas de cifrado simétrico autenticado con nonce prefijado."""

import logging
import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import ChaCha20Poly1305

from textseal.errors import AEADAuthenticationFailure, InvalidKeyMaterial, KeyTooShort
from textseal.models import NONCE_LEN, CipherFrame

KEY_LEN = 32

logger = logging.getLogger(__name__)


def _cipher(key: bytes) -> ChaCha20Poly1305:
    # Las claves AEAD se generan, nunca se truncan.
    if len(key) < KEY_LEN:
        raise KeyTooShort(KEY_LEN, len(key))
    if len(key) != KEY_LEN:
        raise InvalidKeyMaterial(
            f"La clave ChaCha20-Poly1305 debe tener exactamente {KEY_LEN} bytes "
            f"(recibidos {len(key)})."
        )
    return ChaCha20Poly1305(key)


def chacha_encrypt(key: bytes, plaintext: bytes) -> bytes:
    """Cifra datos con ChaCha20-Poly1305 usando un nonce aleatorio nuevo.

    El nonce se genera siempre aquí; nunca se acepta como parámetro.

    Args:
        key (bytes): Clave simétrica de 256 bits.
        plaintext (bytes): Datos en claro que se cifrarán.

    Returns:
        bytes: Bloque ``nonce(12) || ciphertext || tag(16)``.

    """

    cipher = _cipher(key)
    nonce = os.urandom(NONCE_LEN)
    body = cipher.encrypt(nonce, plaintext, None)
    return CipherFrame(nonce=nonce, body=body).to_bytes()


def chacha_decrypt(key: bytes, frame: bytes) -> bytes:
    """Descifra un bloque ``nonce || ciphertext_con_tag``.

    Args:
        key (bytes): Clave simétrica que protege los datos.
        frame (bytes): Bloque producido por :func:`chacha_encrypt`.

    Returns:
        bytes: Mensaje original en claro.

    Raises:
        CiphertextTooShort: Si el bloque no contiene un nonce completo.
        AEADAuthenticationFailure: Si la etiqueta no valida.

    """

    parsed = CipherFrame.from_bytes(frame)
    cipher = _cipher(key)
    try:
        return cipher.decrypt(parsed.nonce, parsed.body, None)
    except InvalidTag as exc:
        logger.warning("Autenticación ChaCha20-Poly1305 fallida (%d bytes)", len(frame))
        raise AEADAuthenticationFailure(
            "No se pudo descifrar: clave incorrecta o datos alterados."
        ) from exc


class ChaCha20Poly1305Cipher:
    """Cifrador AEAD ligado a una clave de 32 bytes."""

    def __init__(self, key: bytes) -> None:
        _cipher(key)
        self._key = bytes(key)

    def encrypt(self, data: bytes) -> bytes:
        return chacha_encrypt(self._key, data)

    def decrypt(self, frame: bytes) -> bytes:
        return chacha_decrypt(self._key, frame)
