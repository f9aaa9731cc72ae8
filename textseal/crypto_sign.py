# --------------------------------------------------------------
# File: crypto_sign.py
# Description: Funciones para firmar y verificar textos con Ed25519.
# --------------------------------------------------------------
"""Firmas Ed25519 sobre claves en bruto de 32 bytes."""

import logging

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import ed25519

from textseal.encoding import b64u, unb64u
from textseal.errors import DecodeError
from textseal.keys import load_secret

SIGNATURE_LEN = 64

logger = logging.getLogger(__name__)


class Ed25519Signer:
    """Firmante Ed25519 derivado de forma determinista de una semilla de 32 bytes."""

    def __init__(self, seed: bytes) -> None:
        self._key = ed25519.Ed25519PrivateKey.from_private_bytes(load_secret(seed))

    def sign(self, data: bytes) -> str:
        """Firma un mensaje y codifica la firma en Base64 URL-safe sin relleno.

        Args:
            data (bytes): Mensaje que se firmará.

        Returns:
            str: Firma Ed25519 de 64 bytes codificada.

        """

        return b64u(self._key.sign(data))


class Ed25519Verifier:
    """Verificador Ed25519 construido a partir de la clave pública en bruto."""

    def __init__(self, public_key: bytes) -> None:
        self._key = ed25519.Ed25519PublicKey.from_public_bytes(load_secret(public_key))

    def verify(self, data: bytes, signature: str) -> bool:
        """Verifica una firma codificada sobre ``data``.

        Args:
            data (bytes): Mensaje original firmado.
            signature (str): Firma en Base64 URL-safe sin relleno.

        Returns:
            bool: ``True`` si la firma es válida; ``False`` si no corresponde.

        Raises:
            DecodeError: Si la firma no es Base64 válido o no mide 64 bytes.

        """

        try:
            raw = unb64u(signature)
        except DecodeError:
            logger.warning("Firma Ed25519 con codificación inválida")
            raise
        if len(raw) != SIGNATURE_LEN:
            logger.warning("Firma Ed25519 de %d bytes rechazada", len(raw))
            raise DecodeError(
                f"Una firma Ed25519 ocupa {SIGNATURE_LEN} bytes (recibidos {len(raw)})."
            )
        try:
            self._key.verify(raw, data)
        except InvalidSignature:
            logger.debug("Firma Ed25519 no válida para %d bytes de datos", len(data))
            return False
        return True


def ed25519_public_key(seed: bytes) -> bytes:
    """Deriva la clave pública en bruto que corresponde a una semilla."""

    private_key = ed25519.Ed25519PrivateKey.from_private_bytes(load_secret(seed))
    return private_key.public_key().public_bytes_raw()
