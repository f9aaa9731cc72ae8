# --------------------------------------------------------------
# File: models.py
# Description: Modelos de datos comunes utilizados por la capa criptográfica.
# --------------------------------------------------------------
"""Algoritmos soportados y modelos Pydantic de intercambio criptográfico."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, field_validator

from textseal.errors import CiphertextTooShort, UnsupportedAlgorithm

NONCE_LEN = 12


class AlgorithmTag(str, Enum):
    """Algoritmos admitidos, identificados por su selector exacto."""

    MAC_BLAKE3 = "blake3"
    SIGNATURE_ED25519 = "ed25519"
    AEAD_CHACHA20POLY1305 = "chacha20poly1305"

    @classmethod
    def parse(cls, name: str) -> "AlgorithmTag":
        """Resuelve un selector de texto sin tocar material de clave.

        Args:
            name (str): Selector sensible a mayúsculas (``"blake3"``, ...).

        Returns:
            AlgorithmTag: Variante correspondiente.

        Raises:
            UnsupportedAlgorithm: Si el selector no coincide exactamente.

        """

        if isinstance(name, cls):
            return name
        try:
            return cls(name)
        except ValueError as exc:
            raise UnsupportedAlgorithm(str(name)) from exc


class CipherFrame(BaseModel):
    """Representa el bloque ``nonce || ciphertext_con_tag`` de ChaCha20-Poly1305.

    Attributes:
        nonce (bytes): Nonce de 96 bits generado en cada cifrado.
        body (bytes): Texto cifrado concatenado con su etiqueta de 128 bits.

    """

    nonce: bytes
    body: bytes

    @field_validator("nonce")
    @classmethod
    def check_nonce_len(cls, value: bytes) -> bytes:
        if len(value) != NONCE_LEN:
            raise ValueError(f"el nonce debe tener {NONCE_LEN} bytes")
        return value

    @classmethod
    def from_bytes(cls, frame: bytes) -> "CipherFrame":
        """Separa un bloque serializado en nonce y cuerpo.

        Raises:
            CiphertextTooShort: Si el bloque no alcanza los 12 bytes del nonce.

        """

        if len(frame) < NONCE_LEN:
            raise CiphertextTooShort(NONCE_LEN, len(frame))
        return cls(nonce=frame[:NONCE_LEN], body=frame[NONCE_LEN:])

    def to_bytes(self) -> bytes:
        return self.nonce + self.body


class KeyArtifact(BaseModel):
    """Material de clave generado junto al nombre de archivo con el que se entrega."""

    filename: str
    material: bytes
