# --------------------------------------------------------------
# File: dispatch.py
# Description: Resolución de algoritmos y enrutado de operaciones a cada backend.
# --------------------------------------------------------------
"""Tablas de despacho entre selectores de algoritmo y backends concretos.

Cada operación solo conoce los algoritmos capaces de ejecutarla: firmar o
verificar con ChaCha20-Poly1305, o cifrar con BLAKE3, no tiene entrada en la
tabla y se rechaza antes de leer ninguna clave.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Union

from textseal import keygen
from textseal.crypto_mac import Blake3Mac
from textseal.crypto_sign import Ed25519Signer, Ed25519Verifier
from textseal.crypto_sym import ChaCha20Poly1305Cipher
from textseal.errors import UnsupportedAlgorithm
from textseal.models import AlgorithmTag

logger = logging.getLogger(__name__)

Selector = Union[AlgorithmTag, str]

SIGNERS: Dict[AlgorithmTag, Callable[[bytes], Union[Blake3Mac, Ed25519Signer]]] = {
    AlgorithmTag.MAC_BLAKE3: Blake3Mac,
    AlgorithmTag.SIGNATURE_ED25519: Ed25519Signer,
}

VERIFIERS: Dict[AlgorithmTag, Callable[[bytes], Union[Blake3Mac, Ed25519Verifier]]] = {
    AlgorithmTag.MAC_BLAKE3: Blake3Mac,
    AlgorithmTag.SIGNATURE_ED25519: Ed25519Verifier,
}

CIPHERS: Dict[AlgorithmTag, Callable[[bytes], ChaCha20Poly1305Cipher]] = {
    AlgorithmTag.AEAD_CHACHA20POLY1305: ChaCha20Poly1305Cipher,
}


def resolve(algorithm: Selector, table: Dict[AlgorithmTag, Callable], operation: str) -> Callable:
    """Devuelve el constructor del backend que ejecuta ``operation``.

    Raises:
        UnsupportedAlgorithm: Si el selector es desconocido o no admite la operación.

    """

    tag = AlgorithmTag.parse(algorithm)
    try:
        return table[tag]
    except KeyError as exc:
        raise UnsupportedAlgorithm(tag.value, operation) from exc


def sign_text(algorithm: Selector, key: bytes, data: bytes) -> str:
    """Firma ``data`` con BLAKE3 (MAC) o Ed25519 y devuelve la firma codificada."""

    tag = AlgorithmTag.parse(algorithm)
    backend = resolve(tag, SIGNERS, "sign")
    logger.debug("Firmando %d bytes con %s", len(data), tag.value)
    return backend(key).sign(data)


def verify_text(algorithm: Selector, key: bytes, data: bytes, signature: str) -> bool:
    """Verifica una firma codificada; ``False`` indica que no corresponde."""

    tag = AlgorithmTag.parse(algorithm)
    backend = resolve(tag, VERIFIERS, "verify")
    logger.debug("Verificando %d bytes con %s", len(data), tag.value)
    return backend(key).verify(data, signature)


def encrypt_text(algorithm: Selector, key: bytes, data: bytes) -> bytes:
    """Cifra ``data`` y devuelve el bloque ``nonce || ciphertext_con_tag``."""

    tag = AlgorithmTag.parse(algorithm)
    backend = resolve(tag, CIPHERS, "encrypt")
    logger.debug("Cifrando %d bytes con %s", len(data), tag.value)
    return backend(key).encrypt(data)


def decrypt_text(algorithm: Selector, key: bytes, frame: bytes) -> bytes:
    """Descifra un bloque producido por :func:`encrypt_text`."""

    tag = AlgorithmTag.parse(algorithm)
    backend = resolve(tag, CIPHERS, "decrypt")
    logger.debug("Descifrando %d bytes con %s", len(frame), tag.value)
    return backend(key).decrypt(frame)


def generate_keys(algorithm: Selector) -> List[bytes]:
    """Genera el material de clave de cualquiera de los algoritmos soportados."""

    return keygen.generate(AlgorithmTag.parse(algorithm))
