# --------------------------------------------------------------
# File: keygen.py
# Description: Generación del material de clave adecuado a cada algoritmo.
# --------------------------------------------------------------
"""Generación de claves con el generador aleatorio seguro del sistema."""

import os
from typing import List

from textseal.crypto_sign import ed25519_public_key
from textseal.keys import SECRET_KEY_LEN
from textseal.models import AlgorithmTag


def generate(tag: AlgorithmTag) -> List[bytes]:
    """Genera los artefactos de clave de un algoritmo sin escribir en disco.

    Args:
        tag (AlgorithmTag): Algoritmo para el que se generan las claves.

    Returns:
        List[bytes]: Una clave de 32 bytes para BLAKE3 y ChaCha20-Poly1305;
        ``[semilla_firma, clave_verificacion]`` para Ed25519.

    """

    tag = AlgorithmTag.parse(tag)
    if tag is AlgorithmTag.SIGNATURE_ED25519:
        seed = os.urandom(SECRET_KEY_LEN)
        return [seed, ed25519_public_key(seed)]
    return [os.urandom(SECRET_KEY_LEN)]
