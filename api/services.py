# --------------------------------------------------------------
# File: services.py
# Description: Servicios de firma, verificación, cifrado y claves sobre archivos.
# --------------------------------------------------------------
"""Funciones de la capa de servicios que combinan lectura, despacho y escritura."""

import logging
import os
from typing import Dict, List, Optional, Tuple

from textseal import config
from textseal.buffers import read_buffer_from_input, write_output
from textseal.dispatch import (
    CIPHERS,
    SIGNERS,
    VERIFIERS,
    decrypt_text,
    encrypt_text,
    generate_keys,
    resolve,
    sign_text,
    verify_text,
)
from textseal.models import AlgorithmTag, KeyArtifact

logger = logging.getLogger(__name__)

# Nombres de archivo con los que se entrega cada artefacto generado.
KEY_FILENAMES: Dict[AlgorithmTag, Tuple[str, ...]] = {
    AlgorithmTag.MAC_BLAKE3: ("blake3.txt",),
    AlgorithmTag.SIGNATURE_ED25519: ("ed25519.sk", "ed25519.pk"),
    AlgorithmTag.AEAD_CHACHA20POLY1305: ("chacha20poly1305.txt",),
}


def process_text_sign(input: str, key: str, algorithm: str) -> str:
    """Firma el contenido de un archivo o de la entrada estándar.

    Args:
        input (str): Ruta de los datos o ``"-"``.
        key (str): Ruta de la clave compartida (BLAKE3) o de la semilla (Ed25519).
        algorithm (str): ``"blake3"`` o ``"ed25519"``.

    Returns:
        str: Firma en Base64 URL-safe sin relleno.

    """

    tag = AlgorithmTag.parse(algorithm)
    resolve(tag, SIGNERS, "sign")
    data = read_buffer_from_input(input)
    return sign_text(tag, read_buffer_from_input(key), data)


def process_text_verify(input: str, key: str, algorithm: str, signature: str) -> bool:
    """Verifica la firma de un archivo o de la entrada estándar.

    Args:
        input (str): Ruta de los datos o ``"-"``.
        key (str): Ruta de la clave compartida (BLAKE3) o pública (Ed25519).
        algorithm (str): ``"blake3"`` o ``"ed25519"``.
        signature (str): Firma codificada a comprobar.

    Returns:
        bool: ``True`` si la firma es válida; ``False`` en caso contrario.

    """

    tag = AlgorithmTag.parse(algorithm)
    resolve(tag, VERIFIERS, "verify")
    data = read_buffer_from_input(input)
    ok = verify_text(tag, read_buffer_from_input(key), data, signature)
    logger.info("Verificación %s sobre %s: %s", tag.value, input, ok)
    return ok


def process_text_encrypt(input: str, key: str, output: Optional[str] = None) -> bytes:
    """Cifra un archivo con ChaCha20-Poly1305 y opcionalmente guarda el bloque."""

    aead = AlgorithmTag.AEAD_CHACHA20POLY1305
    resolve(aead, CIPHERS, "encrypt")
    data = read_buffer_from_input(input)
    frame = encrypt_text(aead, read_buffer_from_input(key), data)
    if output is not None:
        write_output(output, frame)
        logger.info("Bloque cifrado escrito en %s (%d bytes)", output, len(frame))
    return frame


def process_text_decrypt(input: str, key: str, output: Optional[str] = None) -> bytes:
    """Descifra un bloque ``nonce || ciphertext`` y opcionalmente guarda el claro."""

    aead = AlgorithmTag.AEAD_CHACHA20POLY1305
    resolve(aead, CIPHERS, "decrypt")
    frame = read_buffer_from_input(input)
    plaintext = decrypt_text(aead, read_buffer_from_input(key), frame)
    if output is not None:
        write_output(output, plaintext)
        logger.info("Texto descifrado escrito en %s", output)
    return plaintext


def key_artifacts(algorithm: str) -> List[KeyArtifact]:
    """Genera las claves de un algoritmo y les asigna su nombre de archivo.

    Returns:
        List[KeyArtifact]: Artefactos en el orden de :data:`KEY_FILENAMES`.

    Raises:
        RuntimeError: Si el número de artefactos no es el esperado.

    """

    tag = AlgorithmTag.parse(algorithm)
    names = KEY_FILENAMES[tag]
    materials = generate_keys(tag)
    if len(materials) != len(names):
        raise RuntimeError(f"Generación de claves {tag.value} fallida")
    return [KeyArtifact(filename=name, material=m) for name, m in zip(names, materials)]


def process_key_generate(algorithm: str, output_dir: Optional[str] = None) -> List[str]:
    """Genera y guarda en disco las claves de un algoritmo.

    Args:
        algorithm (str): Selector del algoritmo.
        output_dir (Optional[str]): Carpeta destino; por defecto ``TEXTSEAL_KEYS_DIR``.

    Returns:
        List[str]: Rutas de los archivos escritos.

    """

    artifacts = key_artifacts(algorithm)
    directory = output_dir or config.KEYS_DIR
    os.makedirs(directory, exist_ok=True)

    paths = []
    for artifact in artifacts:
        path = os.path.join(directory, artifact.filename)
        write_output(path, artifact.material)
        paths.append(path)
    logger.info("Claves %s generadas en %s", algorithm, directory)
    return paths
