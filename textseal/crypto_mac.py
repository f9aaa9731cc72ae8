# --------------------------------------------------------------
# File: crypto_mac.py
# Description: Firma y verificación simétrica con BLAKE3 en modo con clave.
# --------------------------------------------------------------
"""Etiquetas de integridad MAC basadas en el hash con clave de BLAKE3."""

import hmac

from blake3 import blake3

from textseal.encoding import b64u
from textseal.keys import load_secret


class Blake3Mac:
    """Firmante y verificador MAC con una clave compartida de 32 bytes."""

    def __init__(self, key: bytes) -> None:
        self._key = load_secret(key)

    def sign(self, data: bytes) -> str:
        """Calcula el hash con clave de 256 bits y lo codifica en Base64 URL-safe.

        Args:
            data (bytes): Datos a autenticar.

        Returns:
            str: Etiqueta MAC sin relleno.

        """

        return b64u(blake3(data, key=self._key).digest())

    def verify(self, data: bytes, signature: str) -> bool:
        """Recalcula la etiqueta y la compara con la candidata.

        Una candidata mal formada simplemente no coincide.
        """

        expected = self.sign(data)
        return hmac.compare_digest(expected.encode("utf-8"), signature.encode("utf-8"))
