# --------------------------------------------------------------
# File: __init__.py
# Description: Exposición pública del paquete textseal.
# --------------------------------------------------------------
"""Firma, verificación y cifrado de textos con algoritmos intercambiables."""

__all__ = [
    "buffers",
    "config",
    "crypto_mac",
    "crypto_sign",
    "crypto_sym",
    "dispatch",
    "encoding",
    "errors",
    "keygen",
    "keys",
    "models",
]
