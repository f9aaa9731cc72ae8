# --------------------------------------------------------------
# File: buffers.py
# Description: Lectura de buffers de entrada y escritura de resultados.
# --------------------------------------------------------------
"""Funciones auxiliares de entrada/salida para datos y material de clave."""

from __future__ import annotations

import os
import sys
from typing import Union

__all__ = ["STDIO", "read_buffer_from_input", "write_output"]

STDIO = "-"


def _ensure_parent_dir(path: str) -> None:
    """Garantiza que exista el directorio padre del archivo de destino."""

    parent = os.path.dirname(path) or "."
    os.makedirs(parent, exist_ok=True)


def read_buffer_from_input(source: str) -> bytes:
    """Lee completo un archivo o la entrada estándar.

    Al escribir en una terminal el usuario termina con Enter + Ctrl-D, por lo
    que de la entrada estándar se elimina un único salto de línea final.

    Args:
        source (str): Ruta del archivo o ``"-"`` para la entrada estándar.

    Returns:
        bytes: Contenido íntegro de la fuente.

    """

    if source == STDIO:
        buf = sys.stdin.buffer.read()
        if buf.endswith(b"\n"):
            buf = buf[:-1]
        return buf
    with open(source, "rb") as handler:
        return handler.read()


def write_output(destination: str, payload: Union[str, bytes]) -> None:
    """Escribe un resultado de texto o binario aplicando escritura atómica.

    Args:
        destination (str): Ruta de salida o ``"-"`` para la salida estándar.
        payload (Union[str, bytes]): Texto UTF-8 o bytes en bruto.

    """

    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    if destination == STDIO:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()
        return

    _ensure_parent_dir(destination)
    tmp_path = f"{destination}.tmp"
    with open(tmp_path, "wb") as handler:
        handler.write(data)
    os.replace(tmp_path, destination)
