# --------------------------------------------------------------
# File: conftest.py
# Description: Fixtures compartidas para aislar la carpeta de claves y recargar módulos.
# --------------------------------------------------------------

import importlib
from typing import Iterator

import pytest


@pytest.fixture(autouse=True)
def _isolate_keys_dir(tmp_path, monkeypatch) -> Iterator[None]:
    """Aísla TEXTSEAL_KEYS_DIR y recarga textseal.config para cada prueba.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.
        monkeypatch (pytest.MonkeyPatch): Fixture para ajustar variables de entorno.

    Returns:
        Iterator[None]: Control del fixture autouse durante la ejecución de cada test.
    """
    keys_dir = tmp_path / "_keys"
    monkeypatch.setenv("TEXTSEAL_KEYS_DIR", str(keys_dir))

    import textseal.config as config_module

    importlib.reload(config_module)

    yield


@pytest.fixture
def zero_key() -> bytes:
    """Clave de 32 bytes a cero usada en los escenarios reproducibles."""
    return bytes(32)
