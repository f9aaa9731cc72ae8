# --------------------------------------------------------------
# File: test_services.py
# Description: Pruebas de integración de los servicios basados en archivos.
# --------------------------------------------------------------

import os

import pytest

from api import services
from textseal.errors import AEADAuthenticationFailure, UnsupportedAlgorithm


def _write(path, data: bytes) -> str:
    """Escribe datos binarios y devuelve la ruta como texto.

    Returns:
        str: Ruta del archivo creado.
    """
    path.write_bytes(data)
    return str(path)


def test_generate_writes_named_files(tmp_path):
    """Comprueba los nombres y tamaños de los archivos de clave generados.

    Args:
        tmp_path (Path): Carpeta temporal proporcionada por pytest.

    Returns:
        None: Las aserciones revisan cada archivo.
    """
    out = tmp_path / "claves"
    paths = services.process_key_generate("ed25519", str(out))
    assert [os.path.basename(p) for p in paths] == ["ed25519.sk", "ed25519.pk"]
    assert all(os.path.getsize(p) == 32 for p in paths)

    (mac_path,) = services.process_key_generate("blake3", str(out))
    assert mac_path.endswith("blake3.txt")
    (aead_path,) = services.process_key_generate("chacha20poly1305", str(out))
    assert aead_path.endswith("chacha20poly1305.txt")


def test_generate_defaults_to_configured_dir():
    """Sin carpeta explícita se usa TEXTSEAL_KEYS_DIR.

    Returns:
        None: La ruta escrita debe estar bajo la carpeta configurada.
    """
    (path,) = services.process_key_generate("blake3")
    assert path.startswith(os.environ["TEXTSEAL_KEYS_DIR"])
    assert os.path.exists(path)


def test_sign_and_verify_files(tmp_path):
    """Firma un archivo con Ed25519 y verifica con la clave pública.

    Returns:
        None: Se espera ``True`` para los datos originales y ``False`` si cambian.
    """
    sk_path, pk_path = services.process_key_generate("ed25519", str(tmp_path))
    data = _write(tmp_path / "data.txt", b"Hello, world!")
    signature = services.process_text_sign(data, sk_path, "ed25519")
    assert services.process_text_verify(data, pk_path, "ed25519", signature) is True

    other = _write(tmp_path / "other.txt", b"Hello, world?")
    assert services.process_text_verify(other, pk_path, "ed25519", signature) is False


def test_mac_sign_with_long_key_file(tmp_path):
    """Una clave de más de 32 bytes se trunca al leerla desde archivo.

    Returns:
        None: La firma debe coincidir con la de los primeros 32 bytes.
    """
    long_key = os.urandom(48)
    data = _write(tmp_path / "data.txt", b"abc")
    full = services.process_text_sign(data, _write(tmp_path / "k1", long_key), "blake3")
    short = services.process_text_sign(data, _write(tmp_path / "k2", long_key[:32]), "blake3")
    assert full == short


def test_encrypt_decrypt_files(tmp_path):
    """Cifra a archivo y descifra de vuelta al contenido original.

    Returns:
        None: Se compara el archivo recuperado.
    """
    (key,) = services.process_key_generate("chacha20poly1305", str(tmp_path))
    data = _write(tmp_path / "claro.txt", b"contenido secreto")
    enc = str(tmp_path / "claro.txt.enc")
    dec = str(tmp_path / "recuperado.txt")

    frame = services.process_text_encrypt(data, key, enc)
    assert (tmp_path / "claro.txt.enc").read_bytes() == frame
    services.process_text_decrypt(enc, key, dec)
    assert (tmp_path / "recuperado.txt").read_bytes() == b"contenido secreto"


def test_decrypt_with_other_key_fails(tmp_path):
    """Otra clave produce AEADAuthenticationFailure y no escribe salida.

    Returns:
        None: Se espera la excepción y la ausencia del archivo de salida.
    """
    (key,) = services.process_key_generate("chacha20poly1305", str(tmp_path / "a"))
    (other,) = services.process_key_generate("chacha20poly1305", str(tmp_path / "b"))
    enc = str(tmp_path / "x.enc")
    services.process_text_encrypt(_write(tmp_path / "x", b"x"), key, enc)
    with pytest.raises(AEADAuthenticationFailure):
        services.process_text_decrypt(enc, other, str(tmp_path / "out"))
    assert not (tmp_path / "out").exists()


def test_unknown_algorithm_before_reading(tmp_path):
    """El algoritmo se valida antes de abrir ningún archivo.

    Returns:
        None: Se espera UnsupportedAlgorithm aunque las rutas no existan.
    """
    missing = str(tmp_path / "no_existe")
    with pytest.raises(UnsupportedAlgorithm):
        services.process_text_sign(missing, missing, "sha256")
    with pytest.raises(UnsupportedAlgorithm):
        services.process_text_verify(missing, missing, "chacha20poly1305", "AAAA")
