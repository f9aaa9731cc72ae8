# --------------------------------------------------------------
# File: 2_Cifrar_y_Descifrar.py
# Description: Cifrado y descifrado ChaCha20-Poly1305 de archivos desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from textseal.config import configure_logging
from textseal.dispatch import decrypt_text, encrypt_text
from textseal.errors import TextSealError

configure_logging()

st.title("🔐 Cifrar y descifrar")
st.write("El archivo cifrado contiene `nonce (12 bytes) || ciphertext || tag`.")

key_file = st.file_uploader("Clave ChaCha20-Poly1305 (32 bytes)", key="aead_key")

col1, col2 = st.columns(2)
with col1:
    st.markdown("### Cifrar")
    plain_file = st.file_uploader("Archivo en claro", key="plain")
    if st.button("🔒 Cifrar"):
        if key_file is None or plain_file is None:
            st.warning("Selecciona la clave y el archivo a cifrar.")
            st.stop()
        try:
            frame = encrypt_text("chacha20poly1305", key_file.getvalue(), plain_file.getvalue())
        except TextSealError as exc:
            st.error(str(exc))
        else:
            st.success(f"Cifrado correcto ({len(frame)} bytes).")
            st.download_button(
                "⬇️ Descargar archivo cifrado (.enc)",
                data=frame,
                file_name=f"{plain_file.name}.enc",
                mime="application/octet-stream",
            )

with col2:
    st.markdown("### Descifrar")
    enc_file = st.file_uploader("Archivo cifrado", key="enc")
    if st.button("🔓 Descifrar"):
        if key_file is None or enc_file is None:
            st.warning("Selecciona la clave y el archivo cifrado.")
            st.stop()
        try:
            plaintext = decrypt_text("chacha20poly1305", key_file.getvalue(), enc_file.getvalue())
        except TextSealError as exc:
            st.error(f"Error descifrando: {exc}")
        else:
            st.success("Archivo descifrado correctamente.")
            name = enc_file.name[:-4] if enc_file.name.endswith(".enc") else "archivo_recuperado"
            st.download_button(
                "⬇️ Descargar archivo original",
                data=plaintext,
                file_name=name,
                mime="application/octet-stream",
            )
