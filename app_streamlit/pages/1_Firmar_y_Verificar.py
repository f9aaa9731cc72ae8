# --------------------------------------------------------------
# File: 1_Firmar_y_Verificar.py
# Description: Firma y verificación de textos con BLAKE3 o Ed25519 desde Streamlit.
# --------------------------------------------------------------

import streamlit as st

from textseal.config import configure_logging
from textseal.dispatch import sign_text, verify_text
from textseal.errors import TextSealError

configure_logging()


def _data_bytes(text: str, upload) -> bytes:
    """Prioriza el archivo subido frente al texto escrito en el formulario.

    Args:
        text (str): Texto introducido manualmente.
        upload (UploadedFile | None): Archivo opcional con los datos.

    Returns:
        bytes: Datos a firmar o verificar.
    """
    if upload is not None:
        return upload.getvalue()
    return text.encode("utf-8")


st.title("✍️ Firmar y verificar")

algorithm = st.selectbox("Algoritmo", ["blake3", "ed25519"], index=0)
text = st.text_area("Texto", value="")
data_file = st.file_uploader("…o selecciona un archivo con los datos", key="data")

tab_sign, tab_verify = st.tabs(["Firmar", "Verificar"])

with tab_sign:
    st.caption("BLAKE3 usa la clave compartida; Ed25519 usa la semilla privada (`ed25519.sk`).")
    sign_key = st.file_uploader("Clave de firma", key="sign_key")
    if st.button("Firmar"):
        if sign_key is None:
            st.warning("Selecciona primero la clave de firma.")
            st.stop()
        try:
            signature = sign_text(algorithm, sign_key.getvalue(), _data_bytes(text, data_file))
        except TextSealError as exc:
            st.error(str(exc))
        else:
            st.success("Firma generada.")
            st.code(signature, language="text")

with tab_verify:
    st.caption("BLAKE3 usa la clave compartida; Ed25519 usa la clave pública (`ed25519.pk`).")
    verify_key = st.file_uploader("Clave de verificación", key="verify_key")
    candidate = st.text_input("Firma (Base64 URL-safe)")
    if st.button("Verificar"):
        if verify_key is None:
            st.warning("Selecciona primero la clave de verificación.")
            st.stop()
        try:
            ok = verify_text(
                algorithm, verify_key.getvalue(), _data_bytes(text, data_file), candidate.strip()
            )
        except TextSealError as exc:
            st.error(str(exc))
        else:
            st.write("**Firma:**", "✅ válida" if ok else "❌ inválida")
