# --------------------------------------------------------------
# File: 3_Generar_Claves.py
# Description: Generación y descarga de claves para cada algoritmo soportado.
# --------------------------------------------------------------

import streamlit as st

from api.services import key_artifacts, process_key_generate
from textseal import config
from textseal.config import configure_logging
from textseal.models import AlgorithmTag

configure_logging()

st.title("🔑 Generar claves")

algorithm = st.selectbox("Algoritmo", [tag.value for tag in AlgorithmTag], index=0)

if st.button("Generar"):
    st.session_state["artifacts"] = key_artifacts(algorithm)

# Las claves se conservan en sesión para poder descargarlas tras cada recarga.
for artifact in st.session_state.get("artifacts", []):
    st.download_button(
        f"⬇️ {artifact.filename}",
        data=artifact.material,
        file_name=artifact.filename,
        mime="application/octet-stream",
        key=f"dl_{artifact.filename}",
    )

st.markdown("---")
st.write("Carpeta de claves:", f"`{config.KEYS_DIR}`")
if st.button("💾 Generar y guardar en la carpeta de claves"):
    paths = process_key_generate(algorithm)
    st.success("Claves guardadas:\n\n" + "\n".join(f"- `{p}`" for p in paths))
