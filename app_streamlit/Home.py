# --------------------------------------------------------------
# File: Home.py
# Description: Define la página principal de Streamlit con el resumen del flujo.
# --------------------------------------------------------------

import streamlit as st

from textseal.config import configure_logging

configure_logging()

# Configura los metadatos de la página principal de la aplicación.
st.set_page_config(page_title="TextSeal", page_icon="🔏", layout="centered")

# Presenta el nombre del producto y su propósito general.
st.title("🔏 TextSeal")
st.write(
    "Firma con BLAKE3 o Ed25519, verifica firmas y cifra textos con "
    "ChaCha20-Poly1305."
)
st.info("Empieza en **Generar Claves** para obtener el material de clave de cada algoritmo.")
