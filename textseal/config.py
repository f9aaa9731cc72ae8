# --------------------------------------------------------------
# File: config.py
# Description: Configuración por entorno y arranque del registro de eventos.
# --------------------------------------------------------------

import logging
import os
from typing import Optional

from dotenv import load_dotenv

load_dotenv()

KEYS_DIR = os.getenv("TEXTSEAL_KEYS_DIR", "./_keys")
LOG_LEVEL = os.getenv("TEXTSEAL_LOG_LEVEL", "INFO")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[str] = None) -> None:
    # Solo la capa de presentación configura el logging del proceso.
    logging.basicConfig(level=(level or LOG_LEVEL).upper(), format=LOG_FORMAT)
