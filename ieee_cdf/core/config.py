# -*- coding: utf-8 -*-
"""Rutas y parámetros globales (se leen una vez desde el entorno)."""
from __future__ import annotations

import os
from pathlib import Path

DATA_DIR = Path(os.environ.get("IEEE_CDF_DATA_DIR", "data"))
OUT_DIR = Path(os.environ.get("IEEE_CDF_OUT_DIR", "out"))

# los casos IEEE publicados son ASCII; latin-1 no falla con bytes sueltos
ENCODING = os.environ.get("IEEE_CDF_ENCODING", "latin-1")

LOG_LEVEL = os.environ.get("IEEE_CDF_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(message)s"
