# ieee_cdf/export/io_model.py
# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict

import pandas as pd

from ieee_cdf.network.core.incidence import incidence_frame
from ieee_cdf.network.core.types import NetworkDataset
from ieee_cdf.network.io.frames import dataset_frames

log = logging.getLogger("export")


def _safe_to_csv(df: pd.DataFrame, path: Path, *, index: bool = False) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=index)


def write_network_tables(out_dir: Path, dataset: NetworkDataset, *, incidence: bool = False) -> Dict[str, Path]:
    """
    Escribe una tabla CSV por sección en ``out_dir``:
      bus.csv, branch.csv, loss_zone.csv, interchange.csv, tie_line.csv
    y, si ``incidence=True``, incidence.csv (filas = barras, columnas = ramas).
    Devuelve {nombre_tabla: ruta}.
    """
    out_dir = Path(out_dir)
    written: Dict[str, Path] = {}
    for name, df in dataset_frames(dataset).items():
        path = out_dir / f"{name}.csv"
        _safe_to_csv(df, path)
        written[name] = path

    if incidence:
        path = out_dir / "incidence.csv"
        _safe_to_csv(incidence_frame(dataset), path, index=True)
        written["incidence"] = path

    log.info("[write_network_tables] exportado en %s (%d archivos)", out_dir, len(written))
    return written
