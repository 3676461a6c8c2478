# -*- coding: utf-8 -*-
"""Vistas tabulares (pandas) del dataset y resumen para el log."""
from __future__ import annotations

import logging
from dataclasses import asdict, fields
from typing import Dict, Iterable, Type

import pandas as pd

from ieee_cdf.network.core.types import (
    BranchRow,
    BusRow,
    BusType,
    InterchangeRow,
    LossZoneRow,
    NetworkDataset,
    TieLineRow,
)

TABLES = {
    "bus": ("buses", BusRow),
    "branch": ("branches", BranchRow),
    "loss_zone": ("loss_zones", LossZoneRow),
    "interchange": ("interchanges", InterchangeRow),
    "tie_line": ("tie_lines", TieLineRow),
}


def _rows_to_frame(values: Iterable[object], row_type: Type) -> pd.DataFrame:
    # columnas fijas aunque la tabla venga vacía
    cols = [f.name for f in fields(row_type)]
    rows = [asdict(v) for v in values]
    return pd.DataFrame(rows, columns=cols)


def dataset_frames(dataset: NetworkDataset) -> Dict[str, pd.DataFrame]:
    """Un DataFrame por tabla, en el orden del archivo."""
    return {
        name: _rows_to_frame(getattr(dataset, attr), row_type)
        for name, (attr, row_type) in TABLES.items()
    }


def log_network_info(dataset: NetworkDataset, logger: logging.Logger, sample: int = 3):
    lg = logger
    h = dataset.header
    lg.info("caso: %s (%s, %s), base %s MVA", h.case_id, h.date, h.sender, h.mva_base)
    lg.info("barras=%d, ramas=%d, zonas=%d, áreas=%d, enlaces=%d",
            len(dataset.buses), len(dataset.branches), len(dataset.loss_zones),
            len(dataset.interchanges), len(dataset.tie_lines))

    if dataset.buses:
        head = [b.number for b in dataset.buses[:sample]]
        lg.info("primeras %d barras: %s", len(head), head)
        swing = [b.number for b in dataset.buses if b.bus_type == BusType.SWING]
        lg.info("barras swing: %s", swing)
        lg.info("demanda total: %.2f MW; generación total: %.2f MW",
                sum(b.load_p for b in dataset.buses), sum(b.gen_p for b in dataset.buses))
