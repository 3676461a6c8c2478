# -*- coding: utf-8 -*-
"""Matriz de incidencia nodo-rama (N x L) con signo.

Convención: la barra tap es el origen (+1) y la barra Z el destino (-1).
El balance nodal aguas abajo usa::

    produccion[i] + sum_l M[i, l] * flujo[l] == demanda[i]
"""
from __future__ import annotations

from typing import Dict, Mapping, Optional, Sequence

import numpy as np
import pandas as pd
from scipy import sparse as sp

from ieee_cdf.network.core.errors import IndexOutOfRangeError
from ieee_cdf.network.core.types import BranchRow, NetworkDataset


def bus_index(dataset: NetworkDataset) -> Dict[int, int]:
    """Número de barra -> fila (posición en la tabla de barras)."""
    return {bus.number: pos for pos, bus in enumerate(dataset.buses)}


def _row(bus: int, bus_count: int, index: Optional[Mapping[int, int]], label: str) -> int:
    if index is not None:
        if bus not in index:
            raise IndexOutOfRangeError(f"[incidence] rama {label}: barra {bus} no está en la tabla de barras")
        pos = index[bus]
    else:
        pos = bus - 1  # números 1-based ya pre-indexados por el llamador
    if not 0 <= pos < bus_count:
        raise IndexOutOfRangeError(f"[incidence] rama {label}: fila {pos} fuera de [0, {bus_count})")
    return pos


def build_incidence(
    bus_count: int,
    branches: Sequence[BranchRow],
    bus_index: Optional[Mapping[int, int]] = None,
) -> np.ndarray:
    """Construye M (bus_count x len(branches)) con M[tap, l] = 1 y M[z, l] = -1.

    Sin ``bus_index`` los números tap/Z se interpretan como posiciones 1-based.
    Una rama tap == Z deja la columna en cero.
    """
    m = np.zeros((bus_count, len(branches)), dtype=int)
    for l, br in enumerate(branches):
        label = f"{br.tap_bus}-{br.z_bus}"
        i = _row(br.tap_bus, bus_count, bus_index, label)
        j = _row(br.z_bus, bus_count, bus_index, label)
        m[i, l] += 1
        m[j, l] -= 1
    return m


def incidence_for(dataset: NetworkDataset, *, sparse: bool = False):
    """Matriz de incidencia del dataset, mapeando números de barra a filas."""
    m = build_incidence(dataset.bus_count, dataset.branches, bus_index(dataset))
    return sp.csc_matrix(m) if sparse else m


def incidence_frame(dataset: NetworkDataset) -> pd.DataFrame:
    """Igual que ``incidence_for`` pero con etiquetas (barras x ramas)."""
    m = incidence_for(dataset)
    return pd.DataFrame(
        m,
        index=pd.Index([b.number for b in dataset.buses], name="bus"),
        columns=[br.label for br in dataset.branches],
    )
