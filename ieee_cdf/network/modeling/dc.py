# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import math
from typing import Optional

import numpy as np
import pyomo.environ as pyo

from ieee_cdf.network.core.incidence import incidence_for
from ieee_cdf.network.core.types import BusType, NetworkDataset

DEFAULT_BASE_MVA = 100.0
DEFAULT_VOLL = 10000.0

_GEN_TYPES = {BusType.PV_GEN, BusType.SWING}


def build_dc_model(
    dataset: NetworkDataset,
    incidence: Optional[np.ndarray] = None,
    *,
    include_shed: bool = True,
    voll: float = DEFAULT_VOLL,
) -> pyo.ConcreteModel:
    """
    Crea un modelo DC de despacho (sin resolver) a partir de las tablas CDF.

    El balance nodal usa la matriz de incidencia tal cual:
        p[b] + shed[b] + sum_l M[b,l] * flow[l] == D[b]
    y el flujo DC es flow[l] == -(sum_j M[j,l] * theta[j]) / x[l].
    Solo las barras PV y swing pueden generar. Todo en p.u. de la base MVA.
    """
    log = logging.getLogger("dc")

    buses = list(dataset.buses)
    branches = list(dataset.branches)
    if incidence is None:
        incidence = incidence_for(dataset)
    incidence = np.asarray(incidence)
    if incidence.shape != (len(buses), len(branches)):
        raise ValueError(f"[dc] incidencia {incidence.shape} no coincide con ({len(buses)}, {len(branches)})")
    for br in branches:
        if br.x == 0:
            raise ValueError(f"[dc] {br.label}: reactancia x debe ser != 0.")

    base = dataset.header.mva_base_value or DEFAULT_BASE_MVA
    numbers = [b.number for b in buses]

    # --- Pyomo model
    m = pyo.ConcreteModel()

    # Sets
    m.B = pyo.Set(initialize=numbers, ordered=True)
    m.L = pyo.Set(initialize=list(range(len(branches))), ordered=True)

    # Parámetros
    m.D = pyo.Param(m.B, initialize={b.number: b.load_p / base for b in buses}, mutable=True)
    m.x = pyo.Param(m.L, initialize={l: br.x for l, br in enumerate(branches)})
    m.VOLL = pyo.Param(initialize=float(voll), mutable=True)

    is_gen = {b.number: b.bus_type in _GEN_TYPES for b in buses}
    fmax = {l: br.rating_1 / base for l, br in enumerate(branches) if br.rating_1 > 0}

    # Variables
    m.theta = pyo.Var(m.B, bounds=(-math.pi, math.pi))
    m.flow = pyo.Var(m.L)
    m.p = pyo.Var(m.B, within=pyo.NonNegativeReals, bounds=lambda m, b: (0.0, None if is_gen[b] else 0.0))

    if include_shed:
        m.shed = pyo.Var(m.B, within=pyo.NonNegativeReals)
    else:
        m.shed = None

    # filas no nulas de cada columna (las dos barras de la rama)
    col_rows = {l: np.nonzero(incidence[:, l])[0].tolist() for l in range(len(branches))}
    bus_rows = {i: np.nonzero(incidence[i, :])[0].tolist() for i in range(len(buses))}

    def flow_rule(m, l):
        return m.flow[l] == -sum(int(incidence[j, l]) * m.theta[numbers[j]] for j in col_rows[l]) / m.x[l]
    m.FlowDef = pyo.Constraint(m.L, rule=flow_rule)

    def fmax_up_rule(m, l):
        if l not in fmax:
            return pyo.Constraint.Skip
        return m.flow[l] <= fmax[l]

    def fmax_dn_rule(m, l):
        if l not in fmax:
            return pyo.Constraint.Skip
        return m.flow[l] >= -fmax[l]
    m.FlowUp = pyo.Constraint(m.L, rule=fmax_up_rule)
    m.FlowDn = pyo.Constraint(m.L, rule=fmax_dn_rule)

    # Ángulo de referencia: primera barra swing (o la primera barra si no hay)
    swing = [b.number for b in buses if b.bus_type == BusType.SWING]
    ref = swing[0] if swing else (numbers[0] if numbers else None)
    if ref is not None:
        m.RefAngle = pyo.Constraint(expr=m.theta[ref] == 0.0)

    # Balance nodal
    row_of = {n: i for i, n in enumerate(numbers)}

    def nbalance_rule(m, b):
        i = row_of[b]
        lhs = m.p[b] + sum(int(incidence[i, l]) * m.flow[l] for l in bus_rows[i])
        if m.shed is not None:
            lhs = lhs + m.shed[b]
        return lhs == m.D[b]
    m.NodeBalance = pyo.Constraint(m.B, rule=nbalance_rule)

    def obj_rule(m):
        cost = sum(m.p[b] for b in m.B)
        if m.shed is not None:
            cost = cost + sum(m.VOLL * m.shed[b] for b in m.B)
        return cost
    m.OBJ = pyo.Objective(rule=obj_rule, sense=pyo.minimize)

    log.info("[dc] barras=%d, ramas=%d, generadoras=%d, ref=%s",
             len(numbers), len(branches), sum(is_gen.values()), ref)
    return m
