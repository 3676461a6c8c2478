# -*- coding: utf-8 -*-
"""Validaciones de consistencia de la red, posteriores a la lectura.

El lector no verifica integridad referencial; estas funciones son opcionales
y las llama quien consume el ``NetworkDataset``.
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Set, Tuple

import networkx as nx

from ieee_cdf.network.core.types import BusType, NetworkDataset


def ensure_numbers_unique(numbers: Iterable[int], where: str):
    s = set()
    for n in numbers:
        if n in s:
            raise ValueError(f"[{where}] número duplicado: {n}")
        s.add(n)


def _check_refs(refs: List[Tuple[str, int]], bus_set: Set[int], tag: str):
    bad = sorted({f"{who}->{bus}" for who, bus in refs if bus not in bus_set})
    if bad:
        raise ValueError(f"[network:{tag}] barras desconocidas: " + str(bad[:10]) + (" ..." if len(bad) > 10 else ""))


def build_graph(dataset: NetworkDataset) -> nx.Graph:
    """Grafo no dirigido barras/ramas (nodos = números de barra)."""
    g = nx.Graph()
    for bus in dataset.buses:
        g.add_node(bus.number, bus_type=bus.bus_type)
    for br in dataset.branches:
        g.add_edge(br.tap_bus, br.z_bus)
    return g


def swing_buses_by_component(dataset: NetworkDataset) -> List[Tuple[Set[int], List[int]]]:
    """Para cada componente conexa: (barras, barras swing)."""
    g = build_graph(dataset)
    types: Dict[int, int] = {b.number: b.bus_type for b in dataset.buses}
    out = []
    for comp in nx.connected_components(g):
        swing = sorted(n for n in comp if types.get(n) == BusType.SWING)
        out.append((set(comp), swing))
    return out


def validate_network(dataset: NetworkDataset, *, require_swing: bool = False) -> None:
    """
    Valida la red leída:
    - números de barra únicos y positivos, tipo de barra en rango;
    - áreas de intercambio distintas de cero;
    - ramas, intercambios y líneas de enlace apuntan a barras existentes;
    - reactancia x != 0 en todas las ramas;
    - con ``require_swing=True``, exactamente una barra swing por componente conexa.
    """
    ensure_numbers_unique((b.number for b in dataset.buses), "network:bus")
    bad_numbers = sorted(b.number for b in dataset.buses if b.number <= 0)
    if bad_numbers:
        raise ValueError(f"[network:bus] números de barra no positivos: {bad_numbers}")
    bus_set = {b.number for b in dataset.buses}

    for b in dataset.buses:
        if b.bus_type not in {t.value for t in BusType}:
            raise ValueError(f"[network] barra {b.number}: tipo {b.bus_type} fuera de rango.")

    refs = []
    for br in dataset.branches:
        refs.append((br.label, br.tap_bus))
        refs.append((br.label, br.z_bus))
    _check_refs(refs, bus_set, "branch")

    if any(ic.area == 0 for ic in dataset.interchanges):
        raise ValueError("[network:interchange] área 0 no válida.")
    _check_refs([(f"área {ic.area}", ic.slack_bus) for ic in dataset.interchanges], bus_set, "interchange")

    refs = []
    for tl in dataset.tie_lines:
        who = f"{tl.metered_bus}-{tl.non_metered_bus}"
        refs.append((who, tl.metered_bus))
        refs.append((who, tl.non_metered_bus))
    _check_refs(refs, bus_set, "tie_line")

    for br in dataset.branches:
        if br.x == 0:
            raise ValueError(f"[network] {br.label}: reactancia x debe ser != 0.")

    if require_swing:
        for comp, swing in swing_buses_by_component(dataset):
            if len(swing) != 1:
                raise ValueError(
                    f"[network] componente con barras {sorted(comp)[:10]} tiene {len(swing)} barras swing (se espera 1)."
                )
