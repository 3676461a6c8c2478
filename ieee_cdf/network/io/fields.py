# -*- coding: utf-8 -*-
"""Tablas de columnas fijas por tipo de registro y su extractor genérico.

Las columnas se escriben 1-based e inclusivas, igual que en la descripción
del formato ("Common Format For Exchange of Solved Load Flow Data", IEEE PAS-92,
1973). ``end=None`` significa "hasta el final de la línea".
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Sequence

from ieee_cdf.network.core.errors import MalformedFieldError
from ieee_cdf.network.core.types import Section


@dataclass(frozen=True)
class FieldSpec:
    name: str
    start: int
    end: Optional[int]
    kind: str  # "int" | "float" | "str"

    def slice(self, line: str) -> str:
        return line[self.start - 1:self.end]


# solo dígitos ASCII: int()/float() aceptan además nan, inf, "1_00" y dígitos Unicode
_INT_RE = re.compile(r"[+-]?\d+", re.ASCII)
_FLOAT_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def _to_int(chunk: str) -> int:
    s = chunk.strip()
    if not s:
        raise ValueError("campo vacío")
    if _INT_RE.fullmatch(s) is None:
        raise ValueError(f"entero no válido: {s!r}")
    return int(s)


def _to_float(chunk: str) -> float:
    s = chunk.strip()
    if not s:
        raise ValueError("campo vacío")
    if _FLOAT_RE.fullmatch(s) is None:
        raise ValueError(f"real no válido: {s!r}")
    return float(s)


_CONVERTERS: Dict[str, Callable[[str], Any]] = {
    "int": _to_int,
    "float": _to_float,
    "str": str.strip,
}


TITLE_FIELDS = (
    FieldSpec("date", 2, 9, "str"),
    FieldSpec("sender", 11, 30, "str"),
    FieldSpec("mva_base", 32, 37, "str"),
    FieldSpec("year", 39, 42, "str"),
    FieldSpec("season", 44, 44, "str"),
    FieldSpec("case_id", 46, None, "str"),
)

BUS_FIELDS = (
    FieldSpec("number", 1, 4, "int"),
    FieldSpec("name", 6, 17, "str"),
    FieldSpec("area", 19, 20, "str"),
    FieldSpec("loss_zone", 21, 23, "int"),
    FieldSpec("bus_type", 25, 26, "int"),
    FieldSpec("voltage", 28, 33, "float"),
    FieldSpec("angle", 34, 40, "float"),
    FieldSpec("load_p", 41, 49, "float"),
    FieldSpec("load_q", 50, 59, "float"),
    FieldSpec("gen_p", 60, 67, "float"),
    FieldSpec("gen_q", 68, 75, "float"),
    FieldSpec("base_kv", 77, 83, "float"),
    FieldSpec("desired_voltage", 85, 90, "float"),
    FieldSpec("max_limit", 91, 98, "float"),
    FieldSpec("min_limit", 99, 106, "float"),
    FieldSpec("shunt_g", 107, 114, "float"),
    FieldSpec("shunt_b", 115, 122, "float"),
    FieldSpec("remote_bus", 124, None, "int"),
)

BRANCH_FIELDS = (
    FieldSpec("tap_bus", 1, 4, "int"),
    FieldSpec("z_bus", 6, 9, "int"),
    FieldSpec("area", 11, 12, "str"),
    FieldSpec("loss_zone", 13, 15, "int"),
    FieldSpec("circuit", 17, 17, "int"),
    FieldSpec("branch_type", 19, 19, "int"),
    FieldSpec("r", 20, 29, "float"),
    FieldSpec("x", 30, 40, "float"),
    FieldSpec("b", 41, 50, "float"),
    FieldSpec("rating_1", 51, 55, "int"),
    FieldSpec("rating_2", 57, 61, "int"),
    FieldSpec("rating_3", 63, 67, "int"),
    FieldSpec("control_bus", 69, 72, "int"),
    FieldSpec("side", 74, 74, "int"),
    FieldSpec("turns_ratio", 77, 82, "float"),
    FieldSpec("phase_angle", 84, 90, "float"),
    FieldSpec("min_tap", 91, 97, "float"),
    FieldSpec("max_tap", 98, 104, "float"),
    FieldSpec("step", 106, 111, "float"),
    FieldSpec("min_limit", 113, 119, "float"),
    FieldSpec("max_limit", 120, None, "float"),
)

LOSS_ZONE_FIELDS = (
    FieldSpec("number", 1, 4, "int"),
    FieldSpec("name", 5, None, "str"),
)

# area (1-4) y slack bus (4-7) comparten la columna 4; ver DESIGN.md
INTERCHANGE_FIELDS = (
    FieldSpec("area", 1, 4, "int"),
    FieldSpec("slack_bus", 4, 7, "int"),
    FieldSpec("alt_swing_name", 9, 20, "str"),
    FieldSpec("export_mw", 21, 28, "float"),
    FieldSpec("tolerance_mw", 30, 35, "float"),
    FieldSpec("code", 38, 43, "str"),
    FieldSpec("name", 46, None, "str"),
)

TIE_LINE_FIELDS = (
    FieldSpec("metered_bus", 1, 4, "int"),
    FieldSpec("metered_area", 7, 8, "int"),
    FieldSpec("non_metered_bus", 11, 14, "int"),
    FieldSpec("non_metered_area", 17, 18, "int"),
    FieldSpec("circuit", 21, 21, "int"),
)

RECORD_FIELDS: Dict[Section, Sequence[FieldSpec]] = {
    Section.BUS: BUS_FIELDS,
    Section.BRANCH: BRANCH_FIELDS,
    Section.LOSS_ZONES: LOSS_ZONE_FIELDS,
    Section.INTERCHANGE: INTERCHANGE_FIELDS,
    Section.TIE_LINES: TIE_LINE_FIELDS,
}

# campo inicial de todo registro: índice / número de barra (negativo = fin de sección)
LEADING_FIELD = FieldSpec("index", 1, 4, "int")


def extract_fields(line: str, specs: Sequence[FieldSpec], line_no: int) -> Dict[str, Any]:
    """Corta ``line`` según ``specs`` y convierte cada rango a su tipo.

    Lanza ``MalformedFieldError`` con el número de línea al primer campo que
    no se pueda convertir.
    """
    out: Dict[str, Any] = {}
    for spec in specs:
        chunk = spec.slice(line)
        try:
            out[spec.name] = _CONVERTERS[spec.kind](chunk)
        except ValueError as exc:
            raise MalformedFieldError(line_no, spec.name, (spec.start, spec.end), chunk, str(exc)) from exc
    return out
