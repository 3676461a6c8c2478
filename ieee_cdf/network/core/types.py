"""Definiciones tipadas de la red eléctrica leída desde IEEE CDF."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Tuple


class BusType(IntEnum):
    PQ_LOAD = 0  # sin regulación (carga, PQ)
    PQ_GEN = 1  # MVAR de generación dentro de límites de voltaje (PQ)
    PV_GEN = 2  # voltaje dentro de límites de VAR (gen, PV)
    SWING = 3  # voltaje y ángulo fijos (slack); se espera una por red conexa


class BranchType(IntEnum):
    LINE = 0  # línea de transmisión
    FIXED_TAP = 1
    VARIABLE_TAP_VOLTAGE = 2  # TCUL / LTC
    VARIABLE_TAP_MVAR = 3
    PHASE_SHIFTER = 4  # ángulo variable para control de MW


class Section(str, Enum):
    """Estados del lector; uno por tipo de registro más TITLE/SELECT/END."""

    TITLE = "TITLE"
    SELECT = "SELECT"
    BUS = "BUS"
    BRANCH = "BRANCH"
    LOSS_ZONES = "LOSS ZONES"
    INTERCHANGE = "INTERCHANGE"
    TIE_LINES = "TIE LINES"
    END = "END"

    @property
    def is_record(self) -> bool:
        return self not in (Section.TITLE, Section.SELECT, Section.END)


@dataclass(frozen=True)
class CaseHeader:
    """Línea de título: se guarda tal cual, sin validar."""

    date: str = ""
    sender: str = ""
    mva_base: str = ""
    year: str = ""
    season: str = ""  # S = verano, W = invierno
    case_id: str = ""

    @property
    def mva_base_value(self) -> Optional[float]:
        try:
            return float(self.mva_base)
        except ValueError:
            return None


@dataclass(frozen=True)
class BusRow:
    """Barra (nodo) de la red."""

    number: int
    name: str
    area: str  # área de flujo de carga; algunos archivos traen texto
    loss_zone: int
    bus_type: int  # ver ``BusType``
    voltage: float  # p.u.
    angle: float  # grados
    load_p: float  # MW
    load_q: float  # MVAR
    gen_p: float  # MW
    gen_q: float  # MVAR
    base_kv: float
    desired_voltage: float  # p.u.
    max_limit: float  # MVAR o voltaje
    min_limit: float
    shunt_g: float  # p.u.
    shunt_b: float  # p.u.
    remote_bus: int


@dataclass(frozen=True)
class BranchRow:
    """Línea o transformador dirigido tap → Z."""

    tap_bus: int
    z_bus: int
    area: str
    loss_zone: int
    circuit: int  # 1 para líneas simples
    branch_type: int  # ver ``BranchType``
    r: float  # p.u.
    x: float  # p.u.; no se admiten líneas de impedancia nula
    b: float  # carga de línea total, p.u.
    rating_1: int  # MVA
    rating_2: int
    rating_3: int
    control_bus: int
    side: int
    turns_ratio: float
    phase_angle: float
    min_tap: float
    max_tap: float
    step: float
    min_limit: float  # voltaje, MVAR o MW
    max_limit: float

    @property
    def label(self) -> str:
        return f"{self.tap_bus}-{self.z_bus}-{self.circuit}"


@dataclass(frozen=True)
class LossZoneRow:
    number: int
    name: str


@dataclass(frozen=True)
class InterchangeRow:
    area: int  # distinto de cero
    slack_bus: int
    alt_swing_name: str
    export_mw: float
    tolerance_mw: float
    code: str
    name: str


@dataclass(frozen=True)
class TieLineRow:
    metered_bus: int
    metered_area: int
    non_metered_bus: int
    non_metered_area: int
    circuit: int


@dataclass(frozen=True)
class NetworkDataset:
    """Tablas completas de un archivo CDF, en el orden del archivo."""

    header: CaseHeader = field(default_factory=CaseHeader)
    buses: Tuple[BusRow, ...] = ()
    branches: Tuple[BranchRow, ...] = ()
    loss_zones: Tuple[LossZoneRow, ...] = ()
    interchanges: Tuple[InterchangeRow, ...] = ()
    tie_lines: Tuple[TieLineRow, ...] = ()

    @property
    def bus_count(self) -> int:
        return len(self.buses)
