# -*- coding: utf-8 -*-
"""Lector de archivos IEEE Common Data Format (CDF).

Recorre el archivo una sola vez, línea a línea, con una máquina de estados
explícita (``ParserContext``):

    TITLE -> SELECT -> {BUS, BRANCH, LOSS ZONES, INTERCHANGE, TIE LINES} -> SELECT -> ... -> END

Cada línea produce resultados etiquetados (``Ok`` / ``Warn`` / ``Fatal``) que
el bucle principal compone:
  - ``Ok``: registro válido, se agrega a su tabla.
  - ``Warn``: aviso no fatal (conteo de ítems distinto, encabezado sin conteo).
  - ``Fatal``: campo mal formado o tipo de barra inválido; se descarta todo.

*Descripción corta del formato:* https://www2.ee.washington.edu/research/pstca/formats/cdf.txt
"""
from __future__ import annotations

import io
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Union

from ieee_cdf.core.config import ENCODING
from ieee_cdf.network.core.errors import (
    CDFParseError,
    InvalidBranchTypeError,
    InvalidBusTypeError,
    MissingEndOfDataWarning,
    SectionCountMismatchWarning,
    UnspecifiedItemCountWarning,
)
from ieee_cdf.network.core.types import (
    BranchRow,
    BranchType,
    BusRow,
    BusType,
    CaseHeader,
    InterchangeRow,
    LossZoneRow,
    NetworkDataset,
    Section,
    TieLineRow,
)
from ieee_cdf.network.io.fields import LEADING_FIELD, RECORD_FIELDS, TITLE_FIELDS, extract_fields

log = logging.getLogger("cdf")

HEADER_RE = re.compile(r"^\s*(BUS|BRANCH|LOSS\s+ZONES|INTERCHANGE|TIE\s+LINES)\s+(?:DATA\s+)?FOLLOWS\b")
ITEMS_RE = re.compile(r"(\d+)\s+ITEMS\b")
END_OF_DATA = "END OF DATA"

_SECTION_BY_NAME = {
    "BUS": Section.BUS,
    "BRANCH": Section.BRANCH,
    "LOSS ZONES": Section.LOSS_ZONES,
    "INTERCHANGE": Section.INTERCHANGE,
    "TIE LINES": Section.TIE_LINES,
}

_ROW_TYPES = {
    Section.BUS: BusRow,
    Section.BRANCH: BranchRow,
    Section.LOSS_ZONES: LossZoneRow,
    Section.INTERCHANGE: InterchangeRow,
    Section.TIE_LINES: TieLineRow,
}

_BUS_TYPES = {t.value for t in BusType}
_BRANCH_TYPES = {t.value for t in BranchType}

Diagnostic = Union[SectionCountMismatchWarning, UnspecifiedItemCountWarning, MissingEndOfDataWarning]
Row = Union[BusRow, BranchRow, LossZoneRow, InterchangeRow, TieLineRow]


# =========================
# Resultados por línea
# =========================
@dataclass(frozen=True)
class Ok:
    section: Section
    row: Row


@dataclass(frozen=True)
class Warn:
    diagnostic: Diagnostic


@dataclass(frozen=True)
class Fatal:
    error: CDFParseError


Outcome = Union[Ok, Warn, Fatal]


@dataclass
class ParserContext:
    """Estado del lector que se pasa explícitamente a cada paso."""

    section: Section = Section.TITLE
    count: int = 0  # registros leídos en la sección actual
    expected: Optional[int] = None  # None = el encabezado no declaró ítems
    header: CaseHeader = field(default_factory=CaseHeader)


@dataclass(frozen=True)
class ParseResult:
    """Dataset completo o error, más los avisos acumulados."""

    dataset: Optional[NetworkDataset] = None
    error: Optional[CDFParseError] = None
    warnings: Tuple[Diagnostic, ...] = ()
    lines_read: int = 0

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> NetworkDataset:
        if self.error is not None:
            raise self.error
        return self.dataset


# =========================
# Pasos de la máquina de estados
# =========================
def _is_boundary(line: str) -> bool:
    return line.strip() == END_OF_DATA or HEADER_RE.match(line) is not None


def _close_section(ctx: ParserContext, line_no: int) -> List[Outcome]:
    out: List[Outcome] = []
    if ctx.expected is not None and ctx.count != ctx.expected:
        out.append(Warn(SectionCountMismatchWarning(ctx.section, ctx.expected, ctx.count, line_no)))
    log.debug("[CDF] fin de sección %s: %d registros (línea %d)", ctx.section.value, ctx.count, line_no)
    ctx.section = Section.SELECT
    return out


def _select(ctx: ParserContext, line_no: int, line: str) -> List[Outcome]:
    if line.strip() == END_OF_DATA:
        ctx.section = Section.END
        return []

    m = HEADER_RE.match(line)
    if m is None:
        # entre secciones solo se esperan encabezados; el resto se ignora
        log.debug("[CDF] línea %d ignorada: %r", line_no, line)
        return []

    section = _SECTION_BY_NAME[" ".join(m.group(1).split())]
    ctx.section = section
    ctx.count = 0
    log.debug("[CDF] inicio de sección %s (línea %d)", section.value, line_no)

    items = ITEMS_RE.search(line, m.end())
    if items is not None:
        ctx.expected = int(items.group(1))
        return []
    ctx.expected = None
    return [Warn(UnspecifiedItemCountWarning(section, line_no))]


def _build_row(section: Section, values: Dict[str, object], line_no: int) -> Row:
    if section is Section.BUS and values["bus_type"] not in _BUS_TYPES:
        raise InvalidBusTypeError(line_no, values["bus_type"])
    if section is Section.BRANCH and values["branch_type"] not in _BRANCH_TYPES:
        raise InvalidBranchTypeError(line_no, values["branch_type"])
    return _ROW_TYPES[section](**values)


def step(ctx: ParserContext, line_no: int, line: str) -> List[Outcome]:
    """Procesa una línea (sin salto de línea) y devuelve sus resultados."""
    if not line.strip():
        return []

    if ctx.section is Section.TITLE:
        ctx.header = CaseHeader(**extract_fields(line, TITLE_FIELDS, line_no))
        ctx.section = Section.SELECT
        return []
    if ctx.section is Section.SELECT:
        return _select(ctx, line_no, line)
    if ctx.section is Section.END:
        return []

    # Sección de registros. Un encabezado o END OF DATA también la cierra.
    if _is_boundary(line):
        return _close_section(ctx, line_no) + _select(ctx, line_no, line)

    try:
        index = extract_fields(line, (LEADING_FIELD,), line_no)[LEADING_FIELD.name]
        if index < 0:
            return _close_section(ctx, line_no)
        values = extract_fields(line, RECORD_FIELDS[ctx.section], line_no)
        row = _build_row(ctx.section, values, line_no)
    except CDFParseError as exc:
        return [Fatal(exc)]

    ctx.count += 1
    return [Ok(ctx.section, row)]


def finish(ctx: ParserContext, line_no: int) -> List[Outcome]:
    """Cierra la lectura cuando el archivo termina sin ``END OF DATA``."""
    if ctx.section is Section.END:
        return []
    out: List[Outcome] = []
    if ctx.section.is_record:
        out.extend(_close_section(ctx, line_no))
    out.append(Warn(MissingEndOfDataWarning(line_no)))
    ctx.section = Section.END
    return out


# =========================
# Interfaz pública
# =========================
def parse_cdf(
    source: Union[str, Iterable[str]],
    *,
    on_warning: Optional[Callable[[Diagnostic], None]] = None,
) -> ParseResult:
    """Lee un CDF desde ``source`` (texto completo o iterable de líneas).

    Nunca lanza errores de formato: los devuelve en ``ParseResult.error``.
    Los avisos se acumulan en ``ParseResult.warnings``, se registran en el
    logger ``cdf`` y, si se entrega, se pasan a ``on_warning``.
    """
    # mismos cortes de línea que un archivo abierto en modo texto (\n, \r\n, \r)
    lines = io.StringIO(source, newline=None) if isinstance(source, str) else source

    ctx = ParserContext()
    tables: Dict[Section, List[Row]] = {s: [] for s in _ROW_TYPES}
    warnings: List[Diagnostic] = []

    def _warn(diag: Diagnostic) -> None:
        warnings.append(diag)
        log.warning(diag.message)
        if on_warning is not None:
            on_warning(diag)

    line_no = 0
    for line_no, raw in enumerate(lines, start=1):
        for outcome in step(ctx, line_no, raw.rstrip("\r\n")):
            if isinstance(outcome, Ok):
                tables[outcome.section].append(outcome.row)
            elif isinstance(outcome, Warn):
                _warn(outcome.diagnostic)
            else:
                log.error("%s", outcome.error)
                return ParseResult(error=outcome.error, warnings=tuple(warnings), lines_read=line_no)
        if ctx.section is Section.END:
            break

    for outcome in finish(ctx, line_no):
        _warn(outcome.diagnostic)

    dataset = NetworkDataset(
        header=ctx.header,
        buses=tuple(tables[Section.BUS]),
        branches=tuple(tables[Section.BRANCH]),
        loss_zones=tuple(tables[Section.LOSS_ZONES]),
        interchanges=tuple(tables[Section.INTERCHANGE]),
        tie_lines=tuple(tables[Section.TIE_LINES]),
    )
    return ParseResult(dataset=dataset, warnings=tuple(warnings), lines_read=line_no)


def load_cdf(
    path: Union[str, Path],
    *,
    encoding: str = ENCODING,
    on_warning: Optional[Callable[[Diagnostic], None]] = None,
) -> NetworkDataset:
    """Abre ``path`` y devuelve el ``NetworkDataset``; lanza ``CDFParseError`` si falla."""
    path = Path(path)
    log.info("[CDF] leyendo %s", path)
    with path.open("r", encoding=encoding) as f:
        result = parse_cdf(f, on_warning=on_warning)
    return result.unwrap()
