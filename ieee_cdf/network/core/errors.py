# -*- coding: utf-8 -*-
"""Errores fatales y avisos no fatales del lector CDF."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from ieee_cdf.network.core.types import Section


# =========================
# Fatales
# =========================
class CDFParseError(ValueError):
    """Error que aborta la lectura completa; ``line`` es 1-based."""

    def __init__(self, line: int, message: str):
        self.line = line
        self.message = message
        super().__init__(f"[CDF] línea {line}: {message}")


class MalformedFieldError(CDFParseError):
    def __init__(self, line: int, field: str, column_range: Tuple[int, Optional[int]], raw: str, reason: str):
        self.field = field
        self.column_range = column_range
        self.raw = raw
        self.reason = reason
        start, end = column_range
        cols = f"{start}-{end}" if end is not None else f"{start}-fin"
        super().__init__(line, f"campo '{field}' (columnas {cols}) inválido: {raw!r} ({reason})")


class InvalidBusTypeError(CDFParseError):
    def __init__(self, line: int, value: int):
        self.value = value
        super().__init__(line, f"tipo de barra {value} fuera de rango (se espera 0, 1, 2 o 3)")


class InvalidBranchTypeError(CDFParseError):
    def __init__(self, line: int, value: int):
        self.value = value
        super().__init__(line, f"tipo de rama {value} fuera de rango (se espera 0 a 4)")


class IndexOutOfRangeError(IndexError):
    """Rama que referencia una fila fuera de la tabla de barras."""


# =========================
# Avisos (no detienen la lectura)
# =========================
@dataclass(frozen=True)
class SectionCountMismatchWarning:
    section: Section
    expected: int
    actual: int
    line: int

    @property
    def message(self) -> str:
        return (f"[CDF] sección {self.section.value}: se declararon {self.expected} ítems "
                f"y se leyeron {self.actual} (línea {self.line})")


@dataclass(frozen=True)
class UnspecifiedItemCountWarning:
    section: Section
    line: int

    @property
    def message(self) -> str:
        return f"[CDF] sección {self.section.value} sin número de ítems en el encabezado (línea {self.line})"


@dataclass(frozen=True)
class MissingEndOfDataWarning:
    line: int

    @property
    def message(self) -> str:
        return f"[CDF] el archivo termina sin 'END OF DATA' (última línea {self.line})"
