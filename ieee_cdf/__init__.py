"""Lectura de archivos IEEE Common Data Format y matriz de incidencia de la red."""

from ieee_cdf.network.core.errors import (
    CDFParseError,
    IndexOutOfRangeError,
    InvalidBranchTypeError,
    InvalidBusTypeError,
    MalformedFieldError,
    MissingEndOfDataWarning,
    SectionCountMismatchWarning,
    UnspecifiedItemCountWarning,
)
from ieee_cdf.network.core.incidence import bus_index, build_incidence, incidence_for, incidence_frame
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
from ieee_cdf.network.core.validators import validate_network
from ieee_cdf.network.io import ParseResult, dataset_frames, load_cdf, parse_cdf

__all__ = [
    "CDFParseError", "IndexOutOfRangeError", "InvalidBranchTypeError", "InvalidBusTypeError",
    "MalformedFieldError", "MissingEndOfDataWarning", "SectionCountMismatchWarning",
    "UnspecifiedItemCountWarning",
    "bus_index", "build_incidence", "incidence_for", "incidence_frame",
    "BranchRow", "BranchType", "BusRow", "BusType", "CaseHeader", "InterchangeRow",
    "LossZoneRow", "NetworkDataset", "Section", "TieLineRow",
    "validate_network",
    "ParseResult", "dataset_frames", "load_cdf", "parse_cdf",
]
