"""Punto de acceso a los lectores de red eléctrica."""

from .cdf_parser import ParseResult, load_cdf, parse_cdf
from .frames import dataset_frames, log_network_info

__all__ = ["ParseResult", "load_cdf", "parse_cdf", "dataset_frames", "log_network_info"]
