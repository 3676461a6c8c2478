"""Exportación de tablas a disco."""

from .io_model import write_network_tables

__all__ = ["write_network_tables"]
