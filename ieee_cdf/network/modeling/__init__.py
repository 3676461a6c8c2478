"""Modelos de optimización construidos sobre la red leída."""

from .dc import build_dc_model

__all__ = ["build_dc_model"]
