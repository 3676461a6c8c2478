"""Tipos, errores, validaciones y matriz de incidencia de la red."""
