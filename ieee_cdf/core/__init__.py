"""Configuración compartida del paquete."""
