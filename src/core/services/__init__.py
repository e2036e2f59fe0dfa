"""Servicios del Core (layout de salida, parsing de URLs, pipeline)."""
