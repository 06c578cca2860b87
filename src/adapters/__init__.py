"""Adaptadores de infraestructura: fuentes JSON, exportadores y generador."""
