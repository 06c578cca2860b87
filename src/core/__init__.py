"""Core: dominio, servicios, contratos y configuración."""
