"""Command-line entry points (typer + rich)."""
