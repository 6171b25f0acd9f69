"""CLI layer (typer + rich)."""
