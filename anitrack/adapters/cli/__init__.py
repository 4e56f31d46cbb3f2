"""Interface ligne de commande de diagnostic (Typer + Rich)."""
