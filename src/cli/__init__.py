"""CLI de feed-loader (Typer + Rich)."""
