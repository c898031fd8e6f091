"""Core de feed-loader: dominio, contratos y servicios (sin I/O concreto)."""
