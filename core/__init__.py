"""Chart-facing layer built on top of the pure `analysis` package."""
