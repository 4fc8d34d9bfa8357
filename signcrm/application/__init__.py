"""Application layer: use cases, views and workspace wiring."""
