"""Core helpers shared across the builder (shapes, progress)."""
