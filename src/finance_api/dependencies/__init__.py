"""Composition root: backend registry."""
