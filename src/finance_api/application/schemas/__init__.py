"""Application schemas (caller-facing parameters and wire forms)."""
