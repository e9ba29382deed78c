"""Adapters: envelope normalizers and client facades."""
