"""Application layer: iteration protocol, ports, request schemas."""
