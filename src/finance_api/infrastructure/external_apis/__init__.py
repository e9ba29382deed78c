"""External provider transports."""
