"""Infrastructure: HTTP backend, logging, metrics."""
