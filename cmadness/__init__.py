"""A threaded static-file HTTP server and a small ray tracer."""

__version__ = "0.1.0"