"""In-memory model, error flags, turn restriction collector and layer writer for PTv2 routes."""

__version__ = "0.0.1"
__all__ = ["model", "options", "route_writer", "routes", "turn_restrictions"]