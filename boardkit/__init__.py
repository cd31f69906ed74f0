"""Board data model, outline geometry, file helpers and per-user directories for circuit board viewers."""

__version__ = "0.1.0"
__all__ = ["board", "geometry", "utils", "userdirs"]