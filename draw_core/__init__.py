"""
draw_core package: roster, catalog loading, random assignment, persistence and exports.
"""
__all__ = [
    "assignment",
    "catalog",
    "config",
    "constants",
    "errors",
    "export",
    "models",
    "roster",
    "session",
    "storage",
    "validation",
]
