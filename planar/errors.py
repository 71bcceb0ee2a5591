"""Error types raised by the geometry kernel."""


class GeometryError(ValueError):
    """Raised for impossible geometry constructions (bad input, not degenerate results)."""


class ConfigurationError(RuntimeError):
    """Raised when the default coordinate system is changed after it was fixed."""
