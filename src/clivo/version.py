"""Single source of truth for the clivo version string."""

__version__: str = "0.3.0"
