"""Single source of truth for the toodles version string."""

__version__ = "1.2.0"
