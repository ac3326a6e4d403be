"""Per-user chat and permission overrides."""

__version__ = "0.1.0"
