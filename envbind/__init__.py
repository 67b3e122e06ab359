"""Bind environment variables and .env files to typed dataclass fields, with scoped overrides."""

__version__ = "0.1.0"
__all__ = ["loader", "override", "parse", "value"]