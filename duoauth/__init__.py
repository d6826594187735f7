"""Strict reader for INI-style credential configuration files."""

__version__ = "1.0.0"
__all__ = ["config"]