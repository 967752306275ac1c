"""High-level clients."""

from .definitions_client import DefinitionsClient

__all__ = ["DefinitionsClient"]
