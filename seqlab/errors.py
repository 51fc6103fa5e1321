"""Exception types raised by the harness."""

from __future__ import annotations


class SeqlabError(Exception):
    """Base class for harness errors."""


class KeyGenerationError(SeqlabError):
    """Peer or group key material could not be generated."""


class TableAlignmentError(SeqlabError, ValueError):
    """Series passed to a keyed join do not share the same keys."""


class ConfigError(SeqlabError, ValueError):
    """Configuration file contains unknown keys or invalid values."""
