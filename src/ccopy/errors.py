"""Application-level exception types for ccopy."""

from __future__ import annotations


class CcopyError(Exception):
    """Base exception for ccopy."""


class ClipboardError(CcopyError):
    """Base exception for system clipboard access errors."""


class ClipboardUnavailableError(ClipboardError):
    """Raised when no clipboard backend can be used to write text."""


class ConfigurationError(CcopyError):
    """Base exception for configuration and startup validation errors."""


class EvaluatorNotFoundError(ConfigurationError):
    """Raised when the configured interpreter command cannot be found."""
