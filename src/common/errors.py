"""Exception types shared by the manifest parsers, resolvers and CLI."""

from __future__ import annotations


class ManifestError(Exception):
    """Base class for errors that prevent a manifest from being loaded."""

    def __init__(self, message: str, path: str = ""):
        super().__init__(message)
        self.path = path


class ManifestReadError(ManifestError):
    """Raised when a manifest file cannot be opened or read."""


class ManifestParseError(ManifestError):
    """Raised when a manifest file is structurally invalid."""


class ResolutionError(Exception):
    """Raised when repository tags cannot be retrieved or decoded."""


class ConfigError(ValueError):
    """Raised when a configuration file cannot be loaded."""
