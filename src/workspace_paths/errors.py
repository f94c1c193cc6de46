"""Error types raised while resolving workspace configuration."""

from __future__ import annotations


class WorkspaceError(RuntimeError):
    """Base error for workspace resolution failures."""


class InvalidArgumentError(WorkspaceError, ValueError):
    """Raised when a top-level input is missing or has the wrong type."""


class ManifestReadError(WorkspaceError):
    """Raised when a manifest file does not exist or cannot be read."""


class ManifestParseError(WorkspaceError):
    """Raised when a manifest file does not contain a JSON object."""


class MissingFieldError(WorkspaceError):
    """Raised when an object-form workspaces declaration has no ``packages``."""


class InvalidDeclarationError(WorkspaceError):
    """Raised when a workspaces declaration has an unsupported shape."""


class InvalidSettingsError(WorkspaceError):
    """Raised when the app's ``react-scripts.workspaces`` block is malformed."""
