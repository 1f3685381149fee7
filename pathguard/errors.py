"""Violation types raised by path validation, sanitization and joining.

Every rejection is reported as exactly one ``PathViolation`` subclass. The
``kind`` attribute is the stable discriminant callers should surface to their
own users; the payload attributes name the offending path or component.
"""
from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


class ViolationKind(str, Enum):
    """Discriminant for the reason a path was rejected."""

    EMPTY = "empty"
    TRAVERSAL = "traversal"
    INVALID_CHARACTERS = "invalid_characters"
    RESERVED_NAME = "reserved_name"
    DRIVE_LETTER = "drive_letter"
    CONSTRUCTION_FAILED = "construction_failed"
    IO = "io"


class PathViolation(ValueError):
    """Base class for every path rejection.

    Subclasses ``ValueError`` so callers that already guard path handling
    with ``except ValueError`` keep working.
    """

    kind: ViolationKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def payload(self) -> Dict[str, Any]:
        """Return the kind-specific fields of this violation."""
        return {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"kind": self.kind.value, "message": self.message, **self.payload()}

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PathViolation):
            return NotImplemented
        return type(self) is type(other) and self.to_dict() == other.to_dict()

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class EmptyPathError(PathViolation):
    """Empty or whitespace-only path."""

    kind = ViolationKind.EMPTY

    def __init__(self):
        super().__init__("Empty paths are not allowed")


class PathTraversalError(PathViolation):
    """Path contains a parent-directory reference."""

    kind = ViolationKind.TRAVERSAL

    def __init__(self, original: str):
        super().__init__(
            f"Path traversal detected: {original} - relative paths with '..' are not allowed"
        )
        self.original = original

    def payload(self) -> Dict[str, Any]:
        return {"original": self.original}


class InvalidCharactersError(PathViolation):
    """Path contains NUL, a control character or a disallowed character."""

    kind = ViolationKind.INVALID_CHARACTERS

    def __init__(self, original: str):
        super().__init__(f"Invalid characters detected in path: {original}")
        self.original = original

    def payload(self) -> Dict[str, Any]:
        return {"original": self.original}


class ReservedNameError(PathViolation):
    """A path component is a reserved Windows device name."""

    kind = ViolationKind.RESERVED_NAME

    def __init__(self, component: str, original: str):
        super().__init__(f"Reserved filename detected: {component} in path {original}")
        self.component = component
        self.original = original

    def payload(self) -> Dict[str, Any]:
        return {"component": self.component, "original": self.original}


class DriveLetterError(PathViolation):
    """Path starts with a Windows drive letter such as ``C:``."""

    kind = ViolationKind.DRIVE_LETTER

    def __init__(self, original: str):
        super().__init__(f"Drive letter paths are not allowed: {original}")
        self.original = original

    def payload(self) -> Dict[str, Any]:
        return {"original": self.original}


class ConstructionFailedError(PathViolation):
    """The joined path could not be expressed relative to its root."""

    kind = ViolationKind.CONSTRUCTION_FAILED

    def __init__(self, message: str):
        super().__init__(f"Path construction failed: {message}")
        self.detail = message

    def payload(self) -> Dict[str, Any]:
        return {"detail": self.detail}


class PathIOError(PathViolation):
    """Filesystem error while canonicalizing a trusted root."""

    kind = ViolationKind.IO

    def __init__(self, message: str):
        super().__init__(f"I/O error: {message}")
        self.detail = message

    @classmethod
    def from_os_error(cls, error: Exception, context: Optional[str] = None) -> "PathIOError":
        """Wrap an ``OSError`` (or symlink loop ``RuntimeError``) raised by the platform."""
        message = f"{context}: {error}" if context else str(error)
        return cls(message)

    def payload(self) -> Dict[str, Any]:
        return {"detail": self.detail}


__all__ = [
    "ConstructionFailedError",
    "DriveLetterError",
    "EmptyPathError",
    "InvalidCharactersError",
    "PathIOError",
    "PathTraversalError",
    "PathViolation",
    "ReservedNameError",
    "ViolationKind",
]
