"""Sanitization of untrusted relative paths for safe file operations."""
from __future__ import annotations

import logging
import os
from typing import Optional

from ..errors import DriveLetterError, EmptyPathError, PathTraversalError, PathViolation
from .normalize import normalize_path_str
from .validation import check_characters, check_reserved_names, is_blank

logger = logging.getLogger(__name__)

DRIVE_LETTER_POLICIES = ("auto", "always", "never")


def drive_letters_enabled(policy: str = "auto") -> bool:
    """Resolve a drive letter policy name for the current platform.

    ``auto`` enables the check only where drive letters exist (Windows).

    Raises:
        ValueError: If the policy name is unknown
    """
    if policy not in DRIVE_LETTER_POLICIES:
        raise ValueError(
            f"Unknown drive letter policy '{policy}'. Expected one of: {', '.join(DRIVE_LETTER_POLICIES)}"
        )
    if policy == "auto":
        return os.name == "nt"
    return policy == "always"


def _rejected(violation: PathViolation) -> PathViolation:
    logger.debug(f"Sanitization rejected path ({violation.kind.value}): {violation}")
    return violation


class PathSanitizer:
    """Utilities for turning untrusted path strings into safe relative paths."""

    @staticmethod
    def sanitize_directory_file_path(
        path: str, *, check_drive_letters: Optional[bool] = None
    ) -> str:
        """Sanitize a file path extracted from archive, patch or directory content.

        Such content often stores paths with a leading ``/``. Those must be
        treated as relative to the destination directory, never as relative
        to the filesystem root. Traversal and emptiness are checked before
        the leading separators are stripped, so ``/../etc`` is rejected
        rather than becoming ``../etc``.

        Args:
            path: Untrusted path string
            check_drive_letters: Reject ``X:`` prefixes. ``None`` checks only on
                platforms with drive letters (Windows).

        Returns:
            Normalized relative path

        Raises:
            EmptyPathError: If the path is empty or whitespace only
            PathTraversalError: If the normalized path contains ``..``
            DriveLetterError: If drive letter checks are active and the path
                starts with a drive letter
            InvalidCharactersError: If the path contains NUL, control or
                disallowed characters
            ReservedNameError: If a component is a reserved device name

        Example:
            >>> PathSanitizer.sanitize_directory_file_path("/args.js")
            'args.js'
        """
        if is_blank(path):
            raise _rejected(EmptyPathError())

        normalized = normalize_path_str(path)

        if ".." in normalized:
            raise _rejected(PathTraversalError(path))

        normalized = normalized.lstrip("/")

        if check_drive_letters is None:
            check_drive_letters = drive_letters_enabled()
        if check_drive_letters and len(normalized) > 1 and normalized[1] == ":":
            raise _rejected(DriveLetterError(path))

        violation = check_characters(normalized, path) or check_reserved_names(normalized, path)
        if violation is not None:
            raise _rejected(violation)

        return normalized

    @staticmethod
    def try_sanitize(path: str, *, check_drive_letters: Optional[bool] = None) -> Optional[str]:
        """Sanitize a path, returning None instead of raising on rejection.

        Args:
            path: Untrusted path string
            check_drive_letters: See ``sanitize_directory_file_path``

        Returns:
            Sanitized path, or None if the path was rejected
        """
        try:
            return PathSanitizer.sanitize_directory_file_path(
                path, check_drive_letters=check_drive_letters
            )
        except PathViolation:
            return None


def sanitize_directory_file_path(path: str, *, check_drive_letters: Optional[bool] = None) -> str:
    """Sanitize an untrusted path into a safe relative path.

    Args:
        path: Untrusted path string
        check_drive_letters: Reject ``X:`` prefixes (defaults to Windows only)

    Returns:
        Normalized relative path
    """
    return PathSanitizer.sanitize_directory_file_path(path, check_drive_letters=check_drive_letters)
