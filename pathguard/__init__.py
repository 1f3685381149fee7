"""Secure, cross-platform path normalization and validation.

Typical use when writing files whose names come from untrusted content:

    from pathguard import safe_repository_join

    target = safe_repository_join(workdir, "testing/framework", "/args.js")
    # -> <canonical workdir>/testing/framework/args.js

Every rejection raises a ``PathViolation`` subclass whose ``kind`` names the
broken rule.
"""

from .errors import (
    ConstructionFailedError,
    DriveLetterError,
    EmptyPathError,
    InvalidCharactersError,
    PathIOError,
    PathTraversalError,
    PathViolation,
    ReservedNameError,
    ViolationKind,
)
from .utils.normalize import join_and_normalize, normalize_path, normalize_path_str
from .utils.paths import safe_repository_join
from .utils.sanitization import PathSanitizer, sanitize_directory_file_path
from .utils.validation import find_violation, is_safe_path, validate_path

__version__ = "0.1.0"

__all__ = [
    "ConstructionFailedError",
    "DriveLetterError",
    "EmptyPathError",
    "InvalidCharactersError",
    "PathIOError",
    "PathSanitizer",
    "PathTraversalError",
    "PathViolation",
    "ReservedNameError",
    "ViolationKind",
    "find_violation",
    "is_safe_path",
    "join_and_normalize",
    "normalize_path",
    "normalize_path_str",
    "safe_repository_join",
    "sanitize_directory_file_path",
    "validate_path",
]
