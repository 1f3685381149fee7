"""Path normalization, validation, sanitization and joining utilities."""

from .normalize import join_and_normalize, normalize_path, normalize_path_str
from .paths import canonicalize_root, safe_repository_join
from .sanitization import (
    DRIVE_LETTER_POLICIES,
    PathSanitizer,
    drive_letters_enabled,
    sanitize_directory_file_path,
)
from .validation import (
    DISALLOWED_CHARACTERS,
    RESERVED_NAMES,
    find_violation,
    is_safe_path,
    validate_path,
)

__all__ = [
    "DISALLOWED_CHARACTERS",
    "DRIVE_LETTER_POLICIES",
    "PathSanitizer",
    "RESERVED_NAMES",
    "canonicalize_root",
    "drive_letters_enabled",
    "find_violation",
    "is_safe_path",
    "join_and_normalize",
    "normalize_path",
    "normalize_path_str",
    "safe_repository_join",
    "sanitize_directory_file_path",
    "validate_path",
]
