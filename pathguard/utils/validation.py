"""Safety rules for untrusted path strings.

The same ordered rule set backs three entry points:

- ``find_violation`` returns the first violation (or ``None``) without raising
- ``is_safe_path`` coerces that result to a boolean
- ``validate_path`` raises the violation

Rules, first match wins:

1. empty or whitespace-only
2. ``..`` anywhere in the string (substring match, so ``a..b`` is rejected too)
3. NUL or a control character other than newline and tab
4. any of ``< > | ? * "``
5. a segment whose name before the first ``.`` is a reserved device name

Inputs do not need to be normalized first; segments are split on both ``/``
and ``\\``.
"""
from __future__ import annotations

import logging
import os
import re
import unicodedata
from typing import Iterable, Optional

from ..errors import (
    EmptyPathError,
    InvalidCharactersError,
    PathTraversalError,
    PathViolation,
    ReservedNameError,
)
from .normalize import PathInput

logger = logging.getLogger(__name__)

RESERVED_NAMES = frozenset(
    ["CON", "PRN", "AUX", "NUL"]
    + [f"COM{i}" for i in range(1, 10)]
    + [f"LPT{i}" for i in range(1, 10)]
)

DISALLOWED_CHARACTERS = frozenset('<>|?*"')

ALLOWED_CONTROL_CHARACTERS = frozenset("\n\t")

_SEPARATORS = re.compile(r"[/\\]")

# str.isspace() also accepts the information separators, which are control
# characters rather than whitespace.
_NON_WHITESPACE_SEPARATORS = frozenset("\x1c\x1d\x1e\x1f")


def is_blank(path_str: str) -> bool:
    """Return True for an empty string or one made only of whitespace."""
    return all(c.isspace() and c not in _NON_WHITESPACE_SEPARATORS for c in path_str)


def _is_forbidden_control(char: str) -> bool:
    return unicodedata.category(char) == "Cc" and char not in ALLOWED_CONTROL_CHARACTERS


def check_characters(path_str: str, original: str) -> Optional[PathViolation]:
    """Apply the NUL, control character and disallowed character rules.

    Args:
        path_str: String to inspect
        original: Input string reported in the violation

    Returns:
        ``InvalidCharactersError`` for the first offending rule, else ``None``
    """
    if "\x00" in path_str or any(_is_forbidden_control(c) for c in path_str):
        return InvalidCharactersError(original)
    if any(c in DISALLOWED_CHARACTERS for c in path_str):
        return InvalidCharactersError(original)
    return None


def reserved_component(segments: Iterable[str]) -> Optional[str]:
    """Return the first segment that is a reserved device name, if any.

    Comparison is case-insensitive and ignores everything from the first
    ``.`` on, so ``con``, ``Con.txt`` and ``CON.tar.gz`` all match.
    """
    for segment in segments:
        if segment.upper().split(".", 1)[0] in RESERVED_NAMES:
            return segment
    return None


def check_reserved_names(path_str: str, original: str) -> Optional[PathViolation]:
    """Apply the reserved device name rule to every segment of ``path_str``."""
    component = reserved_component(_SEPARATORS.split(path_str))
    if component is not None:
        return ReservedNameError(component, original)
    return None


def find_violation(path: PathInput) -> Optional[PathViolation]:
    """Evaluate every safety rule and return the first violation.

    Args:
        path: Path to check (string or path-like)

    Returns:
        The first ``PathViolation`` found, or ``None`` if the path is safe
    """
    path_str = os.fspath(path)

    if is_blank(path_str):
        return EmptyPathError()

    if ".." in path_str:
        return PathTraversalError(path_str)

    return check_characters(path_str, path_str) or check_reserved_names(path_str, path_str)


def is_safe_path(path: PathInput) -> bool:
    """Check whether a path passes every safety rule.

    Example:
        >>> is_safe_path("safe/path/file.txt")
        True
        >>> is_safe_path("../etc/passwd")
        False
    """
    return find_violation(path) is None


def validate_path(path: PathInput) -> None:
    """Validate a path, raising the specific violation on failure.

    Args:
        path: Path to validate

    Raises:
        PathViolation: The first rule the path breaks
    """
    violation = find_violation(path)
    if violation is not None:
        logger.debug(f"Path rejected ({violation.kind.value}): {violation}")
        raise violation
