"""Separator normalization for untrusted path strings.

Normalization only unifies separators and drops empty segments. It never
resolves ``.`` or ``..``: deciding what those mean is a security decision
left to the validation and sanitization layers.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathInput = Union[str, "os.PathLike[str]"]


def normalize_path_str(path: str) -> str:
    """Normalize a path string to forward-slash form.

    Backslashes become forward slashes and empty segments are dropped, which
    collapses doubled, leading and trailing separators.

    Args:
        path: Arbitrary path string

    Returns:
        Normalized path string (empty for empty input)

    Example:
        >>> normalize_path_str("a//b\\\\c")
        'a/b/c'
    """
    return "/".join(segment for segment in path.replace("\\", "/").split("/") if segment)


def normalize_path(path: PathInput) -> Path:
    """Normalize a path-like value and return it as a ``Path``."""
    return Path(normalize_path_str(os.fspath(path)))


def join_and_normalize(base: PathInput, path: PathInput) -> Path:
    """Join two paths and normalize the result.

    The trailing separator of ``base`` and the leading separator of ``path``
    are trimmed first, so an absolute-looking ``path`` is appended rather
    than replacing ``base`` the way ``Path.joinpath`` would.

    Args:
        base: Base path
        path: Path to append

    Returns:
        Normalized joined path

    Example:
        >>> join_and_normalize("source/", "/main.py").as_posix()
        'source/main.py'
    """
    base_trimmed = os.fspath(base).rstrip("/")
    path_trimmed = os.fspath(path).lstrip("/")

    if not base_trimmed:
        return normalize_path(path_trimmed)
    if not path_trimmed:
        return normalize_path(base_trimmed)
    return normalize_path(f"{base_trimmed}/{path_trimmed}")
