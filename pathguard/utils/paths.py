"""Guarded joining of untrusted paths onto a trusted root directory.

The untrusted part is checked twice: once as a string by the sanitizer, and
once structurally after the final path has been built. The second check
catches any gap between string-level rules and real path semantics.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from ..errors import ConstructionFailedError, PathIOError, PathTraversalError
from .normalize import PathInput, normalize_path
from .sanitization import PathSanitizer

logger = logging.getLogger(__name__)


def canonicalize_root(root: PathInput) -> Path:
    """Resolve a trusted root directory to its absolute, symlink-free form.

    Raises:
        PathIOError: If the root does not exist or cannot be resolved
    """
    try:
        return Path(root).resolve(strict=True)
    except (OSError, RuntimeError) as e:
        raise PathIOError.from_os_error(e, "Cannot canonicalize workdir") from e


def safe_repository_join(
    root: PathInput,
    target: PathInput,
    file_path: str,
    *,
    check_drive_letters: Optional[bool] = None,
) -> Path:
    """Join a trusted root, a trusted target and an untrusted file path.

    ``file_path`` is sanitized first, so absolute-looking input such as
    ``/args.js`` lands under ``root/target`` instead of the filesystem root.

    Args:
        root: Existing trusted directory (canonicalized on every call)
        target: Directory inside the root, relative
        file_path: Untrusted path, e.g. extracted from patch or archive content
        check_drive_letters: Passed to the sanitizer (defaults to Windows only)

    Returns:
        Absolute path inside the canonical root. Nothing is created on disk.

    Raises:
        PathViolation: If ``file_path`` fails sanitization
        PathIOError: If the root cannot be canonicalized
        ConstructionFailedError: If the result is not inside the root
        PathTraversalError: If the result contains a ``..`` component
    """
    sanitized = PathSanitizer.sanitize_directory_file_path(
        file_path, check_drive_letters=check_drive_letters
    )

    root_canonical = canonicalize_root(root)
    final_path = root_canonical / normalize_path(target) / sanitized

    try:
        relative = final_path.relative_to(root_canonical)
    except ValueError as e:
        raise ConstructionFailedError(
            f"result not within workdir. Final: {final_path}, Workdir: {root_canonical}"
        ) from e

    if ".." in relative.parts:
        logger.warning(f"Parent directory component in joined path {final_path}")
        raise PathTraversalError(str(final_path))

    logger.debug(f"Joined {file_path!r} under {root_canonical} as {final_path}")
    return final_path
