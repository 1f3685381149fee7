"""Tests for safe_repository_join.

safe_repository_join is the guarded entry point for writing files whose
names come from untrusted content: absolute-looking names must land inside
the repository, and nothing may escape the canonical root.
"""
import os
from pathlib import Path

import pytest

from pathguard.errors import (
    ConstructionFailedError,
    DriveLetterError,
    EmptyPathError,
    InvalidCharactersError,
    PathIOError,
    PathTraversalError,
)
from pathguard.utils import paths
from pathguard.utils.paths import canonicalize_root, safe_repository_join


class TestSafeRepositoryJoin:
    """Successful joins."""

    def test_absolute_file_path_lands_in_target(self, repo_root: Path):
        result = safe_repository_join(repo_root, "testing/framework", "/args.js")
        assert result == repo_root.resolve() / "testing" / "framework" / "args.js"

    def test_relative_file_path(self, repo_root: Path):
        result = safe_repository_join(repo_root, "testing/framework", "lib/generator.js")
        assert result == repo_root.resolve() / "testing/framework/lib/generator.js"

    def test_nested_target(self, repo_root: Path):
        result = safe_repository_join(repo_root, "tools/build", "config/webpack.js")
        assert result == repo_root.resolve() / "tools/build/config/webpack.js"

    def test_target_is_normalized(self, repo_root: Path):
        result = safe_repository_join(repo_root, "\\tools//build\\", "a.txt")
        assert result == repo_root.resolve() / "tools/build/a.txt"

    def test_empty_target(self, repo_root: Path):
        assert safe_repository_join(repo_root, "", "a.txt") == repo_root.resolve() / "a.txt"

    def test_string_root(self, repo_root: Path):
        result = safe_repository_join(str(repo_root), "t", "/f.txt")
        assert result == repo_root.resolve() / "t" / "f.txt"

    def test_result_is_not_filesystem_root(self, repo_root: Path):
        """The original bug: '/args.js' from patch content was written to '/'."""
        result = safe_repository_join(repo_root, "testing/test-framework", "/args.js")
        assert str(result).startswith(str(repo_root.resolve()))
        assert result != Path("/args.js")
        assert result.name == "args.js"

    def test_nothing_is_created(self, repo_root: Path):
        result = safe_repository_join(repo_root, "new/dir", "file.txt")
        assert not result.exists()
        assert not (repo_root / "new").exists()

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks not supported")
    def test_symlinked_root_is_canonicalized(self, tmp_path: Path, repo_root: Path):
        link = tmp_path / "link"
        try:
            link.symlink_to(repo_root, target_is_directory=True)
        except OSError:
            pytest.skip("cannot create symlinks here")
        result = safe_repository_join(link, "t", "f.txt")
        assert result == repo_root.resolve() / "t" / "f.txt"


class TestSafeRepositoryJoinSecurity:
    """Rejections."""

    @pytest.mark.parametrize("raw", ["../../../etc/passwd", "..\\..\\windows\\system32"])
    def test_traversal_in_file_path(self, repo_root: Path, raw):
        with pytest.raises(PathTraversalError):
            safe_repository_join(repo_root, "test", raw)

    @pytest.mark.parametrize("raw", ["file<script>", "file|pipe"])
    def test_invalid_characters(self, repo_root: Path, raw):
        with pytest.raises(InvalidCharactersError):
            safe_repository_join(repo_root, "test", raw)

    @pytest.mark.parametrize("raw", ["", "   "])
    def test_empty(self, repo_root: Path, raw):
        with pytest.raises(EmptyPathError):
            safe_repository_join(repo_root, "test", raw)

    def test_sanitizer_runs_before_root_canonicalization(self, tmp_path: Path):
        """An unsafe file path is reported even when the root is missing."""
        with pytest.raises(PathTraversalError):
            safe_repository_join(tmp_path / "missing", "t", "../x")

    def test_missing_root(self, tmp_path: Path):
        with pytest.raises(PathIOError) as exc_info:
            safe_repository_join(tmp_path / "missing", "t", "f.txt")
        assert "Cannot canonicalize workdir" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, OSError)

    def test_parent_component_in_target_is_rejected(self, repo_root: Path):
        """The structural check catches '..' that only the trusted target carried."""
        with pytest.raises(PathTraversalError):
            safe_repository_join(repo_root, "a/../../outside", "f.txt")

    def test_result_outside_root_fails_construction(self, repo_root: Path, tmp_path: Path, monkeypatch):
        outside = tmp_path / "elsewhere"
        monkeypatch.setattr(paths, "normalize_path", lambda target: outside)
        with pytest.raises(ConstructionFailedError) as exc_info:
            safe_repository_join(repo_root, "ignored", "f.txt")
        assert "result not within workdir" in str(exc_info.value)

    def test_drive_letter_flag_is_forwarded(self, repo_root: Path):
        with pytest.raises(DriveLetterError):
            safe_repository_join(repo_root, "t", "C:/x.txt", check_drive_letters=True)

    @pytest.mark.parametrize(
        "name, value",
        [("PATHGUARD_LOG_LEVEL", "loud"), ("PATHGUARD_DRIVE_LETTER_POLICY", "sometimes")],
    )
    def test_invalid_settings_do_not_break_join(self, repo_root: Path, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        result = safe_repository_join(repo_root, "t", "/args.js")
        assert result == repo_root.resolve() / "t" / "args.js"


class TestCanonicalizeRoot:
    """Tests for canonicalize_root."""

    def test_existing_directory(self, repo_root: Path):
        assert canonicalize_root(repo_root) == repo_root.resolve()

    def test_relative_directory(self, repo_root: Path, monkeypatch):
        monkeypatch.chdir(repo_root.parent)
        assert canonicalize_root(repo_root.name) == repo_root.resolve()

    def test_missing_directory(self, tmp_path: Path):
        with pytest.raises(PathIOError):
            canonicalize_root(tmp_path / "nope")
