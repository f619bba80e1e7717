"""Tests for laravel_lsp._core.locator module."""

import os
import sys
from pathlib import Path

import pytest

from laravel_lsp._core.locator import locate
from laravel_lsp._core.version import LOCAL_BIN_PATH

from conftest import FakeWorkspace, write_server_script


def _write_local_bin(root: Path, executable: bool) -> Path:
    local_bin = root / LOCAL_BIN_PATH
    local_bin.parent.mkdir(parents=True, exist_ok=True)
    local_bin.write_text("#!/usr/bin/env node\n")
    mode = 0o755 if executable else 0o644
    os.chmod(local_bin, mode)
    return local_bin


class TestPathLookup:
    """Tests for PATH resolution."""

    def test_path_hit_is_direct(self, tmp_path):
        """A binary on PATH should be returned as direct."""
        workspace = FakeWorkspace(tmp_path, {"intelephense": "/usr/bin/intelephense"})

        result = locate("intelephense", workspace)

        assert result is not None
        assert result.path == Path("/usr/bin/intelephense")
        assert result.direct is True

    def test_path_wins_over_local_copy(self, tmp_path):
        """PATH takes precedence over node_modules."""
        write_server_script(tmp_path)
        _write_local_bin(tmp_path, executable=True)
        workspace = FakeWorkspace(tmp_path, {"intelephense": "/usr/bin/intelephense"})

        result = locate("intelephense", workspace)

        assert result.path == Path("/usr/bin/intelephense")

    def test_looks_up_server_id(self, tmp_path):
        """The PATH lookup uses the server id as binary name."""
        workspace = FakeWorkspace(tmp_path, {"phpactor": "/usr/bin/phpactor"})

        assert locate("intelephense", workspace) is None


class TestLocalLookup:
    """Tests for workspace node_modules resolution."""

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_executable_local_bin_is_direct(self, workspace, tmp_path):
        """Executable node_modules/.bin entry runs directly."""
        local_bin = _write_local_bin(tmp_path, executable=True)

        result = locate("intelephense", workspace)

        assert result.path == local_bin
        assert result.direct is True

    @pytest.mark.skipif(sys.platform == "win32", reason="POSIX permissions")
    def test_non_executable_local_bin_is_bridged(self, workspace, tmp_path):
        """Non-executable .bin entry has to go through the bridge."""
        local_bin = _write_local_bin(tmp_path, executable=False)

        result = locate("intelephense", workspace)

        assert result.path == local_bin
        assert result.direct is False

    def test_entry_script_is_bridged(self, workspace, tmp_path):
        """Package entry script is never run directly."""
        script = write_server_script(tmp_path)

        result = locate("intelephense", workspace)

        assert result.path == script
        assert result.direct is False

    def test_directory_is_not_a_match(self, workspace, tmp_path):
        """Only regular files count."""
        (tmp_path / "node_modules" / ".bin" / "intelephense").mkdir(parents=True)

        assert locate("intelephense", workspace) is None

    def test_search_local_disabled(self, workspace, tmp_path):
        """Local copies are ignored when search_local is False."""
        write_server_script(tmp_path)
        _write_local_bin(tmp_path, executable=True)

        assert locate("intelephense", workspace, search_local=False) is None

    def test_nothing_found(self, workspace):
        """Empty workspace yields None."""
        assert locate("intelephense", workspace) is None
