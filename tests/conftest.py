"""
Pytest configuration for laravel-lsp tests.
"""

from pathlib import Path
from typing import Dict, List, Optional, Tuple

import pytest

from laravel_lsp._core.version import SERVER_SCRIPT_PATH
from laravel_lsp.config import ExtensionConfig
from laravel_lsp.errors import InstallError, VersionQueryError


class FakeWorkspace:
    """Workspace with a fixed root and a dict-backed PATH."""

    def __init__(self, root: Path, binaries: Optional[Dict[str, str]] = None):
        self.root = root
        self.binaries = binaries or {}

    def root_path(self) -> str:
        return str(self.root)

    def which(self, name: str) -> Optional[str]:
        return self.binaries.get(name)


class FakePackageSource:
    """
    In-memory package source recording every call.

    ``install`` writes the server script (and package.json) into the prefix
    unless ``install_creates_script`` is False.
    """

    def __init__(
        self,
        latest: str = "1.10.4",
        installed: Optional[str] = None,
        latest_error: Optional[Exception] = None,
        install_error: Optional[Exception] = None,
        install_creates_script: bool = True,
    ):
        self.latest = latest
        self.installed = installed
        self.latest_error = latest_error
        self.install_error = install_error
        self.install_creates_script = install_creates_script
        self.latest_calls: List[str] = []
        self.install_calls: List[Tuple[str, str, str]] = []

    def latest_version(self, package: str) -> str:
        self.latest_calls.append(package)
        if self.latest_error is not None:
            raise self.latest_error
        return self.latest

    def install(self, package: str, version: str, prefix) -> None:
        self.install_calls.append((package, version, str(prefix)))
        if self.install_error is not None:
            raise self.install_error
        if self.install_creates_script:
            write_server_script(Path(prefix))
            self.installed = version

    def installed_version(self, package: str, prefix) -> Optional[str]:
        return self.installed


def write_server_script(root: Path) -> Path:
    """Create a fake provisioned server script under root."""
    script = root / SERVER_SCRIPT_PATH
    script.parent.mkdir(parents=True, exist_ok=True)
    script.write_text("// intelephense\n")
    return script


@pytest.fixture
def workspace(tmp_path):
    """Empty workspace with nothing on PATH."""
    return FakeWorkspace(tmp_path)


@pytest.fixture
def source():
    """Package source whose latest version is 1.10.4."""
    return FakePackageSource()


@pytest.fixture
def config(tmp_path):
    """Config with auto-install and fixed node/extension paths."""
    extension_dir = tmp_path / "extension"
    extension_dir.mkdir()
    node = tmp_path / "node"
    node.write_text("")
    return ExtensionConfig(node_path=str(node), extension_dir=str(extension_dir))


@pytest.fixture
def version_query_error():
    return VersionQueryError("intelephense", "network unreachable")


@pytest.fixture
def install_error():
    return InstallError("intelephense", "1.10.4", "npm exited with code 1")
