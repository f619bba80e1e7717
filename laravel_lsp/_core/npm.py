"""
npm package source and node runtime lookup for laravel-lsp.

Handles:
- Latest version queries against the npm registry
- Installing a package at an exact version into a workspace
- Reading the installed version from local package metadata
- Locating the node binary that runs bridge scripts
"""

from __future__ import annotations

import json
import logging
import os
import shutil
import subprocess
from pathlib import Path
from typing import Optional, Union

import requests
from platformdirs import user_cache_dir

from laravel_lsp._core.version import DEFAULT_NPM_REGISTRY
from laravel_lsp.errors import InstallError, ServerNotFoundError, VersionQueryError
from laravel_lsp.workspace import Workspace

logger = logging.getLogger(__name__)

# Lines of npm stderr kept in install error messages
_STDERR_TAIL_LINES = 10


def get_cache_dir() -> Path:
    """Get the npm cache directory used for installs."""
    cache_dir = Path(user_cache_dir("laravel-lsp", "laravel-lsp")) / "npm"
    cache_dir.mkdir(parents=True, exist_ok=True)
    return cache_dir


class NpmPackageSource:
    """
    Package source backed by the npm registry and the npm CLI.

    Args:
        registry_url: Registry base URL
        request_timeout: Timeout in seconds for registry requests
        npm_path: npm executable (default: looked up on PATH at install time)
        cache_dir: npm cache directory (default: per-user cache dir)
    """

    def __init__(
        self,
        registry_url: str = DEFAULT_NPM_REGISTRY,
        request_timeout: float = 30.0,
        npm_path: Optional[str] = None,
        cache_dir: Optional[Path] = None,
    ):
        self.registry_url = registry_url.rstrip("/")
        self.request_timeout = request_timeout
        self.npm_path = npm_path
        self.cache_dir = cache_dir

    def latest_version(self, package: str) -> str:
        """
        Query the registry for the latest published version of a package.

        Args:
            package: npm package name

        Returns:
            Version string of the "latest" dist-tag

        Raises:
            VersionQueryError: On network, HTTP or payload errors
        """
        url = f"{self.registry_url}/{package}/latest"
        logger.debug(f"Querying latest version of {package} from {url}")

        try:
            response = requests.get(url, timeout=self.request_timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.exceptions.RequestException as e:
            raise VersionQueryError(package, f"request to {url} failed: {e}", cause=e) from e
        except ValueError as e:
            raise VersionQueryError(package, f"invalid JSON from {url}", cause=e) from e

        version = payload.get("version") if isinstance(payload, dict) else None
        if not isinstance(version, str) or not version:
            raise VersionQueryError(package, f"no version in registry response from {url}")

        logger.debug(f"Latest {package} version is {version}")
        return version

    def install(self, package: str, version: str, prefix: Union[str, Path]) -> None:
        """
        Install an exact package version under a prefix directory.

        Args:
            package: npm package name
            version: Exact version to install
            prefix: Directory whose node_modules receives the package

        Raises:
            InstallError: If npm is missing, cannot start, or exits non-zero
        """
        npm = self.npm_path or shutil.which("npm")
        if not npm:
            raise InstallError(
                package,
                version,
                "npm not found on PATH. Please install Node.js and npm",
            )

        try:
            cache_dir = self.cache_dir or get_cache_dir()
        except OSError as e:
            raise InstallError(
                package, version, f"could not create npm cache dir: {e}", cause=e
            ) from e

        cmd = [
            npm,
            "install",
            "--prefix", str(prefix),
            "--no-save",
            "--cache", str(cache_dir),
            f"{package}@{version}",
        ]

        logger.info(f"Installing {package}@{version} into {prefix}...")

        try:
            result = subprocess.run(
                cmd,
                cwd=str(prefix),
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as e:
            raise InstallError(package, version, f"could not run npm: {e}", cause=e) from e

        if result.returncode != 0:
            tail = "\n".join((result.stderr or "").strip().splitlines()[-_STDERR_TAIL_LINES:])
            raise InstallError(
                package,
                version,
                f"npm exited with code {result.returncode}: {tail}",
            )

        logger.info(f"Successfully installed {package}@{version}")

    def installed_version(self, package: str, prefix: Union[str, Path]) -> Optional[str]:
        """
        Read the installed version of a package from its package.json.

        Args:
            package: npm package name
            prefix: Directory holding node_modules

        Returns:
            Installed version, or None if the package is not installed or
            its metadata is unreadable
        """
        manifest = Path(prefix) / "node_modules" / package / "package.json"
        if not manifest.is_file():
            return None

        try:
            data = json.loads(manifest.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Could not read {manifest}: {e}")
            return None

        version = data.get("version") if isinstance(data, dict) else None
        return version if isinstance(version, str) else None


def find_node_binary(workspace: Workspace, override: Optional[str] = None) -> str:
    """
    Resolve the node binary used to run bridge scripts.

    Lookup order: explicit override, the workspace's PATH, this process's PATH.

    Args:
        workspace: Workspace whose PATH is searched
        override: Configured node path (LARAVEL_LSP_NODE_PATH)

    Returns:
        Absolute path to node

    Raises:
        ServerNotFoundError: If node cannot be found
    """
    if override:
        if os.path.isfile(override):
            logger.debug(f"Using node from LARAVEL_LSP_NODE_PATH: {override}")
            return override
        logger.warning(f"LARAVEL_LSP_NODE_PATH set but file not found: {override}")

    node = workspace.which("node") or shutil.which("node")
    if node:
        return node

    raise ServerNotFoundError(
        "node not found. Please install Node.js to run intelephense"
    )
