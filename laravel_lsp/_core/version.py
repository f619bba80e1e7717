"""
Version and path constants for laravel-lsp.

- EXTENSION_VERSION: User-facing package version
- SERVER_ID / PACKAGE_NAME: The single supported language server
- BRIDGE_SCRIPT_PATH: Bridge script, relative to the extension's install dir
- SERVER_SCRIPT_PATH: Provisioned server script, relative to the workspace root
- LOCAL_BIN_PATH: npm bin link, relative to the workspace root
"""

from __future__ import annotations

from typing import Optional

# laravel-lsp version (user-facing semver)
EXTENSION_VERSION = "0.1.0"

# The only language server this extension resolves
SERVER_ID = "intelephense"

# npm package providing the server
PACKAGE_NAME = "intelephense"

# Flag that puts the server into stdin/stdout streaming mode
STDIO_FLAG = "--stdio"

# Bridge script shipped with the extension
BRIDGE_SCRIPT_PATH = "lsp-proxy/proxy.js"

# Server entry script installed by the provisioner
SERVER_SCRIPT_PATH = f"node_modules/{PACKAGE_NAME}/lib/{PACKAGE_NAME}.js"

# Launcher npm links into the workspace bin directory
LOCAL_BIN_PATH = f"node_modules/.bin/{SERVER_ID}"

DEFAULT_NPM_REGISTRY = "https://registry.npmjs.org"


def normalize_version(version: Optional[str]) -> Optional[str]:
    """
    Normalize a version string for comparison.

    Strips surrounding whitespace and a leading 'v', so "v1.10.2 " and
    "1.10.2" compare equal.

    Args:
        version: Version string, or None if nothing is installed

    Returns:
        Normalized version, or None
    """
    if version is None:
        return None
    return version.strip().lstrip("v")


def versions_match(installed: Optional[str], latest: str) -> bool:
    """
    Check whether the installed version is the latest one.

    No installed version never matches.
    """
    installed = normalize_version(installed)
    if not installed:
        return False
    return installed == normalize_version(latest)
