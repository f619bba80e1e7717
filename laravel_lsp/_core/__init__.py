"""
Language server resolution core for laravel-lsp.

This module handles:
- Locating an existing intelephense (PATH, workspace node_modules)
- Provisioning the latest intelephense into the workspace
- Building direct or bridged launch descriptors
"""

from laravel_lsp._core.version import (
    EXTENSION_VERSION,
    SERVER_ID,
    PACKAGE_NAME,
    BRIDGE_SCRIPT_PATH,
    SERVER_SCRIPT_PATH,
)
from laravel_lsp._core.locator import locate
from laravel_lsp._core.provisioner import (
    ensure_installed,
    get_server_script_path,
)
from laravel_lsp._core.launcher import (
    build_command,
    get_extension_dir,
    get_bridge_script_path,
)
from laravel_lsp._core.npm import (
    NpmPackageSource,
    find_node_binary,
)

__all__ = [
    # Version
    "EXTENSION_VERSION",
    "SERVER_ID",
    "PACKAGE_NAME",
    "BRIDGE_SCRIPT_PATH",
    "SERVER_SCRIPT_PATH",
    # Locator
    "locate",
    # Provisioner
    "ensure_installed",
    "get_server_script_path",
    # Launcher
    "build_command",
    "get_extension_dir",
    "get_bridge_script_path",
    # npm
    "NpmPackageSource",
    "find_node_binary",
]
