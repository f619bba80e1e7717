"""
Build launch descriptors for a located or provisioned server.

Two shapes:
- Direct: the server binary itself, with --stdio
- Bridged: node running the extension's bridge script, which in turn runs
  the server script
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional, Union

from laravel_lsp._core.version import BRIDGE_SCRIPT_PATH, STDIO_FLAG
from laravel_lsp.errors import SelfLocationError
from laravel_lsp.types import LaunchDescriptor, LocatedServer

logger = logging.getLogger(__name__)


def get_extension_dir(override: Optional[Union[str, Path]] = None) -> Path:
    """
    Get the extension's installation directory.

    Derived from the running executable with its file name trimmed off,
    unless an explicit directory is configured. Computed on every call.

    Args:
        override: Configured extension directory (LARAVEL_LSP_EXTENSION_DIR)

    Returns:
        Absolute extension directory

    Raises:
        SelfLocationError: If the executable location cannot be determined
    """
    if override:
        return Path(override).resolve()

    executable = sys.executable
    if not executable:
        raise SelfLocationError("could not determine the current executable path")

    try:
        return Path(executable).resolve(strict=True).parent
    except OSError as e:
        raise SelfLocationError(
            f"could not resolve the current executable path {executable!r}: {e}",
            cause=e,
        ) from e


def get_bridge_script_path(extension_dir: Union[str, Path]) -> Path:
    """Path to the bridge script inside the extension directory."""
    return Path(extension_dir) / BRIDGE_SCRIPT_PATH


def build_command(
    located: LocatedServer,
    *,
    node_path: Optional[str] = None,
    extension_dir: Optional[Union[str, Path]] = None,
) -> LaunchDescriptor:
    """
    Build the launch descriptor for a server.

    Args:
        located: Resolved server location
        node_path: Node binary, required for bridged servers
        extension_dir: Extension install dir, required for bridged servers

    Returns:
        LaunchDescriptor inheriting the host environment
    """
    if located.direct:
        return LaunchDescriptor(command=str(located.path), args=[STDIO_FLAG])

    if node_path is None or extension_dir is None:
        raise ValueError("node_path and extension_dir are required for bridged servers")

    bridge = get_bridge_script_path(extension_dir)
    logger.debug(f"Bridging {located.path} through {bridge}")
    return LaunchDescriptor(
        command=node_path,
        args=[str(bridge), str(located.path)],
    )
