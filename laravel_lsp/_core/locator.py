"""
Locate an already-usable intelephense for a workspace.

Pure filesystem and PATH inspection: no network access and no installs,
so it is safe to run on every request.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from laravel_lsp._core.version import LOCAL_BIN_PATH, SERVER_SCRIPT_PATH
from laravel_lsp.types import LocatedServer
from laravel_lsp.workspace import Workspace

logger = logging.getLogger(__name__)


def locate(
    server_id: str,
    workspace: Workspace,
    *,
    search_local: bool = True,
) -> Optional[LocatedServer]:
    """
    Find a usable server executable, first match wins.

    1. A binary named ``server_id`` on the workspace PATH (always direct).
    2. When ``search_local`` is set, the workspace's node_modules:
       ``.bin/<id>`` (direct if executable) then the package entry script
       (always bridged).

    Args:
        server_id: Language server id, also the binary name
        workspace: Workspace to search
        search_local: Also look at the workspace's node_modules. Disabled
            when the provisioner owns the local copy.

    Returns:
        The located server, or None
    """
    path = workspace.which(server_id)
    if path:
        logger.debug(f"Found {server_id} on PATH: {path}")
        return LocatedServer(path=Path(path), direct=True)

    if not search_local:
        return None

    root = Path(workspace.root_path())

    local_bin = root / LOCAL_BIN_PATH
    if local_bin.is_file():
        direct = os.access(local_bin, os.X_OK)
        logger.debug(f"Found {server_id} in node_modules/.bin: {local_bin} (direct={direct})")
        return LocatedServer(path=local_bin, direct=direct)

    script = root / SERVER_SCRIPT_PATH
    if script.is_file():
        logger.debug(f"Found {server_id} entry script: {script}")
        return LocatedServer(path=script, direct=False)

    return None
