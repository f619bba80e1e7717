"""
Workspace access for laravel-lsp.

The host owns the workspace; the core only reads its root path and
searches the host's executable path through it.
"""

from __future__ import annotations

import os
import shutil
from pathlib import Path
from typing import Optional, Protocol, Union


class Workspace(Protocol):
    """What the core needs from the host's project workspace."""

    def root_path(self) -> str:
        """Absolute path to the workspace root."""
        ...

    def which(self, name: str) -> Optional[str]:
        """Search the host executable path for a binary."""
        ...


class LocalWorkspace:
    """
    Workspace backed by the local filesystem.

    Args:
        root: Workspace root directory
        search_path: PATH-style string to search (default: the process PATH)
    """

    def __init__(
        self,
        root: Union[str, Path],
        search_path: Optional[str] = None,
    ):
        self._root = Path(root).resolve()
        self._search_path = search_path

    def root_path(self) -> str:
        return str(self._root)

    def which(self, name: str) -> Optional[str]:
        path = self._search_path
        if path is None:
            path = os.environ.get("PATH")
        return shutil.which(name, path=path)

    def __repr__(self) -> str:
        return f"LocalWorkspace(root={self.root_path()!r})"
