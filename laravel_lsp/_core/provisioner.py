"""
Provisioning of the workspace-local intelephense copy.

Checks the registry once per session, installs the latest version when the
local copy is missing or outdated, and falls back to an existing (possibly
stale) copy when the registry or the install is unavailable.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, Protocol, Union

from laravel_lsp._core.version import PACKAGE_NAME, SERVER_SCRIPT_PATH, versions_match
from laravel_lsp.errors import (
    InstallError,
    InstalledPathMissingError,
    LaravelLspError,
    VersionQueryError,
)
from laravel_lsp.types import InstallationStatus, ProvisionState
from laravel_lsp.workspace import Workspace

logger = logging.getLogger(__name__)

StatusReporter = Callable[[str, InstallationStatus], None]


class PackageSource(Protocol):
    """Registry and installer primitives the provisioner relies on."""

    def latest_version(self, package: str) -> str:
        ...

    def install(self, package: str, version: str, prefix: Union[str, Path]) -> None:
        ...

    def installed_version(self, package: str, prefix: Union[str, Path]) -> Optional[str]:
        ...


def get_server_script_path(workspace: Workspace) -> Path:
    """Expected location of the provisioned server script."""
    return Path(workspace.root_path()) / SERVER_SCRIPT_PATH


def _report(
    report_status: Optional[StatusReporter],
    server_id: str,
    status: InstallationStatus,
) -> None:
    """Notify the host of a status transition. Reporter failures never block provisioning."""
    logger.debug(f"{server_id}: {status.value}")
    if report_status is None:
        return
    try:
        report_status(server_id, status)
    except Exception as e:
        logger.warning(f"Installation status reporter failed for {status.value}: {e}")


def ensure_installed(
    server_id: str,
    workspace: Workspace,
    state: ProvisionState,
    source: PackageSource,
    report_status: Optional[StatusReporter] = None,
) -> Path:
    """
    Ensure the latest intelephense is installed in the workspace.

    Once a session has confirmed the server is present, later calls return
    immediately without touching the registry.

    Fallback policy: when the version query or the install fails but a local
    copy exists, that copy is used as-is. Availability wins over freshness.

    Args:
        server_id: Language server id (used for status reports)
        workspace: Workspace to install into
        state: Session state, updated on success
        source: Registry/installer collaborator
        report_status: Optional callback for status transitions

    Returns:
        Absolute path to the server script

    Raises:
        VersionQueryError: Version query failed and there is no local copy
        InstallError: Install failed and there is no local copy
        InstalledPathMissingError: Install succeeded but the script is absent
    """
    server_path = get_server_script_path(workspace)

    if state.confirmed_present and server_path.is_file():
        logger.debug(f"{server_id} already confirmed this session: {server_path}")
        return server_path

    try:
        _provision(server_id, workspace, server_path, source, report_status)
    except LaravelLspError:
        _report(report_status, server_id, InstallationStatus.FAILED)
        raise

    state.confirmed_present = True
    return server_path


def _provision(
    server_id: str,
    workspace: Workspace,
    server_path: Path,
    source: PackageSource,
    report_status: Optional[StatusReporter],
) -> None:
    root = workspace.root_path()

    _report(report_status, server_id, InstallationStatus.CHECKING_FOR_UPDATE)
    try:
        latest = source.latest_version(PACKAGE_NAME)
    except VersionQueryError as e:
        if not server_path.is_file():
            raise
        logger.warning(f"{e}. Using existing {server_path}")
        return

    if server_path.is_file() and versions_match(
        source.installed_version(PACKAGE_NAME, root), latest
    ):
        logger.debug(f"{PACKAGE_NAME} {latest} is up to date")
        return

    _report(report_status, server_id, InstallationStatus.DOWNLOADING)
    try:
        source.install(PACKAGE_NAME, latest, root)
    except InstallError as e:
        if not server_path.is_file():
            raise
        logger.warning(f"{e}. Falling back to existing {server_path}")
        return

    if not server_path.is_file():
        raise InstalledPathMissingError(PACKAGE_NAME, SERVER_SCRIPT_PATH)
