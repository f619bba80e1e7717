"""
Laravel extension entry points.

The host calls into LaravelExtension for two things:
- A launch command for a language server in a workspace
- Running or completing a slash command

Usage:
    from laravel_lsp import LaravelExtension, LocalWorkspace

    extension = LaravelExtension()
    command = extension.language_server_command(
        "intelephense", LocalWorkspace("/path/to/project")
    )
    subprocess.Popen(command.argv, ...)
"""

from __future__ import annotations

import logging
from typing import List, Optional

from laravel_lsp import slash
from laravel_lsp._core.launcher import build_command, get_extension_dir
from laravel_lsp._core.locator import locate
from laravel_lsp._core.npm import NpmPackageSource, find_node_binary
from laravel_lsp._core.provisioner import PackageSource, StatusReporter, ensure_installed
from laravel_lsp._core.version import SERVER_ID
from laravel_lsp.config import ExtensionConfig
from laravel_lsp.errors import ServerNotFoundError, UnknownServerIdentityError
from laravel_lsp.types import (
    LaunchDescriptor,
    LocatedServer,
    ProvisionState,
    SlashCommandArgumentCompletion,
    SlashCommandOutput,
)
from laravel_lsp.workspace import Workspace

logger = logging.getLogger(__name__)


class LaravelExtension:
    """
    One running instance of the Laravel extension.

    Each instance owns its own ProvisionState: the registry is checked at
    most once per instance, after which the local copy is trusted until the
    extension restarts.

    Attributes:
        config: Extension configuration
        state: Session provisioning state
    """

    def __init__(
        self,
        config: Optional[ExtensionConfig] = None,
        source: Optional[PackageSource] = None,
        report_status: Optional[StatusReporter] = None,
    ) -> None:
        self.config = config or ExtensionConfig.from_env()
        self.source = source or NpmPackageSource(
            registry_url=self.config.registry_url,
            request_timeout=self.config.request_timeout,
        )
        self.report_status = report_status
        self.state = ProvisionState()

    def language_server_command(
        self,
        server_id: str,
        workspace: Workspace,
    ) -> LaunchDescriptor:
        """
        Build the command that starts a language server for a workspace.

        Args:
            server_id: Language server id; only "intelephense" is supported
            workspace: Project workspace

        Returns:
            LaunchDescriptor for the host to spawn

        Raises:
            UnknownServerIdentityError: Unsupported server id
            ServerNotFoundError: No server (or node) found and auto-install is off
            VersionQueryError, InstallError, InstalledPathMissingError: Provisioning failed
            SelfLocationError: The bridge script location cannot be computed
        """
        if server_id != SERVER_ID:
            raise UnknownServerIdentityError(server_id)

        located = locate(server_id, workspace, search_local=not self.config.auto_install)

        if located is None:
            if not self.config.auto_install:
                raise ServerNotFoundError(
                    f"{server_id} not found. Please install it via npm: "
                    f"npm install -g {server_id}"
                )
            script = ensure_installed(
                server_id,
                workspace,
                self.state,
                self.source,
                self.report_status,
            )
            located = LocatedServer(path=script, direct=False)

        if located.direct:
            logger.info(f"Launching {server_id} directly from {located.path}")
            return build_command(located)

        extension_dir = get_extension_dir(self.config.extension_dir)
        node_path = find_node_binary(workspace, self.config.node_path)
        logger.info(f"Launching {server_id} from {located.path} through the bridge")
        return build_command(located, node_path=node_path, extension_dir=extension_dir)

    def run_slash_command(
        self,
        name: str,
        args: List[str],
        workspace: Optional[Workspace] = None,
    ) -> SlashCommandOutput:
        """Run a slash command. See laravel_lsp.slash.run."""
        return slash.run(name, args, workspace)

    def complete_slash_command_argument(
        self,
        name: str,
        args: List[str],
    ) -> List[SlashCommandArgumentCompletion]:
        """Complete slash command arguments. See laravel_lsp.slash.complete."""
        return slash.complete(name, args)
