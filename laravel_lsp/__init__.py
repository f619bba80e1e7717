"""
laravel-lsp: Laravel editor extension core.

Resolves, provisions and describes how to launch the intelephense PHP
language server for a project workspace, and dispatches the extension's
slash commands.

This package provides:
- LaravelExtension: entry points for the editor host
- Launch descriptors (direct or bridged through the extension's proxy script)
- Once-per-session update checks with fallback to an existing local copy
- Typed errors carrying an ErrorKind

Installation:
    pip install laravel-lsp

Quickstart:
    from laravel_lsp import LaravelExtension, LocalWorkspace

    extension = LaravelExtension()
    command = extension.language_server_command(
        "intelephense",
        LocalWorkspace("/path/to/laravel-app"),
    )
    print(command.argv)
"""

from laravel_lsp.types import (
    ErrorKind,
    InstallationStatus,
    LaunchDescriptor,
    LocatedServer,
    ProvisionState,
    SlashCommandArgumentCompletion,
    SlashCommandOutput,
    SlashCommandOutputSection,
)
from laravel_lsp.errors import (
    LaravelLspError,
    UnknownServerIdentityError,
    ServerNotFoundError,
    VersionQueryError,
    InstallError,
    InstalledPathMissingError,
    SelfLocationError,
    UnsupportedSubCommandError,
    SubCommandNotImplementedError,
    ConfigError,
)
from laravel_lsp.config import ExtensionConfig
from laravel_lsp.workspace import Workspace, LocalWorkspace
from laravel_lsp.extension import LaravelExtension
from laravel_lsp._core.version import (
    EXTENSION_VERSION,
    SERVER_ID,
)

__version__ = EXTENSION_VERSION

__all__ = [
    # Version
    "__version__",
    "EXTENSION_VERSION",
    "SERVER_ID",
    # Types
    "ErrorKind",
    "InstallationStatus",
    "LaunchDescriptor",
    "LocatedServer",
    "ProvisionState",
    "SlashCommandArgumentCompletion",
    "SlashCommandOutput",
    "SlashCommandOutputSection",
    # Errors
    "LaravelLspError",
    "UnknownServerIdentityError",
    "ServerNotFoundError",
    "VersionQueryError",
    "InstallError",
    "InstalledPathMissingError",
    "SelfLocationError",
    "UnsupportedSubCommandError",
    "SubCommandNotImplementedError",
    "ConfigError",
    # Configuration
    "ExtensionConfig",
    # Workspace
    "Workspace",
    "LocalWorkspace",
    # Extension
    "LaravelExtension",
]
