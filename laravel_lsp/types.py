"""
Type definitions for laravel-lsp.

Defines enums and dataclasses used across the package for:
- Language server resolution and launch descriptors
- Installation status reporting
- Slash command results
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List


# =============================================================================
# Error Kinds
# =============================================================================


class ErrorKind(str, Enum):
    """
    Closed set of failure causes.

    Every LaravelLspError carries exactly one of these so callers can
    match on the cause instead of parsing messages.
    """
    UNKNOWN_SERVER_IDENTITY = "unknown_server_identity"
    NOT_FOUND = "not_found"
    VERSION_QUERY_FAILED = "version_query_failed"
    INSTALL_FAILED = "install_failed"
    INSTALLED_PATH_MISSING = "installed_path_missing"
    SELF_LOCATION_UNAVAILABLE = "self_location_unavailable"
    UNSUPPORTED_SUB_COMMAND = "unsupported_sub_command"
    SUB_COMMAND_NOT_IMPLEMENTED = "sub_command_not_implemented"
    CONFIG_INVALID = "config_invalid"


# =============================================================================
# Provisioning Types
# =============================================================================


class InstallationStatus(str, Enum):
    """
    Installation status transitions reported to the host.

    - CHECKING_FOR_UPDATE: Querying the registry for the latest version
    - DOWNLOADING: Installing the latest version into the workspace
    - FAILED: Provisioning ended in a terminal error
    """
    CHECKING_FOR_UPDATE = "checking_for_update"
    DOWNLOADING = "downloading"
    FAILED = "failed"


@dataclass
class ProvisionState:
    """
    Per-extension-instance provisioning state.

    confirmed_present is set once a resolution succeeded end to end
    (found, or freshly installed and verified). It lives as long as the
    extension instance and is never persisted.
    """
    confirmed_present: bool = False


@dataclass(frozen=True)
class LocatedServer:
    """
    A usable language server found on disk.

    Attributes:
        path: Absolute path to the executable or script
        direct: True if the path runs as the server with --stdio,
            False if it has to be run through the bridge script
    """
    path: Path
    direct: bool


@dataclass
class LaunchDescriptor:
    """
    How the host should spawn the language server.

    An empty env means the process inherits the host environment.
    """
    command: str
    args: List[str] = field(default_factory=list)
    env: Dict[str, str] = field(default_factory=dict)

    @property
    def argv(self) -> List[str]:
        """Full argument vector, executable first."""
        return [self.command, *self.args]


# =============================================================================
# Slash Command Types
# =============================================================================


@dataclass
class SlashCommandOutputSection:
    """A labelled byte range of a slash command's output text."""
    start: int
    end: int
    label: str


@dataclass
class SlashCommandOutput:
    """Result of running a slash command."""
    text: str
    sections: List[SlashCommandOutputSection] = field(default_factory=list)


@dataclass
class SlashCommandArgumentCompletion:
    """
    A single argument completion offered for a slash command.

    Attributes:
        label: Text shown in the completion menu
        new_text: Text inserted when the completion is accepted
        run_command: Run the command right after accepting
    """
    label: str
    new_text: str
    run_command: bool = False
