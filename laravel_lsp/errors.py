"""
Exception types for laravel-lsp.

Provides typed exceptions for:
- Language server resolution errors
- Provisioning (version query, install, integrity) errors
- Self-location errors
- Slash command errors

Every exception carries an ErrorKind so callers can match on the cause,
and a human-readable detail that is also the exception message.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union

from laravel_lsp.types import ErrorKind


class LaravelLspError(Exception):
    """
    Base exception for all laravel-lsp errors.

    Example:
        try:
            command = extension.language_server_command("intelephense", workspace)
        except LaravelLspError as e:
            if e.kind == ErrorKind.NOT_FOUND:
                show_install_hint(e.detail)
    """

    kind: ErrorKind

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(kind={self.kind!r}, detail={self.detail!r})"


# =============================================================================
# Resolution Errors
# =============================================================================


class UnknownServerIdentityError(LaravelLspError):
    """Raised when a language server id other than the supported one is requested."""

    kind = ErrorKind.UNKNOWN_SERVER_IDENTITY

    def __init__(self, server_id: str):
        self.server_id = server_id
        super().__init__(f"unknown language server: {server_id}")


class ServerNotFoundError(LaravelLspError):
    """
    Raised when no usable server (or runtime to run it) exists and
    provisioning was not attempted.
    """

    kind = ErrorKind.NOT_FOUND


class SelfLocationError(LaravelLspError):
    """
    Raised when the extension's own installation directory cannot be
    determined. Fatal for the call: the bridge script path cannot be built.
    """

    kind = ErrorKind.SELF_LOCATION_UNAVAILABLE

    def __init__(self, detail: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(detail)


# =============================================================================
# Provisioning Errors
# =============================================================================


class VersionQueryError(LaravelLspError):
    """Raised when the latest package version cannot be fetched from the registry."""

    kind = ErrorKind.VERSION_QUERY_FAILED

    def __init__(
        self,
        package: str,
        detail: str,
        cause: Optional[BaseException] = None,
    ):
        self.package = package
        self.cause = cause
        super().__init__(f"failed to fetch latest version of '{package}': {detail}")


class InstallError(LaravelLspError):
    """
    Raised when installing a package fails.

    The underlying error (subprocess failure, missing npm, ...) is kept
    in ``cause``.
    """

    kind = ErrorKind.INSTALL_FAILED

    def __init__(
        self,
        package: str,
        version: str,
        detail: str,
        cause: Optional[BaseException] = None,
    ):
        self.package = package
        self.version = version
        self.cause = cause
        super().__init__(f"failed to install '{package}@{version}': {detail}")


class InstalledPathMissingError(LaravelLspError):
    """
    Raised when installation reported success but the expected server
    script is absent. Never retried automatically.
    """

    kind = ErrorKind.INSTALLED_PATH_MISSING

    def __init__(self, package: str, path: Union[str, Path]):
        self.package = package
        self.path = str(path)
        super().__init__(
            f"installed package '{package}' did not contain expected path '{self.path}'"
        )


# =============================================================================
# Slash Command Errors
# =============================================================================


class UnsupportedSubCommandError(LaravelLspError):
    """Raised when a slash command name is not one the extension registers."""

    kind = ErrorKind.UNSUPPORTED_SUB_COMMAND

    def __init__(self, command: str):
        self.command = command
        super().__init__(f"Unsupported slash command: {command}")


class SubCommandNotImplementedError(LaravelLspError):
    """
    Raised when a recognized slash command has no implementation yet.

    Lets callers tell "valid command, feature pending" apart from
    "invalid command".
    """

    kind = ErrorKind.SUB_COMMAND_NOT_IMPLEMENTED

    def __init__(self, command: str, detail: str):
        self.command = command
        super().__init__(detail)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(LaravelLspError):
    """
    Raised when extension configuration is invalid.

    This includes:
    - Non-positive timeouts
    - Registry URLs that are not http(s)
    - Unparseable boolean or numeric environment values
    """

    kind = ErrorKind.CONFIG_INVALID
