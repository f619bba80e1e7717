"""
Configuration for laravel-lsp.

Values come from keyword arguments or, through ExtensionConfig.from_env(),
from environment variables:

    LARAVEL_LSP_AUTO_INSTALL      Install/update intelephense automatically (default: true)
    LARAVEL_LSP_NODE_PATH         Node binary used to run the bridge script
    LARAVEL_LSP_EXTENSION_DIR     Extension install dir (default: derived from the executable)
    LARAVEL_LSP_NPM_REGISTRY      npm registry URL (falls back to NPM_CONFIG_REGISTRY)
    LARAVEL_LSP_REQUEST_TIMEOUT   Registry request timeout in seconds (default: 30)
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from laravel_lsp._core.version import DEFAULT_NPM_REGISTRY
from laravel_lsp.errors import ConfigError

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")


def _parse_bool(name: str, value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in _TRUE_VALUES:
        return True
    if lowered in _FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")


def _parse_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ConfigError(f"{name} must be a number, got {value!r}") from None


@dataclass
class ExtensionConfig:
    """
    Configuration for the Laravel extension.

    Attributes:
        auto_install: Install and update intelephense in the workspace when
            it is not on PATH. When False, only existing copies are used.
        node_path: Node binary used to run the bridge script
            (default: looked up on PATH)
        extension_dir: Directory holding the bridge script
            (default: directory of the running executable)
        registry_url: npm registry base URL
        request_timeout: Timeout in seconds for registry requests
    """
    auto_install: bool = True
    node_path: Optional[str] = None
    extension_dir: Optional[str] = None
    registry_url: str = DEFAULT_NPM_REGISTRY
    request_timeout: float = 30.0

    def __post_init__(self) -> None:
        """Validate configuration on creation."""
        self.validate()

    def validate(self) -> None:
        """Validate configuration values."""
        if self.request_timeout <= 0:
            raise ConfigError(
                f"request_timeout must be positive, got {self.request_timeout}"
            )

        if not self.registry_url.startswith(("http://", "https://")):
            raise ConfigError(
                f"registry_url must be an http(s) URL, got {self.registry_url!r}"
            )

        self.registry_url = self.registry_url.rstrip("/")

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ExtensionConfig":
        """
        Build configuration from environment variables.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ConfigError: If a variable holds an invalid value
        """
        env = os.environ if environ is None else environ
        kwargs = {}

        auto_install = env.get("LARAVEL_LSP_AUTO_INSTALL")
        if auto_install:
            kwargs["auto_install"] = _parse_bool("LARAVEL_LSP_AUTO_INSTALL", auto_install)

        node_path = env.get("LARAVEL_LSP_NODE_PATH")
        if node_path:
            kwargs["node_path"] = node_path

        extension_dir = env.get("LARAVEL_LSP_EXTENSION_DIR")
        if extension_dir:
            kwargs["extension_dir"] = extension_dir

        registry_url = env.get("LARAVEL_LSP_NPM_REGISTRY") or env.get("NPM_CONFIG_REGISTRY")
        if registry_url:
            kwargs["registry_url"] = registry_url

        timeout = env.get("LARAVEL_LSP_REQUEST_TIMEOUT")
        if timeout:
            kwargs["request_timeout"] = _parse_float("LARAVEL_LSP_REQUEST_TIMEOUT", timeout)

        config = cls(**kwargs)
        logger.debug(f"Loaded extension config from environment: {config}")
        return config
