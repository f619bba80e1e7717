"""Tests for laravel_lsp.slash module."""

import pytest

from laravel_lsp import slash
from laravel_lsp.errors import SubCommandNotImplementedError, UnsupportedSubCommandError
from laravel_lsp.types import ErrorKind


class TestRun:
    """Tests for slash.run."""

    def test_unknown_command(self):
        """Unknown names fail with the offending name."""
        with pytest.raises(UnsupportedSubCommandError) as exc_info:
            slash.run("laravel_unknown", [])

        assert exc_info.value.command == "laravel_unknown"
        assert exc_info.value.kind == ErrorKind.UNSUPPORTED_SUB_COMMAND
        assert str(exc_info.value) == "Unsupported slash command: laravel_unknown"

    @pytest.mark.parametrize(
        "name, message",
        [
            ("laravel_view", "View search is not implemented yet"),
            ("laravel_route", "Route search is not implemented yet"),
            ("laravel_artisan", "Artisan helpers are not implemented yet"),
        ],
    )
    def test_stubbed_commands(self, name, message, workspace):
        """Recognized commands report that they are not implemented."""
        with pytest.raises(SubCommandNotImplementedError) as exc_info:
            slash.run(name, ["welcome"], workspace)

        assert exc_info.value.command == name
        assert exc_info.value.kind == ErrorKind.SUB_COMMAND_NOT_IMPLEMENTED
        assert str(exc_info.value) == message


class TestComplete:
    """Tests for slash.complete."""

    @pytest.mark.parametrize("name", slash.SLASH_COMMANDS)
    def test_stubbed_commands_return_empty(self, name):
        assert slash.complete(name, ["wel"]) == []

    def test_unknown_command(self):
        with pytest.raises(UnsupportedSubCommandError) as exc_info:
            slash.complete("laravel_unknown", [])

        assert exc_info.value.command == "laravel_unknown"


class TestRegistry:
    """Tests for the registered command names."""

    def test_registered_names(self):
        assert set(slash.SLASH_COMMANDS) == {"laravel_view", "laravel_route", "laravel_artisan"}
