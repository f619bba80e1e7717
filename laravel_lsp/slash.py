"""
Slash commands for the Laravel extension.

Registered commands:
- laravel_view: Find a Blade view
- laravel_route: Find a route definition
- laravel_artisan: Run artisan helpers

None of them is implemented yet. Running one raises
SubCommandNotImplementedError, completing one returns no suggestions,
and unknown names raise UnsupportedSubCommandError.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Tuple

from laravel_lsp.errors import SubCommandNotImplementedError, UnsupportedSubCommandError
from laravel_lsp.types import SlashCommandArgumentCompletion, SlashCommandOutput
from laravel_lsp.workspace import Workspace

logger = logging.getLogger(__name__)

RunHandler = Callable[[List[str], Optional[Workspace]], SlashCommandOutput]
CompleteHandler = Callable[[List[str]], List[SlashCommandArgumentCompletion]]


def find_view(args: List[str], workspace: Optional[Workspace]) -> SlashCommandOutput:
    raise SubCommandNotImplementedError("laravel_view", "View search is not implemented yet")


def find_route(args: List[str], workspace: Optional[Workspace]) -> SlashCommandOutput:
    raise SubCommandNotImplementedError("laravel_route", "Route search is not implemented yet")


def run_artisan(args: List[str], workspace: Optional[Workspace]) -> SlashCommandOutput:
    raise SubCommandNotImplementedError(
        "laravel_artisan", "Artisan helpers are not implemented yet"
    )


def complete_views(args: List[str]) -> List[SlashCommandArgumentCompletion]:
    return []


def complete_routes(args: List[str]) -> List[SlashCommandArgumentCompletion]:
    return []


def complete_artisan(args: List[str]) -> List[SlashCommandArgumentCompletion]:
    return []


_HANDLERS: Dict[str, Tuple[RunHandler, CompleteHandler]] = {
    "laravel_view": (find_view, complete_views),
    "laravel_route": (find_route, complete_routes),
    "laravel_artisan": (run_artisan, complete_artisan),
}

SLASH_COMMANDS = tuple(_HANDLERS)


def _lookup(name: str) -> Tuple[RunHandler, CompleteHandler]:
    handlers = _HANDLERS.get(name)
    if handlers is None:
        raise UnsupportedSubCommandError(name)
    return handlers


def run(
    name: str,
    args: List[str],
    workspace: Optional[Workspace] = None,
) -> SlashCommandOutput:
    """
    Run a slash command.

    Raises:
        UnsupportedSubCommandError: Unknown command name
        SubCommandNotImplementedError: Known command without an implementation
    """
    run_handler, _ = _lookup(name)
    logger.debug(f"Running slash command {name} with args {args}")
    return run_handler(list(args), workspace)


def complete(name: str, args: List[str]) -> List[SlashCommandArgumentCompletion]:
    """
    Complete arguments for a slash command.

    Raises:
        UnsupportedSubCommandError: Unknown command name
    """
    _, complete_handler = _lookup(name)
    return complete_handler(list(args))
