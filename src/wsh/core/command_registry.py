# src/wsh/core/command_registry.py
import logging
from typing import Callable, Dict

from wsh.core.discovery import discover_handlers

logger = logging.getLogger(__name__)

# The central registry of built-in commands, populated dynamically.
CommandRegistry: Dict[str, Callable[..., int]] = {}


def register_command(name: str, handler: Callable[..., int]) -> None:
    """Adds a command and its handler function to the registry."""
    CommandRegistry[name] = handler
    logger.debug("Registered command '%s'", name)


def register_all_commands() -> None:
    """Discovers all built-in handlers and registers them."""
    logger.debug("Discovering all command handlers...")

    for name, handler in discover_handlers().items():
        if name not in CommandRegistry:
            register_command(name, handler)

    logger.debug("Successfully registered %d handlers.", len(CommandRegistry))
