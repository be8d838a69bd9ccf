# src/wsh/core/core.py
from __future__ import annotations

import logging

from wsh.core.command_registry import CommandRegistry
from wsh.core.launcher import ProcessLauncher
from wsh.core.parser import parse_command_line
from wsh.core.xngine import EXIT_SIGNAL, ExecuteEngine

logger = logging.getLogger(__name__)

# Registration of the built-in handlers is done by app.py (register_all_commands),
# since the handler modules themselves import this module.

XNGINE = ExecuteEngine(
    command_registry=CommandRegistry,
    launcher=ProcessLauncher(),
    parse_fn=parse_command_line,
    logger=logger,
)

# Export core functionality for use by the main application layer.
execute_line = XNGINE.execute_line

__all__ = ["EXIT_SIGNAL", "XNGINE", "execute_line"]
