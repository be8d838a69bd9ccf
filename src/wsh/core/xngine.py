from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional

from wsh.core.context.shell_context import ShellContext
from wsh.core.launcher import ProcessLauncher
from wsh.core.parser import parse_command_line, parse_positive_int, split_line

# Returned by the 'exit' built-in; the driver stops reading lines on it.
EXIT_SIGNAL = 130


class ExecuteEngine:
    """
    Core engine responsible for command execution: built-in dispatch, history
    recording and replay, and handing external commands to the launcher.
    """

    def __init__(
            self,
            *,
            command_registry: Dict[str, Callable[..., int]],
            launcher: Optional[ProcessLauncher] = None,
            parse_fn: Callable[..., List[str]] = parse_command_line,
            logger: Optional[logging.Logger] = None,
    ) -> None:
        self._commands = command_registry
        self._launcher = launcher or ProcessLauncher()
        self._parse = parse_fn
        self._log = logger or logging.getLogger(__name__)

    def execute_line(self, line: str, ctx: ShellContext) -> int:
        """Tokenizes, substitutes and executes one raw command line."""
        raw_args = split_line(line)
        args = self._parse(line, ctx.variables)
        return self.execute(args, ctx, raw_args=raw_args)

    def execute(
            self,
            args: List[str],
            ctx: ShellContext,
            raw_args: Optional[List[str]] = None,
    ) -> int:
        """
        Executes one parsed command.

        Args:
            args: The substituted argument vector.
            ctx: The shell context holding variables and history.
            raw_args: The tokens before substitution; used for the history
                entry. Defaults to args.

        Returns:
            int: The handler status for built-ins (EXIT_SIGNAL stops the
            shell), 0 for external commands and empty input.
        """
        if not args:
            return 0

        name = args[0]

        # --- History replay: 'history N' ---
        if name == "history" and len(args) > 1:
            number = parse_positive_int(args[1])
            if number is not None:
                return self.replay_history(number, ctx)

        # --- Built-in dispatch ---
        handler = self._commands.get(name)
        if handler is not None:
            self._log.debug("Dispatching built-in '%s' with %d argument(s)", name, len(args) - 1)
            return self._call_handler(handler, args[1:], ctx)

        # --- External command ---
        ctx.history.add(" ".join(raw_args if raw_args is not None else args))
        status = self._launcher.launch(args)
        ctx.last_status = status
        self._log.debug("External command '%s' finished with status %d", name, status)
        return 0

    def replay_history(self, number: int, ctx: ShellContext) -> int:
        """
        Re-executes the history entry with the given 1-based number (1 is the
        most recent). An out-of-range number does nothing.
        """
        entry = ctx.history.get(number)
        if entry is None:
            self._log.debug("History entry %d does not exist (count=%d)", number, ctx.history.count)
            return 0

        # Work on a copy so nothing downstream can touch the stored entry
        command = str(entry)
        self._log.debug("Replaying history entry %d: '%s'", number, command)
        return self.execute_line(command, ctx)

    def _call_handler(self, handler: Callable[..., int], args: List[str], ctx: ShellContext) -> int:
        return int(handler(args, ctx))
