from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Iterable, List, Optional, TextIO

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import Completer
from prompt_toolkit.document import Document
from prompt_toolkit.history import InMemoryHistory

from wsh.core.command_registry import CommandRegistry, register_all_commands
from wsh.core.context.shell_context import ShellContext
from wsh.core.core import EXIT_SIGNAL, execute_line
from wsh.core.managers.completion_manager import CompletionManager
from wsh.core.managers.config_manager import config_manager
from wsh.core.utils.configure_logging import configure_logger
from wsh.core.utils.diagnostics import report_error

logger = logging.getLogger(__name__)

DEFAULT_PROMPT = "wsh> "
DEFAULT_PATH = "/bin"


class PromptToolkitCompleter(Completer):
    """
    A wrapper that uses the CompletionManager to generate suggestions
    in a way that prompt_toolkit expects.
    """

    def __init__(self, manager: CompletionManager):
        self.manager = manager

    def get_completions(self, document: Document, complete_event):
        yield from self.manager.generate_completions(document)


def filter_line(line: str) -> Optional[str]:
    """
    Returns the stripped line, or None for blank lines and comments
    (first non-blank character is '#').
    """
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    return stripped


def _tolerate_undecodable_bytes(stream: TextIO) -> None:
    """Lets bytes that are not valid UTF-8 pass through as surrogates instead of raising."""
    if hasattr(stream, "reconfigure"):
        stream.reconfigure(errors="surrogateescape")


def initialize_shell() -> None:
    """Configures logging, forces PATH and registers the built-in commands."""
    configure_logger(
        config_manager.get_nested("debug.level", "WARNING"),
        config_manager.get_nested("debug.modules", {}),
    )
    os.environ["PATH"] = config_manager.get_nested("shell.default_path", DEFAULT_PATH)
    register_all_commands()
    logger.debug("Shell initialized; PATH=%s", os.environ["PATH"])


def run_lines(lines: Iterable[str], ctx: ShellContext) -> int:
    """
    Executes lines one by one until the input ends or 'exit' is run.
    Returns EXIT_SIGNAL when stopped by 'exit', 0 otherwise.
    """
    for line in lines:
        command = filter_line(line)
        if command is None:
            continue
        if execute_line(command, ctx) == EXIT_SIGNAL:
            return EXIT_SIGNAL
    return 0


def _prompted_lines(stream: TextIO, prompt: str) -> Iterable[str]:
    """Reads lines from a non-terminal stream, writing the prompt before each one."""
    while True:
        sys.stdout.write(prompt)
        sys.stdout.flush()
        line = stream.readline()
        if not line:
            return
        yield line


def _session_lines(ctx: ShellContext, prompt: str) -> Iterable[str]:
    """Reads lines from an interactive prompt_toolkit session until EOF."""
    completer = PromptToolkitCompleter(CompletionManager(ctx, CommandRegistry.keys()))
    session = PromptSession(history=InMemoryHistory(), completer=completer)
    while True:
        try:
            yield session.prompt(prompt)
        except KeyboardInterrupt:
            continue
        except EOFError:
            return


def start_shell(script: Optional[str] = None) -> int:
    """Runs the shell on a script file or on stdin. Returns the process exit code."""
    initialize_shell()
    ctx = ShellContext()
    prompt = config_manager.get_nested("shell.prompt", DEFAULT_PROMPT)
    _tolerate_undecodable_bytes(sys.stdout)

    try:
        if script is not None:
            try:
                stream = open(script, "r", encoding="utf-8", errors="surrogateescape")
            except OSError as e:
                report_error(e.strerror or str(e))
                return 1
            with stream:
                logger.info("Running batch script %s", script)
                run_lines(stream, ctx)
        elif sys.stdin.isatty():
            run_lines(_session_lines(ctx, prompt), ctx)
        else:
            _tolerate_undecodable_bytes(sys.stdin)
            run_lines(_prompted_lines(sys.stdin, prompt), ctx)
    except MemoryError:
        logger.critical("Out of memory; terminating.", exc_info=True)
        return 1
    finally:
        ctx.close()
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="wsh", description="A small line-oriented shell.")
    parser.add_argument("script", nargs="?", default=None, help="Batch file to run instead of reading stdin.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Entrypoint for running the shell from the command line."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) > 1:
        report_error("too many arguments")
        return 1
    parsed = build_arg_parser().parse_args(args)
    return start_shell(parsed.script)


if __name__ == "__main__":
    sys.exit(main())
