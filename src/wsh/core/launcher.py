# src/wsh/core/launcher.py
from __future__ import annotations

import logging
import os
import subprocess
from contextlib import ExitStack
from typing import Dict, List, Optional

from wsh.core.exceptions import (
    CommandNotFoundError,
    ProcessSpawnError,
    RedirectionError,
    ShellError,
)
from wsh.core.redirection import parse_redirection
from wsh.core.utils.diagnostics import report_error
from wsh.model import RedirectionIntent

logger = logging.getLogger(__name__)

OUTPUT_FILE_MODE = 0o644

StreamTarget = Optional[int]


def _reason(error: Exception) -> str:
    """OSError carries strerror; ValueError (e.g. an embedded NUL byte) only a message."""
    return getattr(error, "strerror", None) or str(error)


class ProcessLauncher:
    """
    Runs one external command synchronously.

    Redirection targets are opened for the child only and handed over through
    subprocess.Popen, so the shell's own stdin/stdout/stderr are never rebound.
    Every descriptor opened here is closed again on every exit path.
    """

    def __init__(self, null_device: str = os.devnull) -> None:
        self._null_device = null_device

    def resolve_executable(self, name: str) -> str:
        """
        Returns the path to run for a command name. Names containing '/' are
        used as given; other names are searched for in the directories of PATH.
        """
        if "/" in name:
            return name

        path_env = os.environ.get("PATH")
        if path_env is None:
            raise ShellError("PATH not set", command=name)

        for directory in path_env.split(":"):
            candidate = f"{directory}/{name}"
            if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
                logger.debug("Resolved '%s' to '%s'", name, candidate)
                return candidate
        raise CommandNotFoundError(name)

    def open_streams(self, intent: RedirectionIntent, stack: ExitStack) -> Dict[str, StreamTarget]:
        """
        Opens the redirection targets described by the intent. Each descriptor
        is registered on the given ExitStack so it is closed when the stack
        unwinds, including on a failure halfway through.
        """
        streams: Dict[str, StreamTarget] = {"stdin": None, "stdout": None, "stderr": None}

        if intent.input_path is not None:
            try:
                fd = os.open(intent.input_path, os.O_RDONLY)
            except (OSError, ValueError) as e:
                raise RedirectionError(f"input redirection failed: {_reason(e)}") from e
            stack.callback(os.close, fd)
            streams["stdin"] = fd

        if intent.output_path is not None:
            flags = os.O_WRONLY | os.O_CREAT
            flags |= os.O_APPEND if intent.append else os.O_TRUNC
            try:
                fd = os.open(intent.output_path, flags, OUTPUT_FILE_MODE)
            except (OSError, ValueError) as e:
                raise RedirectionError(f"output redirection failed: {_reason(e)}") from e
            stack.callback(os.close, fd)
            streams["stdout"] = fd

        if intent.redirect_stderr:
            if intent.output_path is not None:
                streams["stderr"] = subprocess.STDOUT
            else:
                try:
                    fd = os.open(self._null_device, os.O_WRONLY)
                except OSError as e:
                    raise RedirectionError(f"opening {self._null_device} failed: {e.strerror}") from e
                stack.callback(os.close, fd)
                streams["stderr"] = fd

        return streams

    def spawn(
        self,
        argv: List[str],
        executable: str,
        stdin: StreamTarget = None,
        stdout: StreamTarget = None,
        stderr: StreamTarget = None,
        env: Optional[Dict[str, str]] = None,
    ) -> int:
        """Starts the child and blocks until it has exited or was killed by a signal."""
        try:
            proc = subprocess.Popen(
                argv,
                executable=executable,
                stdin=stdin,
                stdout=stdout,
                stderr=stderr,
                env=env,
            )
        except (OSError, ValueError) as e:
            raise ProcessSpawnError(_reason(e), command=argv[0]) from e

        returncode = proc.wait()
        if returncode < 0:
            logger.info("Process %d (%s) terminated by signal %d", proc.pid, argv[0], -returncode)
        else:
            logger.info("Process %d (%s) exited with status %d", proc.pid, argv[0], returncode)
        return returncode

    def launch(self, args: List[str]) -> int:
        """
        Executes an external command with its redirections applied.

        Args:
            args (List[str]): The substituted argument vector. Redirection
                clauses are stripped from it before the program sees it.

        Returns:
            int: The child's exit status, or 1 if no child could be started.
        """
        argv = list(args)
        intent = parse_redirection(argv)
        if not argv:
            logger.debug("Nothing left to run after removing redirections.")
            return 0

        with ExitStack() as stack:
            try:
                streams = self.open_streams(intent, stack)
            except RedirectionError as e:
                report_error(str(e))
                return 1

            # Diagnostics follow stderr wherever the redirection sent it
            err_target = streams["stderr"]
            if err_target == subprocess.STDOUT:
                err_fd: Optional[int] = streams["stdout"]  # type: ignore[assignment]
            elif isinstance(err_target, int):
                err_fd = err_target
            else:
                err_fd = None

            try:
                executable = self.resolve_executable(argv[0])
                return self.spawn(argv, executable, **streams)
            except ShellError as e:
                logger.debug("Launch of '%s' failed: %s", argv[0], e)
                report_error(str(e), err_fd)
                return 1
