# src/wsh/core/handlers/ls_handler.py
import logging
import os
from typing import List

from wsh.core.context.shell_context import ShellContext
from wsh.core.exceptions import ShellError
from wsh.core.launcher import ProcessLauncher
from wsh.core.managers.config_manager import config_manager
from wsh.core.utils.diagnostics import report_error

logger = logging.getLogger(__name__)

DEFAULT_LS_COMMAND = ["/bin/ls", "-1", "--color=never"]
DEFAULT_LS_ENV = {"LANG": "C"}


def handle_ls(_args: List[str], _ctx: ShellContext) -> int:
    """
    Lists the current directory, one entry per line and without colors.
    Any arguments are accepted and ignored.
    """
    command = list(config_manager.get_nested("ls.command", DEFAULT_LS_COMMAND))
    env = dict(os.environ)
    env.update(config_manager.get_nested("ls.env", DEFAULT_LS_ENV))

    argv = [os.path.basename(command[0])] + command[1:]
    try:
        status = ProcessLauncher().spawn(argv, command[0], env=env)
    except ShellError as e:
        report_error(str(e))
        return 1

    logger.debug("ls finished with status %d", status)
    return 0
