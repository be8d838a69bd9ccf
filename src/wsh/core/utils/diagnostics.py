# src/wsh/core/utils/diagnostics.py
import logging
import os
import sys
from typing import Optional

logger = logging.getLogger(__name__)

PREFIX = "wsh"


def report_error(message: str, fd: Optional[int] = None) -> None:
    """
    Prints a 'wsh: <message>' diagnostic to stderr, or writes it to an
    already opened descriptor when stderr of the failing command was redirected.
    """
    text = f"{PREFIX}: {message}"
    if fd is None:
        print(text, file=sys.stderr)
        return
    try:
        os.write(fd, (text + "\n").encode())
    except OSError as e:
        logger.warning("Could not write diagnostic to fd %d: %s", fd, e)
