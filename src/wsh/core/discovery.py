# src/wsh/core/discovery.py
import importlib.util
import logging
from typing import Any, Dict

from wsh.core.utils.path_utils import PathUtils

logger = logging.getLogger(__name__)

HANDLER_PREFIX = "handle_"


def discover_handlers() -> Dict[str, Any]:
    """
    Scans the handlers directory, loads every '*_handler.py' module and returns
    a map of command names to their handler function. A function named
    'handle_<name>' registers the built-in '<name>'.
    """
    discovered_handlers: Dict[str, Any] = {}
    handlers_dir = PathUtils.get_handlers_dir()
    base_module_path = "wsh.core.handlers"

    logger.debug("Scanning for handlers in: '%s'", handlers_dir)
    if not handlers_dir.is_dir():
        logger.warning("Handlers directory not found, skipping: %s", handlers_dir)
        return discovered_handlers

    for file_path in sorted(handlers_dir.glob("*_handler.py")):
        module_name = f"{base_module_path}.{file_path.stem}"
        try:
            spec = importlib.util.spec_from_file_location(module_name, file_path)
            if not spec or not spec.loader:
                raise ImportError(f"Could not create spec for {file_path}")

            module = importlib.util.module_from_spec(spec)
            spec.loader.exec_module(module)
        except Exception as e:
            logger.error("Failed to load handler module %s: %s", file_path.name, e, exc_info=True)
            continue

        for attr_name in dir(module):
            if not attr_name.startswith(HANDLER_PREFIX):
                continue
            handler_func = getattr(module, attr_name)
            if callable(handler_func):
                command_name = attr_name[len(HANDLER_PREFIX):]
                discovered_handlers[command_name] = handler_func
                logger.debug("Discovered command '%s'", command_name)

    return discovered_handlers
