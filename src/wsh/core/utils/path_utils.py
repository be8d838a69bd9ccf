# src/wsh/core/utils/path_utils.py
import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class PathUtils:
    """
    A central utility for reliably retrieving important package paths.
    """

    @staticmethod
    def get_shell_package_root() -> Path:
        """
        Returns the absolute path of the 'wsh' package directory.
        (e.g., /path/to/src/wsh)
        """
        return Path(__file__).resolve().parents[2]

    @staticmethod
    def get_handlers_dir() -> Path:
        return PathUtils.get_shell_package_root() / "core" / "handlers"

    @staticmethod
    def get_settings_file() -> Path:
        return PathUtils.get_shell_package_root() / "settings.json"
