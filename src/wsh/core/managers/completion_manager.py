# src/wsh/core/managers/completion_manager.py
import logging
import os
from typing import Iterable, List

from prompt_toolkit.completion import Completion
from prompt_toolkit.document import Document

from wsh.core.context.shell_context import ShellContext

logger = logging.getLogger(__name__)


class CompletionManager:
    """
    Generates completion suggestions for the interactive prompt: command names
    for the first word, '$NAME' variables, and file names everywhere else.
    """

    def __init__(self, shell_context: ShellContext, builtin_names: Iterable[str]):
        self.ctx = shell_context
        self.builtin_names = sorted(builtin_names)

    def generate_completions(self, document: Document) -> Iterable[Completion]:
        text_before_cursor = document.text_before_cursor
        word_before_cursor = document.get_word_before_cursor(WORD=True)
        words = text_before_cursor.split()

        is_completing_first_word = (
            len(words) == 0 or (len(words) == 1 and not text_before_cursor.endswith((" ", "\t")))
        )

        if word_before_cursor.startswith("$"):
            yield from self._get_variable_completions(word_before_cursor)
        elif is_completing_first_word:
            yield from self._get_command_completions(word_before_cursor)
        else:
            yield from self._get_path_completions(word_before_cursor)

    # --- Helper methods for different completion types ---

    def _get_command_completions(self, word_before_cursor: str) -> Iterable[Completion]:
        """Yields built-in names and executables found on PATH."""
        start_pos = -len(word_before_cursor)
        for name in self.builtin_names:
            if name.startswith(word_before_cursor):
                yield Completion(name, start_position=start_pos, display_meta="Built-in")
        for name in self._path_executables():
            if name.startswith(word_before_cursor) and name not in self.builtin_names:
                yield Completion(name, start_position=start_pos, display_meta="Command")

    def _get_variable_completions(self, word_before_cursor: str) -> Iterable[Completion]:
        """Yields shell-local and environment variable names."""
        prefix = word_before_cursor[1:]
        start_pos = -len(word_before_cursor)
        names = {var.name for var in self.ctx.variables} | set(os.environ)
        for name in sorted(names):
            if name.startswith(prefix):
                meta = "Shell Variable" if name in self.ctx.variables else "Environment"
                yield Completion(f"${name}", start_position=start_pos, display_meta=meta)

    def _get_path_completions(self, word_before_cursor: str) -> Iterable[Completion]:
        """Yields file and directory names relative to the current directory."""
        dirname, partial = os.path.split(word_before_cursor)
        search_dir = dirname or "."
        try:
            entries = sorted(os.listdir(search_dir))
        except OSError:
            return
        for filename in entries:
            if not filename.startswith(partial):
                continue
            full_path = os.path.join(search_dir, filename)
            display = os.path.join(dirname, filename) if dirname else filename
            if os.path.isdir(full_path):
                display += "/"
            yield Completion(display, start_position=-len(word_before_cursor))

    @staticmethod
    def _path_executables() -> List[str]:
        commands = set()
        for directory in os.environ.get("PATH", "").split(":"):
            if not os.path.isdir(directory):
                continue
            try:
                for filename in os.listdir(directory):
                    full = os.path.join(directory, filename)
                    if os.path.isfile(full) and os.access(full, os.X_OK):
                        commands.add(filename)
            except OSError as e:
                logger.debug("Skipping unreadable PATH entry %s: %s", directory, e)
        return sorted(commands)
