"""Route a token list to a built-in or an external program."""

import os
import subprocess
import sys
from collections.abc import Callable

from loguru import logger

from myshell.builtins import BUILTIN_REGISTRY, Builtin, lookup_builtin
from myshell.config import ShellSettings
from myshell.pathsearch import resolve
from myshell.tokenizer import join_tokens

COMMAND_NOT_FOUND = 127


class Dispatcher:
    """Dispatch state: the working directory and the last exit status.

    The working directory lives here rather than in the process so that
    built-ins, PATH lookups and child processes all agree on it.
    """

    def __init__(
        self,
        settings: ShellSettings | None = None,
        cwd: str | None = None,
        on_exit: Callable[[], None] | None = None,
    ) -> None:
        self.settings = settings or ShellSettings()
        self.cwd: str = os.path.abspath(cwd or os.getcwd())
        self.last_exit_code: int = 0
        self._on_exit = on_exit

    def find_builtin(self, name: str) -> Builtin | None:
        return lookup_builtin(name, case_sensitive=not self.settings.case_insensitive_builtins)

    def change_directory(self, path: str) -> None:
        logger.debug("cwd {} -> {}", self.cwd, path)
        self.cwd = path

    def on_exit(self) -> None:
        """Run the exit hook (the shell saves its history here)."""
        if self._on_exit is not None:
            self._on_exit()

    def dispatch(self, tokens: list[str], line: str | None = None) -> int:
        """Run one command and return its exit status.

        *line* is the raw input, used verbatim in "command not found"
        messages; it defaults to the tokens joined by spaces.
        Only `exit` leaves this method abnormally, via SystemExit.
        """
        if not tokens:
            return 0

        builtin = self.find_builtin(tokens[0])
        if builtin is not None:
            logger.debug("builtin {} args={}", builtin, tokens[1:])
            handler = BUILTIN_REGISTRY[builtin]
            self.last_exit_code = handler(tokens[1:], self)
        else:
            self.last_exit_code = self._run_external(tokens, line or join_tokens(tokens))
        return self.last_exit_code

    def _run_external(self, tokens: list[str], line: str) -> int:
        path = resolve(tokens[0], cwd=self.cwd)
        if path is None:
            print(f"{line}: command not found", file=sys.stderr)
            return COMMAND_NOT_FOUND

        try:
            result = subprocess.run(tokens, executable=path, cwd=self.cwd)
        except OSError as e:
            logger.debug("spawn of {} failed: {}", path, e)
            print(f"{line}: command not found", file=sys.stderr)
            return COMMAND_NOT_FOUND

        if result.returncode != 0 and self.settings.report_failed_commands:
            print(f"{line}: command not found", file=sys.stderr)
        return result.returncode
