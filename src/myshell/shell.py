"""Main shell loop: prompt, read, tokenize, dispatch, repeat."""

import contextlib
import readline
import sys

from loguru import logger

from myshell.completion import setup_completion
from myshell.config import ShellSettings, get_settings
from myshell.dispatcher import Dispatcher
from myshell.logging_utils import configure_logging
from myshell.tokenizer import tokenize


class Shell:
    """Shell state and main loop."""

    def __init__(self, settings: ShellSettings | None = None) -> None:
        self.settings = settings or ShellSettings()
        self.dispatcher = Dispatcher(self.settings, on_exit=self.save_history)

    @property
    def last_exit_code(self) -> int:
        return self.dispatcher.last_exit_code

    def load_history(self) -> None:
        with contextlib.suppress(OSError):
            readline.read_history_file(self.settings.history_file)

    def save_history(self) -> None:
        with contextlib.suppress(OSError):
            readline.write_history_file(self.settings.history_file)

    def run_command(self, line: str) -> None:
        line = line.strip()
        tokens = tokenize(line)
        if not tokens:
            return
        self.dispatcher.dispatch(tokens, line)

    def read_line(self) -> str:
        """Prompt and read one line. End of input is fatal (status 1)."""
        try:
            return input(self.settings.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            logger.debug("input closed, exiting")
            self.save_history()
            sys.exit(1)

    def run(self) -> None:
        """Main shell loop; only `exit` or end of input leaves it."""
        self.load_history()
        readline.set_history_length(self.settings.history_length)
        setup_completion(self.dispatcher)

        while True:
            self.run_command(self.read_line())


def main() -> None:
    """Entry point."""
    settings = get_settings()
    configure_logging(settings.log_level)
    Shell(settings).run()
