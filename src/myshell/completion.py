"""Readline tab completion for command names and paths."""

import os
import readline
from typing import TYPE_CHECKING

from myshell.builtins import Builtin
from myshell.pathsearch import list_executables

if TYPE_CHECKING:
    from myshell.dispatcher import Dispatcher


class Completer:
    """Readline completer bound to a dispatcher's working directory.

    On state 0 all matches are computed; later states walk that list.
    """

    def __init__(self, dispatcher: "Dispatcher") -> None:
        self.dispatcher = dispatcher
        self.matches: list[str] = []

    def __call__(self, text: str, state: int) -> str | None:
        if state == 0:
            line = readline.get_line_buffer()
            begidx = readline.get_begidx()
            if not line[:begidx].strip():
                self.matches = self.complete_command(text)
            else:
                self.matches = self.complete_path(text)

        if state < len(self.matches):
            return self.matches[state]
        return None

    def complete_command(self, text: str) -> list[str]:
        """Built-in names and PATH executables starting with *text*."""
        names = {b.value for b in Builtin if b.value.startswith(text)}
        names.update(cmd for cmd in list_executables(cwd=self.dispatcher.cwd) if cmd.startswith(text))
        return sorted(name + " " for name in names)

    def complete_path(self, text: str) -> list[str]:
        """Files and directories under the working directory; dirs get a '/'."""
        dirname, basename = os.path.split(text)
        search_dir = os.path.join(self.dispatcher.cwd, os.path.expanduser(dirname))

        matches: list[str] = []
        try:
            entries = os.listdir(search_dir)
        except OSError:
            return []

        for entry in entries:
            if not entry.startswith(basename):
                continue
            full = os.path.join(dirname, entry) if dirname else entry
            if os.path.isdir(os.path.join(search_dir, entry)):
                full += "/"
            matches.append(full)
        return sorted(matches)


def setup_completion(dispatcher: "Dispatcher") -> None:
    """Configure readline for tab completion."""
    readline.set_completer(Completer(dispatcher))
    readline.set_completer_delims(" \t\n")
    readline.parse_and_bind("tab: complete")
