"""Resolve command names to executables through PATH."""

import os
import stat

from loguru import logger

_EXEC_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def is_executable(path: str) -> bool:
    """True for a regular file with at least one executable permission bit."""
    try:
        st = os.stat(path)
    except OSError:
        return False
    return stat.S_ISREG(st.st_mode) and bool(st.st_mode & _EXEC_BITS)


def path_entries(path: str | None = None, cwd: str | None = None) -> list[str]:
    """Split PATH into directories, in search order.

    An empty entry stands for the working directory; relative entries
    are taken relative to *cwd*.
    """
    if path is None:
        path = os.environ.get("PATH", "")
    if not path:
        return []

    base = cwd or os.getcwd()
    return [os.path.join(base, entry) for entry in path.split(os.pathsep)]


def resolve(name: str, path: str | None = None, cwd: str | None = None) -> str | None:
    """Return the executable *name* refers to, or None.

    Names containing a slash are not searched for; they are checked
    directly (relative to *cwd*). Otherwise the first PATH directory holding
    an executable file called *name* wins. PATH is read on every call.
    """
    if not name:
        return None

    if os.sep in name:
        candidate = os.path.join(cwd or os.getcwd(), name)
        return candidate if is_executable(candidate) else None

    for directory in path_entries(path, cwd):
        candidate = os.path.join(directory, name)
        if is_executable(candidate):
            logger.debug("resolved {} -> {}", name, candidate)
            return candidate

    logger.debug("{} not found on PATH", name)
    return None


def list_executables(path: str | None = None, cwd: str | None = None) -> set[str]:
    """Names of all executables reachable through PATH."""
    commands: set[str] = set()

    for directory in path_entries(path, cwd):
        try:
            entries = os.listdir(directory)
        except OSError:
            continue
        for entry in entries:
            if is_executable(os.path.join(directory, entry)):
                commands.add(entry)

    return commands
