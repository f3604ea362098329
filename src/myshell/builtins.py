"""Built-in shell commands."""

import os
import sys
from collections.abc import Callable
from enum import StrEnum
from typing import TYPE_CHECKING, TypeAlias

from myshell.pathsearch import resolve

if TYPE_CHECKING:
    from myshell.dispatcher import Dispatcher

BuiltinHandler: TypeAlias = Callable[[list[str], "Dispatcher"], int]


class Builtin(StrEnum):
    EXIT = "exit"
    ECHO = "echo"
    TYPE = "type"
    PWD = "pwd"
    CD = "cd"


def lookup_builtin(name: str, case_sensitive: bool = True) -> Builtin | None:
    """Map a command name to its Builtin, or None for anything else."""
    if not case_sensitive:
        name = name.lower()
    try:
        return Builtin(name)
    except ValueError:
        return None


def builtin_exit(args: list[str], dispatcher: "Dispatcher") -> int:
    try:
        code = int(args[0]) % 256
    except (IndexError, ValueError):
        code = 1
    dispatcher.on_exit()
    sys.exit(code)


def builtin_echo(args: list[str], dispatcher: "Dispatcher") -> int:
    if not args:
        print("echo: missing argument", file=sys.stderr)
        return 1
    print(" ".join(args))
    return 0


def builtin_type(args: list[str], dispatcher: "Dispatcher") -> int:
    if not args:
        print("type: missing argument", file=sys.stderr)
        return 1

    ret = 0
    for name in args:
        if dispatcher.find_builtin(name) is not None:
            print(f"{name} is a shell builtin")
            continue
        path = resolve(name, cwd=dispatcher.cwd)
        if path:
            print(f"{name} is {path}")
        else:
            print(f"{name}: not found", file=sys.stderr)
            ret = 1
    return ret


def builtin_pwd(args: list[str], dispatcher: "Dispatcher") -> int:
    try:
        os.stat(dispatcher.cwd)
    except OSError as e:
        print(f"pwd: {e.strerror}", file=sys.stderr)
        return 1
    print(dispatcher.cwd)
    return 0


def expand_home(target: str) -> str | None:
    """Expand '~' and '~/rest' using $HOME. None if HOME is needed but unset."""
    if target != "~" and not target.startswith("~/"):
        return target
    home = os.environ.get("HOME")
    if not home:
        return None
    if target == "~":
        return home
    return os.path.join(home, target[2:])


def builtin_cd(args: list[str], dispatcher: "Dispatcher") -> int:
    if not args:
        print("cd: missing argument", file=sys.stderr)
        return 1
    if len(args) > 1:
        print("cd: too many arguments", file=sys.stderr)
        return 1

    target = expand_home(args[0])
    if target is None:
        print("cd: HOME not set", file=sys.stderr)
        return 1

    path = os.path.normpath(os.path.join(dispatcher.cwd, target))
    if not os.path.isdir(path) or not os.access(path, os.X_OK):
        print(f"cd: {args[0]}: No such file or directory", file=sys.stderr)
        return 1

    dispatcher.change_directory(path)
    return 0


BUILTIN_REGISTRY: dict[Builtin, BuiltinHandler] = {
    Builtin.EXIT: builtin_exit,
    Builtin.ECHO: builtin_echo,
    Builtin.TYPE: builtin_type,
    Builtin.PWD: builtin_pwd,
    Builtin.CD: builtin_cd,
}
