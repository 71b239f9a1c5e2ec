"""
Meta Commands - Shell commands prefixed with ':'

    :open FILENAME     Report whether a file exists
    :create FILENAME   Create an empty file
    :help              Show usage
    :exit              Leave the shell

Commands never end the process themselves; they hand a CommandResult
back to the loop that owns them.
"""

import logging
import os
from enum import Enum, auto
from typing import List

logger = logging.getLogger(__name__)


USAGE = """
Available commands:

    :open FILENAME
    :create FILENAME
    :help
    :exit
"""


class CommandResult(Enum):
    """What the shell should do after a meta command"""
    CONTINUE = auto()
    EXIT = auto()


class MetaCommandError(Exception):
    """Base class for meta command failures"""


class UnrecognisedCommand(MetaCommandError):
    pass


class CommandSyntaxError(MetaCommandError):
    pass


def usage() -> None:
    print(USAGE)


def _filename_arg(words: List[str]) -> str:
    if len(words) != 2:
        raise CommandSyntaxError(f"{words[0]} takes exactly one FILENAME")
    return words[1]


def open_file(fname: str) -> None:
    if os.path.exists(fname):
        print(f"{fname} exists!")
    else:
        print(f"{fname} does not exist.")


def create_file(fname: str) -> None:
    try:
        with open(fname, 'w'):
            pass
    except OSError as e:
        print(f"creating {fname} failed. ({e})")
        return
    print(f"{fname} created!")


def handle_meta_command(command: str) -> CommandResult:
    """
    Run a meta command. ``command`` is the line without its leading ':'.

    Raises:
        UnrecognisedCommand: Unknown or empty command
        CommandSyntaxError: Wrong number of arguments
    """
    words = command.split()
    if not words:
        raise UnrecognisedCommand("empty command")

    name = words[0]
    logger.debug("Meta command %s with %d argument(s)", name, len(words) - 1)

    if name == 'exit':
        return CommandResult.EXIT
    elif name == 'help':
        usage()
    elif name == 'open':
        open_file(_filename_arg(words))
    elif name == 'create':
        create_file(_filename_arg(words))
    else:
        raise UnrecognisedCommand(name)

    return CommandResult.CONTINUE
