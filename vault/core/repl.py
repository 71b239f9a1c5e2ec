"""
REPL - Interactive shell for Vault

Reads one statement per line, parses it and reports the result.
Lines starting with ':' are meta commands.
"""

import logging
import sys
from typing import Iterable, Optional

from ..parser.parser import Insert, Select, Statement, StatementPrepareError, parse_statement
from .commands import (
    CommandResult, CommandSyntaxError, UnrecognisedCommand,
    handle_meta_command, usage,
)
from .schema import TableSchema, default_schema

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def execute_statement(statement: Statement) -> None:
    """Placeholder executor; statements are parsed but not run"""
    if isinstance(statement, Insert):
        print("insert not implemented")
    elif isinstance(statement, Select):
        print("select not implemented")
    else:
        raise TypeError(f"Unknown statement: {statement!r}")


class REPL:
    """
    Interactive REPL (Read-Eval-Print Loop) for Vault.

    Features:
    - One statement per line (INSERT or SELECT)
    - Meta commands (:open, :create, :help, :exit)
    """

    PROMPT = "vault> "

    def __init__(self, schema: Optional[TableSchema] = None):
        """Initialize REPL with the table schema rows are checked against."""
        self.schema = schema or default_schema()
        self.running = False

    def banner(self) -> None:
        print("Welcome to Vault!")
        print(f"\nUsing the following schema:\n{self.schema}")

    def run(self) -> None:
        """Start the interactive loop."""
        self.running = True
        self.banner()

        while self.running:
            try:
                line = input(self.PROMPT)
            except KeyboardInterrupt:
                print("\n(Use :exit to exit)")
                continue
            except EOFError:
                print()
                break
            self.handle_line(line)

    def run_lines(self, lines: Iterable[str]) -> None:
        """Feed lines from a non-interactive source through the shell."""
        self.running = True
        for line in lines:
            self.handle_line(line.rstrip('\n'))
            if not self.running:
                break

    def handle_line(self, line: str) -> CommandResult:
        """Process one line of input."""
        if not line.strip():
            return CommandResult.CONTINUE

        if line.startswith(':'):
            result = self._handle_command(line)
        else:
            self._handle_statement(line)
            result = CommandResult.CONTINUE

        if result == CommandResult.EXIT:
            self.running = False
        return result

    def _handle_command(self, line: str) -> CommandResult:
        try:
            return handle_meta_command(line[1:])
        except UnrecognisedCommand:
            print(f"Unrecognised command: {line}")
            usage()
        except CommandSyntaxError:
            print(f"invalid syntax: {line}")
            usage()
        return CommandResult.CONTINUE

    def _handle_statement(self, line: str) -> None:
        try:
            statement = parse_statement(line)
        except StatementPrepareError as e:
            print(f"Error handling statement, {e}")
            return

        print(statement)
        execute_statement(statement)


def main(argv=None):
    """Entry point for the REPL."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Vault - parse INSERT and SELECT statements"
    )
    parser.add_argument(
        '-e', '--execute',
        help='Parse a single statement and exit'
    )
    parser.add_argument(
        '-f', '--file',
        help='Run each line of a file through the shell and exit'
    )
    parser.add_argument(
        '--log-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level (default: WARNING)'
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    # Parse single statement
    if args.execute is not None:
        try:
            statement = parse_statement(args.execute)
        except StatementPrepareError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        print(statement)
        return

    # Run lines from file
    if args.file is not None:
        try:
            with open(args.file, 'r') as f:
                REPL().run_lines(f)
        except OSError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)
        return

    # Start interactive REPL
    repl = REPL()
    repl.run()


if __name__ == '__main__':
    main()
