"""
minish Shell Module

The interactive command-line shell.

Author: YSNRFD
Version: 1.0.0
"""

import os
import sys
from typing import Optional, TextIO

from minish.core.config_loader import Config, get_config
from minish.exceptions import (
    EmptyInputError,
    InputError,
    ShellException,
    UnknownCommandError,
)
from minish.logger import get_logger
from .builtins import BuiltinCommands
from .dispatcher import CommandDispatcher
from .parser import ArgumentVector, CommandParser
from .reader import LineReader


# Names starting with this are run as programs
PROGRAM_PREFIX = '.'


class Shell:
    """
    minish Interactive Shell.

    Provides:
    - Bounded line input
    - Quote-aware command parsing
    - Built-in commands
    - Running programs by path

    The working directory is session state: it starts as the process
    working directory (or ``cwd``), only ``cd`` changes it, and every
    command resolves relative paths against it.

    Example:
        >>> shell = Shell()
        >>> shell.run()
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[TextIO] = None,
        stderr: Optional[TextIO] = None,
        cwd: Optional[str] = None
    ):
        self._config = config if config is not None else get_config()
        self._logger = get_logger('shell')
        self._stdin = stdin if stdin is not None else sys.stdin
        self._stdout = stdout if stdout is not None else sys.stdout
        self._stderr = stderr if stderr is not None else sys.stderr
        self._cwd = os.path.abspath(cwd) if cwd is not None else os.getcwd()
        self._running = False
        self._exiting = False
        self._exit_code = 0

        self._reader = LineReader(
            self._stdin,
            self._stdout,
            max_length=self._config.shell.max_line_length
        )
        self._parser = CommandParser()
        self._dispatcher = CommandDispatcher(stderr=self._stderr)
        self._builtins = BuiltinCommands(self)

        for descriptor in self._builtins.get_descriptors():
            self._dispatcher.register(descriptor)
        self._dispatcher.register_prefix(PROGRAM_PREFIX, self._builtins.run_descriptor)

    @property
    def config(self) -> Config:
        return self._config

    @property
    def cwd(self) -> str:
        return self._cwd

    @cwd.setter
    def cwd(self, value: str):
        self._logger.debug("Working directory changed", context={'cwd': value})
        self._cwd = value

    @property
    def stdout(self) -> TextIO:
        return self._stdout

    @property
    def stderr(self) -> TextIO:
        return self._stderr

    @property
    def reader(self) -> LineReader:
        return self._reader

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def dispatcher(self) -> CommandDispatcher:
        return self._dispatcher

    @property
    def exiting(self) -> bool:
        return self._exiting

    def run(self) -> int:
        """
        Run the interactive shell.

        This is the main REPL loop. It ends on the exit keyword or end
        of input (status 0), or on a non-recoverable error (status 1).

        Returns:
            Process exit code
        """
        self._running = True
        self._exiting = False
        self._exit_code = 0
        self._logger.info("Shell started", context={'cwd': self._cwd})

        while self._running and not self._exiting:
            try:
                try:
                    line = self._reader.read_line(self._config.shell.prompt)
                except EOFError:
                    self._write_out('')
                    break
                except KeyboardInterrupt:
                    self._write_out('^C')
                    continue
                except EmptyInputError:
                    continue
                except InputError as e:
                    self._write_err(f"Error: {e.message}")
                    self._logger.warning(str(e))
                    continue

                self.execute_line(line)

            except ShellException as e:
                if e.recoverable:
                    self._write_err(f"Error: {e.message}")
                    continue
                self._logger.critical(f"Fatal error: {e}")
                self._write_err(f"Error: {e.message}")
                self._exit_code = 1
                break
            except Exception as e:
                self._logger.exception(f"Shell error: {e}", exc=e)
                self._write_err(f"shell: error: {e}")

        self._running = False
        self._logger.info("Shell stopped", context={'exit_code': self._exit_code})
        return self._exit_code

    def execute_line(self, line: str) -> int:
        """
        Execute a command line.

        Args:
            line: Command line string

        Returns:
            Exit code (127 for an unknown command)

        Raises:
            ShellException: Only for non-recoverable errors
        """
        try:
            argv = self._parser.parse(line)
        except EmptyInputError:
            return 0

        if self.is_exit_command(argv):
            self.request_exit()
            return 0

        try:
            return self._dispatcher.dispatch(argv)
        except UnknownCommandError as e:
            self._write_err(e.message)
            self._logger.info(str(e))
            return 127

    def is_exit_command(self, argv: ArgumentVector) -> bool:
        """
        Check for the exit keyword.

        This is the only case-insensitive name comparison: ``EXIT`` and
        ``Exit`` end the session, while command names are matched
        exactly by the dispatcher.
        """
        return argv.name.casefold() == self._config.shell.exit_keyword.casefold()

    def request_exit(self) -> None:
        """Request the shell to exit."""
        self._exiting = True

    def stop(self) -> None:
        """Stop the shell."""
        self._running = False

    def _write_out(self, text: str) -> None:
        print(text, file=self._stdout)

    def _write_err(self, text: str) -> None:
        print(text, file=self._stderr)


def create_shell(config: Optional[Config] = None, **kwargs) -> Shell:
    """Factory function to create a shell."""
    return Shell(config, **kwargs)
