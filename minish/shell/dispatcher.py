"""
Command Dispatcher Module

Maps command names to their handlers.

Author: YSNRFD
Version: 1.0.0
"""

import sys
from dataclasses import dataclass, field
from typing import Callable, List, Mapping, Optional, TextIO, Tuple

from minish.exceptions import (
    MissingOperandError,
    ShellException,
    TooManyArgumentsError,
    UnknownCommandError,
)
from minish.logger import get_logger
from .parser import ArgumentVector


Handler = Callable[[ArgumentVector], int]


@dataclass(frozen=True)
class CommandDescriptor:
    """
    A registered command.
    
    Attributes:
        name: Exact, case-sensitive command name
        handler: Callable taking the argument vector, returning an exit code
        min_args: Fewest operands accepted
        max_args: Most operands accepted (None for unbounded)
        recognized_flags: Flag character -> effect name
        validate_flags: Reject unknown flags instead of ignoring them
        usage: One-line usage string
        summary: Short description for ``help``
    """
    name: str
    handler: Handler
    min_args: int = 0
    max_args: Optional[int] = None
    recognized_flags: Mapping[str, str] = field(default_factory=dict)
    validate_flags: bool = False
    usage: str = ''
    summary: str = ''
    
    @property
    def parses_options(self) -> bool:
        return bool(self.recognized_flags)
    
    def check_operands(self, operands: List[str]) -> None:
        """
        Check the operand count against this command's bounds.
        
        Raises:
            MissingOperandError: Too few operands
            TooManyArgumentsError: Too many operands
        """
        if len(operands) < self.min_args:
            raise MissingOperandError(self.name)
        if self.max_args is not None and len(operands) > self.max_args:
            raise TooManyArgumentsError(self.name)


class CommandDispatcher:
    """
    Registry of commands and the dispatch step of the REPL.
    
    Lookup is an exact, case-sensitive dictionary match. Names that
    match no command fall through to the prefix routes, in
    registration order (used to run programs given as ``./path``).
    
    Example:
        >>> dispatcher = CommandDispatcher()
        >>> dispatcher.register(CommandDescriptor('echo', handler))
        >>> dispatcher.dispatch(ArgumentVector(('echo', 'hi')))
    """
    
    def __init__(self, stderr: Optional[TextIO] = None):
        self._logger = get_logger('dispatcher')
        self._stderr = stderr
        self._commands: dict[str, CommandDescriptor] = {}
        self._prefix_routes: List[Tuple[str, CommandDescriptor]] = []
    
    @property
    def stderr(self) -> TextIO:
        return self._stderr if self._stderr is not None else sys.stderr
    
    def register(self, descriptor: CommandDescriptor) -> None:
        """Register a command under its exact name."""
        if descriptor.name in self._commands:
            raise ValueError(f"Command already registered: {descriptor.name}")
        self._commands[descriptor.name] = descriptor
    
    def register_prefix(self, prefix: str, descriptor: CommandDescriptor) -> None:
        """Route every otherwise unknown name starting with ``prefix``."""
        if not prefix:
            raise ValueError("Prefix must not be empty")
        self._prefix_routes.append((prefix, descriptor))
    
    def lookup(self, name: str) -> Optional[CommandDescriptor]:
        """
        Find the descriptor for a command name.
        
        Args:
            name: Command name, matched case-sensitively
        
        Returns:
            The descriptor, or None if nothing matches
        """
        descriptor = self._commands.get(name)
        if descriptor is not None:
            return descriptor
        for prefix, route in self._prefix_routes:
            if name.startswith(prefix):
                return route
        return None
    
    def get(self, name: str) -> CommandDescriptor:
        """Get a registered command by exact name (KeyError if missing)."""
        return self._commands[name]
    
    def get_commands(self) -> List[CommandDescriptor]:
        """All registered commands, sorted by name."""
        return [self._commands[name] for name in sorted(self._commands)]
    
    def is_registered(self, name: str) -> bool:
        return name in self._commands
    
    def dispatch(self, argv: ArgumentVector) -> int:
        """
        Run the handler for ``argv``'s command name.
        
        Errors raised by the handler are reported on the error stream
        as ``<command>: <message>`` and yield exit status 1. Errors
        marked non-recoverable are re-raised.
        
        Args:
            argv: Parsed command line
        
        Returns:
            The handler's exit code
        
        Raises:
            UnknownCommandError: If no command matches a non-empty name
        """
        name = argv.name
        if not name:
            return 0
        
        descriptor = self.lookup(name)
        if descriptor is None:
            raise UnknownCommandError(name)
        
        self._logger.debug(
            f"Dispatching {name}",
            context={'handler': descriptor.name, 'argc': argv.count()}
        )
        
        try:
            return descriptor.handler(argv)
        except ShellException as e:
            if not e.recoverable:
                raise
            self.report(name, e)
            return 1
    
    def report(self, name: str, error: ShellException) -> None:
        """Print a handled error for the user and log it."""
        print(f"{name}: {error.message}", file=self.stderr)
        self._logger.warning(
            f"{name} failed: {error}",
            context={'error': type(error).__name__}
        )
