"""
minish Shell Module

Provides the interactive command-line shell:
- Line reading
- Command parsing
- Option parsing
- Command dispatch
- Built-in commands
"""

from .reader import LineReader
from .parser import ArgumentVector, CommandParser, Token, TokenizerState
from .options import OptionFlags, is_option, operands, parse_options
from .dispatcher import CommandDescriptor, CommandDispatcher
from .builtins import BuiltinCommands
from .shell import Shell, create_shell

__all__ = [
    'LineReader',
    'ArgumentVector',
    'CommandParser',
    'Token',
    'TokenizerState',
    'OptionFlags',
    'is_option',
    'operands',
    'parse_options',
    'CommandDescriptor',
    'CommandDispatcher',
    'BuiltinCommands',
    'Shell',
    'create_shell',
]
