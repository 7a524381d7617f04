"""
minish Exception Hierarchy

All custom exceptions inherit from ShellException, with specific
sub-categories for input, parsing, arguments, options, the filesystem
and external processes.

Architecture:
    ShellException (Base)
    ├── InputError
    │   ├── LineTooLongError
    │   └── EmptyInputError
    ├── ParseError
    ├── ArgumentError
    │   ├── MissingOperandError
    │   ├── TooManyArgumentsError
    │   └── IndexOutOfRangeError
    ├── OptionError
    │   └── InvalidOptionError
    ├── UnknownCommandError
    ├── ConfigError
    ├── FilesystemError
    │   ├── CannotOpenDirectoryError
    │   └── PathTooLongError
    └── ProcessError
        ├── ExecError
        ├── ForkError
        └── CompilationError
"""

from .shell_exceptions import (
    ShellException,
    InputError,
    LineTooLongError,
    EmptyInputError,
    ParseError,
    ArgumentError,
    MissingOperandError,
    TooManyArgumentsError,
    IndexOutOfRangeError,
    OptionError,
    InvalidOptionError,
    UnknownCommandError,
    ConfigError,
)

from .fs_exceptions import (
    FilesystemError,
    CannotOpenDirectoryError,
    PathTooLongError,
)

from .process_exceptions import (
    ProcessError,
    ExecError,
    ForkError,
    CompilationError,
)

__all__ = [
    # Shell exceptions
    "ShellException",
    "InputError",
    "LineTooLongError",
    "EmptyInputError",
    "ParseError",
    "ArgumentError",
    "MissingOperandError",
    "TooManyArgumentsError",
    "IndexOutOfRangeError",
    "OptionError",
    "InvalidOptionError",
    "UnknownCommandError",
    "ConfigError",
    # Filesystem exceptions
    "FilesystemError",
    "CannotOpenDirectoryError",
    "PathTooLongError",
    # Process exceptions
    "ProcessError",
    "ExecError",
    "ForkError",
    "CompilationError",
]
