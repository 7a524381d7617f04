"""
Shell Exceptions

Exceptions raised while reading, parsing and dispatching command lines.
These are reported to the user and never terminate the session.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any


class ShellException(Exception):
    """
    Base exception for all shell errors.
    
    Every error raised by the shell derives from this class so the
    dispatcher and the REPL can report it in one place.
    
    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        recoverable: Whether the session can continue after the error
        context: Additional context about the error
    
    Example:
        >>> raise ShellException("Something went wrong", error_code=1000)
    """
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        recoverable: bool = True,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 1000
        self.recoverable = recoverable
        self.context = context or {}
    
    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base
    
    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code}, "
            f"recoverable={self.recoverable})"
        )


class InputError(ShellException):
    """Base exception for errors while reading a line of input."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 1100, context=context)


class LineTooLongError(InputError):
    """
    The entered line exceeds the configured maximum length.
    
    The reader has already discarded the rest of the offending line
    when this is raised.
    """
    
    def __init__(self, max_length: int) -> None:
        super().__init__(
            f"Command size exceeded ({max_length} characters max.)",
            error_code=1101,
            context={"max_length": max_length}
        )
        self.max_length = max_length


class EmptyInputError(InputError):
    """Nothing but whitespace was entered."""
    
    def __init__(self) -> None:
        super().__init__("Empty input", error_code=1102)


class ParseError(ShellException):
    """
    The tokenizer could not build an argument vector.
    
    Only raised on resource exhaustion; malformed quoting is
    accepted by the tokenizer.
    """
    
    def __init__(
        self,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=1200, context=context)


class ArgumentError(ShellException):
    """Base exception for argument count and indexing errors."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        command: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if command:
            ctx["command"] = command
        super().__init__(message, error_code=error_code or 1300, context=ctx)
        self.command = command


class MissingOperandError(ArgumentError):
    """
    A command was called with fewer operands than it requires.
    
    Example:
        >>> raise MissingOperandError("cd")
    """
    
    def __init__(self, command: str) -> None:
        super().__init__("Missing operand", error_code=1301, command=command)


class TooManyArgumentsError(ArgumentError):
    """A command was called with more operands than it accepts."""
    
    def __init__(self, command: str) -> None:
        super().__init__("Too many arguments", error_code=1302, command=command)


class IndexOutOfRangeError(ArgumentError):
    """An argument vector was indexed past its end."""
    
    def __init__(self, index: int, count: int) -> None:
        super().__init__(
            f"Index out of range: {index} (count={count})",
            error_code=1303
        )
        self.index = index
        self.count = count


class OptionError(ShellException):
    """Base exception for option (flag) errors."""
    
    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message, error_code=error_code or 1400, context=context)


class InvalidOptionError(OptionError):
    """
    A validating command received a flag it does not recognize.
    
    Example:
        >>> raise InvalidOptionError("-x", "x")
    """
    
    def __init__(self, option: str, flag: str) -> None:
        super().__init__(
            f"'{option}': Invalid option",
            error_code=1401,
            context={"flag": flag}
        )
        self.option = option
        self.flag = flag


class UnknownCommandError(ShellException):
    """No command is registered under the given name."""
    
    def __init__(self, name: str) -> None:
        super().__init__(
            f"{name}: command not found",
            error_code=1500,
            context={"command": name}
        )
        self.name = name


class ConfigError(ShellException):
    """
    The configuration file could not be loaded or is invalid.
    
    Raised at startup only and never recoverable.
    """
    
    def __init__(
        self,
        message: str,
        path: Optional[str] = None
    ) -> None:
        ctx = {"path": path} if path else {}
        super().__init__(message, error_code=1600, recoverable=False, context=ctx)
        self.path = path
