"""
Process Exceptions

Exceptions related to launching external programs: the compiler used
by ``make`` and programs started by path.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class ProcessError(ShellException):
    """
    Base exception for all process-related errors.
    
    Attributes:
        message: Human-readable error description
        program: Program path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        program: Optional[str] = None,
        error_code: Optional[int] = None,
        recoverable: bool = True,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if program:
            ctx["program"] = program
        super().__init__(
            message,
            error_code=error_code or 2000,
            recoverable=recoverable,
            context=ctx
        )
        self.program = program


class ExecError(ProcessError):
    """
    The program could not be executed.
    
    Raised when the file is missing, is not executable or is not a
    valid executable format.
    
    Example:
        >>> raise ExecError("./a.out", "Permission denied")
    """
    
    def __init__(
        self,
        program: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"{program}: {reason}",
            program=program,
            error_code=2001,
            context=context
        )
        self.reason = reason


class ForkError(ProcessError):
    """
    A child process could not be created.
    
    The system is out of process slots or memory; the shell cannot
    continue safely and terminates.
    """
    
    def __init__(
        self,
        program: str,
        reason: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(
            f"fork: {reason}",
            program=program,
            error_code=2002,
            recoverable=False,
            context=context
        )
        self.reason = reason


class CompilationError(ProcessError):
    """The compiler exited with a non-zero status."""
    
    def __init__(
        self,
        source: str,
        returncode: int,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["returncode"] = returncode
        super().__init__(
            f"{source}: compilation failed (exit status {returncode})",
            error_code=2003,
            context=ctx
        )
        self.source = source
        self.returncode = returncode
