"""
Filesystem Exceptions

Exceptions related to real filesystem operations performed by the
builtin commands and the recursive deletion engine.

Author: YSNRFD
Version: 1.0.0
"""

from typing import Optional, Any

from .shell_exceptions import ShellException


class FilesystemError(ShellException):
    """
    Base exception for all filesystem-related errors.
    
    Wraps the operating system error text together with the path
    that caused it.
    
    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        error_code: Numeric error code for programmatic handling
    """
    
    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        error_code: Optional[int] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if path:
            ctx["path"] = path
        super().__init__(message, error_code=error_code or 4000, context=ctx)
        self.path = path
    
    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.path:
            base = f"{base} (path={self.path})"
        return base
    
    @staticmethod
    def from_os_error(
        path: str,
        error: OSError,
        action: Optional[str] = None
    ) -> 'FilesystemError':
        """
        Build an error from an ``OSError``.
        
        Args:
            path: Path as given by the user
            error: The underlying OS error
            action: Optional verb phrase, e.g. "cannot remove"
        
        Returns:
            FilesystemError carrying the OS error text
        """
        reason = error.strerror or str(error)
        if action:
            message = f"{action} '{path}': {reason}"
        else:
            message = f"{path}: {reason}"
        return FilesystemError(
            message,
            path=path,
            context={"errno": error.errno}
        )


class CannotOpenDirectoryError(FilesystemError):
    """
    A path could not be opened as a readable directory.
    
    Example:
        >>> raise CannotOpenDirectoryError("/root/secret", "Permission denied")
    """
    
    def __init__(
        self,
        path: str,
        reason: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        message = f"Cannot open directory: {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, path=path, error_code=4001, context=context)
        self.reason = reason


class PathTooLongError(FilesystemError):
    """The working directory path exceeds the configured limit."""
    
    def __init__(self, path: str, limit: int) -> None:
        super().__init__(
            f"Path length exceeds {limit} characters",
            path=path,
            error_code=4002,
            context={"limit": limit}
        )
        self.limit = limit
