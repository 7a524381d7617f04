"""
minish Logger Module

Logging for the shell that provides:
- Structured logging with contextual information
- Multiple log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
- Console (stderr) and optional file output
- Subsystem-specific loggers

Log output goes to stderr so it never mixes with command output.

Author: YSNRFD
Version: 1.0.0
"""

import logging
import sys
import threading
from datetime import datetime
from enum import IntEnum
from pathlib import Path
from typing import Optional, Any


class LogLevel(IntEnum):
    """Log level enumeration with numeric values for comparison."""
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    
    @classmethod
    def from_name(cls, name: str) -> 'LogLevel':
        """Look up a level by (case-insensitive) name."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Unknown log level: {name}") from None


class LogFormatter(logging.Formatter):
    """
    Custom log formatter for minish.
    
    Provides formatted output with:
    - Timestamp with millisecond precision
    - Log level with color coding (if terminal supports it)
    - Subsystem identification
    - Structured context
    """
    
    # ANSI color codes for terminal output
    COLORS = {
        'DEBUG': '\033[36m',      # Cyan
        'INFO': '\033[32m',       # Green
        'WARNING': '\033[33m',    # Yellow
        'ERROR': '\033[31m',      # Red
        'CRITICAL': '\033[35m',   # Magenta
    }
    RESET = '\033[0m'
    
    def __init__(self, use_colors: bool = True):
        super().__init__()
        self.use_colors = use_colors and self._supports_color()
    
    @staticmethod
    def _supports_color() -> bool:
        """Check if the terminal supports ANSI colors."""
        if not hasattr(sys.stderr, 'isatty'):
            return False
        if not sys.stderr.isatty():
            return False
        return True
    
    def format(self, record: logging.LogRecord) -> str:
        """Format a log record."""
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]
        
        level = record.levelname
        
        if self.use_colors and level in self.COLORS:
            level_display = f"{self.COLORS[level]}{level:8s}{self.RESET}"
        else:
            level_display = f"{level:8s}"
        
        components = [f"[{timestamp}]", level_display]
        
        if hasattr(record, 'subsystem'):
            components.append(f"[{record.subsystem}]")
        
        components.append(str(record.getMessage()))
        
        if hasattr(record, 'context') and record.context:
            context_str = " ".join(f"{k}={v}" for k, v in record.context.items())
            components.append(f"{{{context_str}}}")
        
        message = " ".join(components)
        
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        
        return message


class Logger:
    """
    Main logging class for minish.
    
    Provides a centralized logging interface for the shell's
    subsystems with support for:
    - Console and file handlers
    - Subsystem-specific loggers
    - Structured context data
    
    Example:
        >>> log = Logger('dispatcher')
        >>> log.debug("Dispatching command", context={'command': 'ls'})
    """
    
    _instances: dict[str, 'Logger'] = {}
    _lock = threading.Lock()
    _initialized = False
    _global_level: int = LogLevel.WARNING
    
    def __new__(cls, subsystem: str = 'shell') -> 'Logger':
        """Get or create a logger for a subsystem."""
        with cls._lock:
            if subsystem not in cls._instances:
                instance = super().__new__(cls)
                instance._subsystem = subsystem
                instance._logger = logging.getLogger(f'minish.{subsystem}')
                cls._instances[subsystem] = instance
            return cls._instances[subsystem]
    
    @property
    def subsystem(self) -> str:
        return self._subsystem
    
    @classmethod
    def initialize(
        cls,
        level: int = LogLevel.WARNING,
        log_file: Optional[str] = None,
        console_output: bool = True,
        use_colors: bool = True
    ) -> None:
        """
        Initialize the logging system.
        
        Only the first call has any effect.
        
        Args:
            level: Minimum log level to capture
            log_file: Optional file path for log output
            console_output: Whether to log to stderr
            use_colors: Whether to use ANSI colors in console output
        """
        with cls._lock:
            if cls._initialized:
                return
            
            cls._global_level = level
            
            root_logger = logging.getLogger('minish')
            root_logger.setLevel(level)
            
            if console_output:
                console_handler = logging.StreamHandler(sys.stderr)
                console_handler.setLevel(level)
                console_handler.setFormatter(LogFormatter(use_colors=use_colors))
                root_logger.addHandler(console_handler)
            
            if log_file:
                file_path = Path(log_file)
                file_path.parent.mkdir(parents=True, exist_ok=True)
                file_handler = logging.FileHandler(log_file)
                file_handler.setLevel(level)
                file_handler.setFormatter(LogFormatter(use_colors=False))
                root_logger.addHandler(file_handler)
            
            if not root_logger.handlers:
                root_logger.addHandler(logging.NullHandler())
            
            cls._initialized = True
    
    def _log(
        self,
        level: int,
        message: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Internal logging method."""
        extra = {
            'subsystem': self._subsystem,
            'context': context or {},
        }
        self._logger.log(level, message, extra=extra)
    
    def debug(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a debug message."""
        self._log(LogLevel.DEBUG, message, context)
    
    def info(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an info message."""
        self._log(LogLevel.INFO, message, context)
    
    def warning(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a warning message."""
        self._log(LogLevel.WARNING, message, context)
    
    def error(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log an error message."""
        self._log(LogLevel.ERROR, message, context)
    
    def critical(self, message: str, context: Optional[dict[str, Any]] = None) -> None:
        """Log a critical message."""
        self._log(LogLevel.CRITICAL, message, context)
    
    def exception(
        self,
        message: str,
        exc: Optional[BaseException] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        """Log an exception with stack trace."""
        self._logger.error(
            message,
            exc_info=exc if exc is not None else True,
            extra={
                'subsystem': self._subsystem,
                'context': context or {},
            }
        )


def get_logger(subsystem: str) -> Logger:
    """
    Get a logger for the specified subsystem.
    
    Args:
        subsystem: Name of the subsystem (e.g., 'shell', 'dispatcher')
    
    Returns:
        Logger instance for the subsystem
    """
    return Logger(subsystem)
