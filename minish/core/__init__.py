"""
minish Core Module

Core components:
- Configuration Loader
"""

from .config_loader import (
    ConfigLoader,
    Config,
    ShellConfig,
    FilesystemConfig,
    ProcessConfig,
    LoggingConfig,
    get_config,
)

__all__ = [
    'ConfigLoader',
    'Config',
    'ShellConfig',
    'FilesystemConfig',
    'ProcessConfig',
    'LoggingConfig',
    'get_config',
]
