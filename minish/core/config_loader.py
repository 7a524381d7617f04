"""
minish Configuration Loader

Configuration management for the shell that provides:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates
- Type-safe access to configuration values

Author: YSNRFD
Version: 1.0.0
"""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional
import threading

from minish.exceptions import ConfigError


@dataclass
class ShellConfig:
    """REPL settings."""
    prompt: str = "£ "
    max_line_length: int = 100
    exit_keyword: str = "exit"
    confirm_prompt: str = "->[y/N] "


@dataclass
class FilesystemConfig:
    """Filesystem settings used by the builtin commands."""
    path_max: int = 4096
    file_mode: int = 0o744
    directory_mode: int = 0o744


@dataclass
class ProcessConfig:
    """External program settings."""
    compiler: str = "gcc"
    source_extension: str = ".c"


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "WARNING"
    log_file: Optional[str] = None
    console_output: bool = True
    use_colors: bool = True


@dataclass
class Config:
    """
    Main configuration container.
    
    Holds all configuration settings for the shell.
    """
    shell: ShellConfig = field(default_factory=ShellConfig)
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    process: ProcessConfig = field(default_factory=ProcessConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def _parse_mode(value: Any, key: str) -> int:
    """Accept permission bits as an int or an octal string ("0744")."""
    if isinstance(value, bool):
        raise ConfigError(f"Invalid mode for {key}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            return int(value, 8)
        except ValueError:
            pass
    raise ConfigError(f"Invalid mode for {key}: {value!r}")


class ConfigLoader:
    """
    Configuration loader and manager.
    
    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.
    
    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('minish.json')
        >>> print(config.shell.prompt)
    """
    
    _instance: Optional['ConfigLoader'] = None
    _lock = threading.Lock()
    
    def __new__(cls) -> 'ConfigLoader':
        """Singleton pattern for configuration access."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._config = Config()
                cls._instance._loaded = False
            return cls._instance
    
    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.
        
        Args:
            config_path: Path to the configuration file
        
        Returns:
            Config object with loaded settings
        
        Raises:
            ConfigError: If the file cannot be loaded or parsed
        """
        path = Path(config_path)
        
        if not path.exists():
            raise ConfigError(
                f"Configuration file not found: {config_path}",
                path=config_path
            )
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file: {e}",
                path=config_path
            )
        except OSError as e:
            raise ConfigError(
                f"Cannot read configuration file: {e}",
                path=config_path
            )
        
        if not isinstance(data, dict):
            raise ConfigError(
                "Configuration root must be a JSON object",
                path=config_path
            )
        
        self._config = self._parse_config(data)
        self._loaded = True
        return self._config
    
    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()
        
        if 'shell' in data:
            shell_data = data['shell']
            config.shell = ShellConfig(
                prompt=shell_data.get('prompt', config.shell.prompt),
                max_line_length=shell_data.get('max_line_length', config.shell.max_line_length),
                exit_keyword=shell_data.get('exit_keyword', config.shell.exit_keyword),
                confirm_prompt=shell_data.get('confirm_prompt', config.shell.confirm_prompt),
            )
        
        if 'filesystem' in data:
            fs_data = data['filesystem']
            config.filesystem = FilesystemConfig(
                path_max=fs_data.get('path_max', config.filesystem.path_max),
                file_mode=_parse_mode(
                    fs_data.get('file_mode', config.filesystem.file_mode),
                    'filesystem.file_mode'
                ),
                directory_mode=_parse_mode(
                    fs_data.get('directory_mode', config.filesystem.directory_mode),
                    'filesystem.directory_mode'
                ),
            )
        
        if 'process' in data:
            proc_data = data['process']
            config.process = ProcessConfig(
                compiler=proc_data.get('compiler', config.process.compiler),
                source_extension=proc_data.get('source_extension', config.process.source_extension),
            )
        
        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
                use_colors=log_data.get('use_colors', config.logging.use_colors),
            )
        
        self._validate(config)
        return config
    
    @staticmethod
    def _validate(config: Config) -> None:
        if not isinstance(config.shell.max_line_length, int) or config.shell.max_line_length < 1:
            raise ConfigError("shell.max_line_length must be a positive integer")
        if not config.shell.exit_keyword:
            raise ConfigError("shell.exit_keyword must not be empty")
        if not isinstance(config.filesystem.path_max, int) or config.filesystem.path_max < 1:
            raise ConfigError("filesystem.path_max must be a positive integer")
        if not config.process.compiler:
            raise ConfigError("process.compiler must not be empty")
    
    @property
    def config(self) -> Config:
        """Get the current configuration."""
        if not self._loaded:
            return Config()
        return self._config
    
    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.
        
        Args:
            key: Dot-notation key (e.g., 'shell.prompt')
            default: Default value if key not found
        
        Returns:
            Configuration value or default
        """
        parts = key.split('.')
        obj: Any = self._config
        
        for part in parts:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default
        
        return obj
    
    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.
        
        Args:
            key: Dot-notation key (e.g., 'shell.max_line_length')
            value: Value to set
        
        Note:
            This modifies configuration at runtime but does not
            persist changes to disk.
        """
        parts = key.split('.')
        obj: Any = self._config
        
        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigError(f"Invalid configuration key: {key}")
        
        final_key = parts[-1]
        if hasattr(obj, final_key):
            setattr(obj, final_key, value)
            self._loaded = True
        else:
            raise ConfigError(f"Invalid configuration key: {key}")
    
    def reset(self) -> None:
        """Drop any loaded configuration and go back to the defaults."""
        self._config = Config()
        self._loaded = False
    
    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj
        
        return dataclass_to_dict(self._config)


def get_config() -> Config:
    """
    Get the global configuration instance.
    
    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    return loader.config
