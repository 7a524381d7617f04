#!/usr/bin/env python3
"""
minish - A minimal interactive command shell

This is the main entry point for minish.

Start-up sequence:
1. Load configuration
2. Initialize logging
3. Create the shell
4. Run the REPL until the exit keyword or end of input

Author: YSNRFD
Version: 1.0.0
"""

import argparse
import sys
from typing import List, Optional

from minish import __version__
from minish.core.config_loader import ConfigLoader
from minish.exceptions import ConfigError
from minish.logger import Logger, LogLevel, get_logger
from minish.shell.shell import Shell


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='minish',
        description='A minimal interactive command shell.'
    )
    parser.add_argument('--config', help='path to a JSON configuration file')
    parser.add_argument('--log-level', help='DEBUG, INFO, WARNING, ERROR or CRITICAL')
    parser.add_argument('--log-file', help='also write logs to this file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point for minish.
    
    Returns:
        0 on normal termination, 1 on start-up failure or a fatal error
    """
    args = build_arg_parser().parse_args(argv)
    
    loader = ConfigLoader()
    try:
        config = loader.load(args.config) if args.config else loader.config
        level = LogLevel.from_name(args.log_level or config.logging.level)
    except (ConfigError, ValueError) as e:
        message = e.message if isinstance(e, ConfigError) else str(e)
        print(f"Error: {message}", file=sys.stderr)
        return 1
    
    Logger.initialize(
        level=level,
        log_file=args.log_file or config.logging.log_file,
        console_output=config.logging.console_output,
        use_colors=config.logging.use_colors
    )
    logger = get_logger('main')
    
    try:
        shell = Shell(config)
    except MemoryError:
        print("Error: input buffer allocation failed", file=sys.stderr)
        return 1
    
    logger.debug("Configuration loaded", context={'config': args.config or 'defaults'})
    return shell.run()


if __name__ == '__main__':
    sys.exit(main())
