"""
minish - A minimal interactive command shell

Reads a line, splits it into arguments honoring double quotes,
dispatches to a fixed set of built-in commands and loops until the
exit keyword is entered.
"""

__version__ = "1.0.0"
__author__ = "YSNRFD"

from .shell.shell import Shell, create_shell

__all__ = [
    'Shell',
    'create_shell',
]
