"""
minish Process Module

Foreground execution of external programs.
"""

from .launcher import ProgramLauncher

__all__ = [
    'ProgramLauncher',
]
