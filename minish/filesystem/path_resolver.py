"""
Path Resolver Module

Resolves user-supplied paths against the shell's working directory.

The shell never changes the process working directory; every relative
path is joined to the session's ``cwd`` instead.

Author: YSNRFD
Version: 1.0.0
"""

import os
from typing import Tuple


class PathResolver:
    """
    Resolves and splits filesystem paths.
    
    Handles:
    - Absolute and relative paths
    - . and .. components (lexically)
    - Source file name splitting for ``make``
    """
    
    @staticmethod
    def resolve(path: str, cwd: str) -> str:
        """
        Resolve a path relative to a current working directory.
        
        Args:
            path: Path to resolve
            cwd: Current working directory (absolute)
        
        Returns:
            Absolute, normalized path
        """
        if os.path.isabs(path):
            return os.path.normpath(path)
        return os.path.normpath(os.path.join(cwd, path))
    
    @staticmethod
    def split_extension(path: str) -> Tuple[str, str]:
        """
        Split a path at the first '.' of its base name.
        
        Unlike ``os.path.splitext`` everything after the first dot is
        the extension, so ``a.b.c`` gives ``('a', '.b.c')``.
        
        Args:
            path: Path string
        
        Returns:
            Tuple of (path without extension, extension)
        """
        head, base = os.path.split(path)
        index = base.find('.')
        if index <= 0:
            return (path, '')
        return (os.path.join(head, base[:index]), base[index:])
