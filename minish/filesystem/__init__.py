"""
minish Filesystem Module

Provides:
- Path resolution against the session working directory
- Recursive (post-order) directory deletion
"""

from .path_resolver import PathResolver
from .deletion import RecursiveDeleter

__all__ = [
    'PathResolver',
    'RecursiveDeleter',
]
