"""
Recursive Deletion Engine

Deletes a directory and everything below it, children before parents.

Author: YSNRFD
Version: 1.0.0
"""

import os
from typing import List

from minish.exceptions import CannotOpenDirectoryError, FilesystemError
from minish.logger import get_logger


class RecursiveDeleter:
    """
    Removes a directory subtree in strict depth-first post-order.
    
    Every entry of a directory is fully removed before the directory
    itself. The first failure aborts the whole operation: entries
    already removed stay removed and nothing is retried.
    
    Symbolic links are unlinked, never followed, and the two pseudo
    entries ``.`` and ``..`` are never yielded by ``os.scandir``.
    
    Example:
        >>> deleter = RecursiveDeleter()
        >>> deleter.delete('/tmp/build')
        ['/tmp/build/out/a.o', '/tmp/build/out', '/tmp/build']
    """
    
    def __init__(self):
        self._logger = get_logger('deletion')
    
    def delete(self, path: str) -> List[str]:
        """
        Delete the subtree rooted at ``path``.
        
        Args:
            path: Directory to remove
        
        Returns:
            Removed paths, in removal order
        
        Raises:
            CannotOpenDirectoryError: If ``path`` is not a readable directory
            FilesystemError: On the first unlink, stat or rmdir failure;
                ``context['removed']`` lists what was already removed
        """
        removed: List[str] = []
        try:
            self._delete_tree(path, removed)
        except FilesystemError as e:
            e.context['removed'] = list(removed)
            self._logger.warning(
                f"Recursive deletion aborted: {e.message}",
                context={'root': path, 'removed': len(removed)}
            )
            raise
        
        self._logger.debug(
            "Recursive deletion complete",
            context={'root': path, 'removed': len(removed)}
        )
        return removed
    
    def _delete_tree(self, path: str, removed: List[str]) -> None:
        try:
            with os.scandir(path) as it:
                entries = list(it)
        except OSError as e:
            raise CannotOpenDirectoryError(path, e.strerror or str(e))
        
        for entry in entries:
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                raise FilesystemError.from_os_error(entry.path, e, "cannot stat")
            
            if is_dir:
                self._delete_tree(entry.path, removed)
            else:
                self._remove(os.unlink, entry.path, removed)
        
        self._remove(os.rmdir, path, removed)
    
    def _remove(self, remover, path: str, removed: List[str]) -> None:
        try:
            remover(path)
        except OSError as e:
            raise FilesystemError.from_os_error(path, e, "cannot remove")
        removed.append(path)
        self._logger.debug(f"Removed {path}")
