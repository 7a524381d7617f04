"""
Recursive Deletion Engine Tests

Author: YSNRFD
Version: 1.0.0
"""

import os
import tempfile
import unittest
from unittest import mock

from minish.exceptions import CannotOpenDirectoryError, FilesystemError
from minish.filesystem.deletion import RecursiveDeleter


def write_file(path, content='x'):
    with open(path, 'w', encoding='utf-8') as f:
        f.write(content)


class TestRecursiveDeleter(unittest.TestCase):
    """Test post-order subtree removal."""
    
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = self._tmp.name
        self.a = os.path.join(self.root, 'a')
        self.b = os.path.join(self.a, 'b')
        self.c = os.path.join(self.b, 'c.txt')
        os.makedirs(self.b)
        write_file(self.c)
        self.deleter = RecursiveDeleter()
    
    def tearDown(self):
        self._tmp.cleanup()
    
    def test_post_order(self):
        """Test that children are removed strictly before parents."""
        removed = self.deleter.delete(self.a)
        
        self.assertEqual(removed, [self.c, self.b, self.a])
        self.assertFalse(os.path.exists(self.a))
    
    def test_wider_tree(self):
        os.makedirs(os.path.join(self.a, 'd', 'e'))
        write_file(os.path.join(self.a, 'top.txt'))
        write_file(os.path.join(self.a, 'd', 'e', 'deep.txt'))
        
        removed = self.deleter.delete(self.a)
        
        self.assertEqual(len(removed), 7)
        self.assertEqual(removed[-1], self.a)
        for index, path in enumerate(removed):
            for later in removed[index + 1:]:
                self.assertFalse(later.startswith(path + os.sep))
        self.assertFalse(os.path.exists(self.a))
    
    def test_empty_directory(self):
        empty = os.path.join(self.root, 'empty')
        os.mkdir(empty)
        
        self.assertEqual(self.deleter.delete(empty), [empty])
    
    def test_unlink_failure_aborts(self):
        """Test that a failing unlink leaves every parent in place."""
        error = PermissionError(13, 'Permission denied')
        with mock.patch('minish.filesystem.deletion.os.unlink', side_effect=error):
            with self.assertRaises(FilesystemError) as ctx:
                self.deleter.delete(self.a)
        
        self.assertEqual(ctx.exception.path, self.c)
        self.assertIn('Permission denied', ctx.exception.message)
        self.assertEqual(ctx.exception.context['removed'], [])
        self.assertTrue(os.path.exists(self.c))
        self.assertTrue(os.path.isdir(self.b))
        self.assertTrue(os.path.isdir(self.a))
    
    def test_rmdir_failure_keeps_partial_state(self):
        """Test that entries removed before a failure stay removed."""
        error = OSError(39, 'Directory not empty')
        with mock.patch('minish.filesystem.deletion.os.rmdir', side_effect=error):
            with self.assertRaises(FilesystemError) as ctx:
                self.deleter.delete(self.a)
        
        self.assertEqual(ctx.exception.path, self.b)
        self.assertEqual(ctx.exception.context['removed'], [self.c])
        self.assertFalse(os.path.exists(self.c))
        self.assertTrue(os.path.isdir(self.b))
        self.assertTrue(os.path.isdir(self.a))
    
    def test_not_a_directory(self):
        with self.assertRaises(CannotOpenDirectoryError) as ctx:
            self.deleter.delete(self.c)
        
        self.assertEqual(ctx.exception.path, self.c)
        self.assertTrue(os.path.exists(self.c))
    
    def test_missing_directory(self):
        with self.assertRaises(CannotOpenDirectoryError):
            self.deleter.delete(os.path.join(self.root, 'missing'))
    
    @unittest.skipUnless(hasattr(os, 'symlink'), "symlinks not supported")
    def test_symlink_not_followed(self):
        """Test that a link to a directory is removed, not its target."""
        outside = os.path.join(self.root, 'outside')
        os.mkdir(outside)
        kept = os.path.join(outside, 'keep.txt')
        write_file(kept)
        link = os.path.join(self.a, 'link')
        os.symlink(outside, link)
        
        removed = self.deleter.delete(self.a)
        
        self.assertIn(link, removed)
        self.assertTrue(os.path.exists(kept))


if __name__ == '__main__':
    unittest.main()
