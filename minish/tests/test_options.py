"""
Option Parser Tests

Author: YSNRFD
Version: 1.0.0
"""

import unittest

from minish.exceptions import InvalidOptionError, OptionError
from minish.shell.options import is_option, operands, parse_options
from minish.shell.parser import ArgumentVector


LS_FLAGS = {'a': 'show_hidden', 'l': 'long'}
RM_FLAGS = {'i': 'confirm', 'd': 'directories', 'r': 'recursive'}


class TestOptions(unittest.TestCase):
    """Test flag parsing."""
    
    def test_is_option(self):
        self.assertTrue(is_option('-a'))
        self.assertTrue(is_option('-la'))
        self.assertTrue(is_option('--'))
        self.assertFalse(is_option('-'))
        self.assertFalse(is_option('a'))
        self.assertFalse(is_option(''))
    
    def test_combined_flags(self):
        """Test that each character after the hyphen is its own flag."""
        flags = parse_options(ArgumentVector(('ls', '-la')), LS_FLAGS)
        
        self.assertIn('show_hidden', flags)
        self.assertIn('long', flags)
    
    def test_non_validating_ignores_unknown(self):
        flags = parse_options(ArgumentVector(('ls', '-xa', '-q')), LS_FLAGS)
        
        self.assertEqual(flags.enabled, frozenset({'show_hidden'}))
    
    def test_validating_rejects_unknown(self):
        """Test that a validating command fails on the first unknown flag."""
        argv = ArgumentVector(('rm', '-rx', 'file.txt'))
        
        with self.assertRaises(InvalidOptionError) as ctx:
            parse_options(argv, RM_FLAGS, validate=True)
        
        self.assertEqual(ctx.exception.flag, 'x')
        self.assertEqual(ctx.exception.option, '-rx')
        self.assertIsInstance(ctx.exception, OptionError)
    
    def test_separate_flags(self):
        argv = ArgumentVector(('rm', '-i', 'a', '-r'))
        flags = parse_options(argv, RM_FLAGS, validate=True)
        
        self.assertEqual(flags.enabled, frozenset({'confirm', 'recursive'}))
        self.assertNotIn('directories', flags)
    
    def test_no_flags(self):
        flags = parse_options(ArgumentVector(('ls',)), LS_FLAGS)
        self.assertFalse(flags)
    
    def test_command_name_never_parsed(self):
        flags = parse_options(ArgumentVector(('-l',)), LS_FLAGS)
        self.assertFalse(flags)
    
    def test_operands(self):
        argv = ArgumentVector(('rm', '-r', 'a', '-', 'b'))
        self.assertEqual(operands(argv), ['a', '-', 'b'])


if __name__ == '__main__':
    unittest.main()
