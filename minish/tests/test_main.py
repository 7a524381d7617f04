"""
Entry Point Tests

Author: YSNRFD
Version: 1.0.0
"""

import io
import json
import os
import tempfile
import unittest
from unittest import mock

from minish.core.config_loader import ConfigLoader
from minish.main import build_arg_parser, main


class TestMain(unittest.TestCase):
    """Test start-up and shutdown of the shell process."""
    
    def setUp(self):
        ConfigLoader().reset()
        self._tmp = tempfile.TemporaryDirectory()
        self.stderr = io.StringIO()
        self.stdout = io.StringIO()
        patches = [
            mock.patch('minish.main.Logger.initialize'),
            mock.patch('sys.stderr', self.stderr),
            mock.patch('sys.stdout', self.stdout),
        ]
        for patcher in patches:
            patcher.start()
            self.addCleanup(patcher.stop)
    
    def tearDown(self):
        ConfigLoader().reset()
        self._tmp.cleanup()
    
    def test_arguments(self):
        args = build_arg_parser().parse_args(['--config', 'a.json', '--log-level', 'debug'])
        
        self.assertEqual(args.config, 'a.json')
        self.assertEqual(args.log_level, 'debug')
        self.assertIsNone(args.log_file)
    
    def test_missing_config(self):
        code = main(['--config', os.path.join(self._tmp.name, 'absent.json')])
        
        self.assertEqual(code, 1)
        self.assertIn('Error: Configuration file not found', self.stderr.getvalue())
    
    def test_bad_log_level(self):
        code = main(['--log-level', 'loud'])
        
        self.assertEqual(code, 1)
        self.assertIn('Error: Unknown log level: loud', self.stderr.getvalue())
    
    def test_session(self):
        path = os.path.join(self._tmp.name, 'minish.json')
        with open(path, 'w', encoding='utf-8') as f:
            json.dump({'shell': {'prompt': '> '}, 'logging': {'console_output': False}}, f)
        
        with mock.patch('sys.stdin', io.StringIO('echo hello\nexit\n')):
            code = main(['--config', path])
        
        self.assertEqual(code, 0)
        self.assertEqual(self.stdout.getvalue(), '> hello\n> ')


if __name__ == '__main__':
    unittest.main()
