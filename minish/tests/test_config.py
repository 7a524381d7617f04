"""
Configuration Tests

Author: YSNRFD
Version: 1.0.0
"""

import json
import os
import tempfile
import unittest

from minish.core.config_loader import Config, ConfigLoader, get_config
from minish.exceptions import ConfigError


class TestConfigLoader(unittest.TestCase):
    """Test configuration loading."""
    
    def setUp(self):
        self.loader = ConfigLoader()
        self.loader.reset()
        self._tmp = tempfile.TemporaryDirectory()
    
    def tearDown(self):
        self.loader.reset()
        self._tmp.cleanup()
    
    def write_config(self, data, name='minish.json'):
        path = os.path.join(self._tmp.name, name)
        with open(path, 'w', encoding='utf-8') as f:
            if isinstance(data, str):
                f.write(data)
            else:
                json.dump(data, f)
        return path
    
    def test_defaults(self):
        config = Config()
        
        self.assertEqual(config.shell.prompt, '£ ')
        self.assertEqual(config.shell.max_line_length, 100)
        self.assertEqual(config.shell.exit_keyword, 'exit')
        self.assertEqual(config.filesystem.file_mode, 0o744)
        self.assertEqual(config.filesystem.directory_mode, 0o744)
        self.assertEqual(config.process.compiler, 'gcc')
        self.assertEqual(config.logging.level, 'WARNING')
    
    def test_singleton(self):
        self.assertIs(ConfigLoader(), self.loader)
    
    def test_load(self):
        path = self.write_config({
            'shell': {'prompt': '$ ', 'max_line_length': 256},
            'filesystem': {'file_mode': '0644'},
            'process': {'compiler': 'cc'},
        })
        
        config = self.loader.load(path)
        
        self.assertEqual(config.shell.prompt, '$ ')
        self.assertEqual(config.shell.max_line_length, 256)
        self.assertEqual(config.shell.exit_keyword, 'exit')
        self.assertEqual(config.filesystem.file_mode, 0o644)
        self.assertEqual(config.filesystem.directory_mode, 0o744)
        self.assertEqual(config.process.compiler, 'cc')
        self.assertIs(get_config(), config)
    
    def test_missing_file(self):
        with self.assertRaises(ConfigError) as ctx:
            self.loader.load(os.path.join(self._tmp.name, 'absent.json'))
        
        self.assertFalse(ctx.exception.recoverable)
        self.assertIn('not found', ctx.exception.message)
    
    def test_invalid_json(self):
        path = self.write_config('{"shell": ')
        
        with self.assertRaises(ConfigError) as ctx:
            self.loader.load(path)
        
        self.assertIn('Invalid JSON', ctx.exception.message)
    
    def test_root_must_be_object(self):
        with self.assertRaises(ConfigError):
            self.loader.load(self.write_config([1, 2, 3]))
    
    def test_invalid_values(self):
        cases = [
            {'shell': {'max_line_length': 0}},
            {'shell': {'exit_keyword': ''}},
            {'filesystem': {'file_mode': 'rwx'}},
            {'filesystem': {'directory_mode': True}},
            {'process': {'compiler': ''}},
        ]
        for data in cases:
            with self.subTest(data=data):
                with self.assertRaises(ConfigError):
                    self.loader.load(self.write_config(data))
    
    def test_get_and_set(self):
        self.assertEqual(self.loader.get('shell.prompt'), '£ ')
        self.assertEqual(self.loader.get('shell.nothing', 'fallback'), 'fallback')
        
        self.loader.set('shell.exit_keyword', 'quit')
        
        self.assertEqual(self.loader.get('shell.exit_keyword'), 'quit')
        self.assertEqual(get_config().shell.exit_keyword, 'quit')
    
    def test_set_invalid_key(self):
        with self.assertRaises(ConfigError):
            self.loader.set('shell.nothing', 1)
        with self.assertRaises(ConfigError):
            self.loader.set('nowhere.prompt', 1)
    
    def test_to_dict(self):
        data = self.loader.to_dict()
        
        self.assertEqual(data['shell']['max_line_length'], 100)
        self.assertEqual(data['process']['source_extension'], '.c')
        self.assertIsNone(data['logging']['log_file'])


if __name__ == '__main__':
    unittest.main()
