"""
Logger Tests

Author: YSNRFD
Version: 1.0.0
"""

import logging
import unittest

from minish.logger import LogFormatter, Logger, LogLevel, get_logger


class TestLogger(unittest.TestCase):
    """Test the logging facade."""
    
    def test_level_from_name(self):
        self.assertEqual(LogLevel.from_name('debug'), LogLevel.DEBUG)
        self.assertEqual(LogLevel.from_name('WARNING'), LogLevel.WARNING)
        
        with self.assertRaises(ValueError):
            LogLevel.from_name('verbose')
    
    def test_subsystem_singleton(self):
        self.assertIs(get_logger('dispatcher'), Logger('dispatcher'))
        self.assertIsNot(get_logger('dispatcher'), get_logger('process'))
        self.assertEqual(get_logger('process').subsystem, 'process')
    
    def test_records_carry_context(self):
        with self.assertLogs('minish.tests', level='INFO') as captured:
            get_logger('tests').info("Hello", context={'a': 1})
        
        record = captured.records[0]
        self.assertEqual(record.getMessage(), 'Hello')
        self.assertEqual(record.subsystem, 'tests')
        self.assertEqual(record.context, {'a': 1})


class TestLogFormatter(unittest.TestCase):
    """Test log record formatting."""
    
    def make_record(self, **extra):
        record = logging.LogRecord(
            'minish.shell', logging.WARNING, __file__, 1, 'Line too long', None, None
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record
    
    def test_format(self):
        formatter = LogFormatter(use_colors=False)
        
        text = formatter.format(self.make_record(subsystem='shell', context={'max': 100}))
        
        self.assertIn('WARNING', text)
        self.assertIn('[shell] Line too long {max=100}', text)
        self.assertNotIn('\033[', text)
    
    def test_format_without_extras(self):
        text = LogFormatter(use_colors=False).format(self.make_record())
        self.assertTrue(text.endswith('Line too long'))


if __name__ == '__main__':
    unittest.main()
