#!/usr/bin/env python3
"""
spellchk Test Suite v1.0.0
==========================
Validates the logging and error infrastructure and runs the checker end to end.

Run with: python -m pytest tests.py -v
Or standalone: python tests.py
"""

import io
import json
import logging
import os
import sys
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from config_logging import (
    LogConfig, StructuredLogger, JsonFormatter,
    get_config, reset_config, get_logger,
    SpellchkError, ValidationError, FileError, DictionaryError, ConfigError
)
from spellchk import Dictionary, SpellChecker, SpellchkConfig
from spellchk.cli import main


class TestLogConfig(unittest.TestCase):
    """Test log configuration loading and validation."""

    def tearDown(self):
        reset_config()

    def test_defaults(self):
        """
        Test default log configuration.

        Expects: WARNING level, text format, console only.
        """
        with patch.dict(os.environ, {}, clear=True):
            config = LogConfig.from_env()
        self.assertEqual(config.log_level, 'WARNING')
        self.assertEqual(config.log_format, 'text')
        self.assertTrue(config.log_to_console)
        self.assertFalse(config.log_to_file)

    def test_from_env(self):
        """Test environment variables override defaults."""
        with tempfile.TemporaryDirectory() as tmp:
            env = {
                'SPELLCHK_LOG_LEVEL': 'debug',
                'SPELLCHK_LOG_FORMAT': 'json',
                'SPELLCHK_LOG_FILE': 'true',
                'SPELLCHK_LOG_DIR': tmp,
            }
            with patch.dict(os.environ, env, clear=True):
                config = LogConfig.from_env()
            self.assertEqual(config.log_level, 'DEBUG')
            self.assertEqual(config.log_format, 'json')
            self.assertTrue(config.log_to_file)
            self.assertEqual(config.log_dir, Path(tmp))

    def test_validate(self):
        """Test validation reports bad level and format."""
        valid, errors = LogConfig().validate()
        self.assertTrue(valid)
        self.assertEqual(errors, [])

        valid, errors = LogConfig(log_level='LOUD', log_format='xml').validate()
        self.assertFalse(valid)
        self.assertEqual(len(errors), 2)

    def test_singleton(self):
        """Test get_config returns the same object until reset."""
        self.assertIs(get_config(), get_config())
        first = get_config()
        reset_config()
        self.assertIsNot(first, get_config())


class TestStructuredLogger(unittest.TestCase):
    """Test the structured logger."""

    def _capture(self, logger):
        stream = io.StringIO()
        handler = logger.logger.handlers[0]
        handler.setStream(stream)
        return stream

    def test_text_context(self):
        """Test keyword context is appended to text messages."""
        logger = StructuredLogger('test_text', LogConfig(log_level='INFO'))
        stream = self._capture(logger)

        logger.info("Checked", file="a.txt", errors=2)

        self.assertIn("Checked (file=a.txt errors=2)", stream.getvalue())

    def test_json_format(self):
        """Test JSON records carry context and correlation id."""
        logger = StructuredLogger('test_json', LogConfig(log_level='INFO', log_format='json'))
        stream = self._capture(logger)

        StructuredLogger.set_correlation_id('abc123')
        logger.warning("Dropped pattern", pattern="[x")

        record = json.loads(stream.getvalue().strip())
        self.assertEqual(record['level'], 'WARNING')
        self.assertEqual(record['message'], 'Dropped pattern')
        self.assertEqual(record['pattern'], '[x')
        self.assertEqual(record['correlation_id'], 'abc123')

    def test_new_correlation_id(self):
        """Test every new correlation id differs."""
        first = StructuredLogger.new_correlation_id()
        second = StructuredLogger.new_correlation_id()
        self.assertNotEqual(first, second)
        self.assertEqual(StructuredLogger.get_correlation_id(), second)

    def test_level_filtering(self):
        """Test messages below the configured level are dropped."""
        logger = StructuredLogger('test_level', LogConfig(log_level='ERROR'))
        stream = self._capture(logger)
        logger.warning("hidden")
        logger.error("shown")
        self.assertNotIn("hidden", stream.getvalue())
        self.assertIn("shown", stream.getvalue())

    def test_log_operation_success(self):
        """Test completed operations log their duration."""
        logger = StructuredLogger('test_op', LogConfig(log_level='INFO', log_format='json'))
        stream = self._capture(logger)

        with logger.log_operation("check_file", file="a.txt"):
            pass

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        self.assertEqual(record['status'], 'completed')
        self.assertIn('duration_ms', record)
        self.assertEqual(record['file'], 'a.txt')

    def test_log_operation_failure(self):
        """Test failed operations are logged and re-raised."""
        logger = StructuredLogger('test_fail', LogConfig(log_level='INFO'))
        stream = self._capture(logger)

        with self.assertRaises(FileError):
            with logger.log_operation("check_file", file="b.txt"):
                raise FileError("Cannot read b.txt", filename="b.txt")

        self.assertIn("check_file failed", stream.getvalue())

    def test_file_handler(self):
        """Test log files are written to the log directory."""
        with tempfile.TemporaryDirectory() as tmp:
            config = LogConfig(log_level='INFO', log_to_console=False, log_to_file=True,
                               log_dir=Path(tmp))
            logger = StructuredLogger('test_file', config)
            logger.info("to file")
            for handler in logger.logger.handlers:
                handler.flush()
                handler.close()
            self.assertIn("to file", (Path(tmp) / "test_file.log").read_text(encoding='utf-8'))

    def test_json_formatter_reserved_fields(self):
        """Test reserved LogRecord attributes are not duplicated."""
        record = logging.LogRecord('x', logging.INFO, __file__, 1, "msg", None, None)
        data = json.loads(JsonFormatter().format(record))
        self.assertNotIn('lineno', data)
        self.assertEqual(data['message'], 'msg')

    def test_get_logger_cached(self):
        """Test get_logger returns one instance per name."""
        self.assertIs(get_logger('cached'), get_logger('cached'))


class TestErrorHierarchy(unittest.TestCase):
    """Test the error taxonomy."""

    def test_subclasses(self):
        """Test every error is a SpellchkError with its own code."""
        cases = [
            (ValidationError("bad", field='x'), 'VALIDATION_ERROR'),
            (FileError("io", filename='a'), 'FILE_ERROR'),
            (DictionaryError("corrupt", language='en_US'), 'DICTIONARY_ERROR'),
            (ConfigError("json", path='c.json'), 'CONFIG_ERROR'),
        ]
        for error, code in cases:
            self.assertIsInstance(error, SpellchkError)
            self.assertEqual(error.code, code)
            self.assertEqual(error.exit_code, 2)

    def test_to_dict(self):
        """Test JSON representation of an error."""
        data = DictionaryError("corrupt", language='en_US', path='/x').to_dict()
        self.assertFalse(data['success'])
        self.assertEqual(data['error']['code'], 'DICTIONARY_ERROR')
        self.assertEqual(data['error']['details'], {'language': 'en_US', 'path': '/x'})


class TestEndToEnd(unittest.TestCase):
    """Run the checker against real files."""

    def setUp(self):
        """Create an isolated data and config directory."""
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.env = patch.dict(os.environ, {
            'SPELLCHK_DATA_DIR': str(self.root / 'data'),
            'SPELLCHK_CONFIG_DIR': str(self.root / 'config'),
        })
        self.env.start()
        self.config = SpellchkConfig(personal_dictionary=self.root / 'personal.txt',
                                     data_dir=self.root / 'data')
        self.dictionary = Dictionary.from_words(["this", "is", "a", "test"])

    def tearDown(self):
        """Clean up."""
        self.env.stop()
        self.tmp.cleanup()

    def _write(self, name, content):
        path = self.root / name
        path.write_text(content, encoding='utf-8')
        return path

    def test_check_reports_misspelling(self):
        """
        Test the documented single-line example.

        Expects: one error for 'tst' on line 1 with 'test' suggested first.
        """
        path = self._write('doc.txt', 'This is a tst.')
        result = SpellChecker(self.config, self.dictionary).check(path)

        self.assertEqual(result.error_count, 1)
        self.assertEqual(result.errors[0].word, 'tst')
        self.assertEqual(result.errors[0].line, 1)
        self.assertEqual(result.errors[0].suggestions[0], 'test')

    def test_auto_fix(self):
        """
        Test auto-fix rewrites the file.

        Expects: 'This is a test.' and fixed_count == 1.
        """
        path = self._write('doc.txt', 'This is a tst.')
        result = SpellChecker(self.config, self.dictionary).fix_auto(path)

        self.assertEqual(result.fixed_count, 1)
        self.assertEqual(path.read_text(encoding='utf-8'), 'This is a test.')

    def test_bootstrap_dictionary_run(self):
        """Test a first run with no dictionary installed builds one and checks prose."""
        path = self._write('README.md', '# Example\n\nThe function returns a value.\n')
        result = SpellChecker(SpellchkConfig(data_dir=self.root / 'data')).check(path)

        self.assertEqual(result.error_count, 0)
        self.assertTrue((self.root / 'data' / 'en_US.dict').exists())

    def test_cli_exit_codes(self):
        """Test the command line exit status follows the error count."""
        Dictionary.build_from_words(["this", "is", "a", "test"],
                                    self.root / 'data' / 'en_US.dict')
        good = self._write('good.txt', 'This is a test.')
        bad = self._write('bad.txt', 'This is a tst.')

        with patch('sys.stdout', new_callable=io.StringIO):
            self.assertEqual(main([str(good), '--personal-dict', str(self.root / 'p.txt')]), 0)
            self.assertEqual(main([str(bad), '--personal-dict', str(self.root / 'p.txt')]), 1)
            self.assertEqual(main([str(bad), '--no-fail',
                                   '--personal-dict', str(self.root / 'p.txt')]), 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
