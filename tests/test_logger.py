"""
Tests for the logging helpers.
"""

import io
import json
import logging
import sys
import unittest

from contrast_color import resolve
from contrast_color.utils.logger import PACKAGE_LOGGER, JsonFormatter, get_logger, setup_logging


class TestLogging(unittest.TestCase):
    """Tests for setup_logging and JsonFormatter."""

    def setUp(self):
        self.logger = logging.getLogger(PACKAGE_LOGGER)
        self.saved_handlers = self.logger.handlers[:]
        self.saved_level = self.logger.level

    def tearDown(self):
        self.logger.handlers = self.saved_handlers
        self.logger.setLevel(self.saved_level)

    def test_setup_logging_does_not_duplicate_handlers(self):
        setup_logging("DEBUG", stream=io.StringIO())
        setup_logging("DEBUG", stream=io.StringIO())

        stream_handlers = [
            h for h in self.logger.handlers
            if isinstance(h, logging.StreamHandler)
        ]
        self.assertEqual(len(stream_handlers), 1)
        self.assertEqual(self.logger.level, logging.DEBUG)

    def test_json_diagnostics(self):
        stream = io.StringIO()
        setup_logging("WARNING", use_json=True, stream=stream)

        self.assertEqual(resolve("not-a-color"), "#000000")

        record = json.loads(stream.getvalue().strip().splitlines()[-1])
        self.assertEqual(record["level"], "WARNING")
        self.assertEqual(record["diagnostic"], "invalid_input")
        self.assertEqual(record["name"], "contrast_color.core.resolver")

    def test_json_formatter_exception(self):
        formatter = JsonFormatter()
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord(
                "test", logging.ERROR, __file__, 1, "failed", None,
                exc_info=sys.exc_info(),
            )
        data = json.loads(formatter.format(record))
        self.assertEqual(data["message"], "failed")
        self.assertIn("ValueError: boom", data["exception"])

    def test_get_logger_shares_package_handlers(self):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        child = get_logger("contrast_color.tests")
        self.assertIs(child, logging.getLogger("contrast_color.tests"))
        child.info("hello from a child logger")

        self.assertIn("hello from a child logger", stream.getvalue())

    def test_plain_format(self):
        stream = io.StringIO()
        setup_logging("INFO", stream=stream)

        resolve("#808080", strategy="complementary")

        self.assertIn("achromatic", stream.getvalue())


if __name__ == "__main__":
    unittest.main()
