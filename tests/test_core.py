#!/usr/bin/env python3
"""
Tests for logging setup, version info and the error classes
"""

import logging
import unittest

import tinypulse
from tinypulse.core import exceptions


class TestSetDebug(unittest.TestCase):
    def tearDown(self):
        tinypulse.set_debug(False)

    def test_toggle(self):
        log = logging.getLogger('tinypulse')
        tinypulse.set_debug(True, color=False)
        self.assertEqual(log.level, logging.DEBUG)
        self.assertTrue(logging.getLogger('tinypulse.core.pulse_helper').isEnabledFor(logging.DEBUG))
        tinypulse.set_debug(False)
        self.assertEqual(log.level, logging.NOTSET)

    def test_version(self):
        self.assertEqual(tinypulse.__version__, '%d.%d.%d' % tinypulse.version_tuple)


class TestErrors(unittest.TestCase):
    def test_hierarchy(self):
        for cls in (tinypulse.MalformedHex, tinypulse.MalformedBase64, tinypulse.TruncatedCommand,
                    tinypulse.EmptyPulseArray, tinypulse.ValueOutOfRange):
            self.assertTrue(issubclass(cls, tinypulse.PulseCodecError))
            self.assertTrue(issubclass(cls, ValueError))

    def test_codes_and_messages(self):
        e = tinypulse.TruncatedCommand('missing pulse at offset 5')
        self.assertEqual(e.err, exceptions.ERR_TRUNCATED)
        self.assertEqual(e.detail, 'missing pulse at offset 5')
        self.assertEqual(str(e), 'Command ended in the middle of a field: missing pulse at offset 5')

    def test_message_without_detail(self):
        self.assertEqual(str(tinypulse.EmptyPulseArray()), exceptions.error_codes[exceptions.ERR_EMPTY])
        self.assertEqual(str(tinypulse.PulseCodecError()), 'Unknown Error')

    def test_raised_error_code(self):
        try:
            tinypulse.encode([])
        except tinypulse.PulseCodecError as e:
            self.assertEqual(e.err, exceptions.ERR_EMPTY)
        else:
            self.fail('EmptyPulseArray not raised')


if __name__ == '__main__':
    unittest.main()
