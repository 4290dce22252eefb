#!/usr/bin/env python3
"""
Tests for Broadlink command header packing and parsing
"""

import unittest

from tinypulse import BroadlinkHeader, MalformedHex, TruncatedCommand, ValueOutOfRange, parse_header
from tinypulse.core.message_helper import pack_header


class TestParseHeader(unittest.TestCase):
    def test_ir_header(self):
        header = parse_header('26000a00000127931212000d05000000000000')
        self.assertEqual(header, BroadlinkHeader(carrier=0x26, is_ir=True, repeat=0, length=10))

    def test_rf_header(self):
        header = parse_header('b2033201')
        self.assertEqual(header.carrier, 0xb2)
        self.assertFalse(header.is_ir)
        self.assertEqual(header.repeat, 3)
        self.assertEqual(header.length, 0x0132)

    def test_short_header(self):
        with self.assertRaises(TruncatedCommand):
            parse_header('260000')

    def test_malformed(self):
        with self.assertRaises(MalformedHex):
            parse_header('2600000')


class TestPackHeader(unittest.TestCase):
    def test_ir(self):
        self.assertEqual(pack_header(0x26, 4), '26000a00')

    def test_rf(self):
        self.assertEqual(pack_header(5, 0), '05000600')

    def test_little_endian_length(self):
        self.assertEqual(pack_header(100, 300), '64003201')
        self.assertEqual(parse_header(pack_header(100, 300)).length, 306)

    def test_limits(self):
        self.assertEqual(pack_header(255, 0xFFFF - 6), 'ff00ffff')
        with self.assertRaises(ValueOutOfRange):
            pack_header(255, 0xFFFF - 5)
        with self.assertRaises(ValueOutOfRange):
            pack_header(256, 1)


if __name__ == '__main__':
    unittest.main()
