# TinyPulse Module
# -*- coding: utf-8 -*-

import binascii
import logging

from .exceptions import MalformedHex, TruncatedCommand

log = logging.getLogger(__name__)


def to_decimal(hex_value):
    """Convert a hex string ('1a') to an unsigned int"""
    try:
        return int(hex_value, 16)
    except (TypeError, ValueError):
        raise MalformedHex('%r is not a hex number' % (hex_value,))

def to_hex(value):
    """Convert an unsigned int to a lowercase hex string without padding"""
    return '%x' % value

def read_next_byte(hex_command):
    """Split a hex string into its first byte and the rest

    For example '1a2b3c4d' becomes ('1a', '2b3c4d')
    """
    return hex_command[:2], hex_command[2:]

def swap_double_byte(hex_bytes):
    """Swap the two bytes of a 4-digit hex value ('1234' <-> '3412')"""
    return hex_bytes[2:] + hex_bytes[:2]

def pad_hex_byte(hex_value):
    return hex_value.rjust(2, '0')

def pad_hex_double_byte(hex_value):
    return hex_value.rjust(4, '0')

def hex2bin(hex_command):
    """Convert a hex command to bytes, raising MalformedHex on odd length or non-hex digits"""
    if isinstance(hex_command, (bytes, bytearray)):
        hex_command = hex_command.decode('ascii', 'replace')
    if not isinstance(hex_command, str):
        raise MalformedHex('expected a hex string, got %s' % type(hex_command).__name__)
    if len(hex_command) % 2:
        raise MalformedHex('odd number of hex digits (%d)' % len(hex_command))
    try:
        return binascii.unhexlify(hex_command)
    except (binascii.Error, ValueError):
        raise MalformedHex('non-hex character in %r' % hex_command)

def bin2hex(data):
    return binascii.hexlify(data).decode('ascii')


class ByteCursor(object):
    """Sequential reader over the bytes of a command"""

    def __init__(self, data, offset=0):
        self.data = bytes(data)
        self.offset = offset

    def __len__(self):
        return self.remaining

    @property
    def remaining(self):
        return len(self.data) - self.offset

    def startswith(self, prefix):
        return self.data.startswith(prefix, self.offset)

    def read_byte(self, field='byte'):
        if self.remaining < 1:
            raise TruncatedCommand('missing %s at offset %d' % (field, self.offset))
        value = self.data[self.offset]
        self.offset += 1
        return value

    def read_uint16_be(self, field='double byte'):
        if self.remaining < 2:
            raise TruncatedCommand('missing %s at offset %d, only %d byte(s) left' % (field, self.offset, self.remaining))
        value = (self.data[self.offset] << 8) | self.data[self.offset + 1]
        self.offset += 2
        return value

    def read_uint16_le(self, field='double byte'):
        value = self.read_uint16_be(field)
        return ((value >> 8) | (value << 8)) & 0xFFFF
