# TinyPulse Module
# -*- coding: utf-8 -*-

from collections import namedtuple
import logging

from .const import CARRIER_IR, HEADER_SIZE, LENGTH_OVERHEAD, MAX_BYTE_VALUE, MAX_DOUBLE_BYTE_VALUE, REPEAT_NONE
from .exceptions import TruncatedCommand, ValueOutOfRange
from .hex_helper import ByteCursor, hex2bin, pad_hex_byte, pad_hex_double_byte, swap_double_byte, to_hex

log = logging.getLogger(__name__)


# Broadlink Command Header
BroadlinkHeader = namedtuple('BroadlinkHeader', 'carrier is_ir repeat length')


def unpack_header(cursor):
    """Read the 4-byte header from a ByteCursor, leaving it at the first pulse field"""
    if cursor.remaining < HEADER_SIZE:
        raise TruncatedCommand('header needs %d bytes, got %d' % (HEADER_SIZE, cursor.remaining))
    carrier = cursor.read_byte('carrier')
    repeat = cursor.read_byte('repeat')
    length = cursor.read_uint16_le('length')
    return BroadlinkHeader(carrier, carrier == CARRIER_IR, repeat, length)


def parse_header(command):
    """Unpack just the header of a hex command into a BroadlinkHeader()

    The length is returned as the integer value of the little-endian field.
    """
    return unpack_header(ByteCursor(hex2bin(command)))


def pack_header(carrier, pulse_count):
    """Build the hex header for an encoded command

    carrier is the on-the-wire carrier byte (0x26 for IR), the repeat byte
    is always 'no repeat'.
    """
    if carrier < 0 or carrier > MAX_BYTE_VALUE:
        raise ValueOutOfRange('carrier %r does not fit in one byte' % carrier)

    length = pulse_count + LENGTH_OVERHEAD
    if length > MAX_DOUBLE_BYTE_VALUE:
        raise ValueOutOfRange('%d pulses do not fit in the length field' % pulse_count)

    # '002a' -> '2a00'
    hex_length = swap_double_byte( pad_hex_double_byte( to_hex(length) ) )
    return pad_hex_byte( to_hex(carrier) ) + pad_hex_byte( to_hex(REPEAT_NONE) ) + hex_length
