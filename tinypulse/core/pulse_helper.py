# TinyPulse Module
# -*- coding: utf-8 -*-
"""
 Broadlink command <-> pulse array conversion

 A Broadlink command is a hex string:
    26 00 0600 7a 000d05000000000000
    |  |  |    |  +-- IR terminator (IR only)
    |  |  |    +----- pulse fields, 1 byte or '00' + 2 bytes big-endian
    |  |  +---------- length, little-endian
    |  +------------- repeat count
    +---------------- carrier, 0x26 for IR or the RF frequency code

 A pulse array is [carrier, pulse_1, pulse_2, ...] with the pulses in
 microseconds and a carrier of 0 (or 38) for IR.  This is the layout used by
 Tasmota's `IrSend <frequency>,<pulses...>` raw format.

 Pulse values are stored as ticks of 269/8192 microseconds (about 32.84us).
"""

import base64
import binascii
import logging

from .const import (
    CARRIER_IR,
    CARRIER_IR_ALIASES,
    ESCAPE_BYTE,
    IR_TERMINATOR,
    IR_TERMINATOR_PREFIX_BIN,
    MAX_BYTE_VALUE,
    MAX_DOUBLE_BYTE_VALUE,
    TICK_DIVISOR,
    TICK_MULTIPLIER,
)
from .exceptions import EmptyPulseArray, MalformedBase64, ValueOutOfRange
from .hex_helper import ByteCursor, bin2hex, hex2bin, pad_hex_byte, pad_hex_double_byte, to_hex
from .message_helper import pack_header, unpack_header

log = logging.getLogger(__name__)


def ticks_to_microseconds(ticks):
    return (ticks * TICK_DIVISOR) // TICK_MULTIPLIER

def microseconds_to_ticks(microseconds):
    return int((microseconds * TICK_MULTIPLIER) // TICK_DIVISOR)

def is_ir_carrier(carrier):
    return carrier in CARRIER_IR_ALIASES


def broadlink_to_pulses(command):
    """Convert a Broadlink IR/RF hex command to a pulse array

    Returns [carrier, pulse_1, ...]; the carrier is 0 for IR commands.
    The length field of the header is not used, IR commands end at the
    terminator and RF commands at the last byte.
    """
    mylog = log.getChild('broadlink_to_pulses')
    cursor = ByteCursor(hex2bin(command))
    header = unpack_header(cursor)

    if header.is_ir:
        pulses = [0]
    else:
        pulses = [header.carrier]
    mylog.debug('carrier %r (%s), repeat %d, declared length %d', header.carrier, 'IR' if header.is_ir else 'RF', header.repeat, header.length)

    while cursor.remaining:
        if header.is_ir and cursor.startswith(IR_TERMINATOR_PREFIX_BIN):
            mylog.debug('IR terminator at offset %d, dropping %d byte(s)', cursor.offset, cursor.remaining)
            break
        value = cursor.read_byte('pulse')
        if value == ESCAPE_BYTE:
            # '00' flags a value that needed two bytes, i.e. 0x123 is '00 01 23'
            value = cursor.read_uint16_be('escaped pulse')
        pulses.append(ticks_to_microseconds(value))

    if mylog.isEnabledFor(logging.DEBUG):
        print_pulses(pulses, use_log=mylog)
    return pulses


def _hex_pulse(ticks):
    if ticks < 0 or ticks > MAX_DOUBLE_BYTE_VALUE:
        raise ValueOutOfRange('%d ticks do not fit in two bytes' % ticks)
    # a literal '00' byte would be read back as the escape flag
    if 0 < ticks <= MAX_BYTE_VALUE:
        return pad_hex_byte(to_hex(ticks))
    return pad_hex_byte(to_hex(ESCAPE_BYTE)) + pad_hex_double_byte(to_hex(ticks))


def pulses_to_broadlink(pulses):
    """Convert a pulse array to a Broadlink IR/RF hex command

    A carrier of 0 or 38 produces an IR command (carrier byte 0x26 and the
    IR terminator), anything else is written as the RF carrier byte.
    The caller's sequence is not modified.
    """
    mylog = log.getChild('pulses_to_broadlink')
    pulses = list(pulses)
    if not pulses:
        raise EmptyPulseArray('expected [carrier, pulse_1, ...]')

    frequency = pulses.pop(0)
    is_ir = is_ir_carrier(frequency)
    carrier = CARRIER_IR if is_ir else frequency

    command = pack_header(carrier, len(pulses))
    for i, pulse in enumerate(pulses):
        if pulse < 0:
            raise ValueOutOfRange('pulse %d is negative (%r)' % (i + 1, pulse))
        command += _hex_pulse(microseconds_to_ticks(pulse))

    if is_ir:
        command += IR_TERMINATOR
    mylog.debug('%s command with %d pulse(s): %s', 'IR' if is_ir else 'RF', len(pulses), command)
    return command


def base64_to_pulses(code_base_64):
    """Convert a base64-encoded Broadlink command (as used in SmartIR code files) to a pulse array"""
    try:
        raw_bytes = base64.b64decode(code_base_64, validate=True)
    except (binascii.Error, ValueError) as e:
        raise MalformedBase64(str(e))
    return broadlink_to_pulses(bin2hex(raw_bytes))


def pulses_to_base64(pulses):
    """Convert a pulse array to a base64-encoded Broadlink command"""
    return base64.b64encode( hex2bin(pulses_to_broadlink(pulses)) ).decode('ascii')


def print_pulses(pulses, use_log=None):
    """Pretty-print a pulse array, logging it at DEBUG"""
    if not use_log: use_log = log
    pulses = list(pulses)
    if not pulses:
        carrier = 'none'
    elif is_ir_carrier(pulses[0]):
        carrier = 'IR'
    else:
        carrier = str(pulses[0])
    message = "Carrier: %s, pulses and gaps (microseconds): " % carrier
    message += ' '.join(['%s%d' % ('p' if i % 2 == 0 else 'g', pulses[i + 1]) for i in range(len(pulses) - 1)])
    use_log.debug( message )
    return message


# Short names
decode = broadlink_to_pulses
encode = pulses_to_broadlink
