# TinyPulse Module
# -*- coding: utf-8 -*-

# Broadlink Command Layout
CARRIER_IR        = 0x26    # 38 - carrier byte of an IR command
CARRIER_IR_ALIASES = (0, 38) # pulse array carriers that mean IR
REPEAT_NONE       = 0x00    # repeat byte written by the encoder
HEADER_SIZE       = 4       # carrier(1) + repeat(1) + length(2, little-endian)
LENGTH_OVERHEAD   = 6       # added to the pulse count in the length field
ESCAPE_BYTE       = 0x00    # next two bytes hold a big-endian value

# IR end-of-sequence
IR_TERMINATOR     = '000d05000000000000'
IR_TERMINATOR_PREFIX = '000d05'
IR_TERMINATOR_BIN = bytes.fromhex(IR_TERMINATOR)
IR_TERMINATOR_PREFIX_BIN = bytes.fromhex(IR_TERMINATOR_PREFIX)

# Tick Conversion: ticks = us * 269 / 8192, us = ticks * 8192 / 269
TICK_MULTIPLIER   = 269
TICK_DIVISOR      = 8192

# Field Limits
MAX_BYTE_VALUE    = 0xFF
MAX_DOUBLE_BYTE_VALUE = 0xFFFF
