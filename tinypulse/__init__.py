# TinyPulse Module
# -*- coding: utf-8 -*-
"""
 Python module to convert Broadlink IR/RF commands to and from pulse arrays

 Functions
    pulses = decode(command)        # '2600...' -> [0, 9000, 4500, ...]
    command = encode(pulses)        # [0, 9000, 4500, ...] -> '2600...'

    broadlink_to_pulses(command)    # same as decode()
    pulses_to_broadlink(pulses)     # same as encode()
    base64_to_pulses(code_base_64)
    pulses_to_base64(pulses)
    parse_header(command)           # -> BroadlinkHeader(carrier, is_ir, repeat, length)
    print_pulses(pulses)
    set_debug(toggle=True, color=True)

 Pulse arrays start with the carrier: 0 or 38 for IR, otherwise the RF
 frequency code.  The remaining values are pulse and gap lengths in
 microseconds, i.e. what Tasmota shows as RawData.

"""

from .core import *
from .core import __version__
from .core import __author__
