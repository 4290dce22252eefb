# TinyPulse Module
# -*- coding: utf-8 -*-
"""
 Python module to convert Broadlink IR/RF commands to and from pulse arrays

 For more information see README.md

 Module Functions
    set_debug(toggle, color)                    # Activate verbose debugging output
    broadlink_to_pulses(command)                # Hex command -> [carrier, pulse_1, ...]  (alias: decode)
    pulses_to_broadlink(pulses)                 # [carrier, pulse_1, ...] -> hex command  (alias: encode)
    base64_to_pulses(code_base_64)              # Base64 command -> [carrier, pulse_1, ...]
    pulses_to_base64(pulses)                    # [carrier, pulse_1, ...] -> base64 command
    parse_header(command)                       # Unpacks just the header part of a command into a BroadlinkHeader()
    print_pulses(pulses, use_log=None)          # Pretty-print a pulse array, logged at DEBUG
    is_ir_carrier(carrier)                      # True for the IR carriers 0 and 38

 Exceptions (all are ValueError subclasses)
    PulseCodecError                             # Base class
    MalformedHex, MalformedBase64, TruncatedCommand, EmptyPulseArray, ValueOutOfRange

"""

# Modules
import logging
import sys

try:
    from colorama import init
    HAVE_COLORAMA = True
except ImportError:
    HAVE_COLORAMA = False

HAVE_COLOR = HAVE_COLORAMA or not sys.platform.startswith('win')

# Colorama terminal color capability for all platforms
if HAVE_COLORAMA:
    init()

version_tuple = (1, 0, 0)  # Major, Minor, Patch
version = __version__ = "%d.%d.%d" % version_tuple
__author__ = "tinypulse contributors"

# parent of every tinypulse.core.* logger
log = logging.getLogger('tinypulse')


def set_debug(toggle=True, color=True):
    """Enable tinypulse verbose logging"""
    color = color and HAVE_COLOR
    if toggle:
        if color:
            logging.basicConfig(
                format="\x1b[31;1m%(levelname)s:%(message)s\x1b[0m", level=logging.DEBUG
            )
        else:
            logging.basicConfig(format="%(levelname)s:%(message)s", level=logging.DEBUG)
        log.setLevel(logging.DEBUG)
        log.debug("TinyPulse [%s]\n", __version__)
        log.debug("Python %s on %s", sys.version, sys.platform)
    else:
        log.setLevel(logging.NOTSET)
