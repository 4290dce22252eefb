# TinyPulse Module
# -*- coding: utf-8 -*-

# Error Codes
ERR_MALFORMED_HEX = 1001
ERR_MALFORMED_B64 = 1002
ERR_TRUNCATED     = 1003
ERR_EMPTY         = 1004
ERR_RANGE         = 1005

error_codes = {
    ERR_MALFORMED_HEX: "Command is not a valid hex string",
    ERR_MALFORMED_B64: "Command is not valid base64",
    ERR_TRUNCATED: "Command ended in the middle of a field",
    ERR_EMPTY: "Pulse array has no carrier element",
    ERR_RANGE: "Value cannot be represented in a Broadlink command",
    None: "Unknown Error",
}


class PulseCodecError(ValueError):
    """Base class for all conversion errors, carries an ERR_* code"""
    err = None

    def __init__(self, detail=None):
        self.detail = detail
        message = error_codes.get(self.err, error_codes[None])
        if detail:
            message = '%s: %s' % (message, detail)
        super(PulseCodecError, self).__init__(message)

class MalformedHex(PulseCodecError):
    err = ERR_MALFORMED_HEX

class MalformedBase64(PulseCodecError):
    err = ERR_MALFORMED_B64

class TruncatedCommand(PulseCodecError):
    err = ERR_TRUNCATED

class EmptyPulseArray(PulseCodecError):
    err = ERR_EMPTY

class ValueOutOfRange(PulseCodecError):
    err = ERR_RANGE
