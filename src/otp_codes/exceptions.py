"""Exception types raised by otp-codes."""


class OTPError(Exception):
    """Base class for every error raised while generating a code."""


class UnsupportedAlgorithm(OTPError):
    """The requested keyed-hash algorithm is not available."""


class InvalidKey(OTPError, ValueError):
    """The secret was empty or rejected by the crypto provider."""


class InvalidInput(OTPError, ValueError):
    """Malformed hex, out-of-range counter, or unsupported digit count."""
