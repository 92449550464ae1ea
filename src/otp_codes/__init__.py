"""HOTP (RFC 4226) and TOTP (RFC 6238) one-time password code generation."""

import logging

from otp_codes.checksum import calc_checksum, has_valid_checksum
from otp_codes.exceptions import (
    InvalidInput,
    InvalidKey,
    OTPError,
    UnsupportedAlgorithm,
)
from otp_codes.hotp import generate_hotp
from otp_codes.otp import OTPType, create
from otp_codes.totp import generate_totp, time_step_hex

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "InvalidInput",
    "InvalidKey",
    "OTPError",
    "OTPType",
    "UnsupportedAlgorithm",
    "calc_checksum",
    "create",
    "generate_hotp",
    "generate_totp",
    "has_valid_checksum",
    "time_step_hex",
]
