"""Select between HOTP and TOTP generation at the call site."""

from enum import Enum

from otp_codes import hotp, totp
from otp_codes.exceptions import InvalidInput
from otp_codes.hotp import DEFAULT_DIGITS


class OTPType(Enum):
    """The two one-time password flavours."""

    HOTP = "hotp"
    TOTP = "totp"


def create(
    secret: str, base: str, digits: int = DEFAULT_DIGITS, otp_type: OTPType = OTPType.TOTP
) -> str:
    """
    Create a one-time password with the given secret, base and digits.

    For HOTP the secret is text and base is a decimal counter. For TOTP the
    secret is hex and base is the hex time step (see totp.time_step_hex).

    Raises:
        OTPError: Any generation failure; no code is ever returned on error.
    """
    if otp_type is OTPType.HOTP:
        return hotp.create(secret, base, digits)
    if otp_type is OTPType.TOTP:
        return totp.create(secret, base, digits)
    raise InvalidInput(f"Unknown OTP type: {otp_type!r}")
