"""RFC 6238 TOTP (Time-based One-Time Password) implementation."""

import logging
import time
from typing import Optional

from otp_codes import keyed_hash
from otp_codes.encoding import COUNTER_BYTES, hex_to_bytes
from otp_codes.exceptions import InvalidInput
from otp_codes.hotp import DEFAULT_DIGITS, compute_code


logger = logging.getLogger(__name__)

DEFAULT_PERIOD = 30  # seconds
COUNTER_HEX_LENGTH = 2 * COUNTER_BYTES


def generate_totp(
    secret_hex: str,
    time_hex: str,
    digits: int = DEFAULT_DIGITS,
    algorithm: str = keyed_hash.DEFAULT_ALGORITHM,
) -> str:
    """
    Generate a TOTP code using RFC 6238.

    Args:
        secret_hex: The shared secret, hex encoded.
        time_hex: The time step counter, floor((now - T0) / period), hex encoded.
            It is left-padded with "0" to 16 characters.
        digits: Number of digits in the output code (default: 6).
        algorithm: "HmacSHA1" (default), "HmacSHA256" or "HmacSHA512".

    Returns:
        A zero-padded TOTP code string.

    Raises:
        InvalidInput: If either hex string is malformed or time_hex is longer
            than 16 characters.
        InvalidKey: If the secret is empty.
        UnsupportedAlgorithm: If the algorithm is not supported.
    """
    if not isinstance(time_hex, str):
        raise InvalidInput(f"Time step must be a hex string, got {type(time_hex).__name__}")
    if len(time_hex) > COUNTER_HEX_LENGTH:
        raise InvalidInput(
            f"Time step must fit in {COUNTER_HEX_LENGTH} hex characters, got {len(time_hex)}"
        )

    message = hex_to_bytes(time_hex.rjust(COUNTER_HEX_LENGTH, "0"))
    key = hex_to_bytes(secret_hex)
    return compute_code(key, message, digits, algorithm=algorithm)


def create(secret_hex: str, base: str, digits: int = DEFAULT_DIGITS) -> str:
    """Generate an HMAC-SHA1 TOTP code from a hex secret and hex time step."""
    return generate_totp(secret_hex, base, digits, keyed_hash.HMAC_SHA1)


def _time_offset(timestamp: Optional[float], period: int, t0: int) -> float:
    if period <= 0:
        raise InvalidInput(f"period must be positive, got {period}")
    if timestamp is None:
        timestamp = time.time()
    if timestamp < t0:
        raise InvalidInput(f"timestamp {timestamp} is before T0 ({t0})")
    return timestamp - t0


def time_step_hex(
    timestamp: Optional[float] = None, period: int = DEFAULT_PERIOD, t0: int = 0
) -> str:
    """
    Render the current time step as an upper-case hex string.

    Args:
        timestamp: Unix time in seconds (default: now).
        period: Step size in seconds (default: 30).
        t0: Unix time to start counting steps from (default: 0).

    Returns:
        floor((timestamp - t0) / period) in hex, without padding.
    """
    steps = int(_time_offset(timestamp, period, t0) // period)
    logger.debug("Time step %d for period %ds", steps, period)
    return format(steps, "X")


def seconds_remaining(
    timestamp: Optional[float] = None, period: int = DEFAULT_PERIOD, t0: int = 0
) -> int:
    """Return how many whole seconds are left in the current time step."""
    elapsed = _time_offset(timestamp, period, t0)
    return int(period - (elapsed % period))
