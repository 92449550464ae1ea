"""RFC 4226 HOTP (HMAC-based One-Time Password) implementation."""

import logging
from typing import Optional, Union

from otp_codes import keyed_hash
from otp_codes.checksum import calc_checksum
from otp_codes.encoding import counter_to_bytes, decode_secret
from otp_codes.exceptions import InvalidInput


logger = logging.getLogger(__name__)

DEFAULT_DIGITS = 6
# 10**9 is the largest power of ten below the 31-bit binary code
MAX_DIGITS = 9

Secret = Union[bytes, bytearray, memoryview]


def _check_digits(digits: int) -> None:
    if isinstance(digits, bool) or not isinstance(digits, int):
        raise InvalidInput(f"digits must be an integer, got {type(digits).__name__}")
    if not 1 <= digits <= MAX_DIGITS:
        raise InvalidInput(f"digits must be between 1 and {MAX_DIGITS}, got {digits}")


def truncate(digest: bytes, truncation_offset: Optional[int] = None) -> int:
    """
    Extract a 31-bit integer from a MAC (RFC 4226, section 5.4).

    Args:
        digest: Output of the keyed hash.
        truncation_offset: Start of the 4-byte window. Used only when it lies
            in [0, len(digest) - 4); otherwise dynamic truncation applies.

    Returns:
        The binary code, with the top bit of the first byte cleared.
    """
    if truncation_offset is not None and 0 <= truncation_offset < len(digest) - 4:
        offset = truncation_offset
    else:
        offset = digest[-1] & 0x0F

    return (
        ((digest[offset] & 0x7F) << 24)
        | ((digest[offset + 1] & 0xFF) << 16)
        | ((digest[offset + 2] & 0xFF) << 8)
        | (digest[offset + 3] & 0xFF)
    )


def compute_code(
    secret: Secret,
    moving_factor: bytes,
    digits: int,
    algorithm: str = keyed_hash.DEFAULT_ALGORITHM,
    add_checksum: bool = False,
    truncation_offset: Optional[int] = None,
) -> str:
    """
    Run the hash -> truncate -> modulus -> pad pipeline shared by HOTP and TOTP.

    Args:
        secret: Raw key bytes.
        moving_factor: The already-encoded counter message.
        digits: Number of digits before any check digit.
        algorithm: Keyed-hash selector.
        add_checksum: Append a Luhn check digit.
        truncation_offset: Static truncation offset, or None for dynamic.

    Returns:
        A zero-padded code of `digits` (or `digits + 1`) characters.
    """
    _check_digits(digits)

    # Compute the keyed hash over the 8-byte moving factor
    digest = keyed_hash.compute(algorithm, secret, moving_factor)

    # Dynamic (or static) truncation (RFC 4226, Section 5.4)
    binary = truncate(digest, truncation_offset)

    # Generate code: binary % 10^digits
    code = binary % (10**digits)
    width = digits

    # Luhn check digit widens the code by one
    if add_checksum:
        code = code * 10 + calc_checksum(code, digits)
        width += 1

    logger.debug(
        "Generated %d-digit code (%s, checksum=%s, offset=%s)",
        width,
        algorithm,
        add_checksum,
        "dynamic" if truncation_offset is None else truncation_offset,
    )
    # Zero-pad to the full width
    return f"{code:0{width}d}"


def generate_hotp(
    secret: Secret,
    counter: int,
    digits: int = DEFAULT_DIGITS,
    add_checksum: bool = False,
    truncation_offset: Optional[int] = None,
) -> str:
    """
    Generate an HOTP code using RFC 4226 with HMAC-SHA1.

    Args:
        secret: The HOTP secret as raw bytes.
        counter: The moving counter value, 0 <= counter < 2**64.
        digits: Number of digits in the output code (default: 6, max: 9).
        add_checksum: Append a Luhn check digit, making the code digits + 1 long.
        truncation_offset: Offset into the MAC to start truncation. Values
            outside [0, 16) fall back to dynamic truncation.

    Returns:
        A zero-padded HOTP code string.

    Raises:
        InvalidInput: If the counter or digit count is out of range.
        InvalidKey: If the secret is empty.
    """
    return compute_code(
        secret,
        counter_to_bytes(counter),
        digits,
        algorithm=keyed_hash.HMAC_SHA1,
        add_checksum=add_checksum,
        truncation_offset=truncation_offset,
    )


def create(key: str, base: str, digits: int = DEFAULT_DIGITS) -> str:
    """
    Generate an HOTP code from a text key and a decimal counter string.

    The key's UTF-8 bytes are used as the secret.

    Raises:
        InvalidInput: If base is not a non-negative decimal integer.
    """
    base = base.strip()
    if not base.isascii() or not base.isdigit():
        raise InvalidInput(f"Counter must be a non-negative decimal integer, got {base!r}")
    return generate_hotp(decode_secret(key, "raw"), int(base), digits)
