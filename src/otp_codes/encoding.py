"""Byte-level encoding helpers for secrets and moving factors."""

import base64
import binascii
import re

from otp_codes.exceptions import InvalidInput


COUNTER_BYTES = 8
MAX_COUNTER = 2 ** (8 * COUNTER_BYTES) - 1

SECRET_ENCODINGS = ("raw", "hex", "base32", "base64")

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def counter_to_bytes(counter: int) -> bytes:
    """
    Encode a moving factor as 8 bytes, big-endian (RFC 4226, section 5.3).

    Raises:
        InvalidInput: If the counter is not an integer in [0, 2**64).
    """
    if isinstance(counter, bool) or not isinstance(counter, int):
        raise InvalidInput(f"Counter must be an integer, got {type(counter).__name__}")
    if not 0 <= counter <= MAX_COUNTER:
        raise InvalidInput(f"Counter must be between 0 and {MAX_COUNTER}, got {counter}")
    return counter.to_bytes(COUNTER_BYTES, byteorder="big")


def hex_to_bytes(hex_string: str) -> bytes:
    """
    Decode a hexadecimal string without losing leading zero nibbles.

    An odd-length string is read as if it carried one extra leading "0".

    Args:
        hex_string: Hex digits only, no "0x" prefix and no whitespace.

    Returns:
        Decoded bytes; an empty string decodes to b"".

    Raises:
        InvalidInput: If the string contains anything other than hex digits.
    """
    if not isinstance(hex_string, str):
        raise InvalidInput(f"Hex value must be a string, got {type(hex_string).__name__}")
    if not _HEX_RE.fullmatch(hex_string):
        raise InvalidInput("Hex value contains non-hexadecimal characters")

    if len(hex_string) % 2:
        hex_string = "0" + hex_string
    return binascii.unhexlify(hex_string)


def decode_secret(secret: str, encoding: str = "raw") -> bytes:
    """
    Decode a secret typed on the command line into raw key bytes.

    Args:
        secret: The encoded secret string.
        encoding: One of "raw" (UTF-8 text), "hex", "base32", "base64".

    Returns:
        Decoded secret as bytes.

    Raises:
        InvalidInput: If the encoding is unknown or the secret cannot be decoded.
    """
    if encoding == "raw":
        try:
            return secret.encode("utf-8")
        except UnicodeEncodeError as e:
            raise InvalidInput("Secret is not valid UTF-8 text") from e

    secret = secret.strip()
    if encoding == "hex":
        return hex_to_bytes(secret)

    if encoding == "base32":
        # Authenticator apps usually drop the "=" padding
        padded = secret.replace(" ", "").upper()
        padded += "=" * (-len(padded) % 8)
        try:
            return base64.b32decode(padded, casefold=True)
        except binascii.Error as e:
            raise InvalidInput(f"Unable to decode secret from Base32: {e}") from e

    if encoding == "base64":
        padded = secret + "=" * (-len(secret) % 4)
        try:
            return base64.b64decode(padded, validate=True)
        except binascii.Error as e:
            raise InvalidInput(f"Unable to decode secret from Base64: {e}") from e

    raise InvalidInput(
        f"Unknown secret encoding '{encoding}' (expected one of {', '.join(SECRET_ENCODINGS)})"
    )
