"""Keyed-hash (HMAC) primitive shared by the HOTP and TOTP generators."""

import logging
from typing import Dict, Type, Union

from cryptography import exceptions as crypto_exceptions
from cryptography.hazmat.primitives import hashes, hmac

from otp_codes.exceptions import InvalidKey, UnsupportedAlgorithm


logger = logging.getLogger(__name__)

HMAC_SHA1 = "HmacSHA1"
HMAC_SHA256 = "HmacSHA256"
HMAC_SHA512 = "HmacSHA512"

DEFAULT_ALGORITHM = HMAC_SHA1

_HASHES: Dict[str, Type[hashes.HashAlgorithm]] = {
    HMAC_SHA1: hashes.SHA1,
    HMAC_SHA256: hashes.SHA256,
    HMAC_SHA512: hashes.SHA512,
}


def _canonical_name(algorithm: str) -> str:
    """
    Map an algorithm selector onto one of the HmacSHA* names.

    Accepts the JCE-style names ("HmacSHA256") as well as "SHA256",
    "SHA-256" and "HMAC-SHA-256", case-insensitively.

    Raises:
        UnsupportedAlgorithm: If the selector names no supported hash.
    """
    if not isinstance(algorithm, str):
        raise UnsupportedAlgorithm(f"Algorithm selector must be a string, got {algorithm!r}")

    name = algorithm.strip().upper().replace("-", "").replace("_", "")
    if name.startswith("HMAC"):
        name = name[4:]
    for canonical in _HASHES:
        if canonical.upper()[4:] == name:
            return canonical
    raise UnsupportedAlgorithm(f"Unsupported keyed-hash algorithm: {algorithm}")


def supported_algorithms() -> list[str]:
    """Return the canonical names of the supported algorithms."""
    return list(_HASHES)


def digest_size(algorithm: str = DEFAULT_ALGORITHM) -> int:
    """Return the output length in bytes of the given algorithm."""
    return _HASHES[_canonical_name(algorithm)].digest_size


def compute(
    algorithm: str, key: Union[bytes, bytearray, memoryview], message: bytes
) -> bytes:
    """
    Compute HMAC(key, message) with the requested hash function.

    The key is used as-is; there is no key-derivation step.

    Args:
        algorithm: One of "HmacSHA1", "HmacSHA256", "HmacSHA512" (or an alias).
        key: Raw secret bytes.
        message: The message to authenticate (an 8-byte counter for OTPs).

    Returns:
        The MAC bytes (20, 32 or 64 bytes long).

    Raises:
        UnsupportedAlgorithm: If the hash is unknown or unavailable in the backend.
        InvalidKey: If the key is empty or not a bytes-like object.
    """
    name = _canonical_name(algorithm)

    if not isinstance(key, (bytes, bytearray, memoryview)):
        raise InvalidKey(f"Secret must be bytes, got {type(key).__name__}")
    if len(key) == 0:
        raise InvalidKey("Secret must not be empty")

    try:
        mac = hmac.HMAC(bytes(key), _HASHES[name]())
    except crypto_exceptions.UnsupportedAlgorithm as e:
        raise UnsupportedAlgorithm(f"{name} is not available in this crypto backend") from e
    except (TypeError, ValueError) as e:
        raise InvalidKey(f"Secret rejected by the crypto backend: {e}") from e

    mac.update(message)
    logger.debug("Computed %s over %d-byte message", name, len(message))
    return mac.finalize()
