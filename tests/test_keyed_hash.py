"""Tests for the keyed-hash primitive."""

from unittest.mock import patch

import pytest
from cryptography import exceptions as crypto_exceptions

from otp_codes import keyed_hash
from otp_codes.exceptions import InvalidKey, OTPError, UnsupportedAlgorithm


# RFC 2202 / RFC 4231 test case 1
KEY = b"\x0b" * 20
MESSAGE = b"Hi There"
EXPECTED = {
    "HmacSHA1": "b617318655057264e28bc0b6fb378c8ef146be00",
    "HmacSHA256": "b0344c61d8db38535ca8afceaf0bf12b881dc200c9833da726e9376c2e32cff7",
    "HmacSHA512": (
        "87aa7cdea5ef619d4ff0b4241a1d6cb02379f4e2ce4ec2787ad0b30545e17cde"
        "daa833b7d6b8a702038b274eaea3f4e4be9d914eeb61f1702e696c203a126854"
    ),
}


@pytest.mark.parametrize("algorithm,expected", sorted(EXPECTED.items()))
def test_known_answers(algorithm, expected):
    assert keyed_hash.compute(algorithm, KEY, MESSAGE).hex() == expected


@pytest.mark.parametrize(
    "algorithm,size",
    [("HmacSHA1", 20), ("HmacSHA256", 32), ("HmacSHA512", 64), ("sha512", 64)],
)
def test_digest_size(algorithm, size):
    assert keyed_hash.digest_size(algorithm) == size
    assert len(keyed_hash.compute(algorithm, KEY, b"\x00" * 8)) == size


@pytest.mark.parametrize("alias", ["HmacSHA1", "hmacsha1", "SHA1", "sha-1", "HMAC-SHA-1", " SHA_1 "])
def test_aliases(alias):
    assert keyed_hash.compute(alias, KEY, MESSAGE).hex() == EXPECTED["HmacSHA1"]


def test_default_algorithm():
    assert keyed_hash.DEFAULT_ALGORITHM == "HmacSHA1"
    assert keyed_hash.supported_algorithms() == ["HmacSHA1", "HmacSHA256", "HmacSHA512"]


@pytest.mark.parametrize("algorithm", ["HmacMD5", "SHA3-256", "", "HmacSHA384", None])
def test_unsupported_algorithm(algorithm):
    with pytest.raises(UnsupportedAlgorithm):
        keyed_hash.compute(algorithm, KEY, MESSAGE)


def test_unsupported_algorithm_is_otp_error():
    assert issubclass(UnsupportedAlgorithm, OTPError)


def test_backend_unsupported_algorithm_is_translated():
    with patch(
        "otp_codes.keyed_hash.hmac.HMAC",
        side_effect=crypto_exceptions.UnsupportedAlgorithm("no sha1 here"),
    ):
        with pytest.raises(UnsupportedAlgorithm, match="HmacSHA1"):
            keyed_hash.compute("HmacSHA1", KEY, MESSAGE)


def test_backend_rejected_key_is_translated():
    with patch("otp_codes.keyed_hash.hmac.HMAC", side_effect=ValueError("bad key")):
        with pytest.raises(InvalidKey, match="rejected"):
            keyed_hash.compute("HmacSHA1", KEY, MESSAGE)


@pytest.mark.parametrize("key", [b"", bytearray(), "secret", None, 1234])
def test_invalid_key(key):
    with pytest.raises(InvalidKey):
        keyed_hash.compute("HmacSHA1", key, MESSAGE)


def test_error_messages_do_not_contain_secret():
    with pytest.raises(InvalidKey) as excinfo:
        keyed_hash.compute("HmacSHA1", "my-very-secret-key", MESSAGE)
    assert "my-very-secret-key" not in str(excinfo.value)


def test_bytearray_and_memoryview_keys():
    expected = keyed_hash.compute("HmacSHA1", KEY, MESSAGE)
    assert keyed_hash.compute("HmacSHA1", bytearray(KEY), MESSAGE) == expected
    assert keyed_hash.compute("HmacSHA1", memoryview(KEY), MESSAGE) == expected
