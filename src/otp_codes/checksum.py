"""Luhn (credit card) check digit for HOTP codes."""

from otp_codes.exceptions import InvalidInput


# Digit sum of 2*d for d in 0..9
DOUBLE_DIGITS = (0, 2, 4, 6, 8, 1, 3, 5, 7, 9)


def calc_checksum(number: int, significant_digits: int) -> int:
    """
    Calculate the check digit for a number using the credit card algorithm.

    The least significant digit and every second digit after it are doubled.
    The result detects any single mistyped digit and any single transposition
    of adjacent digits.

    Args:
        number: The number to calculate the check digit for.
        significant_digits: Number of significant places in the number.

    Returns:
        The check digit, 0-9.

    Raises:
        InvalidInput: If either argument is negative.
    """
    if significant_digits < 0:
        raise InvalidInput(f"significant_digits must be non-negative, got {significant_digits}")
    if number < 0:
        raise InvalidInput(f"number must be non-negative, got {number}")

    double_digit = True
    total = 0
    for _ in range(significant_digits):
        number, digit = divmod(number, 10)
        if double_digit:
            digit = DOUBLE_DIGITS[digit]
        total += digit
        double_digit = not double_digit
    return (10 - total % 10) % 10


def has_valid_checksum(code: str) -> bool:
    """
    Check a code whose final character is a check digit from calc_checksum.

    Raises:
        InvalidInput: If the code is shorter than two characters or not all digits.
    """
    if len(code) < 2 or not code.isascii() or not code.isdigit():
        raise InvalidInput("Code must be at least two decimal digits")

    body, check = code[:-1], int(code[-1])
    return calc_checksum(int(body), len(body)) == check
