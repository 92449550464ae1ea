"""Command-line interface for otp-codes."""

import argparse
import logging
import sys
import time
from typing import Optional

from otp_codes import keyed_hash
from otp_codes.checksum import calc_checksum
from otp_codes.encoding import SECRET_ENCODINGS, decode_secret
from otp_codes.exceptions import OTPError
from otp_codes.hotp import DEFAULT_DIGITS, MAX_DIGITS, generate_hotp
from otp_codes.totp import (
    DEFAULT_PERIOD,
    generate_totp,
    seconds_remaining,
    time_step_hex,
)


logger = logging.getLogger(__name__)

DIGIT_CHOICES = range(1, MAX_DIGITS + 1)


def hotp_command(args: argparse.Namespace) -> int:
    """Handle the hotp command."""
    try:
        secret = decode_secret(args.secret, args.encoding)
        code = generate_hotp(
            secret,
            args.counter,
            digits=args.digits,
            add_checksum=args.checksum,
            truncation_offset=args.offset,
        )
        print(code)
        return 0
    except OTPError as e:
        print(f"✗ Failed to generate code: {e}", file=sys.stderr)
        return 1


def totp_command(args: argparse.Namespace) -> int:
    """Handle the totp command."""
    try:
        # One clock read so the code and its remaining lifetime agree
        now = args.timestamp if args.timestamp is not None else time.time()
        time_hex = args.time_hex
        if time_hex is None:
            time_hex = time_step_hex(now, period=args.period)
        code = generate_totp(args.secret_hex, time_hex, args.digits, args.algorithm)
        print(code)
        if args.time_hex is None:
            remaining = seconds_remaining(now, period=args.period)
            print(f"  valid for {remaining}s", file=sys.stderr)
        return 0
    except OTPError as e:
        print(f"✗ Failed to generate code: {e}", file=sys.stderr)
        return 1


def checksum_command(args: argparse.Namespace) -> int:
    """Handle the checksum command."""
    number: str = args.number
    if not number.isascii() or not number.isdigit():
        print(f"✗ Not a decimal number: {number}", file=sys.stderr)
        return 1

    digits = args.digits if args.digits is not None else len(number)
    try:
        check = calc_checksum(int(number), digits)
    except (OTPError, ValueError) as e:
        print(f"✗ {e}", file=sys.stderr)
        return 1

    # Only the significant digits are covered by the check digit
    if digits < len(number):
        number = number[len(number) - digits :]
    else:
        number = number.rjust(digits, "0")
    print(f"{number}{check}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all subcommands."""
    parser = argparse.ArgumentParser(
        description="HOTP/TOTP one-time password generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log debug output to stderr",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # HOTP command
    hotp_parser = subparsers.add_parser(
        "hotp",
        aliases=["counter"],
        help="Generate an HOTP code for a counter value",
    )
    hotp_parser.add_argument("secret", help="Shared secret")
    hotp_parser.add_argument(
        "--counter",
        "-c",
        type=int,
        required=True,
        help="Moving counter value",
    )
    hotp_parser.add_argument(
        "--encoding",
        "-e",
        default="raw",
        choices=SECRET_ENCODINGS,
        help="How the secret is encoded (default: raw)",
    )
    hotp_parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=DEFAULT_DIGITS,
        choices=DIGIT_CHOICES,
        metavar="{1-9}",
        help=f"Number of digits in the code (default: {DEFAULT_DIGITS})",
    )
    hotp_parser.add_argument(
        "--checksum",
        action="store_true",
        help="Append a Luhn check digit",
    )
    hotp_parser.add_argument(
        "--offset",
        type=int,
        default=None,
        help="Static truncation offset (default: dynamic truncation)",
    )

    # TOTP command
    totp_parser = subparsers.add_parser(
        "totp",
        aliases=["time"],
        help="Generate a TOTP code",
    )
    totp_parser.add_argument("secret_hex", help="Shared secret, hex encoded")
    when = totp_parser.add_mutually_exclusive_group()
    when.add_argument(
        "--time-hex",
        default=None,
        help="Time step counter in hex (default: derived from the clock)",
    )
    when.add_argument(
        "--timestamp",
        "-t",
        type=int,
        default=None,
        help="Unix time to generate the code for (default: now)",
    )
    totp_parser.add_argument(
        "--period",
        "-p",
        type=int,
        default=DEFAULT_PERIOD,
        help=f"Time step in seconds (default: {DEFAULT_PERIOD})",
    )
    totp_parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=DEFAULT_DIGITS,
        choices=DIGIT_CHOICES,
        metavar="{1-9}",
        help=f"Number of digits in the code (default: {DEFAULT_DIGITS})",
    )
    totp_parser.add_argument(
        "--algorithm",
        "-a",
        default=keyed_hash.DEFAULT_ALGORITHM,
        choices=keyed_hash.supported_algorithms(),
        help=f"Keyed-hash algorithm (default: {keyed_hash.DEFAULT_ALGORITHM})",
    )

    # Checksum command
    checksum_parser = subparsers.add_parser(
        "checksum",
        aliases=["luhn"],
        help="Append a Luhn check digit to a number",
    )
    checksum_parser.add_argument("number", help="Decimal number")
    checksum_parser.add_argument(
        "--digits",
        "-d",
        type=int,
        default=None,
        help="Significant digits (default: length of the number)",
    )

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        )

    if not args.command:
        parser.print_help()
        return 1

    logger.debug("Running %s command", args.command)
    if args.command in ("hotp", "counter"):
        return hotp_command(args)
    elif args.command in ("totp", "time"):
        return totp_command(args)
    elif args.command in ("checksum", "luhn"):
        return checksum_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
