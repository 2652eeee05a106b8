"""
Command-line interface for the AES core.

Usage:
    python -m aes_core.cli run --mode encrypt --key <hex> --block <hex32> --verbose
    python -m aes_core.cli run --mode decrypt --key <hex> --block <hex32> --trace out.jsonl
    python -m aes_core.cli schedule --key <hex>
"""

import argparse
import sys
from typing import TextIO

from . import DEFAULT_KEY_HEX, DEFAULT_PT_HEX
from .cipher import AESCipher
from .errors import AESError
from .key import AESKey
from .reference import verify_block, reference_decrypt, reference_encrypt
from .trace import TraceRecorder, print_header, print_result
from .utils import bytes_to_state, bytes_to_hex, format_state_grid, format_words, hex_to_bytes


def _parse_key(key_hex: str | None) -> AESKey | None:
    try:
        return AESKey.from_hex(key_hex or DEFAULT_KEY_HEX)
    except AESError as e:
        print(f"Error: {e}")
        return None


def run_command(args: argparse.Namespace) -> int:
    """Execute the 'run' command."""
    key_source = "provided" if args.key else "default (FIPS-197)"
    block_source = "provided" if args.block else "default (FIPS-197)"

    key = _parse_key(args.key)
    if key is None:
        return 1

    try:
        block = hex_to_bytes(args.block or DEFAULT_PT_HEX)
        cipher = AESCipher(key)
    except AESError as e:
        print(f"Error: {e}")
        return 1

    decrypt = args.mode == "decrypt"

    print_header(f"{key.size.name} {args.mode}")
    print(f"Key:   {key.hex()} ({key_source})")
    print(f"Block: {bytes_to_hex(block)} ({block_source})")

    trace_file: TextIO | None = None
    if args.trace:
        try:
            trace_file = open(args.trace, "w")
        except OSError as e:
            print(f"Error: Cannot open trace file: {e}")
            return 1

    tracer = TraceRecorder(verbose=args.verbose, trace_file=trace_file)

    try:
        try:
            if decrypt:
                output = cipher.decrypt(block, tracer=tracer)
            else:
                output = cipher.encrypt(block, tracer=tracer)
        except AESError as e:
            print(f"Error: {e}")
            return 1

        passed = verify_block(output, key.material, block, decrypt=decrypt)
        output_hex = bytes_to_hex(output)
        print_result(output_hex, cipher.rounds, passed)

        if args.verbose:
            print("Output state:")
            print(format_state_grid(bytes_to_state(output)))

        if not passed:
            if decrypt:
                expected = reference_decrypt(key.material, block)
            else:
                expected = reference_encrypt(key.material, block)
            print(f"Expected: {bytes_to_hex(expected)}")
            print(f"Got:      {output_hex}")
            return 1

        return 0

    finally:
        if trace_file:
            trace_file.close()


def schedule_command(args: argparse.Namespace) -> int:
    """Execute the 'schedule' command: print the expanded key by round."""
    key = _parse_key(args.key)
    if key is None:
        return 1

    schedule = AESCipher(key).schedule

    print_header(f"{key.size.name} key schedule ({len(schedule)} words)")
    print(f"Key: {key.hex()}")
    for round_num in range(schedule.rounds + 1):
        first = 4 * round_num
        print(f"Round {round_num:2d}  w[{first:2d}..{first + 3:2d}]: "
              f"{format_words(schedule.round_key(round_num))}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main entry point for CLI."""
    parser = argparse.ArgumentParser(
        prog="aes_core",
        description="FIPS-197 AES single-block tool",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    run_parser = subparsers.add_parser("run", help="Encrypt or decrypt one block")
    run_parser.add_argument(
        "--mode",
        choices=["encrypt", "decrypt"],
        default="encrypt",
        help="Direction (default: encrypt)",
    )
    run_parser.add_argument(
        "--key",
        help="AES key as 32, 48 or 64 hex chars (default: FIPS-197 test key)",
    )
    run_parser.add_argument(
        "--block",
        help="Input block as 32 hex chars (default: FIPS-197 test plaintext)",
    )
    run_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print the state after every round operation",
    )
    run_parser.add_argument(
        "--trace",
        metavar="FILE",
        help="Output JSON Lines trace to file",
    )

    schedule_parser = subparsers.add_parser("schedule", help="Print the expanded key schedule")
    schedule_parser.add_argument(
        "--key",
        help="AES key as 32, 48 or 64 hex chars (default: FIPS-197 test key)",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    if args.command == "run":
        return run_command(args)
    elif args.command == "schedule":
        return schedule_command(args)

    return 0


if __name__ == "__main__":
    sys.exit(main())
