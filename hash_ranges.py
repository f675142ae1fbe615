#!/usr/bin/env python3
import argparse
import logging
import sys

from hash_logger import setup_logger
from rolling_hash import DEFAULT_BASE, DEFAULT_MODULO, INVALID_HASH, RollingHash

RANGE_DELIM = ":"
INVALID_TEXT = "invalid"


def parse_range(text: str):
    """Parse an `L:R` command line argument into a pair of ints"""
    left, sep, right = text.partition(RANGE_DELIM)
    if not sep:
        raise argparse.ArgumentTypeError(f"expected L{RANGE_DELIM}R, got '{text}'")
    try:
        return int(left), int(right)
    except ValueError:
        raise argparse.ArgumentTypeError(f"range bounds must be integers, got '{text}'")


def make_parser():
    parser = argparse.ArgumentParser(
        description="Print polynomial rolling hashes of byte ranges of a file or stdin.\n"
        "With no --range or --window, prints the hash of the whole input.",
        formatter_class=argparse.RawTextHelpFormatter,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("--input-file", type=str, help="Path to the input file.")
    input_group.add_argument("--stdin", action="store_true", help="Read input from standard input.")

    output_group = parser.add_mutually_exclusive_group(required=True)
    output_group.add_argument("--output-file", type=str, help="Path to the output file.")
    output_group.add_argument("--stdout", action="store_true", help="Write output to standard output.")

    parser.add_argument("--base", type=int, default=DEFAULT_BASE, help="Polynomial base multiplier.")
    parser.add_argument("--modulo", type=int, default=DEFAULT_MODULO, help="Modulus bounding all hash values.")

    query_group = parser.add_mutually_exclusive_group()
    query_group.add_argument(
        "--range",
        type=parse_range,
        action="append",
        dest="ranges",
        metavar=f"L{RANGE_DELIM}R",
        help="Half-open byte range [L, R) to hash. May be repeated.",
    )
    query_group.add_argument(
        "--window",
        type=int,
        metavar="N",
        help="Hash every window of N bytes, one line per start offset.",
    )

    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable debug logging on standard error.",
    )

    return parser


def get_io(args: argparse.Namespace):
    if args.stdin:
        input_stream = sys.stdin.buffer
    elif args.input_file:
        input_stream = open(args.input_file, "rb")
    else:
        raise ValueError("No input source specified")

    if args.stdout:
        output_stream = sys.stdout
    elif args.output_file:
        output_stream = open(args.output_file, "w", encoding="utf-8")
    else:
        raise ValueError("No output destination specified")

    return input_stream, output_stream


def format_hash(value: int):
    return INVALID_TEXT if value == INVALID_HASH else str(value)


def hash_lines(rh: RollingHash, ranges=None, window=None):
    """Build the output lines for the requested queries

    Args:
        rh (RollingHash): hashes of the input
        ranges (list[tuple[int, int]], optional): ranges to hash. Defaults to the whole input.
        window (int, optional): width of the windows to hash

    Returns:
        list[str]: one line per range or window
    """
    if window is not None:
        return [f"{start}\t{value}" for value, start in rh.windows(window)]

    ranges = ranges or [(0, len(rh))]
    return [f"{l}{RANGE_DELIM}{r}\t{format_hash(rh.get(l, r))}" for l, r in ranges]


def main(argv=None):
    parser = make_parser()
    args = parser.parse_args(argv)

    logger = setup_logger(logging.DEBUG if args.verbose else logging.WARNING)
    if args.window is not None and args.window < 0:
        parser.error(f"--window must be non-negative, got {args.window}")

    input_stream, output_stream = get_io(args)
    try:
        data = input_stream.read()
        logger.debug("Read %d bytes of input", len(data))

        try:
            rh = RollingHash(data, base=args.base, modulo=args.modulo)
        except ValueError as e:
            parser.error(str(e))

        for l, r in args.ranges or []:
            if not (0 <= l <= len(rh) and 0 <= r <= len(rh)):
                parser.error(f"range {l}{RANGE_DELIM}{r} out of bounds for input of length {len(rh)}")

        for line in hash_lines(rh, ranges=args.ranges, window=args.window):
            output_stream.write(line + "\n")

    finally:
        # Close files if we opened them
        if args.input_file:
            input_stream.close()
        if args.output_file:
            output_stream.close()


if __name__ == "__main__":
    main()
