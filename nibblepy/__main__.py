"""Top-level script environment."""
import argparse
import logging
import sys

from nibblepy.nibble.core import EmptyInputError, U4
from nibblepy.nibble.hexcodec import HexDecodeError
from nibblepy.nibble.operation import (
    U4Add, U4Sub, U4Or, U4Xor, RotateLeft, RotateRight
)


list_operators = {
    op.infix_symbol: op
    for op in [U4Add, U4Sub, U4Or, U4Xor, RotateLeft, RotateRight]
}


def parse_operand(parser, text, from_hex):
    if from_hex:
        try:
            return U4.from_hex_str(text)
        except (HexDecodeError, EmptyInputError) as e:
            parser.error("invalid operand {!r}: {}".format(text, e))

    try:
        val = int(text)
    except ValueError:
        parser.error("invalid operand {!r}: not an integer".format(text))
    if not 0 <= val < 2 ** 8:
        parser.error("invalid operand {!r}: not a byte".format(text))
    return U4.from_native_byte(val)


def parse_amount(parser, text):
    try:
        r = int(text)
    except ValueError:
        parser.error("invalid rotation {!r}: not an integer".format(text))
    if r < 0:
        parser.error("invalid rotation {!r}: negative".format(text))
    return r


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="nibblepy",
        description="Evaluate an operation between 4-bit unsigned integers.")
    parser.add_argument("x")
    parser.add_argument("operator", choices=list(list_operators.keys()))
    parser.add_argument("y")
    parser.add_argument("--hex", action="store_true",
                        help="read the U4 operands as hex-encoded bytes")
    parser.add_argument("-v", "--verbose", action="store_true")

    args = parser.parse_args(argv)

    if args.verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING
    logging.basicConfig(level=level, format="%(message)s")

    op = list_operators[args.operator]

    x = parse_operand(parser, args.x, args.hex)
    if op in [RotateLeft, RotateRight]:
        y = parse_amount(parser, args.y)
        operands = [x]
    else:
        y = parse_operand(parser, args.y, args.hex)
        operands = [x, y]

    for u in operands:
        print(u.debug())
    print(op(x, y))
    return 0


if __name__ == "__main__":
    sys.exit(main())
