"""Encode and decode byte sequences as hexadecimal text.

Bytes are written as two lowercase digits each, most significant nibble
first::

    >>> from nibblepy.nibble.hexcodec import encode_hex, decode_hex
    >>> encode_hex(b"\\x0b\\xa0")
    '0ba0'
    >>> decode_hex("0BA0")
    b'\\x0b\\xa0'

"""
import logging

import bidict

log = logging.getLogger(__name__)

HEX_DIGITS = bidict.bidict(enumerate("0123456789abcdef"))


class HexDecodeError(ValueError):
    """Base class of the errors raised by `decode_hex`."""


class OddLengthError(HexDecodeError):
    """The text does not hold a whole number of bytes."""


class InvalidHexDigitError(HexDecodeError):
    """The text contains a character that is not a hex digit.

    Attributes:
        char: the offending character
        index: its position in the text
    """

    def __init__(self, char, index):
        super().__init__("invalid hex digit {!r} at index {}".format(char, index))
        self.char = char
        self.index = index


def encode_hex(data):
    """Return the lowercase hexadecimal text of the bytes *data*."""
    digits = []
    for byte in data:
        digits.append(HEX_DIGITS[byte >> 4])
        digits.append(HEX_DIGITS[byte & 0xf])
    return "".join(digits)


def decode_hex(text):
    """Return the bytes encoded in the hexadecimal *text*.

    Both lowercase and uppercase digits are accepted.

        >>> from nibblepy.nibble.hexcodec import decode_hex
        >>> decode_hex("abc")
        Traceback (most recent call last):
         ...
        nibblepy.nibble.hexcodec.OddLengthError: odd number of hex digits (3)
        >>> decode_hex("0x")
        Traceback (most recent call last):
         ...
        nibblepy.nibble.hexcodec.InvalidHexDigitError: invalid hex digit 'x' at index 1

    """
    assert isinstance(text, str)
    if len(text) % 2 != 0:
        log.debug("cannot decode %r: odd length", text)
        raise OddLengthError("odd number of hex digits ({})".format(len(text)))

    nibbles = []
    for index, char in enumerate(text):
        try:
            nibbles.append(HEX_DIGITS.inv[char.lower()])
        except KeyError:
            log.debug("cannot decode %r: invalid digit at index %d", text, index)
            raise InvalidHexDigitError(char, index) from None

    return bytes(16 * high + low for high, low in zip(nibbles[::2], nibbles[1::2]))
