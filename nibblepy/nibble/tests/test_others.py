"""Tests for the context, printing and hexcodec modules."""
import doctest
import unittest

from hypothesis import given
from hypothesis.strategies import binary, text

from nibblepy.nibble.context import Cache, Validation
from nibblepy.nibble.core import U4
from nibblepy.nibble.hexcodec import (
    HexDecodeError, InvalidHexDigitError, OddLengthError, decode_hex, encode_hex
)
from nibblepy.nibble.operation import U4Add, U4Sub
from nibblepy.nibble.printing import U4DebugPrinter, U4ReprPrinter, U4StrPrinter


class TestContext(unittest.TestCase):
    """Tests of the Cache and Validation contexts."""

    def test_defaults(self):
        self.assertTrue(Cache.current_context)
        self.assertTrue(Validation.current_context)

    def test_cache(self):
        x = U4.from_native_byte(13)

        with Cache(False):
            self.assertFalse(Cache.current_context)
            self.assertEqual(x + 5, 2)
            self.assertEqual(x - 14, 15)
        self.assertTrue(Cache.current_context)

    def test_validation(self):
        x = U4.from_native_byte(6)
        y = U4.from_native_byte(7)

        with Validation(False):
            self.assertFalse(Validation.current_context)
            self.assertFalse(Cache.current_context)
            self.assertEqual(U4Add(x, y), 13)
            with self.assertRaises(AttributeError):
                U4Sub(x, 7)
            with self.assertRaises(AssertionError):
                with Cache(True):
                    pass
        self.assertTrue(Validation.current_context)
        self.assertTrue(Cache.current_context)

        self.assertEqual(U4Sub(x, 7), 15)
        self.assertEqual(U4Add(x, y, validate_operands=False), 13)

    def test_invalid_args(self):
        with self.assertRaises(AssertionError):
            Cache(None)
        with self.assertRaises(AssertionError):
            Validation(1)
        with self.assertRaises(AssertionError):
            Validation(0)
        with self.assertRaises(AssertionError):
            Cache(1)

    def test_logging(self):
        with Cache(False):
            with self.assertLogs("nibblepy.nibble.operation", level="DEBUG") as cm:
                U4.from_native_byte(12) + 12
                U4.from_native_byte(1) - 2
        self.assertEqual(len(cm.records), 2)
        self.assertIn("carry", cm.output[0])
        self.assertIn("borrow", cm.output[1])

        with self.assertLogs("nibblepy.nibble.core", level="DEBUG"):
            U4.from_native_byte(0xab)


class TestPrinting(unittest.TestCase):
    """Tests of the U4 printers."""

    def test_printers(self):
        x = U4.from_native_byte(4)

        self.assertEqual(U4StrPrinter().doprint(x), "4")
        self.assertEqual(U4ReprPrinter().doprint(x), "U4(0b0100)")
        self.assertEqual(U4DebugPrinter().doprint(x), "U4 { bits: [false, true, false, false] }")

    def test_display(self):
        for v in range(16):
            self.assertEqual(str(U4.from_native_byte(v)), str(v))
        self.assertEqual("{}".format(U4.MAX), "15")


class TestHexCodec(unittest.TestCase):
    """Tests of encode_hex and decode_hex."""

    def test_encode(self):
        self.assertEqual(encode_hex(b""), "")
        self.assertEqual(encode_hex(b"\x0b"), "0b")
        self.assertEqual(encode_hex(bytes([0xde, 0xad, 0xbe, 0xef])), "deadbeef")
        self.assertEqual(encode_hex([1, 255]), "01ff")

    def test_decode(self):
        self.assertEqual(decode_hex(""), b"")
        self.assertEqual(decode_hex("0b"), b"\x0b")
        self.assertEqual(decode_hex("DeAdBeEf"), bytes([0xde, 0xad, 0xbe, 0xef]))

    def test_invalid_decode(self):
        with self.assertRaises(OddLengthError):
            decode_hex("abc")
        with self.assertRaises(InvalidHexDigitError) as cm:
            decode_hex("0g")
        self.assertEqual(cm.exception.char, "g")
        self.assertEqual(cm.exception.index, 1)
        with self.assertRaises(InvalidHexDigitError):
            decode_hex(" 0")
        with self.assertRaises(HexDecodeError):
            decode_hex("0x0b")
        with self.assertRaises(ValueError):
            decode_hex("zz")

    @given(binary())
    def test_round_trip(self, data):
        encoded = encode_hex(data)

        self.assertEqual(len(encoded), 2 * len(data))
        self.assertEqual(decode_hex(encoded), data)
        self.assertEqual(decode_hex(encoded.upper()), data)
        self.assertEqual(encoded, data.hex())

    @given(text(alphabet="0123456789abcdefABCDEFxyz ", max_size=8))
    def test_decode_agrees_with_fromhex(self, s):
        try:
            expected = bytes.fromhex(s)
        except ValueError:
            expected = None

        if expected is not None and " " not in s:
            self.assertEqual(decode_hex(s), expected)
        elif " " not in s:
            with self.assertRaises(HexDecodeError):
                decode_hex(s)


# noinspection PyUnusedLocal,PyUnusedLocal
def load_tests(loader, tests, ignore):
    """Add doctests."""
    import nibblepy.nibble.context
    import nibblepy.nibble.hexcodec
    tests.addTests(doctest.DocTestSuite(nibblepy.nibble.context))
    tests.addTests(doctest.DocTestSuite(nibblepy.nibble.hexcodec))
    return tests
