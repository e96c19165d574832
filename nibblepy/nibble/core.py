"""Provide the 4-bit unsigned integer type."""
import collections
import logging

from sympy import Atom

from nibblepy.nibble import hexcodec

log = logging.getLogger(__name__)


class EmptyInputError(ValueError):
    """Raised when a `U4` is built from an empty byte sequence."""


class U4(Atom):
    """Represent 4-bit unsigned integers.

    A `U4` is stored as a tuple of 4 booleans, the first one being the
    most significant bit, that is, the bits :math:`(x_3, x_2, x_1, x_0)`
    represent the integer :math:`8 x_3 + 4 x_2 + 2 x_1 + x_0`.
    Every operation wraps around modulo 16.

    Args:
        bits: a sequence of 4 booleans (most significant bit first).

    ::

        >>> from nibblepy.nibble.core import U4
        >>> U4([False, False, True, True])
        3
        >>> U4.from_native_byte(3).vrepr()
        'U4(0b0011)'
        >>> U4.from_native_byte(12) + U4.from_native_byte(12)
        8
        >>> U4.from_native_byte(1) - 2
        15

    U4 values are immutable and compare equal bit-for-bit (or to
    the plain integer they represent).

    Note that U4 inherits the methods of the SymPy class `Atom
    <http://docs.sympy.org/latest/modules/core.html#module-sympy.core.basic>`_;
    the hash is computed from the bits.

    """

    BITS = 4

    # Bitwise operators

    def __or__(self, other):
        """Override | operator."""
        from nibblepy.nibble import operation
        return operation.U4Or(self, other)

    __ror__ = __or__

    def __xor__(self, other):
        """Override ^ operator."""
        from nibblepy.nibble import operation
        return operation.U4Xor(self, other)

    __rxor__ = __xor__

    # Arithmetic operators

    def __add__(self, other):
        """Override + operator."""
        from nibblepy.nibble import operation
        return operation.U4Add(self, other)

    __radd__ = __add__

    def __sub__(self, other):
        """Override - operator."""
        from nibblepy.nibble import operation
        return operation.U4Sub(self, other)

    def __rsub__(self, other):
        """Override other - operator."""
        from nibblepy.nibble import operation
        return operation.U4Sub(other, self)

    def wrapping_add(self, other):
        """Return ``self + other`` modulo 16 (same as ``+``)."""
        return self + other

    def wrapping_sub(self, other):
        """Return ``self - other`` modulo 16 (same as ``-``)."""
        return self - other

    # Rotations

    def rotate_left(self, r):
        """Return the left circular rotation by *r* positions.

            >>> from nibblepy.nibble.core import U4
            >>> U4.from_native_byte(2).rotate_left(3)
            1

        """
        from nibblepy.nibble import operation
        return operation.RotateLeft(self, r)

    def rotate_right(self, r):
        """Return the right circular rotation by *r* positions.

            >>> from nibblepy.nibble.core import U4
            >>> U4.from_native_byte(1).rotate_right(1)
            8

        """
        from nibblepy.nibble import operation
        return operation.RotateRight(self, r)

    def __int__(self):
        return self.to_native_byte()

    def __hash__(self):
        return super().__hash__()

    def __eq__(self, other):
        """Override == operator."""
        if isinstance(other, int):
            return self.to_native_byte() == other
        elif isinstance(other, U4):
            return self.bits == other.bits
        else:
            return False

    def __iter__(self):
        raise AttributeError("U4 is not iterable, use the bits attribute")

    def __str__(self):
        """Return the decimal representation."""
        from nibblepy.nibble import printing
        return (printing.U4StrPrinter()).doprint(self)

    __repr__ = __str__

    def _hashable_content(self):
        """Return a tuple of information about self to compute its hash."""
        return self.bits

    def __getnewargs__(self):
        return (self.bits, )

    @classmethod
    def class_key(cls):
        """Return the key (identifier) of the class for sorting."""
        return 1, 0, cls.__name__

    __slots__ = ["_bits"]

    def __new__(cls, bits):
        assert isinstance(bits, collections.abc.Sequence)
        bits = tuple(bits)
        assert len(bits) == cls.BITS
        assert all(isinstance(b, bool) for b in bits)
        obj = Atom.__new__(cls)
        obj._bits = bits
        return obj

    @property
    def bits(self):
        """The bits of the value, most significant first."""
        return self._bits

    @classmethod
    def from_native_byte(cls, val):
        """Return the U4 holding the low 4 bits of the byte *val*.

        The upper bits are silently discarded.

            >>> from nibblepy.nibble.core import U4
            >>> U4.from_native_byte(11).vrepr()
            'U4(0b1011)'
            >>> U4.from_native_byte(0xab)
            11

        """
        assert isinstance(val, int) and not isinstance(val, bool)
        assert 0 <= val < 2 ** 8
        if val >= 2 ** cls.BITS:
            log.debug("truncating %d to its %d low bits", val, cls.BITS)

        bits = []
        for i in range(cls.BITS):
            bits.append((val & (1 << i)) != 0)
        bits.reverse()

        return cls(bits)

    def to_native_byte(self):
        """Return the represented integer, in the range [0, 15]."""
        total = 0
        for i in range(self.BITS):
            if self.bits[self.BITS - i - 1]:
                total += 2 ** i
        return total

    @classmethod
    def from_bytes(cls, buffer):
        """Return the U4 built from the first byte of *buffer*.

            >>> from nibblepy.nibble.core import U4
            >>> U4.from_bytes(b"\\x0b\\xff")
            11
            >>> U4.from_bytes(b"")
            Traceback (most recent call last):
             ...
            nibblepy.nibble.core.EmptyInputError: cannot build a U4 from an empty buffer

        """
        if len(buffer) == 0:
            raise EmptyInputError("cannot build a U4 from an empty buffer")
        return cls.from_native_byte(buffer[0])

    @classmethod
    def from_hex_str(cls, text):
        """Return the U4 encoded in the hexadecimal string *text*.

        Decoding errors of `hexcodec.decode_hex` are propagated.

            >>> from nibblepy.nibble.core import U4
            >>> U4.from_hex_str("0b")
            11

        """
        return cls.from_bytes(hexcodec.decode_hex(text))

    def to_hex_str(self):
        """Return the value as a single hex-encoded byte.

            >>> from nibblepy.nibble.core import U4
            >>> U4.from_native_byte(11).to_hex_str()
            '0b'

        """
        return hexcodec.encode_hex(bytes([self.to_native_byte()]))

    def bin(self):
        """Return the binary representation.

            >>> from nibblepy.nibble.core import U4
            >>> print(U4.from_native_byte(3).bin())
            0b0011

        """
        return "0b" + "".join("1" if b else "0" for b in self.bits)

    def hex(self):
        """Return the hexadecimal representation.

            >>> from nibblepy.nibble.core import U4
            >>> print(U4.from_native_byte(12).hex())
            0xc

        """
        width = (self.BITS // 4) + 2  # 2 due to '0x'
        return format(self.to_native_byte(), '0=#{}x'.format(width))

    def vrepr(self):
        """Return a verbose string representation."""
        from nibblepy.nibble import printing
        return (printing.U4ReprPrinter()).doprint(self)

    def debug(self):
        """Return the structural representation listing every bit.

            >>> from nibblepy.nibble.core import U4
            >>> print(U4.from_native_byte(3).debug())
            U4 { bits: [false, false, true, true] }

        """
        from nibblepy.nibble import printing
        return (printing.U4DebugPrinter()).doprint(self)


U4.MIN = U4([False] * U4.BITS)
U4.MAX = U4([True] * U4.BITS)
