"""Provide the 4-bit operators."""
import logging

from sympy.core import cache

from nibblepy.nibble import context
from nibblepy.nibble import core

log = logging.getLogger(__name__)


def _cacheit(func):
    """Cache functions if `Cache` is enabled."""
    cfunc = cache.cacheit(func)

    def cached_func(*args, **kwargs):
        if context.Cache.current_context:
            return cfunc(*args, **kwargs)
        else:
            return func(*args, **kwargs)

    return cached_func


def full_adder(a, b, carry):
    """Add two bits and an incoming carry.

    Return the sum bit and the outgoing carry.

        >>> from nibblepy.nibble.operation import full_adder
        >>> full_adder(True, True, False)
        (False, True)
        >>> full_adder(True, False, True)
        (False, True)
        >>> full_adder(False, False, True)
        (True, False)

    """
    if a and b:
        if carry:
            return True, True
        else:
            return False, True
    elif not a and not b:
        if carry:
            return True, False
        else:
            return False, False
    else:
        if carry:
            return False, True
        else:
            return True, False


def full_subtractor(a, b, borrow):
    """Subtract the bit *b* and an incoming borrow from the bit *a*.

    Return the difference bit and the outgoing borrow.

        >>> from nibblepy.nibble.operation import full_subtractor
        >>> full_subtractor(False, True, False)
        (True, True)
        >>> full_subtractor(True, False, True)
        (False, False)
        >>> full_subtractor(True, True, True)
        (True, True)

    """
    if a and b:
        if borrow:
            return True, True
        else:
            return False, False
    elif not a and not b:
        if borrow:
            return True, True
        else:
            return False, False
    elif b:
        if borrow:
            return False, True
        else:
            return True, True
    else:
        if borrow:
            return False, False
        else:
            return True, False


def ripple(cell, x, y):
    """Apply a 1-bit *cell* from the least to the most significant bit.

    The flag (carry or borrow) returned by each cell is fed to the next one;
    the flag left after the most significant bit is discarded.
    """
    bits = [False] * core.U4.BITS
    flag = False
    for i in reversed(range(core.U4.BITS)):
        bits[i], flag = cell(x.bits[i], y.bits[i], flag)

    if flag:
        log.debug("%s(%s, %s) wrapped around, final %s discarded",
                  cell.__name__, x, y,
                  "borrow" if cell is full_subtractor else "carry")

    return core.U4(bits)


def _is_scalar(x):
    return isinstance(x, int) and not isinstance(x, bool)


class Operation(object):
    """Represent 4-bit operators.

    A 4-bit operator takes some `U4` operands and some scalar
    operands (i.e. `int`), and returns a new `U4`. Calling the operator
    class validates the operands and evaluates the operation; operators
    never modify their operands.

    This class is not meant to be instantiated but to provide a base
    class for the different operators.

    Attributes:
        arity: a pair of number specifying the number of `U4` operands
            (at least one) and scalar operands.
        is_symmetric: True if the operator is symmetric with respect to
            its operands. Operators with scalar operands cannot be symmetric.
        is_simple: True if the operator is *simple*, that is, all its
            operands are `U4` values. Simple operators allow
            *Automatic Constant Conversion*, that is, instead of passing
            all arguments as `U4`, it is possible to pass
            arguments as plain integers (converted with
            `U4.from_native_byte`).

            ::

                >>> from nibblepy.nibble.core import U4
                >>> (U4.from_native_byte(1) + 1).vrepr()
                'U4(0b0010)'

        operand_types: a list specifying the types of the operands (optional
            if all operands are `U4`)
        infix_symbol: a symbol used when printing and in the command line
    """

    is_simple = False

    @_cacheit
    def __new__(cls, *args, **options):
        val_op = options.pop("validate_operands",
                             context.Validation.current_context)
        assert not options, "unknown options {}".format(options)

        if val_op:
            args = cls._parse_args(*args)

        return cls.eval(*args)

    @classmethod
    def _parse_args(cls, *args):
        # Automatic Constant Conversion
        if cls.is_simple:
            if not any(isinstance(a, core.U4) for a in args):
                msg = "{} expects at least 1 U4 operand"
                raise TypeError(msg.format(cls.__name__))

            args = [core.U4.from_native_byte(a) if _is_scalar(a) else a
                    for a in args]

        if hasattr(cls, "operand_types"):
            operand_types = cls.operand_types
        else:
            operand_types = [core.U4 for _ in args]
        for arg_type, arg in zip(operand_types, args):
            assert isinstance(arg, arg_type)

        num_values = 0
        num_scalars = 0
        for a in args:
            if isinstance(a, core.U4):
                num_values += 1
            elif _is_scalar(a):
                num_scalars += 1
            else:
                assert False
        assert tuple(cls.arity) == (num_values, num_scalars)

        assert cls.condition(*args), "{}.condition({}) did not hold".format(cls, args)

        return args

    @classmethod
    def condition(cls, *args):
        """Check if the operands verify the restrictions of the operator."""
        return True

    @classmethod
    def eval(cls, *args):
        """Evaluate the operator with given operands.

        This is an internal method. To evaluate an operation,
        use the operator ``()``.
        """
        raise NotImplementedError("subclasses need to override this method")


# Bitwise operators

class U4Or(Operation):
    """Bitwise OR (logical disjunction) operation.

    It overrides the operator | and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.operation import U4Or
        >>> U4Or(U4.from_native_byte(3), U4.from_native_byte(4))
        7
        >>> U4.from_native_byte(3) | 4
        7

    """

    arity = [2, 0]
    is_symmetric = True
    is_simple = True
    infix_symbol = "|"

    @classmethod
    def eval(cls, x, y):
        return core.U4([a or b for a, b in zip(x.bits, y.bits)])


class U4Xor(Operation):
    """Bitwise XOR (exclusive-or) operation.

    It overrides the operator ^ and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.operation import U4Xor
        >>> U4Xor(U4.from_native_byte(3), U4.from_native_byte(5))
        6
        >>> U4.from_native_byte(3) ^ 5
        6

    """

    arity = [2, 0]
    is_symmetric = True
    is_simple = True
    infix_symbol = "^"

    @classmethod
    def eval(cls, x, y):
        return core.U4([a != b for a, b in zip(x.bits, y.bits)])


# Rotations

class RotateLeft(Operation):
    """Circular left rotation operation.

    The rotation amount is taken modulo 4.

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.operation import RotateLeft
        >>> RotateLeft(U4.from_native_byte(2), 3)
        1
        >>> RotateLeft(U4.from_native_byte(9), 1).vrepr()
        'U4(0b0011)'

    """

    arity = [1, 1]
    is_symmetric = False
    infix_symbol = "<<<"
    operand_types = [core.U4, int]

    @classmethod
    def condition(cls, x, r):
        return r >= 0

    @classmethod
    def eval(cls, x, r):
        width = x.BITS
        r = r % width
        return core.U4([x.bits[(i + r) % width] for i in range(width)])


class RotateRight(Operation):
    """Circular right rotation operation.

    The rotation amount is taken modulo 4.

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.operation import RotateRight
        >>> RotateRight(U4.from_native_byte(1), 3)
        2
        >>> RotateRight(U4.from_native_byte(9), 1).vrepr()
        'U4(0b1100)'

    """

    arity = [1, 1]
    is_symmetric = False
    infix_symbol = ">>>"
    operand_types = [core.U4, int]

    @classmethod
    def condition(cls, x, r):
        return r >= 0

    @classmethod
    def eval(cls, x, r):
        width = x.BITS
        r = r % width
        return core.U4([x.bits[(i + width - r) % width] for i in range(width)])


# Arithmetic operators

class U4Add(Operation):
    """Modular addition operation (ripple-carry adder).

    It overrides the operator + and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.operation import U4Add
        >>> U4Add(U4.from_native_byte(3), U4.from_native_byte(3))
        6
        >>> U4Add(U4.from_native_byte(12), 12)
        8
        >>> 1 + U4.MAX
        0

    """

    arity = [2, 0]
    is_symmetric = True
    is_simple = True
    infix_symbol = "+"

    @classmethod
    def eval(cls, x, y):
        return ripple(full_adder, x, y)


class U4Sub(Operation):
    """Modular subtraction operation (ripple-borrow subtractor).

    It overrides the operator - and provides Automatic Constant Conversion.
    See `Operation` for more information.

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.operation import U4Sub
        >>> U4Sub(U4.from_native_byte(3), U4.from_native_byte(2))
        1
        >>> U4Sub(U4.from_native_byte(1), 2)
        15
        >>> 0 - U4.from_native_byte(1)
        15

    """

    arity = [2, 0]
    is_symmetric = False
    is_simple = True
    infix_symbol = "-"

    @classmethod
    def eval(cls, x, y):
        return ripple(full_subtractor, x, y)
