"""Manage the representation of 4-bit values."""
from sympy.printing import repr as sympy_repr
from sympy.printing import str as sympy_str


# noinspection PyPep8Naming,PyMethodMayBeStatic
class U4StrPrinter(sympy_str.StrPrinter):
    """Printing class that handles the `str` method of `U4`."""

    def _print_U4(self, u):
        return str(u.to_native_byte())


class U4DebugPrinter(U4StrPrinter):
    """Printing class that handles the `U4.debug` method.

    Every bit is listed, most significant first.
    """

    def _print_U4(self, u):
        bits = ", ".join("true" if b else "false" for b in u.bits)
        return "{} {{ bits: [{}] }}".format(type(u).__name__, bits)


# noinspection PyPep8Naming,PyMethodMayBeStatic
class U4ReprPrinter(sympy_repr.ReprPrinter):
    """Printing class that handles the `U4.vrepr` method."""

    def _print_U4(self, u):
        return "{}({})".format(type(u).__name__, u.bin())
