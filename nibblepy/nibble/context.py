"""Provide context managers to modify the default behaviour."""
import contextlib


class StatefulContext(contextlib.AbstractContextManager):
    """Base class for context managers with history."""

    current_context = None

    def __init__(self, new_context):
        """Initialize the context."""
        self.new_context = new_context

    def __enter__(self):
        self.previous_context = type(self).current_context
        type(self).current_context = self.new_context

    def __exit__(self, *args):
        type(self).current_context = self.previous_context


class Cache(StatefulContext):
    """Control the Cache context.

    Control whether or not the results of the operators are cached.
    By default, the cache is enabled.

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.context import Cache
        >>> with Cache(False):
        ...     U4.from_native_byte(7) + 9
        0

    Note that the Cache context cannot be enabled when the
    `Validation` context is disabled.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)

    def __enter__(self):
        if self.new_context is True:
            assert Validation.current_context is True
        super().__enter__()


class Validation(StatefulContext):
    """Control the Validation context.

    Control whether or not arguments of the operators are validated.
    By default, validation of arguments is enabled.

    Note that when it is disabled, Automatic Constant Conversion is no longer
    available (see `Operation`).

        >>> from nibblepy.nibble.core import U4
        >>> from nibblepy.nibble.context import Validation
        >>> U4.from_native_byte(1) + 1
        2
        >>> with Validation(False):
        ...     U4.from_native_byte(1) + 2
        Traceback (most recent call last):
         ...
        AttributeError: 'int' object has no attribute 'bits'

    When the Validation context is disabled, the `Cache` context is
    also disabled.
    """

    current_context = True

    def __init__(self, new_context):
        """Initialize the context."""
        assert isinstance(new_context, bool)
        super().__init__(new_context)

    def __enter__(self):
        if self.new_context is False:
            self.cache_context = Cache(False)
            self.cache_context.__enter__()
        super().__enter__()

    def __exit__(self, *args):
        if self.new_context is False:
            self.cache_context.__exit__()
        super().__exit__()
