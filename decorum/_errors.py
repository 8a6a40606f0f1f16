from __future__ import annotations


class DecorumError(Exception):
    """Base class for all errors raised by decorum itself.
    """


class ValidationError(DecorumError, TypeError):
    """Arguments or return value of the decorated function have unexpected types.

    Possible causes:

    * The function decorated with :class:`decorum.decorators.strict_arguments`
      was called with a different number of arguments or with keyword arguments.
    * One of the arguments has a type tag other than the expected one.
    * The function decorated with :class:`decorum.decorators.strict_return`
      returned a value of an unexpected type.

    """


class UnknownDecoratorError(DecorumError, LookupError):
    """Decoration was requested by a name that is not registered.

    Register the factory first using :meth:`decorum.Decorators.add`
    or pass the decorator instance directly.
    """


class DuplicateNameError(DecorumError, KeyError):
    """A decorator factory with this name is already registered.

    Raised only by :meth:`decorum.Decorators.add` called with ``replace=False``.
    """
