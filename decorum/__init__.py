"""Composable function decorators: throttle, debounce, queue, validation.
"""
from . import decorators, handlers, types
from ._decorate import decorate, decorated
from ._errors import (
    DecorumError, DuplicateNameError, UnknownDecoratorError, ValidationError,
)
from ._registry import DEFAULT_DECORATORS, Decorators
from ._type_tags import TYPE_TAGS, type_of


__version__ = '1.0.0'
__all__ = [
    # functions
    'decorate',
    'decorated',
    'type_of',

    # classes
    'Decorators',

    # constants
    'DEFAULT_DECORATORS',
    'TYPE_TAGS',

    # exceptions
    'DecorumError',
    'DuplicateNameError',
    'UnknownDecoratorError',
    'ValidationError',

    # modules
    'decorators',
    'handlers',
    'types',
]
