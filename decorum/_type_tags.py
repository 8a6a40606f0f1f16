from __future__ import annotations

import re
from datetime import date
from numbers import Number


TYPE_TAGS = frozenset({
    'array',
    'boolean',
    'class',
    'date',
    'function',
    'null',
    'number',
    'object',
    'regexp',
    'string',
})


def type_of(value: object) -> str:
    """Get the type tag of the value.

    The result is always one of :data:`decorum.TYPE_TAGS`. The tags are used
    by :class:`decorum.decorators.strict_arguments` and
    :class:`decorum.decorators.strict_return`.

    ::

        >>> type_of(13)
        'number'
        >>> type_of([1, 2])
        'array'

    """
    if value is None:
        return 'null'
    # bool is a subclass of int, check it first
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, Number):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, (list, tuple)):
        return 'array'
    if isinstance(value, date):
        return 'date'
    if isinstance(value, re.Pattern):
        return 'regexp'
    if isinstance(value, type):
        return 'class'
    if callable(value):
        return 'function'
    return 'object'
