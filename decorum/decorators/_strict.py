from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, TypeVar

from .._arguments import Arguments
from .._errors import ValidationError
from .._type_tags import TYPE_TAGS, type_of
from ._base import Decorator


R = TypeVar('R')


class strict_arguments(Decorator):
    """Check the number and the types of positional arguments before calling the function.

    The types are specified as type tags, see :func:`decorum.type_of`.
    If the function is a method, ``self`` is also an argument and must be listed:
    the receiver counts towards the number of arguments and needs its own tag
    (usually ``object``), unlike checkers that look only at the arguments after it.
    Keyword arguments are not allowed.

    ::

        @decorum.decorated('strict_arguments', 'string', 'number')
        def repeat(text: str, times: int) -> str:
            return text * times

    Args:
        type_names: expected type tags of the arguments, one per argument.

    Raises:
        ValidationError: if the function is called with wrong arguments.
            The function is not called in that case.
    """
    __slots__ = ('_types',)
    _types: tuple[str, ...]

    def __init__(self, *type_names: str) -> None:
        for name in type_names:
            assert name in TYPE_TAGS, f'unknown type tag: {name}'
        self._types = type_names

    def __call__(self, func: Callable[..., R], arguments: Arguments) -> R:
        if arguments.kwargs:
            names = ', '.join(sorted(arguments.kwargs))
            raise ValidationError(f'keyword arguments are not allowed, passed: {names}')
        args = arguments.args
        if len(self._types) != len(args):
            raise ValidationError(
                f'{len(self._types)} arguments expected, passed: {len(args)}',
            )
        for index, (expected, value) in enumerate(zip(self._types, args), start=1):
            actual = type_of(value)
            if actual != expected:
                raise ValidationError(
                    f'wrong type for argument #{index}: "{actual}" should be "{expected}"',
                )
        return arguments.apply(func)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({", ".join(map(repr, self._types))})'


@dataclass(frozen=True)
class strict_return(Decorator):
    """Check the type of the value returned by the function.

    If the function returns an awaitable, the result is checked when awaited.

    ::

        @decorum.decorated('strict_return', 'array')
        def get_tags(post: Post) -> list[str]:
            ...

    Args:
        type_name: the expected type tag of the result, see :func:`decorum.type_of`.

    Raises:
        ValidationError: if the function returned a value of an unexpected type.
    """
    type_name: str

    def __post_init__(self) -> None:
        assert self.type_name in TYPE_TAGS, f'unknown type tag: {self.type_name}'

    def __call__(self, func: Callable[..., Any], arguments: Arguments) -> Any:
        result = arguments.apply(func)
        if inspect.isawaitable(result):
            return self._check_awaitable(result)
        return self._check(result)

    def _check(self, result: R) -> R:
        actual = type_of(result)
        if actual != self.type_name:
            raise ValidationError(
                f'unexpected return type: "{actual}" should be "{self.type_name}"',
            )
        return result

    async def _check_awaitable(self, awaitable: Awaitable[R]) -> R:
        return self._check(await awaitable)
