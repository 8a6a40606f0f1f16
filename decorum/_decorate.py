from __future__ import annotations

import inspect
from functools import wraps
from typing import TYPE_CHECKING, Any, Callable, TypeVar

from ._arguments import Arguments
from ._registry import DEFAULT_DECORATORS


if TYPE_CHECKING:
    from ._registry import Decorators


F = TypeVar('F', bound=Callable[..., Any])
DecoratorFunc = Callable[[Callable[..., Any], Arguments], Any]


def decorate(
    func: F,
    decorator: DecoratorFunc | str,
    *args: Any,
    registry: Decorators | None = None,
    **kwargs: Any,
) -> F:
    """Wrap the function so that every call goes through the decorator.

    The decorator is called as ``decorator(func, arguments)`` and its result
    is returned to the caller. Exceptions are not handled in any way.

    ::

        say = decorum.decorate(print, decorum.decorators.throttle(1))
        say = decorum.decorate(print, 'throttle', 1)

    If the function is async, the returned function is async as well, and the
    result of the decorator is awaited if it is awaitable.

    The decorated function is a regular function, so it can be used as a method
    and ``self`` will be passed into the decorator as the first argument.

    Args:
        func: the function to decorate.
        decorator: the decorator instance or the name of a registered factory.
        args: arguments for the factory, if the decorator is specified by name.
        registry: the registry to look up the name in.
            If not specified, :data:`decorum.DEFAULT_DECORATORS` is used.
        kwargs: keyword arguments for the factory.

    Raises:
        UnknownDecoratorError: if the name is not registered.
    """
    if isinstance(decorator, str):
        if registry is None:
            registry = DEFAULT_DECORATORS
        decorator = registry.create(decorator, *args, **kwargs)
    else:
        assert not args and not kwargs, 'arguments are accepted only with a name'
    if inspect.iscoroutinefunction(func):
        return _bind_async(func, decorator)
    return _bind_sync(func, decorator)


def decorated(
    decorator: DecoratorFunc | str,
    *args: Any,
    registry: Decorators | None = None,
    **kwargs: Any,
) -> Callable[[F], F]:
    """The same as :func:`decorum.decorate` but for the ``@`` syntax.

    ::

        @decorum.decorated('debounce', .5)
        def autosave() -> None:
            ...

    """
    def wrapper(func: F) -> F:
        return decorate(func, decorator, *args, registry=registry, **kwargs)
    return wrapper


def _bind_sync(func: F, decorator: DecoratorFunc) -> F:
    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        return decorator(func, Arguments(args, kwargs))
    return wrapper  # type: ignore[return-value]


def _bind_async(func: F, decorator: DecoratorFunc) -> F:
    """Wrap an async function.

    We want ``inspect.iscoroutinefunction`` to produce the same result
    on the wrapped and the original functions.
    """
    @wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        result = decorator(func, Arguments(args, kwargs))
        if inspect.isawaitable(result):
            return await result
        return result
    return wrapper  # type: ignore[return-value]
