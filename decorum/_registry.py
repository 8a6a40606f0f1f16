from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Iterator, Mapping

from . import decorators
from ._errors import DuplicateNameError, UnknownDecoratorError


Factory = Callable[..., Callable[..., Any]]


class Decorators:
    """Registry of decorator factories that can be referenced by name.

    A factory is anything that returns a new decorator when called,
    most often the decorator class itself.

    ::

        registry = decorum.Decorators.default()
        registry.add('retry', retry)
        fetch = decorum.decorate(fetch, 'retry', 3, registry=registry)

    The registry is meant to be populated at the startup and only read afterwards.
    """
    __slots__ = ('_factories',)
    _factories: dict[str, Factory]

    def __init__(self, **factories: Factory) -> None:
        self._factories = dict(factories)

    @classmethod
    def default(cls) -> Decorators:
        """Create a registry with all built-in decorators.
        """
        return cls(
            strict_arguments=decorators.strict_arguments,
            strict_return=decorators.strict_return,
            throttle=decorators.throttle,
            debounce=decorators.debounce,
            queue=decorators.queue,
            profile=decorators.profile,
            deprecate=decorators.deprecate,
        )

    def add(self, name: str, factory: Factory, *, replace: bool = True) -> None:
        """Register the decorator factory under the given name.

        Args:
            name: the name to use with :func:`decorum.decorate`.
            factory: callable that creates a new decorator instance.
            replace: if True (default), an existing factory with the same name
                is replaced. If False, :exc:`decorum.DuplicateNameError` is raised.
        """
        assert name, 'the name must not be empty'
        assert callable(factory)
        if not replace and name in self._factories:
            raise DuplicateNameError(name)
        self._factories[name] = factory

    def get(self, name: str) -> Factory | None:
        """Get the factory by name, or None if it is not registered.
        """
        return self._factories.get(name)

    def create(self, name: str, *args: Any, **kwargs: Any) -> Callable[..., Any]:
        """Create a new decorator using the factory registered with the given name.

        Raises:
            UnknownDecoratorError: if the name is not registered.
        """
        factory = self._factories.get(name)
        if factory is None:
            raise UnknownDecoratorError(f'decorator is not registered: {name}')
        return factory(*args, **kwargs)

    @property
    def collection(self) -> Mapping[str, Factory]:
        """Read-only view of all registered factories.
        """
        return MappingProxyType(self._factories)

    def __contains__(self, name: object) -> bool:
        return name in self._factories

    def __iter__(self) -> Iterator[str]:
        """Iterate over names of all registered factories.
        """
        return iter(self._factories)

    def __len__(self) -> int:
        return len(self._factories)

    def __repr__(self) -> str:
        return f'{type(self).__name__}({", ".join(self._factories)})'


DEFAULT_DECORATORS = Decorators.default()
