from __future__ import annotations

import asyncio

import pytest

import decorum

from .helpers import Recorder, passthrough


def dummy():
    return passthrough


def test_default__has_builtins(registry: decorum.Decorators) -> None:
    assert set(registry) == {
        'strict_arguments',
        'strict_return',
        'throttle',
        'debounce',
        'queue',
        'profile',
        'deprecate',
    }
    assert registry.get('throttle') is decorum.decorators.throttle
    assert 'queue' in decorum.DEFAULT_DECORATORS


def test_add(registry: decorum.Decorators) -> None:
    assert registry.get('dummy') is None
    assert 'dummy' not in registry
    registry.add('dummy', dummy)
    assert registry.get('dummy') is dummy
    assert registry.collection['dummy'] is dummy
    assert 'dummy' in registry
    assert len(registry) == 8


def test_add__last_write_wins(registry: decorum.Decorators) -> None:
    def other():
        return passthrough

    registry.add('dummy', dummy)
    registry.add('dummy', other)
    assert registry.get('dummy') is other


def test_add__no_replace(registry: decorum.Decorators) -> None:
    registry.add('dummy', dummy, replace=False)
    with pytest.raises(decorum.DuplicateNameError):
        registry.add('dummy', dummy, replace=False)
    with pytest.raises(KeyError):
        registry.add('throttle', dummy, replace=False)
    assert registry.get('throttle') is decorum.decorators.throttle


def test_create(registry: decorum.Decorators) -> None:
    decorator = registry.create('throttle', .5)
    assert decorator == decorum.decorators.throttle(.5)
    assert registry.create('throttle', .5) is not decorator


def test_create__unknown(registry: decorum.Decorators) -> None:
    with pytest.raises(decorum.UnknownDecoratorError):
        registry.create('dummy')
    with pytest.raises(LookupError):
        registry.create('dummy')


def test_collection__read_only(registry: decorum.Decorators) -> None:
    with pytest.raises(TypeError):
        registry.collection['dummy'] = dummy  # type: ignore[index]


def test_empty_registry() -> None:
    registry = decorum.Decorators(dummy=dummy)
    assert list(registry) == ['dummy']
    assert repr(registry) == 'Decorators(dummy)'


def test_registries_are_independent(registry: decorum.Decorators) -> None:
    registry.add('dummy', dummy)
    assert 'dummy' not in decorum.Decorators.default()


async def test_by_name_and_by_factory_behave_the_same(
    registry: decorum.Decorators,
) -> None:
    by_factory = Recorder()
    by_name = Recorder()
    f1 = decorum.decorate(by_factory, decorum.decorators.throttle(.05))
    f2 = decorum.decorate(by_name, 'throttle', .05, registry=registry)
    results: list[tuple[object, object]] = []
    for value in range(5):
        results.append((f1(value), f2(value)))
    await asyncio.sleep(.06)
    results.append((f1(5), f2(5)))
    assert [a for a, _ in results] == [b for _, b in results]
    assert by_factory.calls == by_name.calls == [0, 5]
