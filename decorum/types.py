"""
The module contains internal types that decorum passes into callbacks.
You never should instantiate them directly. It can be useful in case
you need any of them for type annotations in your project.
"""
from ._arguments import Arguments
from ._context import ErrorContext
from ._decorate import DecoratorFunc
from ._registry import Factory


__all__ = [
    'Arguments',
    'DecoratorFunc',
    'ErrorContext',
    'Factory',
]
