from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, TypeVar


R = TypeVar('R')


@dataclass(frozen=True)
class Arguments:
    """Arguments of a single call of the decorated function.

    The receiver of a method (``self``) is not special, it is just
    the first positional argument.

    Args:
        args: positional arguments.
        kwargs: keyword arguments.
    """
    args: tuple[Any, ...] = ()
    kwargs: Mapping[str, Any] = field(default_factory=dict)

    def apply(self, func: Callable[..., R]) -> R:
        """Call the function with these arguments.
        """
        return func(*self.args, **self.kwargs)

    def __len__(self) -> int:
        return len(self.args) + len(self.kwargs)
