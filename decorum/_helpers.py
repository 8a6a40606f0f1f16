from __future__ import annotations


def get_name(obj: object) -> str:
    """Get a human-readable name of a function, class, or callable object.
    """
    name = getattr(obj, '__qualname__', None)
    if isinstance(name, str):
        return name
    return type(obj).__qualname__
