"""Bounded traversal scoring and top-k recommendation."""

from typing import Any

__all__ = ["recommend"]


def recommend(*args: Any, **kwargs: Any) -> list:
    from .traversal import recommend as _recommend

    return _recommend(*args, **kwargs)
