"""
The per-type defaulting policy.

A merger turns a partial (every field optional) into the complete config the
application consumes. It is the one thing a config author writes per type,
usually as a classmethod::

    @dataclass(frozen=True)
    class Conf:
        something: int
        what: str

        @classmethod
        def from_partial(cls, partial: PartialConf) -> "Conf":
            return cls(
                something=value_or(partial.something, 0),
                what=value_or(partial.what, "pingpang"),
            )

Mergers must be total and pure: every partial, including the all-absent one,
yields a complete value, and no I/O happens.
"""

from __future__ import annotations

from typing import Callable, Protocol, TypeVar, overload

P_contra = TypeVar("P_contra", contravariant=True)
C_co = TypeVar("C_co", covariant=True)
T = TypeVar("T")


class Merger(Protocol[P_contra, C_co]):
    def __call__(self, partial: P_contra, /) -> C_co:
        ...


@overload
def value_or(value: T | None, default: Callable[[], T]) -> T:
    ...


@overload
def value_or(value: T | None, default: T) -> T:
    ...


def value_or(value, default):
    """Return ``value`` unless it is absent (``None``), else ``default``.

    A callable ``default`` is treated as a factory and only called when needed.
    """
    if value is not None:
        return value
    return default() if callable(default) else default


__all__ = ["Merger", "value_or"]
