"""Insertion-ordered, duplicate-free toggle collection."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class SelectionSet(Generic[T]):
    """Immutable multi-valued selection.

    Values keep the order in which they were first selected. Every mutation
    returns a new snapshot; the original is never changed.
    """

    items: tuple[T, ...] = ()

    def toggle(self, value: T) -> "SelectionSet[T]":
        """Remove ``value`` if selected, otherwise append it at the end."""
        if value in self.items:
            return SelectionSet(tuple(item for item in self.items if item != value))
        return SelectionSet((*self.items, value))

    def contains(self, value: T) -> bool:
        return value in self.items

    def to_list(self) -> list[T]:
        return list(self.items)

    def __contains__(self, value: object) -> bool:
        return value in self.items

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __bool__(self) -> bool:
        return bool(self.items)


def toggle(selection: SelectionSet[T], value: T) -> SelectionSet[T]:
    """Functional form of :meth:`SelectionSet.toggle`."""
    return selection.toggle(value)


def contains(selection: SelectionSet[T], value: T) -> bool:
    """Functional form of :meth:`SelectionSet.contains`."""
    return selection.contains(value)
