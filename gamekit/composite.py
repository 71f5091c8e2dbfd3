"""A tree of values where each node knows its parent."""

from __future__ import annotations

from typing import Callable, Generic, Iterator, TypeVar

__all__ = ["Composite"]

T = TypeVar("T")


class Composite(Generic[T]):
    """Tree node holding ``value`` and an ordered list of child nodes."""

    def __init__(self, value: T = None, parent: Composite[T] | None = None) -> None:  # type: ignore[assignment]
        self.value = value
        self._parent = parent
        self.children: list[Composite[T]] = []

    @property
    def parent(self) -> Composite[T] | None:
        return self._parent

    def add_child(self, value: T) -> Composite[T]:
        """Append a child holding ``value`` and return it."""
        child = Composite(value, self)
        self.children.append(child)
        return child

    def for_each(self, action: Callable[[T, T], T]) -> None:
        """Visit every node depth first, last child first.

        ``action(parent_result, value)`` is called for each node; what it
        returns is handed to the node's children as their ``parent_result``.
        The root receives a default-constructed value of its own type.
        """
        stack: list[tuple[Composite[T], T]] = [(self, type(self.value)())]
        while stack:
            node, parent_result = stack.pop()
            result = action(parent_result, node.value)
            stack.extend((child, result) for child in node.children)

    def absolute_loop(self, action: Callable[[T, T], T]) -> Composite[T]:
        """Fold ancestor values into this node's value, root first.

        Returns a detached node with the same parent holding the result.
        """
        ancestors: list[Composite[T]] = []
        node = self._parent
        while node is not None:
            ancestors.append(node)
            node = node._parent
        result = Composite(self.value, self._parent)
        for ancestor in reversed(ancestors):
            result.value = action(result.value, ancestor.value)
        return result

    def __len__(self) -> int:
        return len(self.children)

    def __getitem__(self, index: int) -> Composite[T]:
        return self.children[index]

    def __iter__(self) -> Iterator[Composite[T]]:
        return iter(self.children)

    def __repr__(self) -> str:
        return f"Composite({self.value!r}, children={len(self.children)})"