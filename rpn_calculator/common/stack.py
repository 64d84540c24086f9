"""Fixed-capacity stack used for both operators and operands."""
from typing import Generic, List, TypeVar

T = TypeVar("T")


class StackFullError(OverflowError):
    """Raised when pushing onto a stack that is already at capacity."""


class StackEmptyError(IndexError):
    """Raised when popping or peeking an empty stack."""


class BoundedStack(Generic[T]):
    """
    LIFO stack that refuses to grow past a fixed capacity.

    The capacity is checked before every push, the stack never truncates
    or drops items silently.
    """

    def __init__(self, capacity: int):
        if capacity < 1:
            raise ValueError(f"Stack capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: List[T] = []

    def push(self, item: T) -> None:
        """
        Push an item on top of the stack.

        :param item: Value to push

        :raises StackFullError: If the stack is already at capacity
        """
        if self.is_full():
            raise StackFullError(f"Stack capacity of {self.capacity} exceeded")
        self._items.append(item)

    def pop(self) -> T:
        """
        Remove and return the top item.

        :raises StackEmptyError: If the stack is empty
        """
        if not self._items:
            raise StackEmptyError("Pop from an empty stack")
        return self._items.pop()

    def peek(self) -> T:
        """
        Return the top item without removing it.

        :raises StackEmptyError: If the stack is empty
        """
        if not self._items:
            raise StackEmptyError("Peek at an empty stack")
        return self._items[-1]

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack(capacity={self.capacity}, items={self._items!r})"
