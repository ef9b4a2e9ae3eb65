"""Queue problems and a FIFO queue built from two stacks."""

from collections.abc import Iterable, Sequence

__all__ = ["TwoStackQueue", "count_students", "time_required_to_buy"]


class TwoStackQueue:
    """A first-in first-out queue kept in two stacks."""

    def __init__(self) -> None:
        self._outbox: list[int] = []
        self._inbox: list[int] = []

    def push(self, x: int) -> None:
        """Add ``x`` to the back of the queue."""
        self._inbox.append(x)

    def pop(self) -> int:
        """Remove and return the front value; IndexError if the queue is empty."""
        self._transfer()
        return self._outbox.pop()

    def peek(self) -> int:
        """Return the front value without removing it; IndexError if empty."""
        self._transfer()
        return self._outbox[-1]

    def empty(self) -> bool:
        """Tell whether the queue holds no values."""
        return not self._outbox and not self._inbox

    def __len__(self) -> int:
        return len(self._outbox) + len(self._inbox)

    def _transfer(self) -> None:
        if not self._outbox:
            self._outbox.extend(reversed(self._inbox))
            self._inbox.clear()


def count_students(students: Iterable[int], sandwiches: Iterable[int]) -> int:
    """Return how many students cannot get a sandwich of the type they prefer."""
    wanting = {0: 0, 1: 0}
    for student in students:
        wanting[1 if student == 1 else 0] += 1
    for sandwich in sandwiches:
        kind = 0 if sandwich == 0 else 1
        if wanting[kind] == 0:
            return wanting[1 - kind]
        wanting[kind] -= 1
    return 0


def time_required_to_buy(tickets: Sequence[int], k: int) -> int:
    """Return the time until person ``k`` has bought all their tickets."""
    wanted = tickets[k]
    return sum(
        min(wanted if index <= k else wanted - 1, count)
        for index, count in enumerate(tickets)
    )