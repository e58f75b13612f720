"""The two stacks of the puzzle and the eleven operations on them.

Stack ``a`` starts with the input values and stack ``b`` starts empty.
The first element of each stack is its top. Every operation performed
is recorded, in order, in :attr:`Stacks.operations`.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Deque, Dict, Iterable, List, Optional, Sequence, Union

__all__ = [
    "Node",
    "Op",
    "Stacks",
    "is_sorted",
    "find_min",
    "find_max",
    "update_positions",
]


@dataclass(eq=False)
class Node:
    """One value on a stack, with the bookkeeping the sorter attaches to it."""

    nbr: int
    index: int = 0
    push_cost: int = 0
    above_median: bool = False
    cheapest: bool = False
    target_node: Optional["Node"] = field(default=None, repr=False)


class Op(str, Enum):
    """The operations allowed on the two stacks."""

    SA = "sa"
    SB = "sb"
    SS = "ss"
    PA = "pa"
    PB = "pb"
    RA = "ra"
    RB = "rb"
    RR = "rr"
    RRA = "rra"
    RRB = "rrb"
    RRR = "rrr"

    def __str__(self) -> str:
        return self.value


def _swap(stack: Deque[Node]) -> None:
    if len(stack) >= 2:
        stack[0], stack[1] = stack[1], stack[0]


def _push(dest: Deque[Node], src: Deque[Node]) -> None:
    if src:
        dest.appendleft(src.popleft())


def _rotate(stack: Deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(-1)


def _reverse_rotate(stack: Deque[Node]) -> None:
    if len(stack) >= 2:
        stack.rotate(1)


class Stacks:
    """Stacks ``a`` and ``b`` together with the list of operations applied."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.a: Deque[Node] = deque(Node(value) for value in values)
        self.b: Deque[Node] = deque()
        self.operations: List[Op] = []
        self._actions: Dict[Op, Callable[[], None]] = {
            Op.SA: lambda: _swap(self.a),
            Op.SB: lambda: _swap(self.b),
            Op.SS: lambda: (_swap(self.a), _swap(self.b)),
            Op.PA: lambda: _push(self.a, self.b),
            Op.PB: lambda: _push(self.b, self.a),
            Op.RA: lambda: _rotate(self.a),
            Op.RB: lambda: _rotate(self.b),
            Op.RR: lambda: (_rotate(self.a), _rotate(self.b)),
            Op.RRA: lambda: _reverse_rotate(self.a),
            Op.RRB: lambda: _reverse_rotate(self.b),
            Op.RRR: lambda: (_reverse_rotate(self.a), _reverse_rotate(self.b)),
        }

    def apply(self, op: Union[Op, str]) -> None:
        """Perform ``op`` and record it.

        An operation that has nothing to act on leaves the stacks as they
        are but is still recorded. An unknown name raises ``ValueError``.
        """
        operation = Op(op)
        self._actions[operation]()
        self.operations.append(operation)

    def sa(self) -> None:
        """Swap the two top elements of ``a``."""
        self.apply(Op.SA)

    def sb(self) -> None:
        """Swap the two top elements of ``b``."""
        self.apply(Op.SB)

    def ss(self) -> None:
        """Swap the two top elements of both stacks."""
        self.apply(Op.SS)

    def pa(self) -> None:
        """Move the top of ``b`` onto ``a``."""
        self.apply(Op.PA)

    def pb(self) -> None:
        """Move the top of ``a`` onto ``b``."""
        self.apply(Op.PB)

    def ra(self) -> None:
        """Move the top of ``a`` to its bottom."""
        self.apply(Op.RA)

    def rb(self) -> None:
        """Move the top of ``b`` to its bottom."""
        self.apply(Op.RB)

    def rr(self) -> None:
        """Rotate both stacks."""
        self.apply(Op.RR)

    def rra(self) -> None:
        """Move the bottom of ``a`` to its top."""
        self.apply(Op.RRA)

    def rrb(self) -> None:
        """Move the bottom of ``b`` to its top."""
        self.apply(Op.RRB)

    def rrr(self) -> None:
        """Reverse-rotate both stacks."""
        self.apply(Op.RRR)

    def values_a(self) -> List[int]:
        """Return the values of ``a`` from top to bottom."""
        return [node.nbr for node in self.a]

    def values_b(self) -> List[int]:
        """Return the values of ``b`` from top to bottom."""
        return [node.nbr for node in self.b]

    def __repr__(self) -> str:
        return f"Stacks(a={self.values_a()!r}, b={self.values_b()!r})"


def is_sorted(nodes: Iterable[Node]) -> bool:
    """Return True when the values ascend from top to bottom (an empty stack is sorted)."""
    values = [node.nbr for node in nodes]
    return all(lower <= upper for lower, upper in zip(values, values[1:]))


def find_min(nodes: Iterable[Node]) -> Optional[Node]:
    """Return the first node holding the smallest value, or None for an empty stack."""
    return min(nodes, key=lambda node: node.nbr, default=None)


def find_max(nodes: Iterable[Node]) -> Optional[Node]:
    """Return the first node holding the largest value, or None for an empty stack."""
    return max(nodes, key=lambda node: node.nbr, default=None)


def update_positions(nodes: Sequence[Node]) -> None:
    """Set each node's index and whether it lies in the upper half of its stack.

    A node is above the median when its index is at most half the stack
    length, rounded down.
    """
    median = len(nodes) // 2
    for index, node in enumerate(nodes):
        node.index = index
        node.above_median = index <= median