"""The sorting strategy: move values to ``b`` cheaply, then bring them back in order.

While more than three values remain on ``a``, the cheapest value to
move is pushed onto ``b``. Each value is placed just above the largest
smaller value already on ``b``. The last three values on ``a`` are
sorted directly. The values on ``b`` are then pushed back, each one
above the smallest larger value on ``a``. Finally ``a`` is rotated
until its minimum is on top.
"""

from __future__ import annotations

from typing import Iterable, List, Optional, Sequence

from .stacks import Node, Op, Stacks, find_max, find_min, is_sorted, update_positions

__all__ = [
    "set_target_a",
    "set_target_b",
    "cost_analysis_a",
    "set_cheapest",
    "get_cheapest",
    "sort_three",
    "sort_stacks",
    "push_swap",
]


def set_target_a(a: Iterable[Node], b: Iterable[Node]) -> None:
    """Point each node of ``a`` at the largest smaller value on ``b``.

    A node with no smaller value on ``b`` targets the maximum of ``b``.
    """
    b_nodes = list(b)
    fallback = find_max(b_nodes)
    for node in a:
        best = max(
            (candidate for candidate in b_nodes if candidate.nbr < node.nbr),
            key=lambda candidate: candidate.nbr,
            default=None,
        )
        node.target_node = fallback if best is None else best


def set_target_b(a: Iterable[Node], b: Iterable[Node]) -> None:
    """Point each node of ``b`` at the smallest larger value on ``a``.

    A node with no larger value on ``a`` targets the minimum of ``a``.
    """
    a_nodes = list(a)
    fallback = find_min(a_nodes)
    for node in b:
        best = min(
            (candidate for candidate in a_nodes if candidate.nbr > node.nbr),
            key=lambda candidate: candidate.nbr,
            default=None,
        )
        node.target_node = fallback if best is None else best


def cost_analysis_a(a: Sequence[Node], b: Sequence[Node]) -> None:
    """Set each node's push cost: the rotations to bring it and its target to the top.

    Positions and targets must already be set.
    """
    len_a = len(a)
    len_b = len(b)
    for node in a:
        target = node.target_node
        if target is None:
            raise ValueError(f"node {node.nbr} has no target")
        cost = node.index if node.above_median else len_a - node.index
        cost += target.index if target.above_median else len_b - target.index
        node.push_cost = cost


def set_cheapest(nodes: Iterable[Node]) -> None:
    """Flag the first node with the lowest push cost as the cheapest, and no other."""
    node_list = list(nodes)
    for node in node_list:
        node.cheapest = False
    cheapest = min(node_list, key=lambda node: node.push_cost, default=None)
    if cheapest is not None:
        cheapest.cheapest = True


def get_cheapest(nodes: Iterable[Node]) -> Optional[Node]:
    """Return the first node flagged as cheapest, or None."""
    return next((node for node in nodes if node.cheapest), None)


def _init_nodes_a(stacks: Stacks) -> None:
    update_positions(stacks.a)
    update_positions(stacks.b)
    set_target_a(stacks.a, stacks.b)
    cost_analysis_a(stacks.a, stacks.b)
    set_cheapest(stacks.a)


def _init_nodes_b(stacks: Stacks) -> None:
    update_positions(stacks.a)
    update_positions(stacks.b)
    set_target_b(stacks.a, stacks.b)


def _rotate_both(stacks: Stacks, cheapest: Node) -> None:
    while stacks.b[0] is not cheapest.target_node and stacks.a[0] is not cheapest:
        stacks.rr()
    update_positions(stacks.a)
    update_positions(stacks.b)


def _rev_rotate_both(stacks: Stacks, cheapest: Node) -> None:
    while stacks.b[0] is not cheapest.target_node and stacks.a[0] is not cheapest:
        stacks.rrr()
    update_positions(stacks.a)
    update_positions(stacks.b)


def _prep_for_push(stacks: Stacks, top_node: Node, stack_name: str) -> None:
    if stack_name == "a":
        stack, forward, backward = stacks.a, stacks.ra, stacks.rra
    elif stack_name == "b":
        stack, forward, backward = stacks.b, stacks.rb, stacks.rrb
    else:
        raise ValueError(f"unknown stack {stack_name!r}")
    while stack[0] is not top_node:
        if top_node.above_median:
            forward()
        else:
            backward()


def _move_a_to_b(stacks: Stacks) -> None:
    cheapest = get_cheapest(stacks.a)
    if cheapest is None or cheapest.target_node is None:
        raise ValueError("no cheapest node to move")
    target = cheapest.target_node
    if cheapest.above_median and target.above_median:
        _rotate_both(stacks, cheapest)
    elif not cheapest.above_median and not target.above_median:
        _rev_rotate_both(stacks, cheapest)
    _prep_for_push(stacks, cheapest, "a")
    _prep_for_push(stacks, target, "b")
    stacks.pb()


def _move_b_to_a(stacks: Stacks) -> None:
    target = stacks.b[0].target_node
    if target is None:
        raise ValueError("top of b has no target")
    _prep_for_push(stacks, target, "a")
    stacks.pa()


def _min_on_top(stacks: Stacks) -> None:
    while True:
        smallest = find_min(stacks.a)
        if smallest is None or stacks.a[0].nbr == smallest.nbr:
            return
        if smallest.above_median:
            stacks.ra()
        else:
            stacks.rra()


def sort_three(stacks: Stacks) -> None:
    """Sort stack ``a`` when it holds three values, with at most two operations."""
    a = stacks.a
    if len(a) < 2:
        return
    biggest = find_max(a)
    if biggest is a[0]:
        stacks.ra()
    elif a[1] is biggest:
        stacks.rra()
    if a[0].nbr > a[1].nbr:
        stacks.sa()


def sort_stacks(stacks: Stacks) -> None:
    """Sort stack ``a`` (more than three values) using ``b`` as scratch space."""
    remaining = len(stacks.a)
    for _ in range(2):
        if remaining > 3 and not is_sorted(stacks.a):
            stacks.pb()
        remaining -= 1
    while remaining > 3 and not is_sorted(stacks.a):
        remaining -= 1
        _init_nodes_a(stacks)
        _move_a_to_b(stacks)
    sort_three(stacks)
    while stacks.b:
        _init_nodes_b(stacks)
        _move_b_to_a(stacks)
    update_positions(stacks.a)
    _min_on_top(stacks)


def push_swap(values: Iterable[int]) -> List[Op]:
    """Return the operations that sort ``values`` on stack ``a``.

    An already sorted input needs no operation.
    """
    stacks = Stacks(values)
    if not is_sorted(stacks.a):
        size = len(stacks.a)
        if size == 2:
            stacks.sa()
        elif size == 3:
            sort_three(stacks)
        else:
            sort_stacks(stacks)
    return list(stacks.operations)