"""Binary search trees, linked lists with loops, and the two-colour tree mex problem."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Optional, Sequence

_INF = 10**9


@dataclass
class TreeNode:
    """A binary tree node."""

    val: int
    left: Optional[TreeNode] = None
    right: Optional[TreeNode] = None


@dataclass(eq=False, repr=False)
class ListNode:
    """A singly linked list node."""

    data: int
    next: Optional[ListNode] = None

    def __iter__(self) -> Iterator[int]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"ListNode({self.data!r})"


def sorted_array_to_bst(nums: Sequence[int]) -> Optional[TreeNode]:
    """Build a height-balanced binary search tree from sorted values."""

    def build(left: int, right: int) -> Optional[TreeNode]:
        if left > right:
            return None
        mid = (left + right) // 2
        return TreeNode(nums[mid], build(left, mid - 1), build(mid + 1, right))

    return build(0, len(nums) - 1)


def in_order(root: Optional[TreeNode]) -> Iterator[int]:
    """Yield the values of a binary tree in order."""
    stack: list[TreeNode] = []
    node = root
    while stack or node is not None:
        while node is not None:
            stack.append(node)
            node = node.left
        node = stack.pop()
        yield node.val
        node = node.right


def build_linked_list(values: Sequence[int]) -> tuple[Optional[ListNode], Optional[ListNode]]:
    """Build a linked list and return its head and tail."""
    head: Optional[ListNode] = None
    tail: Optional[ListNode] = None
    for value in values:
        node = ListNode(value)
        if tail is None:
            head = node
        else:
            tail.next = node
        tail = node
    return head, tail


def loop_here(head: ListNode, tail: ListNode, position: int) -> None:
    """Link ``tail`` back to the node at 1-based ``position``; 0 leaves the list alone."""
    if position == 0:
        return
    walk: Optional[ListNode] = head
    for _ in range(position - 1):
        if walk is None:
            break
        walk = walk.next
    if walk is None:
        raise ValueError(f"position {position} is past the end of the list")
    tail.next = walk


def has_loop(head: Optional[ListNode]) -> bool:
    """Say whether the list contains a cycle."""
    if head is None:
        return False
    fast = head.next
    slow: Optional[ListNode] = head
    while fast is not slow:
        if fast is None or fast.next is None:
            return False
        fast = fast.next.next
        slow = slow.next
    return True


def list_length(head: Optional[ListNode]) -> int:
    """Count the nodes of an acyclic list."""
    return sum(1 for _ in head) if head is not None else 0


def remove_loop(head: Optional[ListNode]) -> None:
    """Break a cycle in the list, if there is one, without dropping any node."""
    if head is None or head.next is None:
        return
    slow: ListNode = head
    fast: Optional[ListNode] = head
    prev: ListNode = head
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
        if slow is fast:
            break
    if fast is None or fast.next is None:
        return
    temp = head
    while temp is not slow:
        temp = temp.next
        prev = slow
        slow = slow.next
    prev.next = None


def _component_cost(table: list[int], colour: int) -> int:
    return min(
        cost + size * (size + 1) // 2 * (1 + colour)
        for size, cost in enumerate(table[1:], start=1)
    )


def _merge(
    own: list[list[int]],
    child: list[list[int]],
    child_best: tuple[int, int],
    limit: int,
) -> list[list[int]]:
    own_size = len(own[0]) - 1
    child_size = len(child[0]) - 1
    size = min(limit, own_size + child_size)
    merged_tables = []
    for colour in (0, 1):
        merged = [_INF] * (size + 1)
        other = child[colour]
        cut = child_best[1 - colour]
        for a, cost in enumerate(own[colour][1:], start=1):
            merged[a] = min(merged[a], cost + cut)
            for b in range(1, min(child_size, size - a) + 1):
                merged[a + b] = min(merged[a + b], cost + other[b])
        merged_tables.append(merged)
    return merged_tables


def max_mex_sum(n: int, edges: Sequence[tuple[int, int]]) -> int:
    """Return the largest total path mex over all 0/1 colourings of a tree on vertices 1..n."""
    if n < 1:
        raise ValueError("a tree needs at least one vertex")
    adjacency: list[list[int]] = [[] for _ in range(n + 1)]
    for u, v in edges:
        adjacency[u].append(v)
        adjacency[v].append(u)

    limit = max(5, int(2 * math.sqrt(n)))

    parent = [0] * (n + 1)
    order: list[int] = []
    stack = [1]
    while stack:
        u = stack.pop()
        order.append(u)
        for v in adjacency[u]:
            if v != parent[u]:
                parent[v] = u
                stack.append(v)

    tables: list[Optional[list[list[int]]]] = [None] * (n + 1)
    best: list[tuple[int, int]] = [(_INF, _INF)] * (n + 1)
    for u in reversed(order):
        current = [[_INF, 0], [_INF, 0]]
        for v in adjacency[u]:
            if v == parent[u]:
                continue
            child = tables[v]
            assert child is not None
            current = _merge(current, child, best[v], limit)
            tables[v] = None
        tables[u] = current
        best[u] = (_component_cost(current[0], 0), _component_cost(current[1], 1))

    return n * (n + 1) - min(best[1])