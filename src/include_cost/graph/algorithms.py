"""Graph algorithms over an integer-indexed arena: cycles, reachability, degree.

Nodes are ``0..n-1`` and ``adjacency[i]`` lists the children of node ``i``.
All traversals use an explicit stack, so deep include chains never hit the
Python recursion limit.
"""

from typing import Optional

_UNVISITED = 0
_ON_PATH = 1
_DONE = 2


def find_cycle(adjacency: list[list[int]]) -> Optional[list[int]]:
    """Return the first cycle found, or None if the graph is acyclic.

    Roots are tried in index order and children in adjacency order. The
    cycle is given in traversal order with its first node repeated at the
    end, e.g. ``[3, 5, 3]``; a self-loop is ``[i, i]``.
    """
    n = len(adjacency)
    state = [_UNVISITED] * n

    for root in range(n):
        if state[root] != _UNVISITED:
            continue

        state[root] = _ON_PATH
        path = [root]
        call_stack = [iter(adjacency[root])]

        while call_stack:
            it = call_stack[-1]
            for child in it:
                if state[child] == _ON_PATH:
                    start = path.index(child)
                    return path[start:] + [child]
                if state[child] == _UNVISITED:
                    state[child] = _ON_PATH
                    path.append(child)
                    call_stack.append(iter(adjacency[child]))
                    break
            else:
                # All children done: "return" from the top node
                call_stack.pop()
                state[path.pop()] = _DONE

    return None


def reachable_sets(adjacency: list[list[int]]) -> list[frozenset[int]]:
    """Everything reachable from each node, excluding the node itself.

    Post-order traversal with memoization: a node's set is the union of
    ``{child} | reach(child)`` over its children and is computed exactly
    once, however many parents share it.

    Raises:
        ValueError: If the graph has a cycle (run find_cycle first)
    """
    n = len(adjacency)
    reach: list[Optional[frozenset[int]]] = [None] * n
    state = [_UNVISITED] * n

    for root in range(n):
        if state[root] == _DONE:
            continue

        state[root] = _ON_PATH
        call_stack = [(root, iter(adjacency[root]))]

        while call_stack:
            node, it = call_stack[-1]
            for child in it:
                if state[child] == _ON_PATH:
                    raise ValueError(f"cycle through node {child}")
                if state[child] == _UNVISITED:
                    state[child] = _ON_PATH
                    call_stack.append((child, iter(adjacency[child])))
                    break
            else:
                call_stack.pop()
                acc: set[int] = set()
                for child in adjacency[node]:
                    acc.add(child)
                    acc |= reach[child]  # type: ignore[operator]
                reach[node] = frozenset(acc)
                state[node] = _DONE

    return reach  # type: ignore[return-value]


def reverse_adjacency(adjacency: list[list[int]]) -> list[list[int]]:
    """Parents of every node, in increasing parent order."""
    reverse: list[list[int]] = [[] for _ in adjacency]
    for parent, children in enumerate(adjacency):
        for child in children:
            reverse[child].append(parent)
    return reverse


def in_degrees(adjacency: list[list[int]]) -> list[int]:
    """Number of distinct parents per node (edges are assumed deduplicated)."""
    degree = [0] * len(adjacency)
    for children in adjacency:
        for child in children:
            degree[child] += 1
    return degree
