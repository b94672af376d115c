"""Tests for arena graph algorithms: cycles, reachability, degree."""

import pytest

from include_cost.graph.algorithms import (
    find_cycle,
    in_degrees,
    reachable_sets,
    reverse_adjacency,
)


class TestFindCycle:
    def test_acyclic(self):
        # 0 -> 1 -> 2, 0 -> 2
        assert find_cycle([[1, 2], [2], []]) is None

    def test_two_node_cycle(self):
        assert find_cycle([[1], [0]]) == [0, 1, 0]

    def test_self_loop(self):
        assert find_cycle([[], [1]]) == [1, 1]

    def test_cycle_reported_from_entry_point(self):
        # 0 -> 1 -> 2 -> 3 -> 1
        assert find_cycle([[1], [2], [3], [1]]) == [1, 2, 3, 1]

    def test_shared_child_is_not_a_cycle(self):
        # Diamond: 0 -> 1, 0 -> 2, 1 -> 3, 2 -> 3
        assert find_cycle([[1, 2], [3], [3], []]) is None

    def test_empty(self):
        assert find_cycle([]) is None

    def test_deep_chain_does_not_recurse(self):
        n = 20000
        adjacency = [[i + 1] for i in range(n - 1)] + [[]]
        assert find_cycle(adjacency) is None
        adjacency[-1] = [0]
        cycle = find_cycle(adjacency)
        assert cycle[0] == cycle[-1] == 0
        assert len(cycle) == n + 1


class TestReachableSets:
    def test_chain(self):
        reach = reachable_sets([[1], [2], []])
        assert reach == [frozenset({1, 2}), frozenset({2}), frozenset()]

    def test_never_contains_self(self):
        reach = reachable_sets([[1, 2], [3], [3], []])
        assert all(i not in r for i, r in enumerate(reach))

    def test_diamond_counts_shared_node_once(self):
        reach = reachable_sets([[1, 2], [3], [3], []])
        assert reach[0] == frozenset({1, 2, 3})

    def test_cycle_rejected(self):
        with pytest.raises(ValueError):
            reachable_sets([[1], [0]])

    def test_deep_chain(self):
        # Deeper than the default recursion limit
        n = 1500
        adjacency = [[i + 1] for i in range(n - 1)] + [[]]
        reach = reachable_sets(adjacency)
        assert len(reach[0]) == n - 1
        assert reach[-1] == frozenset()

    def test_heavy_sharing_stays_linear(self):
        # Layered lattice: each layer's nodes include every node of the next
        # layer. Unmemoized expansion is exponential in the depth.
        layers, width = 30, 4
        adjacency = []
        for layer in range(layers):
            for _ in range(width):
                if layer == layers - 1:
                    adjacency.append([])
                else:
                    start = (layer + 1) * width
                    adjacency.append(list(range(start, start + width)))
        reach = reachable_sets(adjacency)
        assert len(reach[0]) == (layers - 1) * width

    @pytest.mark.slow
    def test_long_chain_with_fan_out(self):
        n = 5000
        adjacency = [[i + 1, n + i] for i in range(n - 1)] + [[]] + [[] for _ in range(n - 1)]
        reach = reachable_sets(adjacency)
        assert len(reach[0]) == 2 * (n - 1)
        assert all(len(r) == 2 * (n - 1 - i) for i, r in enumerate(reach[:n]))


class TestDegree:
    def test_in_degrees(self):
        assert in_degrees([[1, 2], [2], []]) == [0, 1, 2]

    def test_reverse_adjacency(self):
        assert reverse_adjacency([[1, 2], [2], []]) == [[], [0], [0, 1]]
