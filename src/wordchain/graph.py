"""Directed letter multigraph used to arrange words into chains.

Nodes are single case-folded letters and every word is one edge, directed from its first
letter to its last letter.  A chain that uses every word exactly once is an Eulerian trail of
this graph, which is found with Hierholzer's algorithm.
"""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from typing import NamedTuple

import numpy as np
from sortedcontainers import SortedSet

from wordchain.chainer.config import config as chainer_config
from wordchain.chainer.utils import first_letter, last_letter


class Eligibility(NamedTuple):
    """Result of the Eulerian path/circuit analysis."""

    exists: bool
    """Whether a trail using every edge exactly once exists."""

    start_node: str | None
    """Node the trail must (for a path) or may (for a circuit) start from."""

    is_circuit: bool
    """Whether the trail is closed, i.e. ends on its start node."""


NOT_ELIGIBLE = Eligibility(False, None, False)


class LetterGraph:
    """Directed multigraph over letters, with one edge per word."""

    def __init__(self, words: Iterable[str] = ()) -> None:
        self.adjacency: defaultdict[str, list[str]] = defaultdict(list)
        """Mapping from a letter to the words starting with it, in insertion order."""

        self.in_degree: dict[str, int] = {}
        """Number of edges ending at each letter."""

        self.out_degree: dict[str, int] = {}
        """Number of edges starting at each letter."""

        self.n_edges: int = 0
        """Number of words added to the graph."""

        for word in words:
            self.add_word(word)

    def __len__(self) -> int:
        return self.n_edges

    def add_word(self, word: str) -> None:
        """Add a word as an edge from its first letter to its last letter.

        Empty strings are ignored.
        """
        if not word:
            return

        first = first_letter(word)
        last = last_letter(word)

        self.adjacency[first].append(word)
        self.out_degree[first] = self.out_degree.get(first, 0) + 1
        self.in_degree[last] = self.in_degree.get(last, 0) + 1

        # Both letters must be known to both degree maps for node enumeration
        self.in_degree.setdefault(first, 0)
        self.out_degree.setdefault(last, 0)

        self.n_edges += 1

    def get_nodes(self) -> Sequence[str]:
        """Get all letters appearing in the graph.

        Sorted if `deterministic` is set in the configuration, otherwise in first-seen order.
        """
        if chainer_config.deterministic:
            return SortedSet(self.in_degree.keys() | self.out_degree.keys())
        return list(dict.fromkeys([*self.in_degree, *self.out_degree]))

    def _degree_diffs(self, nodes: Sequence[str]) -> np.ndarray:
        """Out-degree minus in-degree for each of `nodes`."""
        out_deg = np.array([self.out_degree[node] for node in nodes], dtype=np.int64)
        in_deg = np.array([self.in_degree[node] for node in nodes], dtype=np.int64)
        return out_deg - in_deg

    def is_connected(self, start_node: str) -> bool:
        """Check if every letter can be reached from `start_node`, ignoring edge direction."""
        nodes = self.get_nodes()
        node_idx = {node: i for i, node in enumerate(nodes)}
        if start_node not in node_idx:
            return False

        neighbors: defaultdict[str, set[str]] = defaultdict(set)
        for first, words in self.adjacency.items():
            for word in words:
                last = last_letter(word)
                neighbors[first].add(last)
                neighbors[last].add(first)

        visited = np.zeros(len(nodes), dtype=bool)

        # Depth-First Search (DFS) to mark all reachable letters
        stack = [start_node]
        while stack:
            node = stack.pop()
            if visited[node_idx[node]]:
                continue
            visited[node_idx[node]] = True
            stack.extend(n for n in neighbors[node] if not visited[node_idx[n]])

        return bool(visited.all())

    def analyze_eulerian_eligibility(self) -> Eligibility:
        """Check whether an Eulerian path or circuit exists.

        A circuit needs every letter balanced (as many words start with it as end with it).
        A path needs exactly one letter with one surplus outgoing edge (the start) and exactly
        one letter with one surplus incoming edge (the end).  In both cases all words must
        also belong to a single connected group of letters.

        Returns:
            An `Eligibility` tuple `(exists, start_node, is_circuit)`.
        """
        nodes = list(self.get_nodes())
        diffs = self._degree_diffs(nodes)

        if np.any(np.abs(diffs) > 1):
            return NOT_ELIGIBLE

        start_candidates = [nodes[i] for i in np.flatnonzero(diffs == 1)]
        end_candidates = [nodes[i] for i in np.flatnonzero(diffs == -1)]

        if not start_candidates and not end_candidates:
            start_node = next((node for node in nodes if self.out_degree[node] > 0), None)
            eligibility = Eligibility(True, start_node, True)
        elif len(start_candidates) == 1 and len(end_candidates) == 1:
            eligibility = Eligibility(True, start_candidates[0], False)
        else:
            return NOT_ELIGIBLE

        if eligibility.start_node is not None and not self.is_connected(eligibility.start_node):
            return NOT_ELIGIBLE
        return eligibility

    def diagnose(self) -> str:
        """Describe why the words in this graph cannot be chained (as a circuit, if need be)."""
        nodes = list(self.get_nodes())
        diffs = self._degree_diffs(nodes)

        for node, diff in zip(nodes, diffs):
            if abs(diff) > 1:
                return (
                    f"{self.out_degree[node]} words start with '{node}' "
                    f"but {self.in_degree[node]} words end with it"
                )

        starts = [nodes[i] for i in np.flatnonzero(diffs == 1)]
        ends = [nodes[i] for i in np.flatnonzero(diffs == -1)]
        if len(starts) > 1 or len(ends) > 1 or len(starts) != len(ends):
            return (
                f"the chain would need to start at one of {starts} and end at one of {ends}, "
                "but exactly one start and one end letter are allowed"
            )

        start_node = starts[0] if starts else next(iter(nodes), None)
        if start_node is not None and not self.is_connected(start_node):
            return "the words form separate groups of letters that cannot be linked"

        if starts:
            return f"the words only form an open chain from '{starts[0]}' to '{ends[0]}'"
        return "the words can be arranged in a circle"

    def extract_eulerian_trail(self, start_node: str) -> list[str]:
        """Find an Eulerian trail from `start_node` using Hierholzer's algorithm.

        The graph must have been checked with `analyze_eulerian_eligibility` first; the result
        is undefined otherwise.  The graph itself is not modified.

        Args:
            start_node (str): The letter to start the trail from.

        Returns:
            The words, ordered so that each starts with the last letter of the previous one.
        """
        # Working copy of the adjacency lists, consumed as edges are taken
        remaining = {node: list(words) for node, words in self.adjacency.items()}

        node_stack = [start_node]
        edge_stack: list[str] = []
        trail: list[str] = []

        while node_stack:
            edges = remaining.get(node_stack[-1])
            if edges:
                # Take the most recently added edge
                word = edges.pop()
                edge_stack.append(word)
                node_stack.append(last_letter(word))
            else:
                node_stack.pop()
                if edge_stack:
                    trail.append(edge_stack.pop())

        # Words are collected in reverse order of completion
        trail.reverse()
        return trail
