"""Bridges, 2-edge-connected components and articulation points of undirected graphs."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable


def _key(u, v):
    return (u, v) if u <= v else (v, u)


def _adjacency(node_count, edges):
    graph: list[list[int]] = [[] for _ in range(node_count)]
    multiplicity: Counter = Counter()
    for u, v in edges:
        for node in (u, v):
            if not 0 <= node < node_count:
                raise ValueError(f"node {node} outside 0..{node_count - 1}")
        graph[u].append(v)
        graph[v].append(u)
        multiplicity[_key(u, v)] += 1
    return graph, multiplicity


def _lowlink(graph):
    """Depth-first discovery times, low links, tree edges and DFS roots."""
    disc = [-1] * len(graph)
    low = [0] * len(graph)
    tree_edges = []
    roots = []
    clock = 0
    for start in range(len(graph)):
        if disc[start] != -1:
            continue
        roots.append(start)
        disc[start] = low[start] = clock
        clock += 1
        stack = [(start, -1, iter(graph[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if v == parent:
                    continue
                if disc[v] != -1:
                    low[u] = min(low[u], disc[v])
                else:
                    disc[v] = low[v] = clock
                    clock += 1
                    tree_edges.append((u, v))
                    stack.append((v, u, iter(graph[v])))
                    break
            else:
                stack.pop()
                if stack:
                    above = stack[-1][0]
                    low[above] = min(low[above], low[u])
    return disc, low, tree_edges, roots


def _bridge_set(graph, multiplicity):
    disc, low, tree_edges, _ = _lowlink(graph)
    return {
        _key(u, v)
        for u, v in tree_edges
        if low[v] > disc[u] and multiplicity[_key(u, v)] == 1
    }


def find_bridges(node_count: int, edges: Iterable[tuple[int, int]]) -> list[tuple[int, int]]:
    """Return the bridges as sorted (smaller, larger) pairs; parallel edges are never bridges."""
    graph, multiplicity = _adjacency(node_count, edges)
    return sorted(_bridge_set(graph, multiplicity))


def bridge_components(node_count: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Split the nodes into the components left after removing every bridge.

    Components come in order of their smallest node; nodes within a component
    are listed in depth-first discovery order.
    """
    graph, multiplicity = _adjacency(node_count, edges)
    bridges = _bridge_set(graph, multiplicity)
    seen = [False] * node_count
    components = []
    for start in range(node_count):
        if seen[start]:
            continue
        seen[start] = True
        component = [start]
        stack = [(start, -1, iter(graph[start]))]
        while stack:
            u, parent, neighbours = stack[-1]
            for v in neighbours:
                if v == parent or seen[v] or _key(u, v) in bridges:
                    continue
                seen[v] = True
                component.append(v)
                stack.append((v, u, iter(graph[v])))
                break
            else:
                stack.pop()
        components.append(component)
    return components


def articulation_points(node_count: int, edges: Iterable[tuple[int, int]]) -> list[int]:
    """Return the sorted cut vertices of the graph."""
    graph, _ = _adjacency(node_count, edges)
    disc, low, tree_edges, roots = _lowlink(graph)
    root_set = set(roots)
    children = Counter(u for u, _ in tree_edges)
    points = {u for u, v in tree_edges if u not in root_set and low[v] >= disc[u]}
    points.update(root for root in roots if children[root] > 1)
    return sorted(points)