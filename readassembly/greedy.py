"""Greedy assembly of reads through their overlap graph."""

from __future__ import annotations

from collections.abc import Sequence

from readassembly.overlap import merge, overlap_length

NO_EDGE = -1

Edge = tuple[int, int]


def overlap_graph(reads: Sequence[str]) -> list[list[int]]:
    """Return the matrix of overlaps between every ordered pair of reads.

    Entry ``[i][j]`` is how much read ``j`` overlaps the end of read ``i``;
    the diagonal holds ``NO_EDGE``.
    """
    return [
        [NO_EDGE if i == j else overlap_length(a, b) for j, b in enumerate(reads)]
        for i, a in enumerate(reads)
    ]


def _require_reads(reads: Sequence[str]) -> None:
    if not reads:
        raise ValueError("no reads to assemble")


def _best_edge(graph: list[list[int]]) -> Edge | None:
    """Return the last off-diagonal edge of largest non-negative weight."""
    best: Edge | None = None
    best_weight = 0
    for i, row in enumerate(graph):
        for j, weight in enumerate(row):
            if i != j and weight >= 0 and weight >= best_weight:
                best_weight = weight
                best = (i, j)
    return best


def greedy_assemble(reads: Sequence[str]) -> str:
    """Repeatedly merge the pair of reads with the largest overlap.

    The merged read keeps the overlaps of the read that was appended to
    it, and the appended read leaves the graph. The last merged read is
    returned.
    """
    _require_reads(reads)
    sequences = list(reads)
    graph = overlap_graph(sequences)
    result_index = 0
    for _ in range(len(sequences)):
        edge = _best_edge(graph)
        if edge is None:
            continue
        first, second = edge
        sequences[first] = merge(sequences[first], sequences[second], graph[first][second])
        graph[first] = list(graph[second])
        for row in graph:
            row[second] = NO_EDGE
        graph[second] = [NO_EDGE] * len(sequences)
        result_index = first
    return sequences[result_index]


def _choose_path_edges(graph: list[list[int]]) -> list[Edge]:
    """Pick one edge per read, each time the heaviest left, closing its row and column."""
    edges: list[Edge] = []
    last: Edge | None = None
    for _ in range(len(graph)):
        edge = _best_edge(graph) or last
        if edge is None:
            break
        source, target = edge
        graph[source][target] = NO_EDGE
        graph[target][source] = NO_EDGE
        for row in graph:
            row[target] = NO_EDGE
        graph[source] = [NO_EDGE] * len(graph)
        edges.append(edge)
        last = edge
    return edges


def path_assemble(reads: Sequence[str]) -> str:
    """Assemble reads along a path of heaviest overlap edges.

    The path starts at the first chosen edge and follows, from each read,
    the chosen edge leaving it; reads are then merged in that order, each
    overlapping the whole string built so far.
    """
    _require_reads(reads)
    if len(reads) == 1:
        return reads[0]
    edges = _choose_path_edges(overlap_graph(reads))
    first_source, first_target = edges[0]
    order = [reads[first_source], reads[first_target]]
    current = 0
    for _ in range(len(reads) - 2):
        wanted = edges[current][1]
        current = next(
            (index for index, (source, _target) in enumerate(edges) if source == wanted),
            current,
        )
        order.append(reads[edges[current][1]])
    assembled = order[0]
    for read in order[1:]:
        assembled = merge(assembled, read, overlap_length(assembled, read))
    return assembled


def merge_assemble(reads: Sequence[str]) -> str:
    """Merge the best-overlapping live pair until no positive overlap is left.

    A final merge is still made when the best overlap is zero; the reads
    that remain are then joined in their original order.
    """
    _require_reads(reads)
    live: list[str | None] = list(reads)
    while True:
        best: Edge | None = None
        best_overlap = 0
        for i, a in enumerate(live):
            if a is None:
                continue
            for j, b in enumerate(live):
                if b is None or i == j:
                    continue
                length = overlap_length(a, b)
                if length >= best_overlap:
                    best_overlap = length
                    best = (i, j)
        if best is None:
            break
        first, second = best
        live[first] = merge(live[first], live[second], best_overlap)
        live[second] = None
        if best_overlap == 0:
            break
    return "".join(read for read in live if read is not None)