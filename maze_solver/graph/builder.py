#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
builder.py
----------
Raster -> graph pipeline:

1) sample_vertices()        one vertex per non-zero cell, row-major order
2) build_adjacency()        4-connected edges with a constant weight
3) find_boundary_vertices() perimeter cells, used as entrance/exit
4) reduce_vertices()        collapse corridor cells (exactly two neighbours)
                            into one weighted edge between their neighbours

Vertex indices are fixed by step 1 and used as identifiers everywhere
downstream; reduction clears collapsed slots but never removes them.
"""

from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

import numpy as np

from .. import config
from .model import MazeGraph, Position, PositionLike, Vertex, as_position

logger = logging.getLogger(__name__)


def sample_vertices(grid: np.ndarray) -> List[Vertex]:
    """One Vertex per open (non-zero) cell of a 2D raster, in row-major order."""
    grid = np.asarray(grid)
    if grid.ndim != 2:
        raise ValueError(f"Expected a 2D grid, got shape {grid.shape}")
    # argwhere walks the array in C order, i.e. row by row
    cells = np.argwhere(grid != 0)
    return [Vertex(Position(int(r), int(c))) for r, c in cells]


def position_lookup(vertices: Iterable[Vertex]) -> Dict[Position, int]:
    return {v.pos: i for i, v in enumerate(vertices)}


def build_adjacency(vertices: List[Vertex], weight: float = config.EDGE_WEIGHT) -> None:
    """Append an edge (j, weight) to vertex i for every open orthogonal neighbour j."""
    pos_to_idx = position_lookup(vertices)
    for vertex in vertices:
        for candidate in vertex.pos.neighbors():
            j = pos_to_idx.get(candidate)
            if j is not None:
                vertex.neighbors.append((j, float(weight)))


def _retarget(vertex: Vertex, old: int, new: int, weight: float) -> None:
    for k, (idx, _) in enumerate(vertex.neighbors):
        if idx == old:
            vertex.neighbors[k] = (new, weight)
            return


def reduce_vertices(vertices: List[Vertex], keep: Iterable[int] = ()) -> int:
    """
    Collapse every vertex with exactly two neighbours into a direct edge
    between those neighbours, in a single forward sweep.

    Vertex i with edges (a, w_a), (b, w_b) becomes unreachable: a's edge to i
    is rewritten to (b, w_a + w_b), b's edge to i to (a, w_a + w_b), and i's
    own list is cleared. Collapsing never changes the degree of a and b, so
    one sweep reaches a fixed point.

    Not collapsed:
      - indices in `keep` (the graph's start/end)
      - vertices whose two neighbours are the same vertex or already
        adjacent; collapsing those (e.g. the cells of a 2x2 open block)
        would fold a triangle into parallel edges and self-loops.

    Returns the number of collapsed vertices.
    """
    keep = set(keep)
    collapsed = 0
    for i, vertex in enumerate(vertices):
        if vertex.degree != 2 or i in keep:
            continue
        (a, w_a), (b, w_b) = vertex.neighbors
        if a == b or vertices[a].edge_to(b) is not None:
            continue
        combined = w_a + w_b
        _retarget(vertices[a], i, b, combined)
        _retarget(vertices[b], i, a, combined)
        vertex.neighbors.clear()
        collapsed += 1
    return collapsed


def find_boundary_vertices(vertices: List[Vertex], width: int, height: int) -> List[int]:
    """
    Indices of vertices on the raster perimeter.

    Order: for each column, top cell then bottom cell; then for each interior
    row, left cell then right cell. Rows/columns are not scanned twice when
    the raster is a single row or column.
    """
    if width <= 0 or height <= 0:
        return []
    pos_to_idx = position_lookup(vertices)
    found: List[int] = []

    def visit(r: int, c: int) -> None:
        idx = pos_to_idx.get(Position(r, c))
        if idx is not None:
            found.append(idx)

    for x in range(width):
        visit(0, x)
        if height > 1:
            visit(height - 1, x)
    for y in range(1, height - 1):
        visit(y, 0)
        if width > 1:
            visit(y, width - 1)
    return found


def _resolve_endpoint(vertices: List[Vertex], pos: PositionLike, which: str) -> int:
    p = as_position(pos)
    for i, v in enumerate(vertices):
        if v.pos == p:
            return i
    raise ValueError(f"{which} position {p} is not an open cell")


def select_endpoints(boundary: List[int]) -> Tuple[Optional[int], Optional[int]]:
    """First two boundary indices become start/end; anything else is advisory."""
    if len(boundary) != 2:
        logger.warning(
            "Could not find definitive start/end points (%d boundary cells), "
            "using the first two found", len(boundary)
        )
    start = boundary[0] if len(boundary) > 0 else None
    end = boundary[1] if len(boundary) > 1 else None
    return start, end


def build_graph(grid: np.ndarray,
                *,
                reduce: bool = True,
                start: Optional[PositionLike] = None,
                end: Optional[PositionLike] = None,
                weight: float = config.EDGE_WEIGHT) -> MazeGraph:
    """
    Build a MazeGraph from a binary raster (0 = wall, non-zero = open).

    start/end: optional explicit cell positions (row, col). When both are
    given the perimeter scan is skipped; when only one is given the other is
    taken from the perimeter scan (first boundary cell for start, second for
    end), and only a missing boundary cell is reported.
    """
    grid = np.asarray(grid)
    vertices = sample_vertices(grid)
    build_adjacency(vertices, weight=weight)
    H, W = grid.shape

    s_idx = e_idx = None
    if start is None and end is None:
        s_idx, e_idx = select_endpoints(find_boundary_vertices(vertices, W, H))
    elif start is None or end is None:
        boundary = find_boundary_vertices(vertices, W, H)
        slot, which = (0, "start") if start is None else (1, "end")
        found = boundary[slot] if len(boundary) > slot else None
        if found is None:
            logger.warning("No boundary cell for the %s point (%d boundary cells)",
                           which, len(boundary))
        if start is None:
            s_idx = found
        else:
            e_idx = found
    if start is not None:
        s_idx = _resolve_endpoint(vertices, start, "start")
    if end is not None:
        e_idx = _resolve_endpoint(vertices, end, "end")

    if reduce:
        keep = [i for i in (s_idx, e_idx) if i is not None]
        n = reduce_vertices(vertices, keep=keep)
        logger.debug("Reduced %d of %d vertices", n, len(vertices))

    return MazeGraph(vertices=vertices, shape=(int(H), int(W)), start=s_idx, end=e_idx)
