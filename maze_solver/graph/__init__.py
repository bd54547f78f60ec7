# -*- coding: utf-8 -*-
"""
Maze graph construction.
Exposes:
- Position, Vertex, MazeGraph (from model.py)
- build_graph(...) and its individual stages (from builder.py)
"""

from __future__ import annotations

from .model import Edge, MazeGraph, Position, Vertex
from .builder import (
    build_adjacency,
    build_graph,
    find_boundary_vertices,
    reduce_vertices,
    sample_vertices,
    select_endpoints,
)

__all__ = [
    "Edge",
    "MazeGraph",
    "Position",
    "Vertex",
    "build_graph",
    "sample_vertices",
    "build_adjacency",
    "reduce_vertices",
    "find_boundary_vertices",
    "select_endpoints",
]
