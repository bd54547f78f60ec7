#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
render.py
---------
Overlay a solved path on the source image.

Every path vertex and the straight segment between consecutive path vertices
is recoloured with the highlight colour. On a reduced graph consecutive
vertices can be far apart; a bent corridor is drawn as its chord.
"""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Tuple

import numpy as np

from .. import config
from ..graph.model import MazeGraph
from .io import PathLike, load_image, save_image

Color = Tuple[int, int, int]


def draw_line(img: np.ndarray, p0: Tuple[int, int], p1: Tuple[int, int],
              color: Color = config.HIGHLIGHT_COLOR) -> None:
    """Bresenham line from p0 to p1 (both (row, col)), clipped to the image."""
    H, W = img.shape[:2]
    y0, x0 = int(p0[0]), int(p0[1])
    y1, x1 = int(p1[0]), int(p1[1])

    dx = abs(x1 - x0)
    dy = -abs(y1 - y0)
    sx = 1 if x0 < x1 else -1
    sy = 1 if y0 < y1 else -1
    err = dx + dy

    while True:
        if 0 <= x0 < W and 0 <= y0 < H:
            img[y0, x0] = color
        if x0 == x1 and y0 == y1:
            break
        e2 = 2 * err
        if e2 >= dy:
            err += dy
            x0 += sx
        if e2 <= dx:
            err += dx
            y0 += sy


def draw_path(graph: MazeGraph, path: Sequence[int], image: np.ndarray,
              color: Color = config.HIGHLIGHT_COLOR) -> np.ndarray:
    """Return a copy of `image` with the path drawn on it."""
    out = np.array(image, dtype=np.uint8, copy=True)
    if len(path) == 1:
        p = graph.position(path[0])
        out[p.row, p.col] = color
    for a, b in zip(path, path[1:]):
        pa, pb = graph.position(a), graph.position(b)
        out[pa.row, pa.col] = color
        out[pb.row, pb.col] = color
        draw_line(out, pa.as_tuple(), pb.as_tuple(), color)
    return out


def render_solution(graph: MazeGraph, path: Sequence[int], source: PathLike,
                    output: PathLike = config.DEFAULT_OUTPUT_PATH,
                    color: Color = config.HIGHLIGHT_COLOR) -> Path:
    """Load `source`, draw `path`, write to `output` and return that path."""
    image = load_image(source)
    save_image(draw_path(graph, path, image, color), output)
    return Path(output)
