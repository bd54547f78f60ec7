# -*- coding: utf-8 -*-
"""
Maze rasters: image I/O, path rendering, plotting and random generation.
Exposes:
- load_image / load_grid / save_image / save_grid, ImageDecodeError (io.py)
- draw_line / draw_path / render_solution (render.py)
- GeneratedMaze, generate_maze (generator.py)

Plotting helpers live in plotting.py and are imported on demand so that
matplotlib is only loaded when a figure is requested.
"""

from __future__ import annotations

from .io import (
    ImageDecodeError,
    grid_to_image,
    image_to_grid,
    load_grid,
    load_image,
    save_grid,
    save_image,
)
from .render import draw_line, draw_path, render_solution
from .generator import GeneratedMaze, generate_maze

__all__ = [
    "ImageDecodeError",
    "load_image",
    "load_grid",
    "image_to_grid",
    "grid_to_image",
    "save_image",
    "save_grid",
    "draw_line",
    "draw_path",
    "render_solution",
    "GeneratedMaze",
    "generate_maze",
]
