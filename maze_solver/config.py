# -*- coding: utf-8 -*-
"""
Defaults shared by the graph builder, renderer and command-line tools.

Everything tunable lives here as a module constant; the CLIs expose the
ones a user is likely to override as argparse options.
"""

from pathlib import Path

# =============================================================================
# Graph construction
# =============================================================================

# Cost of one step between orthogonally adjacent open cells.
EDGE_WEIGHT = 1.0

# =============================================================================
# Rendering
# =============================================================================

# Solution overlay is written here unless the caller passes another path.
DEFAULT_OUTPUT_PATH = Path("solved_maze.png")

# Bright red (RGB)
HIGHLIGHT_COLOR = (255, 0, 0)

# Pixel values used when a grid is turned back into an image.
OPEN_VALUE = 255
WALL_VALUE = 0

# =============================================================================
# Planners
# =============================================================================

# Order in which the solve CLI runs the planners.
DEFAULT_PLANNERS = ("bfs", "dfs", "dijkstra")

# Planner whose path gets rendered.
RENDER_PLANNER = "dijkstra"

# =============================================================================
# Benchmark
# =============================================================================

RESULTS_DIR = Path("results") / "csv"

# Maze sizes in cells (not pixels); a rows x cols maze is (2*rows+1) x (2*cols+1) pixels.
DEFAULT_BENCHMARK_SIZES = "10x10,25x25,50x50"

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = "INFO"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
