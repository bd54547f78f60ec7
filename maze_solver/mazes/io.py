#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
io.py
-----
Image decode/encode for maze rasters (Pillow).

Grid convention: grid[r, c] == 0 means wall, anything else is open. The grid
is the red channel of the RGB-converted image.
"""

from __future__ import annotations

import os
from typing import Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from .. import config

PathLike = Union[str, "os.PathLike[str]"]


class ImageDecodeError(ValueError):
    """The input is missing, unreadable or not a decodable raster."""


def load_image(path: PathLike) -> np.ndarray:
    """Decode an image file into an (H, W, 3) uint8 RGB array."""
    try:
        with Image.open(path) as img:
            rgb = np.array(img.convert("RGB"), dtype=np.uint8)
    except FileNotFoundError as e:
        raise ImageDecodeError(f"No such image: {path}") from e
    except UnidentifiedImageError as e:
        raise ImageDecodeError(f"Not a decodable image: {path}") from e
    except Image.DecompressionBombError as e:
        raise ImageDecodeError(f"Image too large to decode: {path}: {e}") from e
    except OSError as e:
        raise ImageDecodeError(f"Could not read image {path}: {e}") from e
    return rgb


def image_to_grid(rgb: np.ndarray) -> np.ndarray:
    """(H, W, 3) image -> (H, W) grid using the first channel."""
    rgb = np.asarray(rgb)
    if rgb.ndim == 2:
        return rgb
    return rgb[..., 0]


def load_grid(path: PathLike) -> np.ndarray:
    return image_to_grid(load_image(path))


def grid_to_image(grid: np.ndarray) -> np.ndarray:
    """Binary grid -> RGB image (open cells white, walls black)."""
    grid = np.asarray(grid)
    rgb = np.full(grid.shape + (3,), config.WALL_VALUE, dtype=np.uint8)
    rgb[grid != 0] = config.OPEN_VALUE
    return rgb


def save_image(rgb: np.ndarray, path: PathLike) -> None:
    """Write an RGB array to disk; the format follows the file extension.

    Write failures (permissions, missing directory, full disk) raise OSError.
    """
    Image.fromarray(np.asarray(rgb, dtype=np.uint8)).save(path)


def save_grid(grid: np.ndarray, path: PathLike) -> None:
    save_image(grid_to_image(grid), path)
