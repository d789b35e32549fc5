# io_save_load.py
# load/save helpers

import json, os
import pathlib as _p
import numpy as np
from PIL import Image

from .binarise import binarise
from .grid import BinaryGrid


def load_gray(path: str) -> np.ndarray:
    return np.array(Image.open(path).convert('L'), dtype=np.uint8)


def load_mask(path: str, threshold=None) -> BinaryGrid:
    grid, _ = binarise(load_gray(path), threshold)
    return grid


def save_mask(path: str, grid: BinaryGrid):
    """Foreground black on white, like the images load_mask() expects."""
    _p.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
    Image.fromarray(((1 - grid.array) * 255).astype(np.uint8)).save(path)


def save_json(path: str, obj: dict):
    _p.Path(os.path.dirname(path) or ".").mkdir(parents=True, exist_ok=True)
    with open(path, 'w') as f: json.dump(obj, f, ensure_ascii=False, indent=2)


def save_contours(path: str, contours, size=None):
    """contours: list of (col, row) polygons, as returned by extract()."""
    obj = {"contours": [[[int(c), int(r)] for c, r in poly] for poly in contours]}
    if size is not None:
        obj["size"] = [int(size[0]), int(size[1])]
    save_json(path, obj)
