# masktrace/__init__.py

# Errors & tunables
from .errors import MasktraceError, InvalidInputError, AlgorithmInvariantError
from .config import Limits, L

# Data model
from .grid import BinaryGrid
from .selection import Selection, ToPolygon
from .directions import Direction, neighbour_table

# Tracing, filling, extraction
from .contours import trace_boundary, reduce_corners
from .external import external_contour
from .fill import fill_region
from .extract import extract, extract_selections, contour_image, Contour

# Rasters in, coordinates/files out
from .binarise import binarise, pad_background
from .rasterise import grid_from_polygons, polygon_mask
from .geometry import PixelGeometry, to_physical, to_physical_all
from .io_save_load import load_gray, load_mask, save_mask, save_json, save_contours
from .svg import write_svg, svg_text
