# config.py
# Tunable limits for tracing/filling, kept in one place.

from dataclasses import dataclass


@dataclass(frozen=True)
class Limits:
    # background ring added around the caller's grid before tracing
    PAD: int = 1

    # boundaries shorter than this are noise (isolated pixel, hairline)
    MIN_BOUNDARY_PIXELS: int = 3
    # a traced, non-degenerate boundary must fill at least this many pixels
    MIN_REGION_PIXELS: int = 3

    # rounding of physical coordinates
    XY_DECIMALS: int = 1
    Z_DECIMALS: int = 3


L = Limits()
