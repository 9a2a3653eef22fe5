"""
Web Mercator tile grid and map view calculations.
"""

import logging
import math
from functools import lru_cache
from typing import List, Tuple

from pyproj.transformer import Transformer

from .types import CRS, LayerBounds, MapView, TileCoord

logger = logging.getLogger(__name__)

# pi * 6378137, the extent of EPSG:3857 along each axis
WORLD_EXTENT = 20037508.342789244
MAX_LATITUDE = 85.0511287798
TILE_SIZE = 256

BBoxTuple = Tuple[float, float, float, float]


@lru_cache(maxsize=None)
def _transformer(src: CRS, dst: CRS) -> Transformer:
    return Transformer.from_crs(src.value, dst.value, always_xy=True)


def project(longitude: float, latitude: float) -> Tuple[float, float]:
    """Project a lon/lat pair to Web Mercator meters, clamping the latitude."""
    latitude = max(-MAX_LATITUDE, min(MAX_LATITUDE, latitude))
    return _transformer(CRS.EPSG_4326, CRS.EPSG_3857).transform(longitude, latitude)


def unproject(x: float, y: float) -> Tuple[float, float]:
    """Convert Web Mercator meters back to a lon/lat pair."""
    return _transformer(CRS.EPSG_3857, CRS.EPSG_4326).transform(x, y)


# Tile grid


def tile_bounds(coord: TileCoord) -> BBoxTuple:
    """
    Extent of a tile in Web Mercator meters.

    Args:
        coord: Tile position, y counted from the top of the grid

    Returns:
        Tuple (min_x, min_y, max_x, max_y)
    """
    size = 2 * WORLD_EXTENT / 2 ** coord.z
    min_x = -WORLD_EXTENT + coord.x * size
    max_y = WORLD_EXTENT - coord.y * size
    return (min_x, max_y - size, min_x + size, max_y)


def tiles_for_bounds(bounds: LayerBounds, zoom: int) -> List[TileCoord]:
    """
    List the tiles at ``zoom`` that intersect ``bounds``.

    Args:
        bounds: Geographic extent in degrees
        zoom: Zoom level of the tile grid

    Returns:
        Tiles ordered row by row, top to bottom
    """
    count = 2 ** zoom
    min_x, min_y = project(bounds.west, bounds.south)
    max_x, max_y = project(bounds.east, bounds.north)

    def column(x: float) -> int:
        return max(0, min(count - 1, int(math.floor((x + WORLD_EXTENT) / (2 * WORLD_EXTENT) * count))))

    def row(y: float) -> int:
        return max(0, min(count - 1, int(math.floor((WORLD_EXTENT - y) / (2 * WORLD_EXTENT) * count))))

    first_col, last_col = sorted((column(min_x), column(max_x)))
    first_row, last_row = sorted((row(max_y), row(min_y)))
    return [
        TileCoord(z=zoom, x=x, y=y)
        for y in range(first_row, last_row + 1)
        for x in range(first_col, last_col + 1)
    ]


# Map views


def fit_bounds(
    bounds: LayerBounds,
    size: Tuple[int, int] = (800, 600),
    padding: Tuple[int, int] = (50, 50),
    max_zoom: int = 18,
) -> MapView:
    """
    Find the view that shows ``bounds`` inside a map of ``size`` pixels.

    Args:
        bounds: Geographic extent in degrees
        size: Map size (width, height) in pixels
        padding: Space (x, y) in pixels kept free on each side
        max_zoom: Highest zoom level the view may use

    Returns:
        MapView centered on the projected bounds at the largest integer zoom
        that fits
    """
    width, height = size
    available_x = max(width - 2 * padding[0], 1)
    available_y = max(height - 2 * padding[1], 1)

    min_x, min_y = project(bounds.west, bounds.south)
    max_x, max_y = project(bounds.east, bounds.north)
    span_x = abs(max_x - min_x)
    span_y = abs(max_y - min_y)

    pixels_per_meter = TILE_SIZE / (2 * WORLD_EXTENT)
    scales = [
        available / (span * pixels_per_meter)
        for available, span in ((available_x, span_x), (available_y, span_y))
        if span > 0
    ]
    if scales:
        zoom = int(math.floor(math.log2(min(scales))))
    else:
        zoom = max_zoom
    zoom = max(0, min(max_zoom, zoom))

    longitude, latitude = unproject((min_x + max_x) / 2, (min_y + max_y) / 2)
    logger.debug("Fitted bounds %s at zoom %d", bounds.corners, zoom)
    return MapView(latitude=latitude, longitude=longitude, zoom=zoom)
