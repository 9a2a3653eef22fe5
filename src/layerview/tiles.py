"""
Generic WMS tile layer producing per-tile GetMap URLs.
"""

import logging
from typing import Dict, Optional

from .core import tile_bounds
from .ogc.wms import encode_component, wrap_tile_url
from .types import CRS, ServerLocator, TileCoord, TileRequestParams

logger = logging.getLogger(__name__)


class WMSTileLayer:
    """
    WMS layer drawn on the Web Mercator tile grid.

    ``base_tile_url`` is the plain templated request any WMS tile layer makes
    (grid CRS, empty style); ``get_tile_url`` rewrites it so the configured
    coordinate system and style are sent to the server.
    """

    grid_crs = CRS.EPSG_3857

    def __init__(self, url: str, params: TileRequestParams) -> None:
        self.url = url
        self.params = params
        self.version = params.version
        self._wms_params = self._build_wms_params()
        self._query = self._param_string()
        self.get_tile_url = wrap_tile_url(self.base_tile_url, params.crs, params.style)

    @classmethod
    def for_locator(
        cls,
        locator: ServerLocator,
        crs: str = CRS.EPSG_3857.value,
        style: Optional[str] = None,
        **options: object,
    ) -> "WMSTileLayer":
        """Create the tile layer for a located layer."""

        params = TileRequestParams(layer=locator.qualified_name, crs=crs, style=style, **options)
        logger.debug(
            "WMS layer configuration: url=%s layer=%s crs=%s version=%s style=%s",
            locator.wms_url,
            params.layer,
            params.crs,
            params.version.value,
            params.style or "default",
        )
        return cls(locator.wms_url, params)

    def base_tile_url(self, coord: TileCoord) -> str:
        min_x, min_y, max_x, max_y = tile_bounds(coord)
        bbox_key = "BBOX" if self.params.uppercase else "bbox"
        return (
            f"{self.url}{self._query}"
            f"&{bbox_key}={min_x},{min_y},{max_x},{max_y}"
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _build_wms_params(self) -> Dict[str, str]:
        size = str(self.params.tile_size)
        return {
            "service": "WMS",
            "request": "GetMap",
            "layers": self.params.layer,
            "styles": "",
            "format": self.params.output_format.value,
            "transparent": "true" if self.params.transparent else "false",
            "version": self.version.value,
            "width": size,
            "height": size,
            self.version.crs_param.lower(): self.grid_crs.value,
        }

    def _param_string(self) -> str:
        parts = []
        for key, value in self._wms_params.items():
            name = key.upper() if self.params.uppercase else key
            parts.append(f"{encode_component(name)}={encode_component(value)}")
        separator = "&" if "?" in self.url else "?"
        return separator + "&".join(parts)
