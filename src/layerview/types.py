"""
Type definitions and models for single-layer WMS viewing.
"""

from typing import List, Optional, Tuple
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, model_validator


class CRS(str, Enum):
    """Coordinate Reference Systems the viewer knows by name."""
    EPSG_4326 = "EPSG:4326"
    EPSG_3857 = "EPSG:3857"


class Format(str, Enum):
    """Supported image formats."""
    PNG = "image/png"
    JPEG = "image/jpeg"
    GIF = "image/gif"


class WMSVersion(str, Enum):
    """WMS protocol versions used for GetMap requests."""
    V1_1_0 = "1.1.0"
    V1_3_0 = "1.3.0"

    @property
    def crs_param(self) -> str:
        """Name of the query parameter carrying the coordinate system."""
        return "CRS" if self is WMSVersion.V1_3_0 else "SRS"

    @classmethod
    def from_crs(cls, crs: str) -> "WMSVersion":
        """
        Pick the protocol version for a coordinate system identifier.

        Identifiers in the ``EPSG:`` form are requested with WMS 1.3.0,
        anything else falls back to 1.1.0.
        """
        if isinstance(crs, str) and crs.startswith("EPSG:"):
            return cls.V1_3_0
        return cls.V1_1_0


class ServerLocator(BaseModel):
    """Identifies one layer on one map server."""
    base_url: str = Field(..., description="Server base URL, e.g. http://host/geoserver")
    workspace: str = Field(..., description="Workspace the layer belongs to")
    layer_name: str = Field(..., description="Layer name inside the workspace")

    model_config = ConfigDict(frozen=True)

    @property
    def qualified_name(self) -> str:
        return f"{self.workspace}:{self.layer_name}"

    @property
    def wms_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/wms"


class StyleInfo(BaseModel):
    """A style declared for a layer."""
    name: str
    title: str


class LayerBounds(BaseModel):
    """Geographic extent of a layer in degrees."""
    south: float = Field(..., description="Minimum latitude")
    west: float = Field(..., description="Minimum longitude")
    north: float = Field(..., description="Maximum latitude")
    east: float = Field(..., description="Maximum longitude")

    @property
    def corners(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        """Return ``((south, west), (north, east))`` as map widgets expect."""
        return (self.south, self.west), (self.north, self.east)


class LayerDescriptor(BaseModel):
    """Metadata extracted for one layer from a capabilities document."""
    title: str
    styles: List[StyleInfo] = Field(default_factory=list)
    bounding_box: Optional[LayerBounds] = None


class TileCoord(BaseModel):
    """Position of a tile in the Web Mercator tile grid."""
    z: int = Field(..., ge=0)
    x: int = Field(..., ge=0)
    y: int = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_range(self):
        """Validate that x and y fall inside the grid at zoom z."""
        limit = 2 ** self.z
        if self.x >= limit or self.y >= limit:
            raise ValueError(f'tile ({self.x}, {self.y}) is outside the grid at zoom {self.z}')
        return self


class TileRequestParams(BaseModel):
    """Display options for the WMS tile layer."""
    layer: str = Field(..., description="Fully qualified layer name")
    crs: str = Field(default=CRS.EPSG_3857.value, description="Coordinate system forced onto tile requests")
    style: Optional[str] = Field(None, description="Style name, blank for the server default")
    output_format: Format = Field(default=Format.PNG)
    transparent: bool = True
    tile_size: int = Field(default=256, gt=0)
    uppercase: bool = Field(default=False, description="Upper-case parameter names in base tile URLs")

    @property
    def version(self) -> WMSVersion:
        return WMSVersion.from_crs(self.crs)


class MapView(BaseModel):
    """Center and zoom level of a map view."""
    latitude: float = 0.0
    longitude: float = 0.0
    zoom: int = 2


class LegendGraphic(BaseModel):
    """Legend image URL with the title displayed above it."""
    url: str
    title: str
