"""layerview - view a single WMS raster layer: capabilities lookup and tile URLs."""

from ._version import __version__

from .api import describe_layer, get_bounding_box, get_styles, get_title, locate
from .core import fit_bounds, tile_bounds, tiles_for_bounds
from .debounce import Debouncer
from .errors import (
    ConfigurationError,
    LayerNotFoundError,
    LayerViewError,
    NetworkError,
    ParseError,
    ServiceError,
    ValidationError,
)
from .ogc import (
    WMSCapabilitiesParser,
    build_legend,
    build_legend_url,
    build_tile_url,
    format_layer_name,
    protocol_version_for,
    wrap_tile_url,
)
from .service import ViewerConfig, WMSService, WMSServiceConfig
from .tiles import WMSTileLayer
from .types import (
    CRS,
    Format,
    LayerBounds,
    LayerDescriptor,
    LegendGraphic,
    MapView,
    ServerLocator,
    StyleInfo,
    TileCoord,
    TileRequestParams,
    WMSVersion,
)
from .viewer import LayerSession

__all__ = [
    "__version__",
    "describe_layer",
    "get_bounding_box",
    "get_styles",
    "get_title",
    "locate",
    "fit_bounds",
    "tile_bounds",
    "tiles_for_bounds",
    "Debouncer",
    "ConfigurationError",
    "LayerNotFoundError",
    "LayerViewError",
    "NetworkError",
    "ParseError",
    "ServiceError",
    "ValidationError",
    "WMSCapabilitiesParser",
    "build_legend",
    "build_legend_url",
    "build_tile_url",
    "format_layer_name",
    "protocol_version_for",
    "wrap_tile_url",
    "ViewerConfig",
    "WMSService",
    "WMSServiceConfig",
    "WMSTileLayer",
    "CRS",
    "Format",
    "LayerBounds",
    "LayerDescriptor",
    "LegendGraphic",
    "MapView",
    "ServerLocator",
    "StyleInfo",
    "TileCoord",
    "TileRequestParams",
    "WMSVersion",
    "LayerSession",
]
