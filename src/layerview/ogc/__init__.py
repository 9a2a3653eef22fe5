"""
OGC (Open Geospatial Consortium) specific implementations.

This module contains the WMS capabilities parser and the WMS request URL builders.
"""

from .capabilities import WMSCapabilitiesParser, format_layer_name
from .wms import (
    build_legend,
    build_legend_url,
    build_tile_url,
    protocol_version_for,
    wrap_tile_url,
)

__all__ = [
    "WMSCapabilitiesParser",
    "format_layer_name",
    "build_legend",
    "build_legend_url",
    "build_tile_url",
    "protocol_version_for",
    "wrap_tile_url",
]
