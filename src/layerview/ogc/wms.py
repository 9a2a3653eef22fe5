"""
WMS (Web Map Service) tile and legend request URLs.
"""

import re
from typing import Callable, Dict, Optional, TypeVar
from urllib.parse import quote

from ..types import LegendGraphic, ServerLocator, WMSVersion

T = TypeVar("T")

LEGEND_OPTIONS = "fontName:Arial;fontSize:12;fontColor:0x000000;bgColor:0xFFFFFF;dpi:90"

_PARAM_PATTERNS: Dict[str, "re.Pattern[str]"] = {
    name: re.compile(rf"([&?]){name}=[^&]*", re.IGNORECASE)
    for name in ("CRS", "SRS", "STYLES")
}


def encode_component(value: str) -> str:
    """Percent-encode a query value, leaving the characters encodeURIComponent leaves."""
    return quote(value, safe="!*'()")


def protocol_version_for(crs: str) -> WMSVersion:
    """
    Select the WMS version used to request tiles in ``crs``.

    ``EPSG:`` identifiers use WMS 1.3.0 (``CRS`` parameter); anything else,
    including malformed identifiers, uses WMS 1.1.0 (``SRS`` parameter).
    """
    return WMSVersion.from_crs(crs)


def _set_param(url: str, name: str, value: str) -> str:
    pattern = _PARAM_PATTERNS[name]
    param = f"{name}={encode_component(value)}"
    match = pattern.search(url)
    if match is None:
        separator = "&" if "?" in url else "?"
        return f"{url}{separator}{param}"

    # Keep the first occurrence in place and drop any repeats after it.
    head = url[:match.start()] + match.group(1) + param
    return head + pattern.sub("", url[match.end():])


def build_tile_url(url: str, crs: str, style: Optional[str] = None) -> str:
    """
    Force the coordinate system and style onto a GetMap tile URL.

    Args:
        url: Tile URL produced by a generic WMS tile layer
        crs: Coordinate system identifier to request
        style: Style name; blank or ``None`` keeps whatever the URL carries

    Returns:
        URL with exactly one ``CRS``/``SRS`` parameter and, when a style is
        given, exactly one ``STYLES`` parameter
    """
    new_url = _set_param(url, protocol_version_for(crs).crs_param, crs)
    if style is not None and style.strip():
        new_url = _set_param(new_url, "STYLES", style.strip())
    return new_url


def wrap_tile_url(
    base: Callable[[T], str],
    crs: str,
    style: Optional[str] = None,
) -> Callable[[T], str]:
    """Compose a base tile URL function with :func:`build_tile_url`."""

    def tile_url(coord: T) -> str:
        return build_tile_url(base(coord), crs, style)

    return tile_url


def build_legend_url(locator: ServerLocator, style: Optional[str] = None) -> str:
    """Create the GetLegendGraphic URL for the located layer."""
    style_param = ""
    if style is not None and style.strip():
        style_param = f"&STYLE={encode_component(style.strip())}"
    return (
        f"{locator.wms_url}?"
        "SERVICE=WMS&"
        "VERSION=1.3.0&"
        "REQUEST=GetLegendGraphic&"
        "FORMAT=image/png&"
        f"LAYER={encode_component(locator.qualified_name)}"
        f"{style_param}"
        f"&LEGEND_OPTIONS={LEGEND_OPTIONS}"
    )


def build_legend(
    locator: ServerLocator,
    style: Optional[str] = None,
    title: Optional[str] = None,
    layer_title: Optional[str] = None,
) -> LegendGraphic:
    """
    Pair the legend URL with the title shown above the legend image.

    A non-blank custom ``title`` wins over the server's ``layer_title``;
    with neither, the heading is ``"Legend"``.
    """
    heading = (title or "").strip() or (layer_title or "").strip() or "Legend"
    return LegendGraphic(url=build_legend_url(locator, style), title=heading)
