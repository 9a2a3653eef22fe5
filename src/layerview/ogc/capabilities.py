"""WMS GetCapabilities XML parsing."""

from __future__ import annotations

import logging
import math
import re
import xml.etree.ElementTree as ET
from typing import Iterable, List, Optional

from ..errors import LayerNotFoundError, ParseError
from ..types import LayerBounds, LayerDescriptor, StyleInfo

logger = logging.getLogger(__name__)

# Half the circumference of the Web Mercator sphere, in meters.
WEB_MERCATOR_HALF_EXTENT = 20037508.34

_WORD_START = re.compile(r"\b\w")


def format_layer_name(layer_name: str) -> str:
    """Turn ``carbon_pred_v2`` into ``Carbon Pred V2``."""
    return _WORD_START.sub(lambda match: match.group(0).upper(), layer_name.replace("_", " "))


def mercator_to_degrees(meters: float) -> float:
    return meters / WEB_MERCATOR_HALF_EXTENT * 180


class WMSCapabilitiesParser:
    """
    Parser for WMS GetCapabilities documents.

    Elements are matched by local name so that both namespaced WMS 1.3.0
    documents and bare WMS 1.1.x documents are understood.
    """

    def parse(self, xml_content: str | bytes) -> ET.Element:
        try:
            return ET.fromstring(xml_content)
        except ET.ParseError as exc:
            raise ParseError(f"Invalid capabilities XML: {exc}", cause=exc) from exc

    def find_layer(self, root: ET.Element, qualified_name: str) -> ET.Element:
        """Return the first ``Layer`` whose own ``Name`` equals ``qualified_name``."""
        for layer_elem in root.iterfind(".//{*}Layer"):
            if self._get_text(layer_elem, "{*}Name") == qualified_name:
                return layer_elem
        raise LayerNotFoundError(f"Layer {qualified_name} not found in GetCapabilities")

    def parse_layer(self, xml_content: str | bytes, qualified_name: str) -> LayerDescriptor:
        layer_elem = self.find_layer(self.parse(xml_content), qualified_name)
        return LayerDescriptor(
            title=self.parse_title(layer_elem),
            styles=self.parse_styles(layer_elem),
            bounding_box=self.parse_bounding_box(layer_elem),
        )

    def parse_title(self, layer_elem: ET.Element) -> str:
        title = self._get_text(layer_elem, "{*}Title")
        if title:
            return title
        name = self._get_text(layer_elem, "{*}Name") or ""
        return format_layer_name(name.split(":", 1)[-1])

    def parse_styles(self, layer_elem: ET.Element) -> List[StyleInfo]:
        styles: List[StyleInfo] = []
        for style_elem in layer_elem.findall("{*}Style"):
            name = self._get_text(style_elem, "{*}Name")
            if not name:
                logger.debug("Skipping style without a name")
                continue
            title = self._get_text(style_elem, "{*}Title")
            styles.append(StyleInfo(name=name, title=title or name))
        return styles

    def parse_bounding_box(self, layer_elem: ET.Element) -> Optional[LayerBounds]:
        """
        Resolve the layer extent in degrees.

        Tried in order: the geographic bounding box, the first EPSG:4326
        ``BoundingBox``, then the first ``BoundingBox`` of any CRS (Web
        Mercator values converted, anything else taken as degrees).
        """
        bounds = self._parse_geographic_bbox(layer_elem)
        if bounds is not None:
            return bounds

        bbox_elems = layer_elem.findall("{*}BoundingBox")
        for bbox_elem in bbox_elems:
            if "4326" not in self._bbox_crs(bbox_elem):
                continue
            values = self._bbox_values(bbox_elem)
            if values is not None:
                minx, miny, maxx, maxy = values
                logger.debug("Using EPSG:4326 BoundingBox for layer extent")
                return LayerBounds(south=miny, west=minx, north=maxy, east=maxx)

        if not bbox_elems:
            return None

        first = bbox_elems[0]
        values = self._bbox_values(first)
        if values is None:
            logger.debug("No BoundingBox with four numeric values")
            return None

        minx, miny, maxx, maxy = values
        crs = self._bbox_crs(first)
        if "3857" in crs:
            minx, miny, maxx, maxy = (mercator_to_degrees(v) for v in values)
        else:
            logger.debug("Treating BoundingBox in %r as degrees", crs)
        return LayerBounds(south=miny, west=minx, north=maxy, east=maxx)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _get_text(self, element: ET.Element, path: str) -> Optional[str]:
        elem = element.find(path)
        return elem.text.strip() if elem is not None and elem.text else None

    def _parse_geographic_bbox(self, layer_elem: ET.Element) -> Optional[LayerBounds]:
        geo_elem = layer_elem.find("{*}EX_GeographicBoundingBox")
        if geo_elem is not None:
            west, east, south, north = (
                _to_float(self._get_text(geo_elem, f"{{*}}{tag}"))
                for tag in (
                    "westBoundLongitude",
                    "eastBoundLongitude",
                    "southBoundLatitude",
                    "northBoundLatitude",
                )
            )
            if _all_present((west, east, south, north)):
                return LayerBounds(south=south, west=west, north=north, east=east)

        # WMS 1.1.x spelling of the same thing
        latlon_elem = layer_elem.find("{*}LatLonBoundingBox")
        if latlon_elem is not None:
            values = self._bbox_values(latlon_elem)
            if values is not None:
                minx, miny, maxx, maxy = values
                return LayerBounds(south=miny, west=minx, north=maxy, east=maxx)
        return None

    def _bbox_crs(self, bbox_elem: ET.Element) -> str:
        return bbox_elem.get("CRS") or bbox_elem.get("SRS") or ""

    def _bbox_values(self, bbox_elem: ET.Element) -> Optional[tuple]:
        values = tuple(_to_float(bbox_elem.get(attr)) for attr in ("minx", "miny", "maxx", "maxy"))
        return values if _all_present(values) else None


def _to_float(text: Optional[str]) -> Optional[float]:
    if text is None:
        return None
    try:
        value = float(text.strip())
    except ValueError:
        logger.debug("Ignoring non-numeric coordinate %r", text)
        return None
    return value if math.isfinite(value) else None


def _all_present(values: Iterable[Optional[float]]) -> bool:
    return all(value is not None for value in values)
