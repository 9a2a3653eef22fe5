"""Viewer session tying configuration, capabilities and tile URLs together."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

from .core import fit_bounds
from .errors import ConfigurationError
from .ogc.capabilities import format_layer_name
from .ogc.wms import build_legend
from .service.config import ViewerConfig
from .service.wms import WMSService
from .tiles import WMSTileLayer
from .types import LayerBounds, LegendGraphic, MapView, ServerLocator, StyleInfo
from .typing import CapabilitiesReader, MapSize, Padding

logger = logging.getLogger(__name__)


class LayerSession:
    """
    One configured layer as shown by the viewer.

    Metadata is read from the server on every call; a new configuration
    means a new session (see :meth:`with_changes`).
    """

    def __init__(self, config: ViewerConfig, service: Optional[CapabilitiesReader] = None) -> None:
        self.config = config
        self.service = service if service is not None else WMSService()

    def validate(self) -> None:
        if not self.config.is_complete:
            raise ConfigurationError("Please fill in all fields")

    @property
    def locator(self) -> ServerLocator:
        self.validate()
        return self.config.locator()

    @property
    def tile_layer(self) -> WMSTileLayer:
        return WMSTileLayer.for_locator(self.locator, crs=self.config.crs, style=self.config.style)

    def layer_title(self) -> str:
        title = self.service.get_title(self.locator)
        if title:
            return title
        return format_layer_name(self.config.layer_name.strip())

    def available_styles(self) -> List[StyleInfo]:
        styles = self.service.get_styles(self.locator)
        if not styles:
            logger.info("No styles found for %s, using the default style", self.locator.qualified_name)
        return styles

    def bounds(self) -> Optional[LayerBounds]:
        return self.service.get_bounding_box(self.locator)

    def legend(self) -> LegendGraphic:
        layer_title = None
        if not self.config.legend_title.strip():
            layer_title = self.layer_title()
        return build_legend(
            self.locator,
            style=self.config.style,
            title=self.config.legend_title,
            layer_title=layer_title,
        )

    def initial_view(
        self,
        size: MapSize = (800, 600),
        padding: Padding = (50, 50),
        max_zoom: int = 18,
    ) -> MapView:
        """View zoomed to the layer extent, or the default world view."""

        bounds = self.bounds()
        if bounds is None:
            logger.warning("Could not determine layer bounds, using default view")
            return MapView()
        return fit_bounds(bounds, size=size, padding=padding, max_zoom=max_zoom)

    def with_changes(self, **fields: Any) -> "LayerSession":
        return type(self)(self.config.updated(**fields), service=self.service)
