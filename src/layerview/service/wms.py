"""WMS capabilities reader."""

from __future__ import annotations

import logging
from typing import Any, List, Optional

import requests

from .base import BaseService
from ..errors import LayerNotFoundError, LayerViewError
from ..ogc.capabilities import WMSCapabilitiesParser
from ..types import LayerBounds, LayerDescriptor, ServerLocator, StyleInfo

logger = logging.getLogger(__name__)


class WMSService(BaseService):
    """
    Reads layer metadata from a WMS server's GetCapabilities document.

    Every public lookup fetches the document afresh. Lookups never raise:
    network failures, malformed XML and unknown layers are logged and the
    lookup returns ``None`` (or an empty list for styles).
    """

    def __init__(
        self,
        *,
        version: str = "1.3.0",
        session: Optional[requests.Session] = None,
        parser: Optional[WMSCapabilitiesParser] = None,
        **config: Any,
    ) -> None:
        super().__init__(session=session, **config)
        self.version = version
        self.parser = parser or WMSCapabilitiesParser()

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def fetch_capabilities(self, locator: ServerLocator) -> bytes:
        """Return the raw capabilities bytes; raises on network failure.

        The body is left undecoded so the XML declaration picks the encoding.
        """

        return self._get_content(
            locator.wms_url,
            params={"SERVICE": "WMS", "VERSION": self.version, "REQUEST": "GetCapabilities"},
        )

    def get_title(self, locator: ServerLocator) -> Optional[str]:
        descriptor = self._describe(locator, "title")
        return descriptor.title if descriptor is not None else None

    def get_styles(self, locator: ServerLocator) -> List[StyleInfo]:
        descriptor = self._describe(locator, "styles")
        return list(descriptor.styles) if descriptor is not None else []

    def get_bounding_box(self, locator: ServerLocator) -> Optional[LayerBounds]:
        descriptor = self._describe(locator, "bounds")
        return descriptor.bounding_box if descriptor is not None else None

    def describe_layer(self, locator: ServerLocator) -> Optional[LayerDescriptor]:
        """Title, styles and extent of the layer from a single fetch."""

        return self._describe(locator, "layer description")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _describe(self, locator: ServerLocator, what: str) -> Optional[LayerDescriptor]:
        try:
            xml_content = self.fetch_capabilities(locator)
            return self.parser.parse_layer(xml_content, locator.qualified_name)
        except LayerNotFoundError as exc:
            logger.warning("%s", exc)
        except LayerViewError as exc:
            logger.error("Error fetching layer %s for %s: %s", what, locator.qualified_name, exc)
        return None
