"""
High-level user-friendly API for layerview.

This module provides simple functions for reading layer metadata from a WMS
server without constructing service objects.
"""

from typing import List, Optional

from .service.wms import WMSService
from .types import LayerBounds, LayerDescriptor, ServerLocator, StyleInfo


def locate(base_url: str, workspace: str, layer_name: str) -> ServerLocator:
    """
    Create a locator for one layer on one server.

    Args:
        base_url: Server base URL (without the ``/wms`` suffix)
        workspace: Workspace of the layer
        layer_name: Layer name inside the workspace

    Returns:
        ServerLocator object
    """
    return ServerLocator(base_url=base_url, workspace=workspace, layer_name=layer_name)


def get_title(locator: ServerLocator, service: Optional[WMSService] = None) -> Optional[str]:
    """
    Read the human-readable title of a layer.

    Args:
        locator: Layer to look up
        service: Reader to use (default: a fresh ``WMSService``)

    Returns:
        The layer title, the formatted layer name when the layer has no
        title, or None when the capabilities could not be read or the layer
        is not declared

    Examples:
        >>> layer = locate("https://example.com/geoserver", "senegal", "carbon_pred")
        >>> get_title(layer)
        'Carbon Prediction'
    """
    return (service or WMSService()).get_title(locator)


def get_styles(locator: ServerLocator, service: Optional[WMSService] = None) -> List[StyleInfo]:
    """
    Read the styles declared for a layer.

    Args:
        locator: Layer to look up
        service: Reader to use (default: a fresh ``WMSService``)

    Returns:
        Styles in document order, empty when none could be read
    """
    return (service or WMSService()).get_styles(locator)


def get_bounding_box(locator: ServerLocator, service: Optional[WMSService] = None) -> Optional[LayerBounds]:
    """
    Read the geographic extent of a layer.

    Args:
        locator: Layer to look up
        service: Reader to use (default: a fresh ``WMSService``)

    Returns:
        Extent in degrees, or None when no usable bounding box is declared
    """
    return (service or WMSService()).get_bounding_box(locator)


def describe_layer(locator: ServerLocator, service: Optional[WMSService] = None) -> Optional[LayerDescriptor]:
    """Convenience function reading title, styles and extent in one request."""
    return (service or WMSService()).describe_layer(locator)
