"""Integration tests for layerview against a real GeoServer."""

import pytest

from layerview.service.wms import WMSService
from layerview.types import ServerLocator


@pytest.mark.integration
@pytest.mark.net
@pytest.mark.slow
class TestRealServiceIntegration:
    """Smoke tests against a live WMS endpoint."""

    LOCATOR = ServerLocator(
        base_url="https://gis.developmentgateway.org/geoserver",
        workspace="senegal",
        layer_name="carbon_pred_2024-05_100m_COG",
    )

    def test_get_title(self):
        assert WMSService().get_title(self.LOCATOR)

    def test_get_bounding_box(self):
        bounds = WMSService().get_bounding_box(self.LOCATOR)

        assert bounds is not None
        assert bounds.south < bounds.north
        assert bounds.west < bounds.east

    def test_unknown_layer(self):
        locator = self.LOCATOR.model_copy(update={"layer_name": "no_such_layer"})

        assert WMSService().get_title(locator) is None
        assert WMSService().get_styles(locator) == []
