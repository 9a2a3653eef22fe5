"""
Tests for layerview.types and the configuration models.

Tests Pydantic models, enums, and derived properties.
"""

import pytest
from pydantic import ValidationError

from layerview.service.config import ViewerConfig, WMSServiceConfig
from layerview.types import CRS, LayerBounds, ServerLocator, TileCoord, TileRequestParams, WMSVersion


class TestTypes:
    """Test type definitions and models."""

    def test_wms_version_parameter_names(self):
        assert WMSVersion.V1_3_0.crs_param == "CRS"
        assert WMSVersion.V1_1_0.crs_param == "SRS"
        assert WMSVersion.V1_3_0 == "1.3.0"

    def test_server_locator_names(self):
        locator = ServerLocator(base_url="http://localhost:8080/geoserver/", workspace="topp", layer_name="states")

        assert locator.qualified_name == "topp:states"
        assert locator.wms_url == "http://localhost:8080/geoserver/wms"

    def test_server_locator_is_immutable(self):
        locator = ServerLocator(base_url="http://localhost:8080/geoserver", workspace="topp", layer_name="states")

        with pytest.raises(ValidationError):
            locator.workspace = "other"

    def test_layer_bounds_corners(self):
        bounds = LayerBounds(south=12.3, west=-17.5, north=16.7, east=-11.3)

        assert bounds.corners == ((12.3, -17.5), (16.7, -11.3))

    @pytest.mark.parametrize(("z", "x", "y"), [(0, 1, 0), (2, 0, 4), (-1, 0, 0)])
    def test_tile_coord_outside_grid(self, z, x, y):
        with pytest.raises(ValidationError):
            TileCoord(z=z, x=x, y=y)

    def test_tile_request_params_defaults(self):
        params = TileRequestParams(layer="topp:states")

        assert params.crs == CRS.EPSG_3857.value
        assert params.version is WMSVersion.V1_3_0
        assert params.output_format.value == "image/png"
        assert params.transparent is True
        assert params.style is None


class TestViewerConfig:
    """Test viewer configuration parsing."""

    def test_camel_case_keys(self):
        config = ViewerConfig.from_mapping(
            {"geoserverUrl": "http://localhost:8080/geoserver", "workspace": "topp", "layerName": "states", "legendTitle": "States"}
        )

        assert config.geoserver_url == "http://localhost:8080/geoserver"
        assert config.layer_name == "states"
        assert config.legend_title == "States"
        assert config.crs == "EPSG:3857"
        assert config.style == ""

    def test_snake_case_keys(self):
        config = ViewerConfig(geoserver_url="http://localhost:8080/geoserver", workspace="topp", layer_name="states")

        assert config.is_complete
        assert config.locator() == ServerLocator(
            base_url="http://localhost:8080/geoserver", workspace="topp", layer_name="states"
        )

    def test_incomplete_config(self):
        assert not ViewerConfig(workspace="topp", layer_name="states").is_complete

    def test_updated_accepts_both_spellings(self):
        config = ViewerConfig(geoserver_url="http://a", workspace="topp", layer_name="states")

        changed = config.updated(layerName="roads", legend_title="Roads")

        assert changed.layer_name == "roads"
        assert changed.legend_title == "Roads"
        assert config.layer_name == "states"

    def test_service_config_rejects_non_positive_timeout(self):
        with pytest.raises(ValidationError):
            WMSServiceConfig(timeout=0)
