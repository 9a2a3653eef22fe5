"""
Shared test configuration, fixtures, and markers for layerview tests.
"""

import pytest

from layerview.types import ServerLocator


def pytest_configure(config):
    """Configure test markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow (>1s)")
    config.addinivalue_line("markers", "net: marks tests requiring network")
    config.addinivalue_line("markers", "property: marks property-based tests")
    config.addinivalue_line("markers", "unit: marks unit tests (fast, pure logic)")
    config.addinivalue_line("markers", "integration: marks integration tests")


WMS_130_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<WMS_Capabilities version="1.3.0" xmlns="http://www.opengis.net/wms"
                  xmlns:xlink="http://www.w3.org/1999/xlink">
    <Service>
        <Name>WMS</Name>
        <Title>GeoServer Web Map Service</Title>
    </Service>
    <Capability>
        <Layer>
            <Title>GeoServer Web Map Service</Title>
            <CRS>EPSG:4326</CRS>
            <CRS>EPSG:3857</CRS>
            {layers}
        </Layer>
    </Capability>
</WMS_Capabilities>"""


SAMPLE_LAYERS = """
            <Layer queryable="0">
                <Name>senegal:carbon_pred</Name>
                <Title>Carbon Prediction</Title>
                <EX_GeographicBoundingBox>
                    <westBoundLongitude>-17.5</westBoundLongitude>
                    <eastBoundLongitude>-11.3</eastBoundLongitude>
                    <southBoundLatitude>12.3</southBoundLatitude>
                    <northBoundLatitude>16.7</northBoundLatitude>
                </EX_GeographicBoundingBox>
                <BoundingBox CRS="EPSG:4326" minx="12.0" miny="-18.0" maxx="17.0" maxy="-11.0"/>
                <Style>
                    <Name>carbon_ramp</Name>
                    <Title>Carbon ramp</Title>
                </Style>
                <Style>
                    <Name>raster</Name>
                </Style>
            </Layer>
            <Layer queryable="0">
                <Name>senegal:land_cover_2020</Name>
            </Layer>"""


def layer_xml(name: str, body: str = "") -> str:
    """Render one named layer element."""
    return f"<Layer><Name>{name}</Name>{body}</Layer>"


def capabilities_xml(layers: str) -> str:
    """Wrap layer elements in a WMS 1.3.0 capabilities document."""
    return WMS_130_TEMPLATE.format(layers=layers)


@pytest.fixture
def make_capabilities():
    """Factory building a capabilities document for one named layer."""

    def make(body: str = "", name: str = "senegal:carbon_pred", extra: str = "") -> str:
        return capabilities_xml(layer_xml(name, body) + extra)

    return make


@pytest.fixture
def sample_capabilities():
    """Capabilities document declaring two senegal layers."""
    return capabilities_xml(SAMPLE_LAYERS)


@pytest.fixture
def fake_server(httpserver):
    """Programmable server for capabilities requests."""
    return httpserver


@pytest.fixture
def server_locator(fake_server):
    """Factory for locators pointing at the fake server."""

    def make(layer_name: str = "carbon_pred", workspace: str = "senegal") -> ServerLocator:
        return ServerLocator(
            base_url=fake_server.url_for("/geoserver"),
            workspace=workspace,
            layer_name=layer_name,
        )

    return make


@pytest.fixture
def serve_capabilities(fake_server):
    """Respond to GetCapabilities on the fake server with the given body."""

    def serve(body: str, status: int = 200) -> None:
        fake_server.expect_request(
            "/geoserver/wms",
            query_string={"SERVICE": "WMS", "VERSION": "1.3.0", "REQUEST": "GetCapabilities"},
        ).respond_with_data(body, status=status, content_type="text/xml")

    return serve
