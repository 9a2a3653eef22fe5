"""Configuration models for the viewer and its WMS reader."""

from __future__ import annotations

from typing import Any, Dict, Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..types import CRS, ServerLocator
from .wms import WMSService


class WMSServiceConfig(BaseModel):
    """HTTP settings used when reading capabilities."""

    version: str = Field(default="1.3.0", description="WMS version of the GetCapabilities request")
    timeout: float = Field(default=30.0, gt=0, description="Request timeout in seconds")
    headers: Dict[str, str] = Field(
        default_factory=dict, description="Additional HTTP headers to include"
    )

    def build_service(self) -> WMSService:
        """Create a ``WMSService`` for this configuration."""

        return WMSService(version=self.version, timeout=self.timeout, headers=dict(self.headers))


class ViewerConfig(BaseModel):
    """
    Inputs of the layer viewer.

    Field names are accepted in snake_case or in the camelCase used by the
    configuration form (``geoserverUrl``, ``layerName``, ``legendTitle``).
    """

    geoserver_url: str = Field(default="", alias="geoserverUrl", description="Server base URL")
    workspace: str = Field(default="", description="Workspace of the layer")
    layer_name: str = Field(default="", alias="layerName", description="Layer name in the workspace")
    crs: str = Field(default=CRS.EPSG_3857.value, description="Coordinate system for tile requests")
    style: str = Field(default="", description="Style name, empty for the server default")
    legend_title: str = Field(
        default="", alias="legendTitle", description="Custom legend title, empty for the layer title"
    )

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ViewerConfig":
        """Build a configuration from plain key/value data."""

        return cls.model_validate(dict(data))

    @property
    def is_complete(self) -> bool:
        return all(value.strip() for value in (self.geoserver_url, self.workspace, self.layer_name))

    def locator(self) -> ServerLocator:
        return ServerLocator(
            base_url=self.geoserver_url.strip(),
            workspace=self.workspace.strip(),
            layer_name=self.layer_name.strip(),
        )

    def updated(self, **fields: Any) -> "ViewerConfig":
        """Return a copy with ``fields`` replaced; camelCase names are accepted."""

        aliases = {name: info.alias or name for name, info in type(self).model_fields.items()}
        data = self.model_dump(by_alias=True)
        for key, value in fields.items():
            data[aliases.get(key, key)] = value
        return type(self).model_validate(data)
