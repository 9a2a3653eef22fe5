"""Map server clients and their configuration."""

from .base import BaseService
from .config import ViewerConfig, WMSServiceConfig
from .wms import WMSService

__all__ = [
    "BaseService",
    "ViewerConfig",
    "WMSService",
    "WMSServiceConfig",
]
