"""Base abstraction for HTTP-backed map services."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import requests

from ..errors import NetworkError

__all__ = ["BaseService"]

logger = logging.getLogger(__name__)


class BaseService:
    """Shared HTTP plumbing for map server clients."""

    def __init__(
        self,
        *,
        session: Optional[requests.Session] = None,
        timeout: float = 30.0,
        headers: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.session = session or requests.Session()
        self.timeout = timeout
        self.headers: Dict[str, str] = dict(headers or {})

    def _get_content(self, url: str, params: Optional[Dict[str, Any]] = None) -> bytes:
        """GET ``url`` and return the undecoded body, raising ``NetworkError`` on failure."""

        try:
            response = self.session.get(url, params=params, headers=self.headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.debug("GET %s failed: %s", url, exc, exc_info=True)
            raise NetworkError(f"Request to {url} failed: {exc}", cause=exc) from exc
        return response.content
