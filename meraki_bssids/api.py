# Thin read-only client for the Meraki Dashboard API v1 (requests).
# No retry or backoff: any transport or HTTP error aborts the run.

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Protocol, cast

import requests

from .config import BASE_URL, REQUEST_TIMEOUT
from .models import Device, Organization

logger = logging.getLogger(__name__)

DEVICES_PER_PAGE: int = 1000


class DashboardClient(Protocol):
    def get_organizations(self) -> List[Organization]: ...

    def get_organization_networks(self, org_id: str) -> List[Dict[str, Any]]: ...

    def get_organization_devices(self, org_id: str, name_filter: str = "") -> List[Device]: ...

    def get_device_wireless_status(self, serial: str) -> Dict[str, Any]: ...


# ---------------- HTTP layer ----------------
class MerakiAPIError(Exception):
    def __init__(self, status_code: int, text: str, json_body: Optional[Any], url: str):
        super().__init__(f"Meraki API error: {status_code} {text}")
        self.status_code = status_code
        self.text = text
        self.json_body = json_body
        self.url = url


class MerakiClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: int = REQUEST_TIMEOUT,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.headers: Dict[str, str] = {
            "X-Cisco-Meraki-API-Key": api_key,
            "Content-Type": "application/json",
            "Accept": "*/*",
        }

    def get(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base_url}{path}"
        logger.debug("GET %s params=%s", url, params)
        resp = self.session.get(url, headers=self.headers, params=params, timeout=self.timeout)
        if not resp.ok:
            try:
                body = resp.json()
            except ValueError:
                body = None
            logger.error("GET %s -> %s %s", url, resp.status_code, resp.text)
            raise MerakiAPIError(resp.status_code, resp.text, body, url)
        if resp.status_code == 204 or not resp.content:
            return None
        return resp.json()

    # ---------------- Endpoints ----------------
    def get_organizations(self) -> List[Organization]:
        return cast(List[Organization], self.get("/organizations") or [])

    def get_organization_networks(self, org_id: str) -> List[Dict[str, Any]]:
        return cast(List[Dict[str, Any]], self.get(f"/organizations/{org_id}/networks") or [])

    def get_organization_devices(self, org_id: str, name_filter: str = "") -> List[Device]:
        params: Dict[str, Any] = {"perPage": DEVICES_PER_PAGE}
        if name_filter:
            params["name"] = name_filter
        return cast(List[Device], self.get(f"/organizations/{org_id}/devices", params=params) or [])

    def get_device_wireless_status(self, serial: str) -> Dict[str, Any]:
        return cast(Dict[str, Any], self.get(f"/devices/{serial}/wireless/status") or {})
