# Same read operations as api.MerakiClient, backed by the Meraki Python library.
# Requires: pip install meraki

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, cast

import meraki

from .api import DEVICES_PER_PAGE
from .config import BASE_URL, REQUEST_TIMEOUT
from .models import Device, Organization

logger = logging.getLogger(__name__)


class SdkClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = BASE_URL,
        timeout: int = REQUEST_TIMEOUT,
        dashboard: Optional[meraki.DashboardAPI] = None,
    ) -> None:
        # One attempt per call and no rate-limit waits; errors surface as APIError.
        self.dashboard = dashboard or meraki.DashboardAPI(
            api_key=api_key,
            base_url=base_url,
            single_request_timeout=timeout,
            output_log=False,
            print_console=False,
            suppress_logging=True,
            wait_on_rate_limit=False,
            retry_4xx_error=False,
            maximum_retries=1,
        )

    def get_organizations(self) -> List[Organization]:
        logger.debug("SDK getOrganizations")
        return cast(List[Organization], self.dashboard.organizations.getOrganizations() or [])

    def get_organization_networks(self, org_id: str) -> List[Dict[str, Any]]:
        logger.debug("SDK getOrganizationNetworks %s", org_id)
        return cast(List[Dict[str, Any]], self.dashboard.organizations.getOrganizationNetworks(org_id) or [])

    def get_organization_devices(self, org_id: str, name_filter: str = "") -> List[Device]:
        kwargs: Dict[str, Any] = {"perPage": DEVICES_PER_PAGE}
        if name_filter:
            kwargs["name"] = name_filter
        logger.debug("SDK getOrganizationDevices %s kwargs=%s", org_id, kwargs)
        return cast(List[Device], self.dashboard.organizations.getOrganizationDevices(org_id, **kwargs) or [])

    def get_device_wireless_status(self, serial: str) -> Dict[str, Any]:
        logger.debug("SDK getDeviceWirelessStatus %s", serial)
        return cast(Dict[str, Any], self.dashboard.wireless.getDeviceWirelessStatus(serial) or {})
