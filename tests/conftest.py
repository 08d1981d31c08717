from typing import Any, Dict, List, Optional

import pytest


class FakeClient:
    """In-memory stand-in for the dashboard clients."""

    def __init__(
        self,
        orgs: Optional[List[Dict[str, Any]]] = None,
        devices: Optional[List[Dict[str, Any]]] = None,
        statuses: Optional[Dict[str, Dict[str, Any]]] = None,
    ) -> None:
        self.orgs = orgs or []
        self.devices = devices or []
        self.statuses = statuses or {}
        self.calls: List[tuple] = []

    def get_organizations(self):
        self.calls.append(("organizations",))
        return self.orgs

    def get_organization_networks(self, org_id):
        self.calls.append(("networks", org_id))
        return []

    def get_organization_devices(self, org_id, name_filter=""):
        self.calls.append(("devices", org_id, name_filter))
        if not name_filter:
            return list(self.devices)
        return [d for d in self.devices if name_filter.lower() in (d.get("name") or "").lower()]

    def get_device_wireless_status(self, serial):
        self.calls.append(("status", serial))
        return self.statuses.get(serial, {"basicServiceSets": []})


@pytest.fixture
def ap_device():
    return {
        "name": "AP-US-01",
        "model": "MR36",
        "mac": "e0:55:3d:00:00:01",
        "serial": "Q1AA-0001",
        "firmware": "wireless-29-7",
    }


@pytest.fixture
def fake_client(ap_device):
    return FakeClient(
        orgs=[{"id": "1", "name": "Org A"}, {"id": "2", "name": "Org B"}],
        devices=[
            ap_device,
            {"name": "AP-US-02", "model": "MR46", "mac": "e0:55:3d:00:00:02",
             "serial": "Q1AA-0002", "firmware": "wireless-29-7"},
            {"name": "SW-US-01", "model": "MS120-8", "mac": "e0:55:3d:00:00:03",
             "serial": "Q2BB-0001", "firmware": "switch-16-8"},
        ],
        statuses={
            "Q1AA-0001": {"basicServiceSets": [
                {"ssidName": "Corp", "ssidNumber": 0, "enabled": True, "band": "2.4",
                 "bssid": "AA:BB:CC:DD:EE:FF", "channel": 6},
                {"ssidName": "Corp", "ssidNumber": 0, "enabled": True, "band": "5",
                 "bssid": "AA:BB:CC:DD:EE:F0", "channel": 36},
            ]},
            "Q1AA-0002": {"basicServiceSets": []},
            "Q2BB-0001": {"basicServiceSets": [
                {"ssidName": "Nope", "band": "2.4", "bssid": "11:22:33:44:55:66", "channel": 1},
            ]},
        },
    )
