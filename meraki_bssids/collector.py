from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, cast

from .api import DashboardClient
from .models import BasicServiceSet, BSSIDRow, Device

logger = logging.getLogger(__name__)

LOCATION_ID_PLACEHOLDER: str = "ENTER LOCATION ID HERE"

ProgressCallback = Callable[[int, int, Device], None]


def get_str(d: Dict[str, Any], key: str, default: str = "") -> str:
    v = d.get(key)
    return default if v is None else str(v)


def hyphenate_bssid(bssid: str) -> str:
    # LIS expects hyphen-delimited MACs
    return bssid.replace(":", "-")


def build_row(device: Device, bss: BasicServiceSet) -> BSSIDRow:
    dev = cast(Dict[str, Any], device)
    b = cast(Dict[str, Any], bss)
    return BSSIDRow(
        name=get_str(dev, "name"),
        model=get_str(dev, "model"),
        bssid=hyphenate_bssid(get_str(b, "bssid")),
        ssidName=get_str(b, "ssidName"),
        band=get_str(b, "band"),
        channel=b.get("channel"),
        locationId=LOCATION_ID_PLACEHOLDER,
    )


def collect(
    client: DashboardClient,
    devices: List[Device],
    progress: Optional[ProgressCallback] = None,
    enabled_only: bool = False,
) -> List[BSSIDRow]:
    """
    Fetch wireless status per device, one at a time in the given order, and
    flatten every basic service set into a row. Devices without service sets
    add nothing. API errors propagate.
    """
    rows: List[BSSIDRow] = []
    total = len(devices)
    for done, device in enumerate(devices, 1):
        serial = get_str(cast(Dict[str, Any], device), "serial")
        status = client.get_device_wireless_status(serial)
        bss_list = cast(List[BasicServiceSet], status.get("basicServiceSets") or [])
        if enabled_only:
            bss_list = [b for b in bss_list if b.get("enabled", True)]
        if not bss_list:
            logger.debug("No BSSIDs for %s (%s)", device.get("name", ""), serial)
        for bss in bss_list:
            rows.append(build_row(device, bss))
        logger.debug("%s (%s): %d BSSID(s)", device.get("name", ""), serial, len(bss_list))
        if progress is not None:
            progress(done, total, device)
    logger.info("Collected %d BSSID row(s) from %d device(s)", len(rows), total)
    return rows
