from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from .api import DashboardClient
from .models import Device

logger = logging.getLogger(__name__)

AP_MODEL_PREFIX: str = "MR"


def is_access_point(device: Device) -> bool:
    model: Optional[str] = device.get("model")
    return bool(model) and model.upper().startswith(AP_MODEL_PREFIX)


def filter_access_points(devices: Iterable[Device]) -> List[Device]:
    return [d for d in devices if is_access_point(d)]


def filter_devices(client: DashboardClient, org_id: str, name_pattern: str = "") -> List[Device]:
    """
    AP devices of an organisation.
    The name match is done by the API (case-insensitive substring); the model
    prefix is checked here.
    """
    pattern = (name_pattern or "").strip()
    devices = client.get_organization_devices(org_id, name_filter=pattern)
    aps = filter_access_points(devices)
    logger.info(
        "Org %s: %d device(s) returned for filter %r, %d access point(s)",
        org_id, len(devices), pattern, len(aps),
    )
    return aps
