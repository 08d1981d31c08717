from __future__ import annotations

from typing import List, Optional, TypedDict

# ---------------- Types ----------------
class Organization(TypedDict):
    id: str
    name: str

class Device(TypedDict, total=False):
    name: str
    model: str
    mac: str
    serial: str
    firmware: str

class BasicServiceSet(TypedDict, total=False):
    bssid: str
    ssidName: str
    band: str
    channel: int
    enabled: bool

class BSSIDRow(TypedDict):
    name: str
    model: str
    bssid: str          # hyphen-delimited
    ssidName: str
    band: str
    channel: Optional[int]
    locationId: str

# Row keys in workbook column order, paired with their header text.
ROW_FIELDS: List[str] = ["name", "model", "bssid", "ssidName", "band", "channel", "locationId"]
COLUMNS: List[str] = ["Name", "Model", "BSSID", "SSID", "Band", "Channel", "TeamsLocationID"]
COMMAND_COLUMN: str = "POWERSHELL"
