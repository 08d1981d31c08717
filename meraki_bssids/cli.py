# Meraki AP BSSID export for Teams emergency location (LIS) import
# - Lists organizations and lets the user choose one
# - Optional AP name filter (partial, matched by the Dashboard API)
# - Previews matching MR devices, then pulls wireless status per AP
# - Writes MerakiBSSIDs_<timestamp>.xlsx with a Set-CsOnlineLisWirelessAccessPoint column

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, List, Optional

import pyfiglet
import requests
from meraki.exceptions import APIError
from rich.console import Console
from rich.panel import Panel
from rich.progress import BarColumn, Progress, TaskProgressColumn, TextColumn
from rich.table import Table
from rich.text import Text

from . import __version__
from .api import DashboardClient, MerakiAPIError, MerakiClient
from .collector import collect
from .config import BASE_URL, REQUEST_TIMEOUT, ConfigError, Settings, resolve_api_key
from .devices import filter_devices
from .export import export
from .logs import log_and_print, setup_logging
from .models import BSSIDRow, Device, Organization
from .sdk import SdkClient
from .selection import SelectionError, confirm, prompt_name_filter, prompt_organization, select_by_index

logger = logging.getLogger(__name__)

FATAL_ERRORS = (
    MerakiAPIError,
    APIError,
    requests.RequestException,
    ValueError,
    OSError,
    ConfigError,
    SelectionError,
    IndexError,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="meraki-bssids",
        description="Export Meraki AP BSSIDs to an Excel workbook for Teams LIS import.",
    )
    parser.add_argument("--api-key", help="Meraki API key. Falls back to MERAKI_DASHBOARD_API_KEY, then a prompt.")
    parser.add_argument("--org", type=int, help="Organization number as shown in the list (1-based).")
    parser.add_argument("--name-filter", help="Partial AP name filter. Prompted for when omitted.")
    parser.add_argument("--output-dir", help="Output folder (default: ~/Documents, else current folder).")
    parser.add_argument("--base-url", default=BASE_URL, help=f"Dashboard API base URL (default: {BASE_URL}).")
    parser.add_argument("--timeout", type=int, default=REQUEST_TIMEOUT, help="Request timeout in seconds (default: 300).")
    parser.add_argument("--sdk", action="store_true", help="Use the meraki Python library instead of raw requests.")
    parser.add_argument("--enabled-only", action="store_true", help="Skip BSSIDs of disabled SSIDs.")
    parser.add_argument("--static-commands", action="store_true",
                        help="Write the POWERSHELL column as text instead of Excel formulas.")
    parser.add_argument("-y", "--yes", action="store_true", help="Do not ask for confirmation after the preview.")
    parser.add_argument("--log-dir", default=".", help="Folder for the run log (default: current folder).")
    parser.add_argument("--debug", action="store_true", help="Verbose logging.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def make_client(settings: Settings) -> DashboardClient:
    if settings.use_sdk:
        return SdkClient(settings.api_key, base_url=settings.base_url, timeout=settings.timeout)
    return MerakiClient(settings.api_key, base_url=settings.base_url, timeout=settings.timeout)


# ---------------- Console output ----------------
def show_banner(console: Console) -> None:
    banner = pyfiglet.figlet_format("BSSIDs", font="slant")
    console.print(f"[bold cyan]{banner}[/bold cyan]")
    console.print(Panel.fit(
        Text("Meraki AP BSSID export for Teams emergency location (LIS) import", style="bold white"),
        border_style="cyan",
    ))


def show_device_preview(console: Console, devices: List[Device]) -> None:
    table = Table(title=f"{len(devices)} access point(s) matched")
    for col in ("Name", "Model", "MAC", "Serial", "Firmware"):
        table.add_column(col)
    for d in devices:
        table.add_row(
            str(d.get("name") or ""),
            str(d.get("model") or ""),
            str(d.get("mac") or ""),
            str(d.get("serial") or ""),
            str(d.get("firmware") or ""),
        )
    console.print(table)


def collect_with_progress(
    console: Console, client: DashboardClient, devices: List[Device], enabled_only: bool = False
) -> List[BSSIDRow]:
    with Progress(
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        TaskProgressColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("Fetching BSSIDs", total=len(devices))

        def _advance(done: int, total: int, device: Device) -> None:
            progress.update(task, completed=done, description=f"Fetching BSSIDs ({device.get('name') or ''})")

        return collect(client, devices, progress=_advance, enabled_only=enabled_only)


# ---------------- Main flow ----------------
def run(
    settings: Settings,
    console: Optional[Console] = None,
    input_func: Callable[[str], str] = input,
    client: Optional[DashboardClient] = None,
) -> int:
    console = console or Console()
    show_banner(console)

    if client is None:
        resolve_api_key(settings)
        client = make_client(settings)

    orgs: List[Organization] = client.get_organizations()
    if not orgs:
        log_and_print("No organizations available for this API key.", level="error")
        return 1

    if settings.org_number is not None:
        org = select_by_index(orgs, settings.org_number - 1)
    else:
        org = prompt_organization(orgs, input_func=input_func)
    org_id = str(org.get("id", ""))
    log_and_print(f"Organization: {org.get('name', '')} (ID: {org_id})")

    name_filter = settings.name_filter
    if name_filter is None:
        name_filter = prompt_name_filter(input_func=input_func)

    devices = filter_devices(client, org_id, name_filter)
    if not devices:
        log_and_print("No access points matched; nothing to export.", level="warning")
        return 0

    show_device_preview(console, devices)
    if not settings.assume_yes and not confirm(f"Fetch BSSIDs for {len(devices)} AP(s)?", input_func=input_func):
        log_and_print("Cancelled by user. No file written.")
        return 0

    rows = collect_with_progress(console, client, devices, enabled_only=settings.enabled_only)
    out_file = export(rows, settings.output_dir, static_commands=settings.static_commands)

    log_and_print(f"\n✅ Completed. APs: {len(devices)} | BSSIDs: {len(rows)}")
    log_and_print(f"Output: {out_file}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.from_args(args)
    try:
        log_filename = setup_logging(settings.log_dir, debug=settings.debug)
    except OSError as e:
        print(f"❌ Cannot write log to {settings.log_dir}: {e}", file=sys.stderr)
        return 1
    logger.info("Script started (sdk=%s)", settings.use_sdk)

    try:
        code = run(settings)
    except KeyboardInterrupt:
        log_and_print("\nCancelled by user.", level="warning")
        code = 130
    except FATAL_ERRORS as e:
        logger.exception("Run aborted")
        print(f"❌ {e}", file=sys.stderr)
        code = 1

    print(f"Full log written to: {log_filename}")
    return code


if __name__ == "__main__":
    sys.exit(main())
