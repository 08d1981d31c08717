# Workbook export for the Teams LIS wireless access point import.
# Requires: pip install openpyxl

from __future__ import annotations

import logging
import os
from datetime import datetime
from typing import Any, List, Optional, cast

from openpyxl import Workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.table import Table, TableStyleInfo
from openpyxl.worksheet.worksheet import Worksheet

from .models import BSSIDRow, COLUMNS, COMMAND_COLUMN, ROW_FIELDS

logger = logging.getLogger(__name__)

SHEET_TITLE: str = "APs"
TABLE_NAME: str = "APTable"
FILENAME_PREFIX: str = "MerakiBSSIDs"
MAX_COLUMN_WIDTH: int = 60

COMMAND_TEMPLATE: str = (
    "set-CsOnlineLisWirelessAccessPoint -BSSID '{bssid}' "
    "-Description '{name} {model} {ssid} {band}' -LocationID '{location}'"
)


def build_filename(now: Optional[datetime] = None) -> str:
    stamp = (now or datetime.now()).strftime("%Y%m%d_%H%M%S")
    return f"{FILENAME_PREFIX}_{stamp}.xlsx"


def powershell_command(row: BSSIDRow) -> str:
    return COMMAND_TEMPLATE.format(
        bssid=row["bssid"],
        name=row["name"],
        model=row["model"],
        ssid=row["ssidName"],
        band=row["band"],
        location=row["locationId"],
    )


def powershell_formula(row_number: int) -> str:
    """Excel formula building the same command from cells A-G of the given row."""
    r = row_number
    return (
        f"=\"set-CsOnlineLisWirelessAccessPoint -BSSID '\"&C{r}&\"' "
        f"-Description '\"&A{r}&\" \"&B{r}&\" \"&D{r}&\" \"&E{r}&\"' "
        f"-LocationID '\"&G{r}&\"'\""
    )


def _autosize(ws: Worksheet, widths: List[int]) -> None:
    for i, w in enumerate(widths, start=1):
        ws.column_dimensions[get_column_letter(i)].width = min(max(w + 2, 10), MAX_COLUMN_WIDTH)


def export(
    rows: List[BSSIDRow],
    output_dir: str,
    now: Optional[datetime] = None,
    static_commands: bool = False,
) -> str:
    """
    Write rows to <output_dir>/MerakiBSSIDs_<timestamp>.xlsx in a single pass,
    including the derived POWERSHELL column. Returns the absolute path.
    """
    os.makedirs(output_dir, exist_ok=True)
    out_path = os.path.abspath(os.path.join(output_dir, build_filename(now)))

    header: List[str] = COLUMNS + [COMMAND_COLUMN]
    wb: Workbook = Workbook()
    ws: Worksheet = cast(Worksheet, wb.active)
    ws.title = SHEET_TITLE
    ws.append(header)

    widths: List[int] = [len(h) for h in header]
    for row_number, row in enumerate(rows, start=2):
        values: List[Any] = [row[k] for k in ROW_FIELDS]  # type: ignore[literal-required]
        command = powershell_command(row)
        values.append(command if static_commands else powershell_formula(row_number))
        ws.append(values)
        # device text copied verbatim, never evaluated as a formula
        for cell in ws[row_number][:len(ROW_FIELDS)]:
            if isinstance(cell.value, str) and cell.value.startswith("="):
                cell.data_type = "s"
        for i, val in enumerate(values[:-1] + [command]):
            widths[i] = max(widths[i], len(str(val)) if val is not None else 0)

    ws.freeze_panes = "A2"
    if rows:
        ref = f"A1:{get_column_letter(len(header))}{len(rows) + 1}"
        table = Table(displayName=TABLE_NAME, ref=ref)
        table.tableStyleInfo = TableStyleInfo(name="TableStyleMedium2", showRowStripes=True)
        ws.add_table(table)
    else:
        logger.warning("No rows to export; writing header only")
    _autosize(ws, widths)

    wb.save(out_path)
    logger.info("Excel written: %s (%d rows)", out_path, len(rows))
    return out_path
