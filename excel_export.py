"""
Excel export of rental ledger reports
"""
from __future__ import annotations
import logging

from openpyxl import Workbook
from openpyxl.styles import Font, Alignment, PatternFill, Border, Side
from openpyxl.utils import get_column_letter

from computations import compute_actor_totals

logger = logging.getLogger(__name__)


def _style_header(ws, row=1):
    """Apply header styling to worksheet row"""
    header_font = Font(bold=True, color="FFFFFF")
    fill = PatternFill("solid", fgColor="4F81BD")
    align = Alignment(horizontal="center", vertical="center")
    thin = Side(style="thin", color="A0A0A0")
    border = Border(left=thin, right=thin, top=thin, bottom=thin)
    for cell in ws[row]:
        cell.font = header_font
        cell.fill = fill
        cell.alignment = align
        cell.border = border


def _autosize_columns(ws, min_width=10, max_width=45):
    """Auto-size columns based on content"""
    for col in range(1, ws.max_column + 1):
        letter = get_column_letter(col)
        max_len = 0
        for cell in ws[letter]:
            if cell.value is not None:
                max_len = max(max_len, len(str(cell.value)))
        ws.column_dimensions[letter].width = max(min_width, min(max_width, max_len + 2))


def _is_price_report(document: dict) -> bool:
    rentals = document.get("rentals", [])
    return bool(rentals) and "price" in rentals[0]


def export_excel(document: dict, filepath: str) -> None:
    """
    Export a report to an Excel file:
    - Prices sheet for price reports
    - Actions and Totals sheets for actions reports
    """
    wb = Workbook()
    # remove default sheet
    wb.remove(wb.active)

    if _is_price_report(document):
        ws = wb.create_sheet("Prices")
        ws.append(["Rental", "Price"])
        _style_header(ws, 1)
        ws.freeze_panes = "A2"
        for rec in document["rentals"]:
            ws.append([rec["id"], rec["price"]])
        _autosize_columns(ws)
        wb.save(filepath)
        logger.info("Exported %d prices to %s", len(document["rentals"]), filepath)
        return

    by_modification = "rental_modifications" in document
    records = document["rental_modifications"] if by_modification else document.get("rentals", [])

    ws = wb.create_sheet("Actions")
    headers = ["Modification", "Rental"] if by_modification else ["Rental"]
    headers += ["Who", "Type", "Amount"]
    ws.append(headers)
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    for rec in records:
        keys = [rec["id"], rec["rental_id"]] if by_modification else [rec["id"]]
        for action in rec["actions"]:
            ws.append(keys + [action["who"], action["type"], action["amount"]])
            if action["type"] == "debit":
                ws.cell(ws.max_row, len(headers)).font = Font(color="C00000")
    _autosize_columns(ws)

    # Totals sheet: signed net per actor, summing to zero
    ws = wb.create_sheet("Totals")
    ws.append(["Actor", "Net (credit - debit)"])
    _style_header(ws, 1)
    ws.freeze_panes = "A2"
    totals = compute_actor_totals(document)
    for who, amount in totals.items():
        ws.append([who, amount])
    ws.append(["TOTAL", f"=SUM(B2:B{ws.max_row})"])
    ws.cell(ws.max_row, 1).font = Font(bold=True)
    _autosize_columns(ws)

    wb.save(filepath)
    logger.info("Exported %d report records to %s", len(records), filepath)
