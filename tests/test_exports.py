from openpyxl import load_workbook

from csv_handler import export_actions_to_csv, import_actions_from_csv
from excel_export import export_excel
from reports import ReportMode, build_report


def test_csv_export_one_row_per_action(store, tmp_path):
    document = build_report(store, ReportMode.MODIFICATIONS)
    path = tmp_path / "actions.csv"
    assert export_actions_to_csv(document, str(path)) == 15

    rows = import_actions_from_csv(str(path))
    assert len(rows) == 15
    assert rows[0] == {"record_id": "1", "rental_id": "1", "who": "driver", "type": "debit", "amount": 23228}


def test_csv_rental_report_has_no_rental_id(store, tmp_path):
    document = build_report(store, ReportMode.RENTALS)
    path = tmp_path / "actions.csv"
    export_actions_to_csv(document, str(path))
    rows = import_actions_from_csv(str(path))
    assert all(r["rental_id"] is None for r in rows)
    assert rows[4] == {"record_id": "1", "rental_id": None, "who": "drivy", "type": "credit", "amount": 2706}


def test_excel_actions_report(store, tmp_path):
    document = build_report(store, ReportMode.MODIFICATIONS)
    path = tmp_path / "report.xlsx"
    export_excel(document, str(path))

    wb = load_workbook(str(path))
    assert wb.sheetnames == ["Actions", "Totals"]
    actions = wb["Actions"]
    assert [c.value for c in actions[1]] == ["Modification", "Rental", "Who", "Type", "Amount"]
    assert [c.value for c in actions[2]] == [1, 1, "driver", "debit", 23228]
    assert actions.max_row == 16

    totals = wb["Totals"]
    assert totals["A2"].value == "driver"
    assert totals["B2"].value == -(23228 * 2 + 7408)
    assert totals["A7"].value == "TOTAL"
    assert totals["B7"].value == "=SUM(B2:B6)"


def test_excel_price_report(store, tmp_path):
    document = build_report(store, ReportMode.PRICES)
    path = tmp_path / "prices.xlsx"
    export_excel(document, str(path))

    wb = load_workbook(str(path))
    assert wb.sheetnames == ["Prices"]
    assert [c.value for c in wb["Prices"][2]] == [1, 5400]
