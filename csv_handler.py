"""
CSV export and import of report actions
"""
from __future__ import annotations
import csv
import logging
from typing import Dict, List

logger = logging.getLogger(__name__)

CSV_COLUMNS = ["record_id", "rental_id", "who", "type", "amount"]


def _report_records(document: dict) -> List[dict]:
    if "rental_modifications" in document:
        return document["rental_modifications"]
    return document.get("rentals", [])


def export_actions_to_csv(document: dict, filepath: str) -> int:
    """
    Export every action of a report to CSV, one row per action.
    rental_id is empty for rental-keyed reports.
    Returns the number of rows written.
    """
    rows = 0
    with open(filepath, 'w', newline='', encoding='utf-8') as f:
        writer = csv.writer(f)
        writer.writerow(CSV_COLUMNS)
        for rec in _report_records(document):
            for action in rec.get("actions", []):
                writer.writerow([
                    rec["id"],
                    rec.get("rental_id", ""),
                    action["who"],
                    action["type"],
                    action["amount"],
                ])
                rows += 1
    logger.info("Exported %d actions to %s", rows, filepath)
    return rows


def import_actions_from_csv(filepath: str) -> List[Dict[str, object]]:
    """
    Import actions rows from CSV file.
    Ids come back as strings; amounts as ints.
    """
    actions = []
    with open(filepath, 'r', encoding='utf-8') as f:
        reader = csv.DictReader(f)
        for row in reader:
            actions.append({
                "record_id": row["record_id"],
                "rental_id": row["rental_id"] or None,
                "who": row["who"],
                "type": row["type"],
                "amount": int(row["amount"]),
            })
    return actions
