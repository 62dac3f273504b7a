from __future__ import annotations

import argparse
from typing import Sequence

from app.core.config import settings
from app.db.json_store import DocumentStore
from app.schemas.document_schema import SiteDocument
from app.schemas.leave_schema import LeavePeriod
from app.schemas.popup_schema import Popup
from app.services.resource_manager import utc_now_iso


# Stable ids keep repeated runs idempotent
LEAVE_PERIODS: Sequence[tuple[int, str, str, str]] = [
    (1700000000001, "Zomervakantie", "2024-07-01", "2024-07-14"),
    (1700000000002, "Kerstvakantie", "2024-12-23", "2025-01-03"),
]

POPUPS: Sequence[tuple[int, str, str, bool]] = [
    (1700000000101, "Welkom", "Nieuwe patienten zijn van harte welkom.", True),
    (1700000000102, "Actie", "20% korting op de eerste behandeling.", False),
]


def seed_leave_periods(doc: SiteDocument) -> int:
    existing = {p.id for p in doc.leave_periods}
    added = 0
    for leave_id, name, start, end in LEAVE_PERIODS:
        if leave_id in existing:
            continue
        doc.leave_periods.append(LeavePeriod(id=leave_id, name=name, start_date=start, end_date=end, created_at=utc_now_iso()))
        added += 1
    return added


def seed_popups(doc: SiteDocument) -> int:
    existing = {p.id for p in doc.popups}
    added = 0
    for popup_id, title, content, active in POPUPS:
        if popup_id in existing:
            continue
        doc.popups.append(Popup(id=popup_id, title=title, content=content, active=active, created_at=utc_now_iso()))
        added += 1
    return added


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Seed the site document with example records")
    parser.add_argument("--data-file", default=settings.DATA_FILE, help="Path of the JSON site document")
    parser.add_argument("--reset", action="store_true", help="Start from an empty document")
    args = parser.parse_args(argv)

    store = DocumentStore(args.data_file)
    with store.lock:
        doc = SiteDocument() if args.reset else store.load()
        leaves = seed_leave_periods(doc)
        popups = seed_popups(doc)
        store.save(doc)

    print(f"Seed completed: {leaves} leave period(s), {popups} popup(s) added to {store.path}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
