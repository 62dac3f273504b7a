import json

import pytest

from app.db.json_store import DocumentStore
from app.schemas.document_schema import SiteDocument
from app.schemas.leave_schema import LeavePeriod
from app.schemas.popup_schema import Popup


def _sample_document() -> SiteDocument:
    return SiteDocument(
        leave_periods=[
            LeavePeriod(id=1, name="Zomer", start_date="2024-07-01", end_date="2024-07-14", created_at="2024-06-01T10:00:00.000Z"),
        ],
        popups=[
            Popup(id=2, title="Sale", content="20% korting", active=True, created_at="2024-06-02T10:00:00.000Z"),
            Popup(id=3, title="Oud", content="", active=False, created_at="2024-06-03T10:00:00.000Z"),
        ],
    )


def test_missing_file_loads_empty_document(store):
    doc = store.load()
    assert doc.leave_periods == []
    assert doc.popups == []


def test_corrupt_file_loads_empty_document(store):
    store.path.write_text("{not json", encoding="utf-8")
    assert store.load() == SiteDocument()


def test_wrong_shape_loads_empty_document(store):
    store.path.write_text(json.dumps(["leavePeriods"]), encoding="utf-8")
    assert store.load() == SiteDocument()


def test_save_then_load_round_trip(store):
    doc = _sample_document()
    store.save(doc)
    assert store.load() == doc


def test_saved_file_is_pretty_printed_with_wire_names(store):
    store.save(_sample_document())
    text = store.path.read_text(encoding="utf-8")
    assert "\n  " in text
    data = json.loads(text)
    assert set(data) == {"leavePeriods", "popups"}
    assert data["leavePeriods"][0] == {
        "id": 1,
        "name": "Zomer",
        "startDate": "2024-07-01",
        "endDate": "2024-07-14",
        "createdAt": "2024-06-01T10:00:00.000Z",
    }
    assert data["popups"][0]["active"] is True


def test_save_creates_parent_directory(tmp_path):
    store = DocumentStore(tmp_path / "nested" / "dir" / "site.json")
    store.save(SiteDocument())
    assert store.path.exists()
    assert not store.path.with_suffix(".json.tmp").exists()


def test_write_failure_propagates(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    store = DocumentStore(blocker / "site.json")
    with pytest.raises(OSError):
        store.save(SiteDocument())
