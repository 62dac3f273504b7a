from concurrent.futures import ThreadPoolExecutor

from app.schemas.document_schema import SiteDocument
from app.schemas.popup_schema import Popup
from app.services.resource_manager import IdGenerator, leave_period_manager, popup_manager


def test_add_leave_period_to_empty_document(store):
    created = leave_period_manager(store).add({"start_date": "2024-07-01", "end_date": "2024-07-14", "name": "Zomer"})

    periods = store.load().leave_periods
    assert len(periods) == 1
    stored = periods[0]
    assert stored == created
    assert stored.name == "Zomer"
    assert stored.start_date == "2024-07-01"
    assert stored.end_date == "2024-07-14"
    assert isinstance(stored.id, int)
    assert stored.created_at.endswith("Z")


def test_leave_period_name_defaults_when_omitted(store):
    created = leave_period_manager(store).add({"start_date": "2024-12-23", "end_date": "2025-01-03", "name": None})
    assert created.name == "Verlof"


def test_add_keeps_existing_order_and_ids_increase(store):
    manager = popup_manager(store)
    first = manager.add({"title": "A", "content": "a"})
    second = manager.add({"title": "B", "content": "b"})
    third = manager.add({"title": "C", "content": "c", "active": True})

    popups = manager.list()
    assert [p.title for p in popups] == ["A", "B", "C"]
    assert first.id < second.id < third.id
    assert first.active is False
    assert third.active is True


def test_id_generator_never_repeats():
    ids = IdGenerator()
    issued = [ids.next_id() for _ in range(500)]
    assert issued == sorted(issued)
    assert len(set(issued)) == len(issued)


def test_delete_missing_id_leaves_content_unchanged(store):
    manager = leave_period_manager(store)
    manager.add({"start_date": "2024-07-01", "end_date": "2024-07-14"})
    before = store.load()

    manager.delete(12345)

    assert store.load() == before


def test_delete_missing_id_still_persists(store):
    leave_period_manager(store).delete(1)
    assert store.path.exists()
    assert store.load() == SiteDocument()


def test_delete_removes_only_matching_entity(store):
    manager = popup_manager(store)
    keep = manager.add({"title": "Keep", "content": ""})
    drop = manager.add({"title": "Drop", "content": ""})

    manager.delete(drop.id)

    assert manager.list() == [keep]


def test_toggle_flips_back_and_forth(store):
    store.save(SiteDocument(popups=[Popup(id=42, title="Sale", content="20% off", active=True, created_at="2024-01-01T00:00:00.000Z")]))
    manager = popup_manager(store)

    manager.toggle(42, "active")
    assert manager.list()[0].active is False

    manager.toggle(42, "active")
    assert manager.list()[0].active is True


def test_toggle_touches_exactly_one_entity(store):
    manager = popup_manager(store)
    a = manager.add({"title": "A", "content": "a", "active": True})
    b = manager.add({"title": "B", "content": "b", "active": False})
    c = manager.add({"title": "C", "content": "c", "active": True})

    manager.toggle(b.id, "active")

    after = {p.id: p for p in manager.list()}
    assert after[a.id] == a
    assert after[c.id] == c
    assert after[b.id].active is True
    assert after[b.id].model_dump(exclude={"active"}) == b.model_dump(exclude={"active"})


def test_toggle_missing_id_is_noop(store):
    manager = popup_manager(store)
    manager.add({"title": "A", "content": "a"})
    before = store.load()

    assert manager.toggle(999, "active") is None
    assert store.load() == before


def test_list_does_not_persist(store):
    assert leave_period_manager(store).list() == []
    assert not store.path.exists()


def test_concurrent_adds_are_not_lost(store):
    manager = leave_period_manager(store)

    def add(i):
        return manager.add({"start_date": f"2024-01-{i + 1:02d}", "end_date": f"2024-02-{i + 1:02d}"})

    with ThreadPoolExecutor(max_workers=8) as pool:
        created = list(pool.map(add, range(20)))

    stored = manager.list()
    assert len(stored) == 20
    assert {p.id for p in stored} == {p.id for p in created}
