from __future__ import annotations

from useradmin_sdk.models import RawUser

from user_dashboard.app.collection_store import CollectionStore, split_name


def _raw(**data) -> RawUser:
    return RawUser.model_validate(data)


def test_split_name_on_first_space() -> None:
    assert split_name("Leanne Graham") == ("Leanne", "Graham")
    assert split_name("Mrs. Dennis Schulist") == ("Mrs.", "Dennis Schulist")
    assert split_name("Cher") == ("Cher", "")


def test_load_annotates_raw_records() -> None:
    store = CollectionStore()
    store.load(
        [
            _raw(id=1, name="Leanne Graham", email="Sincere@april.biz"),
            _raw(id=2, name="Madonna", email="m@example.com", department="Music"),
            _raw(id=3, name="ignored", email="k@example.com", firstName="Kurtis", lastName="Weissnat"),
        ]
    )

    first, second, third = store.records
    assert (first.first_name, first.last_name, first.department) == ("Leanne", "Graham", "General")
    assert (second.first_name, second.last_name, second.department) == ("Madonna", "", "Music")
    assert (third.first_name, third.last_name) == ("Kurtis", "Weissnat")


def test_load_uses_configured_default_department() -> None:
    store = CollectionStore(default_department="Unassigned")
    store.load([_raw(id=1, name="A B", email="a@b.co")])
    assert store.records[0].department == "Unassigned"


def test_load_replaces_collection_and_drops_duplicate_ids() -> None:
    store = CollectionStore()
    store.load([_raw(id=1, name="A B", email="a@b.co")])
    store.load([_raw(id=2, name="C D", email="c@d.co"), _raw(id=2, name="E F", email="e@f.co")])

    assert [record.id for record in store] == [2]
    assert store.records[0].first_name == "C"


def test_append_uses_server_id() -> None:
    store = CollectionStore()
    record = store.append({"first_name": "Ada", "last_name": "L", "email": "a@b.co", "department": "R&D"}, 42)
    assert record.id == 42
    assert store.records[-1] == record


def test_append_falls_back_to_monotonic_local_id() -> None:
    store = CollectionStore()
    store.load([_raw(id=1, name="A B", email="a@b.co"), _raw(id=2, name="C D", email="c@d.co"), _raw(id=3, name="E F", email="e@f.co")])
    store.remove_by_id(2)

    values = {"first_name": "X", "last_name": "Y", "email": "x@y.co", "department": "Ops"}
    first = store.append(values, None)
    store.remove_by_id(first.id)
    second = store.append(values, None)

    assert first.id == 4
    assert second.id == 5


def test_append_replaces_colliding_server_id() -> None:
    store = CollectionStore()
    store.load([_raw(id=11, name="A B", email="a@b.co")])

    record = store.append({"first_name": "X", "last_name": "Y", "email": "x@y.co", "department": "Ops"}, 11)

    assert record.id == 12
    assert len({item.id for item in store}) == len(store)


def test_update_in_place_merges_patch() -> None:
    store = CollectionStore()
    store.load([_raw(id=1, name="A B", email="a@b.co"), _raw(id=2, name="C D", email="c@d.co")])

    assert store.update_in_place(2, {"email": "new@d.co", "unknown": "ignored"}) is True

    updated = store.get(2)
    assert updated is not None
    assert updated.email == "new@d.co"
    assert updated.first_name == "C"
    assert [record.id for record in store] == [1, 2]


def test_update_and_remove_are_noops_for_unknown_id() -> None:
    store = CollectionStore()
    store.load([_raw(id=1, name="A B", email="a@b.co")])
    before = store.records

    assert store.update_in_place(99, {"email": "x@y.co"}) is False
    assert store.remove_by_id(99) is False
    assert store.records == before
