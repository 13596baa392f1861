"""Tests for the generic JSON-file-backed store."""

import asyncio
import json
from dataclasses import dataclass
from datetime import datetime

import pytest

from homedash.domain.exceptions import (
    InvalidArgumentError,
    RecordNotFoundError,
    StoreParseError,
    StoreWriteError,
    UnexpectedStoreError,
    ValidationError,
)
from homedash.infrastructure.persistence.codec import (
    datetime_from_raw,
    datetime_to_raw,
)
from homedash.infrastructure.persistence.json_store import JsonStore
from tests.fakes import FakeClock


@dataclass
class Note:
    text: str = ""
    id: int = 0
    created_date: datetime | None = None
    modified_date: datetime | None = None


def _note_to_raw(note: Note) -> dict:
    return {
        "id": note.id,
        "text": note.text,
        "created_date": datetime_to_raw(note.created_date),
        "modified_date": datetime_to_raw(note.modified_date),
    }


def _note_to_domain(raw: dict) -> Note:
    return Note(
        id=raw["id"],
        text=raw["text"],
        created_date=datetime_from_raw(raw.get("created_date")),
        modified_date=datetime_from_raw(raw.get("modified_date")),
    )


def _store(path, clock=None) -> JsonStore[Note]:
    return JsonStore(
        path,
        to_raw=_note_to_raw,
        to_domain=_note_to_domain,
        clock=clock or FakeClock(),
    )


class TestLoading:

    async def test_missing_file_is_empty_collection(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        assert await store.list_all() == []
        assert store.is_loaded

    async def test_whitespace_file_is_empty_collection(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text("  \n\t", encoding="utf-8")
        assert await _store(path).list_all() == []

    async def test_malformed_file_raises_parse_error(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(StoreParseError, match="notes.json"):
            await _store(path).list_all()

    async def test_non_array_document_raises_parse_error(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text('{"id": 1}', encoding="utf-8")
        with pytest.raises(StoreParseError):
            await _store(path).list_all()

    async def test_record_missing_required_key_raises_parse_error(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text('[{"text": "no id"}]', encoding="utf-8")
        with pytest.raises(StoreParseError):
            await _store(path).list_all()

    async def test_failed_load_is_retried_on_next_operation(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text("[", encoding="utf-8")
        store = _store(path)
        with pytest.raises(StoreParseError):
            await store.list_all()
        assert not store.is_loaded

        path.write_text('[{"id": 4, "text": "fixed"}]', encoding="utf-8")
        notes = await store.list_all()
        assert [n.id for n in notes] == [4]

    async def test_file_is_read_only_once(self, tmp_path):
        path = tmp_path / "notes.json"
        store = _store(path)
        await store.insert(Note(text="a"))
        path.write_text('[{"id": 99, "text": "outside"}]', encoding="utf-8")
        assert [n.text for n in await store.list_all()] == ["a"]


class TestIdentity:

    async def test_ids_are_assigned_one_to_n(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        ids = [(await store.insert(Note(text=str(i)))).id for i in range(5)]
        assert ids == [1, 2, 3, 4, 5]

    async def test_deleted_ids_are_never_reused(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        for i in range(3):
            await store.insert(Note(text=str(i)))
        assert await store.delete(3)
        assert await store.delete(2)
        assert (await store.insert(Note(text="next"))).id == 4

    async def test_next_id_follows_highest_loaded_id(self, tmp_path):
        path = tmp_path / "notes.json"
        path.write_text(
            '[{"id": 3, "text": "a"}, {"id": 10, "text": "b"}]', encoding="utf-8"
        )
        assert (await _store(path).insert(Note(text="c"))).id == 11

    async def test_caller_supplied_id_is_ignored(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        assert (await store.insert(Note(text="a", id=42))).id == 1

    async def test_concurrent_inserts_get_distinct_ids(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        inserted = await asyncio.gather(
            *(store.insert(Note(text=str(i))) for i in range(20))
        )
        assert sorted(n.id for n in inserted) == list(range(1, 21))
        assert len(await store.list_all()) == 20


class TestTimestamps:

    async def test_insert_stamps_created_date(self, tmp_path):
        clock = FakeClock()
        store = _store(tmp_path / "notes.json", clock)
        note = await store.insert(Note(text="a"))
        assert note.created_date == clock.current
        assert note.modified_date is None

    async def test_update_keeps_created_and_stamps_modified(self, tmp_path):
        clock = FakeClock()
        store = _store(tmp_path / "notes.json", clock)
        note = await store.insert(Note(text="a"))
        created = note.created_date

        clock.advance(hours=2)
        note.text = "b"
        note.created_date = None
        updated = await store.update(note)

        assert updated.created_date == created
        assert updated.modified_date == clock.current


class TestCommands:

    async def test_update_keeps_position(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        for text in "abc":
            await store.insert(Note(text=text))
        await store.update(Note(id=2, text="B"))
        assert [n.text for n in await store.list_all()] == ["a", "B", "c"]

    async def test_update_missing_record_leaves_collection_unchanged(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        await store.insert(Note(text="a"))
        before = await store.list_all()
        with pytest.raises(RecordNotFoundError) as exc_info:
            await store.update(Note(id=9, text="ghost"))
        assert exc_info.value.record_id == 9
        assert await store.list_all() == before

    async def test_delete_missing_returns_false(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        assert await store.delete(1) is False

    async def test_reads_return_copies(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        await store.insert(Note(text="a"))
        copy = await store.get_by_id(1)
        copy.text = "mutated"
        assert (await store.get_by_id(1)).text == "a"

    async def test_insert_does_not_alias_callers_record(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        note = Note(text="a")
        await store.insert(note)
        note.text = "mutated"
        assert (await store.get_by_id(1)).text == "a"

    async def test_filter_by(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        for text in ["apple", "banana", "avocado"]:
            await store.insert(Note(text=text))
        found = await store.filter_by(lambda n: n.text.startswith("a"))
        assert [n.text for n in found] == ["apple", "avocado"]

    async def test_filter_by_requires_predicate(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            await _store(tmp_path / "notes.json").filter_by(None)

    async def test_insert_requires_record(self, tmp_path):
        with pytest.raises(InvalidArgumentError):
            await _store(tmp_path / "notes.json").insert(None)


class TestHooks:

    async def test_rejecting_hook_leaves_nothing_behind(self, tmp_path):
        store = _store(tmp_path / "notes.json")

        def reject(candidate, existing, now):
            raise ValidationError("nope")

        with pytest.raises(ValidationError):
            await store.insert(Note(text="a"), reject)
        assert await store.list_all() == []
        assert (await store.insert(Note(text="b"))).id == 1

    async def test_hook_sees_existing_records(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        await store.insert(Note(text="a"))
        seen = []

        def spy(candidate, existing, now):
            seen.extend(n.text for n in existing)

        await store.insert(Note(text="b"), spy)
        assert seen == ["a"]

    async def test_update_hook_excludes_the_record_itself(self, tmp_path):
        store = _store(tmp_path / "notes.json")
        await store.insert(Note(text="a"))
        await store.insert(Note(text="b"))
        seen = {}

        def spy(candidate, previous, others, now):
            seen["previous"] = previous.text
            seen["others"] = [n.text for n in others]

        await store.update(Note(id=1, text="A"), spy)
        assert seen == {"previous": "a", "others": ["b"]}

    async def test_unexpected_hook_error_is_wrapped(self, tmp_path):
        store = _store(tmp_path / "notes.json")

        def broken(candidate, existing, now):
            raise RuntimeError("boom")

        with pytest.raises(UnexpectedStoreError, match="insert"):
            await store.insert(Note(text="a"), broken)


class TestPersist:

    async def test_round_trip(self, tmp_path):
        path = tmp_path / "notes.json"
        store = _store(path)
        await store.insert(Note(text="a"))
        await store.insert(Note(text="b"))
        await store.persist()

        reloaded = await _store(path).list_all()
        assert reloaded == await store.list_all()

    async def test_persisted_file_is_indented_json_array(self, tmp_path):
        path = tmp_path / "notes.json"
        store = _store(path)
        await store.insert(Note(text="a"))
        await store.persist()

        text = path.read_text(encoding="utf-8")
        assert text.startswith("[\n  {")
        assert json.loads(text)[0]["text"] == "a"

    async def test_persist_creates_missing_directory(self, tmp_path):
        path = tmp_path / "nested" / "dir" / "notes.json"
        store = _store(path)
        await store.insert(Note(text="a"))
        await store.persist()
        assert path.exists()

    async def test_unwritable_path_raises_write_error(self, tmp_path):
        store = _store(tmp_path / "blocker" / "notes.json")
        await store.insert(Note(text="a"))
        (tmp_path / "blocker").write_text("", encoding="utf-8")
        with pytest.raises(StoreWriteError):
            await store.persist()

    async def test_changes_are_not_written_until_persist(self, tmp_path):
        path = tmp_path / "notes.json"
        await _store(path).insert(Note(text="a"))
        assert not path.exists()
