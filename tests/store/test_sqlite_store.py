"""
Tests for SQLiteVaultStore.

Tests cover:
1. Put/get/delete per entity kind
2. Listing order
3. Unique anchor titles
4. Transactions (commit, rollback, nesting, concurrent tasks)
5. Secondary lookups
"""

import asyncio
from datetime import datetime, timedelta

import pytest

from alpsvault.core.store.base import EntityKind
from alpsvault.core.store.sqlite_store import SQLiteVaultStore
from alpsvault.models import Anchor, Artifact, ArtifactType, Space
from alpsvault.utils.exceptions import StoreError

NOW = datetime(2024, 7, 28, 12, 0, 0)


def artifact(record_id: str, offset: int = 0, **fields) -> Artifact:
    stamp = NOW + timedelta(seconds=offset)
    return Artifact(
        id=record_id, type=ArtifactType.NOTE, created_at=stamp, updated_at=stamp, **fields
    )


def anchor(record_id: str, title: str) -> Anchor:
    return Anchor(id=record_id, title=title, created_at=NOW, updated_at=NOW)


class TestRecordOperations:
    """Tests for basic record operations."""

    @pytest.mark.asyncio
    async def test_put_and_get(self, store):
        """Test storing and reading back an artifact."""
        record = artifact("1", title="Hello", tags=["a"])
        await store.put(EntityKind.ARTIFACTS, record)

        loaded = await store.get(EntityKind.ARTIFACTS, "1")

        assert loaded == record

    @pytest.mark.asyncio
    async def test_get_missing(self, store):
        """Test reading an unknown id returns None."""
        assert await store.get(EntityKind.SPACES, "nope") is None

    @pytest.mark.asyncio
    async def test_put_replaces(self, store):
        """Test a second put with the same id replaces the record."""
        await store.put(EntityKind.ARTIFACTS, artifact("1", title="Old"))
        await store.put(EntityKind.ARTIFACTS, artifact("1", offset=5, title="New"))

        loaded = await store.get(EntityKind.ARTIFACTS, "1")

        assert loaded.title == "New"
        assert await store.count(EntityKind.ARTIFACTS) == 1

    @pytest.mark.asyncio
    async def test_delete_and_clear(self, store):
        """Test deleting one record and clearing a kind."""
        for i in range(3):
            await store.put(EntityKind.ARTIFACTS, artifact(str(i)))
        await store.put(EntityKind.ANCHORS, anchor("n1", "Kept"))

        await store.delete(EntityKind.ARTIFACTS, "0")
        assert await store.count(EntityKind.ARTIFACTS) == 2

        await store.clear(EntityKind.ARTIFACTS)
        assert await store.count(EntityKind.ARTIFACTS) == 0
        assert await store.count(EntityKind.ANCHORS) == 1

    @pytest.mark.asyncio
    async def test_list_most_recent_first(self, store):
        """Test list_all orders by updated_at descending."""
        await store.put(EntityKind.ARTIFACTS, artifact("old", offset=0))
        await store.put(EntityKind.ARTIFACTS, artifact("new", offset=10))
        await store.put(EntityKind.ARTIFACTS, artifact("mid", offset=5))

        records = await store.list_all(EntityKind.ARTIFACTS)

        assert [r.id for r in records] == ["new", "mid", "old"]

    @pytest.mark.asyncio
    async def test_in_memory_database(self):
        """Test the store works against an in-memory database."""
        memory_store = SQLiteVaultStore(db_path=":memory:")
        await memory_store.initialize()
        try:
            space = Space(id="s1", name="Work", created_at=NOW, updated_at=NOW)
            await memory_store.put(EntityKind.SPACES, space)
            assert await memory_store.get(EntityKind.SPACES, "s1") == space
        finally:
            await memory_store.close()


class TestAnchorTitles:
    """Tests for the unique anchor title index."""

    @pytest.mark.asyncio
    async def test_duplicate_title_rejected(self, store):
        """Test a second anchor with the same title fails."""
        await store.put(EntityKind.ANCHORS, anchor("n1", "Reading"))

        with pytest.raises(StoreError):
            await store.put(EntityKind.ANCHORS, anchor("n2", "Reading"))

        assert (await store.get_anchor_by_title("Reading")).id == "n1"

    @pytest.mark.asyncio
    async def test_rename_frees_title(self, store):
        """Test renaming an anchor releases its old title."""
        await store.put(EntityKind.ANCHORS, anchor("n1", "Old"))
        await store.put(EntityKind.ANCHORS, anchor("n1", "New"))

        assert await store.get_anchor_by_title("Old") is None
        await store.put(EntityKind.ANCHORS, anchor("n2", "Old"))
        assert (await store.get_anchor_by_title("Old")).id == "n2"


class TestTransactions:
    """Tests for grouped writes."""

    @pytest.mark.asyncio
    async def test_commit(self, store):
        """Test writes inside a transaction persist."""
        async with store.transaction():
            await store.put(EntityKind.ARTIFACTS, artifact("1"))
            await store.put(EntityKind.ARTIFACTS, artifact("2"))

        assert await store.count(EntityKind.ARTIFACTS) == 2

    @pytest.mark.asyncio
    async def test_rollback_on_error(self, store):
        """Test an exception rolls back every write in the group."""
        await store.put(EntityKind.ARTIFACTS, artifact("keep"))

        with pytest.raises(RuntimeError):
            async with store.transaction():
                await store.delete(EntityKind.ARTIFACTS, "keep")
                await store.put(EntityKind.ARTIFACTS, artifact("new"))
                raise RuntimeError("boom")

        ids = [r.id for r in await store.list_all(EntityKind.ARTIFACTS)]
        assert ids == ["keep"]

    @pytest.mark.asyncio
    async def test_nested_joins_outer(self, store):
        """Test a nested transaction is rolled back with its outer one."""
        with pytest.raises(RuntimeError):
            async with store.transaction():
                async with store.transaction():
                    await store.put(EntityKind.ARTIFACTS, artifact("inner"))
                raise RuntimeError("boom")

        assert await store.count(EntityKind.ARTIFACTS) == 0

    @pytest.mark.asyncio
    async def test_store_usable_after_rollback(self, store):
        """Test later writes commit normally after a rollback."""
        with pytest.raises(StoreError):
            async with store.transaction():
                await store.put(EntityKind.ANCHORS, anchor("n1", "Same"))
                await store.put(EntityKind.ANCHORS, anchor("n2", "Same"))

        await store.put(EntityKind.ANCHORS, anchor("n3", "Same"))
        assert await store.count(EntityKind.ANCHORS) == 1

    @pytest.mark.asyncio
    async def test_other_task_write_waits_for_transaction(self, store):
        """Test a concurrent write from another task survives the rollback."""
        opened = asyncio.Event()

        async def failing_group():
            async with store.transaction():
                await store.put(EntityKind.ARTIFACTS, artifact("grouped"))
                opened.set()
                await asyncio.sleep(0.05)
                raise RuntimeError("boom")

        async def background_write():
            await opened.wait()
            await store.put(EntityKind.ARTIFACTS, artifact("bg1"))

        results = await asyncio.gather(failing_group(), background_write(), return_exceptions=True)

        assert isinstance(results[0], RuntimeError)
        assert results[1] is None
        ids = [r.id for r in await store.list_all(EntityKind.ARTIFACTS)]
        assert ids == ["bg1"]

    @pytest.mark.asyncio
    async def test_other_task_write_blocked_until_commit(self, store):
        """Test another task's write lands only after the transaction commits."""
        opened = asyncio.Event()
        release = asyncio.Event()

        async def group():
            async with store.transaction():
                await store.put(EntityKind.ARTIFACTS, artifact("grouped"))
                opened.set()
                await release.wait()

        group_task = asyncio.create_task(group())
        await opened.wait()
        write_task = asyncio.create_task(store.put(EntityKind.ARTIFACTS, artifact("bg1", 1)))
        await asyncio.sleep(0.01)

        assert not write_task.done()

        release.set()
        await asyncio.gather(group_task, write_task)
        ids = [r.id for r in await store.list_all(EntityKind.ARTIFACTS)]
        assert ids == ["bg1", "grouped"]


class TestSecondaryLookups:
    """Tests for index-backed lookups."""

    @pytest.mark.asyncio
    async def test_artifact_ids_for_space(self, store):
        """Test only explicitly assigned artifacts are returned."""
        await store.put(EntityKind.ARTIFACTS, artifact("1", space_id="s1"))
        await store.put(EntityKind.ARTIFACTS, artifact("2", space_id="s2"))
        await store.put(EntityKind.ARTIFACTS, artifact("3", space_id="s1"))
        await store.put(EntityKind.ARTIFACTS, artifact("4"))

        ids = await store.artifact_ids_for_space("s1")

        assert sorted(ids) == ["1", "3"]

    @pytest.mark.asyncio
    async def test_space_index_follows_updates(self, store):
        """Test reassigning an artifact updates the space lookup."""
        await store.put(EntityKind.ARTIFACTS, artifact("1", space_id="s1"))
        await store.put(EntityKind.ARTIFACTS, artifact("1", offset=1, space_id=None))

        assert await store.artifact_ids_for_space("s1") == []
