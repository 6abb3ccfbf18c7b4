"""
Tests for AnchorMergeSession.

Tests cover:
1. Validation before saving
2. Plain saves for new and edited anchors
3. Conflict detection and merge/replace/cancel resolution
4. Illegal state transitions
"""

import pytest

from alpsvault.models import ArtifactType, SaveStatus
from alpsvault.services.anchor_merge import (
    AnchorMergeSession,
    ConflictResolution,
    MergeState,
    parse_artifact_ids,
)
from alpsvault.utils.exceptions import ValidationError


@pytest.fixture
async def artifact_ids(artifact_repo):
    """Three stored artifact ids."""
    return [(await artifact_repo.add(ArtifactType.NOTE, title=f"n{i}")).id for i in range(3)]


@pytest.fixture
def session(anchor_repo, artifact_repo, sink):
    return AnchorMergeSession(anchor_repo, artifact_repo, notifications=sink)


class TestParseArtifactIds:
    """Tests for id list parsing."""

    def test_separators(self):
        """Test commas and whitespace both separate ids."""
        assert parse_artifact_ids("a, b\nc  d,,e") == ["a", "b", "c", "d", "e"]

    def test_dedupes(self):
        """Test repeated ids are dropped."""
        assert parse_artifact_ids(["a", " b ", "a", ""]) == ["a", "b"]


class TestSave:
    """Tests for saving without conflicts."""

    @pytest.mark.asyncio
    async def test_new_anchor(self, session, artifact_ids, sink):
        """Test a new anchor is saved and the session succeeds."""
        result = await session.save("Reading", ",".join(artifact_ids))

        assert result.status == SaveStatus.SUCCESS
        assert session.state == MergeState.SUCCESS
        assert session.anchor.artifact_ids == artifact_ids
        assert sink.titles == ["Anchor Saved"]

    @pytest.mark.asyncio
    async def test_edit_anchor(self, anchor_repo, artifact_repo, artifact_ids, sink):
        """Test an edit session updates the edited anchor."""
        existing = (await anchor_repo.add("Old", artifact_ids[:1])).anchor
        session = AnchorMergeSession(
            anchor_repo, artifact_repo, editing=existing, notifications=sink
        )

        result = await session.save("New", artifact_ids)

        assert result.anchor.id == existing.id
        assert result.anchor.title == "New"
        assert sink.titles == ["Anchor Updated"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title,ids", [("", "x"), ("T", ""), ("  ", " , ")])
    async def test_missing_input(self, session, title, ids):
        """Test title and at least one id are required."""
        with pytest.raises(ValidationError):
            await session.save(title, ids)
        assert session.state == MergeState.EDITING

    @pytest.mark.asyncio
    async def test_unknown_ids(self, session, artifact_ids, anchor_repo):
        """Test unknown ids are reported and nothing is saved."""
        with pytest.raises(ValidationError) as exc_info:
            await session.save("T", [artifact_ids[0], "ghost1", "ghost2"])

        assert exc_info.value.context["missing_ids"] == ["ghost1", "ghost2"]
        assert session.state == MergeState.EDITING
        assert await anchor_repo.list_all() == []


class TestConflicts:
    """Tests for title conflicts and their resolution."""

    @pytest.mark.asyncio
    async def test_conflict_detected(self, session, anchor_repo, artifact_ids):
        """Test a taken title moves the session to CONFLICT."""
        owner = (await anchor_repo.add("Reading", artifact_ids[:1])).anchor

        result = await session.save("Reading", artifact_ids[1:])

        assert result.is_conflict
        assert session.state == MergeState.CONFLICT
        assert session.conflict.id == owner.id

    @pytest.mark.asyncio
    async def test_merge_into_existing(self, session, anchor_repo, artifact_ids, sink):
        """Test merge appends new ids to the owning anchor."""
        owner = (await anchor_repo.add("Reading", artifact_ids[:2])).anchor
        await session.save("Reading", [artifact_ids[1], artifact_ids[2]])

        merged = await session.resolve(ConflictResolution.MERGE)

        assert merged.id == owner.id
        assert merged.artifact_ids == artifact_ids
        assert session.state == MergeState.MERGED
        assert sink.titles[-1] == "Anchor Merged"
        assert len(await anchor_repo.list_all()) == 1

    @pytest.mark.asyncio
    async def test_replace_existing(self, session, anchor_repo, artifact_ids, sink):
        """Test replace overwrites the owning anchor's ids."""
        owner = (await anchor_repo.add("Reading", artifact_ids[:2])).anchor
        await session.save("Reading", artifact_ids[2:])

        replaced = await session.resolve("replace")

        assert replaced.id == owner.id
        assert replaced.artifact_ids == artifact_ids[2:]
        assert session.state == MergeState.REPLACED
        assert sink.titles[-1] == "Anchor Updated"

    @pytest.mark.asyncio
    async def test_edit_conflict_targets_edited_anchor(
        self, anchor_repo, artifact_repo, artifact_ids
    ):
        """Test resolving an edit conflict changes the edited anchor only."""
        owner = (await anchor_repo.add("Taken", artifact_ids[:1])).anchor
        mine = (await anchor_repo.add("Mine", artifact_ids[1:2])).anchor
        session = AnchorMergeSession(anchor_repo, artifact_repo, editing=mine)

        await session.save("Taken", artifact_ids[2:])
        merged = await session.resolve(ConflictResolution.MERGE)

        assert merged.id == mine.id
        assert merged.title == "Mine"
        assert merged.artifact_ids == artifact_ids[1:]
        assert (await anchor_repo.get(owner.id)).artifact_ids == artifact_ids[:1]

    @pytest.mark.asyncio
    async def test_cancel_returns_to_editing(self, session, anchor_repo, artifact_ids):
        """Test cancelling leaves everything unchanged and allows another save."""
        owner = (await anchor_repo.add("Reading", artifact_ids[:1])).anchor
        await session.save("Reading", artifact_ids[1:])

        assert await session.resolve(ConflictResolution.CANCEL) is None
        assert session.state == MergeState.EDITING
        assert (await anchor_repo.get(owner.id)).artifact_ids == artifact_ids[:1]

        result = await session.save("Other", artifact_ids[1:])
        assert result.status == SaveStatus.SUCCESS


class TestTransitions:
    """Tests for illegal transitions."""

    @pytest.mark.asyncio
    async def test_resolve_without_conflict(self, session):
        """Test resolving with no pending conflict is rejected."""
        with pytest.raises(ValidationError):
            await session.resolve(ConflictResolution.MERGE)

    @pytest.mark.asyncio
    async def test_save_after_success(self, session, artifact_ids):
        """Test a finished session cannot save again."""
        await session.save("Once", artifact_ids)

        with pytest.raises(ValidationError):
            await session.save("Twice", artifact_ids)

    @pytest.mark.asyncio
    async def test_unknown_resolution(self, session, anchor_repo, artifact_ids):
        """Test an unknown resolution value raises ValueError."""
        await anchor_repo.add("Reading", artifact_ids[:1])
        await session.save("Reading", artifact_ids[1:])

        with pytest.raises(ValueError):
            await session.resolve("ignore")
