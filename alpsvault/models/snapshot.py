"""
Export/import snapshot of the whole vault.
"""

from collections import Counter
from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator

from alpsvault.models.anchor import Anchor
from alpsvault.models.artifact import Artifact
from alpsvault.models.space import Space


class Snapshot(BaseModel):
    """
    Full-store snapshot: ``{"artifacts": [...], "spaces": [...], "anchors": [...]}``.

    Each collection is optional. On import, a present collection replaces that
    entity kind wholesale; absent collections leave their kind untouched.
    Ids are unique within each collection and anchor titles are unique.
    """

    model_config = ConfigDict(extra="ignore")

    artifacts: list[Artifact] | None = None
    spaces: list[Space] | None = None
    anchors: list[Anchor] | None = None

    @model_validator(mode="after")
    def check_unique_keys(self) -> "Snapshot":
        """Reject repeated ids within a collection and repeated anchor titles."""
        problems = []
        for name, records in self._collections():
            repeated = _repeated(record.id for record in records or [])
            if repeated:
                problems.append(f"duplicate {name} ids: {', '.join(repeated)}")

        titles = _repeated(anchor.title for anchor in self.anchors or [])
        if titles:
            problems.append(f"duplicate anchor titles: {', '.join(titles)}")

        if problems:
            raise ValueError("; ".join(problems))
        return self

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict in backup format."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def counts(self) -> dict[str, int]:
        """Record count per included collection."""
        return {name: len(records) for name, records in self._collections() if records is not None}

    def _collections(self) -> tuple[tuple[str, list | None], ...]:
        return (
            ("artifacts", self.artifacts),
            ("spaces", self.spaces),
            ("anchors", self.anchors),
        )


def _repeated(values: Iterable[str]) -> list[str]:
    return sorted(value for value, count in Counter(values).items() if count > 1)
