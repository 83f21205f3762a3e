"""Types shared by the lane assigner, row calculator and commit sources."""

from collections.abc import Iterable
from dataclasses import dataclass, field


@dataclass
class Commit:
    """A commit with its lane layout.

    `lane`, `color` and `is_head` are filled in by `assign_lanes`.
    """

    oid: str
    parents: list[str]
    committed_date: int
    summary: str = ""
    lane: int | None = None
    color: str | None = None
    is_head: bool = False

    @property
    def primary_parent(self) -> str | None:
        """First parent, the lineage that keeps this commit's lane."""
        return self.parents[0] if self.parents else None

    @property
    def short_id(self) -> str:
        return self.oid[:7]


@dataclass(frozen=True)
class Head:
    """A named reference (branch or tag) pointing at a commit."""

    name: str
    oid: str


@dataclass
class HeadSet:
    """Heads grouped by target commit."""

    names_by_oid: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def from_heads(cls, heads: Iterable[Head]) -> "HeadSet":
        head_set = cls()
        head_set.update(heads)
        return head_set

    def update(self, heads: Iterable[Head]) -> None:
        for head in heads:
            names = self.names_by_oid.setdefault(head.oid, [])
            if head.name not in names:
                names.append(head.name)

    def __contains__(self, oid: object) -> bool:
        return oid in self.names_by_oid

    def names(self, oid: str) -> list[str]:
        return self.names_by_oid.get(oid, [])


def order_commits(commits: Iterable[Commit]) -> list[Commit]:
    """Sort commits newest first.

    The sort is stable, so commits sharing a timestamp keep their input order.
    """
    return sorted(commits, key=lambda c: -c.committed_date)
