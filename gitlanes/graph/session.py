"""Graph session - one lane layout grown page by page."""

import logging
from collections.abc import Iterable, Sequence

from gitlanes.constants import DEFAULT_PALETTE
from gitlanes.graph.lanes import assign_lanes
from gitlanes.graph.rows import RowLanes, max_lane
from gitlanes.graph.state import LaneState
from gitlanes.graph.types import Commit, Head, HeadSet, order_commits

logger = logging.getLogger(__name__)


class GraphSession:
    """Owns the lane state and loaded commit window of one rendered history.

    Pages are appended with `extend`; commits already laid out keep their
    lane and color. Not safe to share between threads: calls must be
    serialized.
    """

    def __init__(self, palette: Sequence[str] | None = None) -> None:
        self.palette = list(palette) if palette is not None else list(DEFAULT_PALETTE)
        if not self.palette:
            raise ValueError("Palette must contain at least one color")
        self.reset()

    def reset(self) -> None:
        """Drop all loaded commits and start a fresh layout."""
        self.state = LaneState()
        self._commits: list[Commit] = []
        self._by_oid: dict[str, Commit] = {}
        self._lane_count = 0
        self._heads = HeadSet()
        self._row_lanes = RowLanes()

    @property
    def commits(self) -> list[Commit]:
        return self._commits

    @property
    def rows(self) -> list[list[int]]:
        """Active lanes per row, aligned with `commits`."""
        return self._row_lanes.rows

    @property
    def heads(self) -> HeadSet:
        return self._heads

    @property
    def lane_count(self) -> int:
        return self._lane_count

    def extend(self, commits: Iterable[Commit], heads: Iterable[Head] = ()) -> list[Commit]:
        """Lay out another page of commits below the ones already loaded.

        Returns the commits that were new to this session.
        """
        heads = list(heads)
        self._heads.update(heads)
        self._mark_heads(heads)

        page: list[Commit] = []
        for commit in order_commits(commits):
            if commit.oid in self._by_oid:
                continue
            self._by_oid[commit.oid] = commit
            page.append(commit)

        if not page:
            return []

        assign_lanes(page, self._heads, self.state, self.palette)
        self._commits.extend(page)
        self._row_lanes.extend(page)
        self._lane_count = max(self._lane_count, max_lane(page) + 1)

        logger.debug(
            "Loaded %d commits (%d total, %d lanes)", len(page), len(self._commits), self.lane_count
        )
        return page

    def _mark_heads(self, heads: list[Head]) -> None:
        """Flag loaded commits that a newly seen head points at."""
        for head in heads:
            commit = self._by_oid.get(head.oid)
            if commit is not None:
                commit.is_head = True
