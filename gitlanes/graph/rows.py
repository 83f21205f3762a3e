"""Per-row lane activation for drawing connectors between commits."""

from bisect import insort

from gitlanes.graph.types import Commit


class RowLanes:
    """Row activation grown page by page.

    Links to parents that are not loaded yet are remembered, so appending a
    page only touches the rows those links cross instead of rebuilding every
    row.
    """

    def __init__(self) -> None:
        self.rows: list[list[int]] = []
        self._lanes: list[int] = []
        self._row_of: dict[str, int] = {}
        # parent oid -> rows of children linking to it
        self._waiting: dict[str, list[int]] = {}

    def extend(self, commits: list[Commit]) -> None:
        """Append rows for `commits`, which follow the rows already built."""
        for commit in commits:
            lane = _lane(commit)
            row = len(self.rows)
            self.rows.append([lane])
            self._lanes.append(lane)
            self._row_of[commit.oid] = row

            for child_row in self._waiting.pop(commit.oid, []):
                self._link(child_row, row)

            for parent_oid in commit.parents:
                parent_row = self._row_of.get(parent_oid)
                if parent_row is None:
                    self._waiting.setdefault(parent_oid, []).append(row)
                else:
                    self._link(row, parent_row)

    def _link(self, child_row: int, parent_row: int) -> None:
        child_lane = self._lanes[child_row]
        parent_lane = self._lanes[parent_row]
        top, bottom = sorted((child_row, parent_row))
        for r in range(top, bottom + 1):
            _activate(self.rows[r], parent_lane)
            if child_lane != parent_lane:
                _activate(self.rows[r], child_lane)


def build_row_lanes(commits: list[Commit]) -> list[list[int]]:
    """Compute the lanes that draw a vertical segment through each row.

    `commits` must already carry lanes and be in display order (newest
    first). For every parent link from row i to row j the parent's lane is
    active on rows i..j; when the child sits in a different lane, the child's
    lane is active over the same span so the diagonal has a track. Parents
    outside the list draw nothing.

    Returns one ascending list of lanes per row.
    """
    row_lanes = RowLanes()
    row_lanes.extend(commits)
    return row_lanes.rows


def max_lane(commits: list[Commit]) -> int:
    """Highest lane in use, or -1 when nothing has been laid out."""
    return max((c.lane for c in commits if c.lane is not None), default=-1)


def _activate(row: list[int], lane: int) -> None:
    if lane not in row:
        insort(row, lane)


def _lane(commit: Commit) -> int:
    if commit.lane is None:
        raise ValueError(f"Commit {commit.oid} has no lane assigned")
    return commit.lane
