"""Lane and color assignment for a newest-first commit list."""

import logging
from collections.abc import Iterable, Sequence

from gitlanes.constants import DEFAULT_PALETTE
from gitlanes.graph.state import LaneAssignmentError, LaneState
from gitlanes.graph.types import Commit, Head, HeadSet

logger = logging.getLogger(__name__)


def assign_lanes(
    commits: list[Commit],
    heads: Iterable[Head],
    state: LaneState | None = None,
    palette: Sequence[str] | None = None,
) -> list[Commit]:
    """Annotate commits with lane, color and head flag.

    Commits must be ordered newest first (see `order_commits`). The primary
    parent of every commit continues in the commit's lane; merge sources are
    given lanes of their own at the merge row. Passing the same `state` for
    successive pages continues the layout where the previous page ended.

    Returns the same list, annotated in place.
    """
    if state is None:
        state = LaneState()
    if palette is None:
        palette = DEFAULT_PALETTE
    if not palette:
        raise ValueError("Palette must contain at least one color")

    _check_order(commits)

    head_set = heads if isinstance(heads, HeadSet) else HeadSet.from_heads(heads)

    for commit in commits:
        if commit.oid in state.processed:
            _annotate(commit, state, head_set)
            continue

        lane, color = _lane_for(commit, state, palette)
        state.record(commit.oid, lane, color)

        # Lanes that were waiting on this commit and did not become its home
        # end here: the branch joins this lineage.
        for other in state.take_incoming(commit.oid):
            if other != lane:
                state.release(other)

        state.processed.add(commit.oid)
        _annotate(commit, state, head_set)
        _hand_over_lane(commit, lane, color, state)
        _open_merge_lanes(commit, state, palette)

    return commits


def _check_order(commits: list[Commit]) -> None:
    for newer, older in zip(commits, commits[1:]):
        if older.committed_date > newer.committed_date:
            raise LaneAssignmentError(
                f"Commits must be ordered newest first: {older.oid} "
                f"({older.committed_date}) follows {newer.oid} ({newer.committed_date})"
            )


def _lane_for(commit: Commit, state: LaneState, palette: Sequence[str]) -> tuple[int, str]:
    """Pick the lane and color for a commit seen for the first time."""
    # Claimed in advance by a child or a merge, possibly on an earlier page
    lane = state.lane_of(commit.oid)
    if lane is not None:
        color = state.color_of(commit.oid)
        assert color is not None
        return lane, color

    # Branch tips nobody continues into
    lane = state.find_available_lane()
    color = state.pick_next_color(palette, lane)
    logger.debug("%s opens lane %d (%s)", commit.short_id, lane, color)
    return lane, color


def _hand_over_lane(commit: Commit, lane: int, color: str, state: LaneState) -> None:
    """Keep the lane open for the primary parent, or free it if the lineage ends."""
    primary = commit.primary_parent
    if primary is None or primary in state.processed:
        state.release(lane)
        return

    # Parents outside the loaded window are claimed too, so a later page
    # resumes exactly where a single pass would be. The first claim wins and
    # later lanes end where the parent is laid out.
    state.occupy(lane, commit.oid, primary)
    if state.lane_of(primary) is None:
        state.record(primary, lane, color)
    else:
        logger.debug("%s joins %s in lane %d", commit.short_id, primary[:7], state.lane_of(primary))


def _open_merge_lanes(commit: Commit, state: LaneState, palette: Sequence[str]) -> None:
    for parent in commit.parents[1:]:
        if state.lane_of(parent) is not None:
            continue
        lane = state.find_available_lane()
        color = state.pick_next_color(palette, lane)
        state.record(parent, lane, color)
        state.occupy(lane, parent, parent)
        logger.debug("Merge source %s of %s opens lane %d", parent[:7], commit.short_id, lane)


def _annotate(commit: Commit, state: LaneState, head_set: HeadSet) -> None:
    commit.lane = state.lane_of(commit.oid)
    commit.color = state.color_of(commit.oid)
    commit.is_head = commit.oid in head_set
