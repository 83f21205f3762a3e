"""Lane occupancy and assignment bookkeeping for one graph session."""

import heapq
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)


class LaneAssignmentError(RuntimeError):
    """An internal layout invariant was violated."""


@dataclass
class LaneState:
    """Mutable lane bookkeeping, extended in place as pages of commits arrive.

    Allocations are permanent: once an oid has a lane and a color recorded
    they never change for the life of the state.
    """

    # lane -> oid currently occupying it
    active_lanes: dict[int, str] = field(default_factory=dict)
    # oid -> lane, write-once
    commit_lane: dict[str, int] = field(default_factory=dict)
    # oid -> color, write-once
    commit_color: dict[str, str] = field(default_factory=dict)
    next_lane_index: int = 0
    used_colors: set[str] = field(default_factory=set)
    # Freed lanes below next_lane_index (min-heap)
    free_lanes: list[int] = field(default_factory=list)
    # pending oid -> lanes whose occupant continues into it, in claim order
    awaiting: dict[str, list[int]] = field(default_factory=dict)
    processed: set[str] = field(default_factory=set)

    _free_set: set[int] = field(default_factory=set, init=False, repr=False)
    _lane_target: dict[int, str] = field(default_factory=dict, init=False, repr=False)
    _color_cursor: int = field(default=0, init=False, repr=False)

    def find_available_lane(self) -> int:
        """Return the lowest lane with no occupant, growing the lane count if needed."""
        while self.free_lanes:
            lane = heapq.heappop(self.free_lanes)
            self._free_set.discard(lane)
            if lane not in self.active_lanes:
                return lane

        lane = self.next_lane_index
        self.next_lane_index += 1
        return lane

    def pick_next_color(self, palette: Sequence[str], index: int) -> str:
        """Return the first unused palette color, cycling by `index` once exhausted."""
        if not palette:
            raise ValueError("Palette must contain at least one color")

        while self._color_cursor < len(palette) and palette[self._color_cursor] in self.used_colors:
            self._color_cursor += 1

        if self._color_cursor < len(palette):
            color = palette[self._color_cursor]
        else:
            color = palette[index % len(palette)]

        self.used_colors.add(color)
        return color

    def record(self, oid: str, lane: int, color: str) -> None:
        """Record the lane and color of a commit.

        Recording the same values again is a no-op; recording different ones
        raises LaneAssignmentError.
        """
        if lane < 0:
            raise LaneAssignmentError(f"Negative lane {lane} for {oid}")

        existing_lane = self.commit_lane.get(oid)
        existing_color = self.commit_color.get(oid)
        if existing_lane is not None and existing_lane != lane:
            raise LaneAssignmentError(
                f"Commit {oid} already in lane {existing_lane}, refusing to move it to lane {lane}"
            )
        if existing_color is not None and existing_color != color:
            raise LaneAssignmentError(
                f"Commit {oid} already colored {existing_color}, refusing to recolor it {color}"
            )

        self.commit_lane[oid] = lane
        self.commit_color[oid] = color

    def occupy(self, lane: int, oid: str, continues_into: str) -> None:
        """Mark `lane` as held by `oid` until `continues_into` is laid out."""
        self._drop_target(lane)
        self.active_lanes[lane] = oid
        self._free_set.discard(lane)
        self._lane_target[lane] = continues_into
        self.awaiting.setdefault(continues_into, []).append(lane)

    def release(self, lane: int) -> None:
        """Free a lane so an unrelated lineage can reuse it."""
        self._drop_target(lane)
        self.active_lanes.pop(lane, None)
        if lane not in self._free_set:
            heapq.heappush(self.free_lanes, lane)
            self._free_set.add(lane)
        logger.debug("Released lane %d", lane)

    def take_incoming(self, oid: str) -> list[int]:
        """Remove and return the lanes flowing into `oid`, earliest claim first."""
        lanes = self.awaiting.pop(oid, [])
        for lane in lanes:
            self._lane_target.pop(lane, None)
        return lanes

    def incoming(self, oid: str) -> list[int]:
        return self.awaiting.get(oid, [])

    def lane_of(self, oid: str) -> int | None:
        return self.commit_lane.get(oid)

    def color_of(self, oid: str) -> str | None:
        return self.commit_color.get(oid)

    def _drop_target(self, lane: int) -> None:
        target = self._lane_target.pop(lane, None)
        if target is None:
            return
        lanes = self.awaiting.get(target)
        if lanes is not None and lane in lanes:
            lanes.remove(lane)
            if not lanes:
                del self.awaiting[target]
