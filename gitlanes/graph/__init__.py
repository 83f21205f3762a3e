"""Commit graph layout: lanes, colors and per-row connector tracks."""

from gitlanes.graph.lanes import assign_lanes
from gitlanes.graph.rows import RowLanes, build_row_lanes, max_lane
from gitlanes.graph.session import GraphSession
from gitlanes.graph.state import LaneAssignmentError, LaneState
from gitlanes.graph.types import Commit, Head, HeadSet, order_commits

__all__ = [
    "Commit",
    "GraphSession",
    "Head",
    "HeadSet",
    "LaneAssignmentError",
    "LaneState",
    "RowLanes",
    "assign_lanes",
    "build_row_lanes",
    "max_lane",
    "order_commits",
]
