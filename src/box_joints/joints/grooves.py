from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from build123d import Align, Box, Location, Part

from box_joints.joints.base import JointConfig, JointMode, Side
from box_joints.joints.segments import Segment, generate_segments
from box_joints.joints.validation import validate_variable_joint

if TYPE_CHECKING:
    from box_joints.elements import Board


Vec3 = tuple[float, float, float]


@dataclass(frozen=True)
class GrooveSolid:
    """Axis-aligned box to remove from a board, in board-local space.

    The board is centered at the origin: X spans the width, Y the height and
    Z the thickness.
    """

    side: Side
    size: Vec3
    center: Vec3

    def bounds(self) -> tuple[Vec3, Vec3]:
        lo = tuple(c - s / 2 for c, s in zip(self.center, self.size))
        hi = tuple(c + s / 2 for c, s in zip(self.center, self.size))
        return lo, hi

    @property
    def volume(self) -> float:
        w, h, d = self.size
        return w * h * d


def create_cutting_box(
    size: Vec3,
    center: Vec3 = (0, 0, 0),
    align: tuple = (Align.CENTER, Align.CENTER, Align.CENTER),
) -> Part:
    box = Box(*size, align=align)
    if center != (0, 0, 0):
        box = box.move(Location(center))
    return box


def resolve_groove_depth(groove_depth: float | None, thickness: float) -> float:
    """Depth to cut: unset, too deep or non-positive all mean the full thickness."""
    if groove_depth is None:
        return thickness
    if groove_depth > thickness:
        return thickness
    if groove_depth <= 0:
        return thickness
    return groove_depth


def groove_solid(board: Board, side: Side, segment: Segment, depth: float) -> GrooveSolid:
    half_width = board.width / 2
    half_height = board.height / 2
    thickness = board.thickness
    along = segment.start + segment.width / 2

    match side:
        case Side.TOP:
            return GrooveSolid(
                side,
                (segment.width, depth, thickness),
                (-half_width + along, half_height - depth / 2, 0.0),
            )
        case Side.BOTTOM:
            return GrooveSolid(
                side,
                (segment.width, depth, thickness),
                (-half_width + along, -half_height + depth / 2, 0.0),
            )
        case Side.LEFT:
            return GrooveSolid(
                side,
                (depth, segment.width, thickness),
                (-half_width + depth / 2, -half_height + along, 0.0),
            )
        case Side.RIGHT:
            return GrooveSolid(
                side,
                (depth, segment.width, thickness),
                (half_width - depth / 2, -half_height + along, 0.0),
            )
        case Side.FRONT | Side.BACK:
            raise ValueError(f"Side '{side.value}' does not carry joints")
    raise ValueError(f"Unknown side: {side!r}")


def groove_solids_for_side(board: Board, side: Side, config: JointConfig) -> list[GrooveSolid]:
    """Groove solids for one side; an invalid configuration cuts nothing."""
    dimension = board.side_dimension(side)
    if config.mode is JointMode.VARIABLE and not validate_variable_joint(config.geometry, dimension).valid:
        return []
    result = generate_segments(config, dimension)
    if not result.valid:
        return []
    depth = resolve_groove_depth(config.groove_depth, board.thickness)
    return [groove_solid(board, side, segment, depth) for segment in result.grooves]
