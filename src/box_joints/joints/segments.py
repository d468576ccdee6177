"""Tiling of one board side into alternating finger and groove segments."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Sequence

from box_joints.config import LENGTH_TOLERANCE, TILING_EPSILON
from box_joints.joints.base import FixedPattern, JointConfig, JointPattern, VariablePattern


class SegmentType(Enum):
    FINGER = "finger"
    GROOVE = "groove"


@dataclass(frozen=True)
class Segment:
    """A finger or groove, measured from the side's local zero."""

    start: float
    width: float
    type: SegmentType

    @property
    def end(self) -> float:
        return self.start + self.width

    @property
    def is_groove(self) -> bool:
        return self.type is SegmentType.GROOVE


@dataclass(frozen=True)
class SegmentResult:
    valid: bool
    segments: tuple[Segment, ...] = field(default_factory=tuple)
    error: str | None = None

    @classmethod
    def ok(cls, segments: Sequence[Segment]) -> SegmentResult:
        return cls(valid=True, segments=tuple(segments))

    @classmethod
    def fail(cls, error: str) -> SegmentResult:
        return cls(valid=False, error=error)

    @property
    def grooves(self) -> tuple[Segment, ...]:
        return tuple(s for s in self.segments if s.is_groove)


def _as_pattern(config: JointConfig | JointPattern) -> JointPattern:
    if isinstance(config, JointConfig):
        return config.pattern
    return config


def _segment_type(index: int) -> SegmentType:
    return SegmentType.FINGER if index % 2 == 0 else SegmentType.GROOVE


def generate_fixed_segments(config: JointConfig | FixedPattern, dimension: float) -> SegmentResult:
    """Tile ``dimension`` with ``finger_count`` fingers and the grooves between them.

    The requested finger width is not used for the layout: every segment gets
    ``dimension / (2 * finger_count - 1)`` so the pattern always fills the side
    exactly. Validation is what tells the user their width does not fit.
    ``center_keyed`` does not change placement.
    """
    pattern = _as_pattern(config)
    if pattern.finger_count < 1:
        return SegmentResult.fail("Finger count must be at least 1")

    total_segments = pattern.finger_count * 2 - 1
    optimal_width = dimension / total_segments

    # Starts are computed from the index so no error accumulates along the side
    return SegmentResult.ok(
        Segment(start=i * optimal_width, width=optimal_width, type=_segment_type(i))
        for i in range(total_segments)
    )


def generate_variable_segments(config: JointConfig | VariablePattern, dimension: float) -> SegmentResult:
    pattern = _as_pattern(config)
    if any(width <= 0 for width in pattern.geometry):
        return SegmentResult.fail("All widths must be positive")
    total_width = sum(pattern.geometry)

    if abs(total_width - dimension) > LENGTH_TOLERANCE:
        return SegmentResult.fail(
            f"Geometry sum ({total_width:g}) must equal dimension ({dimension:g})"
        )

    segments = []
    position = 0.0
    for index, width in enumerate(pattern.geometry):
        segments.append(Segment(start=position, width=width, type=_segment_type(index + pattern.start)))
        position += width
    return SegmentResult.ok(segments)


def generate_segments(config: JointConfig | JointPattern, dimension: float) -> SegmentResult:
    pattern = _as_pattern(config)
    match pattern:
        case FixedPattern():
            return generate_fixed_segments(pattern, dimension)
        case VariablePattern():
            return generate_variable_segments(pattern, dimension)
    raise TypeError(f"Unsupported joint pattern: {pattern!r}")


def distribute_evenly(dimension: float, count: int) -> list[float]:
    if count < 1:
        return []
    return [dimension / count] * count


def mirror_pattern(pattern: Sequence[float]) -> list[float]:
    """Pattern followed by its own reverse, e.g. [a, b] -> [a, b, b, a]."""
    return [*pattern, *reversed(pattern)]


def check_tiling(segments: Sequence[Segment], dimension: float) -> bool:
    """True when the segments alternate, touch end to start and cover ``dimension``."""
    if not segments:
        return False
    if abs(segments[0].start) > TILING_EPSILON:
        return False
    for current, following in zip(segments, segments[1:]):
        if current.type is following.type:
            return False
        if abs(current.end - following.start) > TILING_EPSILON:
            return False
    return abs(segments[-1].end - dimension) <= max(TILING_EPSILON, LENGTH_TOLERANCE)
