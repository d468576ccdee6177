from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Any, Union

from box_joints.config import DEFAULT_CONFIG

if TYPE_CHECKING:
    from box_joints.elements import Board


class Side(Enum):
    TOP = "top"
    BOTTOM = "bottom"
    LEFT = "left"
    RIGHT = "right"
    FRONT = "front"  # reserved, carries no joint geometry
    BACK = "back"  # reserved, carries no joint geometry

    @classmethod
    def jointable(cls) -> tuple[Side, ...]:
        return (cls.TOP, cls.BOTTOM, cls.LEFT, cls.RIGHT)

    @classmethod
    def parse(cls, value: Side | str) -> Side:
        if isinstance(value, Side):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown side '{value}'. Use: {[s.value for s in cls]}"
            ) from None


class JointMode(Enum):
    FIXED = "fixed"
    VARIABLE = "variable"

    @classmethod
    def parse(cls, value: JointMode | str) -> JointMode:
        if isinstance(value, JointMode):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown joint mode '{value}'. Use: {[m.value for m in cls]}"
            ) from None


@dataclass(frozen=True)
class FixedPattern:
    """Uniform fingers and grooves that exactly tile a side."""

    finger_width: float
    finger_count: int
    center_keyed: bool = False


@dataclass(frozen=True)
class VariablePattern:
    """Explicit segment widths; ``start`` 0 begins with a finger, 1 with a groove."""

    start: int
    geometry: tuple[float, ...]


JointPattern = Union[FixedPattern, VariablePattern]


@dataclass(frozen=True)
class JointConfig:
    """Joint settings for one side of a board.

    Both the fixed and the variable fields are kept whatever the mode is, so
    switching modes back and forth never loses values and every field
    survives a save/load round-trip. ``pattern`` exposes the active variant.

    ``groove_depth`` of None means "cut through the full board thickness".
    """

    side: Side
    mode: JointMode = JointMode.FIXED
    finger_width: float = DEFAULT_CONFIG.finger_width
    finger_count: int = DEFAULT_CONFIG.finger_count
    center_keyed: bool = DEFAULT_CONFIG.center_keyed
    start: int = DEFAULT_CONFIG.start
    geometry: tuple[float, ...] = field(default_factory=tuple)
    groove_depth: float | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "side", Side.parse(self.side))
        object.__setattr__(self, "mode", JointMode.parse(self.mode))
        object.__setattr__(self, "geometry", tuple(self.geometry))
        if self.start not in (0, 1):
            raise ValueError(f"start must be 0 or 1, got {self.start}")

    @classmethod
    def for_board(cls, side: Side | str, board: Board, **kwargs) -> JointConfig:
        """Default config for a side, with the groove depth set to the board thickness."""
        kwargs.setdefault("groove_depth", board.thickness)
        return cls(side=Side.parse(side), **kwargs)

    @property
    def pattern(self) -> JointPattern:
        if self.mode is JointMode.FIXED:
            return FixedPattern(self.finger_width, self.finger_count, self.center_keyed)
        return VariablePattern(self.start, self.geometry)

    def with_changes(self, **updates) -> JointConfig:
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "side": self.side.value,
            "mode": self.mode.value,
            "fingerWidth": self.finger_width,
            "fingerCount": self.finger_count,
            "centerKeyed": self.center_keyed,
            "start": self.start,
            "geometry": list(self.geometry),
            "grooveDepth": self.groove_depth,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any], side: Side | str | None = None) -> JointConfig:
        """Build a config from persisted data; missing fields keep their defaults."""
        kwargs: dict[str, Any] = {"side": Side.parse(data.get("side", side))}
        names = {
            "mode": "mode",
            "fingerWidth": "finger_width",
            "fingerCount": "finger_count",
            "centerKeyed": "center_keyed",
            "start": "start",
            "geometry": "geometry",
            "grooveDepth": "groove_depth",
        }
        for key, attr in names.items():
            if key in data:
                kwargs[attr] = data[key]
        return cls(**kwargs)

    def __repr__(self) -> str:
        return f"JointConfig({self.side.value}, {self.pattern})"
