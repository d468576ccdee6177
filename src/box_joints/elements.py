from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping

from build123d import Box, Location, Part

from box_joints.config import DEFAULT_CONFIG
from box_joints.joints.base import JointConfig, Side

Vec3 = tuple[float, float, float]


def _vec3(value: Mapping[str, float] | tuple | list | None) -> Vec3:
    if value is None:
        return (0.0, 0.0, 0.0)
    if isinstance(value, Mapping):
        return (value.get("x", 0.0), value.get("y", 0.0), value.get("z", 0.0))
    x, y, z = value
    return (x, y, z)


def _vec3_dict(value: Vec3) -> dict[str, float]:
    return {"x": value[0], "y": value[1], "z": value[2]}


@dataclass(frozen=True)
class Board:
    """A rectangular board that can carry box joints on its edges.

    Local coordinate system:
    - X: along the width
    - Y: along the height
    - Z: along the thickness

    Origin at the board's center. Joints are cut in this frame; ``position``
    and ``rotation`` (radians, XYZ order) only place the carved result.

    Boards are values: every update returns a new Board and the joint
    mapping is never shared with a caller.
    """

    id: str
    width: float
    height: float
    thickness: float
    position: Vec3 = (0.0, 0.0, 0.0)
    rotation: Vec3 = (0.0, 0.0, 0.0)
    grain_direction: str = DEFAULT_CONFIG.grain_direction
    wood_type: str = DEFAULT_CONFIG.wood_type
    display_name: str = ""
    joints: Mapping[Side, JointConfig] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        for dim, val in [("width", self.width), ("height", self.height), ("thickness", self.thickness)]:
            if val <= 0:
                raise ValueError(f"{dim} must be positive, got {val}")

        joints: dict[Side, JointConfig] = {}
        for side, config in dict(self.joints).items():
            side = Side.parse(side)
            if config.side is not side:
                config = config.with_changes(side=side)
            joints[side] = config

        object.__setattr__(self, "position", _vec3(self.position))
        object.__setattr__(self, "rotation", _vec3(self.rotation))
        # Older projects stored the grain as "horizontal"
        if self.grain_direction == "horizontal":
            object.__setattr__(self, "grain_direction", "width")
        if not self.display_name:
            object.__setattr__(self, "display_name", self.id)
        object.__setattr__(self, "joints", MappingProxyType(joints))

    @classmethod
    def from_dimensions(cls, board_id: str, dimensions: Mapping[str, float], **kwargs) -> Board:
        return cls(
            id=board_id,
            width=dimensions["width"],
            height=dimensions["height"],
            thickness=dimensions["thickness"],
            **kwargs,
        )

    @property
    def dimensions(self) -> dict[str, float]:
        return {"width": self.width, "height": self.height, "thickness": self.thickness}

    @property
    def volume(self) -> float:
        return self.width * self.height * self.thickness

    @property
    def blank(self) -> Part:
        return Box(self.width, self.height, self.thickness)

    @property
    def location(self) -> Location:
        return Location(self.position, tuple(math.degrees(a) for a in self.rotation))

    def side_dimension(self, side: Side | str) -> float:
        """Length of the edge a joint on ``side`` runs along."""
        match Side.parse(side):
            case Side.TOP | Side.BOTTOM:
                return self.width
            case Side.LEFT | Side.RIGHT:
                return self.height
            case _:
                return 0.0

    def joint(self, side: Side | str) -> JointConfig | None:
        return self.joints.get(Side.parse(side))

    def with_joint(self, config: JointConfig) -> Board:
        joints = dict(self.joints)
        joints[config.side] = config
        return replace(self, joints=joints)

    def without_joint(self, side: Side | str) -> Board:
        joints = dict(self.joints)
        joints.pop(Side.parse(side), None)
        return replace(self, joints=joints)

    def with_changes(self, **updates) -> Board:
        if "dimensions" in updates:
            dims = {**self.dimensions, **updates.pop("dimensions")}
            updates.update(dims)
        return replace(self, **updates)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "dimensions": self.dimensions,
            "position": _vec3_dict(self.position),
            "rotation": _vec3_dict(self.rotation),
            "grainDirection": self.grain_direction,
            "woodType": self.wood_type,
            "displayName": self.display_name,
            "joints": [[side.value, config.to_dict()] for side, config in self.joints.items()],
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Board:
        joints = {}
        for side, joint_data in data.get("joints", []):
            config = JointConfig.from_dict(joint_data, side=side)
            joints[Side.parse(side)] = config
        return cls.from_dimensions(
            data["id"],
            data["dimensions"],
            position=_vec3(data.get("position")),
            rotation=_vec3(data.get("rotation")),
            grain_direction=data.get("grainDirection") or DEFAULT_CONFIG.grain_direction,
            wood_type=data.get("woodType") or DEFAULT_CONFIG.wood_type,
            display_name=data.get("displayName") or data["id"],
            joints=joints,
        )

    def __repr__(self) -> str:
        name_str = f"'{self.display_name}' " if self.display_name != self.id else ""
        return f"Board({self.id} {name_str}W={self.width}, H={self.height}, T={self.thickness})"
