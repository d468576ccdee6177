"""Tests for Board and JointConfig value objects.

Boards and joint configs are immutable: every update returns a new object
and leaves the original untouched. The blank is a box centered at the
board's local origin.
"""
import math

import pytest
from build123d import Vector

from box_joints.elements import Board
from box_joints.joints import FixedPattern, JointConfig, JointMode, Side, VariablePattern


def create_basic_board():
    """Create the editor's default board."""
    return Board(id="board-1", width=100, height=50, thickness=20)


def create_board_with_joints():
    """Create a board with a fixed joint on top and a variable joint on the left."""
    board = create_basic_board()
    board = board.with_joint(JointConfig(side=Side.TOP, finger_width=11.0, finger_count=5))
    return board.with_joint(
        JointConfig(side=Side.LEFT, mode=JointMode.VARIABLE, start=1, geometry=(10, 30, 10))
    )


class TestBoardCreation:
    def test_dimensions(self):
        board = create_basic_board()
        assert board.dimensions == {"width": 100, "height": 50, "thickness": 20}
        assert board.volume == 100 * 50 * 20

    @pytest.mark.parametrize("dim", ["width", "height", "thickness"])
    @pytest.mark.parametrize("value", [0, -5])
    def test_non_positive_dimension_rejected(self, dim, value):
        kwargs = {"id": "b", "width": 100, "height": 50, "thickness": 20, dim: value}
        with pytest.raises(ValueError, match=dim):
            Board(**kwargs)

    def test_display_name_defaults_to_id(self):
        assert create_basic_board().display_name == "board-1"

    def test_horizontal_grain_normalised(self):
        board = Board(id="b", width=10, height=10, thickness=5, grain_direction="horizontal")
        assert board.grain_direction == "width"

    def test_from_dimensions(self):
        board = Board.from_dimensions("b", {"width": 30, "height": 40, "thickness": 5})
        assert (board.width, board.height, board.thickness) == (30, 40, 5)

    def test_repr(self):
        assert "W=100" in repr(create_basic_board())


class TestBoardGeometry:
    def test_blank_centered_at_origin(self):
        bbox = create_basic_board().blank.bounding_box()
        assert bbox.min.X == pytest.approx(-50)
        assert bbox.max.X == pytest.approx(50)
        assert bbox.min.Y == pytest.approx(-25)
        assert bbox.max.Y == pytest.approx(25)
        assert bbox.min.Z == pytest.approx(-10)
        assert bbox.max.Z == pytest.approx(10)

    def test_blank_volume(self):
        assert create_basic_board().blank.volume == pytest.approx(100000)

    def test_location_converts_radians(self):
        board = Board(
            id="b", width=10, height=10, thickness=5,
            position=(1, 2, 3), rotation=(0, 0, math.pi / 2),
        )
        loc = board.location
        assert loc.position == Vector(1, 2, 3)
        assert loc.orientation.Z == pytest.approx(90)

    @pytest.mark.parametrize(
        "side,expected",
        [("top", 100), ("bottom", 100), ("left", 50), ("right", 50), ("front", 0), ("back", 0)],
    )
    def test_side_dimension(self, side, expected):
        assert create_basic_board().side_dimension(side) == expected


class TestBoardUpdates:
    def test_with_joint_is_copy_on_write(self):
        board = create_basic_board()
        updated = board.with_joint(JointConfig(side=Side.TOP))
        assert board.joints == {}
        assert Side.TOP in updated.joints

    def test_joints_mapping_is_read_only(self):
        board = create_board_with_joints()
        with pytest.raises(TypeError):
            board.joints[Side.BOTTOM] = JointConfig(side=Side.BOTTOM)

    def test_one_config_per_side(self):
        board = create_basic_board()
        board = board.with_joint(JointConfig(side=Side.TOP, finger_count=3))
        board = board.with_joint(JointConfig(side=Side.TOP, finger_count=4))
        assert len(board.joints) == 1
        assert board.joint("top").finger_count == 4

    def test_without_joint(self):
        board = create_board_with_joints().without_joint(Side.TOP)
        assert list(board.joints) == [Side.LEFT]

    def test_joint_keys_win_over_config_side(self):
        board = Board(id="b", width=10, height=10, thickness=5, joints={"right": JointConfig(side=Side.TOP)})
        assert board.joint(Side.RIGHT).side is Side.RIGHT

    def test_with_changes_merges_dimensions(self):
        board = create_board_with_joints().with_changes(dimensions={"width": 120})
        assert board.dimensions == {"width": 120, "height": 50, "thickness": 20}
        assert len(board.joints) == 2

    def test_boards_compare_by_value(self):
        assert create_board_with_joints() == create_board_with_joints()


class TestJointConfig:
    def test_defaults(self):
        config = JointConfig(side=Side.TOP)
        assert config.mode is JointMode.FIXED
        assert (config.finger_width, config.finger_count) == (10, 5)
        assert config.center_keyed is False
        assert config.start == 0
        assert config.geometry == ()
        assert config.groove_depth is None

    def test_parses_strings(self):
        config = JointConfig(side="bottom", mode="variable", geometry=[1, 2])
        assert config.side is Side.BOTTOM
        assert config.mode is JointMode.VARIABLE
        assert config.geometry == (1, 2)

    def test_unknown_side(self):
        with pytest.raises(ValueError, match="Unknown side"):
            JointConfig(side="middle")

    def test_start_must_be_parity(self):
        with pytest.raises(ValueError):
            JointConfig(side=Side.TOP, start=2)

    def test_pattern_follows_mode(self):
        config = JointConfig(side=Side.TOP, finger_width=8, finger_count=3, geometry=(5, 5))
        assert config.pattern == FixedPattern(8, 3, False)
        assert config.with_changes(mode="variable").pattern == VariablePattern(0, (5, 5))

    def test_with_changes_keeps_original(self):
        config = JointConfig(side=Side.TOP)
        changed = config.with_changes(finger_count=7)
        assert config.finger_count == 5
        assert changed.finger_count == 7

    def test_for_board_sets_groove_depth(self):
        config = JointConfig.for_board("left", create_basic_board())
        assert config.groove_depth == 20

    def test_dict_round_trip(self):
        config = JointConfig(
            side=Side.RIGHT, mode=JointMode.VARIABLE, finger_width=12.5, finger_count=3,
            center_keyed=True, start=1, geometry=(10, 20, 20), groove_depth=None,
        )
        data = config.to_dict()
        assert data == {
            "side": "right",
            "mode": "variable",
            "fingerWidth": 12.5,
            "fingerCount": 3,
            "centerKeyed": True,
            "start": 1,
            "geometry": [10, 20, 20],
            "grooveDepth": None,
        }
        assert JointConfig.from_dict(data) == config

    def test_from_dict_fills_missing_fields(self):
        config = JointConfig.from_dict({"mode": "fixed", "fingerCount": 2}, side="top")
        assert config.side is Side.TOP
        assert config.finger_count == 2
        assert config.finger_width == 10


class TestBoardSerialization:
    def test_round_trip(self):
        board = create_board_with_joints().with_changes(
            position=(10, 0, -5), rotation=(0, 1.5, 0), wood_type="cherry", display_name="Lid"
        )
        data = board.to_dict()
        assert data["dimensions"] == {"width": 100, "height": 50, "thickness": 20}
        assert data["position"] == {"x": 10, "y": 0, "z": -5}
        assert [side for side, _ in data["joints"]] == ["top", "left"]
        assert Board.from_dict(data) == board
