import pytest

from box_joints.joints import (
    FixedPattern,
    JointConfig,
    JointMode,
    Segment,
    SegmentType,
    Side,
    VariablePattern,
    check_tiling,
    distribute_evenly,
    generate_fixed_segments,
    generate_segments,
    generate_variable_segments,
    mirror_pattern,
)


FINGER = SegmentType.FINGER
GROOVE = SegmentType.GROOVE


class TestFixedSegments:
    @pytest.mark.parametrize("finger_count", [1, 2, 3, 5, 8, 13])
    @pytest.mark.parametrize("dimension", [7.5, 50, 100, 333.3])
    def test_tiles_dimension_exactly(self, finger_count, dimension):
        result = generate_fixed_segments(FixedPattern(10, finger_count), dimension)

        total = 2 * finger_count - 1
        assert result.valid
        assert len(result.segments) == total
        assert result.segments[0].type is FINGER
        assert result.segments[-1].type is FINGER
        for segment in result.segments:
            assert segment.width == pytest.approx(dimension / total)
        assert sum(s.width for s in result.segments) == pytest.approx(dimension, abs=1e-9)
        assert check_tiling(result.segments, dimension)

    def test_types_alternate(self):
        result = generate_fixed_segments(FixedPattern(10, 3), 50)
        assert [s.type for s in result.segments] == [FINGER, GROOVE, FINGER, GROOVE, FINGER]

    def test_requested_width_is_ignored(self):
        narrow = generate_fixed_segments(FixedPattern(2, 5), 100)
        wide = generate_fixed_segments(FixedPattern(40, 5), 100)
        assert narrow.segments == wide.segments
        assert narrow.segments[0].width == pytest.approx(100 / 9)

    def test_center_keyed_has_no_effect(self):
        plain = generate_fixed_segments(FixedPattern(10, 4, center_keyed=False), 70)
        keyed = generate_fixed_segments(FixedPattern(10, 4, center_keyed=True), 70)
        assert plain.segments == keyed.segments

    def test_single_finger_covers_side(self):
        result = generate_fixed_segments(FixedPattern(10, 1), 42)
        assert result.segments == (Segment(0, 42, FINGER),)
        assert result.grooves == ()

    @pytest.mark.parametrize("finger_count", [0, -3])
    def test_fails_without_fingers(self, finger_count):
        result = generate_fixed_segments(FixedPattern(10, finger_count), 100)
        assert not result.valid
        assert result.segments == ()
        assert "at least 1" in result.error

    def test_accepts_joint_config(self):
        config = JointConfig(side=Side.TOP, finger_count=2)
        result = generate_fixed_segments(config, 30)
        assert [s.start for s in result.segments] == pytest.approx([0, 10, 20])


class TestVariableSegments:
    def test_starts_accumulate(self):
        result = generate_variable_segments(VariablePattern(0, (10, 20, 30, 40)), 100)
        assert result.valid
        assert [s.start for s in result.segments] == [0, 10, 30, 60]
        assert [s.width for s in result.segments] == [10, 20, 30, 40]
        assert check_tiling(result.segments, 100)

    def test_start_zero_begins_with_finger(self):
        result = generate_variable_segments(VariablePattern(0, (25, 25, 25, 25)), 100)
        assert [s.type for s in result.segments] == [FINGER, GROOVE, FINGER, GROOVE]

    def test_start_one_begins_with_groove(self):
        result = generate_variable_segments(VariablePattern(1, (25, 25, 25, 25)), 100)
        assert [s.type for s in result.segments] == [GROOVE, FINGER, GROOVE, FINGER]

    def test_sum_within_tolerance(self):
        result = generate_variable_segments(VariablePattern(0, (50, 50.0009)), 100)
        assert result.valid

    def test_sum_mismatch_fails(self):
        result = generate_variable_segments(VariablePattern(0, (50, 49)), 100)
        assert not result.valid
        assert "must equal dimension" in result.error

    def test_empty_geometry_fails_on_positive_dimension(self):
        result = generate_variable_segments(VariablePattern(0, ()), 100)
        assert not result.valid

    @pytest.mark.parametrize("geometry", [(50, 0, 50), (60, -10, 50)])
    def test_non_positive_width_fails(self, geometry):
        result = generate_variable_segments(VariablePattern(0, geometry), 100)
        assert not result.valid
        assert result.segments == ()


class TestDispatch:
    def test_fixed_config(self):
        config = JointConfig(side="top", mode=JointMode.FIXED, finger_count=3)
        assert len(generate_segments(config, 50).segments) == 5

    def test_variable_config(self):
        config = JointConfig(side="left", mode="variable", start=1, geometry=[20, 30])
        result = generate_segments(config, 50)
        assert [s.type for s in result.segments] == [GROOVE, FINGER]

    def test_unknown_pattern_raises(self):
        with pytest.raises(TypeError):
            generate_segments(object(), 50)


class TestHelpers:
    def test_distribute_evenly(self):
        assert distribute_evenly(90, 3) == [30, 30, 30]

    @pytest.mark.parametrize("count", [0, -1])
    def test_distribute_evenly_without_count(self, count):
        assert distribute_evenly(90, count) == []

    def test_mirror_pattern(self):
        assert mirror_pattern([1, 2, 3]) == [1, 2, 3, 3, 2, 1]

    def test_mirror_pattern_doubles_length(self):
        assert len(mirror_pattern([5.5, 7])) == 4
        assert mirror_pattern([]) == []

    def test_check_tiling_rejects_gap(self):
        segments = [Segment(0, 10, FINGER), Segment(11, 10, GROOVE)]
        assert not check_tiling(segments, 21)

    def test_check_tiling_rejects_repeated_type(self):
        segments = [Segment(0, 10, FINGER), Segment(10, 10, FINGER)]
        assert not check_tiling(segments, 20)
