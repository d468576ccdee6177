from box_joints.joints.base import (
    Side,
    JointMode,
    FixedPattern,
    VariablePattern,
    JointPattern,
    JointConfig,
)
from box_joints.joints.segments import (
    Segment,
    SegmentType,
    SegmentResult,
    generate_fixed_segments,
    generate_variable_segments,
    generate_segments,
    distribute_evenly,
    mirror_pattern,
    check_tiling,
)
from box_joints.joints.validation import (
    ValidationResult,
    ParseResult,
    calculate_optimal_finger_width,
    validate_fixed_joint,
    validate_variable_joint,
    validate_joint,
    parse_geometry_list,
    auto_correct_fixed_joint,
)
from box_joints.joints.grooves import (
    GrooveSolid,
    create_cutting_box,
    resolve_groove_depth,
    groove_solid,
    groove_solids_for_side,
)

__all__ = [
    "Side",
    "JointMode",
    "FixedPattern",
    "VariablePattern",
    "JointPattern",
    "JointConfig",
    "Segment",
    "SegmentType",
    "SegmentResult",
    "generate_fixed_segments",
    "generate_variable_segments",
    "generate_segments",
    "distribute_evenly",
    "mirror_pattern",
    "check_tiling",
    "ValidationResult",
    "ParseResult",
    "calculate_optimal_finger_width",
    "validate_fixed_joint",
    "validate_variable_joint",
    "validate_joint",
    "parse_geometry_list",
    "auto_correct_fixed_joint",
    "GrooveSolid",
    "create_cutting_box",
    "resolve_groove_depth",
    "groove_solid",
    "groove_solids_for_side",
]
