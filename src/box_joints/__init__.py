from box_joints.config import BoxJointConfig, DEFAULT_CONFIG
from box_joints.elements import Board
from box_joints.joints import (
    Side,
    JointMode,
    FixedPattern,
    VariablePattern,
    JointConfig,
    Segment,
    SegmentType,
    SegmentResult,
    generate_fixed_segments,
    generate_variable_segments,
    generate_segments,
    distribute_evenly,
    mirror_pattern,
    ValidationResult,
    ParseResult,
    calculate_optimal_finger_width,
    validate_fixed_joint,
    validate_variable_joint,
    validate_joint,
    parse_geometry_list,
    auto_correct_fixed_joint,
    GrooveSolid,
    resolve_groove_depth,
    groove_solid,
)
from box_joints.kernel import Build123dKernel, CarvingError, SolidKernel
from box_joints.carving import BoardCarver, CarveResult, carve_board, collect_groove_solids
from box_joints.rendering import JointVisualizer, Renderer, SceneRenderer
from box_joints.history import History
from box_joints.project import ImportResult, Project, import_project, load_project

__version__ = "0.1.0"

__all__ = [
    "BoxJointConfig",
    "DEFAULT_CONFIG",
    "Board",
    "Side",
    "JointMode",
    "FixedPattern",
    "VariablePattern",
    "JointConfig",
    "Segment",
    "SegmentType",
    "SegmentResult",
    "generate_fixed_segments",
    "generate_variable_segments",
    "generate_segments",
    "distribute_evenly",
    "mirror_pattern",
    "ValidationResult",
    "ParseResult",
    "calculate_optimal_finger_width",
    "validate_fixed_joint",
    "validate_variable_joint",
    "validate_joint",
    "parse_geometry_list",
    "auto_correct_fixed_joint",
    "GrooveSolid",
    "resolve_groove_depth",
    "groove_solid",
    "Build123dKernel",
    "CarvingError",
    "SolidKernel",
    "BoardCarver",
    "CarveResult",
    "carve_board",
    "collect_groove_solids",
    "JointVisualizer",
    "Renderer",
    "SceneRenderer",
    "History",
    "ImportResult",
    "Project",
    "import_project",
    "load_project",
]
