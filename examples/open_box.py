# %%
import math
from pathlib import Path

from ocp_vscode import set_defaults, Camera

from box_joints import (
    History,
    JointMode,
    JointVisualizer,
    Project,
    SceneRenderer,
    auto_correct_fixed_joint,
    distribute_evenly,
    mirror_pattern,
    parse_geometry_list,
)

set_defaults(reset_camera=Camera.CENTER)

# %%
# Dimensions (mm)
length = 300
depth = 200
wall_height = 90
thickness = 12
fingers = 5

history = History(Project())

# Long walls: fingers on the left and right edges
for y in (-depth / 2, depth / 2):
    project = history.current.add_board({"width": length, "height": wall_height, "thickness": thickness})
    board_id = project.selected_board_id
    project = project.update_board(board_id, position=(0, y, wall_height / 2), rotation=(math.pi / 2, 0, 0))
    for side in ("left", "right"):
        project = project.update_joint(board_id, side, finger_count=fingers, groove_depth=thickness)
    history.push(project)

# %%
# Short walls: mirrored variable pattern so the grooves meet the long walls' fingers
half = distribute_evenly(wall_height / 2, 3)
pattern = mirror_pattern(half)
print(f"Short wall pattern: {pattern}")

for x in (-length / 2, length / 2):
    project = history.current.add_board({"width": depth, "height": wall_height, "thickness": thickness})
    board_id = project.selected_board_id
    project = project.update_board(
        board_id, position=(x, 0, wall_height / 2), rotation=(math.pi / 2, 0, math.pi / 2)
    )
    for side in ("left", "right"):
        project = project.update_joint(
            board_id, side, mode=JointMode.VARIABLE, start=1, geometry=pattern, groove_depth=thickness
        )
    history.push(project)

# %%
# Typed-in geometry is parsed before it is applied
parsed = parse_geometry_list("15, 15, 15, 15, 15, 15")
if parsed.valid:
    history.push(history.current.update_joint("board-3", "left", geometry=parsed.values))

# Snap the long walls' finger widths to what actually fits
project = history.current
for board in project:
    for side, joint in board.joints.items():
        fixed = auto_correct_fixed_joint(joint, board.side_dimension(side))
        if fixed is not joint:
            print(f"{board.id} {side.value}: finger width {joint.finger_width} -> {fixed.finger_width}")
            project = project.update_joint(board.id, side, finger_width=fixed.finger_width)
history.push(project)

# %%
renderer = SceneRenderer()
results = JointVisualizer(renderer).visualize_all_boards(history.current)
for board_id, result in results.items():
    print(f"{board_id}: {len(result.grooves)} grooves, ok={result.ok}")

history.current.save(Path(__file__).with_suffix(".json"))
renderer.show(color="burlywood")
