"""Central configuration for box joints.

Tolerances are design choices, not geometric necessities:

- LENGTH_TOLERANCE bounds how far a variable joint's widths may sum away
  from the side they tile.
- WIDTH_TOLERANCE bounds how far a fixed joint's finger width may drift
  from the optimal width before validation suggests a correction.
- WIDTH_STEP is the rounding grid for the optimal finger width, matching the
  0.5 mm step of the editor's width input.
"""

from dataclasses import dataclass


# =============================================================================
# Master Configuration
# =============================================================================

LENGTH_TOLERANCE: float = 0.001  # mm
WIDTH_TOLERANCE: float = 0.01  # mm
WIDTH_STEP: float = 0.5  # mm

# Contiguity check for generated segments
TILING_EPSILON: float = 1e-9

HISTORY_LIMIT: int = 50


@dataclass(frozen=True)
class BoxJointConfig:
    """Defaults for new boards and joints plus the validation tolerances."""

    length_tolerance: float = LENGTH_TOLERANCE
    width_tolerance: float = WIDTH_TOLERANCE
    width_step: float = WIDTH_STEP
    history_limit: int = HISTORY_LIMIT

    board_width: float = 100.0
    board_height: float = 50.0
    board_thickness: float = 20.0
    wood_type: str = "ash"
    grain_direction: str = "width"

    finger_width: float = 10.0
    finger_count: int = 5
    center_keyed: bool = False
    start: int = 0

    @property
    def board_dimensions(self) -> dict[str, float]:
        return {
            "width": self.board_width,
            "height": self.board_height,
            "thickness": self.board_thickness,
        }

    def __repr__(self) -> str:
        return (
            f"BoxJointConfig(length_tol={self.length_tolerance}, "
            f"width_tol={self.width_tolerance}, step={self.width_step})"
        )


DEFAULT_CONFIG = BoxJointConfig()
