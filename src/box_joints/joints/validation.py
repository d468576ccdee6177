"""Checks that a joint configuration fits the side it is placed on.

Configuration problems are reported as ``ValidationResult`` values, never
raised, so one bad side does not stop other sides or boards from carving.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Sequence

from box_joints.config import LENGTH_TOLERANCE, WIDTH_STEP, WIDTH_TOLERANCE
from box_joints.joints.base import FixedPattern, JointConfig, JointMode


@dataclass(frozen=True)
class ValidationResult:
    valid: bool
    error: str | None = None
    suggested_width: float | None = None

    @classmethod
    def ok(cls) -> ValidationResult:
        return cls(valid=True)

    @classmethod
    def fail(cls, error: str, suggested_width: float | None = None) -> ValidationResult:
        return cls(valid=False, error=error, suggested_width=suggested_width)


@dataclass(frozen=True)
class ParseResult:
    valid: bool
    values: tuple[float, ...] = field(default_factory=tuple)
    error: str | None = None


def calculate_optimal_finger_width(finger_count: int, dimension: float) -> float:
    """Width that fills ``dimension`` with fingers and grooves, on a 0.5 mm grid.

    Returns 0 for a count below one or a non-positive dimension. Halves round
    up, e.g. 100 / 9 = 11.11 -> 11.0.
    """
    if finger_count < 1 or dimension <= 0:
        return 0
    calculated = dimension / (finger_count * 2 - 1)
    steps = 1 / WIDTH_STEP
    return math.floor(calculated * steps + 0.5) / steps


def validate_fixed_joint(config: JointConfig | FixedPattern, dimension: float) -> ValidationResult:
    finger_width = config.finger_width
    finger_count = config.finger_count

    if finger_width <= 0:
        return ValidationResult.fail("Finger width must be positive")
    if finger_count < 1:
        return ValidationResult.fail("Finger count must be at least 1")

    optimal_width = calculate_optimal_finger_width(finger_count, dimension)
    if abs(finger_width - optimal_width) > WIDTH_TOLERANCE:
        return ValidationResult.fail(
            f"Finger width ({finger_width:.2f}) doesn't match board dimension. "
            f"Optimal width: {optimal_width:.2f}",
            suggested_width=optimal_width,
        )
    return ValidationResult.ok()


def validate_variable_joint(geometry: Sequence[float], dimension: float) -> ValidationResult:
    if not geometry:
        return ValidationResult.fail("Geometry array cannot be empty")
    if any(width <= 0 for width in geometry):
        return ValidationResult.fail("All widths must be positive")

    total_width = sum(geometry)
    if abs(total_width - dimension) > LENGTH_TOLERANCE:
        return ValidationResult.fail(
            f"Sum ({total_width:.2f}) must equal dimension ({dimension:g})"
        )
    return ValidationResult.ok()


def validate_joint(config: JointConfig, dimension: float) -> ValidationResult:
    if config.mode is JointMode.FIXED:
        return validate_fixed_joint(config, dimension)
    return validate_variable_joint(config.geometry, dimension)


def parse_geometry_list(text: str) -> ParseResult:
    """Parse comma-separated widths such as ``"10, 20.5, 10"``.

    Blank tokens are dropped; any other token that is not a number fails the
    whole parse, as does input with nothing left after dropping blanks.
    """
    tokens = [token.strip() for token in text.split(",")]
    tokens = [token for token in tokens if token]
    if not tokens:
        return ParseResult(valid=False, error="Geometry list is empty")

    values = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            return ParseResult(valid=False, error=f"Invalid number in geometry array: '{token}'")
        if not math.isfinite(value):
            return ParseResult(valid=False, error=f"Invalid number in geometry array: '{token}'")
        values.append(value)
    return ParseResult(valid=True, values=tuple(values))


def auto_correct_fixed_joint(config: JointConfig, dimension: float) -> JointConfig:
    """Snap a fixed joint's finger width to the suggested optimal width.

    Variable joints and joints that already fit are returned unchanged.
    """
    if config.mode is not JointMode.FIXED:
        return config
    result = validate_fixed_joint(config, dimension)
    if result.valid or result.suggested_width is None:
        return config
    if abs(config.finger_width - result.suggested_width) <= WIDTH_TOLERANCE:
        return config
    return config.with_changes(finger_width=result.suggested_width)
