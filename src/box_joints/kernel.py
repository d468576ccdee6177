"""Boolean geometry behind a narrow, swappable interface.

The carving code only ever needs boxes and subtraction. Keeping that behind
``SolidKernel`` lets tests drive the orchestrator with a kernel that fails
on demand, and keeps build123d specifics in one place.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from build123d import Part

from box_joints.joints.grooves import Vec3, create_cutting_box


class CarvingError(Exception):
    """Raised when the geometry kernel cannot complete a boolean operation."""


@runtime_checkable
class SolidKernel(Protocol):
    def box(self, size: Vec3, center: Vec3 = (0, 0, 0)) -> Any:
        ...

    def subtract(self, base: Any, tool: Any) -> Any:
        ...


class Build123dKernel:
    """``SolidKernel`` backed by build123d (OpenCascade) parts."""

    def box(self, size: Vec3, center: Vec3 = (0, 0, 0)) -> Part:
        try:
            return create_cutting_box(size, center)
        except Exception as exc:
            raise CarvingError(f"Cannot build box of size {size}: {exc}") from exc

    def subtract(self, base: Part, tool: Part) -> Part:
        try:
            result = base - tool
        except Exception as exc:
            raise CarvingError(f"Boolean subtraction failed: {exc}") from exc
        if result is None or result.volume <= 0:
            raise CarvingError("Boolean subtraction produced an empty solid")
        return result

    def __repr__(self) -> str:
        return "Build123dKernel()"
