from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable

from box_joints.elements import Board
from box_joints.joints.base import Side
from box_joints.joints.grooves import GrooveSolid, groove_solids_for_side
from box_joints.joints.validation import validate_joint
from box_joints.kernel import Build123dKernel, CarvingError, SolidKernel

logger = logging.getLogger(__name__)


def collect_groove_solids(board: Board) -> list[GrooveSolid]:
    """All groove solids of a board, side by side in a single flat list."""
    grooves: list[GrooveSolid] = []
    for side in Side.jointable():
        config = board.joints.get(side)
        if config is None:
            continue
        side_grooves = groove_solids_for_side(board, side, config)
        if not side_grooves:
            check = validate_joint(config, board.side_dimension(side))
            if not check.valid:
                logger.warning("Skipping %s side of %s: %s", side.value, board.id, check.error)
        grooves.extend(side_grooves)
    return grooves


def carve_board(
    board: Board,
    kernel: SolidKernel | None = None,
    grooves: list[GrooveSolid] | None = None,
) -> Any:
    """Subtract every groove from a fresh base box of the board.

    The grooves of a board never overlap, so the subtraction order does not
    change the result. Raises CarvingError if the kernel fails.
    """
    kernel = kernel or Build123dKernel()
    if grooves is None:
        grooves = collect_groove_solids(board)

    result = kernel.box((board.width, board.height, board.thickness))
    for groove in grooves:
        result = kernel.subtract(result, kernel.box(groove.size, groove.center))
    return result


@dataclass
class CarveResult:
    board_id: str
    solid: Any
    grooves: list[GrooveSolid] = field(default_factory=list)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass
class BoardCarver:
    """Carves boards from scratch, keeping the last good solid per board.

    A pass that fails leaves the board's previous solid (or its plain base
    box, on the first pass) in place; it never leaves a half-carved one.
    """

    kernel: SolidKernel = field(default_factory=Build123dKernel)
    _solids: dict[str, Any] = field(default_factory=dict, repr=False)

    def carve(self, board: Board) -> CarveResult:
        grooves = collect_groove_solids(board)
        logger.debug("Carving %s with %d grooves", board.id, len(grooves))
        try:
            solid = carve_board(board, self.kernel, grooves)
        except CarvingError as exc:
            logger.error("Carving %s failed, keeping last good solid: %s", board.id, exc)
            solid = self._solids.get(board.id)
            if solid is None:
                solid = self.kernel.box((board.width, board.height, board.thickness))
                self._solids[board.id] = solid
            return CarveResult(board.id, solid, grooves, error=str(exc))

        self._solids[board.id] = solid
        return CarveResult(board.id, solid, grooves)

    def carve_all(self, boards: Iterable[Board]) -> dict[str, CarveResult]:
        return {board.id: self.carve(board) for board in boards}

    def solid_for(self, board_id: str) -> Any | None:
        return self._solids.get(board_id)

    def forget(self, board_id: str) -> None:
        self._solids.pop(board_id, None)
