from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Protocol, runtime_checkable

from build123d import Compound, Location

from box_joints.carving import BoardCarver, CarveResult
from box_joints.elements import Board, Vec3

logger = logging.getLogger(__name__)


@runtime_checkable
class Renderer(Protocol):
    """What the carving code needs from whatever draws the boards."""

    def create_solid(self, board: Board) -> Any:
        ...

    def replace_solid(self, handle: Any, solid: Any) -> None:
        ...

    def apply_pose(self, handle: Any, position: Vec3, rotation: Vec3) -> None:
        ...


@dataclass
class SceneItem:
    board_id: str
    solid: Any
    location: Location = field(default_factory=Location)

    @property
    def posed(self) -> Any:
        return self.solid.moved(self.location)


@dataclass
class SceneRenderer:
    """Keeps one build123d part per board, posed in world space."""

    items: dict[str, SceneItem] = field(default_factory=dict)

    def create_solid(self, board: Board) -> SceneItem:
        item = SceneItem(board.id, board.blank, board.location)
        self.items[board.id] = item
        return item

    def replace_solid(self, handle: SceneItem, solid: Any) -> None:
        handle.solid = solid

    def apply_pose(self, handle: SceneItem, position: Vec3, rotation: Vec3) -> None:
        handle.location = Location(position, tuple(math.degrees(a) for a in rotation))

    def remove(self, board_id: str) -> None:
        self.items.pop(board_id, None)

    def compound(self) -> Compound:
        return Compound([item.posed for item in self.items.values()])

    def show(self, **options) -> None:
        from ocp_vscode import show_object

        for item in self.items.values():
            show_object(item.posed, name=item.board_id, options=options or None)


@dataclass
class JointVisualizer:
    """Runs a full carving pass and hands the results to the renderer."""

    renderer: Renderer
    carver: BoardCarver = field(default_factory=BoardCarver)
    _handles: dict[str, Any] = field(default_factory=dict, repr=False)

    def visualize_all_boards(self, boards: Iterable[Board]) -> dict[str, CarveResult]:
        boards = list(boards)
        results = {}
        for board in boards:
            handle = self._handles.get(board.id)
            if handle is None:
                handle = self.renderer.create_solid(board)
                self._handles[board.id] = handle

            result = self.carver.carve(board)
            self.renderer.replace_solid(handle, result.solid)
            self.renderer.apply_pose(handle, board.position, board.rotation)
            results[board.id] = result

        live = {board.id for board in boards}
        for board_id in list(self._handles):
            if board_id not in live:
                logger.debug("Dropping %s from the scene", board_id)
                self._drop(board_id)
        return results

    def _drop(self, board_id: str) -> None:
        self._handles.pop(board_id)
        self.carver.forget(board_id)
        remove = getattr(self.renderer, "remove", None)
        if remove is not None:
            remove(board_id)
