"""Project state: the boards being designed plus the editor selection.

A ``Project`` is an immutable snapshot. Every edit returns a new project,
which is what ``History`` stores for undo/redo. The JSON layout matches the
project files written by the editor, so files round-trip unchanged.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Iterator, Mapping

from box_joints.config import DEFAULT_CONFIG
from box_joints.elements import Board
from box_joints.joints.base import JointConfig, Side

logger = logging.getLogger(__name__)

_BOARD_ID = re.compile(r"^board-(\d+)$")


@dataclass(frozen=True)
class ImportResult:
    success: bool
    project: Project | None = None
    error: str | None = None


@dataclass(frozen=True)
class Project:
    boards: tuple[Board, ...] = ()
    selected_board_id: str | None = None
    selected_side: Side | None = None
    show_unselected_transparent: bool = False

    def __post_init__(self) -> None:
        boards = tuple(self.boards)
        ids = [board.id for board in boards]
        if len(set(ids)) != len(ids):
            raise ValueError(f"Duplicate board ids: {ids}")
        object.__setattr__(self, "boards", boards)
        if self.selected_side is not None:
            object.__setattr__(self, "selected_side", Side.parse(self.selected_side))

    # -- queries ---------------------------------------------------------

    @property
    def board_ids(self) -> list[str]:
        return [board.id for board in self.boards]

    @property
    def selected_board(self) -> Board | None:
        if self.selected_board_id is None:
            return None
        return self.get_board(self.selected_board_id)

    def get_board(self, board_id: str) -> Board | None:
        for board in self.boards:
            if board.id == board_id:
                return board
        return None

    def next_board_id(self) -> str:
        numbers = [int(m.group(1)) for m in map(_BOARD_ID.match, self.board_ids) if m]
        return f"board-{max(numbers, default=0) + 1}"

    # -- edits -----------------------------------------------------------

    def add_board(
        self,
        dimensions: Mapping[str, float] | None = None,
        board_id: str | None = None,
        **kwargs,
    ) -> Project:
        """Add a board (default 100 x 50 x 20) and select it."""
        board_id = board_id or self.next_board_id()
        if self.get_board(board_id) is not None:
            raise ValueError(f"Board '{board_id}' already exists")
        board = Board.from_dimensions(board_id, dimensions or DEFAULT_CONFIG.board_dimensions, **kwargs)
        return replace(self, boards=self.boards + (board,), selected_board_id=board_id)

    def update_board(self, board_id: str, **changes) -> Project:
        """Replace a board with an updated copy; unknown ids are a no-op."""
        board = self.get_board(board_id)
        if board is None:
            return self
        return self._with_board(board.with_changes(**changes))

    def remove_board(self, board_id: str) -> Project:
        if self.get_board(board_id) is None:
            return self
        boards = tuple(b for b in self.boards if b.id != board_id)
        if self.selected_board_id == board_id:
            return replace(self, boards=boards, selected_board_id=None, selected_side=None)
        return replace(self, boards=boards)

    def update_joint(self, board_id: str, side: Side | str, **changes) -> Project:
        """Update one side's joint, creating it with full-thickness grooves if missing."""
        board = self.get_board(board_id)
        if board is None:
            return self
        side = Side.parse(side)
        config = board.joint(side) or JointConfig.for_board(side, board)
        return self._with_board(board.with_joint(config.with_changes(**changes)))

    def remove_joint(self, board_id: str, side: Side | str) -> Project:
        board = self.get_board(board_id)
        if board is None:
            return self
        return self._with_board(board.without_joint(side))

    def select(self, board_id: str | None = None, side: Side | str | None = None) -> Project:
        return replace(
            self,
            selected_board_id=board_id,
            selected_side=Side.parse(side) if side is not None else None,
        )

    def with_transparency(self, show_unselected_transparent: bool) -> Project:
        return replace(self, show_unselected_transparent=show_unselected_transparent)

    def _with_board(self, board: Board) -> Project:
        boards = tuple(board if b.id == board.id else b for b in self.boards)
        return replace(self, boards=boards)

    # -- persistence -----------------------------------------------------

    def to_dict(self) -> dict[str, Any]:
        return {
            "boards": [[board.id, board.to_dict()] for board in self.boards],
            "selectedBoardId": self.selected_board_id,
            "selectedSide": self.selected_side.value if self.selected_side else None,
            "showUnselectedTransparent": self.show_unselected_transparent,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Project:
        boards = []
        for board_id, board_data in data["boards"]:
            board_data = {**board_data, "id": board_data.get("id", board_id)}
            boards.append(Board.from_dict(board_data))
        return cls(
            boards=tuple(boards),
            selected_board_id=data.get("selectedBoardId") or None,
            selected_side=data.get("selectedSide") or None,
            show_unselected_transparent=bool(data.get("showUnselectedTransparent", False)),
        )

    def save(self, path: Path | str) -> Path:
        path = Path(path)
        path.write_text(self.to_json())
        logger.info("Saved project with %d boards to %s", len(self.boards), path)
        return path

    def __iter__(self) -> Iterator[Board]:
        return iter(self.boards)

    def __len__(self) -> int:
        return len(self.boards)

    def __repr__(self) -> str:
        return f"Project(boards={len(self.boards)}, selected={self.selected_board_id!r})"


def import_project(text: str | None) -> ImportResult:
    """Parse a project file; failures come back as an unsuccessful result."""
    if not text:
        return ImportResult(success=False, error="No data provided")
    try:
        data = json.loads(text)
        if not isinstance(data, dict) or not isinstance(data.get("boards"), list):
            return ImportResult(success=False, error="Invalid project format: missing boards array")
        project = Project.from_dict(data)
    except (ValueError, KeyError, TypeError) as exc:
        logger.error("Failed to import project: %s", exc)
        return ImportResult(success=False, error=str(exc) or "Failed to parse JSON file")
    return ImportResult(success=True, project=project)


def load_project(path: Path | str) -> ImportResult:
    path = Path(path)
    try:
        text = path.read_text()
    except OSError as exc:
        logger.error("Failed to read project %s: %s", path, exc)
        return ImportResult(success=False, error=str(exc))
    return import_project(text)
