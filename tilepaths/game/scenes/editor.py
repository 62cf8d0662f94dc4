# game/scenes/editor.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from game import settings
from game.world.grid import Grid, Coord, OPEN, WALL
from game.world.layout import parse_layout
from game.world.pathing import DistanceField, MoveRange, PathResult

logger = logging.getLogger(__name__)


class ActionState(IntEnum):
    PLACING_WALLS = 0
    PLACING_START = 1
    EVALUATING_PATHS = 2


@dataclass
class EditorScene:
    """
    Headless tile editor driving the path engine:
    - Wall painting / erasing
    - Start placement
    - Path generation, target selection and the path info text
    - Grid size / movement cost inputs (applied on restart)
    - Loading an ASCII map as the current grid
    Screen and mouse handling live with whoever embeds the scene; it only sees tile coords.
    """
    grid: Grid = field(default_factory=Grid)
    movement_cost: int = settings.DEFAULT_MOVEMENT_COST
    state: ActionState = field(default=ActionState.PLACING_WALLS, init=False)
    info_text: str = field(default="", init=False)

    # pending inputs, used by restart()
    _grid_size: int = field(default=settings.DEFAULT_GRID_SIZE, init=False)

    # paths
    _range: MoveRange = field(default_factory=MoveRange, init=False)
    _selected: Coord | None = field(default=None, init=False)
    _path: Optional[PathResult] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self._grid_size = self.grid.size
        self.set_action_state(ActionState.PLACING_WALLS)

    # ---- Read-only views ----
    @property
    def selected(self) -> Coord | None:
        return self._selected

    @property
    def path(self) -> Optional[PathResult]:
        return self._path

    @property
    def reachable(self) -> dict[Coord, int]:
        field_ = self._range.current
        return field_.costs() if field_ is not None else {}

    # ---- Inputs ----
    def set_grid_size(self, text: str | int) -> None:
        self._grid_size = settings.clamp_grid_size(text)

    def set_movement_cost(self, text: str | int) -> None:
        self.movement_cost = settings.clamp_movement_cost(text)
        if self.state == ActionState.EVALUATING_PATHS:
            self.generate_paths()

    def restart(self) -> None:
        logger.debug("restart: size=%d cost=%d", self._grid_size, self.movement_cost)
        self.grid = Grid(self._grid_size)
        self.reset_paths()
        self.set_action_state(ActionState.PLACING_WALLS)

    def load_layout(self, text: str) -> None:
        """Replace the grid with an ASCII map (see game.world.layout) and go back to wall editing."""
        self.grid = parse_layout(text)
        self._grid_size = self.grid.size
        logger.debug("load_layout: size=%d walls=%d start=%s", self.grid.size, len(self.grid.walls), self.grid.start)
        self.set_action_state(ActionState.PLACING_WALLS)

    def set_action_state(self, state: ActionState | int) -> None:
        self.state = ActionState(state)
        if self.state == ActionState.PLACING_WALLS:
            self.reset_paths()
            self.info_text = settings.HINT_PLACING_WALLS
        elif self.state == ActionState.PLACING_START:
            self.reset_paths()
            self.info_text = settings.HINT_PLACING_START
        elif self.generate_paths() is not None:
            self.info_text = settings.HINT_EVALUATING
        else:
            self.state = ActionState.PLACING_START
            self.info_text = settings.HINT_NEEDS_START
        logger.debug("action state -> %s", self.state.name)

    # ---- Tile actions ----
    def primary(self, pos: Coord) -> None:
        if self.state == ActionState.PLACING_WALLS:
            self.grid.set_cell(pos, WALL)
        elif self.state == ActionState.PLACING_START:
            self.grid.set_start(pos)
        else:
            self.select(pos)

    def secondary(self, pos: Coord) -> None:
        if self.state == ActionState.EVALUATING_PATHS:
            return
        self.erase(pos)

    def erase(self, pos: Coord) -> None:
        if not self.grid.in_bounds(*pos):
            return
        if pos == self.grid.start:
            self.grid.clear_start()
        self.grid.set_cell(pos, OPEN)

    # ---- Paths ----
    def generate_paths(self) -> Optional[DistanceField]:
        self._selected = None
        self._path = None
        return self._range.generate(self.grid, self.movement_cost)

    def reset_paths(self) -> None:
        self._selected = None
        self._path = None
        self._range.clear()

    def select(self, pos: Coord) -> None:
        if pos not in self._range or pos == self._selected:
            return
        result = self._range.reconstruct(pos)
        if result is None:
            return
        self._selected = pos
        self._path = result
        self.info_text = format_path_info(result)


def format_path_info(result: PathResult) -> str:
    (sx, sy), (tx, ty) = result.path[0], result.path[-1]
    lines = "".join(f"({x}, {y})\n" for x, y in result.path)
    return f"Cost from ({sx}, {sy}) to ({tx}, {ty}): {result.cost}\nPath:\n{lines}"
