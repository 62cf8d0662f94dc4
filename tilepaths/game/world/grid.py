# game/world/grid.py
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Iterator, Literal, Optional, Set
from game import settings

logger = logging.getLogger(__name__)

Coord = tuple[int, int]
TileKind = Literal["open", "wall", "out_of_bounds"]

OPEN: TileKind = "open"
WALL: TileKind = "wall"
OUT_OF_BOUNDS: TileKind = "out_of_bounds"


@dataclass(slots=True)
class Grid:
    """Square tile grid: walls plus at most one start tile (always open)."""
    size: int = settings.DEFAULT_GRID_SIZE
    walls: Set[Coord] = field(default_factory=set)
    start: Optional[Coord] = None

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError(f"grid size must be positive, got {self.size}")
        if self.start is not None and self.get_kind(self.start) != OPEN:
            raise ValueError(f"start {self.start} is not an open tile")

    # --- queries ---
    def in_bounds(self, col: int, row: int) -> bool:
        return 0 <= col < self.size and 0 <= row < self.size

    def is_wall(self, col: int, row: int) -> bool:
        return (col, row) in self.walls

    def is_passable(self, col: int, row: int) -> bool:
        return self.in_bounds(col, row) and (col, row) not in self.walls

    def get_kind(self, pos: Coord) -> TileKind:
        if not self.in_bounds(*pos):
            return OUT_OF_BOUNDS
        return WALL if pos in self.walls else OPEN

    def cells(self) -> Iterator[Coord]:
        # column-major: x outer, y inner
        for x in range(self.size):
            for y in range(self.size):
                yield (x, y)

    # --- edits ---
    def set_cell(self, pos: Coord, kind: TileKind) -> None:
        if not self.in_bounds(*pos):
            return
        if kind not in (OPEN, WALL):
            raise ValueError(f"cannot set a cell to {kind!r}")
        if kind == WALL:
            if pos == self.start:
                logger.debug("wall placed over start %s; start cleared", pos)
                self.start = None
            self.walls.add(pos)
        else:
            self.walls.discard(pos)

    def set_start(self, pos: Coord) -> bool:
        """Move the start to `pos` if it is an open tile. Returns whether it moved."""
        if self.get_kind(pos) != OPEN:
            return False
        self.start = pos
        return True

    def clear_start(self) -> None:
        self.start = None
