# game/world/layout.py
from __future__ import annotations
from typing import Iterable

from game import settings
from game.world.grid import Grid, WALL


def parse_layout(text: str | Iterable[str]) -> Grid:
    """
    Build a Grid from an ASCII map.
    '.' open, '#' wall, 'S' start. The first line is the top row (highest y),
    so the map reads the way the grid is shown on screen.
    """
    lines = text.strip().splitlines() if isinstance(text, str) else list(text)
    rows = [ln.strip() for ln in lines if ln.strip()]
    size = len(rows)
    if size == 0:
        raise ValueError("empty layout")

    grid = Grid(size)
    start = None
    for i, line in enumerate(rows):
        if len(line) != size:
            raise ValueError(f"layout must be square: row {i} has {len(line)} tiles, expected {size}")
        y = size - 1 - i
        for x, ch in enumerate(line):
            if ch == settings.LAYOUT_WALL:
                grid.set_cell((x, y), WALL)
            elif ch == settings.LAYOUT_START:
                if start is not None:
                    raise ValueError(f"layout has more than one start: {start} and {(x, y)}")
                start = (x, y)
            elif ch != settings.LAYOUT_OPEN:
                raise ValueError(f"unknown layout character {ch!r} at {(x, y)}")
    if start is not None:
        grid.set_start(start)
    return grid
