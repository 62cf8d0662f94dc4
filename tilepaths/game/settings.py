# game/settings.py
from __future__ import annotations

# Grid (square: size is both width and height, in tiles)
DEFAULT_GRID_SIZE: int = 10
MIN_GRID_SIZE: int = 2
MAX_GRID_SIZE: int = 50

# Movement budget (steps per turn)
DEFAULT_MOVEMENT_COST: int = 6
MIN_MOVEMENT_COST: int = 1
MAX_MOVEMENT_COST: int = 500

# Layout characters (ASCII maps, row 0 printed last so +y is "up")
LAYOUT_OPEN: str = "."
LAYOUT_WALL: str = "#"
LAYOUT_START: str = "S"

# Info text
HINT_PLACING_WALLS: str = (
    "Hold the Left Mouse Button and drag your mouse on the grid to draw walls your map. "
    "Hold the Right Mouse Button to erase."
)
HINT_PLACING_START: str = "Click on the grid to place your starting position. Hold the Right Mouse Button to erase."
HINT_EVALUATING: str = "Click on a blue tile to see the generated path and path information."
HINT_NEEDS_START: str = "Please select a starting point before generating paths."


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def clamp_grid_size(text: str | int) -> int:
    """Parse a grid size from user input. Non-numeric -> default, else clamped to 2..50."""
    try:
        val = int(text)
    except (TypeError, ValueError):
        return DEFAULT_GRID_SIZE
    return _clamp(val, MIN_GRID_SIZE, MAX_GRID_SIZE)


def clamp_movement_cost(text: str | int) -> int:
    """Parse a movement budget from user input. Non-numeric -> default, else clamped to 1..500."""
    try:
        val = int(text)
    except (TypeError, ValueError):
        return DEFAULT_MOVEMENT_COST
    return _clamp(val, MIN_MOVEMENT_COST, MAX_MOVEMENT_COST)
