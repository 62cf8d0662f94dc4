# game/world/pathing.py
from __future__ import annotations
import heapq
import logging
from dataclasses import dataclass, field
from typing import Iterator, Optional

from game.world.grid import Grid, Coord

logger = logging.getLogger(__name__)

# E, W, N, S (+y is N)
NEIGHBOR_OFFSETS: tuple[Coord, ...] = ((1, 0), (-1, 0), (0, 1), (0, -1))


@dataclass(frozen=True, slots=True)
class Step:
    distance: int
    parent: Optional[Coord] = None


@dataclass(slots=True)
class DistanceField:
    """Shortest step counts (and parents) from `start` to every tile reachable within the movement budget."""
    start: Coord
    steps: dict[Coord, Step] = field(default_factory=dict)

    def __contains__(self, pos: object) -> bool:
        return pos in self.steps

    def __getitem__(self, pos: Coord) -> Step:
        return self.steps[pos]

    def __iter__(self) -> Iterator[Coord]:
        return iter(self.steps)

    def __len__(self) -> int:
        return len(self.steps)

    def costs(self) -> dict[Coord, int]:
        return {pos: s.distance for pos, s in self.steps.items()}


@dataclass(frozen=True, slots=True)
class PathResult:
    path: list[Coord]
    cost: int


def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def candidate_tiles(grid: Grid, start: Coord, budget: int) -> list[Coord]:
    """Open tiles whose Manhattan distance to start fits the budget, column-major order."""
    return [
        pos for pos in grid.cells()
        if pos not in grid.walls and manhattan(start, pos) <= budget
    ]


def generate_paths(grid: Grid, start: Optional[Coord], budget: int) -> Optional[DistanceField]:
    """
    Bounded Dijkstra (unit step cost, 4-way) from start over the Manhattan candidates.

    Ties between equal distances go to the tile enumerated first, so repeated
    runs on the same grid reconstruct the same paths. Returns None when there
    is no usable start.
    """
    if budget < 0:
        raise ValueError(f"budget must be non-negative, got {budget}")
    if start is None or not grid.is_passable(*start):
        logger.debug("generate_paths: no usable start (%s); nothing generated", start)
        return None

    candidates = candidate_tiles(grid, start, budget)
    order = {pos: i for i, pos in enumerate(candidates)}
    dist: dict[Coord, int] = {start: 0}
    parents: dict[Coord, Coord] = {}
    settled: set[Coord] = set()

    # (distance, enumeration index) picks the same tile as a first-minimum scan
    heap: list[tuple[int, int, Coord]] = [(0, order[start], start)]
    while heap:
        d, _, node = heapq.heappop(heap)
        if node in settled or d != dist[node]:
            continue
        settled.add(node)

        c, r = node
        for dc, dr in NEIGHBOR_OFFSETS:
            nb = (c + dc, r + dr)
            if nb not in order or nb in settled:
                continue
            total = d + 1
            if total < dist.get(nb, total + 1):
                dist[nb] = total
                parents[nb] = node
                heapq.heappush(heap, (total, order[nb], nb))

    result = DistanceField(start=start)
    for pos in candidates:
        d = dist.get(pos)
        if d is None or d > budget:
            continue
        result.steps[pos] = Step(d, parents.get(pos))

    logger.debug(
        "generate_paths: start=%s budget=%d candidates=%d reachable=%d",
        start, budget, len(candidates), len(result),
    )
    return result


def reconstruct_path(field: DistanceField, target: Coord) -> Optional[PathResult]:
    """Walk parents back to the start; returns [start .. target] and its cost, or None if unreachable."""
    if target not in field:
        logger.debug("reconstruct_path: %s unreachable", target)
        return None
    path: list[Coord] = []
    cur: Optional[Coord] = target
    while cur is not None:
        path.append(cur)
        cur = field[cur].parent
    path.reverse()
    return PathResult(path=path, cost=field[target].distance)


@dataclass
class MoveRange:
    """Holds the most recent DistanceField for a caller that queries it repeatedly."""
    current: Optional[DistanceField] = None

    def generate(self, grid: Grid, budget: int) -> Optional[DistanceField]:
        self.current = generate_paths(grid, grid.start, budget)
        return self.current

    def reconstruct(self, target: Coord) -> Optional[PathResult]:
        if self.current is None:
            return None
        return reconstruct_path(self.current, target)

    def clear(self) -> None:
        self.current = None

    def __contains__(self, pos: object) -> bool:
        return self.current is not None and pos in self.current
