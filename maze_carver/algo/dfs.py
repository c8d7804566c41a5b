import logging
import random
from array import array
from typing import Iterator, List, Optional, Tuple
from maze_carver.core.grid import Coordinate, Grid
from maze_carver.algo.base import Carver

logger = logging.getLogger(__name__)

class RecursiveBacktracker(Carver):
    def __init__(self, seed: int = None):
        super().__init__(seed)
        self.visited_count = 0

    def run(self, grid: Grid, rng: Optional[random.Random] = None) -> Iterator[str]:
        rng = self.make_rng(rng)

        # Fresh visited flags per pass, one byte per cell
        visited = array('B', [0] * (grid.width * grid.height))
        self.visited_count = 0
        self.step_count = 0

        start = Coordinate(rng.randrange(grid.width), rng.randrange(grid.height))
        logger.debug("Carving %dx%d grid from %s", grid.width, grid.height, start)

        # Stack of (current, last); the first frame opens a self-loop, which is a no-op
        stack: List[Tuple[Coordinate, Coordinate]] = [(start, start)]

        while stack:
            current, last = stack.pop()
            idx = grid.get_index(*current)

            if visited[idx]:
                # Backtrack
                continue

            visited[idx] = 1
            self.visited_count += 1
            grid.open_passage(current, last)

            neighbors = grid.neighbors(current)
            rng.shuffle(neighbors)
            # Reversed so the first shuffled neighbour is explored first
            for neighbor in reversed(neighbors):
                stack.append((neighbor, current))

            self.step_count += 1
            # Yield every N steps to keep callers responsive without spamming
            if self.step_count % 100 == 0:
                yield f"Carving... Visited: {self.visited_count} Stack: {len(stack)}"

        grid.validate()
        logger.debug("Carve finished: %d cells, %d passages", self.visited_count, grid.passage_count())
        yield "Done"
