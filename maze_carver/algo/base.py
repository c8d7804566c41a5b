import random
from abc import ABC, abstractmethod
from typing import Iterator, Optional
from maze_carver.core.grid import Grid

class Carver(ABC):
    def __init__(self, seed: int = None):
        self.seed = seed
        self.step_count = 0

    def make_rng(self, rng: Optional[random.Random] = None) -> random.Random:
        """Uses the injected source if given, otherwise a fresh one from the seed."""
        if rng is not None:
            return rng
        return random.Random(self.seed)

    @abstractmethod
    def run(self, grid: Grid, rng: Optional[random.Random] = None) -> Iterator[str]:
        """
        Yields status strings or progress updates.
        The actual border modifications happen in-place on grid.
        """
        pass

    def carve(self, grid: Grid, rng: Optional[random.Random] = None):
        """Helper to run the carver to completion."""
        for _ in self.run(grid, rng):
            pass
