from array import array
from maze_carver.core.grid import Grid

class MazeAnalyzer:
    @staticmethod
    def calculate_stats(grid: Grid):
        dead_ends = 0
        corridors = 0 # 2 openings
        junctions = 0 # 3 or 4 openings

        for cell in grid.cells():
            openings = len(grid.open_directions(cell))
            if openings == 1: dead_ends += 1
            elif openings == 2: corridors += 1
            elif openings >= 3: junctions += 1

        total = grid.width * grid.height
        return {
            "passages": grid.passage_count(),
            "dead_ends": dead_ends,
            "corridors": corridors,
            "junctions": junctions,
            "dead_end_percent": (dead_ends / total) * 100
        }

    @staticmethod
    def is_perfect(grid: Grid) -> bool:
        """
        Union-find over passages. A perfect maze never joins two cells that
        are already connected and ends with every cell in one set.
        """
        parent = array('I', range(grid.width * grid.height))

        def find(i):
            while parent[i] != i:
                parent[i] = parent[parent[i]]
                i = parent[i]
            return i

        sets = grid.width * grid.height
        for a, b in grid.passages():
            ra = find(grid.get_index(*a))
            rb = find(grid.get_index(*b))
            if ra == rb:
                return False # Cycle
            parent[ra] = rb
            sets -= 1

        return sets == 1
