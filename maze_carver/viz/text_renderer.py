from typing import List
from maze_carver.core.grid import Grid

class TextRenderer:
    CORNER = "+"
    BODY = "   "
    WALL_H = "---"
    OPEN_H = "   "
    WALL_V = "|"
    OPEN_V = " "

    def __init__(self, grid: Grid):
        self.grid = grid

    def render_lines(self) -> List[str]:
        """
        One top line, then a body line and a south-wall line per row.
        Every line is 4 * width + 1 characters.
        """
        self.grid.check_consistency()

        w, h = self.grid.width, self.grid.height
        lines = [self.CORNER + (self.WALL_H + self.CORNER) * w]

        for y in range(h):
            body = [self.WALL_V]
            south = [self.CORNER]
            for x in range(w):
                body.append(self.BODY)
                body.append(self.WALL_V if self.grid.has_wall_east(x, y) else self.OPEN_V)
                south.append(self.WALL_H if self.grid.has_wall_south(x, y) else self.OPEN_H)
                south.append(self.CORNER)
            lines.append("".join(body))
            lines.append("".join(south))

        return lines

    def render(self) -> str:
        return "\n".join(self.render_lines())
