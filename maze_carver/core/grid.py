import logging
from array import array
from enum import Enum, IntEnum
from typing import Iterator, List, NamedTuple, Tuple

logger = logging.getLogger(__name__)


class Coordinate(NamedTuple):
    x: int
    y: int


class Border(IntEnum):
    PASSAGE = 0
    WALL = 1


class State(Enum):
    UNINITIALIZED = "uninitialized"
    VALID = "valid"
    INVALID_WIDTH_HEIGHT = "invalid_width_height"
    NO_PATHS = "no_paths"


class InvalidDimensions(ValueError):
    pass


class GridConsistencyError(RuntimeError):
    pass


class Grid:
    """
    Rectangular lattice of cells with wall/passage state on every internal edge.

    borders_h holds the edges between (x, y) and (x + 1, y), keyed by the west cell.
    borders_v holds the edges between (x, y) and (x, y + 1), keyed by the north cell.
    Outer boundary edges have no entry and always count as walls.
    """

    __slots__ = ('width', 'height', 'borders_h', 'borders_v', 'state')

    def __init__(self, width: int, height: int):
        if not isinstance(width, int) or not isinstance(height, int) \
                or isinstance(width, bool) or isinstance(height, bool):
            raise InvalidDimensions(f"Grid dimensions must be integers, got {width!r}x{height!r}")
        if width < 1 or height < 1:
            raise InvalidDimensions(f"Grid dimensions must be at least 1x1, got {width}x{height}")

        self.width = width
        self.height = height
        # One byte per edge, every edge starts as a wall
        self.borders_h = array('B', [Border.WALL] * ((width - 1) * height))
        self.borders_v = array('B', [Border.WALL] * (width * (height - 1)))
        self.state = State.UNINITIALIZED

    def is_on_grid(self, coordinate: Tuple[int, int]) -> bool:
        x, y = coordinate
        return 0 <= x < self.width and 0 <= y < self.height

    def get_index(self, x: int, y: int) -> int:
        if 0 <= x < self.width and 0 <= y < self.height:
            return y * self.width + x
        raise IndexError(f"Coordinate ({x}, {y}) out of bounds")

    def cells(self) -> Iterator[Coordinate]:
        for y in range(self.height):
            for x in range(self.width):
                yield Coordinate(x, y)

    def neighbors(self, coordinate: Tuple[int, int]) -> List[Coordinate]:
        """
        Returns the in-bounds lattice neighbours in west, north, east, south order.
        Does NOT check walls. Raises IndexError for an off-grid coordinate.
        """
        x, y = coordinate
        self.get_index(x, y)
        result = []
        if x > 0:
            result.append(Coordinate(x - 1, y))
        if y > 0:
            result.append(Coordinate(x, y - 1))
        if x < self.width - 1:
            result.append(Coordinate(x + 1, y))
        if y < self.height - 1:
            result.append(Coordinate(x, y + 1))
        return result

    def _edge_slot(self, a: Tuple[int, int], b: Tuple[int, int]):
        """
        Maps an adjacent pair to (buffer, index). Returns None when the pair
        is not one lattice step apart or leaves the grid.
        """
        if not (self.is_on_grid(a) and self.is_on_grid(b)):
            return None
        (ax, ay), (bx, by) = a, b
        if ay == by and abs(ax - bx) == 1:
            return self.borders_h, ay * (self.width - 1) + min(ax, bx)
        if ax == bx and abs(ay - by) == 1:
            return self.borders_v, min(ay, by) * self.width + ax
        return None

    def open_passage(self, current: Tuple[int, int], last: Tuple[int, int]):
        """
        Marks the border between two adjacent cells as a passage.
        Any other pair (including current == last) leaves the grid untouched.
        """
        slot = self._edge_slot(current, last)
        if slot is None:
            logger.debug("Ignoring open_passage(%s, %s): not an adjacent on-grid pair", current, last)
            return
        buf, idx = slot
        buf[idx] = Border.PASSAGE

    def border_between(self, a: Tuple[int, int], b: Tuple[int, int]) -> Border:
        slot = self._edge_slot(a, b)
        if slot is None:
            raise IndexError(f"No border between {tuple(a)} and {tuple(b)}")
        buf, idx = slot
        return Border(buf[idx])

    def has_wall_east(self, x: int, y: int) -> bool:
        self.get_index(x, y)
        if x == self.width - 1:
            return True
        return self.borders_h[y * (self.width - 1) + x] == Border.WALL

    def has_wall_south(self, x: int, y: int) -> bool:
        self.get_index(x, y)
        if y == self.height - 1:
            return True
        return self.borders_v[y * self.width + x] == Border.WALL

    def open_directions(self, coordinate: Tuple[int, int]) -> List[Coordinate]:
        """Neighbours reachable through a passage."""
        return [n for n in self.neighbors(coordinate)
                if self.border_between(coordinate, n) == Border.PASSAGE]

    def passages(self) -> Iterator[Tuple[Coordinate, Coordinate]]:
        for y in range(self.height):
            for x in range(self.width - 1):
                if self.borders_h[y * (self.width - 1) + x] == Border.PASSAGE:
                    yield Coordinate(x, y), Coordinate(x + 1, y)
        for y in range(self.height - 1):
            for x in range(self.width):
                if self.borders_v[y * self.width + x] == Border.PASSAGE:
                    yield Coordinate(x, y), Coordinate(x, y + 1)

    def passage_count(self) -> int:
        return (self.borders_h.count(Border.PASSAGE)
                + self.borders_v.count(Border.PASSAGE))

    def validate(self) -> State:
        if self.width < 1 or self.height < 1:
            self.state = State.INVALID_WIDTH_HEIGHT
        elif self.width * self.height > 1 and self.passage_count() == 0:
            self.state = State.NO_PATHS
        else:
            self.state = State.VALID
        return self.state

    def check_consistency(self):
        expected_h = (self.width - 1) * self.height
        expected_v = self.width * (self.height - 1)
        if len(self.borders_h) != expected_h:
            raise GridConsistencyError(
                f"Horizontal border buffer has {len(self.borders_h)} entries, expected {expected_h}")
        if len(self.borders_v) != expected_v:
            raise GridConsistencyError(
                f"Vertical border buffer has {len(self.borders_v)} entries, expected {expected_v}")
        for buf in (self.borders_h, self.borders_v):
            for val in buf:
                if val not in (Border.WALL, Border.PASSAGE):
                    raise GridConsistencyError(f"Unknown border value {val}")

    def to_text(self) -> str:
        from maze_carver.viz.text_renderer import TextRenderer
        return TextRenderer(self).render()

    def __str__(self) -> str:
        return self.to_text()
