import logging
import math
from typing import List, Optional, Tuple

from config import get_active_params
from models.point import Point
from utils import geometry
from utils.bresenham_utils import bres_line


logger = logging.getLogger(__name__)


class AdjacencyError(ValueError):
    """Raised when a point that is not adjacent is added to a Line."""


class Line:
    """
    A line segment on the raster grid, grown one pixel at a time.

    A Line starts as a single seed Point: a degenerate Line with null
    length and undefined slope. The first adjacent point promotes it to a
    proper segment with a start, an end, a slope and a length; later
    adjacent points extend one of its endpoints.

    Endpoints are kept ordered: start is the smaller point by (x, y), so
    start.x < end.x for non-vertical lines and start.y < end.y for
    vertical ones.

    Vertical lines carry the signed surrogate slope from
    utils.geometry.slope (our infinite).
    """

    # ------------------------------------------------------------
    # Initialization
    # ------------------------------------------------------------
    def __init__(self, point: Point):
        """
        point: seed of the new degenerate Line.
        """
        self._start: Point = point
        self._end: Optional[Point] = None
        self._slope: Optional[float] = None
        self._length: float = 0.0
        self._degenerate: bool = True

    # ------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------
    @property
    def start(self) -> Point:
        return self._start

    @property
    def end(self) -> Optional[Point]:
        """None while the Line is degenerate."""
        return self._end

    @property
    def slope(self) -> Optional[float]:
        """None while the Line is degenerate."""
        return self._slope

    @property
    def length(self) -> float:
        return self._length

    def getStart(self) -> Point:
        return self._start

    def getEnd(self) -> Optional[Point]:
        return self._end

    def getSlope(self) -> Optional[float]:
        return self._slope

    def isDegenerate(self) -> bool:
        """True if this Line is made of a single Point."""
        return self._degenerate

    def isVertical(self) -> bool:
        return not self._degenerate and geometry.is_vertical(self._slope)

    # ------------------------------------------------------------
    # Adjacency
    # ------------------------------------------------------------
    def isAdjacient(self, p: Point) -> bool:
        """
        Tests whether p can extend this Line.

        The grid is discrete: two adjacent points on the same horizontal
        line share Y and their X values differ by 1. Generalizing, a point
        is adjacent to a proper Line if it lies on the same line and its X
        is start.X - 1 or end.X + 1 (Y for vertical lines).

        For a degenerate Line every point "right around" the seed is
        adjacent, i.e. no farther than sqrt(2): the 8 neighbours and the
        seed itself.
        """
        params = get_active_params()

        if self._degenerate:
            return geometry.distance(self._start, p) <= params["ADJACENCY_RADIUS"]

        return self._extendedEndpoint(p, params["COLLINEAR_TOLERANCE"]) is not None

    # alias with the usual spelling
    def isAdjacent(self, p: Point) -> bool:
        return self.isAdjacient(p)

    def _extendedEndpoint(self, p: Point, tolerance: float) -> Optional[str]:
        """
        "start" or "end" for the endpoint p extends, None if p is not
        adjacent to this proper Line.
        """
        if self.isVertical():
            if p.x != self._start.x:
                return None
            if p.y == self._start.y - 1:
                return "start"
            if p.y == self._end.y + 1:
                return "end"
            return None

        if p.x == self._start.x - 1:
            side = "start"
        elif p.x == self._end.x + 1:
            side = "end"
        else:
            return None

        expected_y = self._start.y + self._slope * (p.x - self._start.x)
        if not math.isclose(p.y, expected_y, rel_tol=0.0, abs_tol=tolerance):
            return None
        return side

    # ------------------------------------------------------------
    # Growth
    # ------------------------------------------------------------
    def addPoint(self, p: Point):
        """
        Appends or prepends p to this Line segment.

        p must be adjacent (see isAdjacient), otherwise AdjacencyError is
        raised and the Line is left untouched. A degenerate Line is
        promoted: endpoints are ordered and slope and length computed.
        Adding the seed itself to a degenerate Line is a no-op. A proper
        Line only moves the extended endpoint and updates its length.
        """
        if not self.isAdjacient(p):
            raise AdjacencyError(f"Point {p} is not adjacent to line {self}")

        if self._degenerate:
            if p == self._start:
                logger.debug("Ignoring seed %s added to its own degenerate line", p)
                return
            self._start, self._end = sorted((self._start, p), key=Point.as_tuple)
            self._slope = geometry.slope(self._start, self._end)
            self._length = geometry.distance(self._start, self._end)
            self._degenerate = False
            logger.debug("Promoted line to %s", self)
            return

        side = self._extendedEndpoint(p, get_active_params()["COLLINEAR_TOLERANCE"])
        if side == "start":
            self._start = p
        else:
            self._end = p
        self._length = geometry.distance(self._start, self._end)
        logger.debug("Extended %s of line to %s", side, self)

    # ------------------------------------------------------------
    # Rasterization
    # ------------------------------------------------------------
    def pixels(self) -> List[Tuple[int, int]]:
        """
        Grid cells covered by this Line, from start to end.
        """
        if self._degenerate:
            return [self._start.as_tuple()]
        return bres_line(self._start.x, self._start.y, self._end.x, self._end.y)

    # ------------------------------------------------------------
    # Equality & formatting
    # ------------------------------------------------------------
    def equals(self, other) -> bool:
        """
        Same start and end points, same slope and same length.
        """
        return (
            isinstance(other, Line)
            and self._start == other._start
            and self._end == other._end
            and self._slope == other._slope
            and self._length == other._length
        )

    def __eq__(self, other):
        if not isinstance(other, Line):
            return NotImplemented
        return self.equals(other)

    # mutable: not hashable
    __hash__ = None

    def describe(self) -> str:
        if self._degenerate:
            return f"[{self._start}] degenerate"
        slope = "vertical" if self.isVertical() else f"{self._slope:g}"
        return f"[{self._start} -> {self._end}] slope={slope} length={self._length:g}"

    def __str__(self):
        return self.describe()

    def __repr__(self):
        return f"Line({self.describe()})"
