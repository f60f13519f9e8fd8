# File: src/utility_router/routing/geometry.py
"""
Plane geometry for utility routing.

Defines the point and wall-footprint value types shared by the proximity
oracle, the search, and the route records.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Sequence, Tuple, Union


@dataclass(frozen=True)
class Point2D:
    """
    Immutable 2D point in plane coordinates (feet).

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate (grows downward on the floorplan canvas)
    """
    x: float
    y: float

    def to_tuple(self) -> Tuple[float, float]:
        """Convert to tuple."""
        return (self.x, self.y)

    def distance_to(self, other: "Point2D") -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(other.x - self.x, other.y - self.y)

    def offset(self, dx: float, dy: float) -> "Point2D":
        """Return a point translated by (dx, dy)."""
        return Point2D(self.x + dx, self.y + dy)

    def to_dict(self) -> Dict[str, float]:
        """Convert to dictionary for JSON serialization."""
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_tuple(cls, t: Sequence[float]) -> "Point2D":
        """Create from tuple."""
        return cls(float(t[0]), float(t[1]))

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "Point2D":
        """Create from dictionary."""
        return cls(float(data["x"]), float(data["y"]))


PointLike = Union[Point2D, Sequence[float], Mapping[str, float]]


def as_point(value: PointLike) -> Point2D:
    """
    Coerce a point-like value into a Point2D.

    Accepts a Point2D, an (x, y) sequence, or a mapping with "x" and "y".
    """
    if isinstance(value, Point2D):
        return value
    if isinstance(value, Mapping):
        return Point2D.from_dict(value)
    return Point2D.from_tuple(value)


def points_equal(a: Point2D, b: Point2D, tolerance: float = 0.01) -> bool:
    """Check whether two points coincide within tolerance on both axes."""
    return abs(a.x - b.x) < tolerance and abs(a.y - b.y) < tolerance


@dataclass(frozen=True)
class WallFootprint:
    """
    Axis-aligned 2D projection of a wall.

    Position is the top-left corner on the floorplan canvas. Negative
    extents are accepted and normalized by the min/max properties.

    Attributes:
        x: Left edge
        y: Top edge
        width: Extent along x
        height: Extent along y
        id: Optional wall identifier
    """
    x: float
    y: float
    width: float
    height: float
    id: str = ""

    @property
    def min_x(self) -> float:
        return min(self.x, self.x + self.width)

    @property
    def max_x(self) -> float:
        return max(self.x, self.x + self.width)

    @property
    def min_y(self) -> float:
        return min(self.y, self.y + self.height)

    @property
    def max_y(self) -> float:
        return max(self.y, self.y + self.height)

    @property
    def bounds(self) -> Tuple[float, float, float, float]:
        """Bounding box as (min_x, min_y, max_x, max_y)."""
        return (self.min_x, self.min_y, self.max_x, self.max_y)

    def contains_point(self, point: Point2D) -> bool:
        """Check if point is inside or on the footprint."""
        return (
            self.min_x <= point.x <= self.max_x and
            self.min_y <= point.y <= self.max_y
        )

    def distance_to(self, point: Point2D) -> float:
        """
        Distance from a point to this footprint.

        Clamps the point onto the rectangle on each axis and measures to
        the clamped point; zero when the point lies inside.
        """
        cx = min(max(point.x, self.min_x), self.max_x)
        cy = min(max(point.y, self.min_y), self.max_y)
        return math.hypot(point.x - cx, point.y - cy)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "WallFootprint":
        """
        Deserialize from dictionary.

        Accepts the flat form ({x, y, width, height}) and the floorplan
        piece form ({position: {x, y}, dimensions: {width, height}}).
        """
        if "position" in data:
            position = data["position"]
            dimensions = data.get("dimensions", {})
            return cls(
                x=float(position["x"]),
                y=float(position["y"]),
                width=float(dimensions.get("width", 0.0)),
                height=float(dimensions.get("height", 0.0)),
                id=str(data.get("id", "")),
            )
        return cls(
            x=float(data["x"]),
            y=float(data["y"]),
            width=float(data.get("width", 0.0)),
            height=float(data.get("height", 0.0)),
            id=str(data.get("id", "")),
        )


def footprints_from_pieces(pieces: Iterable[Mapping[str, Any]]) -> List[WallFootprint]:
    """
    Extract wall footprints from floorplan pieces.

    Pieces without a type are treated as walls; floors and other piece
    types are skipped.
    """
    footprints = []
    for piece in pieces:
        if piece.get("type", "wall") != "wall":
            continue
        footprints.append(WallFootprint.from_dict(piece))
    return footprints


def bounding_box(
    points: Iterable[Point2D],
    walls: Iterable[WallFootprint] = ()
) -> Tuple[float, float, float, float]:
    """
    Bounding box of points and wall footprints.

    Returns:
        (min_x, min_y, max_x, max_y)
    """
    xs: List[float] = []
    ys: List[float] = []
    for p in points:
        xs.append(p.x)
        ys.append(p.y)
    for wall in walls:
        xs.extend((wall.min_x, wall.max_x))
        ys.extend((wall.min_y, wall.max_y))
    if not xs:
        return (0.0, 0.0, 0.0, 0.0)
    return (min(xs), min(ys), max(xs), max(ys))
