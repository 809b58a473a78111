"""Base classes for mandala pattern primitives."""

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .errors import InvalidArgument
from .paths import Path, Point, circle_path, ellipse_path, polygon_path, to_path_data
from .rng import SeededRandom

# Stroke applied to every shape of the colored image
NEUTRAL_STROKE = "#222"
STROKE_WIDTH = 2

# Fraction of the half canvas used by the outermost shape
RADIUS_FRACTION = 0.8


@dataclass(frozen=True)
class Region:
    """One independently colorable closed area."""

    id: str
    color: str
    boundary: Path

    @property
    def path_data(self) -> str:
        """Boundary serialized as SVG path data."""
        return to_path_data(self.boundary)


@dataclass(frozen=True)
class ShapeNode:
    """One renderable shape element.

    ``kind`` is one of "circle", "ellipse", "polygon" or "path"; ``geometry``
    holds the element's positional attributes as ``(name, value)`` pairs.
    A mapping is accepted and frozen into pairs.
    """

    kind: str
    id: str
    geometry: tuple[tuple[str, Any], ...]
    fill: str
    stroke: str = NEUTRAL_STROKE
    stroke_width: float = STROKE_WIDTH

    def __post_init__(self) -> None:
        if isinstance(self.geometry, Mapping):
            object.__setattr__(self, "geometry", tuple(self.geometry.items()))

    def attributes(self) -> dict[str, Any]:
        """Fresh dict copy of the geometry attributes."""
        return dict(self.geometry)


@dataclass
class PatternParams:
    """Inputs shared by all primitives."""

    center: Point
    size: float
    colors: Sequence[str]
    rng: SeededRandom
    complexity: int = 1
    start_id: int = 0

    def __post_init__(self) -> None:
        if not (math.isfinite(self.size) and self.size > 0):
            raise InvalidArgument(f"Canvas size must be finite and positive, got {self.size}")
        if len(self.colors) == 0:
            raise InvalidArgument("Color sequence must not be empty")
        if self.complexity < 0:
            raise InvalidArgument(f"Complexity must be >= 0, got {self.complexity}")

    @property
    def max_radius(self) -> float:
        """Radius of the outermost shape."""
        return self.size / 2 * RADIUS_FRACTION


def _round(value: float) -> float:
    return round(float(value), 4)


class PatternCanvas:
    """Collects regions and shape nodes in paint order.

    Every ``add_*`` call appends exactly one Region and one ShapeNode with the
    same id, taking the next color from the sequence cyclically.
    """

    def __init__(self, colors: Sequence[str], start_id: int = 0) -> None:
        """Initialize an empty canvas.

        Args:
            colors: Resolved color sequence, reused cyclically.
            start_id: First region id number.
        """
        if len(colors) == 0:
            raise InvalidArgument("Color sequence must not be empty")
        self.colors = list(colors)
        self.start_id = start_id
        self.next_id = start_id
        self.regions: list[Region] = []
        self.nodes: list[ShapeNode] = []

    def _emit(self, kind: str, geometry: dict[str, Any], boundary: Path) -> Region:
        region_id = f"region-{self.next_id}"
        color = self.colors[len(self.regions) % len(self.colors)]
        region = Region(id=region_id, color=color, boundary=boundary)
        self.regions.append(region)
        self.nodes.append(ShapeNode(kind=kind, id=region_id, geometry=geometry, fill=color))
        self.next_id += 1
        return region

    def add_circle(self, cx: float, cy: float, r: float) -> Region:
        """Add a filled circle."""
        geometry = {"cx": _round(cx), "cy": _round(cy), "r": _round(r)}
        return self._emit("circle", geometry, circle_path(cx, cy, r))

    def add_ellipse(
        self, cx: float, cy: float, rx: float, ry: float, rotation: float = 0.0
    ) -> Region:
        """Add a filled ellipse, rotated by ``rotation`` radians."""
        boundary = ellipse_path(cx, cy, rx, ry, rotation)
        if rotation == 0:
            geometry = {"cx": _round(cx), "cy": _round(cy), "rx": _round(rx), "ry": _round(ry)}
            return self._emit("ellipse", geometry, boundary)
        return self._emit("path", {"d": to_path_data(boundary)}, boundary)

    def add_polygon(self, points: Sequence[Point]) -> Region:
        """Add a filled polygon through the given vertices."""
        rounded = tuple((_round(x), _round(y)) for x, y in points)
        return self._emit("polygon", {"points": rounded}, polygon_path(points))

    def add_path(self, boundary: Path) -> Region:
        """Add a filled closed path."""
        return self._emit("path", {"d": to_path_data(boundary)}, boundary)


class BasePrimitive(ABC):
    """Abstract base class for pattern primitives.

    Subclasses implement ``draw`` and document how complexity maps to the
    number of regions they emit.
    """

    name: str = "base"
    description: str = ""

    @abstractmethod
    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        """Emit this primitive's regions onto the canvas.

        Args:
            params: Center, size, colors, random source and complexity.
            canvas: Sink for regions and shape nodes.
        """
        pass

    def __call__(
        self, params: PatternParams
    ) -> tuple[list[Region], list[ShapeNode], int]:
        """Run the primitive on a fresh canvas.

        Args:
            params: Primitive inputs.

        Returns:
            Tuple of (regions, nodes, next free id).
        """
        canvas = PatternCanvas(params.colors, params.start_id)
        self.draw(params, canvas)
        return canvas.regions, canvas.nodes, canvas.next_id
