"""Immutable path commands for region boundaries.

Boundaries are tuples of ``PathCommand`` built in one go and serialized once,
using only move, line, elliptical arc and close commands.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Sequence

Point = tuple[float, float]

MOVE = "M"
LINE = "L"
ARC = "A"
CLOSE = "Z"

# Decimal places kept when serializing coordinates
PRECISION = 4


@dataclass(frozen=True)
class PathCommand:
    """One absolute path command.

    ``args`` holds ``(x, y)`` for move/line, the seven SVG arc parameters
    ``(rx, ry, rotation_deg, large_arc, sweep, x, y)`` for arcs and nothing
    for close.
    """

    op: str
    args: tuple[float, ...] = ()

    @property
    def end(self) -> Point | None:
        """End point of the command, or None for close."""
        if self.op == CLOSE:
            return None
        return (self.args[-2], self.args[-1])


Path = tuple[PathCommand, ...]


def format_number(value: float) -> str:
    """Format a coordinate compactly and deterministically."""
    text = f"{round(value, PRECISION):.{PRECISION}f}".rstrip("0").rstrip(".")
    if text in ("-0", ""):
        return "0"
    return text


def to_path_data(commands: Iterable[PathCommand]) -> str:
    """Serialize commands to SVG path data."""
    parts = []
    for cmd in commands:
        if cmd.op == CLOSE:
            parts.append(CLOSE)
        else:
            parts.append(" ".join([cmd.op] + [format_number(a) for a in cmd.args]))
    return " ".join(parts)


def polygon_path(points: Sequence[Point]) -> Path:
    """Closed polygon through the given vertices."""
    if len(points) < 3:
        raise ValueError(f"A polygon needs at least 3 points, got {len(points)}")
    first, *rest = points
    commands = [PathCommand(MOVE, (first[0], first[1]))]
    commands.extend(PathCommand(LINE, (x, y)) for x, y in rest)
    commands.append(PathCommand(CLOSE))
    return tuple(commands)


def ellipse_path(
    cx: float, cy: float, rx: float, ry: float, rotation: float = 0.0
) -> Path:
    """Closed ellipse as two half arcs.

    Args:
        cx: Center X.
        cy: Center Y.
        rx: Semi-axis along the rotated X axis.
        ry: Semi-axis along the rotated Y axis.
        rotation: Rotation of the X axis in radians.

    Returns:
        Path starting and ending on the rotated X axis.
    """
    cos_r = math.cos(rotation)
    sin_r = math.sin(rotation)
    x1, y1 = cx + rx * cos_r, cy + rx * sin_r
    x2, y2 = cx - rx * cos_r, cy - rx * sin_r
    degrees = math.degrees(rotation)
    return (
        PathCommand(MOVE, (x1, y1)),
        PathCommand(ARC, (rx, ry, degrees, 1, 1, x2, y2)),
        PathCommand(ARC, (rx, ry, degrees, 1, 1, x1, y1)),
        PathCommand(CLOSE),
    )


def circle_path(cx: float, cy: float, r: float) -> Path:
    """Closed circle starting at its leftmost point."""
    return (
        PathCommand(MOVE, (cx - r, cy)),
        PathCommand(ARC, (r, r, 0.0, 1, 1, cx + r, cy)),
        PathCommand(ARC, (r, r, 0.0, 1, 1, cx - r, cy)),
        PathCommand(CLOSE),
    )


def wedge_path(cx: float, cy: float, r: float, start: float, end: float) -> Path:
    """Closed pie wedge between two angles (radians, clockwise on screen)."""
    x1, y1 = cx + r * math.cos(start), cy + r * math.sin(start)
    x2, y2 = cx + r * math.cos(end), cy + r * math.sin(end)
    large_arc = 1 if (end - start) % (2 * math.pi) > math.pi else 0
    return (
        PathCommand(MOVE, (cx, cy)),
        PathCommand(LINE, (x1, y1)),
        PathCommand(ARC, (r, r, 0.0, large_arc, 1, x2, y2)),
        PathCommand(CLOSE),
    )


def regular_polygon_points(
    cx: float, cy: float, r: float, sides: int, rotation: float = 0.0
) -> list[Point]:
    """Vertices of a regular polygon inscribed in a circle."""
    step = 2 * math.pi / sides
    return [
        (cx + r * math.cos(rotation + i * step), cy + r * math.sin(rotation + i * step))
        for i in range(sides)
    ]


def is_closed(commands: Sequence[PathCommand], tolerance: float = 1e-6) -> bool:
    """Check that a path is a single closed contour.

    A path is closed when it starts with a move and either ends with a close
    command or returns to its starting point.
    """
    if len(commands) < 2 or commands[0].op != MOVE:
        return False
    if any(cmd.op == MOVE for cmd in commands[1:]):
        return False
    if commands[-1].op == CLOSE:
        return True
    start = commands[0].end
    last = commands[-1].end
    return math.dist(start, last) <= tolerance


def _arc_points(
    start: Point, args: tuple[float, ...], segments: int
) -> list[Point]:
    """Flatten an SVG endpoint-parameterized arc into points.

    Follows the endpoint-to-center conversion of the SVG implementation notes.
    The start point is not included.
    """
    rx, ry, degrees, large_arc, sweep, x2, y2 = args
    x1, y1 = start
    rx, ry = abs(rx), abs(ry)
    if rx == 0 or ry == 0 or (x1 == x2 and y1 == y2):
        return [(x2, y2)]

    phi = math.radians(degrees)
    cos_p, sin_p = math.cos(phi), math.sin(phi)
    dx2, dy2 = (x1 - x2) / 2, (y1 - y2) / 2
    x1p = cos_p * dx2 + sin_p * dy2
    y1p = -sin_p * dx2 + cos_p * dy2

    # Scale radii up when the endpoints are too far apart
    lam = (x1p * x1p) / (rx * rx) + (y1p * y1p) / (ry * ry)
    if lam > 1:
        scale = math.sqrt(lam)
        rx, ry = rx * scale, ry * scale

    num = rx * rx * ry * ry - rx * rx * y1p * y1p - ry * ry * x1p * x1p
    den = rx * rx * y1p * y1p + ry * ry * x1p * x1p
    coef = math.sqrt(max(0.0, num / den))
    if large_arc == sweep:
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx

    cx = cos_p * cxp - sin_p * cyp + (x1 + x2) / 2
    cy = sin_p * cxp + cos_p * cyp + (y1 + y2) / 2

    theta1 = math.atan2((y1p - cyp) / ry, (x1p - cxp) / rx)
    theta2 = math.atan2((-y1p - cyp) / ry, (-x1p - cxp) / rx)
    delta = theta2 - theta1
    if sweep and delta < 0:
        delta += 2 * math.pi
    elif not sweep and delta > 0:
        delta -= 2 * math.pi

    points = []
    for i in range(1, segments + 1):
        theta = theta1 + delta * i / segments
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        points.append((
            cx + rx * cos_p * cos_t - ry * sin_p * sin_t,
            cy + rx * sin_p * cos_t + ry * cos_p * sin_t,
        ))
    # Land exactly on the commanded end point
    points[-1] = (x2, y2)
    return points


def flatten(commands: Sequence[PathCommand], arc_segments: int = 32) -> list[Point]:
    """Approximate a closed path by a polygon.

    Args:
        commands: Path commands starting with a move.
        arc_segments: Line segments used per arc.

    Returns:
        Vertex list without a repeated closing point.
    """
    points: list[Point] = []
    current: Point | None = None
    for cmd in commands:
        if cmd.op in (MOVE, LINE):
            current = cmd.end
            points.append(current)
        elif cmd.op == ARC:
            if current is None:
                raise ValueError("Arc command without a current point")
            arc = _arc_points(current, cmd.args, arc_segments)
            points.extend(arc)
            current = arc[-1]

    if len(points) > 1 and math.dist(points[0], points[-1]) <= 1e-9:
        points.pop()
    return points
