"""Radial pattern primitives.

Motifs repeated around the center: triangles, diamonds, stars, petals,
spiral arms, pie wedges and crosses.
"""

import math

import numpy as np

from .base import BasePrimitive, PatternCanvas, PatternParams
from .errors import InvalidArgument
from .paths import Point, regular_polygon_points, wedge_path
from .registry import register_primitive


def _rotate(points: list[Point], cx: float, cy: float, angle: float) -> list[Point]:
    """Rotate local (x, y) offsets by angle and translate them to (cx, cy)."""
    cos_a, sin_a = math.cos(angle), math.sin(angle)
    return [(cx + x * cos_a - y * sin_a, cy + x * sin_a + y * cos_a) for x, y in points]


@register_primitive
class TriangleLayersPrimitive(BasePrimitive):
    """Stacked triangles alternating up and down inside a circle.

    Regions: a background circle, ``complexity`` triangles and a center
    circle.
    """

    name = "triangle_layers"
    description = "Alternating triangles in a circle"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        flip = math.pi if params.rng.random() > 0.5 else 0.0

        canvas.add_circle(cx, cy, radius)

        layers = params.complexity
        outer = radius * 0.9
        for i in range(layers):
            r = outer * (1 - i / (layers + 1))
            rotation = -math.pi / 2 + flip + (math.pi if i % 2 else 0.0)
            canvas.add_polygon(regular_polygon_points(cx, cy, r, 3, rotation))

        canvas.add_circle(cx, cy, outer / (layers + 1) * 0.35)


@register_primitive
class DiamondRingsPrimitive(BasePrimitive):
    """A ring of rhombi around a central diamond.

    Regions: a background circle, ``4 + 2 * complexity`` diamonds and one
    center diamond.
    """

    name = "diamond_rings"
    description = "Ring of diamonds"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        count = 4 + 2 * params.complexity
        offset = params.rng.random() * 2 * math.pi / count

        canvas.add_circle(cx, cy, radius)

        ring = radius * 0.6
        half_length = radius * 0.25
        half_width = min(radius * 0.12, ring * math.sin(math.pi / count) * 0.9)
        for i in range(count):
            angle = offset + i * 2 * math.pi / count
            px = cx + ring * math.cos(angle)
            py = cy + ring * math.sin(angle)
            diamond = [(half_length, 0.0), (0.0, half_width), (-half_length, 0.0), (0.0, -half_width)]
            canvas.add_polygon(_rotate(diamond, px, py, angle))

        half = radius * 0.3
        canvas.add_polygon([(cx, cy - half), (cx + half, cy), (cx, cy + half), (cx - half, cy)])


@register_primitive
class StarBurstPrimitive(BasePrimitive):
    """Nested multi-point stars.

    Regions: ``1 + complexity // 2`` stars and a center circle. Stars have
    ``4 + complexity`` points and a seeded inner/outer radius ratio unless
    ``points`` or ``inner_ratio`` are given.
    """

    name = "star_burst"
    description = "Layered multi-point stars"

    def __init__(self, points: int | None = None, inner_ratio: float | None = None) -> None:
        """Initialize star options.

        Args:
            points: Fixed point count (>= 3), or None to scale with complexity.
            inner_ratio: Fixed inner/outer radius ratio in (0, 1), or None
                for a seeded ratio.

        Raises:
            InvalidArgument: If an option is out of range.
        """
        if points is not None and points < 3:
            raise InvalidArgument(f"A star needs at least 3 points, got {points}")
        if inner_ratio is not None and not 0 < inner_ratio < 1:
            raise InvalidArgument(f"Inner ratio must be in (0, 1), got {inner_ratio}")
        self.points = points
        self.inner_ratio = inner_ratio

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        drawn_ratio = params.rng.uniform(0.35, 0.55)
        ratio = self.inner_ratio if self.inner_ratio is not None else drawn_ratio
        points = self.points if self.points is not None else 4 + params.complexity

        layers = 1 + params.complexity // 2
        outer = radius
        for j in range(layers):
            outer = radius * (1 - j / (layers + 1))
            offset = -math.pi / 2 + (math.pi / points if j % 2 else 0.0)
            vertices = []
            for i in range(points * 2):
                r = outer if i % 2 == 0 else outer * ratio
                angle = offset + i * math.pi / points
                vertices.append((cx + r * math.cos(angle), cy + r * math.sin(angle)))
            canvas.add_polygon(vertices)

        canvas.add_circle(cx, cy, outer * ratio * 0.6)


@register_primitive
class PetalRosettePrimitive(BasePrimitive):
    """Elliptical petals radiating from the center.

    Regions: ``1 + complexity // 3`` layers of ``6 + complexity`` petals and
    a center circle. Inner layers shrink and shift by half a petal.
    """

    name = "petal_rosette"
    description = "Rosette of elliptical petals"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        slimness = params.rng.uniform(0.3, 0.45)

        layers = 1 + params.complexity // 3
        petals = 6 + params.complexity
        scale = 1.0
        for j in range(layers):
            scale = 1 - j * 0.35 / layers
            rx = radius * 0.45 * scale
            ry = rx * slimness
            offset = math.pi / petals if j % 2 else 0.0
            for i in range(petals):
                angle = offset + i * 2 * math.pi / petals
                pcx = cx + rx * math.cos(angle)
                pcy = cy + rx * math.sin(angle)
                canvas.add_ellipse(pcx, pcy, rx, ry, rotation=angle)

        canvas.add_circle(cx, cy, radius * 0.15 * scale)


@register_primitive
class SpiralArmsPrimitive(BasePrimitive):
    """Tapered arms sweeping outward along a spiral.

    Method:
    1. Seed the total twist and the turning direction
    2. Sample the leading edge r(t), theta(t) from the hub to the rim
    3. Trail it by a tapering angular width and close the arm

    Regions: a background circle, ``3 + complexity`` arms and a hub circle.
    Each edge uses ``8 + 2 * complexity`` samples.
    """

    name = "spiral_arms"
    description = "Spiral arms around a hub"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        twist = params.rng.uniform(0.6, 1.2) * math.pi
        direction = 1 if params.rng.random() > 0.5 else -1

        canvas.add_circle(cx, cy, radius)

        arms = 3 + params.complexity
        hub = radius * 0.2
        width = 2 * math.pi / arms * 0.55
        t = np.linspace(0.0, 1.0, 8 + 2 * params.complexity)
        r = hub + (radius * 0.95 - hub) * t
        sweep = direction * twist * t
        trail = direction * width * (1 - 0.6 * t)

        for k in range(arms):
            base = k * 2 * math.pi / arms
            lead = base + sweep
            xs = np.concatenate([cx + r * np.cos(lead), (cx + r * np.cos(lead - trail))[::-1]])
            ys = np.concatenate([cy + r * np.sin(lead), (cy + r * np.sin(lead - trail))[::-1]])
            canvas.add_polygon(list(zip(xs.tolist(), ys.tolist())))

        canvas.add_circle(cx, cy, hub * 0.9)


@register_primitive
class PieWedgesPrimitive(BasePrimitive):
    """Pie slices cut from the center, optionally in several rings.

    Regions: ``1 + complexity // 3`` rings of ``4 + 2 * complexity`` wedges
    and a center circle.
    """

    name = "pie_wedges"
    description = "Radial pie segments"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        wedges = 4 + 2 * params.complexity
        step = 2 * math.pi / wedges
        offset = params.rng.random() * step

        rings = 1 + params.complexity // 3
        for j in range(rings):
            r = radius * (1 - j * 0.6 / rings)
            start = offset + (step / 2 if j % 2 else 0.0)
            for i in range(wedges):
                canvas.add_path(wedge_path(cx, cy, r, start + i * step, start + (i + 1) * step))

        canvas.add_circle(cx, cy, radius * 0.15)


@register_primitive
class CrossMotifPrimitive(BasePrimitive):
    """Nested plus shapes alternating straight and diagonal.

    Regions: a background circle, ``1 + complexity`` crosses and a center
    square.
    """

    name = "cross_motif"
    description = "Nested plus/cross motifs"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        tilt = params.rng.uniform(0, math.pi / 8)

        canvas.add_circle(cx, cy, radius)

        crosses = 1 + params.complexity
        arm = width = rotation = 0.0
        for i in range(crosses):
            arm = radius * 0.9 * (1 - i / (crosses + 1))
            width = arm * 0.3
            rotation = tilt + (math.pi / 4 if i % 2 else 0.0)
            outline = [
                (-width, -arm), (width, -arm), (width, -width), (arm, -width),
                (arm, width), (width, width), (width, arm), (-width, arm),
                (-width, width), (-arm, width), (-arm, -width), (-width, -width),
            ]
            canvas.add_polygon(_rotate(outline, cx, cy, rotation))

        half = width * 0.8
        square = [(-half, -half), (half, -half), (half, half), (-half, half)]
        canvas.add_polygon(_rotate(square, cx, cy, rotation))
