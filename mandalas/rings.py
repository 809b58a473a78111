"""Concentric pattern primitives.

Shapes nested around the center, drawn from the outside in so each smaller
shape paints over the previous one.
"""

import math

import numpy as np

from .base import BasePrimitive, PatternCanvas, PatternParams
from .paths import regular_polygon_points
from .registry import register_primitive


@register_primitive
class ConcentricRingsPrimitive(BasePrimitive):
    """Nested circles shrinking evenly toward the center.

    Regions: ``1 + complexity`` rings, plus a center dot when the seeded coin
    comes up above 0.5.
    """

    name = "concentric_rings"
    description = "Nested circles"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        add_center = params.rng.random() > 0.5

        rings = 1 + params.complexity
        for i in range(rings):
            canvas.add_circle(cx, cy, radius * (1 - i / rings))

        if add_center:
            canvas.add_circle(cx, cy, radius / rings * 0.4)


@register_primitive
class ConcentricSquaresPrimitive(BasePrimitive):
    """Nested squares with a seeded common tilt.

    Regions: ``1 + complexity`` squares, plus a center circle from
    complexity 2 upward.
    """

    name = "concentric_squares"
    description = "Nested squares"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        tilt = params.rng.uniform(0, math.pi / 4)

        squares = 1 + params.complexity
        half_side = radius * 0.875
        for i in range(squares):
            half = half_side * (1 - i / squares)
            canvas.add_polygon(
                regular_polygon_points(cx, cy, half * math.sqrt(2), 4, math.pi / 4 + tilt)
            )

        if params.complexity >= 2:
            canvas.add_circle(cx, cy, half_side / squares * 0.6)


@register_primitive
class HexagonRingsPrimitive(BasePrimitive):
    """Nested hexagons alternating between flat and pointed orientation.

    Regions: one background (circle or square, by seeded coin),
    ``1 + complexity`` hexagons and a center circle.
    """

    name = "hexagon_rings"
    description = "Nested hexagons over a round or square backdrop"

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius

        if params.rng.random() > 0.5:
            canvas.add_circle(cx, cy, radius)
        else:
            canvas.add_polygon(
                regular_polygon_points(cx, cy, radius * 0.9 * math.sqrt(2), 4, math.pi / 4)
            )

        hexagons = 1 + params.complexity
        outer = radius * 0.85
        for i in range(hexagons):
            rotation = 0.0 if i % 2 == 0 else math.pi / 6
            r = outer * (1 - i / (hexagons + 1))
            canvas.add_polygon(regular_polygon_points(cx, cy, r, 6, rotation))

        canvas.add_circle(cx, cy, outer / (hexagons + 1) * 0.5)


@register_primitive
class WaveRingsPrimitive(BasePrimitive):
    """Sinusoidally modulated rings.

    Method:
    1. Pick one seeded amplitude shared by all rings
    2. Sample r(theta) = r_i * (1 + a * sin(k * theta + phase_i)) per ring
    3. Close each sampled contour as a polygon

    Regions: ``1 + complexity`` rings plus a center circle. The lobe count
    ``k`` is ``6 + 2 * (complexity // 2)``.
    """

    name = "wave_rings"
    description = "Rippled concentric rings"

    SAMPLES_PER_LOBE = 12

    def draw(self, params: PatternParams, canvas: PatternCanvas) -> None:
        cx, cy = params.center
        radius = params.max_radius
        amplitude = params.rng.uniform(0.05, 0.1)

        rings = 1 + params.complexity
        lobes = 6 + 2 * (params.complexity // 2)
        theta = np.linspace(0, 2 * math.pi, lobes * self.SAMPLES_PER_LOBE, endpoint=False)

        for i in range(rings):
            phase = params.rng.random() * 2 * math.pi
            base = radius * (1 - i / (rings + 1)) / (1 + amplitude)
            r = base * (1 + amplitude * np.sin(lobes * theta + phase))
            xs = cx + r * np.cos(theta)
            ys = cy + r * np.sin(theta)
            canvas.add_polygon(list(zip(xs.tolist(), ys.tolist())))

        canvas.add_circle(cx, cy, radius / (rings + 1) * 0.5 * (1 - amplitude))
