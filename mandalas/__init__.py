"""Mandala generators for the memory trainer.

This module provides seeded pattern primitives and the composer that turns
one seed into a colored mandala, its outline and the list of colorable
regions.

Available primitives:
- concentric_rings, concentric_squares, hexagon_rings, wave_rings (rings.py)
- triangle_layers, diamond_rings, star_burst, petal_rosette, spiral_arms,
  pie_wedges, cross_motif (radial.py)
"""

from .errors import InvalidArgument
from .rng import SeededRandom, hash_seed
from .base import BasePrimitive, PatternCanvas, PatternParams, Region, ShapeNode
from .registry import PRIMITIVES, get_primitive, primitive_names, register_primitive
from .rings import (
    ConcentricRingsPrimitive,
    ConcentricSquaresPrimitive,
    HexagonRingsPrimitive,
    WaveRingsPrimitive,
)
from .radial import (
    CrossMotifPrimitive,
    DiamondRingsPrimitive,
    PetalRosettePrimitive,
    PieWedgesPrimitive,
    SpiralArmsPrimitive,
    StarBurstPrimitive,
    TriangleLayersPrimitive,
)
from .difficulty import DIFFICULTY_POLICIES, Difficulty, DifficultyPolicy, resolve
from .document import MandalaDocument, NO_FILL, OUTLINE_STROKE
from .composer import GenerationParams, GenerationResult, MandalaComposer, compose
from .raster import rasterize_regions, region_at, region_areas
from .scoring import ScoreReport, score_recoloring
from .export import build_mandala_json, create_mandala, export_mandala

__all__ = [
    # Errors and randomness
    "InvalidArgument",
    "SeededRandom",
    "hash_seed",
    # Base classes
    "BasePrimitive",
    "PatternCanvas",
    "PatternParams",
    "Region",
    "ShapeNode",
    # Registry
    "PRIMITIVES",
    "get_primitive",
    "primitive_names",
    "register_primitive",
    # Primitives
    "ConcentricRingsPrimitive",
    "ConcentricSquaresPrimitive",
    "HexagonRingsPrimitive",
    "WaveRingsPrimitive",
    "CrossMotifPrimitive",
    "DiamondRingsPrimitive",
    "PetalRosettePrimitive",
    "PieWedgesPrimitive",
    "SpiralArmsPrimitive",
    "StarBurstPrimitive",
    "TriangleLayersPrimitive",
    # Difficulty
    "DIFFICULTY_POLICIES",
    "Difficulty",
    "DifficultyPolicy",
    "resolve",
    # Composition and documents
    "MandalaDocument",
    "NO_FILL",
    "OUTLINE_STROKE",
    "GenerationParams",
    "GenerationResult",
    "MandalaComposer",
    "compose",
    # Region maps, scoring and export
    "rasterize_regions",
    "region_at",
    "region_areas",
    "ScoreReport",
    "score_recoloring",
    "build_mandala_json",
    "create_mandala",
    "export_mandala",
]
