"""Mandala export: SVG images, region metadata and the region id map."""

import json
from pathlib import Path

import numpy as np

from .composer import GenerationParams, GenerationResult, compose
from .raster import rasterize_regions, region_areas, save_region_map

EXPORT_VERSION = 1


def build_mandala_json(
    result: GenerationResult,
    params: GenerationParams | None = None,
    region_map: np.ndarray | None = None,
) -> dict:
    """Build the mandala.json payload.

    Args:
        result: Generated mandala.
        params: Parameters it was generated from, recorded for
            reproducibility when given.
        region_map: Precomputed region index map; rasterized when omitted.

    Returns:
        JSON-serializable dictionary.
    """
    if region_map is None:
        region_map = rasterize_regions(result.regions, result.colored_image.width)
    areas = region_areas(region_map, len(result.regions))

    generator: dict = {
        "primitive": result.primitive,
        "complexity": result.complexity,
    }
    if params is not None:
        generator["seed"] = params.seed
        generator["difficulty"] = getattr(params.difficulty, "value", params.difficulty)
        generator["shuffle_palette"] = params.shuffle_palette

    return {
        "version": EXPORT_VERSION,
        "width": result.colored_image.width,
        "height": result.colored_image.height,
        "palette": list(result.palette),
        "regions": [
            {
                "id": region.id,
                "color": region.color,
                "path": region.path_data,
                "area": area,
            }
            for region, area in zip(result.regions, areas)
        ],
        "generator": generator,
    }


def export_mandala(
    result: GenerationResult,
    output_dir: Path,
    params: GenerationParams | None = None,
) -> None:
    """Export a generated mandala.

    Creates:
    - colored.svg: Filled design shown to the player
    - outline.svg: Stroke-only version to recolor
    - mandala.json: Palette, regions and generator metadata
    - region_ids.png: Region index map encoded as RGB

    Args:
        result: Generated mandala to export.
        output_dir: Directory to write files to.
        params: Generation parameters to record in mandala.json.
    """
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    result.colored_image.save(output_dir / "colored.svg")
    result.outline_image.save(output_dir / "outline.svg")

    region_map = rasterize_regions(result.regions, result.colored_image.width)
    with open(output_dir / "mandala.json", "w", encoding="utf-8") as f:
        json.dump(build_mandala_json(result, params, region_map), f, indent=2)

    save_region_map(region_map, output_dir / "region_ids.png")

    print(f"Exported mandala to {output_dir}")
    print(f"  Primitive: {result.primitive} (complexity {result.complexity})")
    print(f"  Size: {result.colored_image.width}x{result.colored_image.height}")
    print(f"  Regions: {len(result.regions)}")


def create_mandala(params: GenerationParams, output_dir: Path) -> GenerationResult:
    """Generate and export a mandala in one step.

    Args:
        params: Generation parameters.
        output_dir: Directory to write files to.

    Returns:
        The generated mandala.
    """
    result = compose(params)
    export_mandala(result, output_dir, params)
    return result
