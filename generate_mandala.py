#!/usr/bin/env python3
"""CLI script to generate mandalas for the memory trainer.

Usage:
    python generate_mandala.py [output_dir] [options]

Examples:
    python generate_mandala.py mandalas_out/round1 --seed 42
    python generate_mandala.py mandalas_out/hard --difficulty advanced --colors 5
    python generate_mandala.py mandalas_out/mixed --palette Random --shuffle
    python generate_mandala.py --list-primitives
"""

import argparse
import sys
from pathlib import Path

from mandalas import DIFFICULTY_POLICIES, InvalidArgument, PRIMITIVES, create_mandala
from palettes import PALETTE_NAMES
from settings import (
    COLOR_OPTIONS,
    DIFFICULTY_NAMES,
    SCALE_PRESETS,
    MandalaSettings,
    load_settings,
)


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Generate mandalas for the memory trainer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Difficulty tiers:
  beginner      - rings, squares, triangles, diamonds (complexity 1-2)
  intermediate  - adds stars, hexagons, crosses, wedges (complexity 2-4)
  advanced      - adds petals, spirals, waves (complexity 3-6)
""",
    )

    parser.add_argument(
        "output_dir",
        type=Path,
        nargs="?",
        help="Output directory for mandala files",
    )
    parser.add_argument(
        "--settings",
        type=Path,
        default=None,
        help="Settings JSON to start from (options below override it)",
    )
    parser.add_argument(
        "--seed",
        default=None,
        help="Seed string for reproducibility (default: current timestamp)",
    )
    parser.add_argument(
        "--difficulty",
        choices=DIFFICULTY_NAMES,
        default=None,
        help="Difficulty tier (default: beginner)",
    )
    parser.add_argument(
        "--palette",
        choices=["Random"] + PALETTE_NAMES,
        default=None,
        help="Palette name (default: Primary)",
    )
    parser.add_argument(
        "--colors",
        type=int,
        choices=COLOR_OPTIONS,
        default=None,
        help="Number of palette colors (default: 3)",
    )
    parser.add_argument(
        "--size",
        choices=list(SCALE_PRESETS.keys()),
        default=None,
        help="Canvas scale (default: Medium)",
    )
    parser.add_argument(
        "--shuffle",
        action="store_true",
        help="Shuffle the palette with the seed",
    )
    parser.add_argument(
        "--list-primitives",
        action="store_true",
        help="List pattern primitives per difficulty and exit",
    )
    return parser


def list_primitives() -> None:
    """Print the registered primitives and the tiers that unlock them."""
    for name, cls in PRIMITIVES.items():
        tiers = [
            tier.value
            for tier, policy in DIFFICULTY_POLICIES.items()
            if name in policy.eligible_primitives
        ]
        print(f"  {name:<20} {cls.description:<45} {', '.join(tiers) or '-'}")


def settings_from_args(args: argparse.Namespace) -> MandalaSettings:
    """Merge a settings file (if any) with command-line overrides."""
    settings = MandalaSettings()
    if args.settings is not None:
        loaded = load_settings(args.settings)
        if loaded is None:
            print(f"Using default settings instead of {args.settings}")
        else:
            settings = loaded

    if args.seed is not None:
        settings.seed = args.seed
    if args.difficulty is not None:
        settings.difficulty = args.difficulty
    if args.palette is not None:
        settings.palette_name = args.palette
    if args.colors is not None:
        settings.num_colors = args.colors
    if args.size is not None:
        settings.scale = args.size
    if args.shuffle:
        settings.shuffle_palette = True
    return settings


def main(argv: list[str] | None = None) -> int:
    """Main entry point for mandala generation CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_primitives:
        list_primitives()
        return 0
    if args.output_dir is None:
        parser.error("output_dir is required")

    settings = settings_from_args(args)

    try:
        params = settings.to_generation_params()
        print(f"Generating {params.difficulty} mandala (seed {params.seed})...")
        result = create_mandala(params, args.output_dir)
    except InvalidArgument as e:
        print(f"Failed to generate mandala: {e}", file=sys.stderr)
        return 1

    print(f"\nMandala generated successfully!")
    print(f"  Seed: {params.seed}")
    print(f"  Difficulty: {params.difficulty}")
    print(f"  Primitive: {result.primitive}")
    print(f"  Regions: {len(result.regions)}")
    print(f"  Colors: {', '.join(result.palette)}")
    print(f"  Output: {args.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
