"""Curated color palettes for the mandala memory trainer.

Colors are hex strings, ordered so that any prefix forms a clearly
distinguishable subset for small color counts.
"""

from collections import OrderedDict

from mandalas import InvalidArgument, SeededRandom

PALETTES: OrderedDict[str, list[str]] = OrderedDict()

PALETTES["Primary"] = ["#E53935", "#1E88E5", "#FDD835", "#43A047", "#8E24AA"]

PALETTES["Bold"] = ["#FF5722", "#03A9F4", "#FFC107", "#4CAF50", "#673AB7", "#FFEB3B"]

PALETTES["Pastel"] = ["#F48FB1", "#81D4FA", "#FFF59D", "#A5D6A7", "#CE93D8"]

PALETTES["HighContrast"] = ["#D32F2F", "#1976D2", "#FBC02D", "#388E3C", "#000000", "#FFFFFF"]

PALETTES["Jewel"] = [
    "#0F52BA",  # Sapphire
    "#50C878",  # Emerald
    "#E0115F",  # Ruby
    "#9966CC",  # Amethyst
    "#FFBF00",  # Amber
    "#00A8A4",  # Teal jade
]

PALETTES["Ocean"] = [
    "#0077BE",  # Ocean blue
    "#00B4AB",  # Teal
    "#7FC7AF",  # Seafoam
    "#FF7F50",  # Coral
    "#EDC9AF",  # Sand
    "#004D71",  # Deep sea
]

PALETTE_NAMES: list[str] = list(PALETTES.keys())


def get_palette(name: str, num_colors: int, seed: str = "") -> list[str]:
    """Return the first num_colors colors from the named palette.

    Args:
        name: Palette name, or "Random" to pick one from the seed.
        num_colors: How many colors to return (capped at the palette size).
        seed: Seed used to resolve "Random"; the same seed picks the same
            palette.

    Returns:
        List of hex color strings.

    Raises:
        InvalidArgument: If name is unknown or num_colors < 1.
    """
    if num_colors < 1:
        raise InvalidArgument(f"num_colors must be at least 1, got {num_colors}")

    if name == "Random":
        name = SeededRandom(seed).choice(PALETTE_NAMES)

    if name not in PALETTES:
        raise InvalidArgument(f"Unknown palette: {name!r}. Available: {PALETTE_NAMES}")

    return PALETTES[name][:num_colors]
