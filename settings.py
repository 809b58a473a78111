"""Settings management for the mandala memory trainer.

Holds the generation settings supplied by the game flow and persists them
as a small JSON file.
"""

import json
import time
from dataclasses import asdict, dataclass, fields
from pathlib import Path

from mandalas import Difficulty, GenerationParams, InvalidArgument
from palettes import get_palette


# Scale presets: name -> canvas size in pixels
SCALE_PRESETS = {
    "Small": 300,
    "Medium": 400,
    "Large": 600,
    "Extra Large": 800,
}

# Color count options
COLOR_OPTIONS = [2, 3, 4, 5, 6]

DIFFICULTY_NAMES = [d.value for d in Difficulty]

SETTINGS_VERSION = 1

# Expected JSON types of persisted fields
FIELD_TYPES = {
    "difficulty": str,
    "palette_name": str,
    "num_colors": int,
    "scale": str,
    "seed": str,
    "shuffle_palette": bool,
}


def new_round_seed() -> str:
    """Return a fresh timestamp-derived seed for a new round."""
    return str(int(time.time() * 1000))


@dataclass
class MandalaSettings:
    """Settings for mandala generation."""

    difficulty: str = "beginner"
    palette_name: str = "Primary"
    num_colors: int = 3
    scale: str = "Medium"
    seed: str | None = None  # None = new seed every round
    shuffle_palette: bool = False

    def get_canvas_size(self) -> int:
        """Get canvas size based on scale."""
        if self.scale not in SCALE_PRESETS:
            raise InvalidArgument(f"Unknown scale: {self.scale!r}")
        return SCALE_PRESETS[self.scale]

    def get_palette(self, seed: str = "") -> list[str]:
        """Resolve the configured palette to hex colors."""
        return get_palette(self.palette_name, self.num_colors, seed)

    def to_generation_params(self) -> GenerationParams:
        """Convert settings to composer parameters.

        A missing seed is replaced by a new round seed; the same seed also
        resolves a "Random" palette name.
        """
        seed = self.seed if self.seed is not None else new_round_seed()
        return GenerationParams(
            seed=seed,
            canvas_size=self.get_canvas_size(),
            difficulty=self.difficulty,
            palette=self.get_palette(seed),
            shuffle_palette=self.shuffle_palette,
        )


def save_settings(settings: MandalaSettings, path: Path) -> bool:
    """Save settings to a JSON file.

    Args:
        settings: Settings to write.
        path: Destination file.

    Returns:
        True if save succeeded, False otherwise.
    """
    data = {"version": SETTINGS_VERSION, **asdict(settings)}
    try:
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
        return True
    except OSError as e:
        print(f"Failed to save settings: {e}")
        return False


def load_settings(path: Path) -> MandalaSettings | None:
    """Load settings from a JSON file.

    Unknown keys are ignored and missing keys keep their defaults. A numeric
    seed is read as its decimal string.

    Args:
        path: Settings file written by save_settings.

    Returns:
        MandalaSettings if load succeeded, None if the file is missing,
        unreadable, from another version or holds values of the wrong type.
    """
    path = Path(path)
    if not path.exists():
        return None

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        print(f"Failed to load settings: {e}")
        return None

    if not isinstance(data, dict):
        print(f"Invalid settings file: expected an object, got {type(data).__name__}")
        return None

    version = data.get("version", 0)
    if version != SETTINGS_VERSION:
        print(f"Settings version mismatch: {version} != {SETTINGS_VERSION}")
        return None

    known = {f.name for f in fields(MandalaSettings)}
    values = {k: v for k, v in data.items() if k in known}

    seed = values.get("seed")
    if isinstance(seed, int) and not isinstance(seed, bool):
        values["seed"] = str(seed)

    for name, value in values.items():
        if not _has_type(name, value):
            print(f"Invalid settings value for {name}: {value!r}")
            return None

    return MandalaSettings(**values)


def _has_type(name: str, value) -> bool:
    if name == "seed" and value is None:
        return True
    expected = FIELD_TYPES[name]
    if expected is int and isinstance(value, bool):
        return False
    return isinstance(value, expected)
