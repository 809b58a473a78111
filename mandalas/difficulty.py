"""Difficulty tiers and the primitives and complexity they unlock."""

from dataclasses import dataclass
from enum import Enum

from .errors import InvalidArgument


class Difficulty(str, Enum):
    """Difficulty tiers offered to the player."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


@dataclass(frozen=True)
class DifficultyPolicy:
    """Complexity range and eligible primitives for one tier."""

    complexity_range: tuple[int, int]
    eligible_primitives: tuple[str, ...]


BEGINNER_PRIMITIVES = (
    "concentric_rings",
    "concentric_squares",
    "triangle_layers",
    "diamond_rings",
)

INTERMEDIATE_PRIMITIVES = BEGINNER_PRIMITIVES + (
    "star_burst",
    "hexagon_rings",
    "cross_motif",
    "pie_wedges",
)

ADVANCED_PRIMITIVES = INTERMEDIATE_PRIMITIVES + (
    "petal_rosette",
    "spiral_arms",
    "wave_rings",
)

DIFFICULTY_POLICIES: dict[Difficulty, DifficultyPolicy] = {
    Difficulty.BEGINNER: DifficultyPolicy((1, 2), BEGINNER_PRIMITIVES),
    Difficulty.INTERMEDIATE: DifficultyPolicy((2, 4), INTERMEDIATE_PRIMITIVES),
    Difficulty.ADVANCED: DifficultyPolicy((3, 6), ADVANCED_PRIMITIVES),
}


def to_difficulty(value: "Difficulty | str") -> Difficulty:
    """Coerce a tier name to a Difficulty.

    Raises:
        InvalidArgument: If value is not a known tier.
    """
    try:
        return Difficulty(value)
    except ValueError:
        names = ", ".join(d.value for d in Difficulty)
        raise InvalidArgument(f"Unknown difficulty: {value!r}. Available: {names}") from None


def resolve(
    difficulty: "Difficulty | str",
    policies: dict[Difficulty, DifficultyPolicy] | None = None,
) -> DifficultyPolicy:
    """Look up the policy for a tier.

    Args:
        difficulty: Tier or tier name.
        policies: Alternative policy table; defaults to DIFFICULTY_POLICIES.

    Returns:
        The tier's DifficultyPolicy.

    Raises:
        InvalidArgument: If the tier is unknown or missing from the table.
    """
    tier = to_difficulty(difficulty)
    table = DIFFICULTY_POLICIES if policies is None else policies
    if tier not in table:
        raise InvalidArgument(f"No policy configured for difficulty: {tier.value}")
    return table[tier]
