"""Scoring a recolored outline against the original region colors."""

from dataclasses import dataclass, field
from typing import Mapping, Sequence

from .base import Region
from .errors import InvalidArgument


@dataclass(frozen=True)
class ScoreReport:
    """Result of comparing a recoloring with the original."""

    correct: int
    total: int
    mistakes: tuple[str, ...] = field(default=())  # Region ids colored wrong or left blank

    @property
    def accuracy(self) -> float:
        """Fraction of regions colored correctly (1.0 for an empty mandala)."""
        if self.total == 0:
            return 1.0
        return self.correct / self.total


def _normalize(color: str) -> str:
    return color.strip().lower()


def score_recoloring(regions: Sequence[Region], answers: Mapping[str, str]) -> ScoreReport:
    """Score a user's recoloring.

    Args:
        regions: Regions of the generated mandala.
        answers: Mapping of region id -> color chosen by the user. Regions
            missing from the mapping count as mistakes.

    Returns:
        ScoreReport with per-region mistakes in draw order.

    Raises:
        InvalidArgument: If answers names a region id that does not exist.
    """
    known = {region.id for region in regions}
    unknown = sorted(set(answers) - known)
    if unknown:
        raise InvalidArgument(f"Unknown region ids: {', '.join(unknown)}")

    mistakes = []
    for region in regions:
        answer = answers.get(region.id)
        if answer is None or _normalize(answer) != _normalize(region.color):
            mistakes.append(region.id)

    return ScoreReport(
        correct=len(regions) - len(mistakes),
        total=len(regions),
        mistakes=tuple(mistakes),
    )
