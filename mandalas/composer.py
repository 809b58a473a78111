"""Mandala composer: one seeded generation from parameters to images."""

import math
from dataclasses import dataclass, field
from typing import Sequence

from . import radial, rings  # noqa: F401  registers built-in primitives
from .base import PatternParams, Region
from .difficulty import DIFFICULTY_POLICIES, Difficulty, DifficultyPolicy, resolve
from .document import MandalaDocument
from .errors import InvalidArgument
from .registry import PRIMITIVES
from .rng import SeededRandom


@dataclass(frozen=True)
class GenerationParams:
    """Inputs of one generation call."""

    seed: str
    canvas_size: float
    difficulty: Difficulty | str
    palette: Sequence[str]
    shuffle_palette: bool = False


@dataclass(frozen=True)
class GenerationResult:
    """Output of one generation call.

    ``palette`` is the effective palette the regions were colored from
    (shuffled when palette shuffling was requested).
    """

    regions: tuple[Region, ...]
    colored_image: MandalaDocument
    outline_image: MandalaDocument
    primitive: str
    complexity: int
    palette: tuple[str, ...] = field(default=())


class MandalaComposer:
    """Orchestrates a single mandala generation.

    Method:
    1. Validate parameters and seed a fresh random source
    2. Resolve the difficulty tier to eligible primitives and complexity
    3. Choose a primitive and draw a complexity value
    4. Optionally shuffle the palette with the same random source
    5. Run the primitive centered on the canvas
    6. Build the colored document and derive the outline from it
    """

    def __init__(
        self,
        policies: dict[Difficulty, DifficultyPolicy] | None = None,
        registry: dict | None = None,
    ) -> None:
        """Initialize composer configuration.

        Args:
            policies: Difficulty table; defaults to DIFFICULTY_POLICIES.
            registry: Primitive classes by name; defaults to PRIMITIVES.
        """
        self.policies = DIFFICULTY_POLICIES if policies is None else policies
        self.registry = PRIMITIVES if registry is None else registry

    def compose(self, params: GenerationParams) -> GenerationResult:
        """Generate one mandala.

        Args:
            params: Seed, canvas size, difficulty and palette.

        Returns:
            GenerationResult with regions and both documents.

        Raises:
            InvalidArgument: On a non-finite or non-positive canvas size, an
                empty palette, an unknown difficulty or an empty/unknown
                primitive set.
        """
        if not (math.isfinite(params.canvas_size) and params.canvas_size > 0):
            raise InvalidArgument(
                f"Canvas size must be finite and positive, got {params.canvas_size}"
            )
        if len(params.palette) == 0:
            raise InvalidArgument("Palette must contain at least one color")

        rng = SeededRandom(params.seed)
        policy = resolve(params.difficulty, self.policies)
        if not policy.eligible_primitives:
            raise InvalidArgument(f"No primitives eligible for difficulty: {params.difficulty}")

        name = rng.choice(policy.eligible_primitives)
        if name not in self.registry:
            raise InvalidArgument(f"Unknown primitive: {name}")
        complexity = rng.randint(*policy.complexity_range)

        palette = list(params.palette)
        if params.shuffle_palette:
            palette = rng.shuffled(palette)

        center = params.canvas_size / 2
        primitive = self.registry[name]()
        regions, nodes, _ = primitive(
            PatternParams(
                center=(center, center),
                size=params.canvas_size,
                colors=palette,
                rng=rng,
                complexity=complexity,
                start_id=0,
            )
        )

        colored = MandalaDocument.colored(params.canvas_size, nodes)
        return GenerationResult(
            regions=tuple(regions),
            colored_image=colored,
            outline_image=colored.to_outline(),
            primitive=name,
            complexity=complexity,
            palette=tuple(palette),
        )


def compose(params: GenerationParams) -> GenerationResult:
    """Generate one mandala with the default configuration."""
    return MandalaComposer().compose(params)
