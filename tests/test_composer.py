"""
Tests for the mandala composer.
"""

import math
import xml.etree.ElementTree as ET
from dataclasses import replace

import pytest

from mandalas import (
    BasePrimitive,
    Difficulty,
    DifficultyPolicy,
    GenerationParams,
    InvalidArgument,
    MandalaComposer,
    compose,
)

GEOMETRY_ATTRS = ("cx", "cy", "r", "rx", "ry", "points", "d")


def parse_shapes(svg: str) -> list[tuple[str, dict]]:
    """Return (tag, attributes) per shape element, namespace stripped."""
    root = ET.fromstring(svg)
    shapes = []
    for element in root.iter():
        tag = element.tag.rsplit("}", 1)[-1]
        if tag in ("circle", "ellipse", "polygon", "path"):
            shapes.append((tag, dict(element.attrib)))
    return shapes


class TestDeterminism:
    """Same parameters, same mandala."""

    def test_identical_svg_output(self, beginner_params):
        first = compose(beginner_params)
        second = compose(beginner_params)
        assert first.colored_image.to_svg() == second.colored_image.to_svg()
        assert first.outline_image.to_svg() == second.outline_image.to_svg()
        assert first.regions == second.regions

    @pytest.mark.parametrize("difficulty", ["beginner", "intermediate", "advanced"])
    def test_every_tier_is_deterministic(self, difficulty, five_colors):
        params = GenerationParams("round-3", 600, difficulty, five_colors)
        assert compose(params) == compose(params)

    def test_different_seeds_usually_differ(self, five_colors):
        outputs = {
            compose(GenerationParams(str(seed), 400, "advanced", five_colors)).colored_image.to_svg()
            for seed in range(10)
        }
        assert len(outputs) > 1


class TestBeginnerScenario:
    """Seed "42", beginner, two colors on 400px."""

    def test_primitive_and_complexity(self, beginner_params):
        result = compose(beginner_params)
        assert result.primitive == "concentric_squares"
        assert result.complexity == 2

    def test_regions(self, beginner_params):
        result = compose(beginner_params)
        assert [r.id for r in result.regions] == ["region-0", "region-1", "region-2", "region-3"]
        assert [r.color for r in result.regions] == ["#FF0000", "#00FF00", "#FF0000", "#00FF00"]

    def test_outline_has_no_fill(self, beginner_params):
        result = compose(beginner_params)
        shapes = parse_shapes(result.outline_image.to_svg())
        assert len(shapes) == 4
        for _, attrs in shapes:
            assert attrs["fill"] == "none"
            assert attrs["stroke"] == "#000"


class TestOutlineIdentity:
    """Outline and colored documents share geometry and ids."""

    @pytest.mark.parametrize("seed", ["a", "b", "c", "1700000000000"])
    def test_same_elements_modulo_style(self, seed, five_colors):
        result = compose(GenerationParams(seed, 400, "advanced", five_colors))
        colored = parse_shapes(result.colored_image.to_svg())
        outline = parse_shapes(result.outline_image.to_svg())
        assert [tag for tag, _ in colored] == [tag for tag, _ in outline]
        for (_, c_attrs), (_, o_attrs) in zip(colored, outline):
            assert c_attrs["id"] == o_attrs["id"]
            for name in GEOMETRY_ATTRS:
                assert c_attrs.get(name) == o_attrs.get(name)

    def test_ids_match_regions(self, five_colors):
        result = compose(GenerationParams("ids", 400, "intermediate", five_colors))
        region_ids = [r.id for r in result.regions]
        assert result.colored_image.ids == region_ids
        assert result.outline_image.ids == region_ids
        assert [a["id"] for _, a in parse_shapes(result.colored_image.to_svg())] == region_ids

    def test_colored_fills_follow_regions(self, five_colors):
        result = compose(GenerationParams("fills", 400, "advanced", five_colors))
        fills = [a["fill"] for _, a in parse_shapes(result.colored_image.to_svg())]
        assert fills == [r.color for r in result.regions]

    def test_result_nodes_are_hashable_and_unshared(self, beginner_params):
        result = compose(beginner_params)
        before = result.outline_image.to_svg()
        for colored, outline in zip(result.colored_image.nodes, result.outline_image.nodes):
            assert len({colored, outline}) == 2
            assert isinstance(colored.geometry, tuple)
            attrs = colored.attributes()
            attrs["points"] = ((0, 0), (1, 0), (1, 1))
        assert result.outline_image.to_svg() == before


class TestPalette:
    """Palette handling."""

    def test_palette_swap_keeps_geometry(self):
        warm = compose(GenerationParams("swap", 400, "intermediate", ["#FF0000", "#FFAA00"]))
        cool = compose(GenerationParams("swap", 400, "intermediate", ["#0000FF", "#00AAFF"]))
        assert warm.primitive == cool.primitive
        assert warm.complexity == cool.complexity
        assert [r.boundary for r in warm.regions] == [r.boundary for r in cool.regions]
        assert warm.outline_image.to_svg() == cool.outline_image.to_svg()
        assert [r.color for r in warm.regions] != [r.color for r in cool.regions]

    def test_swapped_palette_order_swaps_colors(self):
        colors_a = ["#A", "#B"]
        colors_b = ["#B", "#A"]
        a = compose(GenerationParams("swap", 400, "advanced", colors_a))
        b = compose(GenerationParams("swap", 400, "advanced", colors_b))
        assert [r.boundary for r in a.regions] == [r.boundary for r in b.regions]
        assert [r.id for r in a.regions] == [r.id for r in b.regions]
        for k, (region_a, region_b) in enumerate(zip(a.regions, b.regions)):
            assert region_a.color == colors_a[k % 2]
            assert region_b.color == colors_b[k % 2]
            assert region_b.color == colors_a[(k % 2) ^ 1]

    def test_unshuffled_palette_kept_in_order(self, five_colors):
        result = compose(GenerationParams("order", 400, "advanced", five_colors))
        assert result.palette == tuple(five_colors)
        for k, region in enumerate(result.regions):
            assert region.color == five_colors[k % len(five_colors)]

    def test_shuffled_palette_is_seeded_permutation(self, five_colors):
        params = GenerationParams("mix", 400, "advanced", five_colors, shuffle_palette=True)
        first = compose(params)
        second = compose(params)
        assert first.palette == second.palette
        assert sorted(first.palette) == sorted(five_colors)
        for k, region in enumerate(first.regions):
            assert region.color == first.palette[k % len(first.palette)]

    def test_single_color(self):
        result = compose(GenerationParams("mono", 400, "advanced", ["#336699"]))
        assert {r.color for r in result.regions} == {"#336699"}


class TestErrors:
    """Invalid parameters."""

    def test_non_positive_canvas(self, two_colors):
        with pytest.raises(InvalidArgument):
            compose(GenerationParams("x", 0, "beginner", two_colors))

    @pytest.mark.parametrize("size", [-5, math.nan, math.inf])
    def test_non_finite_or_negative_canvas(self, size, two_colors):
        with pytest.raises(InvalidArgument):
            compose(GenerationParams("x", size, "beginner", two_colors))

    def test_empty_palette(self):
        with pytest.raises(InvalidArgument):
            compose(GenerationParams("x", 400, "beginner", []))

    def test_unknown_difficulty(self, two_colors):
        with pytest.raises(InvalidArgument):
            compose(GenerationParams("x", 400, "expert", two_colors))

    def test_empty_eligible_set(self, two_colors):
        composer = MandalaComposer(policies={Difficulty.BEGINNER: DifficultyPolicy((1, 1), ())})
        with pytest.raises(InvalidArgument):
            composer.compose(GenerationParams("x", 400, "beginner", two_colors))

    def test_unregistered_primitive_in_policy(self, two_colors):
        composer = MandalaComposer(
            policies={Difficulty.BEGINNER: DifficultyPolicy((1, 1), ("no_such_pattern",))}
        )
        with pytest.raises(InvalidArgument):
            composer.compose(GenerationParams("x", 400, "beginner", two_colors))


class TestExtension:
    """Custom primitives and tiers."""

    def test_custom_registry_and_policy(self, two_colors):
        class Bullseye(BasePrimitive):
            name = "bullseye"

            def draw(self, params, canvas):
                cx, cy = params.center
                for k in range(1 + params.complexity):
                    canvas.add_circle(cx, cy, params.max_radius / (k + 1))

        composer = MandalaComposer(
            policies={Difficulty.BEGINNER: DifficultyPolicy((3, 3), ("bullseye",))},
            registry={"bullseye": Bullseye},
        )
        result = composer.compose(GenerationParams("custom", 200, "beginner", two_colors))
        assert result.primitive == "bullseye"
        assert result.complexity == 3
        assert len(result.regions) == 4
        assert result.colored_image.width == 200

    def test_params_are_immutable(self, beginner_params):
        with pytest.raises(AttributeError):
            beginner_params.seed = "other"
        assert replace(beginner_params, seed="other").seed == "other"
