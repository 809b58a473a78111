"""Renderable mandala documents and the colored-to-outline transform."""

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Sequence

import svgwrite

from .base import NEUTRAL_STROKE, STROKE_WIDTH, ShapeNode

# Stroke used for the outline-only variant
OUTLINE_STROKE = "#000"
NO_FILL = "none"


@dataclass(frozen=True)
class MandalaDocument:
    """An ordered list of shape nodes on a square canvas."""

    width: float
    height: float
    nodes: tuple[ShapeNode, ...]

    @classmethod
    def colored(
        cls,
        size: float,
        nodes: Sequence[ShapeNode],
        stroke: str = NEUTRAL_STROKE,
        stroke_width: float = STROKE_WIDTH,
    ) -> "MandalaDocument":
        """Build the colored document with a uniform stroke.

        Args:
            size: Canvas width and height.
            nodes: Shape nodes in paint order, keeping their fills.
            stroke: Stroke color applied to every node.
            stroke_width: Stroke width applied to every node.
        """
        styled = tuple(replace(n, stroke=stroke, stroke_width=stroke_width) for n in nodes)
        return cls(width=size, height=size, nodes=styled)

    @property
    def ids(self) -> list[str]:
        return [node.id for node in self.nodes]

    def to_outline(
        self,
        outline_stroke: str = OUTLINE_STROKE,
        neutral_stroke: str = NEUTRAL_STROKE,
    ) -> "MandalaDocument":
        """Derive the outline-only variant of this document.

        Every fill becomes "none" and every stroke equal to ``neutral_stroke``
        becomes ``outline_stroke``. Ids and geometry are carried over as-is.
        """
        nodes = tuple(
            replace(
                node,
                fill=NO_FILL,
                stroke=outline_stroke if node.stroke == neutral_stroke else node.stroke,
            )
            for node in self.nodes
        )
        return MandalaDocument(width=self.width, height=self.height, nodes=nodes)

    def to_drawing(self) -> svgwrite.Drawing:
        """Build an svgwrite drawing of the document."""
        dwg = svgwrite.Drawing(
            size=(self.width, self.height),
            viewBox=f"0 0 {self.width} {self.height}",
            debug=False,
        )
        for node in self.nodes:
            dwg.add(_node_element(dwg, node))
        return dwg

    def to_svg(self) -> str:
        """Serialize the document as SVG markup."""
        return self.to_drawing().tostring()

    def save(self, path: Path) -> None:
        """Write the document as an SVG file."""
        with open(path, "w", encoding="utf-8") as f:
            f.write(self.to_svg())


def _node_element(dwg: svgwrite.Drawing, node: ShapeNode):
    """Create the svgwrite element for one node."""
    style = {
        "id": node.id,
        "fill": node.fill,
        "stroke": node.stroke,
        "stroke_width": node.stroke_width,
    }
    geometry = node.attributes()

    if node.kind == "circle":
        return dwg.circle(center=(geometry["cx"], geometry["cy"]), r=geometry["r"], **style)
    if node.kind == "ellipse":
        return dwg.ellipse(
            center=(geometry["cx"], geometry["cy"]),
            r=(geometry["rx"], geometry["ry"]),
            **style,
        )
    if node.kind == "polygon":
        return dwg.polygon(points=list(geometry["points"]), **style)
    if node.kind == "path":
        return dwg.path(d=geometry["d"], **style)
    raise ValueError(f"Unknown shape kind: {node.kind}")
