# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
SVG Renderer for word search puzzles.
Converts a generated puzzle grid to SVG, optionally highlighting the answers.
"""

import os
import sys
from dataclasses import dataclass
from typing import Optional, Set, Tuple
from xml.sax.saxutils import escape

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import PuzzleData
from wordsearch_generator import get_word_cells


@dataclass
class SVGConfig:
    """Configuration for SVG rendering."""
    cell_size: int = 32
    border_width: int = 2
    inner_border_width: int = 1

    # Colors
    background_color: str = "#FFFFFF"
    grid_color: str = "#000000"
    letter_color: str = "#000000"
    highlight_color: str = "#FFE08A"
    highlight_letter_color: str = "#7A4B00"

    # Fonts
    font_family: str = "Arial, Helvetica, sans-serif"
    letter_font_size: int = 18


class SVGRenderer:
    """Renders word search grids as SVG."""

    def __init__(self, config: Optional[SVGConfig] = None):
        self.config = config or SVGConfig()

    def render(
        self,
        puzzle: PuzzleData,
        title: Optional[str] = None,
        show_answers: bool = False
    ) -> str:
        """
        Render a standalone SVG of the puzzle grid.

        Args:
            puzzle: Generated puzzle
            title: Accessible title for the image
            show_answers: Whether to highlight the cells of every placed word

        Returns:
            SVG string
        """
        cfg = self.config

        grid_width = puzzle.size * cfg.cell_size
        total = grid_width + 2 * cfg.border_width

        svg_parts = []

        svg_parts.append(
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 0 {total} {total}" '
            f'width="{total}" height="{total}">'
        )

        # Title (for accessibility)
        svg_parts.append(f'  <title>{escape(title or "Word Search")}</title>')

        svg_parts.append('  <style>')
        svg_parts.append(self.style_rules())
        svg_parts.append('  </style>')

        svg_parts.append(
            f'  <rect x="0" y="0" width="{total}" height="{total}" '
            f'fill="{cfg.background_color}" />'
        )

        svg_parts.append(
            self.render_grid(puzzle, cfg.border_width, cfg.border_width, show_answers)
        )

        svg_parts.append('</svg>')

        return '\n'.join(svg_parts)

    def style_rules(self) -> str:
        """CSS rules for grid cells, shared with the page renderer."""
        cfg = self.config
        rules = [
            f'    .cell {{ fill: {cfg.background_color}; stroke: {cfg.grid_color}; '
            f'stroke-width: {cfg.inner_border_width}; }}',
            f'    .cell.found {{ fill: {cfg.highlight_color}; }}',
            f'    .letter {{ font-family: {cfg.font_family}; font-size: {cfg.letter_font_size}px; '
            f'fill: {cfg.letter_color}; text-anchor: middle; dominant-baseline: central; }}',
            f'    .letter.found {{ fill: {cfg.highlight_letter_color}; font-weight: bold; }}',
        ]
        return '\n'.join(rules)

    def render_grid(
        self,
        puzzle: PuzzleData,
        x: float,
        y: float,
        show_answers: bool = False
    ) -> str:
        """Render grid cells and letters with the top-left corner at (x, y)."""
        cfg = self.config
        grid_width = puzzle.size * cfg.cell_size
        highlighted = self.highlighted_cells(puzzle) if show_answers else set()

        svg_parts = []

        # Outer border
        svg_parts.append(
            f'  <rect x="{x}" y="{y}" width="{grid_width}" height="{grid_width}" '
            f'fill="none" stroke="{cfg.grid_color}" stroke-width="{cfg.border_width}" />'
        )

        for row in range(puzzle.size):
            for col in range(puzzle.size):
                cell_x = x + col * cfg.cell_size
                cell_y = y + row * cfg.cell_size
                state = " found" if (row, col) in highlighted else ""

                svg_parts.append(
                    f'  <rect x="{cell_x}" y="{cell_y}" '
                    f'width="{cfg.cell_size}" height="{cfg.cell_size}" '
                    f'class="cell{state}" />'
                )
                svg_parts.append(
                    f'  <text x="{cell_x + cfg.cell_size / 2}" '
                    f'y="{cell_y + cfg.cell_size / 2}" '
                    f'class="letter{state}">{puzzle.letter_at(row, col)}</text>'
                )

        return '\n'.join(svg_parts)

    @staticmethod
    def highlighted_cells(puzzle: PuzzleData) -> Set[Tuple[int, int]]:
        """Cells to highlight when answers are revealed."""
        cells = set()
        for placement in puzzle.placements:
            cells.update(get_word_cells(placement))
        return cells
