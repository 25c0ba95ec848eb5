# Copyright (c) 2026 TrailLensCo
# All rights reserved.
#
# This file is proprietary and confidential.
# Unauthorized copying, distribution, or use of this file,
# via any medium, is strictly prohibited without the express
# written permission of TrailLensCo.

"""
Printable Word Search Renderer

Generates a printable word search package:
- Puzzle page: title, letter grid, word list, instructions, name/date line
- Solution page: same grid with the answer cells highlighted

Outputs:
- Individual SVG files for each page
- Combined HTML with print styles
- Markdown and plain-text versions
"""

import logging
import os
import sys
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Optional, Sequence
from xml.sax.saxutils import escape

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from models import PuzzleData, WordPlacement
from svg_renderer import SVGConfig, SVGRenderer

logger = logging.getLogger(__name__)

INSTRUCTIONS = (
    "Find all the words hidden in the grid. They can run "
    "horizontally, vertically or diagonally."
)

DEFAULT_FORMATS = ["svg_puzzle", "svg_solution", "html_complete", "markdown", "text"]


@dataclass
class PageConfig:
    """Configuration for page layout."""
    # Page dimensions (default: US Letter)
    page_width: int = 612  # 8.5 inches at 72 DPI
    page_height: int = 792  # 11 inches at 72 DPI

    # Margins
    margin_top: int = 50
    margin_bottom: int = 50
    margin_left: int = 50
    margin_right: int = 50

    # Grid settings
    max_cell_size: int = 30
    letter_scale: float = 0.6

    # Colors
    background_color: str = "#FFFFFF"
    text_color: str = "#000000"
    muted_color: str = "#555555"

    # Fonts
    font_family: str = "Arial, Helvetica, sans-serif"
    title_font_size: int = 24
    subtitle_font_size: int = 12
    word_font_size: int = 12

    # Word list layout
    word_columns: int = 4
    word_line_height: int = 18


@dataclass
class WordSearchPageData:
    """Everything needed to print a word search."""
    title: str
    puzzle: PuzzleData
    date: str = field(default_factory=lambda: datetime.now().strftime("%B %d, %Y"))


class WordSearchPageRenderer:
    """Renders printable word search documents."""

    def __init__(self, config: Optional[PageConfig] = None):
        self.config = config or PageConfig()

    def render_all_pages(
        self,
        data: WordSearchPageData,
        output_dir: str = ".",
        base_name: str = "wordsearch",
        formats: Optional[Sequence[str]] = None
    ) -> Dict[str, str]:
        """
        Render the selected formats and save them to files.

        Returns dict mapping format name to file path.
        """
        os.makedirs(output_dir, exist_ok=True)
        formats = list(formats) if formats is not None else list(DEFAULT_FORMATS)

        writers = {
            "svg_puzzle": (f"{base_name}_puzzle.svg", self.render_puzzle_page),
            "svg_solution": (f"{base_name}_solution.svg", self.render_solution_page),
            "html_complete": (f"{base_name}_complete.html", self.render_combined_html),
            "markdown": (f"{base_name}.md", self.render_markdown),
            "text": (f"{base_name}.txt", self.render_text),
        }

        files = {}
        for fmt in formats:
            if fmt not in writers:
                logger.warning(f"Skipping unknown output format: {fmt}")
                continue
            filename, render = writers[fmt]
            path = os.path.join(output_dir, filename)
            with open(path, 'w', encoding='utf-8') as f:
                f.write(render(data))
            files[fmt] = path
            logger.debug(f"Wrote {fmt} to {path}")

        return files

    def render_puzzle_page(self, data: WordSearchPageData) -> str:
        """Render the puzzle page: grid, word list and instructions."""
        return self._render_page(data, show_answers=False)

    def render_solution_page(self, data: WordSearchPageData) -> str:
        """Render the solution page with answers highlighted."""
        return self._render_page(data, show_answers=True)

    def render_combined_html(self, data: WordSearchPageData) -> str:
        """Render combined HTML document with puzzle and solution pages."""
        puzzle_svg = self.render_puzzle_page(data)
        solution_svg = self.render_solution_page(data)

        html = f'''<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(data.title)}</title>
    <style>
        @media print {{
            .page {{
                page-break-after: always;
            }}
            .page:last-child {{
                page-break-after: avoid;
            }}
            .print-button {{
                display: none;
            }}
        }}

        body {{
            margin: 0;
            padding: 0;
            font-family: {self.config.font_family};
        }}

        .page {{
            width: {self.config.page_width}px;
            height: {self.config.page_height}px;
            margin: 0 auto 40px auto;
            box-shadow: 0 0 10px rgba(0,0,0,0.1);
        }}

        svg {{
            display: block;
            width: 100%;
            height: auto;
        }}

        .print-button {{
            position: fixed;
            top: 20px;
            right: 20px;
            padding: 10px 20px;
            background: #007bff;
            color: white;
            border: none;
            border-radius: 5px;
            cursor: pointer;
            font-size: 16px;
        }}
    </style>
</head>
<body>
    <button class="print-button" onclick="window.print()">🖨️ Print Puzzle</button>

    <div class="page" id="puzzle">
        {puzzle_svg}
    </div>

    <div class="page" id="solution">
        {solution_svg}
    </div>
</body>
</html>'''
        return html

    def render_markdown(self, data: WordSearchPageData) -> str:
        """Render puzzle as Markdown."""
        puzzle = data.puzzle
        md = []

        md.append(f"# {data.title}")
        md.append("")
        md.append(f"**Date:** {data.date}  ")
        md.append(f"**Size:** {puzzle.size}×{puzzle.size}  ")
        md.append(f"**Words:** {len(puzzle.placements)}")
        md.append("")

        md.append("## Grid")
        md.append("")
        md.append("```")
        md.append(puzzle.to_string())
        md.append("```")
        md.append("")

        md.append("## Words")
        md.append("")
        for placement in sorted(puzzle.placements, key=lambda p: p.word):
            mark = "x" if placement.found else " "
            md.append(f"- [{mark}] {placement.word}")
        md.append("")
        md.append(INSTRUCTIONS)
        md.append("")

        md.append("## Solution")
        md.append("")
        md.append("```")
        md.append(puzzle.to_string(show_answers=True))
        md.append("```")
        md.append("")
        for placement in puzzle.placements:
            md.append(
                f"- **{placement.word}**: row {placement.start_row + 1}, "
                f"column {placement.start_col + 1}, {placement.direction.value}"
            )

        return "\n".join(md) + "\n"

    def render_text(self, data: WordSearchPageData, show_answers: bool = False) -> str:
        """Render a plain-text version for the console or a .txt file."""
        puzzle = data.puzzle
        lines = [data.title, "=" * len(data.title), ""]
        lines.append(puzzle.to_string(show_answers=show_answers))
        lines.append("")
        lines.append("Words to find:")
        lines.extend(f"  {word}" for word in puzzle.placed_words())
        return "\n".join(lines) + "\n"

    def _render_page(self, data: WordSearchPageData, show_answers: bool) -> str:
        cfg = self.config
        puzzle = data.puzzle

        content_width = cfg.page_width - cfg.margin_left - cfg.margin_right
        cell_size = min(cfg.max_cell_size, int(content_width / max(puzzle.size, 1)))
        grid_renderer = SVGRenderer(SVGConfig(
            cell_size=cell_size,
            letter_font_size=max(8, int(cell_size * cfg.letter_scale)),
            font_family=cfg.font_family,
        ))

        grid_width = puzzle.size * cell_size
        grid_x = (cfg.page_width - grid_width) / 2
        grid_y = cfg.margin_top + 45

        title = data.title if not show_answers else f"{data.title} - Solution"

        svg = self._svg_header()
        svg += self._render_styles(grid_renderer)
        svg += f'  <rect width="{cfg.page_width}" height="{cfg.page_height}" fill="{cfg.background_color}"/>\n'

        svg += f'  <text x="{cfg.page_width/2}" y="{cfg.margin_top}" class="title" text-anchor="middle">'
        svg += f'{escape(title)}</text>\n'
        svg += f'  <text x="{cfg.page_width/2}" y="{cfg.margin_top + 20}" class="subtitle" text-anchor="middle">'
        svg += f'{puzzle.size}×{puzzle.size} • {escape(data.date)}</text>\n'

        svg += grid_renderer.render_grid(puzzle, grid_x, grid_y, show_answers) + "\n"

        words_y = grid_y + grid_width + 30
        svg += self._render_word_list(puzzle.placements, cfg.margin_left, words_y, content_width)

        rows = -(-len(puzzle.placements) // cfg.word_columns)
        footer_y = words_y + 20 + rows * cfg.word_line_height + 10
        svg += f'  <text x="{cfg.page_width/2}" y="{footer_y}" class="footer" text-anchor="middle">'
        svg += f'{INSTRUCTIONS}</text>\n'

        if not show_answers:
            svg += self._render_name_line(footer_y + 35)

        svg += '</svg>'
        return svg

    def _svg_header(self) -> str:
        """Generate SVG header."""
        cfg = self.config
        return f'''<svg xmlns="http://www.w3.org/2000/svg"
     viewBox="0 0 {cfg.page_width} {cfg.page_height}"
     width="{cfg.page_width}" height="{cfg.page_height}">
'''

    def _render_styles(self, grid_renderer: SVGRenderer) -> str:
        """Generate SVG styles."""
        cfg = self.config
        return f'''  <defs>
    <style>
      .title {{ font-family: {cfg.font_family}; font-size: {cfg.title_font_size}px; font-weight: bold; fill: {cfg.text_color}; }}
      .subtitle {{ font-family: {cfg.font_family}; font-size: {cfg.subtitle_font_size}px; fill: {cfg.muted_color}; }}
      .word-header {{ font-family: {cfg.font_family}; font-size: {cfg.word_font_size + 2}px; font-weight: bold; fill: {cfg.text_color}; }}
      .word {{ font-family: {cfg.font_family}; font-size: {cfg.word_font_size}px; fill: {cfg.text_color}; }}
      .word.found {{ fill: {cfg.muted_color}; text-decoration: line-through; }}
      .footer {{ font-family: {cfg.font_family}; font-size: 10px; fill: {cfg.muted_color}; }}
{grid_renderer.style_rules()}
    </style>
  </defs>
'''

    def _render_word_list(
        self,
        placements: List[WordPlacement],
        x: float,
        y: float,
        width: float
    ) -> str:
        """Render the words to find in columns, alphabetically. Found words are struck out."""
        cfg = self.config
        column_width = width / cfg.word_columns
        rows = -(-len(placements) // cfg.word_columns)

        svg = f'  <text x="{x}" y="{y}" class="word-header">Words to find:</text>\n'
        for i, placement in enumerate(sorted(placements, key=lambda p: p.word)):
            col = i // rows if rows else 0
            row = i % rows if rows else 0
            word_x = x + col * column_width
            word_y = y + 20 + row * cfg.word_line_height
            state = "word found" if placement.found else "word"
            svg += f'  <text x="{word_x}" y="{word_y}" class="{state}">{placement.word}</text>\n'
        return svg

    def _render_name_line(self, y: float) -> str:
        """Render the 'Name: ____ Date: ____' line for students."""
        cfg = self.config
        left = cfg.margin_left
        right = cfg.page_width - cfg.margin_right
        date_x = right - 150

        svg = f'  <text x="{left}" y="{y}" class="word">Name:</text>\n'
        svg += f'  <line x1="{left + 45}" y1="{y + 2}" x2="{date_x - 15}" y2="{y + 2}" '
        svg += f'stroke="{cfg.muted_color}" stroke-dasharray="4,3"/>\n'
        svg += f'  <text x="{date_x}" y="{y}" class="word">Date:</text>\n'
        svg += f'  <line x1="{date_x + 35}" y1="{y + 2}" x2="{right}" y2="{y + 2}" '
        svg += f'stroke="{cfg.muted_color}" stroke-dasharray="4,3"/>\n'
        return svg
