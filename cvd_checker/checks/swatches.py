"""Render a swatch sheet of every unique colour pair under each vision type.

One row per unique (foreground, background) pair, in first-seen order.
Columns: normal vision, protanopia, deuteranopia, tritanopia. Each cell is
filled with the simulated background and shows sample text and the ratio
in the simulated foreground.

Saves to <tmp_dir>/swatches.png and records the path on the report.

Example:
    uv run cvd-tool swatches ./tmp page.json
"""

import os

from PIL import Image, ImageDraw, ImageFont

from cvd_checker.core.audit import evaluate
from cvd_checker.core.types import COLOUR_BLINDNESS, Candidate, Check, Colour, Report, vision_name

check = Check(
    name='swatches',
    title='Swatches',
    help='Render each unique colour pair under every vision type to <tmp_dir>/swatches.png.',
)

CELL_W = 150
CELL_H = 56
HEADER_H = 20
VISIONS = (None, *COLOUR_BLINDNESS)


def _unique_pairs(candidates: list[Candidate]) -> list[tuple[Colour, Colour]]:
    seen: dict[tuple[Colour, Colour], None] = {}
    for c in candidates:
        seen.setdefault((c.foreground, c.background), None)
    return list(seen)


def render(candidates: list[Candidate]) -> Image.Image:
    pairs = _unique_pairs(candidates)
    width = CELL_W * len(VISIONS)
    height = HEADER_H + CELL_H * max(len(pairs), 1)
    img = Image.new('RGB', (width, height), (255, 255, 255))
    draw = ImageDraw.Draw(img)
    font = ImageFont.load_default()

    for col, vision in enumerate(VISIONS):
        draw.text((col * CELL_W + 6, 4), vision_name(vision), fill=(0, 0, 0), font=font)

    for row, (fg, bg) in enumerate(pairs):
        y = HEADER_H + row * CELL_H
        for col, vision in enumerate(VISIONS):
            x = col * CELL_W
            sample = evaluate(fg, bg, None, vision)
            seen_fg = sample.seen_foreground.rgb
            draw.rectangle((x, y, x + CELL_W - 1, y + CELL_H - 1), fill=sample.seen_background.rgb)
            draw.text((x + 6, y + 6), 'Aa Sample', fill=seen_fg, font=font)
            draw.text((x + 6, y + 30), f'{sample.ratio}:1', fill=seen_fg, font=font)

    return img


@check.run
def run(candidates: list[Candidate], report: Report, args) -> None:
    os.makedirs(args.tmp_dir, exist_ok=True)
    path = os.path.join(args.tmp_dir, 'swatches.png')
    render(candidates).save(path)
    report.artefacts['swatches'] = path
